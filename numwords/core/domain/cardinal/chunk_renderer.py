# cardinal\chunk_renderer.py
"""
cardinal/chunk_renderer.py

ChunkRenderer: words for a single chunk (0 < value < profile.chunk_base).

The chunk is read as a sequence of places (hundreds, and thousands for
10^4-based languages) followed by the part below one hundred. Every join
inside the chunk goes through the profile's conjunction rules.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from numwords.core.domain.cardinal.agreement import AgreementResolver
from numwords.core.domain.cardinal.morphology import MorphologyFuser
from numwords.core.domain.grammar.base import FusionType, GrammarProfile, JoinContext, JoinType, PlaceDef


class ChunkRenderer:
    def __init__(self, profile: GrammarProfile, agreement: AgreementResolver, fuser: MorphologyFuser):
        self.profile = profile
        self.agreement = agreement
        self.fuser = fuser

    def render(self, value: int, agreement_class: Optional[str] = None, invariable: bool = False) -> str:
        """
        Render `value` under `agreement_class`.

        `invariable` suppresses exact plural forms when the chunk counts an
        invariable scale word (French "quatre-vingt mille", not "quatre-vingts mille").
        """
        if value == 0:
            return ""
        if not 0 < value < self.profile.chunk_base:
            raise ValueError(f"Chunk value {value} outside 1..{self.profile.chunk_base - 1}")

        segments: List[Tuple[int, str, int]] = []  # (place value, words, rest of chunk after it)
        remainder = value
        for place in self.profile.places:
            digit, remainder = divmod(remainder, place.value)
            if digit:
                segments.append((place.value, self._render_place(place, digit, remainder == 0, invariable), remainder))

        text = ""
        previous: Tuple[int, int] = (0, 0)
        for place_value, words, rest in segments:
            text = self._join_in_chunk(text, words, previous)
            previous = (place_value, rest)

        below = self._render_below_hundred(remainder, agreement_class, invariable, standalone=(remainder == value))
        return self._join_in_chunk(text, below, previous)

    def _join_in_chunk(self, left: str, right: str, previous: Tuple[int, int]) -> str:
        if not left:
            return right
        if not right:
            return left
        place_value, rest = previous
        return self.fuser.join(left, right, JoinContext(JoinType.HUNDREDS, place_value, rest))

    # Places ---------------------------------------------------------------

    def _render_place(self, place: PlaceDef, digit: int, exact: bool, invariable: bool) -> str:
        if exact and not invariable and digit in place.exact_forms:
            return place.exact_forms[digit]
        if digit in place.forms:
            return place.forms[digit]
        if digit == 1 and place.elides_one:
            return place.word
        multiplier = self.numeral(digit, place.multiplier_class)
        if place.word_first:
            return place.word + place.joiner + multiplier
        return multiplier + place.joiner + place.word

    def numeral(self, digit: int, agreement_class: Optional[str]) -> str:
        """A single agreeing numeral, with its concord prefix fused on."""
        form = self.agreement.form(digit, agreement_class)
        prefix = self.agreement.concord_prefix(digit, agreement_class)
        return self.fuser.fuse(prefix, form, FusionType.CONCORD)

    # Below one hundred ----------------------------------------------------

    def _render_below_hundred(self, value: int, agreement_class: Optional[str], invariable: bool, standalone: bool) -> str:
        if value == 0:
            return ""
        units = self.profile.units
        if value < len(units):
            return self._unit(value, agreement_class, standalone)

        tens_digit, unit = divmod(value, 10)
        borrowed = self.profile.vigesimal_tens.get(tens_digit)
        if borrowed is not None:
            unit += (tens_digit - borrowed) * 10
            tens_digit = borrowed

        tens_word = self.profile.tens[tens_digit]
        if unit == 0:
            if not invariable:
                tens_word = self.profile.tens_exact.get(tens_digit, tens_word)
            return tens_word

        context = JoinContext(JoinType.TENS_UNITS, tens_digit, unit)
        if self.profile.units_first:
            unit_word = self._unit(unit, self.profile.compound_unit_class or agreement_class, False)
            return self.fuser.join(unit_word, tens_word, context)
        return self.fuser.join(tens_word, self._unit(unit, agreement_class, False), context)

    def _unit(self, value: int, agreement_class: Optional[str], standalone: bool) -> str:
        if self.profile.agreement_scope == "whole" and not standalone:
            return self.profile.units[value]
        return self.agreement.form(value, agreement_class)


__all__ = ["ChunkRenderer"]
