# cardinal\morphology.py
"""
cardinal/morphology.py

MorphologyFuser: glues a conjunction or concord prefix onto a word.

Resolution order is fixed:

    1. profile.fusion_rules, in declared order (lexical exceptions)
    2. profile.vowel_coalescence (generic vowel + vowel outcome)
    3. profile.fusion_joiners[fusion_type] (plain concatenation)

Only the first word of the right-hand fragment takes part in fusion; the
rest of the fragment is carried through untouched.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

import structlog

from numwords.core.domain.grammar.base import FusionRule, FusionType, GrammarProfile, JoinContext, Joiner

logger = structlog.get_logger()


def _split_first_word(text: str) -> Tuple[str, str]:
    head, sep, tail = text.partition(" ")
    return head, sep + tail


class MorphologyFuser:
    def __init__(self, profile: GrammarProfile):
        self.profile = profile

    def fuse(self, left: str, right: str, fusion_type: FusionType) -> str:
        """
        Join `left` (prefix or conjunction) onto `right`.

        Empty fragments short-circuit: fusing onto nothing returns the
        other side unchanged.
        """
        if not left:
            return right
        if not right:
            return left

        word, rest = _split_first_word(right)

        rule = self._match_rule(left, word, fusion_type)
        if rule is not None:
            fused = rule.fused.format(prefix=left, word=word)
            return fused + rest

        coalesced = self._coalesce(left, word)
        if coalesced is not None:
            return coalesced + rest

        joiner = self.profile.fusion_joiners.get(fusion_type, " ")
        return left + joiner + right

    # Conjunction engine -------------------------------------------------

    def select_joiner(self, context: JoinContext) -> Joiner:
        """First matching conjunction rule for the join site, else the profile default."""
        for rule in self.profile.conjunction_rules:
            if rule.join_type == context.join_type and rule.predicate(context):
                return rule.joiner
        return self.profile.joiners[context.join_type]

    def join(self, left: str, right: str, context: JoinContext) -> str:
        """Glue two non-empty fragments using the joiner selected for `context`."""
        joiner = self.select_joiner(context)
        if joiner.conjunction:
            right = self.fuse(joiner.conjunction, right, joiner.fusion)
        return left + joiner.text + right

    def _match_rule(self, left: str, word: str, fusion_type: FusionType) -> Optional[FusionRule]:
        for rule in self.profile.fusion_rules:
            if rule.fusion is not None and rule.fusion != fusion_type:
                continue
            if re.fullmatch(rule.prefix, left) and re.fullmatch(rule.word, word):
                logger.debug("fusion_rule_applied", lang=self.profile.tag, prefix=left, word=word)
                return rule
        return None

    def _coalesce(self, left: str, word: str) -> Optional[str]:
        table = self.profile.vowel_coalescence
        if not table:
            return None
        outcome = table.get((left[-1], word[0]))
        if outcome is None:
            return None
        return left[:-1] + outcome + word[1:]


__all__ = ["MorphologyFuser"]
