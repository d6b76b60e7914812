# cardinal\decomposer.py
"""
cardinal/decomposer.py

Splits a magnitude into (scale_index, value) chunks.

Tiers follow the profile's scale powers, so uniform bases (1000, 10000)
and wider tiers (Spanish "mil millones" between 10^6 and 10^12) use the
same code path. Chunk k is worth value * 10**tier_powers[k].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from numwords.core.domain.exceptions import NegativeMagnitudeError, ScaleOverflowError
from numwords.core.domain.grammar.base import GrammarProfile


@dataclass(frozen=True)
class Chunk:
    scale_index: int  # 0 = units chunk, k = profile.scales[k - 1]
    value: int


class Decomposer:
    def __init__(self, profile: GrammarProfile):
        self.profile = profile
        powers = profile.tier_powers
        widths = [b - a for a, b in zip(powers, powers[1:])]
        widths.append(profile.top_tier_width)
        self._tier_bases = [10 ** width for width in widths]

    def decompose(self, n: int) -> List[Chunk]:
        """
        Return the non-zero chunks of `n`, least significant first.

        Raises:
            NegativeMagnitudeError: n < 0.
            ScaleOverflowError: n needs a scale beyond the profile's table.
        """
        if n < 0:
            raise NegativeMagnitudeError(n)
        if n > self.profile.max_value:
            raise ScaleOverflowError(n, self.profile.max_value, self.profile.tag)

        chunks: List[Chunk] = []
        remaining = n
        for index, base in enumerate(self._tier_bases):
            if remaining == 0:
                break
            remaining, value = divmod(remaining, base)
            if value:
                chunks.append(Chunk(scale_index=index, value=value))
        return chunks


__all__ = ["Chunk", "Decomposer"]
