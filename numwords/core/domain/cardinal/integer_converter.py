# cardinal\integer_converter.py
"""
cardinal/integer_converter.py

IntegerConverter: renders any non-negative integer for one profile.

Pipeline (one pass per call, no retained state):

    Start -> decompose (or ScaleOverflowError)
          -> render chunks, most significant first
          -> insert conjunctions between adjacent non-empty chunks
          -> fuse the caller's concord prefix, if any
          -> Done

Scale counts are converted recursively, so a tier wider than one chunk
(Spanish "mil millones") and counts that take concord (Zulu
"izinkulungwane ezimbili") use the same path as top-level numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import structlog

from numwords.core.domain.cardinal.agreement import AgreementResolver
from numwords.core.domain.cardinal.chunk_renderer import ChunkRenderer
from numwords.core.domain.cardinal.decomposer import Chunk, Decomposer
from numwords.core.domain.cardinal.morphology import MorphologyFuser
from numwords.core.domain.cardinal.scale_selector import ScaleSelector
from numwords.core.domain.exceptions import NegativeMagnitudeError
from numwords.core.domain.grammar.base import FusionType, GrammarProfile, JoinContext, JoinType

logger = structlog.get_logger()


@dataclass(frozen=True)
class RenderedChunk:
    scale_index: int
    value: int
    words: str
    agreement_class: Optional[str]


class IntegerConverter:
    """
    Composes the Decomposer, ChunkRenderer, AgreementResolver, ScaleSelector
    and MorphologyFuser for a single GrammarProfile.
    """

    def __init__(self, profile: GrammarProfile):
        self.profile = profile
        self.fuser = MorphologyFuser(profile)
        self.agreement = AgreementResolver(profile)
        self.decomposer = Decomposer(profile)
        self.selector = ScaleSelector(profile)
        self.renderer = ChunkRenderer(profile, self.agreement, self.fuser)

    def convert(self, n: int, agreement_class: Optional[str] = None) -> str:
        """
        Words for `n` (>= 0), agreeing with `agreement_class` where the
        language marks it.

        Raises:
            NegativeMagnitudeError: n < 0 (caller contract violation).
            ScaleOverflowError: n exceeds the profile's scale table.
        """
        if n < 0:
            raise NegativeMagnitudeError(n)
        if n == 0:
            return self.profile.zero
        return self._convert(n, agreement_class, invariable=False)

    def _convert(self, n: int, agreement_class: Optional[str], invariable: bool) -> str:
        if n < self.profile.chunk_base:
            words = self.renderer.render(n, agreement_class, invariable)
        else:
            chunks = self.decomposer.decompose(n)
            rendered = [self._render_chunk(chunk, agreement_class, invariable) for chunk in reversed(chunks)]
            words = self._insert_conjunctions(rendered)

        prefix = self.agreement.concord_prefix(n, agreement_class)
        return self.fuser.fuse(prefix, words, FusionType.CONCORD)

    # RenderChunks ---------------------------------------------------------

    def _render_chunk(self, chunk: Chunk, agreement_class: Optional[str], invariable: bool) -> RenderedChunk:
        if chunk.scale_index == 0:
            words = self.renderer.render(chunk.value, agreement_class, invariable)
            return RenderedChunk(0, chunk.value, words, agreement_class)

        scale = self.profile.scales[chunk.scale_index - 1]
        choice = self.selector.select(chunk.value, scale)

        # The count agrees with the scale noun, not with the caller's class.
        count_words = "" if choice.elide_numeral else self._convert(
            chunk.value, choice.numeral_class, invariable=scale.invariable_count
        )
        if not count_words:
            words = choice.word
        elif scale.scale_first:
            words = choice.word + scale.count_joiner + count_words
        else:
            words = count_words + scale.count_joiner + choice.word
        return RenderedChunk(chunk.scale_index, chunk.value, words, choice.numeral_class)

    # InsertConjunctions ---------------------------------------------------

    def _insert_conjunctions(self, rendered: List[RenderedChunk]) -> str:
        text = rendered[0].words
        last = len(rendered) - 1
        for position in range(1, len(rendered)):
            left, right = rendered[position - 1], rendered[position]
            context = JoinContext(
                JoinType.CHUNKS,
                left_value=left.value,
                right_value=right.value,
                left_scale=left.scale_index,
                right_scale=right.scale_index,
                is_final=(position == last),
            )
            text = self.fuser.join(text, right.words, context)
        return text


__all__ = ["IntegerConverter", "RenderedChunk"]
