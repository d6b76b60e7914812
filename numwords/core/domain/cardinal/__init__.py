"""
Generic cardinal engine.

The five components (Decomposer, ChunkRenderer, AgreementResolver,
ScaleSelector, MorphologyFuser) are independent and composed by
IntegerConverter for a single GrammarProfile.
"""

from .agreement import AgreementResolver
from .chunk_renderer import ChunkRenderer
from .decomposer import Chunk, Decomposer
from .integer_converter import IntegerConverter, RenderedChunk
from .morphology import MorphologyFuser
from .scale_selector import ScaleChoice, ScaleSelector

__all__ = [
    "AgreementResolver",
    "ChunkRenderer",
    "Chunk",
    "Decomposer",
    "IntegerConverter",
    "RenderedChunk",
    "MorphologyFuser",
    "ScaleChoice",
    "ScaleSelector",
]
