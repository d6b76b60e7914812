# tests\core\test_decomposer.py
import pytest

from numwords.core.domain.cardinal.decomposer import Chunk, Decomposer
from numwords.core.domain.exceptions import NegativeMagnitudeError, ScaleOverflowError


class TestDecomposer:
    def test_thousand_chunks_least_significant_first(self, profile_for):
        chunks = Decomposer(profile_for("en")).decompose(1_234_567)
        assert chunks == [Chunk(0, 567), Chunk(1, 234), Chunk(2, 1)]

    def test_zero_chunks_skipped(self, profile_for):
        """Only non-zero chunks are emitted."""
        chunks = Decomposer(profile_for("en")).decompose(1_000_001)
        assert chunks == [Chunk(0, 1), Chunk(2, 1)]

    def test_zero(self, profile_for):
        assert Decomposer(profile_for("en")).decompose(0) == []

    def test_myriad_chunks(self, profile_for):
        chunks = Decomposer(profile_for("ko")).decompose(123_456_789)
        assert chunks == [Chunk(0, 6789), Chunk(1, 2345), Chunk(2, 1)]

    def test_wide_tier(self, profile_for):
        """Spanish millions span six digits before the billón."""
        chunks = Decomposer(profile_for("es")).decompose(2_000_000_000)
        assert chunks == [Chunk(2, 2000)]

    def test_top_tier_holds_up_to_max(self, profile_for):
        en = profile_for("en")
        chunks = Decomposer(en).decompose(en.max_value)
        assert chunks[-1].scale_index == len(en.scales)
        assert chunks[-1].value == 999

    def test_overflow(self, profile_for):
        en = profile_for("en")
        with pytest.raises(ScaleOverflowError) as excinfo:
            Decomposer(en).decompose(en.max_value + 1)
        assert excinfo.value.limit == en.max_value
        assert excinfo.value.lang_code == "en"

    def test_negative(self, profile_for):
        with pytest.raises(NegativeMagnitudeError):
            Decomposer(profile_for("en")).decompose(-1)
