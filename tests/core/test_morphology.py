# tests\core\test_morphology.py
import pytest

from numwords.core.domain.cardinal.morphology import MorphologyFuser
from numwords.core.domain.grammar.base import FusionType, JoinContext, JoinType


@pytest.fixture
def zulu_fuser(profile_for):
    return MorphologyFuser(profile_for("zu"))


class TestFuse:
    def test_empty_sides_short_circuit(self, zulu_fuser):
        assert zulu_fuser.fuse("", "nye", FusionType.CONCORD) == "nye"
        assert zulu_fuser.fuse("esi", "", FusionType.CONCORD) == "esi"

    def test_lexical_rule_wins(self, zulu_fuser):
        """Declared fusion rules are tried before vowel coalescence."""
        assert zulu_fuser.fuse("na", "nye", FusionType.CONJUNCTION) == "nanye"
        assert zulu_fuser.fuse("na", "thathu", FusionType.CONJUNCTION) == "nanthathu"

    def test_regex_rule_with_placeholders(self, zulu_fuser):
        assert zulu_fuser.fuse("eziyi", "lishumi", FusionType.CONCORD) == "eziyishumi"
        assert zulu_fuser.fuse("ayi", "shiyagalombili", FusionType.CONCORD) == "ayisishiyagalombili"

    def test_rule_limited_to_its_fusion_type(self, zulu_fuser):
        """A concord-only rule does not fire for a conjunction."""
        assert zulu_fuser.fuse("ezin", "thathu", FusionType.CONCORD) == "ezintathu"
        assert zulu_fuser.fuse("ezin", "thathu", FusionType.CONJUNCTION) == "ezin thathu"

    def test_vowel_coalescence(self, zulu_fuser):
        assert zulu_fuser.fuse("na", "amashumi amabili", FusionType.CONJUNCTION) == "namashumi amabili"
        assert zulu_fuser.fuse("na", "inkulungwane", FusionType.CONJUNCTION) == "nenkulungwane"
        assert zulu_fuser.fuse("na", "ikhulu", FusionType.CONJUNCTION) == "nekhulu"

    def test_only_first_word_takes_part(self, zulu_fuser):
        assert zulu_fuser.fuse("na", "nye nanye", FusionType.CONJUNCTION) == "nanye nanye"

    def test_plain_joiner_fallback(self, profile_for):
        fuser = MorphologyFuser(profile_for("en"))
        assert fuser.fuse("and", "one", FusionType.CONJUNCTION) == "and one"
        assert fuser.fuse("x", "one", FusionType.CONCORD) == "xone"

    def test_french_partitive_elision(self, profile_for):
        fuser = MorphologyFuser(profile_for("fr"))
        assert fuser.fuse("de", "euros", FusionType.PARTITIVE) == "d'euros"
        assert fuser.fuse("de", "dollars", FusionType.PARTITIVE) == "de dollars"


class TestConjunctionEngine:
    def test_default_joiner(self, profile_for):
        fuser = MorphologyFuser(profile_for("en"))
        context = JoinContext(JoinType.TENS_UNITS, 2, 1)
        assert fuser.join("twenty", "one", context) == "twenty-one"

    def test_first_matching_rule_wins(self, profile_for):
        """British English inserts 'and' after a hundred with a remainder."""
        fuser = MorphologyFuser(profile_for("en-GB"))
        with_rest = JoinContext(JoinType.HUNDREDS, 100, 1)
        assert fuser.join("one hundred", "one", with_rest) == "one hundred and one"

    def test_final_chunk_rule(self, profile_for):
        fuser = MorphologyFuser(profile_for("en-GB"))
        final = JoinContext(JoinType.CHUNKS, 1, 1, left_scale=1, right_scale=0, is_final=True)
        assert fuser.join("one thousand", "one", final) == "one thousand and one"

    def test_german_compound(self, profile_for):
        fuser = MorphologyFuser(profile_for("de"))
        context = JoinContext(JoinType.TENS_UNITS, 2, 1)
        assert fuser.join("ein", "zwanzig", context) == "einundzwanzig"

    def test_french_et_un(self, profile_for):
        fuser = MorphologyFuser(profile_for("fr"))
        context = JoinContext(JoinType.TENS_UNITS, 2, 1)
        assert fuser.join("vingt", "un", context) == "vingt et un"
