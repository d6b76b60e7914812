# grammar\base.py
"""
grammar/base.py

Shared value types for the per-language grammar profiles, plus the
process-wide profile registry.

This module defines:
- CountClass, the closed bucket set used for plural selection.
- JoinType / FusionType, the join sites the engine distinguishes.
- Joiner, ConjunctionRule and FusionRule, the ordered rule tables.
- PlaceDef, ScaleDef, ConcordBand, EraWords and CenturyStyle.
- GrammarProfile, one immutable value per language.
- A registry so profiles can be looked up by language tag.

Profiles are pure data. All behaviour lives in the cardinal engine
(numwords.core.domain.cardinal), which is parameterised by a profile.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from numwords.core.domain.exceptions import LanguageNotFoundError, ProfileConfigurationError
from numwords.core.domain.models import CurrencyInfo, DecimalSeparatorStyle


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class CountClass(str, Enum):
    """Plural bucket selected by a profile's classify() function."""

    ONE = "one"
    FEW = "few"      # Slavic 2-4
    MANY = "many"    # Slavic genitive plural
    OTHER = "other"  # generic plural / invariant


class JoinType(str, Enum):
    """Structural join sites evaluated against conjunction rules."""

    TENS_UNITS = "tens_units"  # "twenty" + "one"
    HUNDREDS = "hundreds"      # place word ("hundred", "천") + rest of the chunk
    CHUNKS = "chunks"          # scale chunk + next non-empty chunk


class FusionType(str, Enum):
    """Join kinds handled by the MorphologyFuser."""

    CONJUNCTION = "conjunction"  # "and"-word + following word
    CONCORD = "concord"          # agreement prefix + numeral
    COMPOUND = "compound"        # intra-word compounding (German "und")
    PARTITIVE = "partitive"      # "de" + currency noun


# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Joiner:
    """
    How two fragments are glued.

    Attributes:
        text:
            Literal text placed between the fragments (" ", "-", "").
        conjunction:
            Optional conjunction word fused onto the right fragment through
            the MorphologyFuser ("and", "na", "und").
        fusion:
            Fusion type used for the conjunction.
    """

    text: str = " "
    conjunction: Optional[str] = None
    fusion: FusionType = FusionType.CONJUNCTION


@dataclass(frozen=True)
class JoinContext:
    """
    Facts a conjunction predicate can inspect.

    For TENS_UNITS: left_value is the tens digit, right_value the unit part.
    For HUNDREDS: left_value is the place value (100, 1000), right_value
    the remainder of the chunk.
    For CHUNKS: values are the chunk values, scales their scale indexes,
    and is_final tells whether the right chunk is the last non-empty one.
    """

    join_type: JoinType
    left_value: int
    right_value: int
    left_scale: int = 0
    right_scale: int = 0
    is_final: bool = True


@dataclass(frozen=True)
class ConjunctionRule:
    """First rule whose join type matches and whose predicate holds wins."""

    join_type: JoinType
    predicate: Callable[[JoinContext], bool]
    joiner: Joiner
    name: str = ""


@dataclass(frozen=True)
class FusionRule:
    """
    Lexical fusion exception.

    `prefix` and `word` are regular expressions matched in full against the
    left fragment and the first word of the right fragment. `fused` replaces
    both and may reference them as {prefix} and {word}.
    """

    prefix: str
    word: str
    fused: str
    fusion: Optional[FusionType] = None  # None = any fusion type


@dataclass(frozen=True)
class ConcordBand:
    """Concord prefix used for counts in [low, high] (high=None: unbounded)."""

    low: int
    high: Optional[int]
    prefix: str

    def contains(self, value: int) -> bool:
        return value >= self.low and (self.high is None or value <= self.high)


# ---------------------------------------------------------------------------
# Places and scales
# ---------------------------------------------------------------------------


def _freeze(obj: object, *attrs: str) -> None:
    """Replace mapping fields of a frozen dataclass with read-only views."""
    for attr in attrs:
        object.__setattr__(obj, attr, MappingProxyType(dict(getattr(obj, attr))))


@dataclass(frozen=True)
class PlaceDef:
    """
    An in-chunk place above the tens (hundreds, and thousands in Korean).

    Attributes:
        value: place value (100, 1000).
        word: multiplier noun ("hundred", "hundert", "백").
        forms: irregular full forms by digit ("двести", "ciento").
        exact_forms: forms used when nothing else follows in the chunk
            ("cien", "deux cents").
        elides_one: drop the multiplier for digit 1 ("백", "cent").
        joiner: text between multiplier and noun.
        multiplier_class: agreement class of the multiplier numeral.
        word_first: noun precedes its count (Zulu "amakhulu amabili").
    """

    value: int
    word: str = ""
    forms: Mapping[int, str] = field(default_factory=dict)
    exact_forms: Mapping[int, str] = field(default_factory=dict)
    elides_one: bool = False
    joiner: str = " "
    multiplier_class: Optional[str] = None
    word_first: bool = False

    def __post_init__(self) -> None:
        _freeze(self, "forms", "exact_forms")


@dataclass(frozen=True)
class ScaleDef:
    """
    A scale word (thousand, million, 만, inkulungwane ...).

    Attributes:
        power: the scale is worth 10**power.
        names: scale-word form per CountClass of the count.
        grammatical_class: class the count numeral must agree with.
        noun_classes: per-CountClass override of grammatical_class
            (noun-class languages switch class between singular and plural).
        elides_one: a count of exactly 1 is omitted ("mille", "хиляда").
        count_joiner: text between count and scale word.
        scale_first: scale word precedes the count (Zulu).
        invariable_count: the count never takes exact plural forms
            (French "deux cent mille").
    """

    power: int
    names: Mapping[CountClass, str]
    grammatical_class: Optional[str] = None
    noun_classes: Mapping[CountClass, str] = field(default_factory=dict)
    elides_one: bool = False
    count_joiner: str = " "
    scale_first: bool = False
    invariable_count: bool = False

    def __post_init__(self) -> None:
        _freeze(self, "names", "noun_classes")


@dataclass(frozen=True)
class EraWords:
    bc: str
    ad: str
    prefix: bool = False  # Korean puts the era before the year


@dataclass(frozen=True)
class CenturyStyle:
    """
    Alternate year reading: split into two-digit halves inside `ranges`.

    Inside a range the year reads as "<high> <low>" ("nineteen eighty-four").
    A low half of zero reads "<high> <hundred_word>"; a low half below
    `hundred_below` reads "<high> <hundred_word> <low>" with
    `small_low_joiner` ("nineteen hundred and five").
    """

    ranges: Tuple[Tuple[int, int], ...]
    hundred_word: str
    pair_joiner: str = " "
    hundred_joiner: str = " "
    small_low_joiner: str = " "
    hundred_below: int = 10


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


def _default_joiners() -> Dict[JoinType, Joiner]:
    return {
        JoinType.TENS_UNITS: Joiner(" "),
        JoinType.HUNDREDS: Joiner(" "),
        JoinType.CHUNKS: Joiner(" "),
    }


def _default_fusion_joiners() -> Dict[FusionType, str]:
    return {
        FusionType.CONJUNCTION: " ",
        FusionType.CONCORD: "",
        FusionType.COMPOUND: "",
        FusionType.PARTITIVE: " ",
    }


@dataclass(frozen=True)
class GrammarProfile:
    """
    Immutable per-language configuration consumed by the cardinal engine.

    Mapping fields are frozen into read-only views on construction, so a
    registered profile can be shared between callers without copying.
    """

    tag: str
    name: str
    zero: str
    units: Tuple[str, ...]
    tens: Mapping[int, str]
    scales: Tuple[ScaleDef, ...]
    classify: Callable[[int], CountClass]
    negative_word: str
    separator_words: Mapping[DecimalSeparatorStyle, str]
    default_separator: DecimalSeparatorStyle
    era: EraWords
    not_a_number: str
    infinity: str
    negative_infinity: str
    default_currency: CurrencyInfo

    places: Tuple[PlaceDef, ...] = ()
    tens_exact: Mapping[int, str] = field(default_factory=dict)
    vigesimal_tens: Mapping[int, int] = field(default_factory=dict)
    units_first: bool = False
    compound_unit_class: Optional[str] = None

    default_class: Optional[str] = None
    agreement: Mapping[str, Mapping[int, str]] = field(default_factory=dict)
    agreement_scope: str = "units"
    concord: Mapping[str, Tuple[ConcordBand, ...]] = field(default_factory=dict)

    joiners: Mapping[JoinType, Joiner] = field(default_factory=_default_joiners)
    conjunction_rules: Tuple[ConjunctionRule, ...] = ()
    fusion_rules: Tuple[FusionRule, ...] = ()
    vowel_coalescence: Mapping[Tuple[str, str], str] = field(default_factory=dict)
    fusion_joiners: Mapping[FusionType, str] = field(default_factory=_default_fusion_joiners)

    fraction_digits: Optional[Tuple[str, ...]] = None
    fraction_digit_joiner: str = " "
    century_style: Optional[CenturyStyle] = None

    currency_separator: str = "and"
    currency_unit_first_below: Optional[int] = None
    currency_partitive: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.scales:
            raise ProfileConfigurationError(self.tag, "at least one scale is required")
        powers = [scale.power for scale in self.scales]
        if any(b <= a for a, b in zip(powers, powers[1:])):
            raise ProfileConfigurationError(self.tag, f"scale powers must be strictly increasing: {powers}")
        if len(self.units) < 10:
            raise ProfileConfigurationError(self.tag, "units must cover at least the digits 0-9")
        if self.agreement_scope not in ("units", "whole"):
            raise ProfileConfigurationError(self.tag, f"unknown agreement scope '{self.agreement_scope}'")

        # Freeze every mapping; merge partial joiner tables over the defaults.
        joiners = _default_joiners()
        joiners.update(self.joiners)
        fusion_joiners = _default_fusion_joiners()
        fusion_joiners.update(self.fusion_joiners)
        frozen = {
            "tens": self.tens,
            "separator_words": self.separator_words,
            "tens_exact": self.tens_exact,
            "vigesimal_tens": self.vigesimal_tens,
            "agreement": {k: MappingProxyType(dict(v)) for k, v in self.agreement.items()},
            "concord": {k: tuple(v) for k, v in self.concord.items()},
            "joiners": joiners,
            "vowel_coalescence": self.vowel_coalescence,
            "fusion_joiners": fusion_joiners,
        }
        for attr, value in frozen.items():
            object.__setattr__(self, attr, MappingProxyType(dict(value)))

    # Derived layout -----------------------------------------------------

    @property
    def chunk_base(self) -> int:
        """Exclusive upper bound of the units chunk."""
        return 10 ** self.scales[0].power

    @property
    def tier_powers(self) -> Tuple[int, ...]:
        """Power of ten where each tier starts: units tier first, then each scale."""
        return (0,) + tuple(scale.power for scale in self.scales)

    @property
    def top_tier_width(self) -> int:
        powers = self.tier_powers
        return powers[-1] - powers[-2]

    @property
    def max_value(self) -> int:
        """Largest magnitude the scale table can express."""
        return 10 ** (self.scales[-1].power + self.top_tier_width) - 1

    def separator_word(self, style: Optional[DecimalSeparatorStyle]) -> str:
        style = style or self.default_separator
        if style == DecimalSeparatorStyle.PERIOD:
            style = DecimalSeparatorStyle.POINT
        return self.separator_words.get(style) or self.separator_words[self.default_separator]

    def fraction_digit_words(self) -> Tuple[str, ...]:
        return self.fraction_digits or (self.zero,) + tuple(self.units[1:10])


# ---------------------------------------------------------------------------
# Profile registry
# ---------------------------------------------------------------------------

_PROFILES: Dict[str, GrammarProfile] = {}

PROFILE_REGISTRY: Mapping[str, GrammarProfile] = MappingProxyType(_PROFILES)
"""
Read-only view of the process-wide registry, keyed by language tag
(e.g. "en", "en-GB", "ru"). Populated once when the family modules load.
"""


def register_profile(profile: GrammarProfile) -> GrammarProfile:
    """
    Add a profile to the registry.

    Usage (inside a family module):

        RUSSIAN = register_profile(GrammarProfile(tag="ru", ...))
    """
    if profile.tag in _PROFILES:
        raise ProfileConfigurationError(profile.tag, "profile already registered")
    _PROFILES[profile.tag] = profile
    return profile


def get_profile(tag: str) -> GrammarProfile:
    try:
        return _PROFILES[tag]
    except KeyError:
        raise LanguageNotFoundError(tag) from None


def list_registered_profiles() -> List[str]:
    """Return the sorted list of registered language tags."""
    return sorted(_PROFILES.keys())


__all__ = [
    "CountClass",
    "JoinType",
    "FusionType",
    "Joiner",
    "JoinContext",
    "ConjunctionRule",
    "FusionRule",
    "ConcordBand",
    "PlaceDef",
    "ScaleDef",
    "EraWords",
    "CenturyStyle",
    "GrammarProfile",
    "PROFILE_REGISTRY",
    "register_profile",
    "get_profile",
    "list_registered_profiles",
]
