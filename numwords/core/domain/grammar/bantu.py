# grammar\bantu.py
"""
grammar/bantu.py

isiZulu cardinal profile.

Zulu numerals behave like adjectives/relatives of the noun they count:

    - Scale nouns come first and the count follows with a concord prefix
      chosen by the noun's class ("izinkulungwane ezimbili", 2000).
    - Parts are linked with the associative na-, which coalesces with the
      next word ("namashumi", "nekhulu", "nanye").
    - "One" uses a class-specific stem ("isigidi esisodwa").

Noun classes are written cl5 .. cl10. Scale nouns switch class between
singular and plural (inkulungwane cl9 / izinkulungwane cl10).
"""

from __future__ import annotations

from numwords.core.domain.currencies import ZAR_ZU
from numwords.core.domain.grammar.base import (
    ConcordBand,
    CountClass,
    EraWords,
    FusionRule,
    FusionType,
    GrammarProfile,
    Joiner,
    JoinType,
    PlaceDef,
    ScaleDef,
    register_profile,
)
from numwords.core.domain.grammar.plurals import classify_singular_plural
from numwords.core.domain.models import DecimalSeparatorStyle

_NA = Joiner(" ", conjunction="na")

# Concord bands shared by the plural classes 8 and 10.
_PLURAL_CONCORD = (
    ConcordBand(1, 1, "ezi"),
    ConcordBand(2, 2, "ezim"),
    ConcordBand(3, 3, "ezin"),
    ConcordBand(4, 4, "ezine"),
    ConcordBand(5, 5, "ezin"),
    ConcordBand(6, 19, "eziyi"),
    ConcordBand(20, 99, "ezinga"),
    ConcordBand(100, 199, "eziyi"),
    ConcordBand(200, None, "ezinga"),
)


def _scale(power: int, singular: str, plural: str, singular_class: str, plural_class: str, elides_one: bool = False) -> ScaleDef:
    return ScaleDef(
        power=power,
        names={CountClass.ONE: singular, CountClass.OTHER: plural},
        noun_classes={CountClass.ONE: singular_class, CountClass.OTHER: plural_class},
        elides_one=elides_one,
        scale_first=True,
    )


ZULU = register_profile(GrammarProfile(
    tag="zu",
    name="isiZulu",
    zero="qanda",
    units=("qanda", "nye", "bili", "thathu", "ne", "hlanu", "sithupha", "khombisa", "shiyagalombili", "shiyagalolunye"),
    tens={
        1: "lishumi",
        2: "amashumi amabili",
        3: "amashumi amathathu",
        4: "amashumi amane",
        5: "amashumi amahlanu",
        6: "amashumi ayisithupha",
        7: "amashumi ayisikhombisa",
        8: "amashumi ayisishiyagalombili",
        9: "amashumi ayisishiyagalolunye",
    },
    places=(PlaceDef(100, "amakhulu", forms={1: "ikhulu"}, multiplier_class="cl6", word_first=True),),
    scales=(
        _scale(3, "inkulungwane", "izinkulungwane", "cl9", "cl10", elides_one=True),
        _scale(6, "isigidi", "izigidi", "cl7", "cl8"),
        _scale(9, "ibhiliyoni", "amabhiliyoni", "cl5", "cl6"),
        _scale(12, "ithriliyoni", "amathriliyoni", "cl5", "cl6"),
        _scale(15, "ikhwadriliyoni", "amakhwadriliyoni", "cl5", "cl6"),
        _scale(18, "ikhwintiliyoni", "amakhwintiliyoni", "cl5", "cl6"),
        _scale(21, "isekstiliyoni", "amasekstiliyoni", "cl7", "cl6"),
        _scale(24, "iseptiliyoni", "amaseptiliyoni", "cl7", "cl6"),
    ),
    classify=classify_singular_plural,
    agreement_scope="whole",
    agreement={
        "cl5": {1: "lodwa"},
        "cl6": {1: "odwa"},
        "cl7": {1: "sodwa"},
        "cl8": {1: "zodwa"},
        "cl9": {1: "yodwa"},
        "cl10": {1: "zodwa"},
    },
    concord={
        "cl5": (ConcordBand(1, 1, "eli"), ConcordBand(10, None, "eli")),
        "cl6": (
            ConcordBand(1, 1, "a"),
            ConcordBand(2, 5, "ama"),
            ConcordBand(6, 19, "ayi"),
            ConcordBand(20, 99, "anga"),
            ConcordBand(100, 199, "ayi"),
            ConcordBand(200, None, "anga"),
        ),
        "cl7": (ConcordBand(1, 1, "esi"), ConcordBand(10, None, "esi")),
        "cl8": _PLURAL_CONCORD,
        "cl9": (ConcordBand(1, 1, "e"), ConcordBand(10, None, "e")),
        "cl10": _PLURAL_CONCORD,
    },
    joiners={
        JoinType.TENS_UNITS: _NA,
        JoinType.HUNDREDS: _NA,
        JoinType.CHUNKS: _NA,
    },
    fusion_rules=(
        # Associative na- with bare numeral stems.
        FusionRule("na", "nye", "nanye", FusionType.CONJUNCTION),
        FusionRule("na", "bili", "nambili", FusionType.CONJUNCTION),
        FusionRule("na", "thathu", "nanthathu", FusionType.CONJUNCTION),
        FusionRule("na", "ne", "nane", FusionType.CONJUNCTION),
        FusionRule("na", "hlanu", "nanhlanu", FusionType.CONJUNCTION),
        FusionRule("na", "lishumi", "nelishumi", FusionType.CONJUNCTION),
        FusionRule("na", "sithupha", "nesithupha", FusionType.CONJUNCTION),
        FusionRule("na", "khombisa", "nesikhombisa", FusionType.CONJUNCTION),
        FusionRule("na", r"shiyagalo(?:mbili|lunye)", "nesi{word}", FusionType.CONJUNCTION),
        # Concord prefixes.
        FusionRule(r"(?:a|ezi)yi", "lishumi", "{prefix}shumi", FusionType.CONCORD),
        FusionRule(r"(?:a|ezi)yi", "khombisa", "{prefix}sikhombisa", FusionType.CONCORD),
        FusionRule(r"(?:a|ezi)yi", r"shiyagalo(?:mbili|lunye)", "{prefix}si{word}", FusionType.CONCORD),
        FusionRule("ezin", "thathu", "ezintathu", FusionType.CONCORD),
        FusionRule("ezine", "ne", "ezine", FusionType.CONCORD),
    ),
    vowel_coalescence={
        ("a", "a"): "a",
        ("a", "e"): "e",
        ("a", "i"): "e",
        ("a", "o"): "o",
        ("a", "u"): "o",
        ("i", "e"): "e",
        ("i", "i"): "i",
        ("o", "o"): "o",
        ("o", "u"): "o",
    },
    negative_word="okubi",
    separator_words={DecimalSeparatorStyle.POINT: "iphoyinti", DecimalSeparatorStyle.COMMA: "ukhefana"},
    default_separator=DecimalSeparatorStyle.POINT,
    era=EraWords(bc="BC", ad="AD"),
    not_a_number="Akulona Inani",
    infinity="Okungapheli",
    negative_infinity="Okubi Okungapheli",
    default_currency=ZAR_ZU,
    currency_separator="no",
    currency_unit_first_below=10 ** 6,
))
