# grammar\germanic.py
"""
grammar/germanic.py

Profiles for English (US and British) and German.

English:
    - Hyphenated tens ("twenty-one"), short-scale names up to quindecillion.
    - en-GB inserts "and" after a hundred and before a final chunk below 100.
    - Years read in halves ("nineteen eighty-four", "twenty twenty-four").

German:
    - Units precede tens ("einundzwanzig"); everything below a million is
      written as one word ("zweitausendvierhundert").
    - "eins" standalone, "ein" inside compounds, "eine" before the
      feminine scale nouns (Million, Milliarde, ...).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence, Tuple

from numwords.core.domain.currencies import EUR_DE, GBP, USD
from numwords.core.domain.grammar.base import (
    CenturyStyle,
    ConjunctionRule,
    CountClass,
    EraWords,
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


# ---------------------------------------------------------------------------
# English
# ---------------------------------------------------------------------------

_EN_SCALE_NAMES: Sequence[str] = (
    "thousand", "million", "billion", "trillion", "quadrillion", "quintillion",
    "sextillion", "septillion", "octillion", "nonillion", "decillion",
    "undecillion", "duodecillion", "tredecillion", "quattuordecillion", "quindecillion",
)


def _en_scales() -> Tuple[ScaleDef, ...]:
    return tuple(
        ScaleDef(power=3 * (i + 1), names={CountClass.ONE: name, CountClass.OTHER: name})
        for i, name in enumerate(_EN_SCALE_NAMES)
    )


ENGLISH = register_profile(GrammarProfile(
    tag="en",
    name="English",
    zero="zero",
    units=(
        "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
        "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
        "seventeen", "eighteen", "nineteen",
    ),
    tens={2: "twenty", 3: "thirty", 4: "forty", 5: "fifty", 6: "sixty", 7: "seventy", 8: "eighty", 9: "ninety"},
    places=(PlaceDef(100, "hundred"),),
    scales=_en_scales(),
    classify=classify_singular_plural,
    joiners={JoinType.TENS_UNITS: Joiner("-")},
    negative_word="minus",
    separator_words={DecimalSeparatorStyle.POINT: "point", DecimalSeparatorStyle.COMMA: "comma"},
    default_separator=DecimalSeparatorStyle.POINT,
    era=EraWords(bc="BC", ad="AD"),
    century_style=CenturyStyle(ranges=((1100, 1999), (2010, 2099)), hundred_word="hundred"),
    not_a_number="Not a Number",
    infinity="Infinity",
    negative_infinity="Negative Infinity",
    default_currency=USD,
))

_AND = Joiner(" ", conjunction="and")

BRITISH_ENGLISH = register_profile(replace(
    ENGLISH,
    tag="en-GB",
    name="English (British)",
    conjunction_rules=(
        ConjunctionRule(JoinType.HUNDREDS, lambda ctx: ctx.right_value > 0, _AND, name="hundred_and"),
        ConjunctionRule(
            JoinType.CHUNKS,
            lambda ctx: ctx.is_final and ctx.right_scale == 0 and ctx.right_value < 100,
            _AND,
            name="final_chunk_and",
        ),
    ),
    century_style=CenturyStyle(
        ranges=((1100, 1999), (2010, 2099)), hundred_word="hundred", small_low_joiner=" and "
    ),
    default_currency=GBP,
))


# ---------------------------------------------------------------------------
# German
# ---------------------------------------------------------------------------

def _de_scale(power: int, singular: str, plural: str) -> ScaleDef:
    return ScaleDef(power=power, names={CountClass.ONE: singular, CountClass.OTHER: plural}, grammatical_class="feminine")


GERMAN = register_profile(GrammarProfile(
    tag="de",
    name="German",
    zero="null",
    units=(
        "null", "eins", "zwei", "drei", "vier", "fünf", "sechs", "sieben", "acht", "neun",
        "zehn", "elf", "zwölf", "dreizehn", "vierzehn", "fünfzehn", "sechzehn",
        "siebzehn", "achtzehn", "neunzehn",
    ),
    tens={2: "zwanzig", 3: "dreißig", 4: "vierzig", 5: "fünfzig", 6: "sechzig", 7: "siebzig", 8: "achtzig", 9: "neunzig"},
    units_first=True,
    compound_unit_class="attributive",
    places=(PlaceDef(100, "hundert", joiner="", multiplier_class="attributive"),),
    scales=(
        ScaleDef(
            power=3,
            names={CountClass.ONE: "tausend", CountClass.OTHER: "tausend"},
            grammatical_class="attributive",
            count_joiner="",
        ),
        _de_scale(6, "Million", "Millionen"),
        _de_scale(9, "Milliarde", "Milliarden"),
        _de_scale(12, "Billion", "Billionen"),
        _de_scale(15, "Billiarde", "Billiarden"),
        _de_scale(18, "Trillion", "Trillionen"),
        _de_scale(21, "Trilliarde", "Trilliarden"),
        _de_scale(24, "Quadrillion", "Quadrillionen"),
    ),
    classify=classify_singular_plural,
    agreement={
        "attributive": {1: "ein"},
        "feminine": {1: "eine"},
        "masculine": {1: "ein"},
        "neuter": {1: "ein"},
    },
    joiners={
        JoinType.TENS_UNITS: Joiner("", conjunction="und", fusion=FusionType.COMPOUND),
        JoinType.HUNDREDS: Joiner(""),
    },
    conjunction_rules=(
        # "tausend" closes the compound word that the rest of the number continues.
        ConjunctionRule(JoinType.CHUNKS, lambda ctx: ctx.left_scale == 1, Joiner(""), name="tausend_compound"),
    ),
    negative_word="minus",
    separator_words={DecimalSeparatorStyle.COMMA: "Komma", DecimalSeparatorStyle.POINT: "Punkt"},
    default_separator=DecimalSeparatorStyle.COMMA,
    era=EraWords(bc="v. Chr.", ad="n. Chr."),
    century_style=CenturyStyle(
        ranges=((1100, 1999),),
        hundred_word="hundert",
        pair_joiner="",
        hundred_joiner="",
        small_low_joiner="",
        hundred_below=100,
    ),
    not_a_number="Keine Zahl",
    infinity="Unendlich",
    negative_infinity="Negativ Unendlich",
    default_currency=EUR_DE,
    currency_separator="und",
))
