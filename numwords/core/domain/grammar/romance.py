# grammar\romance.py
"""
grammar/romance.py

Profiles for French and Spanish.

French:
    - Vigesimal 70-99 ("soixante-dix", "quatre-vingt-onze").
    - "et" before un/onze in 21-71 ("vingt et un", "soixante et onze").
    - Plural "-s" on exact hundreds and 80 ("deux cents", "quatre-vingts"),
      dropped before the invariable "mille".
    - Partitive before round millions of a currency ("dix millions d'euros").

Spanish:
    - Irregular 21-29 written as one word ("veintidós").
    - "cien" alone versus "ciento" before a remainder.
    - Apocope before nouns ("un millón", "veintiún mil").
    - Long scale with a six-digit million tier ("mil millones").
"""

from __future__ import annotations

from numwords.core.domain.currencies import EUR_ES, EUR_FR
from numwords.core.domain.grammar.base import (
    ConjunctionRule,
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
from numwords.core.domain.grammar.plurals import classify_french, classify_singular_plural
from numwords.core.domain.models import DecimalSeparatorStyle


def _scale(power: int, singular: str, plural: str, **kwargs) -> ScaleDef:
    return ScaleDef(power=power, names={CountClass.ONE: singular, CountClass.OTHER: plural}, **kwargs)


# ---------------------------------------------------------------------------
# French
# ---------------------------------------------------------------------------

_FR_UNITS = (
    "zéro", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf",
    "dix", "onze", "douze", "treize", "quatorze", "quinze", "seize",
    "dix-sept", "dix-huit", "dix-neuf",
)

FRENCH = register_profile(GrammarProfile(
    tag="fr",
    name="French",
    zero="zéro",
    units=_FR_UNITS,
    tens={2: "vingt", 3: "trente", 4: "quarante", 5: "cinquante", 6: "soixante", 8: "quatre-vingt"},
    tens_exact={8: "quatre-vingts"},
    vigesimal_tens={7: 6, 9: 8},
    places=(PlaceDef(
        100,
        "cent",
        elides_one=True,
        exact_forms={digit: f"{_FR_UNITS[digit]} cents" for digit in range(2, 10)},
    ),),
    scales=(
        _scale(3, "mille", "mille", elides_one=True, invariable_count=True),
        _scale(6, "million", "millions"),
        _scale(9, "milliard", "milliards"),
        _scale(12, "billion", "billions"),
        _scale(15, "billiard", "billiards"),
        _scale(18, "trillion", "trillions"),
        _scale(21, "trilliard", "trilliards"),
        _scale(24, "quadrillion", "quadrillions"),
    ),
    classify=classify_french,
    agreement={"feminine": {1: "une"}},
    joiners={JoinType.TENS_UNITS: Joiner("-")},
    conjunction_rules=(
        ConjunctionRule(
            JoinType.TENS_UNITS,
            lambda ctx: 2 <= ctx.left_value <= 6 and ctx.right_value in (1, 11),
            Joiner(" ", conjunction="et"),
            name="et_un",
        ),
    ),
    fusion_rules=(
        FusionRule("de", r"[aeiouyhàâäéèêëîïôöùûü]\w*", "d'{word}", FusionType.PARTITIVE),
    ),
    negative_word="moins",
    separator_words={DecimalSeparatorStyle.COMMA: "virgule", DecimalSeparatorStyle.POINT: "point"},
    default_separator=DecimalSeparatorStyle.COMMA,
    era=EraWords(bc="av. J.-C.", ad="ap. J.-C."),
    not_a_number="N'est pas un nombre",
    infinity="Infini",
    negative_infinity="Moins l'infini",
    default_currency=EUR_FR,
    currency_separator="et",
    currency_partitive="de",
))


# ---------------------------------------------------------------------------
# Spanish
# ---------------------------------------------------------------------------

SPANISH = register_profile(GrammarProfile(
    tag="es",
    name="Spanish",
    zero="cero",
    units=(
        "cero", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve",
        "diez", "once", "doce", "trece", "catorce", "quince", "dieciséis", "diecisiete",
        "dieciocho", "diecinueve", "veinte", "veintiuno", "veintidós", "veintitrés",
        "veinticuatro", "veinticinco", "veintiséis", "veintisiete", "veintiocho", "veintinueve",
    ),
    tens={
        2: "veinte", 3: "treinta", 4: "cuarenta", 5: "cincuenta",
        6: "sesenta", 7: "setenta", 8: "ochenta", 9: "noventa",
    },
    places=(PlaceDef(
        100,
        forms={
            1: "ciento", 2: "doscientos", 3: "trescientos", 4: "cuatrocientos", 5: "quinientos",
            6: "seiscientos", 7: "setecientos", 8: "ochocientos", 9: "novecientos",
        },
        exact_forms={1: "cien"},
    ),),
    scales=(
        _scale(3, "mil", "mil", grammatical_class="apocope", elides_one=True),
        _scale(6, "millón", "millones", grammatical_class="apocope"),
        _scale(12, "billón", "billones", grammatical_class="apocope"),
        _scale(18, "trillón", "trillones", grammatical_class="apocope"),
    ),
    classify=classify_singular_plural,
    agreement={
        "apocope": {1: "un", 21: "veintiún"},
        "feminine": {1: "una", 21: "veintiuna"},
    },
    joiners={JoinType.TENS_UNITS: Joiner(" ", conjunction="y")},
    negative_word="menos",
    separator_words={DecimalSeparatorStyle.COMMA: "coma", DecimalSeparatorStyle.POINT: "punto"},
    default_separator=DecimalSeparatorStyle.COMMA,
    era=EraWords(bc="a.C.", ad="d.C."),
    not_a_number="No Es Un Número",
    infinity="Infinito",
    negative_infinity="Menos Infinito",
    default_currency=EUR_ES,
    currency_separator="con",
    currency_partitive="de",
))
