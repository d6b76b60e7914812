# grammar\slavic.py
"""
grammar/slavic.py

Profiles for Russian, Polish and Bulgarian.

These languages share:
    - Gendered forms of 1 and 2, with the numeral agreeing with the scale
      noun ("одна тысяча", "один миллион").
    - Three-way plural selection for scale nouns and currencies, driven by
      the last digits of the count (see grammar/plurals.py).

Bulgarian additionally inserts "и" ("and") inside a chunk and before a
final chunk that is below 100 or a round hundred, and elides "one" before
"хиляда".
"""

from __future__ import annotations

from typing import Sequence, Tuple

from numwords.core.domain.currencies import BGN, PLN, RUB
from numwords.core.domain.grammar.base import (
    ConjunctionRule,
    CountClass,
    EraWords,
    GrammarProfile,
    Joiner,
    JoinType,
    PlaceDef,
    ScaleDef,
    register_profile,
)
from numwords.core.domain.grammar.plurals import (
    classify_east_slavic,
    classify_polish,
    classify_singular_plural,
)
from numwords.core.domain.models import DecimalSeparatorStyle


def _three_form_scales(stems: Sequence[Tuple[str, str, str]], first_class: str, rest_class: str) -> Tuple[ScaleDef, ...]:
    """Scales from (one, few, many) triples, 10^3 upwards."""
    scales = []
    for i, (one, few, many) in enumerate(stems):
        scales.append(ScaleDef(
            power=3 * (i + 1),
            names={CountClass.ONE: one, CountClass.FEW: few, CountClass.MANY: many},
            grammatical_class=first_class if i == 0 else rest_class,
        ))
    return tuple(scales)


# ---------------------------------------------------------------------------
# Russian
# ---------------------------------------------------------------------------

RUSSIAN = register_profile(GrammarProfile(
    tag="ru",
    name="Russian",
    zero="ноль",
    units=(
        "ноль", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять",
        "десять", "одиннадцать", "двенадцать", "тринадцать", "четырнадцать", "пятнадцать",
        "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
    ),
    tens={
        2: "двадцать", 3: "тридцать", 4: "сорок", 5: "пятьдесят",
        6: "шестьдесят", 7: "семьдесят", 8: "восемьдесят", 9: "девяносто",
    },
    places=(PlaceDef(100, forms={
        1: "сто", 2: "двести", 3: "триста", 4: "четыреста", 5: "пятьсот",
        6: "шестьсот", 7: "семьсот", 8: "восемьсот", 9: "девятьсот",
    }),),
    scales=_three_form_scales(
        (
            ("тысяча", "тысячи", "тысяч"),
            ("миллион", "миллиона", "миллионов"),
            ("миллиард", "миллиарда", "миллиардов"),
            ("триллион", "триллиона", "триллионов"),
            ("квадриллион", "квадриллиона", "квадриллионов"),
            ("квинтиллион", "квинтиллиона", "квинтиллионов"),
            ("секстиллион", "секстиллиона", "секстиллионов"),
            ("септиллион", "септиллиона", "септиллионов"),
        ),
        first_class="feminine",
        rest_class="masculine",
    ),
    classify=classify_east_slavic,
    default_class="masculine",
    agreement={
        "feminine": {1: "одна", 2: "две"},
        "neuter": {1: "одно"},
    },
    negative_word="минус",
    separator_words={DecimalSeparatorStyle.COMMA: "запятая", DecimalSeparatorStyle.POINT: "точка"},
    default_separator=DecimalSeparatorStyle.COMMA,
    era=EraWords(bc="до н. э.", ad="н. э."),
    not_a_number="Не число",
    infinity="Бесконечность",
    negative_infinity="Минус бесконечность",
    default_currency=RUB,
    currency_separator="",
))


# ---------------------------------------------------------------------------
# Polish
# ---------------------------------------------------------------------------

POLISH = register_profile(GrammarProfile(
    tag="pl",
    name="Polish",
    zero="zero",
    units=(
        "zero", "jeden", "dwa", "trzy", "cztery", "pięć", "sześć", "siedem", "osiem", "dziewięć",
        "dziesięć", "jedenaście", "dwanaście", "trzynaście", "czternaście", "piętnaście",
        "szesnaście", "siedemnaście", "osiemnaście", "dziewiętnaście",
    ),
    tens={
        2: "dwadzieścia", 3: "trzydzieści", 4: "czterdzieści", 5: "pięćdziesiąt",
        6: "sześćdziesiąt", 7: "siedemdziesiąt", 8: "osiemdziesiąt", 9: "dziewięćdziesiąt",
    },
    places=(PlaceDef(100, forms={
        1: "sto", 2: "dwieście", 3: "trzysta", 4: "czterysta", 5: "pięćset",
        6: "sześćset", 7: "siedemset", 8: "osiemset", 9: "dziewięćset",
    }),),
    scales=_three_form_scales(
        (
            ("tysiąc", "tysiące", "tysięcy"),
            ("milion", "miliony", "milionów"),
            ("miliard", "miliardy", "miliardów"),
            ("bilion", "biliony", "bilionów"),
            ("biliard", "biliardy", "biliardów"),
            ("trylion", "tryliony", "trylionów"),
            ("tryliard", "tryliardy", "tryliardów"),
            ("kwadrylion", "kwadryliony", "kwadrylionów"),
        ),
        first_class="masculine",
        rest_class="masculine",
    ),
    classify=classify_polish,
    default_class="masculine",
    agreement={
        "feminine": {1: "jedna", 2: "dwie"},
        "neuter": {1: "jedno"},
    },
    negative_word="minus",
    separator_words={DecimalSeparatorStyle.COMMA: "przecinek", DecimalSeparatorStyle.POINT: "kropka"},
    default_separator=DecimalSeparatorStyle.COMMA,
    era=EraWords(bc="p.n.e.", ad="n.e."),
    not_a_number="Nie Liczba",
    infinity="Nieskończoność",
    negative_infinity="Minus Nieskończoność",
    default_currency=PLN,
    currency_separator="i",
))


# ---------------------------------------------------------------------------
# Bulgarian
# ---------------------------------------------------------------------------

_BG_AND = Joiner(" ", conjunction="и")


def _bg_scale(power: int, singular: str, plural: str, grammatical_class: str, elides_one: bool = False) -> ScaleDef:
    return ScaleDef(
        power=power,
        names={CountClass.ONE: singular, CountClass.OTHER: plural},
        grammatical_class=grammatical_class,
        elides_one=elides_one,
    )


BULGARIAN = register_profile(GrammarProfile(
    tag="bg",
    name="Bulgarian",
    zero="нула",
    units=(
        "нула", "едно", "две", "три", "четири", "пет", "шест", "седем", "осем", "девет",
        "десет", "единадесет", "дванадесет", "тринадесет", "четиринадесет", "петнадесет",
        "шестнадесет", "седемнадесет", "осемнадесет", "деветнадесет",
    ),
    tens={
        2: "двадесет", 3: "тридесет", 4: "четиридесет", 5: "петдесет",
        6: "шестдесет", 7: "седемдесет", 8: "осемдесет", 9: "деветдесет",
    },
    places=(PlaceDef(100, forms={
        1: "сто", 2: "двеста", 3: "триста", 4: "четиристотин", 5: "петстотин",
        6: "шестстотин", 7: "седемстотин", 8: "осемстотин", 9: "деветстотин",
    }),),
    scales=(
        _bg_scale(3, "хиляда", "хиляди", "feminine", elides_one=True),
        _bg_scale(6, "милион", "милиона", "masculine"),
        _bg_scale(9, "милиард", "милиарда", "masculine"),
        _bg_scale(12, "трилион", "трилиона", "masculine"),
        _bg_scale(15, "квадрилион", "квадрилиона", "masculine"),
        _bg_scale(18, "квинтилион", "квинтилиона", "masculine"),
        _bg_scale(21, "секстилион", "секстилиона", "masculine"),
        _bg_scale(24, "септилион", "септилиона", "masculine"),
    ),
    classify=classify_singular_plural,
    default_class="neuter",
    agreement={
        "masculine": {1: "един", 2: "два"},
        "feminine": {1: "една", 2: "две"},
    },
    joiners={JoinType.TENS_UNITS: _BG_AND},
    conjunction_rules=(
        ConjunctionRule(
            JoinType.HUNDREDS,
            lambda ctx: ctx.right_value < 20 or ctx.right_value % 10 == 0,
            _BG_AND,
            name="hundred_and",
        ),
        ConjunctionRule(
            JoinType.CHUNKS,
            lambda ctx: ctx.is_final and ctx.right_scale == 0 and (ctx.right_value < 100 or ctx.right_value % 100 == 0),
            _BG_AND,
            name="final_chunk_and",
        ),
    ),
    negative_word="минус",
    separator_words={DecimalSeparatorStyle.COMMA: "цяло и", DecimalSeparatorStyle.POINT: "точка"},
    default_separator=DecimalSeparatorStyle.COMMA,
    era=EraWords(bc="преди новата ера", ad="от новата ера"),
    not_a_number="Не е число",
    infinity="Безкрайност",
    negative_infinity="Отрицателна безкрайност",
    default_currency=BGN,
    currency_separator="и",
))
