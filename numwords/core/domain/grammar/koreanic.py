# grammar\koreanic.py
"""
grammar/koreanic.py

Sino-Korean cardinal profile.

Myriad-based: scales step by 10^4 (만, 억, 조, ...), each chunk holds
천/백/십 places, "one" (일) is dropped before every place and scale
word, and nothing is separated by spaces ("십이만삼천사백오십육").
"""

from __future__ import annotations

from numwords.core.domain.currencies import KRW
from numwords.core.domain.grammar.base import (
    CountClass,
    EraWords,
    GrammarProfile,
    Joiner,
    JoinType,
    PlaceDef,
    ScaleDef,
    register_profile,
)
from numwords.core.domain.grammar.plurals import classify_invariant
from numwords.core.domain.models import DecimalSeparatorStyle

_KO_DIGITS = ("영", "일", "이", "삼", "사", "오", "육", "칠", "팔", "구")
_KO_SCALES = ("만", "억", "조", "경", "해", "자")

KOREAN = register_profile(GrammarProfile(
    tag="ko",
    name="Korean",
    zero="영",
    units=_KO_DIGITS,
    tens={digit: ("" if digit == 1 else _KO_DIGITS[digit]) + "십" for digit in range(1, 10)},
    places=(
        PlaceDef(1000, "천", elides_one=True, joiner=""),
        PlaceDef(100, "백", elides_one=True, joiner=""),
    ),
    scales=tuple(
        ScaleDef(power=4 * (i + 1), names={CountClass.OTHER: word}, elides_one=True, count_joiner="")
        for i, word in enumerate(_KO_SCALES)
    ),
    classify=classify_invariant,
    joiners={
        JoinType.TENS_UNITS: Joiner(""),
        JoinType.HUNDREDS: Joiner(""),
        JoinType.CHUNKS: Joiner(""),
    },
    negative_word="마이너스",
    separator_words={DecimalSeparatorStyle.POINT: "점", DecimalSeparatorStyle.COMMA: "쉼표"},
    default_separator=DecimalSeparatorStyle.POINT,
    fraction_digit_joiner="",
    era=EraWords(bc="기원전", ad="서기", prefix=True),
    not_a_number="숫자가 아님",
    infinity="무한대",
    negative_infinity="음의 무한대",
    default_currency=KRW,
    currency_separator="",
))
