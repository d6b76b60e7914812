# formats\standard.py
"""
formats/standard.py

Plain cardinal reading: integer part, then the fractional digits one by
one after the profile's separator word ("one point five").
"""

from __future__ import annotations

from decimal import Decimal

from numwords.core.domain.cardinal.integer_converter import IntegerConverter
from numwords.core.domain.models import ConversionOptions


def fraction_digits(magnitude: Decimal) -> str:
    """
    Fractional digits of an exact decimal, trailing zeros stripped.

        Decimal("1.50") -> "5"
        Decimal("1.05") -> "05"
        Decimal("2")    -> ""
    """
    text = format(magnitude, "f")
    _, _, fraction = text.partition(".")
    return fraction.rstrip("0")


class StandardFormatter:
    def __init__(self, converter: IntegerConverter):
        self.converter = converter
        self.profile = converter.profile

    def format(self, magnitude: Decimal, options: ConversionOptions) -> str:
        agreement_class = self.converter.agreement.resolve_class(options.gender)
        words = self.converter.convert(int(magnitude), agreement_class)

        digits = fraction_digits(magnitude)
        if not digits:
            return words

        digit_words = self.profile.fraction_digit_words()
        fraction = self.profile.fraction_digit_joiner.join(digit_words[int(d)] for d in digits)
        separator = self.profile.separator_word(options.decimal_separator)
        return f"{words} {separator} {fraction}"
