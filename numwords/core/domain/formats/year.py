# formats\year.py
"""
formats/year.py

Calendar-year reading. The magnitude is truncated to whole years; negative
years always carry the BC-era word, positive years only on request.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from numwords.core.domain.cardinal.integer_converter import IntegerConverter
from numwords.core.domain.models import ConversionOptions


class YearFormatter:
    def __init__(self, converter: IntegerConverter):
        self.converter = converter
        self.profile = converter.profile

    def format(self, magnitude: Decimal, negative: bool, options: ConversionOptions) -> str:
        year = int(magnitude)
        agreement_class = self.converter.agreement.resolve_class(options.gender)
        words = self.year_words(year, agreement_class)

        era = self.profile.era
        if year == 0:
            return words
        if negative:
            marker = era.bc
        elif options.include_era_for_positive_years:
            marker = era.ad
        else:
            return words
        return f"{marker} {words}" if era.prefix else f"{words} {marker}"

    def year_words(self, year: int, agreement_class: Optional[str] = None) -> str:
        """
        Read `year` with the profile's century style where one applies,
        otherwise as a plain cardinal.

            en: 1984 -> "nineteen eighty-four", 1905 -> "nineteen hundred five"
            de: 1984 -> "neunzehnhundertvierundachtzig"
        """
        style = self.profile.century_style
        if style is None or not any(low <= year <= high for low, high in style.ranges):
            return self.converter.convert(year, agreement_class)

        high, low = divmod(year, 100)
        high_words = self.converter.convert(high)
        if low == 0:
            return high_words + style.hundred_joiner + style.hundred_word
        low_words = self.converter.convert(low, agreement_class)
        if low < style.hundred_below:
            return high_words + style.hundred_joiner + style.hundred_word + style.small_low_joiner + low_words
        return high_words + style.pair_joiner + low_words
