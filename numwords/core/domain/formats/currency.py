# formats\currency.py
"""
formats/currency.py

Currency reading: the amount is split into main and sub units, each
converted with its own agreement class and pluralised through the same
CountClass mechanism as scale words.
"""

from __future__ import annotations

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Optional, Tuple

from numwords.core.domain.cardinal.integer_converter import IntegerConverter
from numwords.core.domain.cardinal.scale_selector import lookup_form_with_fallback
from numwords.core.domain.grammar.base import CountClass, FusionType
from numwords.core.domain.models import ConversionOptions, CurrencyInfo

_CENT = Decimal("0.01")
_MILLION = 10 ** 6


def split_amount(amount: Decimal, round_half_up: bool = False) -> Tuple[int, int]:
    """
    Split a non-negative amount into (main, sub) units at two decimal places.

        split_amount(Decimal("1.999"))       -> (1, 99)
        split_amount(Decimal("1.999"), True) -> (2, 0)
    """
    # Precision covers every integer digit plus the cents.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        quantized = amount.quantize(_CENT, rounding=ROUND_HALF_UP if round_half_up else ROUND_DOWN)
        cents = int(quantized.scaleb(2))
    return divmod(cents, 100)


class CurrencyFormatter:
    def __init__(self, converter: IntegerConverter):
        self.converter = converter
        self.profile = converter.profile

    def format(self, magnitude: Decimal, options: ConversionOptions, round_half_up: bool = False) -> str:
        info = options.currency_info or self.profile.default_currency
        main, sub = split_amount(magnitude, round_half_up or options.round)
        if not info.sub_unit_singular:
            sub = 0

        if main == 0 and sub == 0:
            unit = self._unit_form(self._main_forms(info), 0, "main unit")
            return f"{self.profile.zero} {unit}"

        main_text = self._amount(main, "main unit", self._main_forms(info),
                                 info.main_unit_class, info.main_unit_plural_class) if main else ""
        if not sub:
            return main_text

        sub_text = self._amount(sub, "sub unit", self._sub_forms(info),
                                info.sub_unit_class, info.sub_unit_plural_class)
        if not main_text:
            return sub_text

        separator = self.profile.currency_separator if info.separator is None else info.separator
        if separator:
            sub_text = self.converter.fuser.fuse(separator, sub_text, FusionType.CONJUNCTION)
        return f"{main_text} {sub_text}"

    # Units ------------------------------------------------------------------

    def _amount(self, count: int, what: str, forms: Dict[CountClass, str],
                singular_class: Optional[str], plural_class: Optional[str]) -> str:
        unit = self._unit_form(forms, count, what)
        agreement_class = singular_class if count == 1 else (plural_class or singular_class)

        threshold = self.profile.currency_unit_first_below
        if threshold is not None and count < threshold:
            return f"{unit} {self.converter.convert(count, agreement_class)}"
        if threshold is not None:
            agreement_class = None

        words = self.converter.convert(count, agreement_class)
        partitive = self.profile.currency_partitive
        if partitive and count >= _MILLION and count % _MILLION == 0:
            return f"{words} {self.converter.fuser.fuse(partitive, unit, FusionType.PARTITIVE)}"
        return f"{words} {unit}"

    def _unit_form(self, forms: Dict[CountClass, str], count: int, what: str) -> str:
        return lookup_form_with_fallback(forms, self.profile.classify(count), what, self.profile.tag)

    @staticmethod
    def _main_forms(info: CurrencyInfo) -> Dict[CountClass, str]:
        return _forms(info.main_unit_singular, info.main_unit_plural, info.main_unit_few, info.main_unit_many)

    @staticmethod
    def _sub_forms(info: CurrencyInfo) -> Dict[CountClass, str]:
        return _forms(info.sub_unit_singular, info.sub_unit_plural, info.sub_unit_few, info.sub_unit_many)


def _forms(singular: Optional[str], plural: Optional[str], few: Optional[str], many: Optional[str]) -> Dict[CountClass, str]:
    forms = {
        CountClass.ONE: singular,
        CountClass.OTHER: plural,
        CountClass.FEW: few or plural,
        CountClass.MANY: many or plural,
    }
    return {count_class: form for count_class, form in forms.items() if form}
