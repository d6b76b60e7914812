# numwords/core/domain/currencies.py
"""
Currency catalogue: unit names per currency and language.

Keys combine the ISO code with a language suffix where one currency is
named differently across languages (EUR_DE, EUR_FR, ...).
"""

from typing import Dict, List

from numwords.core.domain.exceptions import CurrencyNotFoundError
from numwords.core.domain.models import CurrencyInfo

USD = CurrencyInfo(
    main_unit_singular="dollar",
    main_unit_plural="dollars",
    sub_unit_singular="cent",
    sub_unit_plural="cents",
    separator="and",
)

GBP = CurrencyInfo(
    main_unit_singular="pound",
    main_unit_plural="pounds",
    sub_unit_singular="penny",
    sub_unit_plural="pence",
    separator="and",
)

EUR_EN = CurrencyInfo(
    main_unit_singular="euro",
    main_unit_plural="euros",
    sub_unit_singular="cent",
    sub_unit_plural="cents",
    separator="and",
)

EUR_DE = CurrencyInfo(
    main_unit_singular="Euro",
    main_unit_plural="Euro",
    sub_unit_singular="Cent",
    sub_unit_plural="Cent",
    separator="und",
    main_unit_class="attributive",
    sub_unit_class="attributive",
)

EUR_FR = CurrencyInfo(
    main_unit_singular="euro",
    main_unit_plural="euros",
    sub_unit_singular="centime",
    sub_unit_plural="centimes",
    separator="et",
)

EUR_ES = CurrencyInfo(
    main_unit_singular="euro",
    main_unit_plural="euros",
    sub_unit_singular="céntimo",
    sub_unit_plural="céntimos",
    separator="con",
    main_unit_class="apocope",
    sub_unit_class="apocope",
)

RUB = CurrencyInfo(
    main_unit_singular="рубль",
    main_unit_plural="рублей",
    main_unit_few="рубля",
    main_unit_many="рублей",
    sub_unit_singular="копейка",
    sub_unit_plural="копеек",
    sub_unit_few="копейки",
    sub_unit_many="копеек",
    main_unit_class="masculine",
    sub_unit_class="feminine",
)

PLN = CurrencyInfo(
    main_unit_singular="złoty",
    main_unit_plural="złotych",
    main_unit_few="złote",
    main_unit_many="złotych",
    sub_unit_singular="grosz",
    sub_unit_plural="groszy",
    sub_unit_few="grosze",
    sub_unit_many="groszy",
    separator="i",
    main_unit_class="masculine",
    sub_unit_class="masculine",
)

BGN = CurrencyInfo(
    main_unit_singular="лев",
    main_unit_plural="лева",
    sub_unit_singular="стотинка",
    sub_unit_plural="стотинки",
    separator="и",
    main_unit_class="masculine",
    sub_unit_class="feminine",
)

KRW = CurrencyInfo(
    main_unit_singular="원",
    main_unit_plural="원",
)

# Noun classes: iRandi 5 / amaRandi 6, isenti 7 / amasenti 6.
ZAR_ZU = CurrencyInfo(
    main_unit_singular="iRandi",
    main_unit_plural="amaRandi",
    sub_unit_singular="isenti",
    sub_unit_plural="amasenti",
    separator="no",
    main_unit_class="cl5",
    main_unit_plural_class="cl6",
    sub_unit_class="cl7",
    sub_unit_plural_class="cl6",
)

CURRENCIES: Dict[str, CurrencyInfo] = {
    "USD": USD,
    "GBP": GBP,
    "EUR_EN": EUR_EN,
    "EUR_DE": EUR_DE,
    "EUR_FR": EUR_FR,
    "EUR_ES": EUR_ES,
    "RUB": RUB,
    "PLN": PLN,
    "BGN": BGN,
    "KRW": KRW,
    "ZAR_ZU": ZAR_ZU,
}


def get_currency(code: str) -> CurrencyInfo:
    """Case-insensitive catalogue lookup ('usd', 'eur_fr')."""
    try:
        return CURRENCIES[code.upper()]
    except KeyError:
        raise CurrencyNotFoundError(code) from None


def list_currencies() -> List[str]:
    return sorted(CURRENCIES)
