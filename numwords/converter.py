# numwords/converter.py
from typing import Any, List, Optional, Union

import structlog

from numwords.core.domain.exceptions import LanguageNotFoundError
from numwords.core.domain.models import ConversionOptions, Lang
from numwords.core.use_cases.convert_number import ConvertNumber
from numwords.shared.config import settings
from numwords.shared.container import container

logger = structlog.get_logger()


class NumberConverter:
    """
    Stateful facade bound to one language.

        converter = NumberConverter(Lang.RU)
        converter(21, ConversionOptions(currency=True))  # "двадцать один рубль"
    """

    def __init__(
        self,
        lang: Optional[Lang] = None,
        fallback: Optional[str] = None,
        use_case: Optional[ConvertNumber] = None,
    ):
        self.lang = lang or Lang.from_code(settings.DEFAULT_LANGUAGE)
        self.fallback = fallback
        self._use_case = use_case or container.convert_number_use_case()

    def convert(self, value: Any, options: Optional[ConversionOptions] = None, fallback: Optional[str] = None) -> str:
        return self._use_case.execute(
            value,
            self.lang.value,
            options,
            fallback if fallback is not None else self.fallback,
        )

    __call__ = convert

    def set_lang(self, lang: Lang) -> None:
        self.lang = lang

    def set_lang_by_code(self, code: str, fallback_to_default: bool = False, default: Lang = Lang.EN) -> bool:
        """
        Switch language by tag. Returns True when `code` was recognised.

        Unknown tags raise LanguageNotFoundError unless `fallback_to_default`
        is set, in which case `default` is selected and False returned.
        """
        try:
            self.lang = Lang.from_code(code)
            return True
        except LanguageNotFoundError:
            if not fallback_to_default:
                raise
            logger.warning("language_fallback", requested=code, used=default.value)
            self.lang = default
            return False

    def set_lang_by_code_safe(self, code: str) -> bool:
        """Like set_lang_by_code, but keeps the current language on unknown tags."""
        try:
            self.lang = Lang.from_code(code)
            return True
        except LanguageNotFoundError:
            return False

    @staticmethod
    def available_languages() -> List[str]:
        return Lang.available_codes()


def convert(
    value: Any,
    lang: Union[Lang, str] = Lang.EN,
    options: Optional[ConversionOptions] = None,
    fallback: Optional[str] = None,
) -> str:
    """
    Convert `value` to words.

        convert(1234)                      -> "one thousand two hundred thirty-four"
        convert(1.5, "fr")                 -> "un virgule cinq"
        convert(1, Lang.RU, ConversionOptions(gender="feminine")) -> "одна"

    British "and" insertion is a language choice, not an option: pass
    Lang.EN_GB ("en-GB") to get "one hundred and one".
    """
    if not isinstance(lang, Lang):
        lang = Lang.from_code(lang)
    return container.convert_number_use_case().execute(value, lang.value, options, fallback)
