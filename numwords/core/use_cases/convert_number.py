# numwords/core/use_cases/convert_number.py
from decimal import Decimal
from typing import Any, Optional

import structlog

from numwords.core.domain.cardinal.integer_converter import IntegerConverter
from numwords.core.domain.exceptions import (
    DomainError,
    InvalidInputError,
    NonFiniteInputError,
    ScaleOverflowError,
)
from numwords.core.domain.formats import CurrencyFormatter, StandardFormatter, YearFormatter
from numwords.core.domain.grammar.base import GrammarProfile
from numwords.core.domain.models import ConversionOptions, Format
from numwords.core.ports.number_normalizer import INumberNormalizer
from numwords.core.ports.profile_repository import IProfileRepository
from numwords.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class ConvertNumber:
    """
    Use Case: Converts a numeric value into words in one language.

    Responsibilities:
    1. Normalizes the raw input via the Normalizer Port.
    2. Maps invalid / non-finite input to the fallback or the profile tokens.
    3. Short-circuits sign and zero, then dispatches to the format handler.
    4. Traces the conversion and turns scale overflow into the fallback when one is given.
    """

    def __init__(
        self,
        repository: IProfileRepository,
        normalizer: INumberNormalizer,
        default_fallback: Optional[str] = None,
        round_currency: bool = False,
    ):
        self.repository = repository
        self.normalizer = normalizer
        self.default_fallback = default_fallback
        self.round_currency = round_currency

    def execute(
        self,
        value: Any,
        lang_code: str,
        options: Optional[ConversionOptions] = None,
        fallback: Optional[str] = None,
    ) -> str:
        """
        Executes the conversion.

        Args:
            value: int, float, str or Decimal.
            lang_code: A registered language tag (e.g. 'en', 'ru').
            options: Rendering options; defaults when omitted.
            fallback: Returned for invalid input and scale overflow.

        Returns:
            The number in words.

        Raises:
            LanguageNotFoundError: Unknown language tag.
            ScaleOverflowError: Magnitude too large and no fallback given.
        """
        options = options or ConversionOptions()
        if fallback is None:
            fallback = self.default_fallback
        mode = "currency" if options.currency else options.format.value

        with tracer.start_as_current_span("use_case.convert_number") as span, \
                structlog.contextvars.bound_contextvars(lang=lang_code, mode=mode):
            span.set_attribute("numwords.lang", lang_code)
            span.set_attribute("numwords.mode", mode)

            profile = self.repository.get(lang_code)
            logger.debug("conversion_started")

            try:
                number = self.normalizer.normalize(value)
            except InvalidInputError as e:
                logger.debug("invalid_input", error=e.message)
                return fallback if fallback is not None else profile.not_a_number
            except NonFiniteInputError as e:
                return profile.negative_infinity if e.negative else profile.infinity

            try:
                text = self._render(profile, number, options)
            except ScaleOverflowError as e:
                logger.warning("scale_overflow", limit=str(e.limit))
                if fallback is not None:
                    return fallback
                raise
            except DomainError:
                raise
            except Exception as e:
                logger.error("conversion_failed", error=str(e), exc_info=True)
                raise DomainError(f"Unexpected conversion failure: {str(e)}")

            span.set_attribute("numwords.output_length", len(text))
            return text

    def _render(self, profile: GrammarProfile, number: Decimal, options: ConversionOptions) -> str:
        converter = IntegerConverter(profile)
        negative = number.is_signed() and not number.is_zero()
        magnitude = number.copy_abs()

        if options.format == Format.YEAR and not options.currency:
            return YearFormatter(converter).format(magnitude, negative, options)

        if options.currency:
            text = CurrencyFormatter(converter).format(magnitude, options, self.round_currency)
        elif magnitude.is_zero():
            return profile.zero
        else:
            text = StandardFormatter(converter).format(magnitude, options)

        if not negative:
            return text
        prefix = (profile.negative_word if options.negative_prefix is None else options.negative_prefix).strip()
        return f"{prefix} {text}" if prefix else text
