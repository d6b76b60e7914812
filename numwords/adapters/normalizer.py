# numwords/adapters/normalizer.py
from decimal import Decimal, InvalidOperation
from typing import Any

import structlog

from numwords.core.domain.exceptions import InvalidInputError, NonFiniteInputError
from numwords.core.ports.number_normalizer import INumberNormalizer

logger = structlog.get_logger()


class DecimalNormalizer(INumberNormalizer):
    """
    Turns int, float, str and Decimal input into an exact Decimal.

    Floats go through their shortest repr, so 1.5 becomes Decimal("1.5")
    rather than the binary expansion of the double.
    """

    def normalize(self, value: Any) -> Decimal:
        if value is None or isinstance(value, bool):
            raise InvalidInputError(value, "expected a number")

        if isinstance(value, Decimal):
            number = value
        elif isinstance(value, int):
            return Decimal(value)
        elif isinstance(value, float):
            number = Decimal(repr(value))
        elif isinstance(value, str):
            number = self._parse(value)
        else:
            raise InvalidInputError(value, f"unsupported type '{type(value).__name__}'")

        if number.is_nan():
            raise InvalidInputError(value)
        if number.is_infinite():
            raise NonFiniteInputError(negative=number.is_signed())
        return number

    def _parse(self, text: str) -> Decimal:
        try:
            return Decimal(text.strip())
        except InvalidOperation:
            logger.debug("input_parse_failed", raw=text)
            raise InvalidInputError(text, "unparseable string") from None
