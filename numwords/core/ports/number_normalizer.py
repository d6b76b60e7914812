# numwords/core/ports/number_normalizer.py
from decimal import Decimal
from typing import Any, Protocol


class INumberNormalizer(Protocol):
    """
    Port for turning caller input into an exact decimal.
    """

    def normalize(self, value: Any) -> Decimal:
        """
        Returns the exact, finite Decimal for `value`.

        Raises:
            InvalidInputError: None, bool, NaN or unparseable input.
            NonFiniteInputError: Positive or negative infinity.
        """
        ...
