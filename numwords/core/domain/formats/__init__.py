"""Format handlers layered on top of the IntegerConverter."""

from .currency import CurrencyFormatter
from .standard import StandardFormatter
from .year import YearFormatter

__all__ = ["CurrencyFormatter", "StandardFormatter", "YearFormatter"]
