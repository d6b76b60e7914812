"""
numwords - cardinal numbers in words, for many languages.

The package follows Hexagonal Architecture (Ports & Adapters): a generic
cardinal engine parameterised by immutable per-language grammar profiles,
wrapped by a conversion use case and a small public API.
"""

from numwords.converter import NumberConverter, convert
from numwords.core.domain.currencies import get_currency
from numwords.core.domain.exceptions import (
    DomainError,
    InvalidInputError,
    LanguageNotFoundError,
    MissingGrammarDataError,
    NonFiniteInputError,
    ScaleOverflowError,
)
from numwords.core.domain.models import (
    ConversionOptions,
    CurrencyInfo,
    DecimalSeparatorStyle,
    Format,
    Gender,
    Lang,
)
from numwords.shared.logging_config import init_library_logging
from numwords.shared.observability import setup_observability

__version__ = "1.0.0"

# Settings-driven setup, once per process.
init_library_logging()
setup_observability()

__all__ = [
    "NumberConverter",
    "convert",
    "get_currency",
    "ConversionOptions",
    "CurrencyInfo",
    "DecimalSeparatorStyle",
    "Format",
    "Gender",
    "Lang",
    "DomainError",
    "InvalidInputError",
    "LanguageNotFoundError",
    "MissingGrammarDataError",
    "NonFiniteInputError",
    "ScaleOverflowError",
]
