# numwords/core/domain/exceptions.py
from typing import Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Lookup Errors ---

class LanguageNotFoundError(DomainError):
    """Raised when a conversion is requested for a language tag that has no registered profile."""
    def __init__(self, lang_code: str):
        self.lang_code = lang_code
        super().__init__(f"Language '{lang_code}' is not supported or not found in the registry.")

class CurrencyNotFoundError(DomainError):
    """Raised when a currency code is missing from the catalogue."""
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Currency '{code}' not found in the currency catalogue.")

# --- Input Errors ---

class InvalidInputError(DomainError):
    """Raised when the input cannot be read as a finite number (None, NaN, garbage strings)."""
    def __init__(self, value: object, reason: str = "not a number"):
        self.value = value
        super().__init__(f"Invalid numeric input {value!r}: {reason}")

class NonFiniteInputError(DomainError):
    """Raised for positive or negative infinity."""
    def __init__(self, negative: bool):
        self.negative = negative
        sign = "-" if negative else "+"
        super().__init__(f"Non-finite numeric input: {sign}infinity")

# --- Engine Errors ---

class ScaleOverflowError(DomainError):
    """Raised when a magnitude needs a scale word beyond the profile's scale table."""
    def __init__(self, value: int, limit: int, lang_code: Optional[str] = None):
        self.value = value
        self.limit = limit
        self.lang_code = lang_code
        where = f" for '{lang_code}'" if lang_code else ""
        super().__init__(f"Number {value} exceeds the largest supported magnitude{where} ({limit}).")

class MissingGrammarDataError(DomainError):
    """
    Raised when a profile or currency record lacks a required form.
    Always recovered locally by falling back to the singular form.
    """
    def __init__(self, what: str, lang_code: Optional[str] = None):
        self.what = what
        self.lang_code = lang_code
        where = f" in '{lang_code}'" if lang_code else ""
        super().__init__(f"Missing grammar data{where}: {what}")

class NegativeMagnitudeError(DomainError, ValueError):
    """Raised when a negative magnitude reaches the integer engine (caller contract violation)."""
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Integer engine requires a non-negative magnitude, got {value}.")

class ProfileConfigurationError(DomainError):
    """Raised when a grammar profile is structurally invalid or registered twice."""
    def __init__(self, lang_code: str, details: str):
        self.lang_code = lang_code
        super().__init__(f"Invalid grammar profile '{lang_code}': {details}")
