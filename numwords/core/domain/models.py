# numwords/core/domain/models.py
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from numwords.core.domain.exceptions import LanguageNotFoundError

# --- Enums ---

class Lang(str, Enum):
    """
    Closed set of language tags with a registered grammar profile.

    EN_GB is English with "and" after hundreds and before a trailing
    sub-hundred chunk; EN omits it.
    """
    EN = "en"
    EN_GB = "en-GB"
    DE = "de"
    RU = "ru"
    PL = "pl"
    BG = "bg"
    FR = "fr"
    ES = "es"
    KO = "ko"
    ZU = "zu"

    @classmethod
    def from_code(cls, code: str) -> "Lang":
        """Case-insensitive lookup; accepts '_' as well as '-' (e.g. 'en_gb')."""
        normalized = (code or "").strip().replace("_", "-").lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise LanguageNotFoundError(code)

    @classmethod
    def available_codes(cls) -> List[str]:
        return [member.value for member in cls]


class Format(str, Enum):
    """Rendering mode for non-currency conversions."""
    STANDARD = "standard"
    YEAR = "year"


class DecimalSeparatorStyle(str, Enum):
    """Which word introduces the fractional digits."""
    COMMA = "comma"
    POINT = "point"
    PERIOD = "period"  # alias of POINT


class Gender(str, Enum):
    """Common agreement hints. Profiles may accept other class names (e.g. noun classes)."""
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"

# --- Value Objects ---

class CurrencyInfo(BaseModel):
    """
    Unit names for one currency in one language.
    Missing plural forms fall back to the singular.
    """
    model_config = ConfigDict(frozen=True)

    main_unit_singular: str = Field(..., description="e.g. 'dollar', 'рубль'")
    main_unit_plural: Optional[str] = Field(None, description="Generic plural, e.g. 'dollars'")
    main_unit_few: Optional[str] = Field(None, description="Slavic 2-4 form, e.g. 'рубля'")
    main_unit_many: Optional[str] = Field(None, description="Slavic genitive plural, e.g. 'рублей'")

    sub_unit_singular: Optional[str] = None
    sub_unit_plural: Optional[str] = None
    sub_unit_few: Optional[str] = None
    sub_unit_many: Optional[str] = None

    separator: Optional[str] = Field(None, description="Word between main and sub units; profile default when unset")

    # Agreement class the numeral takes for each unit (gender or noun class)
    main_unit_class: Optional[str] = None
    main_unit_plural_class: Optional[str] = None
    sub_unit_class: Optional[str] = None
    sub_unit_plural_class: Optional[str] = None


class ConversionOptions(BaseModel):
    """
    Options recognised by `convert`.
    Unset fields take the language profile's defaults.
    """
    model_config = ConfigDict(frozen=True)

    currency: bool = False
    currency_info: Optional[CurrencyInfo] = None
    format: Format = Format.STANDARD
    decimal_separator: Optional[DecimalSeparatorStyle] = None
    include_era_for_positive_years: bool = False
    negative_prefix: Optional[str] = None
    gender: Optional[Union[Gender, str]] = Field(None, description="Agreement hint for the units numeral")
    round: bool = False
