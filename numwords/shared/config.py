from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "numwords"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "numwords"

    # --- Conversion Defaults ---
    # Language used by NumberConverter when none is given
    DEFAULT_LANGUAGE: str = "en"
    # Returned instead of the "not a number" token / overflow error when set
    DEFAULT_FALLBACK: Optional[str] = None
    # Round currency amounts half-up to cents instead of truncating
    ROUND_CURRENCY: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
