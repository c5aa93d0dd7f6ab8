"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file).
Settings are organized into logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_PLACES_PATH = Path(__file__).resolve().parent.parent / "data" / "places.json"


class DecoderSettings(BaseSettings):
    """Codice fiscale decoding policy."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    places_path: Path = Field(
        default=_DEFAULT_PLACES_PATH,
        description="JSON file mapping Belfiore codes to place of birth records",
    )
    century_reference_date: date | None = Field(
        default=None,
        description="Two-digit years resolve to the latest year not after this date (default: today)",
    )
    century: int | None = Field(
        default=None,
        description="Force every two-digit year into this century (e.g. 1900)",
    )
    strict_calendar: bool = Field(
        default=False,
        description="Reject days that do not exist in the month (e.g. 30 February)",
    )
    allow_temporary_codes: bool = Field(
        default=False,
        description="Accept 11-digit temporary codes in validate()",
    )

    @field_validator("century")
    @classmethod
    def validate_century(cls, v: int | None) -> int | None:
        """Ensure the century hint is a whole century."""
        if v is not None and (v % 100 != 0 or not 100 <= v <= 9900):
            msg = f"Invalid century: {v}. Must be a multiple of 100 between 100 and 9900"
            raise ValueError(msg)
        return v


class ApiSettings(BaseSettings):
    """HTTP API bind address."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=8000)


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.decoder.places_path
        settings.api.api_port
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Composed settings (loaded from same .env)
    decoder: DecoderSettings = Field(default_factory=DecoderSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
