"""Configuration management with Pydantic Settings."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from slowrm.rate_limiter import DEFAULT_CHUNK_REMOVAL_PER_SECOND, SlowRm
from slowrm.size import U64_MAX, Size, Unit
from slowrm.utils.validators import split_size_text


class AppConfig(BaseSettings):
    """Application configuration."""

    rate: str = Field(default="10MB", validation_alias="SLOWRM_RATE")
    chunk_removal_per_second: int = Field(
        default=DEFAULT_CHUNK_REMOVAL_PER_SECOND,
        gt=0,
        le=U64_MAX,
        validation_alias="SLOWRM_CHUNK_REMOVAL_PER_SECOND",
    )
    log_file: Optional[str] = Field(default=None, validation_alias="LOG_FILE")
    verbose: bool = Field(default=False, validation_alias="VERBOSE")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("rate")
    @classmethod
    def _rate_is_size_text(cls, value: str) -> str:
        # Syntax only; clamping is reported once, when rate_size is built
        _, abbreviation = split_size_text(value)
        Unit.from_abbreviation(abbreviation)
        return value.strip()

    @property
    def rate_size(self) -> Size:
        return Size.parse(self.rate)

    def to_slowrm(self) -> SlowRm:
        """Build the removal rate configuration from the settings."""
        return SlowRm.from_size(self.rate_size, self.chunk_removal_per_second)


def load_app_config() -> AppConfig:
    """Load application configuration.

    Returns:
        Application configuration with defaults.

    Raises:
        ValidationError: If a configured value is invalid.
    """
    return AppConfig()
