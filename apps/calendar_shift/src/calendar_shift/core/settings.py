"""Application settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from calendar_shift.domain.formatting import DEFAULT_DATE_FORMAT
from calendar_shift.domain.zones import DEFAULT_AMBIGUITY_POLICY, AmbiguityPolicy


class Settings(BaseSettings):
    """Runtime settings for the CLI and API surfaces."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_timezone: str = Field(
        default="local",
        alias="CALENDAR_SHIFT_TIMEZONE",
        min_length=1,
    )
    ambiguity_policy: AmbiguityPolicy = Field(
        default=DEFAULT_AMBIGUITY_POLICY,
        alias="CALENDAR_SHIFT_AMBIGUITY_POLICY",
    )
    output_format: str = Field(
        default=DEFAULT_DATE_FORMAT,
        alias="CALENDAR_SHIFT_OUTPUT_FORMAT",
        min_length=1,
    )
    log_level: str = Field(default="WARNING", alias="CALENDAR_SHIFT_LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for the current process."""

    return Settings()
