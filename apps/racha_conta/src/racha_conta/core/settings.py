"""Application settings loaded from environment variables."""

from decimal import Decimal
from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Runtime settings for summary rendering and the CLI."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    settled_epsilon: Decimal = Field(
        default=Decimal("0.01"),
        alias="SETTLED_EPSILON",
        gt=0,
    )
    log_level: LogLevel = Field(default="WARNING", alias="LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for the current process."""

    return Settings()
