"""Environment-driven configuration for the time-words service.

Every knob the service reads lives on ``AppSettings``. Values come from the
process environment first, then ``.env``/``.env.local`` files, then the
defaults below, so the service boots in development without extra setup.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any, Iterable

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class AppSettings(BaseSettings):
    """Environment-driven application configuration."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Time Words"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = False

    # App binding (uvicorn app.main:app --host $HOST --port $PORT)
    HOST: str = "0.0.0.0"
    PORT: int = 8089

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    ALLOWED_ORIGINS: Annotated[list[str], NoDecode] = Field(default_factory=list)
    METRICS_ENABLED: bool = True

    # Upper bound on entries accepted by POST /api/v1/time-words
    BATCH_LIMIT: int = Field(default=100, ge=1)

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def parse_allowed_origins(cls, value: Any) -> list[str]:
        if value in (None, "", []):
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, Iterable):
            return [str(item).strip() for item in value if str(item).strip()]
        raise TypeError("ALLOWED_ORIGINS must be a comma separated string or list")

    @field_validator("LOG_LEVEL", mode="after")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown LOG_LEVEL {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()


# Importing ``settings`` anywhere gives the configured values without
# rebuilding the object each time.
settings = get_settings()
