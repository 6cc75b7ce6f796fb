"""Runtime settings read from environment variables."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_USER_AGENT = "sitehandles/0.1"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Settings for fetching pages and running the command line tool."""

    http_timeout: float = Field(20.0, gt=0, description="HTTP timeout in seconds")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header for page requests")
    log_level: str = Field("INFO", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from ``SITEHANDLES_*`` environment variables."""

    environ = os.environ if environ is None else environ
    values = {
        "http_timeout": environ.get("SITEHANDLES_HTTP_TIMEOUT"),
        "user_agent": environ.get("SITEHANDLES_USER_AGENT"),
        "log_level": environ.get("SITEHANDLES_LOG_LEVEL"),
    }
    return Settings(**{key: value for key, value in values.items() if value})
