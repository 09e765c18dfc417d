"""Runtime configuration read from environment variables.

Example .env:
    LOG_LEVEL=DEBUG
    LOG_FORMAT=json
    BURNFIT_LOCALE=en
    BURNFIT_EFFORT_POLICY=conservative
    BURNFIT_SAFETY_MARGIN_PERCENT=15
"""

import os
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Settings(BaseModel):
    """Validated settings.

    Invalid values raise pydantic.ValidationError when the settings are
    built, never later.
    """

    model_config = ConfigDict(frozen=True)

    log_level: str = Field(default="INFO", description="Standard logging level name")
    log_format: Literal["console", "json"] = "console"
    locale: Literal["fr", "en"] = "fr"
    effort_policy: Literal["standard", "conservative"] = "standard"
    safety_margin_percent: float = Field(default=10.0, ge=0)
    catalog_backend: Literal["static"] = "static"

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build settings from the environment.

    Args:
        env_file: Optional path of a .env file (defaults to ./.env if present).
            Variables already set in the environment take precedence.

    Returns:
        Settings
    """
    load_dotenv(env_file)

    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=os.getenv("LOG_FORMAT", "console").lower(),
        locale=os.getenv("BURNFIT_LOCALE", "fr").lower(),
        effort_policy=os.getenv("BURNFIT_EFFORT_POLICY", "standard").lower(),
        safety_margin_percent=os.getenv("BURNFIT_SAFETY_MARGIN_PERCENT", "10"),
        catalog_backend=os.getenv("BURNFIT_CATALOG_BACKEND", "static").lower(),
    )
