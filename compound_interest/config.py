import os
from functools import lru_cache
from typing import List, Mapping, Optional

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from compound_interest.core.constants import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_DOUBLING_CAP_YEARS,
    MAX_SOLVED_RATE_PERCENT,
    MIN_SOLVED_RATE_PERCENT,
)

ENV_PREFIX = "COMPOUND_"


class ConfigurationError(Exception):
    """Raised when the environment holds an invalid setting."""


class Settings(BaseModel):
    """Application settings, read from COMPOUND_* environment variables."""

    log_level: str = Field("INFO", description="Minimum level for the stderr log sink.")
    cors_origins: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CORS_ORIGINS),
        description="Origins allowed to call /api/*.",
    )
    doubling_cap_years: int = Field(
        DEFAULT_DOUBLING_CAP_YEARS,
        gt=0,
        description="Years simulated before a doubling estimate gives up.",
    )
    min_solved_rate: float = Field(MIN_SOLVED_RATE_PERCENT)
    max_solved_rate: float = Field(MAX_SOLVED_RATE_PERCENT)

    @field_validator("log_level")
    @classmethod
    def normalise_level(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @model_validator(mode="after")
    def check_rate_bounds(self) -> "Settings":
        if self.min_solved_rate >= self.max_solved_rate:
            raise ValueError("min_solved_rate must be lower than max_solved_rate")
        return self


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``environ`` (defaults to os.environ)."""
    environ = os.environ if environ is None else environ
    values = {
        name[len(ENV_PREFIX):].lower(): value
        for name, value in environ.items()
        if name.startswith(ENV_PREFIX)
    }
    unknown = set(values) - set(Settings.model_fields)
    if unknown:
        logger.warning(f"Ignoring unknown settings: {', '.join(sorted(unknown))}")
        values = {k: v for k, v in values.items() if k not in unknown}

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {ENV_PREFIX}* settings: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
