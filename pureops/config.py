"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings feed the CLI only; core functions take explicit arguments
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - PUREOPS_ prefix: avoids clashing with generic LOG_LEVEL variables
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from pureops.core.domain_types import DEFAULT_INT_BITS, OverflowPolicy


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PUREOPS_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Integer semantics for `pureops calc`
    overflow_policy: OverflowPolicy = OverflowPolicy.UNBOUNDED
    int_bits: int = DEFAULT_INT_BITS

    # Observability
    log_level: str = "WARNING"
    log_format: str = "text"

    @field_validator("int_bits")
    @classmethod
    def check_int_bits(cls, v: int) -> int:
        if v < 1:
            raise ValueError("int_bits must be at least 1")
        return v

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
