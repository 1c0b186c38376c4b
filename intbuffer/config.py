"""Package Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All settings come from INTBUFFER_* environment variables or a .env file
    - get_settings() is cached (lru_cache) — single instance per process
    - The construction capacity is not a setting: it is fixed at DEFAULT_CAPACITY

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out of the box with no environment
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from intbuffer.core.domain_types import DEFAULT_CAPACITY, LogFormat


class Settings(BaseSettings):
    """Package settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="INTBUFFER_", env_file=".env", case_sensitive=False,
    )

    # Allocation ceiling for buffer growth; None = unbounded
    max_capacity: int | None = None

    @field_validator("max_capacity")
    @classmethod
    def check_max_capacity(cls, v: int | None) -> int | None:
        """A ceiling below the default capacity could not hold a fresh buffer."""
        if v is not None and v < DEFAULT_CAPACITY:
            raise ValueError(f"max_capacity must be >= {DEFAULT_CAPACITY}")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON


@lru_cache
def get_settings() -> Settings:
    return Settings()
