"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Defaults reproduce the documented demo output exactly (5 slots, probe 3, caught, pt-BR)
    - get_settings() is cached (lru_cache) — single instance per process
    - array_size is never negative
    - 0 <= probe_index < array_size whenever array_size > 0

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - NULLSAFE_ prefix: avoids clashing with generic LOG_LEVEL-style variables
    - Logging defaults to WARNING/text on stderr so stdout carries only demo lines
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nullsafe.core.domain_types import (
    DEFAULT_ARRAY_SIZE, DEFAULT_PROBE_INDEX, DemoVariant, Locale,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NULLSAFE_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Demo
    array_size: int = Field(DEFAULT_ARRAY_SIZE, ge=0)
    probe_index: int = DEFAULT_PROBE_INDEX
    variant: DemoVariant = DemoVariant.CAUGHT
    locale: Locale = Locale.PT_BR

    # API
    service_name: str = "nullsafe-api"
    version: str = "1.0.0"

    # Observability
    log_level: str = "WARNING"
    log_format: str = "text"

    @model_validator(mode="after")
    def probe_within_array(self) -> "Settings":
        """The probed slot must exist whenever the array has slots."""
        if self.array_size > 0 and not 0 <= self.probe_index < self.array_size:
            raise ValueError(
                f"probe_index {self.probe_index} must be in "
                f"[0, {self.array_size}) for array_size {self.array_size}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
