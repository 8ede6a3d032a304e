"""Library configuration using Pydantic Settings.

Environment variables are loaded with the REFSTYLE_ prefix. The settings
are read once per process; formatters copy the values they need at
construction time and never look at the environment again.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Service configuration
    service_name: str = "refstyle"
    environment: str = Field(default="development", description="Runtime environment")
    log_level: str = Field(default="INFO", description="Logging level")

    # Name-list configuration
    et_al_threshold: int = Field(
        default=6,
        ge=0,
        description="Name count at which lists collapse to two names and 'et al.' (0 disables)",
    )

    # Casing configuration
    title_case_min_len: int = Field(
        default=4,
        ge=0,
        description="Words at least this long are always capitalized in title case (0 disables)",
    )

    # Static data
    abbreviations_path: Path | None = Field(
        default=None,
        description="Override for the bundled journal-abbreviation YAML table",
    )

    model_config = SettingsConfigDict(
        env_prefix="REFSTYLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Library settings singleton
    """
    return Settings()
