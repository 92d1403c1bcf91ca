"""Library settings and configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with flat structure."""

    # Logging Configuration
    log_level: str = "WARNING"
    log_file: Path | None = None

    # Substitution behaviour
    validate_types: bool = True
    # Treat any falsy resolved value as missing (legacy truthiness check)
    falsy_is_missing: bool = False

    # DataFrame rendering
    batch_output_column: str = "rendered"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
