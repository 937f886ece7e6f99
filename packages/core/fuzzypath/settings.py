"""Package settings using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from FUZZYPATH_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FUZZYPATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    check_unchecked: bool = Field(
        default=False,
        description="Verify strings passed to FuzzyPath.from_normalized_unchecked",
    )


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
