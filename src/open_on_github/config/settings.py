"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OPEN_ON_GITHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Remote selection: this name wins, otherwise the first remote listed
    preferred_remote: str = "origin"

    # Hand resolved URLs to the platform browser
    open_browser: bool = True

    # Git CLI
    git_executable: str = "git"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
