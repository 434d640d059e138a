"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GIT_BUILD_SOURCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool = False

    # Repository defaults for new build plans
    default_branch: str = "master"

    # Git command execution
    git_binary: str = "git"
    command_timeout: float | None = None  # seconds, None waits forever


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
