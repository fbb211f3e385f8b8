"""Configuration management for the git history system."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "console")


class RepositoryConfig(BaseSettings):
    """Repository location settings."""

    repo_path: str = Field(default=".", alias="GIT_HISTORY_REPO_PATH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )


class AppConfig(BaseSettings):
    """Application configuration settings."""

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")

    # History defaults
    default_max_count: int = Field(default=50, alias="DEFAULT_MAX_COUNT", gt=0)
    enhance_commits: bool = Field(default=False, alias="ENHANCE_COMMITS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Check the log renderer name."""
        fmt = v.lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return fmt


class Config:
    """Main configuration class."""

    def __init__(self, repository: Optional[RepositoryConfig] = None, app: Optional[AppConfig] = None) -> None:
        self.repository = repository or RepositoryConfig()
        self.app = app or AppConfig()

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment and .env file."""
        return cls()
