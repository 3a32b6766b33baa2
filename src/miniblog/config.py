"""Configuration management using pydantic-settings."""

from pathlib import Path
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MINIBLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    slug_max_length: int = Field(default=50, description="Maximum generated slug length")
    comments_close_after_days: int = Field(
        default=10, description="Days after publication that comments stay open"
    )
    log_level: LogLevel = Field(default="INFO", description="Console log level")

    # Paths
    posts_dir: Path = Field(default=Path("./posts"), description="Directory of post files")
    log_file: Path | None = Field(default=None, description="Optional debug log file")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
