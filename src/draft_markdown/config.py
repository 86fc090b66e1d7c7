"""Configuration management for draft-markdown."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Rendering settings
    indent_width: int = Field(
        default=4,
        ge=0,
        alias="DRAFT_MARKDOWN_INDENT_WIDTH",
    )

    # File settings
    encoding: str = Field(
        default="utf-8",
        alias="DRAFT_MARKDOWN_ENCODING",
    )
    output_suffix: str = Field(
        default=".md",
        alias="DRAFT_MARKDOWN_OUTPUT_SUFFIX",
    )

    # Logging level used by the CLI when --verbose is not given
    log_level: str = Field(
        default="WARNING",
        alias="DRAFT_MARKDOWN_LOG_LEVEL",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
