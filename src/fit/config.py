"""Configuration management for fit."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import configure_logging


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="FIT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Git invocation
    git_binary: str = Field(default="git", description="Git executable to run")
    locale: str = Field(default="en_US.UTF-8", description="Value forced into LANG for the git process")

    # Presentation
    program_name: str = Field(default="fit", description="Name shown in rebranded usage text")
    show_banner: bool = Field(default=True, description="Print the banner before the output")
    echo_command: bool = Field(default=True, description="Print the git command before running it")
    no_color: bool = Field(default=False, description="Render without ANSI styling")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")


def get_settings() -> Settings:
    """Get application settings and configure logging."""
    settings = Settings()
    configure_logging(settings.log_level)
    return settings
