"""
Application settings module.

Manages all configuration via environment variables using pydantic-settings.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class CommandSettings(BaseSettings):
    """Command parsing limits."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MCS_CMD_", extra="ignore")

    max_name_length: int = 32     # Longest accepted command name
    max_line_length: int = 1024   # Longest queued command line


class ShellSettings(BaseSettings):
    """Interactive shell settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MCS_SHELL_", extra="ignore")

    prompt: str = "> "
    exit_code: int = 0


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MCS_",
        extra="ignore",
    )

    log_level: str = "INFO"
    version: str = "0.0.5"

    commands: CommandSettings = CommandSettings()
    shell: ShellSettings = ShellSettings()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
