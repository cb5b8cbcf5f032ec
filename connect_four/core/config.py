"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env file.
Provides type-safe access with validation.
"""

import logging
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


MIN_BOARD_SIZE = 4
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# ─────────────────────────────────────────────────────────────
# NESTED SETTINGS
# ─────────────────────────────────────────────────────────────


class GameSettings(BaseSettings):
    """Board and player configuration."""

    model_config = SettingsConfigDict(env_prefix="GAME_")

    height: int = Field(default=6, ge=MIN_BOARD_SIZE, description="Number of rows")
    width: int = Field(default=7, ge=MIN_BOARD_SIZE, description="Number of columns")
    player1_color: str = "red"
    player2_color: str = "gold"


class LogSettings(BaseSettings):
    """Logging configuration for the CLI."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    def configure(self, level: str | None = None) -> None:
        """Apply these settings to the root logger.

        Raises:
            ValueError: If level is not a known level name
        """
        name = (level or self.level).upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{level}'. Use one of {', '.join(LOG_LEVELS)}.")
        logging.basicConfig(level=getattr(logging, name), format=self.format, force=True)


# ─────────────────────────────────────────────────────────────
# MAIN SETTINGS
# ─────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from .env file and environment variables.
    Environment variables take precedence over .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    game: GameSettings = Field(default_factory=GameSettings)
    log: LogSettings = Field(default_factory=LogSettings)


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None
