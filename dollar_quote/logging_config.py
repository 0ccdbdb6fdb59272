"""
Process-wide logging setup shared by the server, client and provisioning.
"""

import logging
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration read from LOG_* environment variables."""

    log_level: str = Field(default="INFO", description="Root logger level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Record format for every handler",
    )
    log_file: str = Field(
        default="dollar_quote.log", description="File receiving a copy of the log"
    )
    log_to_file: bool = Field(default=True, description="Also log to log_file")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Route every logger to stdout and, when enabled, to the log file."""
    settings = settings or LoggingSettings()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_to_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format,
        handlers=handlers,
        force=True,
    )
