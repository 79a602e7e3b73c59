"""Configuration settings for Nibblefont."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class OutputConfig(BaseModel):
    """Configuration for writing encoded fonts."""

    extension: str = Field(
        default=".nfnt",
        min_length=2,
        description="File extension for encoded fonts",
    )
    overwrite: bool = Field(
        default=False,
        description="Replace an existing output file",
    )

    @field_validator("extension")
    @classmethod
    def _leading_dot(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("extension must start with '.'")
        return value


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class NibbleFontSettings(BaseModel):
    """Main application settings."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> NibbleFontSettings:
    """Get default application settings."""
    return NibbleFontSettings()
