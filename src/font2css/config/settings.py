"""Configuration settings for font2css."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class SynthesizerConfig(BaseModel):
    """Configuration for @font-face rule synthesis."""

    dest: str | None = Field(
        default=None,
        description="External base path for src:url() references (None = embed as data URI)",
    )

    @field_validator("dest")
    @classmethod
    def _empty_dest_is_none(cls, value: str | None) -> str | None:
        return value or None


class OutputConfig(BaseModel):
    """Configuration for reading inputs and writing stylesheets."""

    output_dir: Path = Field(
        default=Path("."),
        description="Directory generated stylesheets are written to",
    )
    bundle: str | None = Field(
        default=None,
        description="Concatenate all rules into a single stylesheet with this name",
    )
    buffer: bool = Field(
        default=True,
        description="Read file contents into memory (False = open as streams)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class Font2CssSettings(BaseModel):
    """Main application settings."""

    synthesizer: SynthesizerConfig = Field(default_factory=SynthesizerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> Font2CssSettings:
    """Get default application settings."""
    return Font2CssSettings()
