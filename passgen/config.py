"""Configuration management for the password generator application.

This module provides type-safe configuration management using Pydantic Settings
with automatic .env file loading and validation.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal


class Settings(BaseSettings):
    """Application settings with type validation and .env file support.

    Configuration precedence: Environment variables > .env file > Defaults

    All settings can be overridden via environment variables.
    Environment variable names are case-insensitive and match the field names.

    Example .env file:
        DEFAULT_LENGTH=12
        CLIPBOARD_BACKEND=pyperclip
        LOG_LEVEL=DEBUG
    """

    # Generator configuration
    default_length: int = Field(
        default=5,
        ge=0,
        le=100,
        description="Length pre-filled in the input field on startup"
    )

    # Window configuration
    window_title: str = Field(
        default="Password Generator",
        description="Main window title"
    )

    window_width: int = Field(
        default=480,
        description="Default main window width in pixels"
    )

    window_height: int = Field(
        default=360,
        description="Default main window height in pixels"
    )

    application_id: str = Field(
        default="org.example.passgen",
        description="Application identifier reported to the desktop session"
    )

    # Clipboard configuration
    clipboard_backend: Literal["none", "pyperclip"] = Field(
        default="none",
        description="Clipboard used by the Copy button ('none' keeps it a no-op)"
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level for application output"
    )

    @field_validator("window_width", "window_height")
    @classmethod
    def validate_window_dimension(cls, v: int) -> int:
        """Validate window dimensions are positive."""
        if v <= 0:
            raise ValueError("window dimensions must be positive")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields in .env file
    )


# Create a global settings instance
# This will be imported and used throughout the application
settings = Settings()
