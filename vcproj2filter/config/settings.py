"""
Configuration module for vcproj2filter using Pydantic Settings.

Values come from environment variables (prefix VCPROJ2FILTER_) or an
optional .env file in the working directory:
- Nested models for output options (VCPROJ2FILTER_OUTPUT__SUFFIX)
- Type validation with defaults
- Unknown VCPROJ2FILTER_ variables are ignored
"""

from functools import lru_cache

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.errors import ValidationError


class OutputConfig(BaseModel):
    """Filters file output configuration."""

    suffix: str = Field(default=".filters", description="Suffix appended to the project path")
    indent: str = Field(default="  ", description="Indentation used for nested elements")

    @field_validator("suffix")
    @classmethod
    def validate_suffix(cls, v: str) -> str:
        """Ensure the suffix looks like a file extension."""
        v = v.strip()
        if len(v) < 2 or not v.startswith("."):
            raise ValidationError(
                f"Invalid output suffix: {v!r}. Must start with '.'", field="suffix", value=v
            )
        return v

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: str) -> str:
        """Indentation may only contain spaces and tabs."""
        if v.strip(" \t"):
            raise ValidationError(
                "Invalid output indent: only spaces and tabs are allowed",
                field="indent",
                value=v,
            )
        return v


class Settings(BaseSettings):
    """
    Main settings class for vcproj2filter.

    Environment variables can be prefixed with VCPROJ2FILTER_
    Nested config uses double underscore: VCPROJ2FILTER_OUTPUT__INDENT
    """

    model_config = SettingsConfigDict(
        env_prefix="VCPROJ2FILTER_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        validate_default=True,
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Application
    app_version: str = Field(default="1.0.0", description="Application version")
    app_env: str = Field(default="production", description="Environment: development/production")
    debug: bool = Field(default=False, description="Debug mode")

    # Logging
    log_level: str = Field(
        default="ERROR", description="Log level: DEBUG/INFO/WARNING/ERROR/CRITICAL"
    )
    log_format: str = Field(default="text", description="Log format: json/text")

    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the valid values."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValidationError(
                f"Invalid log level: {v}. Must be one of {valid_levels}",
                field="log_level",
                value=v,
            )
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        v_lower = v.lower()
        if v_lower not in {"json", "text"}:
            raise ValidationError(
                f"Invalid log format: {v}. Must be json or text", field="log_format", value=v
            )
        return v_lower

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """Validate app environment."""
        valid_envs = {"development", "production", "testing"}
        v_lower = v.lower()
        if v_lower not in valid_envs:
            raise ValidationError(
                f"Invalid app_env: {v}. Must be one of {valid_envs}", field="app_env", value=v
            )
        return v_lower


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    The cache is per-process; tests call get_settings.cache_clear()
    after changing the environment.

    Returns:
        Settings: The application settings
    """
    return Settings()
