"""Settings for hook registration, dispatch and logging."""

from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


__all__ = ["HookSettings", "LoggingSettings", "load_settings"]


class LoggingSettings(BaseModel):
    """structlog output configuration."""

    level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    format: str = Field(
        default="console",
        description="Output format: 'console' for development, 'json' for production",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        upper_v = v.upper()
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @field_validator("format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate and normalize log format."""
        lower_v = v.lower()
        valid_formats = ["console", "json"]
        if lower_v not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return lower_v


class HookSettings(BaseSettings):
    """
    Hook system settings.

    Loaded from ``LEVELHOOKS_`` prefixed environment variables, e.g.
    ``LEVELHOOKS_UNKNOWN_LEVELS=ignore`` or ``LEVELHOOKS_LOGGING__FORMAT=json``.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEVELHOOKS_",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    unknown_levels: Literal["reject", "ignore"] = Field(
        default="reject",
        description=(
            "What registration does with a level it does not recognize: "
            "'reject' raises and registers nothing, 'ignore' skips that level"
        ),
    )

    log_failures: bool = Field(
        default=True,
        description="Log each hook failure when emitting through the dispatcher",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="structlog output configuration",
    )


def load_settings(**overrides: Any) -> HookSettings:
    """Build settings from the environment plus explicit overrides.

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return HookSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid levelhooks settings: {e}") from e
