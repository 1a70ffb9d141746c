"""Typed runtime settings with dotenv support and startup validation."""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from actuator.endpoints.interfaces import ENDPOINT_ID_PATTERN


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class ActuatorSettings(BaseSettings):
    """Application settings for the management HTTP surface.

    Environment variable names map directly to field names in uppercase.
    Example: `management_base_path` reads from `MANAGEMENT_BASE_PATH`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        management_base_path: Path prefix under which management endpoints are mounted.
        management_health_down_status_code: HTTP status returned when aggregated health is DOWN.
        custom_endpoint_id: Path segment of the custom management endpoint.
        custom_endpoint_enabled: Whether the custom management endpoint answers requests.
        health_random_seed: Optional seed for the randomized health indicator.
        info_properties: Static key/value pairs published on the info endpoint.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    management_base_path: str = Field(default="/actuator")
    management_health_down_status_code: int = Field(default=503, ge=200, le=599)
    custom_endpoint_id: str = Field(default="customguru", min_length=1)
    custom_endpoint_enabled: bool = Field(default=True)
    health_random_seed: int | None = Field(default=None)
    info_properties: dict[str, str] = Field(default_factory=dict)
    log_level: str = Field(default="INFO")

    @field_validator("management_base_path")
    @classmethod
    def _validate_base_path(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value.startswith("/") or stripped_value == "/":
            raise ValueError("management_base_path must start with '/' and must not be the root path")
        if stripped_value.endswith("/"):
            raise ValueError("management_base_path must not end with '/'")
        return stripped_value

    @field_validator("custom_endpoint_id")
    @classmethod
    def _validate_endpoint_id(cls, value: str) -> str:
        stripped_value = value.strip()
        if not ENDPOINT_ID_PATTERN.fullmatch(stripped_value):
            raise ValueError("custom_endpoint_id must be a single literal path segment of letters, digits, '_' or '-'")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized_value), int):
            raise ValueError(f"unknown log level: {value}")
        return normalized_value


def config_load_settings() -> ActuatorSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        ActuatorSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return ActuatorSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
