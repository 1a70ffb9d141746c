"""Tests for runtime settings loading and validation."""

import logging

import pytest

from actuator.config import ActuatorSettings, SettingsLoadError, config_configure_logging, config_load_settings


def test_config_load_settings_applies_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Load defaults when no management variables are set.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when defaults differ.
    """

    for variable_name in ("MANAGEMENT_BASE_PATH", "CUSTOM_ENDPOINT_ID", "INFO_PROPERTIES", "LOG_LEVEL"):
        monkeypatch.delenv(variable_name, raising=False)

    settings = config_load_settings()

    assert settings.management_base_path == "/actuator"
    assert settings.management_health_down_status_code == 503
    assert settings.custom_endpoint_id == "customguru"
    assert settings.info_properties == {}
    assert settings.log_level == "INFO"


def test_config_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read overrides, including JSON info properties, from environment.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when environment values are ignored.
    """

    monkeypatch.setenv("MANAGEMENT_BASE_PATH", "/manage")
    monkeypatch.setenv("HEALTH_RANDOM_SEED", "11")
    monkeypatch.setenv("INFO_PROPERTIES", '{"app": "guru"}')
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config_load_settings()

    assert settings.management_base_path == "/manage"
    assert settings.health_random_seed == 11
    assert settings.info_properties == {"app": "guru"}
    assert settings.log_level == "DEBUG"


def test_config_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError for invalid environment values.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when invalid values are accepted.
    """

    monkeypatch.setenv("APPLICATION_PORT", "70000")

    with pytest.raises(SettingsLoadError):
        config_load_settings()


@pytest.mark.parametrize(
    "overrides",
    [
        {"management_base_path": "actuator"},
        {"management_base_path": "/"},
        {"management_base_path": "/actuator/"},
        {"custom_endpoint_id": "a/b"},
        {"custom_endpoint_id": "   "},
        {"custom_endpoint_id": "{x}"},
        {"custom_endpoint_id": "guru.v2"},
        {"log_level": "LOUD"},
        {"management_health_down_status_code": 99},
    ],
)
def test_config_settings_reject_invalid_values(overrides: dict[str, object]) -> None:
    """Reject invalid base paths, endpoint ids, log levels and status codes.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when an invalid value is accepted.
    """

    with pytest.raises(ValueError):
        ActuatorSettings(**overrides)


def test_config_configure_logging_applies_settings_level() -> None:
    """Set the root logger level from settings.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when the configured level is not applied.
    """

    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    try:
        config_configure_logging(ActuatorSettings(log_level="debug"))

        assert root_logger.level == logging.DEBUG
        assert root_logger.handlers
    finally:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)
