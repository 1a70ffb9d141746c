"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from actuator.api import create_api_application
from actuator.config import ActuatorSettings, config_configure_logging, config_load_settings
from actuator.endpoints import CustomGuruEndpoint
from actuator.health import CustomHealthIndicator, HealthAggregator, SystemRandomSource
from actuator.info import InfoService, JvrInfoContributor, SettingsInfoContributor


def bootstrap_create_health_aggregator(settings: ActuatorSettings) -> HealthAggregator:
    """Build the health aggregator with the default indicators.

    Args:
        settings: Validated settings carrying the optional random seed.

    Returns:
        HealthAggregator: Aggregator over the custom health indicator.
    """

    random_source = SystemRandomSource(seed=settings.health_random_seed)
    return HealthAggregator(indicators=[CustomHealthIndicator(random_source=random_source)])


def bootstrap_create_info_service(settings: ActuatorSettings) -> InfoService:
    """Build the info service with settings-driven and static contributors.

    Args:
        settings: Validated settings carrying static info properties.

    Returns:
        InfoService: Info service over the default contributors.
    """

    return InfoService(
        contributors=[
            SettingsInfoContributor(properties=settings.info_properties),
            JvrInfoContributor(),
        ]
    )


def bootstrap_create_application(settings: ActuatorSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    if settings is None:
        settings = config_load_settings()
        config_configure_logging(settings)
    return create_api_application(
        settings=settings,
        health_aggregator=bootstrap_create_health_aggregator(settings),
        info_service=bootstrap_create_info_service(settings),
        custom_endpoints=[
            CustomGuruEndpoint(
                endpoint_id=settings.custom_endpoint_id,
                enabled=settings.custom_endpoint_enabled,
            )
        ],
    )
