"""FastAPI application factory for the management surface.

This module mounts health, info and custom endpoints under the configured
management base path.
"""

from collections.abc import Sequence

from fastapi import FastAPI

from actuator.config import ActuatorSettings
from actuator.endpoints import ENDPOINT_ID_PATTERN, ManagementEndpointPort
from actuator.health import HealthAggregator
from actuator.info import InfoService

from .routers import (
    api_create_endpoint_router,
    api_create_health_router,
    api_create_index_router,
    api_create_info_router,
)

BUILTIN_ENDPOINT_IDS = ("health", "info")


def create_api_application(
    settings: ActuatorSettings,
    health_aggregator: HealthAggregator,
    info_service: InfoService,
    custom_endpoints: Sequence[ManagementEndpointPort] = (),
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings for base path and status mapping.
        health_aggregator: Aggregator backing the health endpoint.
        info_service: Service backing the info endpoint.
        custom_endpoints: Additional endpoints mounted by id next to the built-in ones.

    Returns:
        FastAPI: Framework application instance exposing the management surface.

    Raises:
        ValueError: Raised when a custom endpoint id is not a literal path segment or
            clashes with another endpoint.
    """

    endpoint_ids = list(BUILTIN_ENDPOINT_IDS)
    for custom_endpoint in custom_endpoints:
        custom_endpoint_id = custom_endpoint.endpoint_id()
        if not ENDPOINT_ID_PATTERN.fullmatch(custom_endpoint_id):
            raise ValueError(f"invalid management endpoint id: {custom_endpoint_id!r}")
        if custom_endpoint_id in endpoint_ids:
            raise ValueError(f"duplicate management endpoint id: {custom_endpoint_id}")
        endpoint_ids.append(custom_endpoint_id)

    application = FastAPI(title="Guru Actuator")

    management_routers = [
        api_create_index_router(builtin_endpoint_ids=BUILTIN_ENDPOINT_IDS, custom_endpoints=custom_endpoints),
        api_create_health_router(
            health_aggregator=health_aggregator,
            down_status_code=settings.management_health_down_status_code,
        ),
        api_create_info_router(info_service=info_service),
    ]
    management_routers.extend(api_create_endpoint_router(endpoint=custom_endpoint) for custom_endpoint in custom_endpoints)
    for management_router in management_routers:
        application.include_router(management_router, prefix=settings.management_base_path)

    return application
