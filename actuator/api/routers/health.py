"""Health endpoint router composition for aggregated indicator checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from actuator.domain import HealthState
from actuator.health import HealthAggregator


def api_create_health_router(
    health_aggregator: HealthAggregator,
    down_status_code: int = status.HTTP_503_SERVICE_UNAVAILABLE,
) -> APIRouter:
    """Create health-check router over the registered indicators.

    Args:
        health_aggregator: Aggregator combining all health indicators.
        down_status_code: HTTP status used when the aggregated state is DOWN.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when health_aggregator is invalid.
    """

    if health_aggregator is None:
        raise ValueError("health_aggregator must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return aggregated health state.

        Returns:
            JSONResponse: `{"status": ...}` payload with optional `details`.
        """

        health_status = health_aggregator.health_aggregate()
        status_code = status.HTTP_200_OK if health_status.status is HealthState.UP else down_status_code
        return JSONResponse(content=health_status.to_payload(), status_code=status_code)

    return router
