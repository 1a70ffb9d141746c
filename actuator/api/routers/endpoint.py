"""Generic adapter mounting a custom management endpoint on the router."""

import logging

from fastapi import APIRouter, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from actuator.endpoints import ManagementEndpointPort

logger = logging.getLogger(__name__)

ENDPOINT_DISABLED_MESSAGE = "This endpoint is disabled"


def api_create_endpoint_router(endpoint: ManagementEndpointPort) -> APIRouter:
    """Create router delegating `GET /{endpoint id}` to the wrapped endpoint.

    Args:
        endpoint: Custom endpoint providing id, enabled flag and payload.

    Returns:
        APIRouter: Router exposing the endpoint under its id.

    Raises:
        ValueError: Raised when endpoint is invalid.
    """

    if endpoint is None:
        raise ValueError("endpoint must not be None")

    endpoint_id = endpoint.endpoint_id()
    router = APIRouter(tags=["endpoints"])

    @router.get(f"/{endpoint_id}", name=f"endpoint_{endpoint_id}")
    def api_invoke_endpoint() -> JSONResponse:
        """Invoke the wrapped endpoint when it is enabled.

        Returns:
            JSONResponse: Encoded payload, or HTTP 404 when the endpoint is disabled.
        """

        if not endpoint.endpoint_is_enabled():
            logger.info("Rejected request to disabled endpoint %s", endpoint_id)
            return JSONResponse(
                content={"message": ENDPOINT_DISABLED_MESSAGE},
                status_code=status.HTTP_404_NOT_FOUND,
            )
        return JSONResponse(content=jsonable_encoder(endpoint.endpoint_invoke()), status_code=status.HTTP_200_OK)

    return router
