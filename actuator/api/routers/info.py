"""Info endpoint router composition."""

from fastapi import APIRouter

from actuator.info import InfoService


def api_create_info_router(info_service: InfoService) -> APIRouter:
    """Create router exposing the merged info document.

    Args:
        info_service: Service running all info contributors.

    Returns:
        APIRouter: Router exposing `/info` endpoint.

    Raises:
        ValueError: Raised when info_service is invalid.
    """

    if info_service is None:
        raise ValueError("info_service must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/info")
    def api_info() -> dict[str, str]:
        """Return the merged info document.

        Returns:
            dict[str, str]: Entries from every registered contributor.
        """

        return info_service.info_collect()

    return router
