"""Management index router listing mounted endpoint links."""

from collections.abc import Sequence

from fastapi import APIRouter, Request

from actuator.endpoints import ManagementEndpointPort


def api_create_index_router(
    builtin_endpoint_ids: Sequence[str],
    custom_endpoints: Sequence[ManagementEndpointPort] = (),
) -> APIRouter:
    """Create router exposing `_links` for every reachable management endpoint.

    Args:
        builtin_endpoint_ids: Path segments of the always-enabled endpoints, in display order.
        custom_endpoints: Custom endpoints listed after the built-in ones while enabled.

    Returns:
        APIRouter: Router exposing the management index at the prefix root.
    """

    router = APIRouter(tags=["index"])

    @router.get("")
    def api_management_index(request: Request) -> dict[str, dict[str, dict[str, str]]]:
        """Return hrefs for the index itself and each enabled endpoint.

        Returns:
            dict[str, dict[str, dict[str, str]]]: HAL-style `_links` document.
        """

        self_href = str(request.url.replace(query="")).rstrip("/")
        links = {"self": {"href": self_href}}
        for endpoint_id in builtin_endpoint_ids:
            links[endpoint_id] = {"href": f"{self_href}/{endpoint_id}"}
        for custom_endpoint in custom_endpoints:
            if custom_endpoint.endpoint_is_enabled():
                custom_endpoint_id = custom_endpoint.endpoint_id()
                links[custom_endpoint_id] = {"href": f"{self_href}/{custom_endpoint_id}"}
        return {"_links": links}

    return router
