"""Typed interfaces for custom management endpoints."""

import re
from typing import Any, Protocol

ENDPOINT_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class ManagementEndpointPort(Protocol):
    """Port definition for an endpoint exposed on the management surface.

    The payload shape is owned by the endpoint; the host only serializes it.
    """

    def endpoint_id(self) -> str:
        """Return the path segment the endpoint is mounted under.

        Returns:
            str: Endpoint identifier, a single path segment.
        """

    def endpoint_is_enabled(self) -> bool:
        """Return whether the endpoint currently answers requests.

        Returns:
            bool: True when requests should reach `endpoint_invoke`.
        """

    def endpoint_invoke(self) -> Any:
        """Produce the endpoint payload.

        Returns:
            Any: JSON-encodable payload.
        """
