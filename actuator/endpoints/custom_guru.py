"""Custom management endpoint mounted by the default application."""

from typing import Any

from .interfaces import ENDPOINT_ID_PATTERN


class CustomGuruEndpoint:
    """Custom endpoint with an empty payload.

    Only its identity and enabled flag are configurable; the payload is an
    empty JSON object.
    """

    def __init__(self, endpoint_id: str = "customguru", enabled: bool = True):
        """Initialize custom endpoint.

        Args:
            endpoint_id: Path segment for the endpoint.
            enabled: Whether the endpoint answers requests.

        Raises:
            ValueError: Raised when endpoint_id is not a single literal path segment.
        """

        stripped_endpoint_id = (endpoint_id or "").strip()
        if not ENDPOINT_ID_PATTERN.fullmatch(stripped_endpoint_id):
            raise ValueError("endpoint_id must be a single literal path segment of letters, digits, '_' or '-'")
        self._endpoint_id = stripped_endpoint_id
        self._enabled = enabled

    def endpoint_id(self) -> str:
        """Return the configured path segment.

        Returns:
            str: Endpoint identifier.
        """

        return self._endpoint_id

    def endpoint_is_enabled(self) -> bool:
        """Return the configured enabled flag.

        Returns:
            bool: True when the endpoint answers requests.
        """

        return self._enabled

    def endpoint_invoke(self) -> dict[str, Any]:
        """Return the endpoint payload.

        Returns:
            dict[str, Any]: Empty JSON object.
        """

        return {}
