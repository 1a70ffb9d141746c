"""Custom management endpoint contracts and implementations."""

from .custom_guru import CustomGuruEndpoint
from .interfaces import ENDPOINT_ID_PATTERN, ManagementEndpointPort

__all__ = ["CustomGuruEndpoint", "ENDPOINT_ID_PATTERN", "ManagementEndpointPort"]
