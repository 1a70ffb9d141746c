"""API router package for management endpoint composition."""

from .endpoint import ENDPOINT_DISABLED_MESSAGE, api_create_endpoint_router
from .health import api_create_health_router
from .index import api_create_index_router
from .info import api_create_info_router

__all__ = [
    "ENDPOINT_DISABLED_MESSAGE",
    "api_create_endpoint_router",
    "api_create_health_router",
    "api_create_index_router",
    "api_create_info_router",
]
