"""Health indicator implementations and aggregation."""

from .aggregator import HealthAggregator
from .custom_indicator import CUSTOM_HEALTH_ERROR_CODE, CUSTOM_HEALTH_ERROR_MESSAGE, CustomHealthIndicator
from .interfaces import HealthIndicatorPort, RandomSourcePort
from .random_source import SystemRandomSource

__all__ = [
    "CUSTOM_HEALTH_ERROR_CODE",
    "CUSTOM_HEALTH_ERROR_MESSAGE",
    "CustomHealthIndicator",
    "HealthAggregator",
    "HealthIndicatorPort",
    "RandomSourcePort",
    "SystemRandomSource",
]
