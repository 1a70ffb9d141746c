"""Randomized health indicator used to exercise DOWN handling end to end."""

import logging

from actuator.domain import HealthStatus

from .interfaces import RandomSourcePort
from .random_source import SystemRandomSource

logger = logging.getLogger(__name__)

CUSTOM_HEALTH_ERROR_CODE = "ERR-001"
CUSTOM_HEALTH_ERROR_MESSAGE = "Random Failure"


class CustomHealthIndicator:
    """Health indicator that flips a coin on every query."""

    def __init__(self, random_source: RandomSourcePort | None = None):
        """Initialize indicator.

        Args:
            random_source: Boolean source; a fresh `SystemRandomSource` when omitted.
        """

        self._random_source = random_source if random_source is not None else SystemRandomSource()

    def health_indicator_name(self) -> str:
        """Return the indicator name used in logs and aggregation.

        Returns:
            str: Constant indicator name.
        """

        return "custom"

    def check_health(self) -> HealthStatus:
        """Draw one boolean and map it to a health result.

        Returns:
            HealthStatus: DOWN with `ERR-001` detail when the draw is true, otherwise UP.
        """

        if self._random_source.next_boolean():
            logger.warning("Health indicator %s reported DOWN: %s", self.health_indicator_name(), CUSTOM_HEALTH_ERROR_CODE)
            return HealthStatus.down().with_detail(CUSTOM_HEALTH_ERROR_CODE, CUSTOM_HEALTH_ERROR_MESSAGE).build()

        return HealthStatus.up().build()
