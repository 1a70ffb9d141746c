"""Aggregation of registered health indicators into one health result."""

import logging
from collections.abc import Sequence

from actuator.domain import HealthState, HealthStatus

from .interfaces import HealthIndicatorPort

logger = logging.getLogger(__name__)


class HealthAggregator:
    """Combine indicator results into the overall management health.

    The overall state is the most severe indicator state and the details of all
    indicators are merged into one mapping. An indicator that raises is counted
    as DOWN with its name, or its class name when the name is unavailable,
    mapped to the error description.
    """

    def __init__(self, indicators: Sequence[HealthIndicatorPort]):
        """Initialize aggregator.

        Args:
            indicators: Health indicators queried on every aggregation.

        Raises:
            ValueError: Raised when indicators is None or contains None.
        """

        if indicators is None:
            raise ValueError("indicators must not be None")
        if any(indicator is None for indicator in indicators):
            raise ValueError("indicators must not contain None")
        self._indicators = tuple(indicators)

    def health_aggregate(self) -> HealthStatus:
        """Query every indicator once and fold the results.

        Returns:
            HealthStatus: Aggregated health; UP when no indicators are registered.
        """

        overall_state = HealthState.UP
        merged_details: dict[str, str] = {}
        for indicator in self._indicators:
            indicator_status = self._health_check_indicator(indicator)
            if indicator_status.status.severity > overall_state.severity:
                overall_state = indicator_status.status
            merged_details.update(indicator_status.details)

        logger.debug("Aggregated %d health indicators to %s", len(self._indicators), overall_state.value)
        return HealthStatus(status=overall_state, details=merged_details)

    def _health_check_indicator(self, indicator: HealthIndicatorPort) -> HealthStatus:
        """Run one indicator, converting raised errors into a DOWN result.

        Returns:
            HealthStatus: Indicator result or DOWN with the error description.
        """

        try:
            return indicator.check_health()
        except Exception as error:  # pylint: disable=broad-exception-caught
            indicator_name = self._health_indicator_label(indicator)
            logger.exception("Health indicator %s failed", indicator_name)
            return HealthStatus.down().with_detail(indicator_name, f"{type(error).__name__}: {error}").build()

    @staticmethod
    def _health_indicator_label(indicator: HealthIndicatorPort) -> str:
        """Resolve an indicator name for failure reporting.

        Returns:
            str: Indicator name, or its class name when the name is blank or the call raises.
        """

        try:
            indicator_name = indicator.health_indicator_name()
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Health indicator %s failed to report its name", type(indicator).__name__)
            return type(indicator).__name__
        return indicator_name.strip() or type(indicator).__name__
