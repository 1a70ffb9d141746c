"""Typed interfaces for health-layer collaborators."""

from typing import Protocol

from actuator.domain import HealthStatus


class RandomSourcePort(Protocol):
    """Port definition for a boolean randomness source."""

    def next_boolean(self) -> bool:
        """Draw the next uniformly distributed boolean.

        Returns:
            bool: Next boolean in the source sequence.
        """


class HealthIndicatorPort(Protocol):
    """Port definition for components reporting liveness state."""

    def health_indicator_name(self) -> str:
        """Return a stable indicator name for diagnostics.

        Returns:
            str: Indicator name.
        """

    def check_health(self) -> HealthStatus:
        """Report current health.

        Returns:
            HealthStatus: Fresh health result for this call.
        """
