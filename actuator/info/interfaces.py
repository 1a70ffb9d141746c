"""Typed interfaces for info-layer collaborators."""

from typing import Protocol

from actuator.domain import InfoBuilder


class InfoContributorPort(Protocol):
    """Port definition for components adding entries to the info document."""

    def contribute(self, builder: InfoBuilder) -> None:
        """Append entries to the shared builder.

        Args:
            builder: Builder shared by all contributors for one info query.
        """
