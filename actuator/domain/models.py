"""Typed domain models shared across runtime layers.

Health and info results are value objects built fresh for every management
query and discarded once the response has been rendered.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

InfoRecord = dict[str, str]


class HealthState(str, Enum):
    """Liveness state reported by health indicators.

    Members are ordered by severity so aggregation can pick the worst one.
    """

    UP = "UP"
    DOWN = "DOWN"

    @property
    def severity(self) -> int:
        """Return aggregation rank, higher meaning more severe.

        Returns:
            int: Severity rank of the state.
        """

        return _HEALTH_STATE_SEVERITY[self]


_HEALTH_STATE_SEVERITY = {HealthState.UP: 0, HealthState.DOWN: 1}


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall liveness state.
        details: Diagnostic code to human-readable message mapping.
    """

    status: HealthState
    details: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze details into a read-only mapping."""

        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    @staticmethod
    def up() -> "HealthBuilder":
        """Start building an UP health result.

        Returns:
            HealthBuilder: Builder preset to UP.
        """

        return HealthBuilder(HealthState.UP)

    @staticmethod
    def down() -> "HealthBuilder":
        """Start building a DOWN health result.

        Returns:
            HealthBuilder: Builder preset to DOWN.
        """

        return HealthBuilder(HealthState.DOWN)

    def to_payload(self) -> dict[str, Any]:
        """Render the wire representation.

        Returns:
            dict[str, Any]: `{"status": ...}` plus `details` when any are present.
        """

        payload: dict[str, Any] = {"status": self.status.value}
        if self.details:
            payload["details"] = dict(self.details)
        return payload


class HealthBuilder:
    """Fluent builder for `HealthStatus` values."""

    def __init__(self, status: HealthState):
        """Initialize builder.

        Args:
            status: Health state of the result being built.
        """

        self._status = status
        self._details: dict[str, str] = {}

    def with_detail(self, code: str, message: str) -> "HealthBuilder":
        """Attach one diagnostic detail.

        Args:
            code: Diagnostic code key.
            message: Human-readable detail message.

        Returns:
            HealthBuilder: The same builder for chaining.

        Raises:
            ValueError: Raised when code is blank.
        """

        if not code or not code.strip():
            raise ValueError("detail code must not be blank")
        self._details[code] = message
        return self

    def build(self) -> HealthStatus:
        """Freeze the builder state into a `HealthStatus`.

        Returns:
            HealthStatus: Immutable health result.
        """

        return HealthStatus(status=self._status, details=self._details)


class InfoBuilder:
    """Accumulates key/value pairs contributed to the info document.

    Later writes to an existing key replace the earlier value.
    """

    def __init__(self) -> None:
        """Initialize an empty builder."""

        self._content: InfoRecord = {}

    def with_detail(self, key: str, value: str) -> "InfoBuilder":
        """Add one info entry.

        Args:
            key: Info key.
            value: Info value.

        Returns:
            InfoBuilder: The same builder for chaining.

        Raises:
            ValueError: Raised when key is blank.
        """

        if not key or not key.strip():
            raise ValueError("info key must not be blank")
        self._content[key] = value
        return self

    def with_details(self, details: Mapping[str, str]) -> "InfoBuilder":
        """Add several info entries at once.

        Args:
            details: Mapping of info keys to values.

        Returns:
            InfoBuilder: The same builder for chaining.

        Raises:
            ValueError: Raised when any key is blank.
        """

        for key, value in details.items():
            self.with_detail(key, value)
        return self

    def build(self) -> InfoRecord:
        """Return a copy of the accumulated info entries.

        Returns:
            InfoRecord: Independent mapping of contributed entries.
        """

        return dict(self._content)
