"""Tests for health and info value objects."""

import pytest

from actuator.domain import HealthState, HealthStatus, InfoBuilder


def test_domain_health_status_up_payload_omits_details() -> None:
    """Render UP results without a details key.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when payload shape is unexpected.
    """

    health_status = HealthStatus.up().build()

    assert health_status.status is HealthState.UP
    assert health_status.to_payload() == {"status": "UP"}


def test_domain_health_status_down_payload_includes_details() -> None:
    """Render DOWN results with their diagnostic details.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when payload shape is unexpected.
    """

    health_status = HealthStatus.down().with_detail("ERR-001", "Random Failure").build()

    assert health_status.to_payload() == {"status": "DOWN", "details": {"ERR-001": "Random Failure"}}


def test_domain_health_status_details_are_read_only() -> None:
    """Reject mutation of built health details.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when details can be mutated.
    """

    health_status = HealthStatus.down().with_detail("ERR-001", "Random Failure").build()

    with pytest.raises(TypeError):
        health_status.details["ERR-002"] = "other"  # type: ignore[index]


def test_domain_health_builder_rejects_blank_detail_code() -> None:
    """Reject blank detail codes.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when blank codes are accepted.
    """

    with pytest.raises(ValueError):
        HealthStatus.down().with_detail("  ", "message")


def test_domain_health_state_severity_orders_down_above_up() -> None:
    """Rank DOWN as more severe than UP.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when severity ordering is wrong.
    """

    assert HealthState.DOWN.severity > HealthState.UP.severity


def test_domain_info_builder_build_returns_independent_copy() -> None:
    """Return a copy so later builder writes do not leak into built records.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when the built record aliases builder state.
    """

    builder = InfoBuilder().with_detail("a", "1")
    first_record = builder.build()
    builder.with_details({"b": "2", "a": "3"})

    assert first_record == {"a": "1"}
    assert builder.build() == {"a": "3", "b": "2"}
