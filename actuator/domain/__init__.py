"""Domain models used across application layer boundaries."""

from .models import HealthBuilder, HealthState, HealthStatus, InfoBuilder, InfoRecord

__all__ = ["HealthBuilder", "HealthState", "HealthStatus", "InfoBuilder", "InfoRecord"]
