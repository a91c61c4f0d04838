"""Availability state domain model."""

from enum import StrEnum


class AvailabilityState(StrEnum):
    """Last known availability of the station."""

    UNKNOWN = "unknown"
    AVAILABLE = "available"
    OCCUPIED = "occupied"
