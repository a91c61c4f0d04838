"""Protocol for tracking station availability."""

from typing import Protocol

from ev_station_monitor.domain.models.availability import AvailabilityState


class AvailabilityTrackerProtocol(Protocol):
    """Protocol for holding availability state across polls."""

    @property
    def state(self) -> AvailabilityState:
        """The last known availability."""
        ...

    def observe(self, status: str | None) -> bool:
        """Record a status label and return True on a rising edge to available."""
        ...
