"""Availability tracking and rising-edge detection."""

import logging

from ev_station_monitor.domain.models.availability import AvailabilityState

logger = logging.getLogger(__name__)

OCCUPIED_LABEL = "occupied"


def classify(status: str | None) -> AvailabilityState:
    """Classify a status label.

    Anything other than exactly "occupied" (case-insensitive) counts as
    available, including an unset label.
    """
    if status is not None and status.lower() == OCCUPIED_LABEL:
        return AvailabilityState.OCCUPIED
    return AvailabilityState.AVAILABLE


class AvailabilityTracker:
    """Holds the last known availability and detects rising edges."""

    def __init__(self, initial_state: AvailabilityState = AvailabilityState.UNKNOWN) -> None:
        """Initialize the tracker, starting from ``UNKNOWN`` unless told otherwise."""
        self._state = initial_state

    @property
    def state(self) -> AvailabilityState:
        """The last known availability."""
        return self._state

    def observe(self, status: str | None) -> bool:
        """Record an observed status label.

        Args:
            status: The extracted status label, or ``None`` if none was found.

        Returns:
            True if this observation is a transition from not-available to
            available and a notification should go out.
        """
        if status is None or not status.strip():
            logger.debug(f"No status label observed, keeping availability {self._state}")
            return False

        classification = classify(status)
        previous = self._state

        if classification is AvailabilityState.OCCUPIED:
            self._state = AvailabilityState.OCCUPIED
            if previous is not AvailabilityState.OCCUPIED:
                logger.info(f"Station became occupied (was {previous})")
            return False

        if previous is AvailabilityState.AVAILABLE:
            return False

        self._state = AvailabilityState.AVAILABLE
        logger.info(f'Station became available (was {previous}, status "{status}")')
        return True
