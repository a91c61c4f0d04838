"""Application services."""

from ev_station_monitor.application.services.availability_tracker import (
    AvailabilityTracker,
    classify,
)
from ev_station_monitor.application.services.notifier import Notifier
from ev_station_monitor.application.services.status_extractor import (
    StatusExtractor,
    extract_station_info,
)

__all__ = [
    "AvailabilityTracker",
    "Notifier",
    "StatusExtractor",
    "classify",
    "extract_station_info",
]
