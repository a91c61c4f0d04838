"""Domain models for the EV station monitor."""

from ev_station_monitor.domain.models.availability import AvailabilityState
from ev_station_monitor.domain.models.error_details import ErrorDetails
from ev_station_monitor.domain.models.extracted_status import (
    PLACEHOLDER_TEXT,
    UNKNOWN_STATUS,
    ExtractedStatus,
)
from ev_station_monitor.domain.models.notification import (
    DeliveryOutcome,
    DeliveryResult,
    NotificationPayload,
)
from ev_station_monitor.domain.models.push_subscription import (
    PushSubscription,
    SubscriptionKeys,
)
from ev_station_monitor.domain.models.station_snapshot import StationSnapshot

__all__ = [
    "PLACEHOLDER_TEXT",
    "UNKNOWN_STATUS",
    "AvailabilityState",
    "DeliveryOutcome",
    "DeliveryResult",
    "ErrorDetails",
    "ExtractedStatus",
    "NotificationPayload",
    "PushSubscription",
    "StationSnapshot",
    "SubscriptionKeys",
]
