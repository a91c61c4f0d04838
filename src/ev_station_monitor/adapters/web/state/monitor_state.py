"""Monitor state dataclass."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ev_station_monitor.domain.models.availability import AvailabilityState
from ev_station_monitor.domain.models.error_details import ErrorDetails
from ev_station_monitor.domain.models.extracted_status import ExtractedStatus


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass
class MonitorState:
    """What the background poller last saw, for display by the browser client."""

    availability: AvailabilityState = AvailabilityState.UNKNOWN
    last_status: ExtractedStatus | None = None
    last_fetched_at: datetime | None = None
    last_checked_at: datetime | None = None
    next_check_at: datetime | None = None
    last_error: ErrorDetails | None = None
    notifications_sent: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the ``/api/monitor`` endpoint."""
        return {
            "availability": self.availability.value,
            "status": self.last_status.status if self.last_status else None,
            "connectorsText": self.last_status.connectors_text if self.last_status else None,
            "lastFetchedAt": _iso(self.last_fetched_at),
            "lastCheckedAt": _iso(self.last_checked_at),
            "nextCheckAt": _iso(self.next_check_at),
            "lastError": self.last_error.model_dump() if self.last_error else None,
            "notificationsSent": self.notifications_sent,
        }
