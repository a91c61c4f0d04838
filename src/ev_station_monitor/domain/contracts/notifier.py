"""Protocol for availability notification fan-out."""

from typing import Protocol

from ev_station_monitor.domain.models.notification import DeliveryResult


class NotifierProtocol(Protocol):
    """Protocol for notifying subscribers that the station is available."""

    async def notify(self, status: str) -> list[DeliveryResult]:
        """Send the notification to all subscribers."""
        ...
