"""Protocol for extracting status info from station payloads."""

from typing import Any, Protocol

from ev_station_monitor.domain.models.extracted_status import ExtractedStatus


class StatusExtractorProtocol(Protocol):
    """Protocol for turning a raw payload into a status summary."""

    def extract(self, data: Any) -> ExtractedStatus:
        """Extract status and connector info. Must not raise."""
        ...
