"""Protocol for fetching the station status."""

from typing import Protocol

from ev_station_monitor.domain.models.station_snapshot import StationSnapshot


class StatusFetcherProtocol(Protocol):
    """Protocol for retrieving the raw station status payload."""

    async def fetch_status(self) -> StationSnapshot:
        """Fetch the current station status.

        Raises:
            StationTimeoutError: The request exceeded the timeout.
            StationUnreachableError: The station answered with a non-2xx status.
            StationTransportError: The request failed below the HTTP level.
        """
        ...
