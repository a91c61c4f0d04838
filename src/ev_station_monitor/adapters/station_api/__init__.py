"""Station status API adapter."""

from ev_station_monitor.adapters.station_api.station_status_client import (
    DEFAULT_ACCEPT,
    StationStatusClient,
)

__all__ = ["DEFAULT_ACCEPT", "StationStatusClient"]
