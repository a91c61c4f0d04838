"""Pollers for the web adapter."""

from ev_station_monitor.adapters.web.pollers.status_poller import StatusPoller

__all__ = ["StatusPoller"]
