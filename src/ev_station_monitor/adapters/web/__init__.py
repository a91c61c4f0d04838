"""Web adapter for the EV station monitor."""

from ev_station_monitor.adapters.web.server import WebServer, create_app

__all__ = ["WebServer", "create_app"]
