"""Servers for the web adapter."""

from ev_station_monitor.adapters.web.servers.static_file_server import (
    SinglePageStaticFiles,
    StaticFileCacheApp,
    StaticFileServer,
)

__all__ = ["SinglePageStaticFiles", "StaticFileCacheApp", "StaticFileServer"]
