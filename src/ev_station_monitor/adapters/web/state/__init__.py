"""Server-side state for the web adapter."""

from ev_station_monitor.adapters.web.state.monitor_state import MonitorState

__all__ = ["MonitorState"]
