"""Configuration adapters."""

from ev_station_monitor.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
