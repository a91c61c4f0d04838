"""Web Push delivery adapter."""

from ev_station_monitor.adapters.push.webpush_sender import WebPushSender

__all__ = ["WebPushSender"]
