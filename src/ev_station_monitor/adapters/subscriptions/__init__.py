"""Push subscription storage."""

from ev_station_monitor.adapters.subscriptions.in_memory_registry import (
    InMemorySubscriptionRegistry,
)

__all__ = ["InMemorySubscriptionRegistry"]
