"""Protocols implemented by adapters and services."""

from ev_station_monitor.domain.contracts.availability_tracker import AvailabilityTrackerProtocol
from ev_station_monitor.domain.contracts.notifier import NotifierProtocol
from ev_station_monitor.domain.contracts.push_sender import PushSenderProtocol
from ev_station_monitor.domain.contracts.status_extractor import StatusExtractorProtocol
from ev_station_monitor.domain.contracts.status_fetcher import StatusFetcherProtocol
from ev_station_monitor.domain.contracts.status_poller import StatusPollerProtocol
from ev_station_monitor.domain.contracts.subscription_registry import (
    SubscriptionRegistryProtocol,
)

__all__ = [
    "AvailabilityTrackerProtocol",
    "NotifierProtocol",
    "PushSenderProtocol",
    "StatusExtractorProtocol",
    "StatusFetcherProtocol",
    "StatusPollerProtocol",
    "SubscriptionRegistryProtocol",
]
