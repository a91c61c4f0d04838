"""Protocol for the push subscription registry."""

from collections.abc import Mapping
from typing import Any, Protocol

from ev_station_monitor.domain.models.push_subscription import PushSubscription


class SubscriptionRegistryProtocol(Protocol):
    """Protocol for storing push subscriptions by endpoint."""

    def add(self, subscription: PushSubscription | Mapping[str, Any]) -> PushSubscription:
        """Store a subscription, replacing any record with the same endpoint.

        Raises:
            InvalidSubscriptionError: The record has no usable endpoint.
        """
        ...

    def remove(self, endpoint: str) -> bool:
        """Remove the subscription for an endpoint, if present."""
        ...

    def list_all(self) -> list[PushSubscription]:
        """Return a snapshot of all stored subscriptions."""
        ...
