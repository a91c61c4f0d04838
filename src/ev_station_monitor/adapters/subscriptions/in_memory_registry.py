"""In-memory push subscription registry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ev_station_monitor.domain.contracts.subscription_registry import SubscriptionRegistryProtocol
from ev_station_monitor.domain.errors import InvalidSubscriptionError
from ev_station_monitor.domain.models.push_subscription import PushSubscription

logger = logging.getLogger(__name__)


def parse_subscription(data: PushSubscription | Mapping[str, Any] | Any) -> PushSubscription:
    """Validate a subscription record.

    Raises:
        InvalidSubscriptionError: The record is not an object or has no
            non-empty string endpoint.
    """
    if isinstance(data, PushSubscription):
        return data
    if not isinstance(data, Mapping):
        raise InvalidSubscriptionError("Subscription must be a JSON object")

    endpoint = data.get("endpoint")
    if not isinstance(endpoint, str) or not endpoint.strip():
        raise InvalidSubscriptionError("Subscription endpoint is required")

    try:
        return PushSubscription.model_validate(dict(data))
    except ValidationError as e:
        raise InvalidSubscriptionError(f"Invalid subscription: {e.errors()[0]['msg']}") from e


class InMemorySubscriptionRegistry(SubscriptionRegistryProtocol):
    """Subscriptions keyed by endpoint, kept only for the life of the process.

    Mutations are synchronous, so callers on the event loop never observe a
    partially applied change.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._subscriptions: dict[str, PushSubscription] = {}

    def add(self, subscription: PushSubscription | Mapping[str, Any]) -> PushSubscription:
        """Store a subscription, replacing any record with the same endpoint.

        Args:
            subscription: A validated subscription or its raw JSON object.

        Returns:
            The stored subscription.

        Raises:
            InvalidSubscriptionError: The record has no usable endpoint.
        """
        record = parse_subscription(subscription)
        replaced = record.endpoint in self._subscriptions
        self._subscriptions[record.endpoint] = record
        logger.info(
            f"{'Updated' if replaced else 'Added'} push subscription "
            f"({len(self._subscriptions)} total)"
        )
        return record

    def remove(self, endpoint: str) -> bool:
        """Remove the subscription for an endpoint.

        Removing an unknown endpoint is a no-op.

        Returns:
            True if a subscription was removed.
        """
        removed = self._subscriptions.pop(endpoint, None) is not None
        if removed:
            logger.info(f"Removed push subscription ({len(self._subscriptions)} remaining)")
        return removed

    def list_all(self) -> list[PushSubscription]:
        """Return a snapshot of all stored subscriptions."""
        return list(self._subscriptions.values())

    def __len__(self) -> int:
        return len(self._subscriptions)

    def __contains__(self, endpoint: object) -> bool:
        return endpoint in self._subscriptions
