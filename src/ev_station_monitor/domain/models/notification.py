"""Notification payload and delivery result models."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import StrEnum

DEFAULT_NOTIFICATION_TITLE = "EV Station available"


@dataclass(frozen=True)
class NotificationPayload:
    """Payload shown by the service worker when a push message arrives."""

    title: str
    body: str
    url: str = "/"

    @classmethod
    def for_status(cls, status: str, url: str = "/") -> NotificationPayload:
        """Build the availability notification for a status label."""
        return cls(
            title=DEFAULT_NOTIFICATION_TITLE,
            body=f'Station status changed to "{status}".',
            url=url,
        )

    def to_json(self) -> str:
        """Serialize the payload for push delivery."""
        return json.dumps(asdict(self))


class DeliveryOutcome(StrEnum):
    """Result category of a single push delivery attempt."""

    DELIVERED = "delivered"
    RECOVERABLE_FAILURE = "recoverable_failure"
    PERMANENT_FAILURE = "permanent_failure"


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of delivering one notification to one subscription."""

    endpoint: str
    outcome: DeliveryOutcome
    status_code: int | None = None
    reason: str | None = None
