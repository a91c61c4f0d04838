"""Availability notification fan-out to push subscriptions."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ev_station_monitor.domain.errors import PushDeliveryError
from ev_station_monitor.domain.models.notification import (
    DeliveryOutcome,
    DeliveryResult,
    NotificationPayload,
)

if TYPE_CHECKING:
    from ev_station_monitor.domain.contracts.push_sender import PushSenderProtocol
    from ev_station_monitor.domain.contracts.subscription_registry import (
        SubscriptionRegistryProtocol,
    )
    from ev_station_monitor.domain.models.push_subscription import PushSubscription

logger = logging.getLogger(__name__)


class Notifier:
    """Sends an availability notification to every registered subscription.

    Deliveries run concurrently. Once all of them have settled, subscriptions
    whose endpoint was reported as gone are removed from the registry.
    """

    def __init__(
        self,
        registry: SubscriptionRegistryProtocol,
        sender: PushSenderProtocol,
        notification_url: str = "/",
    ) -> None:
        """Initialize the notifier.

        Args:
            registry: Registry holding the current subscriptions.
            sender: Push sender used for each delivery.
            notification_url: Page opened when the notification is clicked.
        """
        self.registry = registry
        self.sender = sender
        self.notification_url = notification_url

    async def notify(self, status: str) -> list[DeliveryResult]:
        """Notify all subscribers that the station is available.

        Args:
            status: Status label to mention in the notification body.

        Returns:
            One result per subscription, empty if push is not configured.
        """
        if not self.sender.enabled:
            logger.debug("Push delivery not configured, skipping notification")
            return []

        subscriptions = self.registry.list_all()
        if not subscriptions:
            logger.info("No push subscriptions registered, nothing to notify")
            return []

        payload = NotificationPayload.for_status(status, url=self.notification_url)
        results = await asyncio.gather(
            *(self._deliver(subscription, payload) for subscription in subscriptions)
        )

        gone = {
            result.endpoint
            for result in results
            if result.outcome is DeliveryOutcome.PERMANENT_FAILURE
        }
        for endpoint in gone:
            self.registry.remove(endpoint)
        if gone:
            logger.info(f"Removed {len(gone)} expired push subscription(s)")

        delivered = sum(1 for result in results if result.outcome is DeliveryOutcome.DELIVERED)
        logger.info(f"Sent availability notification to {delivered}/{len(results)} subscription(s)")
        return list(results)

    async def _deliver(
        self, subscription: PushSubscription, payload: NotificationPayload
    ) -> DeliveryResult:
        """Deliver to one subscription, converting failures into a result."""
        try:
            await self.sender.send(subscription, payload)
        except PushDeliveryError as e:
            if e.permanent:
                logger.info(
                    f"Push endpoint gone (status: {e.status_code}), dropping subscription "
                    f"{subscription.endpoint}"
                )
                outcome = DeliveryOutcome.PERMANENT_FAILURE
            else:
                logger.warning(
                    f"Push delivery failed (status: {e.status_code}) for "
                    f"{subscription.endpoint}, keeping subscription: {e}"
                )
                outcome = DeliveryOutcome.RECOVERABLE_FAILURE
            return DeliveryResult(
                endpoint=subscription.endpoint,
                outcome=outcome,
                status_code=e.status_code,
                reason=str(e),
            )
        except Exception as e:
            logger.error(
                f"Unexpected error delivering push to {subscription.endpoint}: {e}",
                exc_info=True,
            )
            return DeliveryResult(
                endpoint=subscription.endpoint,
                outcome=DeliveryOutcome.RECOVERABLE_FAILURE,
                reason=str(e),
            )

        return DeliveryResult(endpoint=subscription.endpoint, outcome=DeliveryOutcome.DELIVERED)
