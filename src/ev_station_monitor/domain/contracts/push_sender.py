"""Protocol for delivering push messages."""

from typing import Protocol

from ev_station_monitor.domain.models.notification import NotificationPayload
from ev_station_monitor.domain.models.push_subscription import PushSubscription


class PushSenderProtocol(Protocol):
    """Protocol for sending one push message to one subscription."""

    @property
    def enabled(self) -> bool:
        """Whether delivery credentials are configured."""
        ...

    @property
    def public_key(self) -> str:
        """Public application server key handed to browsers, empty when disabled."""
        ...

    async def send(self, subscription: PushSubscription, payload: NotificationPayload) -> None:
        """Deliver a payload.

        Raises:
            PushDeliveryError: Delivery failed; ``permanent`` marks a gone endpoint.
        """
        ...
