"""Web Push sender backed by pywebpush."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from pywebpush import WebPushException, webpush

from ev_station_monitor.domain.errors import PushDeliveryError

if TYPE_CHECKING:
    from ev_station_monitor.adapters.config.app_config import AppConfig
    from ev_station_monitor.domain.models.notification import NotificationPayload
    from ev_station_monitor.domain.models.push_subscription import PushSubscription

logger = logging.getLogger(__name__)

# Push services answer 404 or 410 once a subscription has expired or been revoked.
GONE_STATUS_CODES = frozenset({404, 410})


def _response_status(error: WebPushException) -> int | None:
    response = getattr(error, "response", None)
    if response is None:
        return None
    return getattr(response, "status_code", None)


class WebPushSender:
    """Delivers notification payloads with VAPID-signed Web Push requests.

    pywebpush is synchronous, so each send runs in a worker thread.
    """

    def __init__(
        self,
        public_key: str | None,
        private_key: str | None,
        subject: str,
        ttl_seconds: int = 60,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize the sender.

        Args:
            public_key: VAPID public key, or None if push is not configured.
            private_key: VAPID private key, or None if push is not configured.
            subject: Contact URI for the VAPID ``sub`` claim.
            ttl_seconds: Time the push service may queue an undelivered message.
            timeout_seconds: Timeout for the request to the push service.
        """
        self._public_key = public_key or ""
        self._private_key = private_key or ""
        self.subject = subject
        self.ttl_seconds = ttl_seconds
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_config(cls, config: AppConfig) -> WebPushSender:
        """Create a sender from the application configuration."""
        return cls(
            public_key=config.vapid_public_key,
            private_key=config.vapid_private_key,
            subject=config.vapid_subject,
            ttl_seconds=config.push_ttl_seconds,
        )

    @property
    def enabled(self) -> bool:
        """Whether both VAPID keys are configured."""
        return bool(self._public_key and self._private_key)

    @property
    def public_key(self) -> str:
        """VAPID public key for browsers, empty when push is disabled."""
        return self._public_key if self.enabled else ""

    def _send_sync(self, subscription_info: dict[str, Any], data: str) -> None:
        # pywebpush adds "aud" and "exp" to the claims dict it is given.
        webpush(
            subscription_info=subscription_info,
            data=data,
            vapid_private_key=self._private_key,
            vapid_claims={"sub": self.subject},
            ttl=self.ttl_seconds,
            timeout=self.timeout_seconds,
        )

    async def send(self, subscription: PushSubscription, payload: NotificationPayload) -> None:
        """Deliver a payload to one subscription.

        Raises:
            PushDeliveryError: Delivery failed. ``permanent`` is set when the
                push service reports the endpoint as gone.
        """
        if not self.enabled:
            raise PushDeliveryError("Web Push is not configured")

        try:
            await asyncio.to_thread(
                self._send_sync, subscription.to_webpush_info(), payload.to_json()
            )
        except WebPushException as e:
            status_code = _response_status(e)
            raise PushDeliveryError(
                f"Push service rejected message: {e}",
                status_code=status_code,
                permanent=status_code in GONE_STATUS_CODES,
            ) from e
        except (OSError, ValueError, TypeError) as e:
            # Connection problems and malformed subscription keys.
            raise PushDeliveryError(f"Push delivery failed: {e}") from e

        logger.debug(f"Delivered push message to {subscription.endpoint}")
