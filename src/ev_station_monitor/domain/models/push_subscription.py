"""Push subscription domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionKeys(BaseModel):
    """Encryption keys issued by the browser push service."""

    model_config = ConfigDict(frozen=True)

    p256dh: str
    auth: str


class PushSubscription(BaseModel):
    """A browser push subscription, keyed by its endpoint URL.

    Unknown fields are kept so the record can be handed back to the push
    library exactly as the browser produced it.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    endpoint: str = Field(min_length=1)
    keys: SubscriptionKeys | None = None
    expiration_time: float | None = Field(default=None, alias="expirationTime")

    def to_webpush_info(self) -> dict[str, Any]:
        """Return the subscription in the browser's ``PushSubscription.toJSON()`` shape."""
        return self.model_dump(by_alias=True, exclude_none=True)
