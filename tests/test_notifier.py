"""Behavior tests for the availability notifier."""

import asyncio

import pytest

from ev_station_monitor.adapters.subscriptions import InMemorySubscriptionRegistry
from ev_station_monitor.application.services import Notifier
from ev_station_monitor.domain.errors import PushDeliveryError
from ev_station_monitor.domain.models import (
    DeliveryOutcome,
    NotificationPayload,
    PushSubscription,
)


class FakePushSender:
    """Push sender that records deliveries and fails for configured endpoints."""

    def __init__(
        self,
        enabled: bool = True,
        failures: dict[str, Exception] | None = None,
        delay_seconds: float = 0,
    ) -> None:
        self._enabled = enabled
        self.failures = failures or {}
        self.delay_seconds = delay_seconds
        self.sent: list[tuple[str, NotificationPayload]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def public_key(self) -> str:
        return "test-public-key" if self._enabled else ""

    async def send(self, subscription: PushSubscription, payload: NotificationPayload) -> None:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay_seconds:
                await asyncio.sleep(self.delay_seconds)
            if subscription.endpoint in self.failures:
                raise self.failures[subscription.endpoint]
            self.sent.append((subscription.endpoint, payload))
        finally:
            self.in_flight -= 1


def _registry_with(*endpoints: str) -> InMemorySubscriptionRegistry:
    registry = InMemorySubscriptionRegistry()
    for endpoint in endpoints:
        registry.add({"endpoint": endpoint})
    return registry


@pytest.mark.asyncio
async def test_when_one_endpoint_gone_then_only_that_subscription_removed() -> None:
    """Given 3 subscriptions where #2 is gone, when notifying, then the other 2 remain."""
    registry = _registry_with("https://push/1", "https://push/2", "https://push/3")
    sender = FakePushSender(
        failures={"https://push/2": PushDeliveryError("gone", status_code=410, permanent=True)}
    )

    results = await Notifier(registry, sender).notify("Available")

    assert sorted(s.endpoint for s in registry.list_all()) == ["https://push/1", "https://push/3"]
    outcomes = {result.endpoint: result.outcome for result in results}
    assert outcomes == {
        "https://push/1": DeliveryOutcome.DELIVERED,
        "https://push/2": DeliveryOutcome.PERMANENT_FAILURE,
        "https://push/3": DeliveryOutcome.DELIVERED,
    }


@pytest.mark.asyncio
async def test_when_delivery_fails_recoverably_then_subscription_kept() -> None:
    """Given a temporary push failure, when notifying, then the subscription is kept."""
    registry = _registry_with("https://push/1", "https://push/2")
    sender = FakePushSender(
        failures={"https://push/1": PushDeliveryError("unavailable", status_code=503)}
    )

    results = await Notifier(registry, sender).notify("Available")

    assert len(registry) == 2
    failed = next(r for r in results if r.endpoint == "https://push/1")
    assert failed.outcome is DeliveryOutcome.RECOVERABLE_FAILURE
    assert failed.status_code == 503


@pytest.mark.asyncio
async def test_when_sender_raises_unexpected_error_then_others_still_delivered() -> None:
    """Given an unexpected sender error, when notifying, then other deliveries complete."""
    registry = _registry_with("https://push/1", "https://push/2")
    sender = FakePushSender(failures={"https://push/1": RuntimeError("boom")})

    results = await Notifier(registry, sender).notify("Available")

    assert [endpoint for endpoint, _ in sender.sent] == ["https://push/2"]
    assert len(registry) == 2
    assert {r.outcome for r in results} == {
        DeliveryOutcome.DELIVERED,
        DeliveryOutcome.RECOVERABLE_FAILURE,
    }


@pytest.mark.asyncio
async def test_when_push_not_configured_then_no_op() -> None:
    """Given a disabled sender, when notifying, then nothing is sent and nothing removed."""
    registry = _registry_with("https://push/1")
    sender = FakePushSender(enabled=False)

    results = await Notifier(registry, sender).notify("Available")

    assert results == []
    assert sender.sent == []
    assert len(registry) == 1


@pytest.mark.asyncio
async def test_when_no_subscriptions_then_nothing_sent() -> None:
    """Given an empty registry, when notifying, then nothing is sent."""
    sender = FakePushSender()

    results = await Notifier(InMemorySubscriptionRegistry(), sender).notify("Available")

    assert results == []
    assert sender.sent == []


@pytest.mark.asyncio
async def test_deliveries_run_concurrently() -> None:
    """Given several subscriptions, when notifying, then deliveries overlap in time."""
    registry = _registry_with("https://push/1", "https://push/2", "https://push/3")
    sender = FakePushSender(delay_seconds=0.05)

    await Notifier(registry, sender).notify("Available")

    assert sender.max_in_flight == 3


@pytest.mark.asyncio
async def test_payload_mentions_status_and_target_url() -> None:
    """Given a status, when notifying, then the payload names it and links the page."""
    registry = _registry_with("https://push/1")
    sender = FakePushSender()

    await Notifier(registry, sender, notification_url="/station").notify("Free")

    _, payload = sender.sent[0]
    assert payload.title == "EV Station available"
    assert payload.body == 'Station status changed to "Free".'
    assert payload.url == "/station"
