"""Error hierarchy for the EV station monitor."""

from __future__ import annotations


class StationMonitorError(Exception):
    """Base class for all errors raised by this package."""


class StationFetchError(StationMonitorError):
    """Fetching the station status failed.

    Subclasses set ``http_status`` to the status code the HTTP layer should
    answer with and ``error_name`` to the name reported to clients.
    """

    http_status: int = 500
    error_name: str = "StationFetchError"


class StationTimeoutError(StationFetchError):
    """The station endpoint did not answer within the timeout."""

    http_status = 504
    error_name = "TimeoutError"

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(f"Station did not respond within {timeout_seconds:g} seconds")
        self.timeout_seconds = timeout_seconds


class StationUnreachableError(StationFetchError):
    """The station endpoint answered with a non-2xx status."""

    error_name = "StationUnreachableError"

    def __init__(self, status_code: int, body: str, reason: str | None = None) -> None:
        super().__init__(f"Station returned HTTP {status_code}" + (f" {reason}" if reason else ""))
        self.status_code = status_code
        self.body = body
        self.reason = reason

    @property
    def http_status(self) -> int:  # type: ignore[override]
        return self.status_code


class StationTransportError(StationFetchError):
    """The request failed below the HTTP level (DNS, connection, bad body)."""

    error_name = "TransportError"


class InvalidSubscriptionError(StationMonitorError):
    """A subscription record is missing a usable endpoint."""


class PushDeliveryError(StationMonitorError):
    """Delivering a push message failed.

    ``permanent`` is set when the push service reports the endpoint as gone,
    in which case the subscription should be dropped.
    """

    def __init__(self, message: str, status_code: int | None = None, permanent: bool = False) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.permanent = permanent
