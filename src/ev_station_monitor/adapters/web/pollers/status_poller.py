"""Background poller: fetch, extract, track, notify."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from ev_station_monitor.domain.contracts.status_poller import StatusPollerProtocol
from ev_station_monitor.domain.errors import StationFetchError, StationUnreachableError
from ev_station_monitor.domain.models.error_details import ErrorDetails

if TYPE_CHECKING:
    from ev_station_monitor.adapters.web.state.monitor_state import MonitorState
    from ev_station_monitor.domain.contracts.availability_tracker import (
        AvailabilityTrackerProtocol,
    )
    from ev_station_monitor.domain.contracts.notifier import NotifierProtocol
    from ev_station_monitor.domain.contracts.status_extractor import StatusExtractorProtocol
    from ev_station_monitor.domain.contracts.status_fetcher import StatusFetcherProtocol

logger = logging.getLogger(__name__)


def _extract_error_details(error: Exception) -> ErrorDetails:
    """Describe a poll failure for display."""
    if isinstance(error, StationUnreachableError):
        return ErrorDetails(status_code=error.status_code, reason=f"HTTP {error.status_code}")
    if isinstance(error, StationFetchError):
        status_code = error.http_status if error.http_status != 500 else None
        return ErrorDetails(status_code=status_code, reason=str(error))
    return ErrorDetails(status_code=None, reason=f"Unexpected error: {error}")


class StatusPoller(StatusPollerProtocol):
    """Polls the station on a fixed period and fans out availability notifications."""

    def __init__(
        self,
        fetcher: StatusFetcherProtocol,
        extractor: StatusExtractorProtocol,
        tracker: AvailabilityTrackerProtocol,
        notifier: NotifierProtocol,
        state: MonitorState,
        interval_seconds: float,
    ) -> None:
        """Initialize the poller.

        Args:
            fetcher: Fetches the raw station status.
            extractor: Turns the payload into a status summary.
            tracker: Holds availability across polls.
            notifier: Sends push notifications on a rising edge.
            state: Shared state read by the web routes.
            interval_seconds: Time between polls.
        """
        self.fetcher = fetcher
        self.extractor = extractor
        self.tracker = tracker
        self.notifier = notifier
        self.state = state
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None

    async def start(self) -> None:
        """Start the poller."""
        if self._task is not None and not self._task.done():
            logger.warning("Status poller already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(f"Started status poller (every {self.interval_seconds:g}s)")

    async def stop(self) -> None:
        """Stop the poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Status poller cancelled")
            logger.info("Stopped status poller")
        self._task = None

    async def _poll_loop(self) -> None:
        """Main polling loop; the first poll runs immediately."""
        try:
            while True:
                await self.poll_once()
                await asyncio.sleep(self.interval_seconds)
        except asyncio.CancelledError:
            logger.info("Status poller cancelled")
            raise

    async def poll_once(self) -> bool:
        """Run one fetch, extract, track and notify cycle.

        Errors are logged and recorded in the state; they never propagate.

        Returns:
            True if a notification fan-out was triggered.
        """
        now = datetime.now(UTC)
        self.state.last_checked_at = now
        self.state.next_check_at = now + timedelta(seconds=self.interval_seconds)

        try:
            snapshot = await self.fetcher.fetch_status()
        except Exception as e:
            error_details = _extract_error_details(e)
            self.state.last_error = error_details
            if isinstance(e, StationFetchError):
                logger.error(
                    f"Status poll failed: {error_details.reason} "
                    f"(status: {error_details.status_code})"
                )
            else:
                logger.error(f"Status poll failed unexpectedly: {e}", exc_info=True)
            return False

        extracted = self.extractor.extract(snapshot.payload)
        self.state.last_status = extracted
        self.state.last_fetched_at = snapshot.fetched_at
        self.state.last_error = None
        logger.info(f'Status is "{extracted.status}" (connectors: {extracted.connectors_text})')

        rising_edge = self.tracker.observe(extracted.status_label)
        self.state.availability = self.tracker.state
        if not rising_edge:
            return False

        try:
            await self.notifier.notify(extracted.status)
        except Exception as e:
            logger.error(f"Failed to send availability notifications: {e}", exc_info=True)
        else:
            self.state.notifications_sent += 1
        return True
