"""HTTP client for the external station status endpoint."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import aiohttp

from ev_station_monitor.adapters.api_request_logger import log_api_request, log_api_response
from ev_station_monitor.domain.errors import (
    StationTimeoutError,
    StationTransportError,
    StationUnreachableError,
)
from ev_station_monitor.domain.models.station_snapshot import StationSnapshot

if TYPE_CHECKING:
    from ev_station_monitor.adapters.config.app_config import AppConfig

logger = logging.getLogger(__name__)

DEFAULT_ACCEPT = "application/json, text/plain, */*"


class StationStatusClient:
    """Fetches the station status with one timeout-bounded GET per call.

    No retries are made; the poll loop simply tries again on its next tick.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        url: str,
        timeout_seconds: float = 15,
        user_agent: str = "EV-Station-Monitor/1.0 (+https://example.com)",
        log_requests: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session.
            url: Station status endpoint.
            timeout_seconds: Total time allowed for one request.
            user_agent: User-Agent header value.
            log_requests: Whether to log requests and responses.
        """
        self._session = session
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.headers = {"Accept": DEFAULT_ACCEPT, "User-Agent": user_agent}
        self.log_requests = log_requests

    @classmethod
    def from_config(cls, session: aiohttp.ClientSession, config: AppConfig) -> StationStatusClient:
        """Create a client from the application configuration."""
        return cls(
            session,
            url=config.station_url,
            timeout_seconds=config.station_api_timeout_seconds,
            user_agent=config.user_agent,
            log_requests=config.log_requests,
        )

    async def fetch_status(self) -> StationSnapshot:
        """Fetch and decode the current station status.

        Raises:
            StationTimeoutError: The request exceeded the timeout.
            StationUnreachableError: The station answered with a non-2xx status.
            StationTransportError: The request failed below the HTTP level or
                the body was not valid JSON.
        """
        log_api_request("GET", self.url, headers=self.headers, enabled=self.log_requests)
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)

        try:
            async with self._session.get(
                self.url, headers=self.headers, timeout=timeout
            ) as response:
                body = await response.text(errors="replace")
                log_api_response(response.status, self.url, body, enabled=self.log_requests)

                if not 200 <= response.status < 300:
                    logger.warning(
                        f"Station returned status {response.status} for {self.url}: {body[:200]}"
                    )
                    raise StationUnreachableError(response.status, body, response.reason)
        except TimeoutError as e:
            logger.warning(f"Station request timed out after {self.timeout_seconds}s: {self.url}")
            raise StationTimeoutError(self.timeout_seconds) from e
        except aiohttp.ClientError as e:
            logger.warning(f"Station request failed for {self.url}: {e}")
            raise StationTransportError(f"Request to station failed: {e}") from e
        except OSError as e:
            logger.warning(f"Network error requesting {self.url}: {e}")
            raise StationTransportError(f"Network error: {e}") from e

        try:
            payload = json.loads(body)
        except ValueError as e:
            raise StationTransportError(f"Station returned invalid JSON: {e}") from e

        return StationSnapshot(fetched_at=datetime.now(UTC), payload=payload)
