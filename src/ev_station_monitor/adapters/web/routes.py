"""JSON API routes consumed by the browser client."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from ev_station_monitor.domain.errors import (
    InvalidSubscriptionError,
    StationFetchError,
    StationUnreachableError,
)

if TYPE_CHECKING:
    from starlette.requests import Request

    from ev_station_monitor.adapters.web.state.monitor_state import MonitorState
    from ev_station_monitor.domain.contracts.push_sender import PushSenderProtocol
    from ev_station_monitor.domain.contracts.status_fetcher import StatusFetcherProtocol
    from ev_station_monitor.domain.contracts.subscription_registry import (
        SubscriptionRegistryProtocol,
    )

logger = logging.getLogger(__name__)


def fetch_error_response(error: StationFetchError) -> JSONResponse:
    """Map a fetch failure to the structured error response."""
    content: dict[str, Any] = {"ok": False, "error": str(error), "name": error.error_name}
    if isinstance(error, StationUnreachableError):
        content["status"] = error.status_code
        content["statusText"] = error.reason or ""
        content["body"] = error.body
    return JSONResponse(content, status_code=error.http_status)


async def _read_json(request: Request) -> Any:
    """Return the decoded JSON body, or None if it is missing or malformed."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


class ApiRoutes:
    """Handlers for the ``/api`` endpoints."""

    def __init__(
        self,
        fetcher: StatusFetcherProtocol,
        registry: SubscriptionRegistryProtocol,
        sender: PushSenderProtocol,
        state: MonitorState,
    ) -> None:
        """Initialize the route handlers.

        Args:
            fetcher: Used for client-triggered status requests.
            registry: Push subscription registry.
            sender: Push sender, consulted for the push configuration.
            state: State maintained by the background poller.
        """
        self.fetcher = fetcher
        self.registry = registry
        self.sender = sender
        self.state = state

    def routes(self) -> list[Route]:
        """Return the Starlette routes for the API."""
        return [
            Route("/api/status", self.status, methods=["GET"]),
            Route("/api/monitor", self.monitor, methods=["GET"]),
            Route("/api/push-config", self.push_config, methods=["GET"]),
            Route("/api/subscribe", self.subscribe, methods=["POST"]),
            Route("/api/unsubscribe", self.unsubscribe, methods=["POST"]),
            Route("/healthz", self.healthz, methods=["GET"]),
        ]

    async def status(self, _request: Request) -> JSONResponse:
        """Fetch the station status on behalf of the client."""
        try:
            snapshot = await self.fetcher.fetch_status()
        except StationFetchError as e:
            logger.warning(f"Client status request failed: {e}")
            return fetch_error_response(e)

        fetched_at = snapshot.fetched_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return JSONResponse({"ok": True, "fetchedAt": fetched_at, "data": snapshot.payload})

    async def monitor(self, _request: Request) -> JSONResponse:
        """Return what the background poller last observed."""
        content = self.state.to_dict()
        content["subscriptions"] = len(self.registry.list_all())
        return JSONResponse(content)

    async def push_config(self, _request: Request) -> JSONResponse:
        """Tell the client whether push is available and which key to subscribe with."""
        return JSONResponse({"enabled": self.sender.enabled, "publicKey": self.sender.public_key})

    async def subscribe(self, request: Request) -> JSONResponse:
        """Register a push subscription."""
        body = await _read_json(request)
        try:
            self.registry.add(body if body is not None else {})
        except InvalidSubscriptionError as e:
            return JSONResponse({"ok": False, "error": str(e)}, status_code=400)
        return JSONResponse({"ok": True})

    async def unsubscribe(self, request: Request) -> JSONResponse:
        """Remove a push subscription; unknown endpoints are ignored."""
        body = await _read_json(request)
        endpoint = body.get("endpoint") if isinstance(body, dict) else None
        if isinstance(endpoint, str) and endpoint:
            self.registry.remove(endpoint)
        return JSONResponse({"ok": True})

    async def healthz(self, _request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return Response(content="Ok", media_type="text/plain")
