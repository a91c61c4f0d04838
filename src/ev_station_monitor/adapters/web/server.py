"""Starlette web adapter serving the API and the browser client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import uvicorn
from starlette.applications import Starlette

from ev_station_monitor.adapters.web.routes import ApiRoutes
from ev_station_monitor.adapters.web.servers import StaticFileServer

if TYPE_CHECKING:
    from ev_station_monitor.adapters.config.app_config import AppConfig
    from ev_station_monitor.adapters.web.state.monitor_state import MonitorState
    from ev_station_monitor.domain.contracts.push_sender import PushSenderProtocol
    from ev_station_monitor.domain.contracts.status_fetcher import StatusFetcherProtocol
    from ev_station_monitor.domain.contracts.status_poller import StatusPollerProtocol
    from ev_station_monitor.domain.contracts.subscription_registry import (
        SubscriptionRegistryProtocol,
    )

logger = logging.getLogger(__name__)


def create_app(
    fetcher: StatusFetcherProtocol,
    registry: SubscriptionRegistryProtocol,
    sender: PushSenderProtocol,
    state: MonitorState,
    static_dir: str | None = None,
) -> Starlette:
    """Build the ASGI application.

    API routes are registered before the static mount so they take precedence
    over the browser client's catch-all.
    """
    api_routes = ApiRoutes(fetcher=fetcher, registry=registry, sender=sender, state=state)
    routes: list[Any] = [*api_routes.routes(), *StaticFileServer(static_dir).routes()]
    return Starlette(routes=routes)


class WebServer:
    """Runs the web app with uvicorn alongside the background poller."""

    def __init__(
        self,
        config: AppConfig,
        fetcher: StatusFetcherProtocol,
        registry: SubscriptionRegistryProtocol,
        sender: PushSenderProtocol,
        state: MonitorState,
        poller: StatusPollerProtocol,
    ) -> None:
        """Initialize the web server.

        Args:
            config: Application configuration.
            fetcher: Status fetcher for client-triggered requests.
            registry: Push subscription registry.
            sender: Push sender.
            state: State maintained by the poller.
            poller: Background poller started with the server.
        """
        self.config = config
        self.fetcher = fetcher
        self.registry = registry
        self.sender = sender
        self.state = state
        self.poller = poller
        self._server: uvicorn.Server | None = None

    async def start(self) -> None:
        """Start the poller and serve until shutdown."""
        app = create_app(
            self.fetcher,
            self.registry,
            self.sender,
            self.state,
            static_dir=self.config.static_dir,
        )

        if self.sender.enabled:
            logger.info("Web Push notifications enabled")
        else:
            logger.info("Web Push notifications disabled (VAPID keys not configured)")

        await self.poller.start()

        uvicorn_config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(uvicorn_config)
        logger.info(f"EV station monitor listening on port {self.config.port}")
        try:
            await self._server.serve()
        finally:
            await self.poller.stop()

    async def stop(self) -> None:
        """Stop the poller and ask uvicorn to exit."""
        await self.poller.stop()
        if self._server:
            self._server.should_exit = True
