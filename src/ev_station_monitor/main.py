"""Main entry point for the EV station monitor."""

import asyncio
import logging
import sys

import aiohttp

from ev_station_monitor.adapters.config import AppConfig
from ev_station_monitor.adapters.push import WebPushSender
from ev_station_monitor.adapters.station_api import StationStatusClient
from ev_station_monitor.adapters.subscriptions import InMemorySubscriptionRegistry
from ev_station_monitor.adapters.web import WebServer
from ev_station_monitor.adapters.web.pollers import StatusPoller
from ev_station_monitor.adapters.web.state import MonitorState
from ev_station_monitor.application.services import (
    AvailabilityTracker,
    Notifier,
    StatusExtractor,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    logger.info(
        f"Monitoring {config.station_url} every {config.poll_interval_minutes:g} minute(s)"
    )

    # Everything below lives for the life of the process; subscriptions and
    # availability are lost on restart.
    registry = InMemorySubscriptionRegistry()
    tracker = AvailabilityTracker()
    state = MonitorState()
    sender = WebPushSender.from_config(config)

    async with aiohttp.ClientSession() as session:
        fetcher = StationStatusClient.from_config(session, config)
        notifier = Notifier(registry, sender, notification_url=config.notification_url)
        poller = StatusPoller(
            fetcher=fetcher,
            extractor=StatusExtractor(),
            tracker=tracker,
            notifier=notifier,
            state=state,
            interval_seconds=config.poll_interval_seconds,
        )
        server = WebServer(
            config,
            fetcher=fetcher,
            registry=registry,
            sender=sender,
            state=state,
            poller=poller,
        )

        try:
            await server.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await server.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
