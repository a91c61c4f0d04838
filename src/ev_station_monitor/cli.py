"""Command-line check of the station status."""

import asyncio
import json
import sys
from typing import Any

import aiohttp

from ev_station_monitor.adapters.config import AppConfig
from ev_station_monitor.adapters.station_api import StationStatusClient
from ev_station_monitor.application.services import classify, extract_station_info
from ev_station_monitor.domain.errors import StationFetchError


async def check_status(url: str, timeout_seconds: float, user_agent: str) -> dict[str, Any]:
    """Fetch the station once and summarize it.

    Raises:
        StationFetchError: The fetch failed.
    """
    async with aiohttp.ClientSession() as session:
        client = StationStatusClient(
            session, url=url, timeout_seconds=timeout_seconds, user_agent=user_agent
        )
        snapshot = await client.fetch_status()

    extracted = extract_station_info(snapshot.payload)
    return {
        "fetched_at": snapshot.fetched_at.isoformat(),
        "status": extracted.status,
        "connectors": extracted.connectors_text,
        "availability": classify(extracted.status_label).value,
        "data": snapshot.payload,
    }


def format_summary(summary: dict[str, Any]) -> str:
    """Render a status summary for the terminal."""
    return "\n".join(
        [
            f"Checked at:   {summary['fetched_at']}",
            f"Status:       {summary['status']}",
            f"Connectors:   {summary['connectors']}",
            f"Availability: {summary['availability']}",
        ]
    )


def _setup_argparse() -> Any:
    import argparse

    parser = argparse.ArgumentParser(
        description="Check the EV charging station status once",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ev-station-check
  ev-station-check --json
  ev-station-check --url https://charge.virtaglobal.com/stations/6224 --timeout 5
        """,
    )
    parser.add_argument("--url", help="Station status URL (default: STATION_URL)")
    parser.add_argument(
        "--timeout", type=float, help="Request timeout in seconds (default: 15)"
    )
    parser.add_argument("--json", action="store_true", help="Print the raw payload as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _setup_argparse().parse_args(argv)
    config = AppConfig()

    try:
        summary = asyncio.run(
            check_status(
                args.url or config.station_url,
                args.timeout or config.station_api_timeout_seconds,
                config.user_agent,
            )
        )
    except StationFetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(summary["data"], indent=2, ensure_ascii=False))
    else:
        print(format_summary(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
