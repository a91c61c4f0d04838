"""Tests for the one-shot status check CLI."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, patch

import pytest

from ev_station_monitor import cli
from ev_station_monitor.domain.errors import StationTimeoutError
from ev_station_monitor.domain.models import StationSnapshot

FETCH = "ev_station_monitor.cli.StationStatusClient.fetch_status"


def _snapshot(payload: object) -> StationSnapshot:
    return StationSnapshot(fetched_at=datetime(2024, 5, 1, 12, 0, tzinfo=UTC), payload=payload)


@pytest.mark.asyncio
async def test_check_status_summarizes_payload() -> None:
    """Given a station payload, when checking, then status and availability are summarized."""
    payload = {"status": "Occupied", "connectors": [{"name": "A", "status": "Busy"}]}
    with patch(FETCH, new=AsyncMock(return_value=_snapshot(payload))):
        summary = await cli.check_status("https://example.com/s", 5, "agent")

    assert summary["status"] == "Occupied"
    assert summary["connectors"] == "A: Busy"
    assert summary["availability"] == "occupied"
    assert summary["data"] == payload


def test_format_summary_lists_fields() -> None:
    """Given a summary, when formatting, then each field is on its own line."""
    text = cli.format_summary(
        {
            "fetched_at": "2024-05-01T12:00:00+00:00",
            "status": "Available",
            "connectors": "—",
            "availability": "available",
        }
    )

    assert text.splitlines() == [
        "Checked at:   2024-05-01T12:00:00+00:00",
        "Status:       Available",
        "Connectors:   —",
        "Availability: available",
    ]


def test_main_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a reachable station, when running the CLI, then prints the summary and exits 0."""
    with patch(FETCH, new=AsyncMock(return_value=_snapshot({"state": "Free"}))):
        exit_code = cli.main(["--url", "https://example.com/s"])

    assert exit_code == 0
    assert "Status:       Free" in capsys.readouterr().out


def test_main_prints_raw_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Given --json, when running the CLI, then prints the raw payload."""
    with patch(FETCH, new=AsyncMock(return_value=_snapshot({"state": "Free"}))):
        exit_code = cli.main(["--json"])

    assert exit_code == 0
    assert '"state": "Free"' in capsys.readouterr().out


def test_main_reports_fetch_failure(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a timeout, when running the CLI, then prints the error and exits 1."""
    with patch(FETCH, new=AsyncMock(side_effect=StationTimeoutError(15))):
        exit_code = cli.main([])

    assert exit_code == 1
    assert "did not respond within 15 seconds" in capsys.readouterr().err
