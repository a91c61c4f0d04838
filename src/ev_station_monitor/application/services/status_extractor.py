"""Heuristic extraction of status and connector info from station payloads."""

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ev_station_monitor.domain.models.extracted_status import (
    PLACEHOLDER_TEXT,
    UNKNOWN_STATUS,
    ExtractedStatus,
)

logger = logging.getLogger(__name__)

# Candidate keys, checked in order. The first key that is present with a
# non-null value wins; falsy values such as 0 or "" still count as present.
STATUS_KEYS: tuple[str, ...] = (
    "status",
    "state",
    "stationStatus",
    "availability",
    "currentStatus",
    "operationalStatus",
)
CONNECTOR_LIST_KEYS: tuple[str, ...] = ("connectors", "connector", "evses", "ports", "outlets")
CONNECTOR_STATUS_KEYS: tuple[str, ...] = ("status", "state", "availability", "currentStatus")
CONNECTOR_NAME_KEYS: tuple[str, ...] = ("name", "id", "connectorId")

_MISSING = object()


def first_present(data: Mapping[str, Any], keys: Sequence[str]) -> Any:
    """Return the value of the first key present in ``data`` with a non-null value.

    Returns a sentinel (``_MISSING``) when none of the keys match.
    """
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return _MISSING


def _to_text(value: Any) -> str:
    """Render a JSON value the way a browser would show it as text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def _render_connector(connector: Any, index: int) -> str:
    fallback_name = f"Connector {index + 1}"
    if isinstance(connector, str):
        return connector
    if isinstance(connector, Mapping):
        status = first_present(connector, CONNECTOR_STATUS_KEYS)
        name = first_present(connector, CONNECTOR_NAME_KEYS)
        name_text = fallback_name if name is _MISSING else _to_text(name)
        status_text = UNKNOWN_STATUS if status is _MISSING else _to_text(status)
        return f"{name_text}: {status_text}"
    return fallback_name


def _render_connectors(connectors: Any) -> str:
    if connectors is _MISSING:
        return PLACEHOLDER_TEXT
    if isinstance(connectors, list):
        return ", ".join(
            _render_connector(connector, index) for index, connector in enumerate(connectors)
        )
    return _to_text(connectors)


def extract_station_info(data: Any) -> ExtractedStatus:
    """Locate a status label and connector summary in an arbitrary JSON value.

    Never raises: unrecognized shapes degrade to placeholder text.

    Args:
        data: Decoded JSON payload of unknown shape.

    Returns:
        The extracted status. ``status_label`` is ``None`` when no status
        field was found.
    """
    if not isinstance(data, Mapping):
        logger.debug(f"Station payload is not an object ({type(data).__name__})")
        return ExtractedStatus(status_label=None, connectors_text=PLACEHOLDER_TEXT)

    status = first_present(data, STATUS_KEYS)
    connectors = first_present(data, CONNECTOR_LIST_KEYS)

    return ExtractedStatus(
        status_label=None if status is _MISSING else _to_text(status),
        connectors_text=_render_connectors(connectors),
    )


class StatusExtractor:
    """Service wrapper around :func:`extract_station_info`."""

    def extract(self, data: Any) -> ExtractedStatus:
        """Extract status and connector info from a station payload."""
        return extract_station_info(data)
