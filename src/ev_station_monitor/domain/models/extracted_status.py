"""Extracted status domain model."""

from dataclasses import dataclass

UNKNOWN_STATUS = "unknown"
PLACEHOLDER_TEXT = "—"


@dataclass(frozen=True)
class ExtractedStatus:
    """Human-readable view of a station payload.

    ``status_label`` is ``None`` when no status field could be located.
    """

    status_label: str | None
    connectors_text: str = PLACEHOLDER_TEXT

    @property
    def status(self) -> str:
        """Status label for display, ``"unknown"`` when unset."""
        return self.status_label if self.status_label is not None else UNKNOWN_STATUS
