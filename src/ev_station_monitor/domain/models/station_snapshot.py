"""Station snapshot domain model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class StationSnapshot:
    """One fetched station status payload, owned by a single poll cycle."""

    fetched_at: datetime
    payload: Any
