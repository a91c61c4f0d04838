"""Protocol for the background status poller."""

from typing import Protocol


class StatusPollerProtocol(Protocol):
    """Protocol for polling the station and updating state."""

    async def start(self) -> None:
        """Start the poller."""
        ...

    async def stop(self) -> None:
        """Stop the poller."""
        ...
