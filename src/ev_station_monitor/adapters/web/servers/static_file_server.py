"""Static file server for the browser client."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.exceptions import HTTPException
from starlette.routing import Mount
from starlette.staticfiles import StaticFiles

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

    from starlette.responses import Response
    from starlette.types import Scope

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


class SinglePageStaticFiles(StaticFiles):
    """Static files that answer unknown paths with ``index.html``."""

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            response = await super().get_response(path, scope)
        except HTTPException as e:
            if e.status_code != 404:
                raise
            return await super().get_response(INDEX_FILE, scope)
        if response.status_code == 404:
            return await super().get_response(INDEX_FILE, scope)
        return response


class StaticFileCacheApp:
    """ASGI app wrapper that adds cache headers to static file responses."""

    def __init__(self, static_files: StaticFiles) -> None:
        """Initialize with a StaticFiles instance."""
        self.static_files = static_files

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """Handle ASGI request and add cache headers."""

        async def send_with_cache_headers(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                if not any(header[0].lower() == b"cache-control" for header in headers):
                    headers.append((b"cache-control", b"public, max-age=60, must-revalidate"))
                    message["headers"] = headers
            await send(message)

        await self.static_files(scope, receive, send_with_cache_headers)


class StaticFileServer:
    """Serves the browser client from a static directory."""

    def __init__(self, static_dir: str | None = None) -> None:
        """Initialize with an explicit directory, or None to search the usual places."""
        self.static_dir = static_dir

    def candidate_paths(self) -> list[Path]:
        """Directories searched for the browser client, in order."""
        if self.static_dir:
            return [Path(self.static_dir)]
        return [
            Path.cwd() / "static",
            Path(__file__).parents[5] / "static",
        ]

    def find_static_path(self) -> Path | None:
        """Return the first candidate directory that exists."""
        for path in self.candidate_paths():
            if path.is_dir():
                return path
        return None

    def routes(self) -> list[Mount]:
        """Return the catch-all mount; register it after every API route."""
        static_path = self.find_static_path()
        if static_path is None:
            logger.warning(
                f"Static directory not found at any of: {[str(p) for p in self.candidate_paths()]}"
            )
            return []

        static_files = SinglePageStaticFiles(directory=str(static_path), html=True)
        logger.info(f"Serving browser client from {static_path} with 1-minute cache headers")
        return [Mount("/", app=StaticFileCacheApp(static_files), name="static")]
