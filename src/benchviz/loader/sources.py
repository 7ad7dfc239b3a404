"""
Data sources for the static benchmark JSON files.

The files are published either behind a plain HTTP server (an S3 bucket in
the original deployment) or sit in a local directory. Both sources expose
the same single-shot ``read`` coroutine.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from urllib.parse import quote

import httpx

from benchviz.config import get_viewer_limits
from benchviz.exceptions import FetchError
from benchviz.utils.validators import validate_safe_path

logger = logging.getLogger(__name__)

__all__ = ["DataSource", "DirectoryDataSource", "HttpDataSource", "open_source"]


class DataSource(ABC):
    """Read-only access to files relative to a base location."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable base location."""

    @abstractmethod
    async def read(self, path: str) -> bytes:
        """Read one file.

        Args:
            path: Path relative to the base location, with ``/`` separators.

        Returns:
            Raw file content.

        Raises:
            FetchError: If the file cannot be read.
        """

    async def aclose(self) -> None:
        """Release resources held by the source."""


class HttpDataSource(DataSource):
    """Reads files from an HTTP base URL with an httpx async client."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP source.

        Args:
            base_url: Base URL of the published files (e.g., "https://bench.example.com/")
            timeout: Request timeout in seconds. Defaults to BENCHVIZ_FETCH_TIMEOUT.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = base_url.rstrip("/") + "/"
        if timeout is None:
            timeout = get_viewer_limits().fetch_timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @property
    def location(self) -> str:
        return self.base_url

    async def read(self, path: str) -> bytes:
        logger.debug(f"GET {self.base_url}{path}")
        try:
            response = await self._client.get(quote(path, safe="/"))
        except httpx.HTTPError as e:
            raise FetchError(path, f"{type(e).__name__}: {e}") from e

        if response.status_code != 200:
            raise FetchError(path, f"HTTP {response.status_code}", status_code=response.status_code)
        return response.content

    async def aclose(self) -> None:
        await self._client.aclose()


class DirectoryDataSource(DataSource):
    """Reads files from a local directory."""

    def __init__(self, root: str | Path) -> None:
        """Initialize the directory source.

        Args:
            root: Directory containing test_names.json and the per-test files.
        """
        self.root = Path(root)

    @property
    def location(self) -> str:
        return str(self.root)

    async def read(self, path: str) -> bytes:
        target = self.root / path
        try:
            validate_safe_path(target, self.root)
        except ValueError as e:
            raise FetchError(path, str(e)) from None

        logger.debug(f"Reading {target}")
        try:
            return await asyncio.to_thread(target.read_bytes)
        except FileNotFoundError:
            raise FetchError(path, "file not found", status_code=404) from None
        except OSError as e:
            raise FetchError(path, f"{type(e).__name__}: {e}") from e


def open_source(location: str, timeout: float | None = None) -> DataSource:
    """Create a data source for a URL or a directory path.

    Args:
        location: ``http://`` / ``https://`` URL or a filesystem path.
        timeout: Request timeout for HTTP sources.

    Returns:
        HttpDataSource for URLs, DirectoryDataSource otherwise.
    """
    if location.startswith(("http://", "https://")):
        return HttpDataSource(location, timeout=timeout)
    if location.startswith("file://"):
        location = location[len("file://") :]
    return DirectoryDataSource(Path(location).expanduser())
