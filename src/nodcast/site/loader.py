"""Data document loader.

Fetches the site's JSON document from an HTTP(S) URL or a local path and
falls back to a built-in minimal document on any failure, so loading
never raises.
"""

import json
import logging
from pathlib import Path
from typing import Any

import aiofiles
import httpx
from pydantic import ValidationError

from nodcast.config.schema import DEFAULT_DATA_SOURCE
from nodcast.site.models import Document
from nodcast.utils.errors import DataLoadError

logger = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
    """Whether a data source should be fetched over HTTP."""
    return source.startswith(("http://", "https://"))


class DataLoader:
    """Load the site data document.

    Example:
        >>> loader = DataLoader("https://example.com/data/episodes.json")
        >>> document = await loader.load()
    """

    def __init__(
        self,
        source: str = DEFAULT_DATA_SOURCE,
        site_root: Path | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            source: URL or path of the JSON document
            site_root: Base directory for relative local paths (default: cwd)
            timeout: HTTP request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.source = source
        self.site_root = site_root or Path.cwd()
        self.timeout = timeout
        self.transport = transport

    async def load(self) -> Document:
        """Load the document, substituting the fallback document on failure."""
        try:
            raw = await self._read_json()
            document = Document.model_validate(raw)
        except DataLoadError as e:
            logger.warning("Failed to load episode data from %s: %s", e.source, e)
            return Document.fallback()
        except ValidationError as e:
            logger.warning(
                "Episode data from %s does not match the expected shape: %s",
                self.source,
                e,
            )
            return Document.fallback()

        logger.info(
            "Loaded %d categories and %s episodes from %s",
            len(document.categories),
            "no" if document.episodes is None else len(document.episodes),
            self.source,
        )
        return document

    async def _read_json(self) -> Any:
        if is_remote(self.source):
            text = await self._fetch()
        else:
            text = await self._read_file()

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DataLoadError(f"Invalid JSON: {e}", self.source) from e

    async def _fetch(self) -> str:
        logger.debug("Fetching %s", self.source)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.source)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise DataLoadError(
                f"HTTP error! status: {e.response.status_code}", self.source
            ) from e
        except httpx.HTTPError as e:
            raise DataLoadError(f"Request failed: {e}", self.source) from e

    async def _read_file(self) -> str:
        path = self.site_root / self.source
        logger.debug("Reading %s", path)
        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                return await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DataLoadError(f"Cannot read file: {e}", str(path)) from e
