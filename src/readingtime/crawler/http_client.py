"""
HTTP client that retrieves page bodies for estimation.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import aiohttp
import structlog
from yarl import URL

from ..config.config import FetchConfig
from ..exceptions import ContentDecodeFailed, FetchFailed

logger = structlog.get_logger(__name__)


class PageFetcher:
    """Fetches page HTML over aiohttp. Use as an async context manager."""

    def __init__(self, config: Optional[FetchConfig] = None) -> None:
        self.config = config or FetchConfig()
        self.session: Optional[aiohttp.ClientSession] = None

    async def initialize(self) -> None:
        """Initialize the HTTP client session."""
        if self.session is None:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self.session = aiohttp.ClientSession(timeout=timeout, headers={"User-Agent": self.config.user_agent})
            logger.debug("HTTP client session initialized", timeout=self.config.timeout)

    async def close(self) -> None:
        if self.session:
            await self.session.close()
            self.session = None

    async def __aenter__(self) -> PageFetcher:
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch_html(self, url: URL | str) -> str:
        """Return the decoded body of ``url``.

        Raises:
            FetchFailed: On connection errors and timeouts. Error pages are
                returned like any other body.
            ContentDecodeFailed: If the body cannot be decoded as text.
        """
        if self.session is None:
            raise RuntimeError("HTTP client not initialized. Call initialize() first.")

        try:
            async with self.session.get(url) as response:
                if response.status >= 400:
                    logger.debug("Error status, using body as-is", url=str(url), status=response.status)
                try:
                    return await response.text()
                except (UnicodeDecodeError, LookupError) as e:
                    logger.info("Response body is not text", url=str(url), error=str(e))
                    raise ContentDecodeFailed(str(e)) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.info("Fetch failed", url=str(url), error=repr(e))
            raise FetchFailed(repr(e)) from e
