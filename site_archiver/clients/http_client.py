# ==============================================================================
# http_client.py — HTTP content fetcher
# ==============================================================================
# Purpose: Retrieve sitemap and page bodies over HTTP(S)
# Sections: Imports, Public API, Main Classes
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import asyncio
import logging
from typing import Optional

# Third Party -----
import aiohttp

# Site Archiver ----
from site_archiver.exceptions import FetchError

logger = logging.getLogger(__name__)

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["ContentFetcher", "DEFAULT_USER_AGENT"]

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; site-archiver/1.0)"

# ==============================================================================
# Main Classes
# ==============================================================================

class ContentFetcher:
    """Thin aiohttp client returning response bodies as text."""

    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None):
        self._client: Optional[aiohttp.ClientSession] = None
        self._timeout = timeout
        self.default_headers = {
            'User-Agent': user_agent or DEFAULT_USER_AGENT,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        }

    async def __aenter__(self):
        """Async context manager for HTTP client lifecycle."""
        self._client = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self._timeout),
            headers=self.default_headers
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Clean up HTTP client."""
        if self._client:
            await self._client.close()
            self._client = None

    async def fetch(self, url: str) -> str:
        """Fetch *url* and return its decoded body.

        Raises:
            FetchError: On connection errors, timeouts and 4xx/5xx responses.
        """
        if not self._client:
            raise RuntimeError("Fetcher must be used as async context manager")

        logger.debug("🌐 GET %s", url)
        try:
            async with self._client.get(url, allow_redirects=True) as response:
                if response.status >= 400:
                    raise FetchError(url, f"HTTP {response.status}", status=response.status)

                return await response.text(errors="replace")

        except asyncio.TimeoutError:
            raise FetchError(url, "request timed out")
        except aiohttp.ClientError as e:
            raise FetchError(url, str(e) or e.__class__.__name__)
