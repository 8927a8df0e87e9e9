# ==============================================================================
# sitemap_crawler.py — Sitemap resolution
# ==============================================================================
# Purpose: Resolve a sitemap index to leaf sitemaps and leaf sitemaps to pages
# Sections: Imports, Public API, Main Classes
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import logging
import xml.etree.ElementTree as ET
from typing import List, Protocol

# Site Archiver ----
from site_archiver.exceptions import SitemapDecodeError
from site_archiver.utils.sitemap_parser import parse_sitemap_index_content, parse_urlset_content

logger = logging.getLogger(__name__)

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["SitemapCrawler", "Fetcher"]


class Fetcher(Protocol):
    async def fetch(self, url: str) -> str: ...

# ==============================================================================
# Main Classes
# ==============================================================================

class SitemapCrawler:
    """Two-level sitemap resolution on top of a content fetcher.

    Both passes return plain lists in document order, whatever the number
    of entries in the document.
    """

    def __init__(self, fetcher: Fetcher):
        self._fetcher = fetcher

    async def resolve_index(self, index_url: str) -> List[str]:
        """Fetch a sitemap index and return its leaf sitemap URLs.

        A document without ``<sitemapindex>`` entries yields an empty list.
        A missing index (connection error or HTTP error status) is fatal, whatever
        the fetch-error policy, since nothing can be archived without it.

        Raises:
            FetchError: If the index cannot be fetched.
            SitemapDecodeError: If the index is not well-formed XML.
        """
        content = await self._fetcher.fetch(index_url)
        try:
            sitemap_urls = parse_sitemap_index_content(content)
        except ET.ParseError as e:
            raise SitemapDecodeError(index_url, str(e))

        if not sitemap_urls:
            logger.warning("⚠️  No leaf sitemaps listed in %s", index_url)
        return list(sitemap_urls)

    async def resolve_leaf(self, sitemap_url: str) -> List[str]:
        """Fetch a leaf sitemap and return its page URLs.

        Raises:
            FetchError: If the sitemap cannot be fetched.
            SitemapDecodeError: If the sitemap is not well-formed XML.
        """
        content = await self._fetcher.fetch(sitemap_url)
        try:
            page_urls = parse_urlset_content(content)
        except ET.ParseError as e:
            raise SitemapDecodeError(sitemap_url, str(e))

        return list(page_urls)
