# ==============================================================================
# archive_service.py — Archive orchestration
# ==============================================================================
# Purpose: Drive sitemap resolution, routing, fetch, sanitize and persistence
# Sections: Imports, Public API, Main Classes
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import asyncio
import logging
from datetime import datetime
from typing import List, Optional, Protocol, Union
from pathlib import Path

# Site Archiver ----
from site_archiver.clients.http_client import ContentFetcher
from site_archiver.clients.pdf_renderer import PdfRenderer
from site_archiver.crawler.sitemap_crawler import Fetcher, SitemapCrawler
from site_archiver.exceptions import FetchError, RenderError
from site_archiver.models.archive_models import ArchivedPage, ArchiveSummary
from site_archiver.models.config_models import ArchiveConfig, FetchErrorPolicy
from site_archiver.utils.catalog_router import CatalogRouter
from site_archiver.utils.filename_utils import derive_filename
from site_archiver.utils.markup_sanitizer import MarkupSanitizer
from site_archiver.utils.storage_layout import StorageLayout

logger = logging.getLogger(__name__)

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["ArchiveService", "run_archive"]


class Renderer(Protocol):
    async def render(self, html: str, output_path: Union[str, Path]) -> Path: ...

# ==============================================================================
# Public API
# ==============================================================================

async def run_archive(config: ArchiveConfig) -> ArchiveSummary:
    """Archive the site described by *config* with the HTTP fetcher and Chromium renderer."""
    async with ContentFetcher(timeout=config.request_timeout, user_agent=config.user_agent) as fetcher:
        async with PdfRenderer() as renderer:
            service = ArchiveService(config, fetcher, renderer)
            return await service.run()

# ==============================================================================
# Main Classes
# ==============================================================================

class ArchiveService:
    """Main orchestration service for archiving a site from its sitemap index.

    Leaf sitemaps are drained one at a time in document order. Within a leaf
    sitemap at most ``max_concurrent_fetches`` pages are in flight; with the
    default of 1 pages are archived strictly in document order. For every page
    the HTML file is written before the PDF is rendered.
    """

    def __init__(self, config: ArchiveConfig, fetcher: Fetcher, renderer: Renderer):
        self.config = config
        self._fetcher = fetcher
        self._renderer = renderer
        self.crawler = SitemapCrawler(fetcher)
        self.router = CatalogRouter(config.filter_and_catalog)
        self.sanitizer = MarkupSanitizer(config.strip_tags, config.strip_content)
        self.storage = StorageLayout(config.save_dir_root, config.catalog_buckets)

    async def run(self) -> ArchiveSummary:
        """Archive every in-scope page listed under the configured sitemap index.

        Raises:
            FetchError: When a fetch fails and the policy is ``abort``.
            SitemapDecodeError: When any sitemap document is malformed.
        """
        start_time = datetime.now()
        summary = ArchiveSummary(sitemap_url=self.config.sitemap_url, started_at=start_time)

        logger.info("🚀 Starting archive of %s into %s", self.config.sitemap_host, self.storage.root)

        # Step 1: Every target directory exists before the first write
        self.storage.ensure_layout()

        # Step 2: Sitemap index -> leaf sitemaps
        logger.info("🔍 Fetching main sitemap %s ...", self.config.sitemap_url)
        sitemap_urls = await self.crawler.resolve_index(self.config.sitemap_url)
        summary.leaf_sitemaps = len(sitemap_urls)
        logger.info("🔍 Building site crawl list from %d sitemaps ...", len(sitemap_urls))

        # Step 3: Drain each leaf sitemap before resolving the next one
        for sitemap_url in sitemap_urls:
            page_urls = await self._resolve_leaf(sitemap_url, summary)
            if not page_urls:
                continue

            summary.urls_found += len(page_urls)
            logger.info("📄 Fetching and saving %d URLs from %s ...", len(page_urls), sitemap_url)
            await self._archive_pages(page_urls, summary)

        summary.processing_time_seconds = (datetime.now() - start_time).total_seconds()

        if self.config.write_summary:
            self.storage.write_summary(summary)

        logger.info(
            "✅ Archived %d of %d URLs (%d out of scope, %d fetch failures, %d PDF failures) in %.1fs",
            summary.pages_archived,
            summary.urls_found,
            summary.routing_misses,
            summary.fetch_failures,
            summary.pdf_failures,
            summary.processing_time_seconds,
        )
        return summary

    async def archive_page(self, url: str, summary: ArchiveSummary) -> Optional[ArchivedPage]:
        """Route, fetch, sanitize and persist a single page URL.

        Returns ``None`` when the URL is out of scope or its fetch was skipped.
        """
        decision = self.router.route(url)
        if not decision.in_scope:
            summary.routing_misses += 1
            logger.debug("Skipping %s: no catalog rule matches", url)
            return None

        try:
            raw_html = await self._fetcher.fetch(self.fetch_url(url))
        except FetchError as e:
            self._handle_fetch_error(e, summary)
            return None

        page = ArchivedPage(
            url=url,
            html=self.sanitizer.sanitize(raw_html),
            filename=derive_filename(url, self.config.sitemap_host),
            bucket=decision.bucket,
        )

        html_path = self.storage.write_html(page)
        logger.debug("💾 Saved %s -> %s", url, html_path)

        page.pdf_saved = await self._render_pdf(page, summary)
        summary.pages_archived += 1
        return page

    def fetch_url(self, url: str) -> str:
        """URL actually requested for a page, with the configured query string appended."""
        params = self.config.fetch_url_params
        if not params:
            return url

        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{params}"

    async def _resolve_leaf(self, sitemap_url: str, summary: ArchiveSummary) -> List[str]:
        try:
            return await self.crawler.resolve_leaf(sitemap_url)
        except FetchError as e:
            self._handle_fetch_error(e, summary)
            return []

    async def _archive_pages(self, page_urls: List[str], summary: ArchiveSummary) -> None:
        """Archive the pages of one leaf sitemap with bounded concurrency."""
        if self.config.max_concurrent_fetches == 1:
            for url in page_urls:
                await self.archive_page(url, summary)
            return

        semaphore = asyncio.Semaphore(self.config.max_concurrent_fetches)

        async def archive_with_limit(url: str) -> Optional[ArchivedPage]:
            async with semaphore:
                return await self.archive_page(url, summary)

        tasks = [asyncio.ensure_future(archive_with_limit(url)) for url in page_urls]
        try:
            await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _render_pdf(self, page: ArchivedPage, summary: ArchiveSummary) -> bool:
        pdf_path = self.storage.pdf_path(page.filename, page.bucket)
        try:
            await self._renderer.render(page.html, pdf_path)
        except RenderError as e:
            summary.pdf_failures += 1
            logger.error("❌ %s", e)
            return False

        return True

    def _handle_fetch_error(self, error: FetchError, summary: ArchiveSummary) -> None:
        if self.config.on_fetch_error == FetchErrorPolicy.ABORT:
            raise error

        summary.fetch_failures += 1
        logger.warning("⚠️  Skipping %s: %s", error.url, error)
