# ==============================================================================
# crawler/__init__.py — Sitemap Crawling Components
# ==============================================================================
# Purpose: Components for resolving sitemaps into page URLs
# ==============================================================================

from .sitemap_crawler import SitemapCrawler

__all__ = [
    'SitemapCrawler',
]
