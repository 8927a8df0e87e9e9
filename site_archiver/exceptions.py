# ==============================================================================
# exceptions.py — Archive error taxonomy
# ==============================================================================
# Purpose: Exceptions raised across the crawl/route/persist pipeline
# Sections: Public exports, Exceptions
# ==============================================================================

from typing import Optional

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = [
    "ArchiveError",
    "ConfigurationError",
    "FetchError",
    "SitemapDecodeError",
    "RenderError",
]

# ==============================================================================
# Exceptions
# ==============================================================================

class ArchiveError(Exception):
    """Base class for every error the archiver raises on purpose."""


class ConfigurationError(ArchiveError):
    """Missing, unreadable or invalid configuration. Always fatal."""


class FetchError(ArchiveError):
    """A URL could not be retrieved (connection error, timeout or bad status)."""

    def __init__(self, url: str, message: str, status: Optional[int] = None):
        self.url = url
        self.status = status
        super().__init__(f"Failed to fetch {url}: {message}")


class SitemapDecodeError(ArchiveError):
    """A sitemap document is not well-formed XML."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to parse sitemap XML from {url}: {message}")


class RenderError(ArchiveError):
    """PDF rendering failed for a single page."""
