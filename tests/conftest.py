# ==============================================================================
# conftest.py — Shared test fixtures
# ==============================================================================
# Purpose: In-memory fetcher/renderer doubles and sitemap builders
# ==============================================================================

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

import pytest

from site_archiver.exceptions import FetchError, RenderError
from site_archiver.models.config_models import ArchiveConfig

HOST = "https://example.com"
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def sitemap_index_xml(locations: Iterable[str]) -> str:
    entries = "".join(f"<sitemap><loc>{loc}</loc></sitemap>" for loc in locations)
    return f'<?xml version="1.0" encoding="UTF-8"?><sitemapindex xmlns="{SITEMAP_NS}">{entries}</sitemapindex>'


def urlset_xml(locations: Iterable[str]) -> str:
    entries = "".join(f"<url><loc>{loc}</loc><changefreq>daily</changefreq></url>" for loc in locations)
    return f'<?xml version="1.0" encoding="UTF-8"?><urlset xmlns="{SITEMAP_NS}">{entries}</urlset>'


class FakeFetcher:
    """Serves canned bodies and records every requested URL in order."""

    def __init__(self, pages: Dict[str, str], failing: Optional[Set[str]] = None):
        self.pages = pages
        self.failing = failing or set()
        self.requested: List[str] = []

    async def fetch(self, url: str) -> str:
        self.requested.append(url)
        if url in self.failing:
            raise FetchError(url, "connection refused")
        if url not in self.pages:
            raise FetchError(url, "HTTP 404", status=404)
        return self.pages[url]


class FakeRenderer:
    """Writes a placeholder PDF and records render calls."""

    def __init__(self, failing: Optional[Set[str]] = None):
        self.failing = failing or set()
        self.rendered: List[Path] = []

    async def render(self, html: str, output_path) -> Path:
        output_path = Path(output_path)
        if output_path.stem in self.failing:
            raise RenderError(f"PDF rendering failed for {output_path}: boom")
        output_path.write_bytes(b"%PDF-1.4\n" + html.encode("utf-8"))
        self.rendered.append(output_path)
        return output_path


@pytest.fixture
def make_config(tmp_path):
    """Build an ArchiveConfig rooted in a temporary directory."""

    def _make(**overrides) -> ArchiveConfig:
        values = {
            "sitemapHost": HOST,
            "sitemapUrl": f"{HOST}/sitemap_index.xml",
            "saveDirRoot": str(tmp_path / "archive"),
        }
        values.update(overrides)
        return ArchiveConfig(**values)

    return _make
