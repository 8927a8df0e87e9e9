"""Tests for the archive pipeline, driven with in-memory fetcher/renderer doubles."""

import asyncio
import json

import pytest

from site_archiver.exceptions import FetchError, SitemapDecodeError
from site_archiver.models.archive_models import ArchiveSummary
from site_archiver.services.archive_service import ArchiveService

from conftest import HOST, FakeFetcher, FakeRenderer, sitemap_index_xml, urlset_xml

INDEX_URL = f"{HOST}/sitemap_index.xml"
LEAF_1 = f"{HOST}/sitemap-1.xml"
LEAF_2 = f"{HOST}/sitemap-2.xml"


def _page(title: str) -> str:
    return f"<html><head><script>track()</script></head><body><h1>{title}</h1>Ad banner</body></html>"


def _site(leaves):
    """Canned responses for an index listing *leaves* ({leaf_url: [page_urls]})."""
    pages = {INDEX_URL: sitemap_index_xml(leaves)}
    for leaf_url, page_urls in leaves.items():
        pages[leaf_url] = urlset_xml(page_urls)
        for url in page_urls:
            pages[url] = _page(url.rsplit("/", 1)[-1] or "home")
    return pages


def _run(service: ArchiveService) -> ArchiveSummary:
    return asyncio.run(service.run())


class TestArchivePipeline:
    def test_two_leaf_sitemaps_into_one_bucket(self, make_config, tmp_path) -> None:
        leaves = {
            LEAF_1: [f"{HOST}/blog/a", f"{HOST}/blog/b", f"{HOST}/blog/c"],
            LEAF_2: [f"{HOST}/blog/d", f"{HOST}/blog/e/", f"{HOST}/blog/f.html"],
        }
        config = make_config(filterAndCatalog={"blog": "/blog/"})

        summary = _run(ArchiveService(config, FakeFetcher(_site(leaves)), FakeRenderer()))

        root = tmp_path / "archive"
        html_files = sorted(p.name for p in (root / "html" / "blog").iterdir())
        pdf_files = sorted(p.name for p in (root / "pdf" / "blog").iterdir())
        expected = ["blog-a", "blog-b", "blog-c", "blog-d", "blog-e", "blog-f"]
        assert html_files == [f"{name}.html" for name in expected]
        assert pdf_files == [f"{name}.pdf" for name in expected]
        assert sorted(p.name for p in (root / "html").iterdir()) == ["blog"]
        assert summary.leaf_sitemaps == 2
        assert summary.urls_found == 6
        assert summary.pages_archived == 6

    def test_pages_processed_in_document_order(self, make_config) -> None:
        leaves = {LEAF_1: [f"{HOST}/b", f"{HOST}/a"], LEAF_2: [f"{HOST}/c"]}
        fetcher = FakeFetcher(_site(leaves))

        _run(ArchiveService(make_config(), fetcher, FakeRenderer()))

        assert fetcher.requested == [INDEX_URL, LEAF_1, f"{HOST}/b", f"{HOST}/a", LEAF_2, f"{HOST}/c"]

    def test_html_is_sanitized_and_saved_at_root_without_catalog(self, make_config, tmp_path) -> None:
        leaves = {LEAF_1: [f"{HOST}/", f"{HOST}/about/"]}
        config = make_config(stripTags=["script"], stripContent=["Ad banner"])

        _run(ArchiveService(config, FakeFetcher(_site(leaves)), FakeRenderer()))

        index_html = (tmp_path / "archive" / "html" / "index.html").read_text(encoding="utf-8")
        assert "track()" not in index_html
        assert "Ad banner" not in index_html
        assert "<h1>home</h1>" in index_html
        assert (tmp_path / "archive" / "html" / "about.html").is_file()
        assert (tmp_path / "archive" / "pdf" / "about.pdf").is_file()

    def test_pdf_is_rendered_from_sanitized_html(self, make_config, tmp_path) -> None:
        leaves = {LEAF_1: [f"{HOST}/page"]}
        config = make_config(stripTags=["script"])

        _run(ArchiveService(config, FakeFetcher(_site(leaves)), FakeRenderer()))

        pdf_bytes = (tmp_path / "archive" / "pdf" / "page.pdf").read_bytes()
        assert b"track()" not in pdf_bytes

    def test_single_entry_leaf_gets_html_and_pdf(self, make_config, tmp_path) -> None:
        leaves = {LEAF_1: [f"{HOST}/solo"]}

        summary = _run(ArchiveService(make_config(), FakeFetcher(_site(leaves)), FakeRenderer()))

        assert (tmp_path / "archive" / "html" / "solo.html").is_file()
        assert (tmp_path / "archive" / "pdf" / "solo.pdf").is_file()
        assert summary.pages_archived == 1

    def test_out_of_scope_urls_are_never_fetched(self, make_config, tmp_path) -> None:
        leaves = {LEAF_1: [f"{HOST}/blog/a", f"{HOST}/shop/item", f"{HOST}/docs/x"]}
        fetcher = FakeFetcher(_site(leaves))
        config = make_config(filterAndCatalog={"blog": "/blog/", "docs": "/docs/"})

        summary = _run(ArchiveService(config, fetcher, FakeRenderer()))

        assert f"{HOST}/shop/item" not in fetcher.requested
        assert summary.routing_misses == 1
        assert (tmp_path / "archive" / "html" / "docs" / "docs-x.html").is_file()
        assert not list((tmp_path / "archive" / "html").glob("**/shop-item.html"))

    def test_fetch_params_are_appended_but_not_in_filename(self, make_config, tmp_path) -> None:
        leaves = {LEAF_1: [f"{HOST}/page", f"{HOST}/search?q=1"]}
        site = _site(leaves)
        site[f"{HOST}/page?print=1"] = site.pop(f"{HOST}/page")
        site[f"{HOST}/search?q=1&print=1"] = site.pop(f"{HOST}/search?q=1")
        fetcher = FakeFetcher(site)

        _run(ArchiveService(make_config(fetchUrlParams="print=1"), fetcher, FakeRenderer()))

        assert f"{HOST}/page?print=1" in fetcher.requested
        assert f"{HOST}/search?q=1&print=1" in fetcher.requested
        assert (tmp_path / "archive" / "html" / "page.html").is_file()

    def test_render_failure_is_logged_and_run_continues(self, make_config, tmp_path, caplog) -> None:
        leaves = {LEAF_1: [f"{HOST}/bad", f"{HOST}/good"]}
        renderer = FakeRenderer(failing={"bad"})

        summary = _run(ArchiveService(make_config(), FakeFetcher(_site(leaves)), renderer))

        assert summary.pdf_failures == 1
        assert summary.pages_archived == 2
        assert (tmp_path / "archive" / "html" / "bad.html").is_file()
        assert not (tmp_path / "archive" / "pdf" / "bad.pdf").exists()
        assert (tmp_path / "archive" / "pdf" / "good.pdf").is_file()
        assert "PDF rendering failed" in caplog.text

    def test_fetch_failure_aborts_by_default(self, make_config) -> None:
        leaves = {LEAF_1: [f"{HOST}/down", f"{HOST}/up"]}
        fetcher = FakeFetcher(_site(leaves), failing={f"{HOST}/down"})

        with pytest.raises(FetchError):
            _run(ArchiveService(make_config(), fetcher, FakeRenderer()))

        assert f"{HOST}/up" not in fetcher.requested

    def test_fetch_failure_skipped_when_configured(self, make_config, tmp_path) -> None:
        leaves = {LEAF_1: [f"{HOST}/down", f"{HOST}/up"], LEAF_2: [f"{HOST}/other"]}
        fetcher = FakeFetcher(_site(leaves), failing={f"{HOST}/down", LEAF_2})

        summary = _run(ArchiveService(make_config(onFetchError="skip"), fetcher, FakeRenderer()))

        assert summary.fetch_failures == 2
        assert summary.pages_archived == 1
        assert (tmp_path / "archive" / "html" / "up.html").is_file()

    def test_missing_index_is_fatal_even_when_skipping(self, make_config) -> None:
        fetcher = FakeFetcher({})

        with pytest.raises(FetchError):
            _run(ArchiveService(make_config(onFetchError="skip"), fetcher, FakeRenderer()))

        assert fetcher.requested == [INDEX_URL]

    def test_malformed_leaf_sitemap_is_fatal(self, make_config) -> None:
        site = _site({LEAF_1: [f"{HOST}/a"]})
        site[LEAF_1] = "<urlset><url>"

        with pytest.raises(SitemapDecodeError):
            _run(ArchiveService(make_config(onFetchError="skip"), FakeFetcher(site), FakeRenderer()))

    def test_layout_created_even_when_index_is_empty(self, make_config, tmp_path) -> None:
        config = make_config(filterAndCatalog={"blog": "/blog/"})

        summary = _run(ArchiveService(config, FakeFetcher(_site({})), FakeRenderer()))

        assert summary.urls_found == 0
        assert (tmp_path / "archive" / "html" / "blog").is_dir()
        assert (tmp_path / "archive" / "pdf" / "blog").is_dir()

    def test_summary_file_written(self, make_config, tmp_path) -> None:
        leaves = {LEAF_1: [f"{HOST}/a"]}

        _run(ArchiveService(make_config(), FakeFetcher(_site(leaves)), FakeRenderer()))

        data = json.loads((tmp_path / "archive" / "archive_summary.json").read_text(encoding="utf-8"))
        assert data["pages_archived"] == 1
        assert data["leaf_sitemaps"] == 1

    def test_summary_file_can_be_disabled(self, make_config, tmp_path) -> None:
        _run(ArchiveService(make_config(writeSummary=False), FakeFetcher(_site({})), FakeRenderer()))
        assert not (tmp_path / "archive" / "archive_summary.json").exists()

    def test_bounded_concurrency_archives_every_page(self, make_config, tmp_path) -> None:
        page_urls = [f"{HOST}/p{i}" for i in range(8)]
        fetcher = FakeFetcher(_site({LEAF_1: page_urls}))

        summary = _run(ArchiveService(make_config(maxConcurrentFetches=3), fetcher, FakeRenderer()))

        assert summary.pages_archived == 8
        assert sorted(p.stem for p in (tmp_path / "archive" / "html").iterdir()) == sorted(f"p{i}" for i in range(8))


def test_fetch_url_helper(make_config) -> None:
    service = ArchiveService(make_config(fetchUrlParams="a=b"), FakeFetcher({}), FakeRenderer())
    assert service.fetch_url(f"{HOST}/x") == f"{HOST}/x?a=b"
    assert service.fetch_url(f"{HOST}/x?y=1") == f"{HOST}/x?y=1&a=b"
    assert ArchiveService(make_config(), FakeFetcher({}), FakeRenderer()).fetch_url(f"{HOST}/x") == f"{HOST}/x"
