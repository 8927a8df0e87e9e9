# ==============================================================================
# pdf_renderer.py — PDF snapshot renderer
# ==============================================================================
# Purpose: Render sanitized HTML to a PDF file with headless Chromium
# Sections: Imports, Public exports, Main Classes
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import logging
from pathlib import Path
from typing import Optional, Union

# Third Party -----
from playwright.async_api import Browser, Page, Playwright, async_playwright

# Site Archiver ----
from site_archiver.exceptions import RenderError

logger = logging.getLogger(__name__)

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["PdfRenderer"]

# ==============================================================================
# Main Classes
# ==============================================================================

class PdfRenderer:
    """Renders HTML strings to PDF files, reusing one browser for the whole run."""

    def __init__(self, page_format: str = "A4", print_background: bool = True):
        self.page_format = page_format
        self.print_background = print_background
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def __aenter__(self):
        """Start Playwright and launch Chromium."""
        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.launch(headless=True)
        except BaseException:
            await self._playwright.stop()
            self._playwright = None
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Close the browser and stop Playwright."""
        if self._browser:
            await self._browser.close()
            self._browser = None
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    async def render(self, html: str, output_path: Union[str, Path]) -> Path:
        """Render *html* and write the PDF to *output_path*.

        Raises:
            RenderError: If the browser cannot open a page, load the markup or print it.
        """
        if not self._browser:
            raise RuntimeError("Renderer must be used as async context manager")

        output_path = Path(output_path)
        page = None
        try:
            page = await self._browser.new_page()
            await page.set_content(html, wait_until="load")
            await page.pdf(
                path=str(output_path),
                format=self.page_format,
                print_background=self.print_background,
            )
        except Exception as e:
            raise RenderError(f"PDF rendering failed for {output_path}: {e}") from e
        finally:
            if page is not None:
                await self._close_page(page)

        return output_path

    async def _close_page(self, page: Page) -> None:
        try:
            await page.close()
        except Exception as e:
            logger.warning("⚠️  Could not close render page: %s", e)
