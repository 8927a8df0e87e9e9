# ==============================================================================
# __init__.py — Client layer exports
# ==============================================================================
# Purpose: Export the HTTP fetcher and PDF renderer
# Sections: Imports, Public exports
# ==============================================================================

from .http_client import ContentFetcher
from .pdf_renderer import PdfRenderer

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["ContentFetcher", "PdfRenderer"]
