# ==============================================================================
# utils/__init__.py — Utils Package
# ==============================================================================
# Purpose: Routing, sanitizing, naming and storage helpers for the pipeline
# ==============================================================================

from .catalog_router import CatalogRouter
from .filename_utils import derive_filename
from .markup_sanitizer import MarkupSanitizer
from .sitemap_parser import parse_sitemap_index_content, parse_urlset_content
from .storage_layout import StorageLayout, ensure_layout

__all__ = [
    'CatalogRouter',
    'derive_filename',
    'MarkupSanitizer',
    'parse_sitemap_index_content',
    'parse_urlset_content',
    'StorageLayout',
    'ensure_layout',
]
