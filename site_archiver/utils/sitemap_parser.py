# ==============================================================================
# sitemap_parser.py — Sitemap XML decoding
# ==============================================================================
# Purpose: Decode sitemap index and urlset documents into location lists
# Sections: Imports, Public API, Helper Functions
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
import xml.etree.ElementTree as ET
from typing import List

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = [
    "SITEMAP_NAMESPACES",
    "parse_sitemap_index_content",
    "parse_urlset_content",
]

SITEMAP_NAMESPACES = {
    'sitemap': 'http://www.sitemaps.org/schemas/sitemap/0.9'
}

# ==============================================================================
# Public API
# ==============================================================================

def parse_sitemap_index_content(content: str) -> List[str]:
    """Return the leaf sitemap locations listed by a sitemap index, in document order.

    A well-formed document that is not a sitemap index yields an empty list.

    Raises:
        ET.ParseError: If the content is not well-formed XML.
    """
    root = ET.fromstring(content)
    if _local_name(root.tag) != "sitemapindex":
        return []

    return _collect_locations(root, "sitemap")


def parse_urlset_content(content: str) -> List[str]:
    """Return the page locations listed by a leaf sitemap, in document order.

    A single ``<url>`` entry still yields a one-element list.

    Raises:
        ET.ParseError: If the content is not well-formed XML.
    """
    root = ET.fromstring(content)
    if _local_name(root.tag) != "urlset":
        return []

    return _collect_locations(root, "url")

# ==============================================================================
# Helper Functions
# ==============================================================================

def _collect_locations(root: ET.Element, entry_tag: str) -> List[str]:
    entries = root.findall(f'sitemap:{entry_tag}', SITEMAP_NAMESPACES)
    if not entries:
        entries = root.findall(entry_tag)

    locations = []
    for entry in entries:
        loc_elem = entry.find('sitemap:loc', SITEMAP_NAMESPACES)
        if loc_elem is None:
            loc_elem = entry.find('loc')

        if loc_elem is not None and loc_elem.text and loc_elem.text.strip():
            locations.append(loc_elem.text.strip())

    return locations


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on qualified tags."""
    return tag.rsplit('}', 1)[-1]
