# ==============================================================================
# markup_sanitizer.py — HTML sanitizing
# ==============================================================================
# Purpose: Remove configured tag blocks and literal fragments from fetched HTML
# Sections: Imports, Main Classes
# ==============================================================================

# Standard Library -----
import re
from typing import List, Optional, Pattern

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["MarkupSanitizer", "tag_block_pattern"]


def tag_block_pattern(tag: str) -> Pattern:
    """Pattern matching ``<tag ...>`` through the nearest following ``</tag>``.

    The match is lazy, so a block that contains a nested element with the same
    name ends at the inner closing tag and leaves the outer remainder behind.
    """
    name = re.escape(tag)
    return re.compile(rf"<{name}\b[^>]*>[\s\S]*?</{name}\s*>", re.IGNORECASE)

# ==============================================================================
# Main Classes
# ==============================================================================

class MarkupSanitizer:
    """Applies the strip-tag rules, then the strip-content rules, in list order."""

    def __init__(self, strip_tags: Optional[List[str]] = None, strip_content: Optional[List[str]] = None):
        self._tag_patterns = [tag_block_pattern(tag) for tag in strip_tags or []]
        self._content = [fragment for fragment in strip_content or [] if fragment]

    def sanitize(self, html: str) -> str:
        for pattern in self._tag_patterns:
            html = pattern.sub("", html)

        for fragment in self._content:
            html = html.replace(fragment, "")

        return html
