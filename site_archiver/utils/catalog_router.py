# ==============================================================================
# catalog_router.py — Catalog routing
# ==============================================================================
# Purpose: Decide whether a URL is archived and which bucket it lands in
# Sections: Imports, Main Classes
# ==============================================================================

# Standard Library -----
import re
from typing import Dict, List, Optional, Pattern, Tuple

# Site Archiver ----
from site_archiver.models.archive_models import RouteDecision

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = ["CatalogRouter"]

# ==============================================================================
# Main Classes
# ==============================================================================

class CatalogRouter:
    """Routes URLs to catalog buckets using ordered regular-expression rules.

    Rules are tried in declaration order and the first pattern found anywhere
    in the URL wins. Without rules every URL is in scope for the root bucket.
    """

    def __init__(self, filter_and_catalog: Optional[Dict[str, str]] = None):
        self._rules: Optional[List[Tuple[str, Pattern]]] = None
        if filter_and_catalog is not None:
            self._rules = [
                (bucket, re.compile(pattern))
                for bucket, pattern in filter_and_catalog.items()
            ]

    @property
    def buckets(self) -> List[str]:
        return [bucket for bucket, _ in self._rules or []]

    def route(self, url: str) -> RouteDecision:
        if self._rules is None:
            return RouteDecision(in_scope=True, bucket="")

        for bucket, pattern in self._rules:
            if pattern.search(url):
                return RouteDecision(in_scope=True, bucket=bucket)

        return RouteDecision(in_scope=False)
