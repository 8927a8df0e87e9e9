# ==============================================================================
# __init__.py — Model layer exports
# ==============================================================================
# Purpose: Export Pydantic models for easy importing
# Sections: Imports, Public exports
# ==============================================================================

from .config_models import (
    ArchiveConfig,
    FetchErrorPolicy
)

from .archive_models import (
    RouteDecision,
    ArchivedPage,
    ArchiveSummary
)

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = [
    # Config Models
    "ArchiveConfig",
    "FetchErrorPolicy",

    # Archive Models
    "RouteDecision",
    "ArchivedPage",
    "ArchiveSummary"
]
