# ==============================================================================
# site_archiver/__init__.py — Site Archiver
# ==============================================================================
# Purpose: Main package with public API
# ==============================================================================

# Version information
__version__ = "1.0.0"

# Models
from .models import (
    ArchiveConfig,
    FetchErrorPolicy,
    RouteDecision,
    ArchivedPage,
    ArchiveSummary
)

# Errors
from .exceptions import (
    ArchiveError,
    ConfigurationError,
    FetchError,
    SitemapDecodeError,
    RenderError
)

# Service layer
from .services import ArchiveService, run_archive, config_service

__all__ = [
    # Models
    'ArchiveConfig',
    'FetchErrorPolicy',
    'RouteDecision',
    'ArchivedPage',
    'ArchiveSummary',

    # Errors
    'ArchiveError',
    'ConfigurationError',
    'FetchError',
    'SitemapDecodeError',
    'RenderError',

    # Services
    'ArchiveService',
    'run_archive',
    'config_service',

    # Metadata
    '__version__',
]
