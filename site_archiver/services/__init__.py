# ==============================================================================
# services/__init__.py — Service layer
# ==============================================================================
# Purpose: Configuration loading and archive orchestration
# ==============================================================================

from .config_service import ConfigService, config_service
from .archive_service import ArchiveService, run_archive

__all__ = [
    'ConfigService',
    'config_service',
    'ArchiveService',
    'run_archive',
]
