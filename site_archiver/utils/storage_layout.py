# ==============================================================================
# storage_layout.py — Archive storage layout
# ==============================================================================
# Purpose: Create the html/ and pdf/ trees and write archived files into them
# Sections: Imports, Public API, Main Classes
# ==============================================================================

# ==============================================================================
# Imports
# ==============================================================================

# Standard Library -----
from pathlib import Path
from typing import Iterable, List, Optional, Union

# Site Archiver ----
from site_archiver.models.archive_models import ArchivedPage, ArchiveSummary
from site_archiver.models.config_models import ArchiveConfig

# ==============================================================================
# Public exports
# ==============================================================================
__all__ = [
    'StorageLayout',
    'ensure_layout',
    'HTML_DIR',
    'PDF_DIR',
    'SUMMARY_FILENAME',
]

HTML_DIR = "html"
PDF_DIR = "pdf"
SUMMARY_FILENAME = "archive_summary.json"

# ==============================================================================
# Public API
# ==============================================================================

def ensure_layout(config: ArchiveConfig) -> "StorageLayout":
    """Create every output directory the run can write to and return the layout."""
    layout = StorageLayout(config.save_dir_root, config.catalog_buckets)
    layout.ensure_layout()
    return layout

# ==============================================================================
# Main Classes
# ==============================================================================

class StorageLayout:
    """Handles the ``<root>/html/<bucket>`` and ``<root>/pdf/<bucket>`` trees.

    Directories are created up front by :meth:`ensure_layout`; the write
    methods never create them.
    """

    def __init__(self, save_dir_root: Union[str, Path], buckets: Optional[Iterable[str]] = None):
        self.root = Path(save_dir_root)
        self.buckets: List[str] = list(buckets or [])

    @property
    def html_root(self) -> Path:
        return self.root / HTML_DIR

    @property
    def pdf_root(self) -> Path:
        return self.root / PDF_DIR

    def ensure_layout(self) -> None:
        """Create the html and pdf roots plus one subdirectory per bucket. Idempotent."""
        for base in (self.html_root, self.pdf_root):
            self._ensure_directory_exists(base)
            for bucket in self.buckets:
                self._ensure_directory_exists(base / bucket)

    def html_path(self, filename: str, bucket: str = "") -> Path:
        return self.html_root / bucket / f"{filename}.html" if bucket else self.html_root / f"{filename}.html"

    def pdf_path(self, filename: str, bucket: str = "") -> Path:
        return self.pdf_root / bucket / f"{filename}.pdf" if bucket else self.pdf_root / f"{filename}.pdf"

    def write_html(self, page: ArchivedPage) -> Path:
        """Write the sanitized HTML of *page*, overwriting any earlier copy."""
        file_path = self.html_path(page.filename, page.bucket)

        with open(file_path, "w", encoding="utf-8") as file:
            file.write(page.html)

        return file_path

    def write_summary(self, summary: ArchiveSummary, filename: str = SUMMARY_FILENAME) -> Path:
        """Write the run summary next to the html and pdf trees."""
        file_path = self.root / filename

        with open(file_path, "w", encoding="utf-8") as file:
            file.write(summary.model_dump_json(indent=2))

        return file_path

    def _ensure_directory_exists(self, directory: Path) -> None:
        directory.mkdir(parents=True, exist_ok=True)
