from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RouteDecision(BaseModel):
    """Outcome of routing a URL against the catalog rules"""
    in_scope: bool
    bucket: str = ""


class ArchivedPage(BaseModel):
    """Sanitized page content and where it is persisted"""
    url: str
    html: str
    filename: str
    bucket: str = ""
    pdf_saved: bool = False


class ArchiveSummary(BaseModel):
    """Counts collected over one archive run"""
    sitemap_url: str
    started_at: datetime = Field(default_factory=datetime.now)
    leaf_sitemaps: int = 0
    urls_found: int = 0
    pages_archived: int = 0
    routing_misses: int = 0
    fetch_failures: int = 0
    pdf_failures: int = 0
    processing_time_seconds: Optional[float] = None
