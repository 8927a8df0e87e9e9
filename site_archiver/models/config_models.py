import re
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class FetchErrorPolicy(str, Enum):
    """What the pipeline does when a page or leaf sitemap cannot be fetched"""
    ABORT = "abort"
    SKIP = "skip"


class ArchiveConfig(BaseModel):
    """Configuration for a single archive run, loaded once and never mutated"""
    sitemap_host: str = Field(alias="sitemapHost")
    sitemap_url: str = Field(alias="sitemapUrl")
    save_dir_root: str = Field(alias="saveDirRoot")
    fetch_url_params: Optional[str] = Field(default=None, alias="fetchUrlParams")
    strip_tags: Optional[List[str]] = Field(default=None, alias="stripTags")
    strip_content: Optional[List[str]] = Field(default=None, alias="stripContent")
    filter_and_catalog: Optional[Dict[str, str]] = Field(default=None, alias="filterAndCatalog")

    # Runtime behaviour
    max_concurrent_fetches: int = Field(default=1, ge=1, alias="maxConcurrentFetches")
    on_fetch_error: FetchErrorPolicy = Field(default=FetchErrorPolicy.ABORT, alias="onFetchError")
    request_timeout: Optional[float] = Field(default=None, gt=0, alias="requestTimeout")
    user_agent: Optional[str] = Field(default=None, alias="userAgent")
    write_summary: bool = Field(default=True, alias="writeSummary")

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("filter_and_catalog")
    @classmethod
    def _validate_catalog(cls, value: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        if value is None:
            return value

        for bucket, pattern in value.items():
            if not bucket or bucket in (".", "..") or "/" in bucket or "\\" in bucket:
                raise ValueError(f"Catalog bucket {bucket!r} is not a valid directory name")
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Catalog pattern for {bucket!r} is not a valid regular expression: {e}")

        return value

    @property
    def catalog_buckets(self) -> List[str]:
        """Bucket names in declaration order (empty when routing is disabled)"""
        return list(self.filter_and_catalog or {})
