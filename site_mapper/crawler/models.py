"""
Data models for the SiteMapper crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Union

if TYPE_CHECKING:
    from site_mapper.crawler.sitemap import SitemapStore
    from site_mapper.errors import CrawlError


@dataclass(slots=True)
class PageData:
    """Raw result of a successful fetch: body bytes (or text) and declared charset."""

    url: str
    content: Union[str, bytes]
    encoding: Optional[str] = None


@dataclass(slots=True, frozen=True)
class CrawlStat:
    """Timings of one crawled URL, in seconds."""

    total_time: float
    fetch_time: float


@dataclass(slots=True)
class CrawlReport:
    """Output of a finished crawl. Read-only once returned."""

    base_url: str
    domain: str
    sitemap: SitemapStore
    stats: Dict[str, CrawlStat] = field(default_factory=dict)
    failures: Dict[str, CrawlError] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def total_crawls(self) -> int:
        return len(self.sitemap)
