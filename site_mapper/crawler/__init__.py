"""site_mapper.crawler: concurrent same-domain crawl engine."""
from site_mapper.crawler.crawler import SiteCrawler, parse_seed
from site_mapper.crawler.fetcher import Fetcher, PageFetcher
from site_mapper.crawler.frontier import Frontier
from site_mapper.crawler.link_extractor import extract_absolute_links, extract_links, extract_relative_links
from site_mapper.crawler.models import CrawlReport, CrawlStat, PageData
from site_mapper.crawler.sitemap import SitemapStore
from site_mapper.crawler.tracker import CompletionTracker
from site_mapper.crawler.visited import VisitedSet

__all__ = [
    "SiteCrawler",
    "parse_seed",
    "Fetcher",
    "PageFetcher",
    "Frontier",
    "extract_absolute_links",
    "extract_links",
    "extract_relative_links",
    "CrawlReport",
    "CrawlStat",
    "PageData",
    "SitemapStore",
    "CompletionTracker",
    "VisitedSet",
]
