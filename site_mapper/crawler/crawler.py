# === FILE: site_mapper/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlparse

from aiohttp import ClientSession, ClientTimeout, TCPConnector

from site_mapper.config import CrawlConfig
from site_mapper.crawler.fetcher import Fetcher, PageFetcher
from site_mapper.crawler.frontier import Frontier
from site_mapper.crawler.link_extractor import extract_links
from site_mapper.crawler.models import CrawlReport, CrawlStat, PageData
from site_mapper.crawler.sitemap import SitemapStore
from site_mapper.crawler.tracker import CompletionTracker
from site_mapper.crawler.visited import VisitedSet
from site_mapper.errors import ContentDecodeFailure, CrawlError, FetchFailure, InvalidSeedURL
from site_mapper.logger import get_logger

__all__ = ("SiteCrawler", "parse_seed")


def parse_seed(url: str) -> Tuple[str, str]:
    """Return ``(root, host)`` of a seed URL, e.g. ``("https://example.com", "example.com")``."""
    try:
        parsed = urlparse(url)
        hostname, _port = parsed.hostname, parsed.port
    except ValueError as exc:
        raise InvalidSeedURL(url) from exc
    if parsed.scheme not in ("http", "https") or not hostname:
        raise InvalidSeedURL(url)
    # userinfo is not part of the host links are matched against
    host = parsed.netloc.rpartition("@")[2]
    return f"{parsed.scheme}://{host}", host


class SiteCrawler:
    """Обходит все страницы одного домена пулом асинхронных воркеров и строит карту сайта."""

    def __init__(self, config: CrawlConfig, fetcher: Optional[PageFetcher] = None) -> None:
        self.config = config
        self.root, host = parse_seed(config.base_url)
        self.domain: str = config.domain or host
        self.logger = get_logger("crawler")

        self.visited = VisitedSet()
        self.sitemap = SitemapStore()
        self.tracker = CompletionTracker()
        self.stats: Dict[str, CrawlStat] = {}
        self.failures: Dict[str, CrawlError] = {}
        self.skipped: List[str] = []

        self.fetcher: Optional[PageFetcher] = fetcher
        self.session: Optional[ClientSession] = None
        self._frontier: Optional[Frontier] = None
        self._started = False

    async def __aenter__(self) -> SiteCrawler:
        if self.fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                connector=TCPConnector(limit=self.config.workers),
                raise_for_status=False,
            )
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> CrawlReport:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized; use 'async with SiteCrawler(...)'")
        if self._started:
            raise RuntimeError("SiteCrawler instances are single-use")
        self._started = True

        self.logger.info("Старт обхода: %s (domain %s)", self.config.base_url, self.domain)
        start = time.monotonic()
        self._frontier = Frontier(self.config.queue_capacity)
        self._submit(self.config.base_url)
        workers = [asyncio.create_task(self._worker()) for _ in range(self.config.workers)]
        try:
            await self.tracker.wait()
        finally:
            for w in workers:
                w.cancel()
            await asyncio.gather(*workers, return_exceptions=True)
            await self._frontier.close()

        elapsed = time.monotonic() - start
        self.logger.info(
            "Завершено: %d страниц за %.2f с, ошибок %d, пропущено %d",
            len(self.sitemap), elapsed, len(self.failures), len(self.skipped),
        )
        return CrawlReport(
            base_url=self.config.base_url,
            domain=self.domain,
            sitemap=self.sitemap,
            stats=dict(self.stats),
            failures=dict(self.failures),
            skipped=list(self.skipped),
            elapsed=elapsed,
        )

    def _submit(self, url: str) -> bool:
        """Claim *url* and queue it. Returns False if it was already claimed."""
        if not self.visited.try_claim(url):
            return False
        self.tracker.add()
        self._frontier.push(url)
        self.logger.debug("Queued %s", url)
        return True

    async def _worker(self) -> None:
        frontier = self._frontier
        while True:
            url = await frontier.pop()
            try:
                await self._visit(url)
            except CrawlError as exc:
                self.failures[url] = exc
                self.logger.warning("%s", exc)
            except Exception as exc:
                self.failures[url] = CrawlError(url, f"Unexpected error for URL ({url}): {exc!r}")
                self.logger.exception("Unexpected error while crawling %s", url)
            finally:
                frontier.task_done()
                self.tracker.done()

    async def _visit(self, url: str) -> None:
        if self._is_ignored(url):
            self.skipped.append(url)
            self.logger.debug("Skipping %s (ignored suffix)", url)
            return

        start = time.monotonic()
        try:
            page = await asyncio.wait_for(self.fetcher.fetch(url), timeout=self.config.timeout)
        except asyncio.TimeoutError as exc:
            self.visited.retract(url)
            raise FetchFailure(url, reason="timed out") from exc
        except FetchFailure:
            self.visited.retract(url)
            raise
        fetch_time = time.monotonic() - start

        html = self._decode(page)
        children = extract_links(html, self.root, self.domain)
        self.sitemap.record(url, children)
        for link in children:
            self._submit(link)

        self.stats[url] = CrawlStat(total_time=time.monotonic() - start, fetch_time=fetch_time)

    def _is_ignored(self, url: str) -> bool:
        return any(url.endswith(suffix) for suffix in self.config.ignore_suffixes)

    @staticmethod
    def _decode(page: PageData) -> str:
        if isinstance(page.content, str):
            return page.content
        try:
            return page.content.decode(page.encoding or "utf-8")
        except (UnicodeDecodeError, LookupError) as exc:
            raise ContentDecodeFailure(page.url, str(exc)) from exc
