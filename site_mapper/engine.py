"""site_mapper.engine: Фасад запуска обхода для CLI и тестов."""

from __future__ import annotations

from typing import Optional

from site_mapper.config import CrawlConfig
from site_mapper.crawler.crawler import SiteCrawler
from site_mapper.crawler.fetcher import PageFetcher
from site_mapper.crawler.models import CrawlReport
from site_mapper.logger import get_logger

__all__ = ["start_crawl"]

logger = get_logger("engine")


async def start_crawl(config: CrawlConfig, fetcher: Optional[PageFetcher] = None) -> CrawlReport:
    """Проверяет стартовый URL, запускает обход и возвращает отчёт.

    Без *fetcher* создаётся aiohttp-сессия на время обхода.
    InvalidSeedURL поднимается до первого запроса.
    """
    crawler = SiteCrawler(config, fetcher=fetcher)
    logger.debug("Crawler ready: root=%s domain=%s workers=%d", crawler.root, crawler.domain, config.workers)
    async with crawler:
        return await crawler.crawl()
