# File: tests/conftest.py
from __future__ import annotations

import asyncio
from collections import Counter
from typing import AsyncIterator, Dict, Mapping, Optional, Union

import pytest
from aiohttp import web

from site_mapper.config import CrawlConfig
from site_mapper.crawler.models import PageData
from site_mapper.errors import FetchFailure

BASE = "https://example.com"

FakePage = Union[str, int, bytes, PageData, BaseException]


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


class FakeFetcher:
    """
    In-memory fetcher counting calls per URL.

    *pages* maps URL to: HTML text, an int status (>= 300 raises FetchFailure),
    raw bytes, a ready PageData, or an exception to raise. Unknown URLs are 404.
    """

    def __init__(self, pages: Mapping[str, FakePage], delays: Optional[Dict[str, float]] = None) -> None:
        self.pages = dict(pages)
        self.delays = delays or {}
        self.calls: Counter[str] = Counter()
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, url: str) -> PageData:
        self.calls[url] += 1
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, 0))
            page = self.pages.get(url, 404)
            if isinstance(page, BaseException):
                raise page
            if isinstance(page, PageData):
                return page
            if isinstance(page, int):
                raise FetchFailure(url, status=page)
            if isinstance(page, bytes):
                return PageData(url=url, content=page)
            return PageData(url=url, content=page.encode("utf-8"), encoding="utf-8")
        finally:
            self.in_flight -= 1


@pytest.fixture()
def make_config():
    """Factory for a CrawlConfig rooted at BASE with test-friendly defaults."""

    def _make(**overrides) -> CrawlConfig:
        data = {"base_url": BASE, "workers": 4, "queue_capacity": 10, "timeout": 2.0}
        data.update(overrides)
        return CrawlConfig(**data)

    return _make


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()
