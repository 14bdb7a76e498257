"""
Fetcher module: the HTTP boundary of the crawler.

Any object with ``async fetch(url) -> PageData`` can stand in for :class:`Fetcher`;
the engine only relies on that contract and on the two error types it raises.
"""
from __future__ import annotations

import asyncio
from typing import Protocol

from aiohttp import ClientError, ClientPayloadError, ClientSession

from site_mapper.crawler.models import PageData
from site_mapper.errors import ContentDecodeFailure, FetchFailure

__all__ = ("PageFetcher", "Fetcher")


class PageFetcher(Protocol):
    async def fetch(self, url: str) -> PageData: ...


class Fetcher:
    """Fetches pages over an aiohttp session. No retries: one request per URL."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> PageData:
        """
        GET *url* and return its body.

        Raises FetchFailure on transport errors, timeouts and any status >= 300
        (redirects are followed first). Raises ContentDecodeFailure when the
        body cannot be read to the end.
        """
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                if resp.status >= 300:
                    raise FetchFailure(url, status=resp.status)
                try:
                    body = await resp.read()
                except ClientPayloadError as exc:
                    raise ContentDecodeFailure(url, str(exc)) from exc
                return PageData(url=url, content=body, encoding=resp.charset)
        except asyncio.TimeoutError as exc:
            raise FetchFailure(url, reason="timed out") from exc
        except ClientError as exc:
            raise FetchFailure(url, reason=str(exc) or type(exc).__name__) from exc
