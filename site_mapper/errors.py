"""site_mapper.errors: Ошибки обхода сайта.

Ошибки отдельной задачи (FetchFailure, ContentDecodeFailure) остаются локальными:
движок записывает их в отчёт и продолжает обход. InvalidSeedURL прерывает запуск
до первого запроса.
"""
from __future__ import annotations

from typing import Optional

__all__ = ("CrawlError", "FetchFailure", "ContentDecodeFailure", "InvalidSeedURL")


class CrawlError(Exception):
    """Базовая ошибка, привязанная к URL."""

    def __init__(self, url: str, message: Optional[str] = None) -> None:
        self.url = url
        super().__init__(message or f"Crawl error for URL ({url}).")


class FetchFailure(CrawlError):
    """Сетевая ошибка, таймаут или статус ответа >= 300."""

    def __init__(self, url: str, status: Optional[int] = None, reason: Optional[str] = None) -> None:
        self.status = status
        self.reason = reason
        detail = f"HTTP {status}" if status is not None else (reason or "transport error")
        super().__init__(url, f"Failed to fetch URL ({url}): {detail}.")


class ContentDecodeFailure(CrawlError):
    """Тело ответа не удалось прочитать или декодировать в текст."""

    def __init__(self, url: str, reason: Optional[str] = None) -> None:
        self.reason = reason
        suffix = f": {reason}" if reason else ""
        super().__init__(url, f"Could not parse HTML content for URL ({url}){suffix}.")


class InvalidSeedURL(CrawlError, ValueError):
    """Стартовый URL не является абсолютным http(s)-адресом с хостом."""

    def __init__(self, url: str) -> None:
        super().__init__(url, f"Failed to parse URL ({url}).")
