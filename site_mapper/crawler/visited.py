"""
Concurrency-safe registry of URLs claimed by the current crawl.
"""
from __future__ import annotations

import threading
from typing import Set


class VisitedSet:
    """Set of claimed URLs with an atomic check-and-insert."""

    def __init__(self) -> None:
        self._urls: Set[str] = set()
        self._lock = threading.Lock()

    def try_claim(self, url: str) -> bool:
        """
        Claim *url* for crawling.

        Returns True if the URL was absent and is now owned by the caller,
        False if another task already claimed it.
        """
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def retract(self, url: str) -> None:
        """Drop a claim after a failed fetch. Unknown URLs are ignored."""
        with self._lock:
            self._urls.discard(url)

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)

    def snapshot(self) -> Set[str]:
        with self._lock:
            return set(self._urls)
