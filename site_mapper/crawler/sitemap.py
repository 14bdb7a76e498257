"""
Sitemap store: parent URL → links found on it.
"""
from __future__ import annotations

import threading
from typing import Callable, Dict, Iterable, List, Optional, Tuple


class SitemapStore:
    """Write-once mapping of crawled URLs to their children, safe for concurrent writers."""

    def __init__(self) -> None:
        self._entries: Dict[str, Tuple[str, ...]] = {}
        self._lock = threading.Lock()

    def record(self, parent: str, children: Iterable[str]) -> None:
        """Store *children* for *parent*. A parent can be recorded only once."""
        frozen = tuple(children)
        with self._lock:
            if parent in self._entries:
                raise KeyError(f"sitemap entry already recorded for {parent}")
            self._entries[parent] = frozen

    def get(self, url: str) -> Optional[List[str]]:
        with self._lock:
            children = self._entries.get(url)
        return None if children is None else list(children)

    def for_each(self, fn: Callable[[str, List[str]], Optional[bool]]) -> None:
        """
        Call ``fn(parent, children)`` for each entry in recording order.

        Iteration stops early when *fn* returns ``False``.
        """
        for parent, children in self.items():
            if fn(parent, children) is False:
                break

    def items(self) -> List[Tuple[str, List[str]]]:
        with self._lock:
            snapshot = list(self._entries.items())
        return [(parent, list(children)) for parent, children in snapshot]

    def urls(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def to_dict(self) -> Dict[str, List[str]]:
        return dict(self.items())

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
