"""
Completion tracking for crawl tasks.
"""
from __future__ import annotations

import asyncio


class CompletionTracker:
    """
    Counts outstanding crawl tasks (queued plus in-flight).

    ``add`` is called when a URL enters the frontier and ``done`` exactly once
    when the task processing it finishes. ``wait`` resolves when the count is
    back to zero, immediately if nothing was ever added.
    """

    def __init__(self) -> None:
        self._count = 0
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def count(self) -> int:
        return self._count

    def add(self, n: int = 1) -> None:
        if n < 0:
            raise ValueError("add() expects a non-negative delta")
        self._count += n
        if self._count:
            self._idle.clear()

    def done(self) -> None:
        if self._count <= 0:
            raise RuntimeError("done() called more times than add()")
        self._count -= 1
        if self._count == 0:
            self._idle.set()

    async def wait(self) -> None:
        await self._idle.wait()
