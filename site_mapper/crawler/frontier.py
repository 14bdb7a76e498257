"""
Bounded frontier of URLs waiting to be fetched.
"""
from __future__ import annotations

import asyncio
from typing import Set


class Frontier:
    """
    FIFO queue shared by the worker pool.

    The queue itself holds at most *capacity* URLs. Workers are both consumers
    and producers, so a worker must never block on a full queue: every worker
    could end up waiting on ``put`` with nobody left to ``get``. Instead,
    :meth:`push` parks the URL in a feeder task that completes as soon as a
    worker frees a slot. Parked URLs are not bounded by *capacity*; their number
    is bounded only by the URLs claimed so far (see :attr:`waiting`).
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._queue: asyncio.Queue[str] = asyncio.Queue(maxsize=capacity)
        self._feeders: Set[asyncio.Task[None]] = set()

    def push(self, url: str) -> None:
        try:
            self._queue.put_nowait(url)
        except asyncio.QueueFull:
            task = asyncio.get_running_loop().create_task(self._queue.put(url))
            self._feeders.add(task)
            task.add_done_callback(self._feeders.discard)

    async def pop(self) -> str:
        return await self._queue.get()

    def task_done(self) -> None:
        self._queue.task_done()

    @property
    def waiting(self) -> int:
        """URLs parked behind a full queue."""
        return len(self._feeders)

    def __len__(self) -> int:
        return self._queue.qsize()

    async def close(self) -> None:
        """Cancel feeders still pending (only possible if the crawl was aborted)."""
        for task in list(self._feeders):
            task.cancel()
        if self._feeders:
            await asyncio.gather(*self._feeders, return_exceptions=True)
