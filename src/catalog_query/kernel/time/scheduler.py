"""Kernel time – Scheduler protocol + implementations."""
from __future__ import annotations

import asyncio
import dataclasses
import heapq
import itertools
from typing import Callable, Protocol


class TimerHandle(Protocol):
    """Handle returned by :meth:`Scheduler.call_later`."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Port: delayed callbacks for deterministic testing."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class LoopScheduler:
    """Production scheduler that delegates to ``loop.call_later``.

    When no loop is given the running loop is looked up on every call, so a
    single instance can be created before the loop starts.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


@dataclasses.dataclass(eq=False)
class ManualTimer:
    due: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Test scheduler driven by virtual time."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._seq = itertools.count()
        self._queue: list[tuple[float, int, ManualTimer]] = []

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled)

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(due=self._now + max(0.0, delay), callback=callback)
        heapq.heappush(self._queue, (timer.due, next(self._seq), timer))
        return timer

    def advance(self, seconds: float) -> int:
        """Move virtual time forward and fire every due timer in order.

        Returns the number of callbacks fired.
        """
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            self._now = due
            if timer.cancelled:
                continue
            timer.cancelled = True
            timer.callback()
            fired += 1
        self._now = target
        return fired


__all__ = ["LoopScheduler", "ManualScheduler", "ManualTimer", "Scheduler", "TimerHandle"]
