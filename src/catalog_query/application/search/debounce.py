"""Application search – Debouncer."""
from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from catalog_query.kernel.time import LoopScheduler, Scheduler, TimerHandle

__all__ = ["Debouncer"]

T = TypeVar("T")

logger = logging.getLogger(__name__)

_UNSET: object = object()


class Debouncer(Generic[T]):
    """Delay propagation of a rapidly changing value until it settles.

    Every :meth:`observe` restarts the timer; only the value present when the
    timer fires is committed and handed to *on_settle*. Intermediate values
    are dropped, never queued::

        debouncer = Debouncer(500, on_settle=lambda text: store.dispatch(set_text(text)))
        debouncer.observe("a")
        debouncer.observe("ab")
        debouncer.observe("abc")   # one emission, "abc", 500 ms later
    """

    def __init__(
        self,
        delay_ms: int,
        on_settle: Callable[[T], None] | None = None,
        *,
        scheduler: Scheduler | None = None,
        initial: T | None = None,
    ) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        self._delay_ms = delay_ms
        self._on_settle = on_settle
        self._scheduler: Scheduler = scheduler or LoopScheduler()
        self._value: T | None = initial
        self._pending: object = _UNSET
        self._timer: TimerHandle | None = None
        self._closed = False

    @property
    def value(self) -> T | None:
        """The latest committed (settled) value."""
        return self._value

    @property
    def pending(self) -> bool:
        return self._pending is not _UNSET

    @property
    def closed(self) -> bool:
        return self._closed

    def observe(self, value: T, delay_ms: int | None = None) -> T | None:
        """Record *value* and restart the settle timer.

        Returns the currently settled value, which is not *value* until the
        timer fires.
        """
        if self._closed:
            raise RuntimeError("Debouncer is closed")
        self._cancel_timer()
        self._pending = value
        delay = self._delay_ms if delay_ms is None else delay_ms
        self._timer = self._scheduler.call_later(delay / 1000, self._fire)
        return self._value

    def flush(self) -> T | None:
        """Settle a pending value immediately (e.g. on Enter)."""
        if self.pending:
            self._cancel_timer()
            self._commit()
        return self._value

    def cancel(self) -> None:
        """Drop the pending value without emitting it."""
        self._cancel_timer()
        self._pending = _UNSET

    def reset(self, value: T | None) -> None:
        """Drop any pending value and make *value* the settled one, silently."""
        self.cancel()
        self._value = value

    def close(self) -> None:
        """Tear down: cancel any pending timer; nothing is emitted afterwards."""
        self.cancel()
        self._closed = True

    def _fire(self) -> None:
        self._timer = None
        if self._closed or not self.pending:
            return
        self._commit()

    def _commit(self) -> None:
        value = self._pending
        self._pending = _UNSET
        self._value = value  # type: ignore[assignment]
        logger.debug("debounce.settled value=%r", value)
        if self._on_settle is not None:
            self._on_settle(value)  # type: ignore[arg-type]

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
