"""Kernel time – Scheduler port + implementations."""
from catalog_query.kernel.time.scheduler import (
    LoopScheduler,
    ManualScheduler,
    ManualTimer,
    Scheduler,
    TimerHandle,
)

__all__ = ["LoopScheduler", "ManualScheduler", "ManualTimer", "Scheduler", "TimerHandle"]
