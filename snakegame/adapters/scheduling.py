"""
Scheduler implementations.

RealtimeScheduler is a thin wrapper over the `schedule` library for hosts
that run a wall-clock loop. VirtualScheduler keeps its own clock and only
moves when told to, which makes headless runs and tests deterministic.
"""

import heapq
import itertools
import logging
from typing import Any, Callable, List, Optional, Tuple

import schedule

from .base import Scheduler

logger = logging.getLogger(__name__)


class RealtimeScheduler(Scheduler):
    """
    Wall-clock scheduler. The host must call run_pending() from its loop.
    """

    def __init__(self, backend: Optional[schedule.Scheduler] = None):
        self.backend = backend or schedule.Scheduler()

    def call_every(self, period_ms: int, callback: Callable[[], Any]) -> schedule.Job:
        return self.backend.every(period_ms / 1000.0).seconds.do(callback)

    def call_later(self, delay_ms: int, callback: Callable[[], Any]) -> schedule.Job:
        def run_once():
            callback()
            return schedule.CancelJob

        return self.backend.every(delay_ms / 1000.0).seconds.do(run_once)

    def cancel(self, handle: Any) -> None:
        if handle is None:
            return
        self.backend.cancel_job(handle)

    def run_pending(self) -> None:
        self.backend.run_pending()

    @property
    def idle_seconds(self) -> Optional[float]:
        """Seconds until the next job is due, or None when nothing is scheduled."""
        return self.backend.idle_seconds

    def clear(self) -> None:
        self.backend.clear()


class _Task:
    def __init__(self, due_ms: int, period_ms: Optional[int], callback: Callable[[], Any]):
        self.due_ms = due_ms
        self.period_ms = period_ms
        self.callback = callback
        self.cancelled = False

    def __repr__(self):
        kind = "every" if self.period_ms is not None else "once"
        return f"<_Task {kind} due={self.due_ms} cancelled={self.cancelled}>"


class VirtualScheduler(Scheduler):
    """
    Scheduler driven by an explicit virtual clock (milliseconds).

    Callbacks fire from advance(), in due-time order, with ties broken by
    scheduling order. A callback may schedule or cancel other tasks.
    """

    def __init__(self):
        self.now_ms = 0
        self._queue: List[Tuple[int, int, _Task]] = []
        self._counter = itertools.count()

    def _push(self, task: _Task) -> None:
        heapq.heappush(self._queue, (task.due_ms, next(self._counter), task))

    def call_every(self, period_ms: int, callback: Callable[[], Any]) -> _Task:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        task = _Task(self.now_ms + period_ms, period_ms, callback)
        self._push(task)
        return task

    def call_later(self, delay_ms: int, callback: Callable[[], Any]) -> _Task:
        task = _Task(self.now_ms + max(0, delay_ms), None, callback)
        self._push(task)
        return task

    def cancel(self, handle: Any) -> None:
        if isinstance(handle, _Task):
            handle.cancelled = True

    @property
    def pending(self) -> int:
        """Number of live (not cancelled) tasks."""
        return sum(1 for _, _, task in self._queue if not task.cancelled)

    def advance(self, ms: int) -> int:
        """
        Move the clock forward by ms, firing every task that comes due.

        Returns:
            Number of callbacks that ran
        """
        target = self.now_ms + ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due_ms, _, task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            self.now_ms = due_ms
            if task.period_ms is not None:
                task.due_ms = due_ms + task.period_ms
                self._push(task)
            else:
                task.cancelled = True
            task.callback()
            fired += 1
        self.now_ms = target
        return fired
