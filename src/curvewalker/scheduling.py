"""Repeating-task abstraction that drives the animation tick.

A task calls its callback, then asks ``interval_fn`` for the delay before the
next call. Re-reading the interval after every tick lets a rate change apply
to the very next tick without restarting the task.

All implementations run the callback on a single thread: the caller's thread
for ``ManualScheduler`` and ``SleepScheduler``, the GUI event loop for
``MatplotlibTimerScheduler``.
"""

from __future__ import annotations
import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

log = logging.getLogger(__name__)

TickCallback = Callable[[], None]
IntervalFn = Callable[[], float]


class RepeatingTask(ABC):
    """Calls a callback repeatedly with a dynamically re-read interval (ms)."""

    def __init__(self):
        self._callback: Optional[TickCallback] = None
        self._interval_fn: Optional[IntervalFn] = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback, interval_fn: IntervalFn) -> None:
        """Arm the task. Restarting replaces the previous callback."""
        self._callback = callback
        self._interval_fn = interval_fn
        self._arm(interval_fn())

    def stop(self) -> None:
        if self._callback is None:
            return
        self._callback = None
        self._interval_fn = None
        self._disarm()

    def _fire(self) -> None:
        """Run one tick and re-arm with the current interval."""
        if self._callback is None:
            return
        self._callback()
        # The callback may have stopped the task
        if self._interval_fn is not None:
            self._arm(self._interval_fn())

    @abstractmethod
    def _arm(self, delay_ms: float) -> None:
        """Schedule ``_fire`` after ``delay_ms`` milliseconds."""

    def _disarm(self) -> None:
        pass


class ManualScheduler(RepeatingTask):
    """Task advanced explicitly by the caller.

    Attributes:
        delays: Every delay the task was armed with, in order.
    """

    def __init__(self):
        super().__init__()
        self.delays: List[float] = []

    def _arm(self, delay_ms: float) -> None:
        self.delays.append(delay_ms)

    @property
    def next_delay(self) -> Optional[float]:
        return self.delays[-1] if self.delays else None

    def advance(self, ticks: int = 1) -> None:
        """Fire ``ticks`` pending ticks (no-op once stopped)."""
        for _ in range(ticks):
            if not self.active:
                break
            self._fire()


class SleepScheduler(RepeatingTask):
    """Blocking loop on the caller's thread, sleeping between ticks.

    Args:
        sleep: Sleep function taking seconds (``time.sleep`` by default).
    """

    def __init__(self, sleep: Callable[[float], None] = time.sleep):
        super().__init__()
        self._sleep = sleep
        self._pending: Optional[float] = None

    def _arm(self, delay_ms: float) -> None:
        self._pending = delay_ms

    def _disarm(self) -> None:
        self._pending = None

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Run ticks until stopped or ``max_ticks`` have fired.

        Returns:
            The number of ticks fired.
        """
        fired = 0
        while self.active and self._pending is not None:
            if max_ticks is not None and fired >= max_ticks:
                break
            delay = self._pending
            if delay > 0:
                self._sleep(delay / 1000.0)
            self._fire()
            fired += 1
        log.debug("sleep scheduler ran %d ticks", fired)
        return fired


class MatplotlibTimerScheduler(RepeatingTask):
    """Task backed by a single-shot matplotlib canvas timer.

    The timer is re-armed after every tick with the interval read at that
    moment, so it always runs on the GUI event loop.

    Args:
        canvas: A matplotlib ``FigureCanvas``.
    """

    def __init__(self, canvas):
        super().__init__()
        self._timer = canvas.new_timer()
        self._timer.single_shot = True
        self._timer.add_callback(self._fire)

    def _arm(self, delay_ms: float) -> None:
        self._timer.stop()
        self._timer.interval = max(1, int(round(delay_ms)))
        self._timer.start()

    def _disarm(self) -> None:
        self._timer.stop()
