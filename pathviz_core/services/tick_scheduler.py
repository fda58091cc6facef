# pathviz_core/services/tick_scheduler.py
"""
    Tick schedulers — cancellable delayed callbacks for replay playback.

    Design Pattern: Strategy
    ────────────────────────
    ``ReplayController`` only needs "call this later, and let me cancel
    it". Where the callbacks actually come from is pluggable:

        • AsyncioTickScheduler – a running asyncio event loop.
        • ManualTickScheduler  – a virtual clock moved by ``advance()``;
                                 deterministic, used by the shell and tests.
"""
import asyncio
import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Float drift allowed when summed tick delays are compared to the clock
_EPSILON = 1e-9


class TimerHandle(ABC):
    """A pending callback that can be cancelled before it fires."""

    @abstractmethod
    def cancel(self) -> None:
        ...

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        ...


class TickScheduler(ABC):
    """
    Abstract scheduler contract.
    """

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """
        Arrange for ``callback`` to run once, ``delay`` seconds from now.

        Returns:
            Handle whose ``cancel()`` guarantees the callback never runs.
        """
        ...


# ═════════════════════════════════════════════════════════════════
#  ASYNCIO
# ═════════════════════════════════════════════════════════════════

class _AsyncioTimerHandle(TimerHandle):

    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()

    @property
    def cancelled(self) -> bool:
        return self._handle.cancelled()


class AsyncioTickScheduler(TickScheduler):
    """
    Schedules on an asyncio event loop.

    Args:
        loop: Loop to schedule on. Defaults to the running loop at the
              time of each ``call_later``.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioTimerHandle(loop.call_later(delay, callback))


# ═════════════════════════════════════════════════════════════════
#  MANUAL (virtual clock)
# ═════════════════════════════════════════════════════════════════

class _ManualTimerHandle(TimerHandle):

    def __init__(self, due: float):
        self.due = due
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ManualTickScheduler(TickScheduler):
    """
    Virtual-time scheduler. Nothing fires until ``advance()`` moves the
    clock; callbacks then run in due-time order (FIFO for equal times),
    including callbacks scheduled by other callbacks during the advance.
    """

    def __init__(self):
        self._now = 0.0
        self._queue: List[Tuple[float, int, _ManualTimerHandle, Callable[[], None]]] = []
        self._counter = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = _ManualTimerHandle(self._now + max(delay, 0.0))
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle, callback))
        return handle

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and run everything that became due.

        Returns:
            Number of callbacks that ran.
        """
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target + _EPSILON:
            due, _, handle, callback = heapq.heappop(self._queue)
            self._now = due
            if handle.cancelled:
                continue
            callback()
            fired += 1
        self._now = max(self._now, target)
        logger.debug("Manual clock advanced to %.3fs, %d callback(s) fired", target, fired)
        return fired

    def pending(self) -> int:
        """Number of scheduled, not cancelled callbacks"""
        return sum(1 for _, _, handle, _ in self._queue if not handle.cancelled)
