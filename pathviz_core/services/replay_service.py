# pathviz_core/services/replay_service.py
"""
    ReplayController — turns a result's visit order into a steppable
    timeline.

    Design Pattern: State
    ─────────────────────
        IDLE       no result bound, no cursor
        READY      result bound, cursor parked
        ADVANCING  cursor moves one step per tick
        FINISHED   cursor on the last step, parked

    The controller owns at most one pending tick. Every bind, reset,
    pause and terminal seek cancels it and bumps a generation counter;
    a tick that still fires with an older generation is dropped, so a
    stale timer can never move the cursor of a newer run.

    The bound result is only read, never modified.
"""
import logging
from enum import Enum
from typing import Callable, List, Optional

from pathviz_api.models.result import ShortestPathResult

from .tick_scheduler import TickScheduler, TimerHandle

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 0.5  # seconds


class ReplayState(Enum):
    IDLE = "idle"
    READY = "ready"
    ADVANCING = "advancing"
    FINISHED = "finished"


class ReplayController:
    """
    Drives the replay cursor over ``result.visit_order``.

    Usage:
        replay = ReplayController(ManualTickScheduler(), interval=0.5)
        replay.bind(result)
        replay.play()
    """

    def __init__(self, scheduler: TickScheduler,
                 interval: float = DEFAULT_TICK_INTERVAL):
        """
        Args:
            scheduler: Source of the delayed tick callbacks.
            interval:  Seconds between two ticks while advancing.
        """
        self._scheduler = scheduler
        self._interval = interval
        self._result: Optional[ShortestPathResult] = None
        self._step = 0
        self._state = ReplayState.IDLE
        self._timer: Optional[TimerHandle] = None
        self._generation = 0
        self._listeners: List[Callable[['ReplayController'], None]] = []

    # ── Queries ──────────────────────────────────────────────────

    @property
    def result(self) -> Optional[ShortestPathResult]:
        return self._result

    @property
    def state(self) -> ReplayState:
        return self._state

    @property
    def step(self) -> Optional[int]:
        """Current cursor, or None while IDLE"""
        if self._state == ReplayState.IDLE:
            return None
        return self._step

    @property
    def last_step(self) -> int:
        return self._result.last_step if self._result is not None else 0

    @property
    def is_running(self) -> bool:
        return self._state == ReplayState.ADVANCING

    @property
    def is_finished(self) -> bool:
        return self._state == ReplayState.FINISHED

    @property
    def has_pending_tick(self) -> bool:
        return self._timer is not None and not self._timer.cancelled

    @property
    def interval(self) -> float:
        return self._interval

    @interval.setter
    def interval(self, seconds: float) -> None:
        if seconds <= 0:
            raise ValueError("Tick interval must be positive.")
        self._interval = seconds

    def revealed(self) -> List[str]:
        """Node ids already revealed at the current cursor"""
        if self._result is None:
            return []
        return list(self._result.visited_up_to(self._step))

    # ── Transitions ──────────────────────────────────────────────

    def bind(self, result: ShortestPathResult) -> None:
        """Attach a new result. Always lands in READY with the cursor at 0."""
        self._cancel_tick()
        self._result = result
        self._step = 0
        self._state = ReplayState.READY
        logger.debug("Replay bound: %d step(s)", len(result.visit_order))
        self._notify()

    def play(self) -> bool:
        """
        Start advancing. Playing a FINISHED replay starts over from 0.

        Returns:
            False if there is no result to play.
        """
        if self._state == ReplayState.IDLE:
            logger.warning("Nothing to play: no result bound.")
            return False
        if self._state == ReplayState.ADVANCING:
            return True

        if self._state == ReplayState.FINISHED:
            self._step = 0
        self._state = ReplayState.ADVANCING
        self._schedule_tick()
        self._notify()
        return True

    def pause(self) -> None:
        """Stop advancing and keep the cursor where it is."""
        if self._state != ReplayState.ADVANCING:
            return
        self._cancel_tick()
        self._state = ReplayState.READY
        self._notify()

    def seek(self, step: int) -> Optional[int]:
        """
        Move the cursor, clamped to ``[0, last_step]``.

        Landing on the last step finishes the replay; leaving it from
        FINISHED goes back to READY. ADVANCING keeps advancing otherwise.

        Returns:
            The new cursor, or None while IDLE.
        """
        if self._state == ReplayState.IDLE:
            logger.warning("Cannot seek: no result bound.")
            return None

        self._step = min(max(step, 0), self.last_step)
        if self._step == self.last_step:
            self._cancel_tick()
            self._state = ReplayState.FINISHED
        elif self._state == ReplayState.FINISHED:
            self._state = ReplayState.READY
        self._notify()
        return self._step

    def step_forward(self) -> Optional[int]:
        return self.seek(self._step + 1)

    def step_backward(self) -> Optional[int]:
        return self.seek(self._step - 1)

    def reset(self) -> None:
        """Unbind the result and discard the cursor."""
        self._cancel_tick()
        self._result = None
        self._step = 0
        self._state = ReplayState.IDLE
        self._notify()

    # ── Ticking ──────────────────────────────────────────────────

    def _schedule_tick(self) -> None:
        generation = self._generation
        self._timer = self._scheduler.call_later(
            self._interval, lambda: self._on_tick(generation)
        )

    def _cancel_tick(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def _on_tick(self, generation: int) -> None:
        if generation != self._generation or self._state != ReplayState.ADVANCING:
            logger.debug("Dropped stale tick (generation %d, current %d)",
                         generation, self._generation)
            return

        self._timer = None
        if self._step < self.last_step:
            self._step += 1

        if self._step >= self.last_step:
            self._state = ReplayState.FINISHED
            logger.debug("Replay finished at step %d", self._step)
        else:
            self._schedule_tick()
        self._notify()

    # ── Observer ─────────────────────────────────────────────────

    def subscribe(self, callback: Callable[['ReplayController'], None]) -> None:
        """Register a callback run after every cursor or state change."""
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[['ReplayController'], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self) -> None:
        for cb in list(self._listeners):
            try:
                cb(self)
            except Exception as exc:
                logger.error("Replay listener failed: %s", exc)

    def __repr__(self) -> str:
        return (f"ReplayController(state={self._state.value}, "
                f"step={self.step}, last={self.last_step})")
