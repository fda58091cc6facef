# tests/core_test/test_tick_scheduler.py
"""
Tests for the tick schedulers (pathviz_core/services/tick_scheduler.py).
"""
import asyncio

import pytest

from pathviz_core.services.tick_scheduler import (
    AsyncioTickScheduler,
    ManualTickScheduler,
)
from pathviz_core.services.replay_service import ReplayController, ReplayState
from pathviz_core.services.shortest_path_service import compute


# ═════════════════════════════════════════════════════════════════
#  MANUAL CLOCK
# ═════════════════════════════════════════════════════════════════

class TestManualTickScheduler:

    def test_nothing_fires_without_advance(self, clock):
        fired = []
        clock.call_later(0, lambda: fired.append(1))
        assert fired == []
        assert clock.pending() == 1

    def test_fires_when_due(self, clock):
        fired = []
        clock.call_later(1.0, lambda: fired.append("a"))
        assert clock.advance(0.99) == 0
        assert clock.advance(0.01) == 1
        assert fired == ["a"]
        assert clock.now == pytest.approx(1.0)

    def test_runs_in_due_order_then_fifo(self, clock):
        fired = []
        clock.call_later(2, lambda: fired.append("late"))
        clock.call_later(1, lambda: fired.append("first"))
        clock.call_later(1, lambda: fired.append("second"))
        clock.advance(5)
        assert fired == ["first", "second", "late"]

    def test_cancelled_callback_never_runs(self, clock):
        fired = []
        handle = clock.call_later(1, lambda: fired.append(1))
        handle.cancel()
        assert handle.cancelled
        assert clock.pending() == 0
        assert clock.advance(2) == 0
        assert fired == []

    def test_callbacks_scheduled_during_advance_run(self, clock):
        fired = []

        def chain(n):
            fired.append(n)
            if n < 3:
                clock.call_later(1, lambda: chain(n + 1))

        clock.call_later(1, lambda: chain(1))
        assert clock.advance(3) == 3
        assert fired == [1, 2, 3]

    def test_clock_reaches_target(self, clock):
        clock.advance(2.5)
        assert clock.now == 2.5

    def test_repeated_small_steps_do_not_drift(self, clock):
        fired = []
        clock.call_later(1.0, lambda: fired.append(1))
        for _ in range(10):
            clock.advance(0.1)
        assert fired == [1]


# ═════════════════════════════════════════════════════════════════
#  ASYNCIO
# ═════════════════════════════════════════════════════════════════

class TestAsyncioTickScheduler:

    def test_callback_runs_on_loop(self):
        loop = asyncio.new_event_loop()
        try:
            scheduler = AsyncioTickScheduler(loop)
            fired = []
            scheduler.call_later(0.01, lambda: fired.append(1))
            loop.run_until_complete(asyncio.sleep(0.05))
            assert fired == [1]
        finally:
            loop.close()

    def test_cancel(self):
        loop = asyncio.new_event_loop()
        try:
            scheduler = AsyncioTickScheduler(loop)
            fired = []
            handle = scheduler.call_later(0.01, lambda: fired.append(1))
            handle.cancel()
            loop.run_until_complete(asyncio.sleep(0.05))
            assert handle.cancelled
            assert fired == []
        finally:
            loop.close()

    def test_uses_running_loop_by_default(self):
        async def scenario():
            fired = []
            AsyncioTickScheduler().call_later(0, lambda: fired.append(1))
            await asyncio.sleep(0.01)
            return fired

        loop = asyncio.new_event_loop()
        try:
            assert loop.run_until_complete(scenario()) == [1]
        finally:
            loop.close()

    def test_replay_runs_to_completion(self, chain_graph):
        result = compute(chain_graph, "node-0", "node-2")

        async def scenario():
            replay = ReplayController(AsyncioTickScheduler(), interval=0.01)
            replay.bind(result)
            replay.play()
            for _ in range(100):
                if replay.is_finished:
                    break
                await asyncio.sleep(0.01)
            return replay

        loop = asyncio.new_event_loop()
        try:
            replay = loop.run_until_complete(scenario())
        finally:
            loop.close()
        assert replay.state == ReplayState.FINISHED
        assert replay.step == 2
