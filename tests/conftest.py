# tests/conftest.py
"""
Shared test fixtures.
Small hand-checked graphs plus a playground on a manual replay clock.
"""
import random

import pytest

from pathviz_api.models.graph import Graph
from pathviz_api.models.edge import EdgeDirection
from pathviz_core.services.tick_scheduler import ManualTickScheduler
from pathviz_core.services.replay_service import ReplayController
from pathviz_core.playground.config import PlaygroundConfig
from pathviz_core.playground.core import Playground


def build_graph(node_count: int, edges, directed: bool = True) -> Graph:
    """
    Graph with nodes node-0 .. node-<n-1> (insertion order) and the
    given (source_index, target_index, weight) edges.
    """
    direction = EdgeDirection.DIRECTED if directed else EdgeDirection.UNDIRECTED
    g = Graph("test", direction=direction)
    for i in range(node_count):
        g.add_node(i * 10.0, i * 10.0)
    for s, t, w in edges:
        g.add_edge(f"node-{s}", f"node-{t}", w)
    return g


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def make_graph():
    """The ``build_graph`` helper, for tests that need their own shape."""
    return build_graph


@pytest.fixture
def chain_graph() -> Graph:
    """
    Directed chain, three nodes:

        node-0 --1--> node-1 --2--> node-2
    """
    return build_graph(3, [(0, 1, 1), (1, 2, 2)])


@pytest.fixture
def city_graph() -> Graph:
    """
    Six nodes, directed, with a detour cheaper than the direct edge
    and one node nothing leads to:

        0 -> 1 (7)   0 -> 2 (9)   0 -> 5 (14)
        1 -> 2 (10)  1 -> 3 (15)  2 -> 3 (11)
        2 -> 5 (2)   3 -> 4 (6)   5 -> 4 (9)
        node-6 isolated
    """
    return build_graph(7, [
        (0, 1, 7), (0, 2, 9), (0, 5, 14),
        (1, 2, 10), (1, 3, 15), (2, 3, 11),
        (2, 5, 2), (3, 4, 6), (5, 4, 9),
    ])


@pytest.fixture
def clock() -> ManualTickScheduler:
    return ManualTickScheduler()


@pytest.fixture
def replay(clock) -> ReplayController:
    """Replay controller ticking every 0.5s on the manual clock."""
    return ReplayController(clock, interval=0.5)


@pytest.fixture
def playground(clock) -> Playground:
    """Directed playground, 500ms ticks, autoplay on, seeded positions."""
    return Playground(PlaygroundConfig(), scheduler=clock, rng=random.Random(7))
