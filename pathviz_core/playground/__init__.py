"""
Pathviz playground — core package.

Public API:
    Playground        – facade over graph, search and replay
    PlaygroundConfig  – top-level configuration
"""
from .config import PlaygroundConfig
from .core import (
    Playground,
    EVENT_GRAPH_CHANGED,
    EVENT_SELECTION_CHANGED,
    EVENT_RESULT_COMPUTED,
    EVENT_REPLAY_CHANGED,
    EVENT_RESET,
    EVENT_CLEARED,
)

__all__ = [
    'Playground',
    'PlaygroundConfig',
    'EVENT_GRAPH_CHANGED',
    'EVENT_SELECTION_CHANGED',
    'EVENT_RESULT_COMPUTED',
    'EVENT_REPLAY_CHANGED',
    'EVENT_RESET',
    'EVENT_CLEARED',
]
