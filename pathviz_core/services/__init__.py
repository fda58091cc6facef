"""
Core services — shortest-path search, replay, tick scheduling and
edge input validation.
"""
from .shortest_path_service import ShortestPathService, compute
from .replay_service import ReplayController, ReplayState, DEFAULT_TICK_INTERVAL
from .tick_scheduler import (
    TickScheduler,
    TimerHandle,
    AsyncioTickScheduler,
    ManualTickScheduler,
)
from .edge_input_service import EdgeInputValidator, EdgeSubmission, NEGATIVE_WEIGHT_WARNING
from .exceptions import EdgeInputError, SourceNotFoundError

__all__ = [
    'ShortestPathService',
    'compute',
    'ReplayController',
    'ReplayState',
    'DEFAULT_TICK_INTERVAL',
    'TickScheduler',
    'TimerHandle',
    'AsyncioTickScheduler',
    'ManualTickScheduler',
    'EdgeInputValidator',
    'EdgeSubmission',
    'NEGATIVE_WEIGHT_WARNING',
    'EdgeInputError',
    'SourceNotFoundError',
]
