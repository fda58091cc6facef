"""
Pathviz API — graph models shared by the engine, the replay controller
and presentation collaborators.
"""
from .types import Position, UNREACHABLE, WeightValidator, is_unreachable
from .models.node import Node
from .models.edge import Edge, EdgeDirection
from .models.selection import Selection
from .models.graph import Graph
from .models.result import ShortestPathResult

__all__ = [
    'Position',
    'UNREACHABLE',
    'WeightValidator',
    'is_unreachable',
    'Node',
    'Edge',
    'EdgeDirection',
    'Selection',
    'Graph',
    'ShortestPathResult',
]
