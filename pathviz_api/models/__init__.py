"""
Graph, node, edge, selection and result models.
"""
from .node import Node
from .edge import Edge, EdgeDirection
from .selection import Selection
from .graph import Graph
from .result import ShortestPathResult

__all__ = ['Node', 'Edge', 'EdgeDirection', 'Selection', 'Graph', 'ShortestPathResult']
