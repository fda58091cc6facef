"""
    Edge model - representation of a weighted edge between nodes.
"""
from typing import Dict, Any, Optional, Tuple
from enum import Enum

from ..types import WeightValidator


class EdgeDirection(Enum):
    """How the graph interprets its edges during search"""
    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class Edge:
    """
        Class for a weighted edge between two nodes.

        The edge only stores node ids: an edge may be added before
        (or without) its endpoints existing. Whether it can be walked
        in both directions is decided by the graph's direction flag,
        the (source, target) identity itself never changes.
    """

    def __init__(self, source_id: Any, target_id: Any, weight: float):
        """
        Initialize an edge.

        Args:
            source_id: Id of the node the edge starts at
            target_id: Id of the node the edge ends at
            weight: Numeric cost of traversing the edge
        """
        self.source_id = str(source_id)
        self.target_id = str(target_id)
        self.weight = float(weight)

    def get_source_target(self) -> Tuple[str, str]:
        """Get source and target node ids"""
        return self.source_id, self.target_id

    def leads_from(self, node_id: str, direction: EdgeDirection) -> Optional[str]:
        """
        Neighbor reached by walking this edge out of node_id.

        Directed: only source -> target.
        Undirected: either endpoint leads to the other one.
        """
        if node_id == self.source_id:
            return self.target_id
        if direction == EdgeDirection.UNDIRECTED and node_id == self.target_id:
            return self.source_id
        return None

    def touches(self, node_id: str) -> bool:
        """Check if node_id is one of the endpoints"""
        return node_id in (self.source_id, self.target_id)

    def connects_nodes(self, node1: str, node2: str, direction: EdgeDirection) -> bool:
        """Check if edge can be walked from node1 to node2"""
        return self.leads_from(node1, direction) == node2

    def is_self_loop(self) -> bool:
        return self.source_id == self.target_id

    def is_negative(self) -> bool:
        return WeightValidator.is_negative(self.weight)

    def __repr__(self) -> str:
        return f"Edge({self.source_id} -> {self.target_id}, weight={self.weight:g})"

    def __eq__(self, other) -> bool:
        """Edges carry no identity of their own; compare by value"""
        if not isinstance(other, Edge):
            return False
        return (self.source_id, self.target_id, self.weight) == \
               (other.source_id, other.target_id, other.weight)

    def __hash__(self) -> int:
        return hash((self.source_id, self.target_id, self.weight))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source_id,
            'target': self.target_id,
            'weight': self.weight,
        }
