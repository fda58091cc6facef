"""
    Node model - representation of a node in the graph
"""
from typing import Dict, Any

from ..types import Position


class Node:
    """
    A node of the playground graph.
    Each node has an ID and a position that only presentation reads.
    """

    def __init__(self, node_id: Any, x: float = 0.0, y: float = 0.0):
        """
        Initialize a node.

        Args:
            node_id: Unique identifier of the node (will be converted to str)
            x: Horizontal coordinate on the drawing surface
            y: Vertical coordinate on the drawing surface
        """
        # Ensure ID is always a string for consistency in comparisons
        self.node_id = str(node_id)
        self.x = float(x)
        self.y = float(y)

    @property
    def position(self) -> Position:
        return self.x, self.y

    @property
    def label(self) -> str:
        """Short display label: the id without its generated prefix."""
        _, sep, tail = self.node_id.rpartition("-")
        return tail if sep else self.node_id

    def __repr__(self) -> str:
        return f"Node({self.node_id}, x={self.x:g}, y={self.y:g})"

    def __eq__(self, other) -> bool:
        """Two nodes are equal if they have the same ID"""
        if not isinstance(other, Node):
            return False
        return self.node_id == other.node_id

    def __hash__(self) -> int:
        """Hash node by ID"""
        return hash(self.node_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.node_id,
            'x': self.x,
            'y': self.y,
        }
