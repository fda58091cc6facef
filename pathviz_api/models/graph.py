"""
    Graph model - the editable playground graph.
    Nodes in insertion order, edges as an ordered sequence, one
    directedness flag for the whole graph and the start/end selection.
"""
from typing import Dict, List, Optional, Tuple

from .node import Node
from .edge import Edge, EdgeDirection
from .selection import Selection


class Graph:
    """
        Class for graph representation.

        Node ids are generated by the graph (``<prefix><counter>``) and
        are never handed out twice, even after the node is removed.
        Every mutation bumps ``revision`` so results computed against an
        older state can be told apart.
    """

    def __init__(self, graph_id: str = "playground",
                 direction: EdgeDirection = EdgeDirection.DIRECTED,
                 id_prefix: str = "node-"):
        """
        Initialize a graph.
        Args:
            graph_id: Identifier of the graph
            direction: How edges are walked during search
            id_prefix: Prefix of generated node ids
        """
        self.graph_id = graph_id
        self.direction = direction
        self.id_prefix = id_prefix
        self.nodes: Dict[str, Node] = {}  # node_id -> Node, insertion ordered
        self.edges: List[Edge] = []
        self.selection = Selection()
        self.revision = 0
        self._next_id = 0

    # ── Nodes ────────────────────────────────────────────────────

    def add_node(self, x: float = 0.0, y: float = 0.0) -> str:
        """Create a node at (x, y) and return its fresh id"""
        node_id = f"{self.id_prefix}{self._next_id}"
        self._next_id += 1
        self.nodes[node_id] = Node(node_id, x, y)
        self._touch()
        return node_id

    def remove_node(self, node_id: str) -> bool:
        """
        Remove a node, every edge touching it and any selection
        pointing at it. Unknown ids are ignored.

        Returns:
            True if the node existed.
        """
        if node_id not in self.nodes:
            return False

        self.edges = [e for e in self.edges if not e.touches(node_id)]
        del self.nodes[node_id]
        self.selection.discard(node_id)
        self._touch()
        return True

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def has_node(self, node_id: Optional[str]) -> bool:
        return node_id is not None and node_id in self.nodes

    def get_all_nodes(self) -> List[Node]:
        return list(self.nodes.values())

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    # ── Edges ────────────────────────────────────────────────────

    def add_edge(self, source_id: str, target_id: str, weight: float) -> Edge:
        """
        Append an edge. No checks are made here: self-loops, parallel
        edges and endpoints that do not exist (yet) are all accepted.
        """
        edge = Edge(source_id, target_id, weight)
        self.edges.append(edge)
        self._touch()
        return edge

    def remove_edge(self, index: int) -> Optional[Edge]:
        """
        Remove the edge at position ``index``.

        Returns:
            The removed edge, or None if the index is out of range.
        """
        if not 0 <= index < len(self.edges):
            return None
        edge = self.edges.pop(index)
        self._touch()
        return edge

    def get_edge(self, index: int) -> Optional[Edge]:
        if not 0 <= index < len(self.edges):
            return None
        return self.edges[index]

    def get_all_edges(self) -> List[Edge]:
        return list(self.edges)

    def get_traversable_edges(self, node_id: str) -> List[Tuple[Edge, str]]:
        """
        Get (edge, neighbor_id) for every edge that can be walked out
        of node_id under the current direction, in edge order.
        """
        result = []
        for edge in self.edges:
            neighbor = edge.leads_from(node_id, self.direction)
            if neighbor is not None:
                result.append((edge, neighbor))
        return result

    def has_negative_weights(self) -> bool:
        return any(edge.is_negative() for edge in self.edges)

    # ── Graph-level state ────────────────────────────────────────

    def is_directed(self) -> bool:
        return self.direction == EdgeDirection.DIRECTED

    def set_directed(self, directed: bool) -> None:
        direction = EdgeDirection.DIRECTED if directed else EdgeDirection.UNDIRECTED
        if direction != self.direction:
            self.direction = direction
            self._touch()

    def clear(self) -> None:
        """Remove all nodes, edges and the selection. Ids keep counting."""
        self.nodes.clear()
        self.edges.clear()
        self.selection.clear()
        self._touch()

    def restore_from(self, snapshot: 'Graph') -> None:
        """
        Take over the nodes, edges, direction and selection of an
        earlier snapshot. The id counter never moves backwards, so ids
        issued after the snapshot are still not reused.
        """
        self.nodes = dict(snapshot.nodes)
        self.edges = list(snapshot.edges)
        self.direction = snapshot.direction
        self.selection = Selection(snapshot.selection.start, snapshot.selection.end)
        self._next_id = max(self._next_id, snapshot._next_id)
        self._touch()

    def get_number_of_nodes(self) -> int:
        return len(self.nodes)

    def get_number_of_edges(self) -> int:
        return len(self.edges)

    def _touch(self) -> None:
        self.revision += 1

    def __repr__(self) -> str:
        return (f"Graph({self.graph_id}, nodes={len(self.nodes)}, "
                f"edges={len(self.edges)}, {self.direction.value})")

    def to_dict(self) -> Dict:
        return {
            'id': self.graph_id,
            'directed': self.is_directed(),
            'revision': self.revision,
            'nodes': [node.to_dict() for node in self.nodes.values()],
            'edges': [edge.to_dict() for edge in self.edges],
            'selection': self.selection.to_dict(),
        }
