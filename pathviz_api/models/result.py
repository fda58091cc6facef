"""
    Result model - the outcome of one shortest-path run.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from ..types import UNREACHABLE, is_unreachable


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Immutable snapshot of a run.

    Attributes:
        distances:      node id -> distance from the source for every node
                        present at compute time (``UNREACHABLE`` if not reached).
        visit_order:    node ids in the order the search finalized them.
        path:           source .. destination inclusive, empty when no
                        destination was given or it was not reached.
        source:         node the search started from.
        destination:    requested destination, if any.
        directed:       direction flag in effect during the run.
        graph_revision: ``Graph.revision`` the run was computed against.
        has_negative_weights: the graph held negative weights, so the
                        distances are not guaranteed to be correct.
    """
    distances: Mapping[str, float] = field(default_factory=dict)
    visit_order: Tuple[str, ...] = ()
    path: Tuple[str, ...] = ()
    source: Optional[str] = None
    destination: Optional[str] = None
    directed: bool = True
    graph_revision: int = 0
    has_negative_weights: bool = False

    def __post_init__(self):
        # Freeze the containers as well as the attributes
        object.__setattr__(self, 'distances', MappingProxyType(dict(self.distances)))
        object.__setattr__(self, 'visit_order', tuple(self.visit_order))
        object.__setattr__(self, 'path', tuple(self.path))

    @classmethod
    def empty(cls, source: Optional[str] = None, destination: Optional[str] = None,
              directed: bool = True, graph_revision: int = 0) -> 'ShortestPathResult':
        return cls(source=source, destination=destination,
                   directed=directed, graph_revision=graph_revision)

    def distance_to(self, node_id: str) -> float:
        return self.distances.get(node_id, UNREACHABLE)

    def is_reachable(self, node_id: str) -> bool:
        return not is_unreachable(self.distance_to(node_id))

    @property
    def path_found(self) -> bool:
        return len(self.path) > 0

    @property
    def total_distance(self) -> float:
        """Distance to the destination, UNREACHABLE if there is none"""
        if self.destination is None:
            return UNREACHABLE
        return self.distance_to(self.destination)

    @property
    def last_step(self) -> int:
        """Highest valid replay cursor (0 for an empty run)"""
        return max(len(self.visit_order) - 1, 0)

    def visited_up_to(self, step: int) -> Tuple[str, ...]:
        """Nodes revealed when the replay cursor sits at ``step``"""
        if step < 0:
            return ()
        return self.visit_order[:step + 1]

    def is_stale_for(self, graph) -> bool:
        """True once the graph has changed since this result was computed"""
        return graph.revision != self.graph_revision

    def to_dict(self) -> Dict[str, Any]:
        """Unreachable distances are encoded as None."""
        return {
            'source': self.source,
            'destination': self.destination,
            'directed': self.directed,
            'distances': {
                node_id: (None if is_unreachable(d) else d)
                for node_id, d in self.distances.items()
            },
            'visit_order': list(self.visit_order),
            'path': list(self.path),
            'has_negative_weights': self.has_negative_weights,
        }
