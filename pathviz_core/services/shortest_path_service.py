# pathviz_core/services/shortest_path_service.py
"""
    ShortestPathService — single-source shortest paths (Dijkstra).

    The search repeatedly finalizes the unfinalized node with the
    smallest finite distance and relaxes the edges leading out of it.
    Candidates live in a binary heap keyed on
    ``(distance, insertion_index)``: among equal distances the node added
    to the graph first wins, which keeps ``visit_order`` deterministic.
    Outdated heap entries are skipped when popped (lazy deletion).

    Only defined for non-negative weights. Negative weights are walked
    like any other weight and flagged on the result.
"""
import heapq
import logging
from typing import Dict, List, Optional, Tuple

from pathviz_api.models.graph import Graph
from pathviz_api.models.result import ShortestPathResult
from pathviz_api.types import UNREACHABLE, is_unreachable

from .exceptions import SourceNotFoundError

logger = logging.getLogger(__name__)


class ShortestPathService:
    """
    Computes a ``ShortestPathResult`` from a graph snapshot.

    Usage:
        service = ShortestPathService()
        result = service.compute(graph, "node-0", destination="node-3")
    """

    def compute(self, graph: Graph, source: str,
                destination: Optional[str] = None) -> ShortestPathResult:
        """
        Run the search from ``source``.

        Args:
            graph:       Graph to search. Read only.
            source:      Id of the start node; must be in the graph.
            destination: Optional id to reconstruct a path to.

        Returns:
            Immutable result tied to ``graph.revision``.

        Raises:
            SourceNotFoundError: If the graph has nodes but not ``source``.
        """
        directed = graph.is_directed()
        negative = graph.has_negative_weights()

        if graph.get_number_of_nodes() == 0:
            return ShortestPathResult.empty(source, destination, directed, graph.revision)

        if not graph.has_node(source):
            raise SourceNotFoundError(f"Source node '{source}' not in graph")

        if negative:
            logger.warning("Graph has negative edge weights; distances may be wrong.")

        distances, visit_order, previous = self._search(graph, source)
        path = self._build_path(distances, previous, source, destination)

        logger.info("Shortest paths from %s: %d/%d node(s) reached, path=%s",
                    source, len(visit_order), len(distances),
                    " -> ".join(path) if path else "none")

        return ShortestPathResult(
            distances=distances,
            visit_order=tuple(visit_order),
            path=tuple(path),
            source=source,
            destination=destination,
            directed=directed,
            graph_revision=graph.revision,
            has_negative_weights=negative,
        )

    # ── Search ───────────────────────────────────────────────────

    def _search(self, graph: Graph, source: str
                ) -> Tuple[Dict[str, float], List[str], Dict[str, Optional[str]]]:
        order = {node_id: i for i, node_id in enumerate(graph.node_ids())}
        distances: Dict[str, float] = {node_id: UNREACHABLE for node_id in order}
        previous: Dict[str, Optional[str]] = {node_id: None for node_id in order}
        finalized = set()
        visit_order: List[str] = []

        distances[source] = 0
        heap = [(0, order[source], source)]

        while heap:
            dist, _, node_id = heapq.heappop(heap)
            if node_id in finalized or dist > distances[node_id]:
                continue

            finalized.add(node_id)
            visit_order.append(node_id)
            logger.debug("Finalized %s at distance %s", node_id, dist)

            for edge, neighbor in graph.get_traversable_edges(node_id):
                # Edges may point at ids that are not nodes
                if neighbor not in distances or neighbor in finalized:
                    continue
                candidate = dist + edge.weight
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    previous[neighbor] = node_id
                    heapq.heappush(heap, (candidate, order[neighbor], neighbor))

        return distances, visit_order, previous

    @staticmethod
    def _build_path(distances: Dict[str, float], previous: Dict[str, Optional[str]],
                    source: str, destination: Optional[str]) -> List[str]:
        """Walk predecessor links back from the destination"""
        if destination is None or destination not in distances:
            return []
        if is_unreachable(distances[destination]):
            return []

        path = []
        current: Optional[str] = destination
        while current is not None:
            path.append(current)
            current = previous[current]
        path.reverse()
        return path


def compute(graph: Graph, source: str,
            destination: Optional[str] = None) -> ShortestPathResult:
    """Module-level shortcut for ``ShortestPathService().compute(...)``."""
    return ShortestPathService().compute(graph, source, destination)
