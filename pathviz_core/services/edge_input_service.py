# pathviz_core/services/edge_input_service.py
"""
    EdgeInputValidator — checks an edge submitted from a form before it
    reaches the graph.

    The graph model itself accepts any edge; rejecting bad input is the
    submitter's job. Three outcomes:
        • rejected  – ``EdgeInputError`` with a user-facing message,
                      nothing is mutated.
        • accepted  – ``EdgeSubmission`` with no warnings.
        • advisory  – accepted, but ``warnings`` explains that the
                      weight is negative and results may be wrong.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from pathviz_api.models.graph import Graph
from pathviz_api.types import WeightValidator

from .exceptions import EdgeInputError

logger = logging.getLogger(__name__)

NEGATIVE_WEIGHT_WARNING = (
    "Negative weight: shortest-path results are not guaranteed to be correct."
)


@dataclass
class EdgeSubmission:
    """
    A validated edge, ready to be added.

    Attributes:
        source_id: Start node id.
        target_id: End node id.
        weight:    Parsed weight.
        warnings:  Advisory messages (empty for a clean edge).
    """
    source_id: str
    target_id: str
    weight: float
    warnings: List[str] = field(default_factory=list)

    @property
    def is_advisory(self) -> bool:
        return bool(self.warnings)


class EdgeInputValidator:
    """
    Validates (source, target, raw weight) triples.

    Usage:
        submission = EdgeInputValidator().validate(graph, "node-0", "node-1", "4")
        graph.add_edge(submission.source_id, submission.target_id, submission.weight)
    """

    def validate(self, graph: Graph, source_id: Optional[str],
                 target_id: Optional[str], raw_weight: Any) -> EdgeSubmission:
        """
        Raises:
            EdgeInputError: If an endpoint is missing or unknown, both
                            endpoints are the same node, or the weight is
                            missing or not a number.
        """
        if not source_id or not target_id:
            raise EdgeInputError("Both endpoints must be chosen.")
        if source_id == target_id:
            raise EdgeInputError("An edge must connect two different nodes.")
        for node_id in (source_id, target_id):
            if not graph.has_node(node_id):
                raise EdgeInputError(f"Node '{node_id}' not found.")

        try:
            weight = WeightValidator.convert(raw_weight)
        except ValueError as e:
            raise EdgeInputError(str(e)) from e

        submission = EdgeSubmission(source_id, target_id, weight)
        if WeightValidator.is_negative(weight):
            logger.warning("Edge %s -> %s accepted with negative weight %g",
                           source_id, target_id, weight)
            submission.warnings.append(NEGATIVE_WEIGHT_WARNING)
        return submission
