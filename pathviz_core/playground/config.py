"""
    Playground configuration — replay cadence, graph defaults, CLI limits.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass
class PlaygroundConfig:
    """
    Top-level configuration for the playground.

    Attributes:
        tick_interval_ms: Milliseconds between two replay steps.
        autoplay:         Start advancing as soon as a run is computed.
        directed:         Directedness of a freshly created graph.
        node_id_prefix:   Prefix of generated node ids (``node-0``, ``node-1``...).
        spawn_origin:     Top-left corner of the box where nodes added
                          without a position are placed.
        spawn_extent:     Width / height of that box.
        max_undo_depth:   How many graph snapshots the CLI keeps for undo.
    """
    tick_interval_ms: int = 500
    autoplay: bool = True
    directed: bool = True
    node_id_prefix: str = "node-"
    spawn_origin: Tuple[float, float] = (200.0, 150.0)
    spawn_extent: Tuple[float, float] = (200.0, 150.0)
    max_undo_depth: int = 50

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0
