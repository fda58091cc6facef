"""
    Playground — the single entry point for presentation collaborators.

    Design Patterns applied
    ───────────────────────
    • Facade             – one object hides the graph model, the search
                           service, the replay controller and the tick
                           scheduler.
    • Strategy           – the tick scheduler is injected (asyncio loop
                           in an event-driven host, virtual clock in the
                           shell and tests).
    • Observer (hooks)   – ``_listeners`` dict; renderers, forms and the
                           results display subscribe instead of polling.

    Collaborators only *read* queries (graph, selection, result, cursor)
    and *write* through the command methods below. Everything runs on
    the caller's thread; the only deferred work is the replay tick.
"""
import logging
import random
from typing import Any, Callable, Dict, List, Optional

from pathviz_api.models.edge import Edge, EdgeDirection
from pathviz_api.models.graph import Graph
from pathviz_api.models.node import Node
from pathviz_api.models.result import ShortestPathResult

from pathviz_core.services.edge_input_service import EdgeInputValidator, EdgeSubmission
from pathviz_core.services.replay_service import ReplayController, ReplayState
from pathviz_core.services.shortest_path_service import ShortestPathService
from pathviz_core.services.tick_scheduler import ManualTickScheduler, TickScheduler

from .config import PlaygroundConfig

logger = logging.getLogger(__name__)


# ── Observer event types ─────────────────────────────────────────
EVENT_GRAPH_CHANGED = "graph_changed"
EVENT_SELECTION_CHANGED = "selection_changed"
EVENT_RESULT_COMPUTED = "result_computed"
EVENT_REPLAY_CHANGED = "replay_changed"
EVENT_RESET = "reset"
EVENT_CLEARED = "cleared"


class Playground:
    """
    Facade over one editable graph and its latest shortest-path run.

    Manages:
        • Graph editing (nodes, edges, direction).
        • Start / end selection, including click toggling.
        • Running the search and binding the result to the replay.
        • Replay playback (play, pause, seek, step).
        • Observer hooks for view synchronization.
    """

    def __init__(self, config: Optional[PlaygroundConfig] = None,
                 scheduler: Optional[TickScheduler] = None,
                 rng: Optional[random.Random] = None):
        """
        Args:
            config:    Playground configuration.
            scheduler: Tick source for playback. Defaults to a
                       ``ManualTickScheduler`` (advance it explicitly).
            rng:       Random source for positions of nodes added
                       without coordinates.
        """
        self._config: PlaygroundConfig = config or PlaygroundConfig()
        self._scheduler: TickScheduler = scheduler or ManualTickScheduler()
        self._rng = rng or random.Random()

        direction = EdgeDirection.DIRECTED if self._config.directed else EdgeDirection.UNDIRECTED
        self._graph = Graph(direction=direction, id_prefix=self._config.node_id_prefix)
        self._result: Optional[ShortestPathResult] = None

        self._search_service = ShortestPathService()
        self._edge_validator = EdgeInputValidator()
        self._replay = ReplayController(self._scheduler, self._config.tick_interval)
        self._replay.subscribe(self._on_replay_changed)

        # Observer listeners: event_name → [callback, ...]
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}

        logger.info("Playground initialized (%s, tick=%dms).",
                    direction.value, self._config.tick_interval_ms)

    # ── Queries ──────────────────────────────────────────────────

    @property
    def config(self) -> PlaygroundConfig:
        return self._config

    @property
    def scheduler(self) -> TickScheduler:
        return self._scheduler

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def replay(self) -> ReplayController:
        return self._replay

    @property
    def nodes(self) -> List[Node]:
        return self._graph.get_all_nodes()

    @property
    def edges(self) -> List[Edge]:
        return self._graph.get_all_edges()

    @property
    def is_directed(self) -> bool:
        return self._graph.is_directed()

    @property
    def start(self) -> Optional[str]:
        return self._graph.selection.start

    @property
    def end(self) -> Optional[str]:
        return self._graph.selection.end

    @property
    def result(self) -> Optional[ShortestPathResult]:
        return self._result

    @property
    def result_is_stale(self) -> bool:
        """True when the graph changed after the current result was computed."""
        return self._result is not None and self._result.is_stale_for(self._graph)

    @property
    def step(self) -> Optional[int]:
        return self._replay.step

    @property
    def replay_state(self) -> ReplayState:
        return self._replay.state

    @property
    def is_running(self) -> bool:
        return self._replay.is_running

    # ── Graph editing ────────────────────────────────────────────

    def add_node(self, x: Optional[float] = None, y: Optional[float] = None) -> str:
        """
        Add a node. Without coordinates it is dropped at a random spot
        inside the configured spawn box.

        Returns:
            The new node id.
        """
        if x is None or y is None:
            (ox, oy), (w, h) = self._config.spawn_origin, self._config.spawn_extent
            x = ox + self._rng.random() * w if x is None else x
            y = oy + self._rng.random() * h if y is None else y

        node_id = self._graph.add_node(x, y)
        logger.debug("Node %s added at (%.1f, %.1f)", node_id, x, y)
        self._notify(EVENT_GRAPH_CHANGED, graph=self._graph)
        return node_id

    def remove_node(self, node_id: str) -> bool:
        """Remove a node with its edges; clears start/end pointing at it."""
        selected = (self.start, self.end)
        if not self._graph.remove_node(node_id):
            logger.debug("remove_node: %s not in graph, ignored.", node_id)
            return False

        self._notify(EVENT_GRAPH_CHANGED, graph=self._graph)
        if (self.start, self.end) != selected:
            self._notify_selection()
        return True

    def add_edge(self, source_id: str, target_id: str, weight: float) -> Edge:
        """Add an edge without any validation (see ``submit_edge``)."""
        edge = self._graph.add_edge(source_id, target_id, weight)
        self._notify(EVENT_GRAPH_CHANGED, graph=self._graph)
        return edge

    def submit_edge(self, source_id: Optional[str], target_id: Optional[str],
                    raw_weight: Any) -> EdgeSubmission:
        """
        Validate form input and add the edge.

        Returns:
            The accepted submission; ``warnings`` is non-empty for
            advisory cases such as negative weights.

        Raises:
            EdgeInputError: If the input is rejected. Nothing is added.
        """
        submission = self._edge_validator.validate(
            self._graph, source_id, target_id, raw_weight
        )
        self.add_edge(submission.source_id, submission.target_id, submission.weight)
        return submission

    def remove_edge(self, index: int) -> Optional[Edge]:
        """Remove the edge at ``index``; out-of-range indexes are ignored."""
        edge = self._graph.remove_edge(index)
        if edge is None:
            logger.warning("remove_edge: index %d out of range (%d edges).",
                           index, self._graph.get_number_of_edges())
            return None
        self._notify(EVENT_GRAPH_CHANGED, graph=self._graph)
        return edge

    def set_directed(self, directed: bool) -> None:
        if directed == self._graph.is_directed():
            return
        self._graph.set_directed(directed)
        self._notify(EVENT_GRAPH_CHANGED, graph=self._graph)

    def restore_graph(self, snapshot: Graph) -> None:
        """Replace the graph contents with an earlier snapshot (undo)."""
        self._graph.restore_from(snapshot)
        self._notify(EVENT_GRAPH_CHANGED, graph=self._graph)
        self._notify_selection()

    # ── Selection ────────────────────────────────────────────────

    def set_start(self, node_id: Optional[str]) -> bool:
        """Select the start node; ``None`` clears it. Unknown ids are refused."""
        if node_id is not None and not self._graph.has_node(node_id):
            logger.warning("set_start: node %s not in graph.", node_id)
            return False
        self._graph.selection.set_start(node_id)
        self._notify_selection()
        return True

    def set_end(self, node_id: Optional[str]) -> bool:
        """Select the end node; ``None`` clears it. Unknown ids are refused."""
        if node_id is not None and not self._graph.has_node(node_id):
            logger.warning("set_end: node %s not in graph.", node_id)
            return False
        self._graph.selection.set_end(node_id)
        self._notify_selection()
        return True

    def select_node(self, node_id: str) -> bool:
        """Apply a click on a node (see ``Selection.toggle``)."""
        if not self._graph.has_node(node_id):
            return False
        self._graph.selection.toggle(node_id)
        self._notify_selection()
        return True

    # ── Running ──────────────────────────────────────────────────

    def run(self) -> Optional[ShortestPathResult]:
        """
        Compute shortest paths from the selected start and bind the
        result to the replay (and start playback when ``autoplay``).

        Returns:
            The new result, or None when no start is selected.
        """
        if self.start is None:
            logger.info("Run ignored: no start node selected.")
            return None

        result = self._search_service.compute(self._graph, self.start, self.end)
        self._result = result
        self._replay.bind(result)
        self._notify(EVENT_RESULT_COMPUTED, result=result)
        if self._config.autoplay:
            self._replay.play()
        return result

    def play(self) -> bool:
        return self._replay.play()

    def pause(self) -> None:
        self._replay.pause()

    def seek(self, step: int) -> Optional[int]:
        return self._replay.seek(step)

    def step_forward(self) -> Optional[int]:
        return self._replay.step_forward()

    def step_backward(self) -> Optional[int]:
        return self._replay.step_backward()

    def reset(self) -> None:
        """Drop the result and cursor, clear start/end. The graph stays."""
        had_selection = not self._graph.selection.is_empty()
        self._replay.reset()
        self._result = None
        self._graph.selection.clear()
        logger.info("Playground reset.")
        if had_selection:
            self._notify_selection()
        self._notify(EVENT_RESET)

    def clear_all(self) -> None:
        """Drop the graph, result, cursor and selection."""
        had_selection = not self._graph.selection.is_empty()
        self._replay.reset()
        self._result = None
        self._graph.clear()
        logger.info("Playground cleared.")
        self._notify(EVENT_GRAPH_CHANGED, graph=self._graph)
        if had_selection:
            self._notify_selection()
        self._notify(EVENT_CLEARED)

    # ── Observer pattern ─────────────────────────────────────────

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """
        Register a callback for a playground event.

        Events:
            - graph_changed       (graph=...)
            - selection_changed   (start=..., end=...)
            - result_computed     (result=...)
            - replay_changed      (state=..., step=...)
            - reset
            - cleared
        """
        self._listeners.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """Remove a previously registered callback."""
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def _notify(self, event: str, **kwargs: Any) -> None:
        """Fire all callbacks registered for the given event."""
        for cb in self._listeners.get(event, []):
            try:
                cb(**kwargs)
            except Exception as exc:
                logger.error("Observer callback failed for '%s': %s", event, exc)

    def _notify_selection(self) -> None:
        self._notify(EVENT_SELECTION_CHANGED, start=self.start, end=self.end)

    def _on_replay_changed(self, replay: ReplayController) -> None:
        self._notify(EVENT_REPLAY_CHANGED, state=replay.state, step=replay.step)

    # ── Convenience ──────────────────────────────────────────────

    def snapshot(self) -> Dict[str, Any]:
        """Everything a renderer needs, as plain data."""
        return {
            'graph': self._graph.to_dict(),
            'result': self._result.to_dict() if self._result is not None else None,
            'result_is_stale': self.result_is_stale,
            'replay': {
                'state': self._replay.state.value,
                'step': self._replay.step,
                'last_step': self._replay.last_step,
                'revealed': self._replay.revealed(),
            },
        }

    def __repr__(self) -> str:
        return (
            f"Playground(nodes={self._graph.get_number_of_nodes()}, "
            f"edges={self._graph.get_number_of_edges()}, "
            f"replay={self._replay.state.value})"
        )
