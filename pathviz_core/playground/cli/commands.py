"""
    CLI Commands — concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each command encapsulates one playground action as an object with
    ``execute(playground) → CommandResult``. Commands that edit the
    graph report ``supports_undo``; the ``CommandProcessor`` snapshots
    the graph before running them so ``undo`` can restore it.

    Supported commands:
    ───────────────────
        create node [--x=<x>] [--y=<y>]
        create edge <source_id> <target_id> --weight=<w>
        delete node --id=<id>
        delete edge --index=<i>
        mode directed|undirected
        start <id>|none
        end   <id>|none
        select <id>
        run
        play | pause | next | prev
        seek <step>
        tick [<n>]
        reset
        clear
        undo
        list [nodes|edges]
        result
        status
        help
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pathviz_api.models.graph import Graph
from pathviz_api.types import is_unreachable

from pathviz_core.services.exceptions import EdgeInputError
from pathviz_core.services.tick_scheduler import ManualTickScheduler

from ..core import Playground


def _fmt_distance(distance: float) -> str:
    return "∞" if is_unreachable(distance) else f"{distance:g}"


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        success:  Whether the command completed without error.
        message:  Human-readable output.
        graph:    The graph after the command.
        data:     Optional structured data for programmatic consumers.
    """
    success: bool
    message: str
    graph: Optional[Graph] = None
    data: Optional[Dict[str, Any]] = field(default_factory=dict)


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all CLI commands.

    Design Pattern: Command
    """

    @abstractmethod
    def execute(self, playground: Playground) -> CommandResult:
        """Execute the command on the given playground."""
        ...

    @property
    def supports_undo(self) -> bool:
        """Whether the graph edit made by this command can be undone."""
        return False


# ═════════════════════════════════════════════════════════════════
#  NODE COMMANDS
# ═════════════════════════════════════════════════════════════════

class CreateNodeCommand(Command):
    """
    Create a new node.

    Syntax:
        create node --x=120 --y=80
        create node                 (random position)
    """

    def __init__(self, x: Optional[float] = None, y: Optional[float] = None):
        self._x = x
        self._y = y

    def execute(self, playground: Playground) -> CommandResult:
        node_id = playground.add_node(self._x, self._y)
        node = playground.graph.get_node(node_id)
        return CommandResult(
            True,
            f"Node '{node_id}' created at ({node.x:g}, {node.y:g}).",
            playground.graph,
            data={"node_id": node_id},
        )

    @property
    def supports_undo(self) -> bool:
        return True


class DeleteNodeCommand(Command):
    """
    Delete a node together with every edge touching it.

    Syntax:
        delete node --id=<id>
    """

    def __init__(self, node_id: str):
        self._node_id = str(node_id)

    def execute(self, playground: Playground) -> CommandResult:
        if not playground.graph.has_node(self._node_id):
            return CommandResult(False, f"Node '{self._node_id}' not found.", playground.graph)

        edges_before = playground.graph.get_number_of_edges()
        playground.remove_node(self._node_id)
        removed = edges_before - playground.graph.get_number_of_edges()
        return CommandResult(
            True,
            f"Node '{self._node_id}' deleted ({removed} edge(s) removed).",
            playground.graph,
        )

    @property
    def supports_undo(self) -> bool:
        return True


# ═════════════════════════════════════════════════════════════════
#  EDGE COMMANDS
# ═════════════════════════════════════════════════════════════════

class CreateEdgeCommand(Command):
    """
    Create a new weighted edge between two existing nodes.

    Syntax:
        create edge <source_id> <target_id> --weight=<w>
    """

    def __init__(self, source_id: str, target_id: str, weight: Any):
        self._source_id = str(source_id)
        self._target_id = str(target_id)
        self._weight = weight

    def execute(self, playground: Playground) -> CommandResult:
        try:
            submission = playground.submit_edge(self._source_id, self._target_id, self._weight)
        except EdgeInputError as e:
            return CommandResult(False, f"Edge rejected: {e}", playground.graph)

        arrow = "->" if playground.is_directed else "--"
        index = playground.graph.get_number_of_edges() - 1
        lines = [
            f"Edge [{index}] created: {submission.source_id} {arrow} "
            f"{submission.target_id} (weight {submission.weight:g})."
        ]
        lines.extend(f"Warning: {w}" for w in submission.warnings)
        return CommandResult(
            True,
            "\n".join(lines),
            playground.graph,
            data={"index": index, "warnings": list(submission.warnings)},
        )

    @property
    def supports_undo(self) -> bool:
        return True


class DeleteEdgeCommand(Command):
    """
    Delete an edge by its position in the edge list.

    Syntax:
        delete edge --index=<i>
    """

    def __init__(self, index: int):
        self._index = index

    def execute(self, playground: Playground) -> CommandResult:
        edge = playground.remove_edge(self._index)
        if edge is None:
            return CommandResult(False, f"Edge [{self._index}] not found.", playground.graph)
        return CommandResult(
            True,
            f"Edge [{self._index}] deleted: {edge.source_id} -> {edge.target_id}.",
            playground.graph,
        )

    @property
    def supports_undo(self) -> bool:
        return True


class DirectionCommand(Command):
    """
    Switch between directed and undirected search.

    Syntax:
        mode directed
        mode undirected
    """

    def __init__(self, directed: bool):
        self._directed = directed

    def execute(self, playground: Playground) -> CommandResult:
        playground.set_directed(self._directed)
        mode = "directed" if self._directed else "undirected"
        return CommandResult(True, f"Graph is now {mode}.", playground.graph)

    @property
    def supports_undo(self) -> bool:
        return True


# ═════════════════════════════════════════════════════════════════
#  SELECTION COMMANDS
# ═════════════════════════════════════════════════════════════════

class SelectCommand(Command):
    """
    Choose the start / end node, or click a node.

    Syntax:
        start <id>|none
        end <id>|none
        select <id>
    """

    ROLES = ("start", "end", "toggle")

    def __init__(self, role: str, node_id: Optional[str]):
        if role not in self.ROLES:
            raise ValueError(f"Unknown selection role: '{role}'.")
        self._role = role
        self._node_id = node_id

    def execute(self, playground: Playground) -> CommandResult:
        if self._role == "start":
            ok = playground.set_start(self._node_id)
        elif self._role == "end":
            ok = playground.set_end(self._node_id)
        else:
            ok = playground.select_node(self._node_id)

        if not ok:
            return CommandResult(False, f"Node '{self._node_id}' not found.", playground.graph)
        return CommandResult(
            True,
            f"Start: {playground.start or '-'}, end: {playground.end or '-'}.",
            playground.graph,
            data={"start": playground.start, "end": playground.end},
        )


# ═════════════════════════════════════════════════════════════════
#  RUN / PLAYBACK COMMANDS
# ═════════════════════════════════════════════════════════════════

class RunCommand(Command):
    """
    Compute shortest paths from the start node and start the replay.

    Syntax:
        run
    """

    def execute(self, playground: Playground) -> CommandResult:
        result = playground.run()
        if result is None:
            return CommandResult(False, "Select a start node first.", playground.graph)

        msg = f"Run from '{result.source}': {len(result.visit_order)} node(s) reached."
        if result.destination is not None:
            if result.path_found:
                msg += (f" Path: {' -> '.join(result.path)} "
                        f"(distance {_fmt_distance(result.total_distance)}).")
            else:
                msg += f" No path to '{result.destination}'."
        if result.has_negative_weights:
            msg += "\nWarning: graph has negative weights, results may be wrong."
        return CommandResult(True, msg, playground.graph, data=result.to_dict())


class PlaybackCommand(Command):
    """
    Control the replay cursor.

    Syntax:
        play | pause | next | prev
    """

    ACTIONS = ("play", "pause", "next", "prev")

    def __init__(self, action: str):
        if action not in self.ACTIONS:
            raise ValueError(f"Unknown playback action: '{action}'.")
        self._action = action

    def execute(self, playground: Playground) -> CommandResult:
        if playground.result is None:
            return CommandResult(False, "Nothing to replay. Use 'run' first.", playground.graph)

        if self._action == "play":
            playground.play()
        elif self._action == "pause":
            playground.pause()
        elif self._action == "next":
            playground.step_forward()
        else:
            playground.step_backward()
        return _replay_status(playground)


class SeekCommand(Command):
    """
    Jump the replay cursor to a step (clamped to the run).

    Syntax:
        seek <step>
    """

    def __init__(self, step: int):
        self._step = step

    def execute(self, playground: Playground) -> CommandResult:
        if playground.seek(self._step) is None:
            return CommandResult(False, "Nothing to replay. Use 'run' first.", playground.graph)
        return _replay_status(playground)


class TickCommand(Command):
    """
    Let replay time pass by ``count`` tick intervals (manual clock only).

    Syntax:
        tick
        tick 3
    """

    def __init__(self, count: int = 1):
        if count < 1:
            raise ValueError("Tick count must be at least 1.")
        self._count = count

    def execute(self, playground: Playground) -> CommandResult:
        scheduler = playground.scheduler
        if not isinstance(scheduler, ManualTickScheduler):
            return CommandResult(False, "'tick' needs the manual replay clock.", playground.graph)
        scheduler.advance(self._count * playground.config.tick_interval)
        return _replay_status(playground)


def _replay_status(playground: Playground) -> CommandResult:
    replay = playground.replay
    if replay.step is None:
        return CommandResult(True, "Replay: idle.", playground.graph, data={"state": "idle"})

    revealed = replay.revealed()
    msg = (f"Replay: {replay.state.value}, step {replay.step}/{replay.last_step}"
           f"; visited: {', '.join(revealed) if revealed else '-'}")
    return CommandResult(
        True,
        msg,
        playground.graph,
        data={"state": replay.state.value, "step": replay.step, "revealed": revealed},
    )


# ═════════════════════════════════════════════════════════════════
#  PLAYGROUND-LEVEL COMMANDS
# ═════════════════════════════════════════════════════════════════

class ResetCommand(Command):
    """
    Drop the result and the replay, clear start / end. The graph stays.

    Syntax:
        reset
    """

    def execute(self, playground: Playground) -> CommandResult:
        playground.reset()
        return CommandResult(True, "Result and selection reset.", playground.graph)


class ClearCommand(Command):
    """
    Clear the entire playground (graph, result, selection).

    Syntax:
        clear
    """

    def execute(self, playground: Playground) -> CommandResult:
        playground.clear_all()
        return CommandResult(True, "Playground cleared.", playground.graph)

    @property
    def supports_undo(self) -> bool:
        return True


class UndoCommand(Command):
    """
    Undo the last graph edit.  Handled specially by ``CommandProcessor``.

    Syntax:
        undo
    """

    def execute(self, playground: Playground) -> CommandResult:
        # The actual undo logic is in CommandProcessor
        return CommandResult(True, "Undo delegated to processor.", playground.graph)


# ═════════════════════════════════════════════════════════════════
#  INFORMATIONAL COMMANDS (no mutation)
# ═════════════════════════════════════════════════════════════════

class ListCommand(Command):
    """
    List all nodes or edges in the graph.

    Syntax:
        list nodes
        list edges
        list   (lists both)
    """

    def __init__(self, target: Optional[str] = None):
        self._target = target  # "nodes", "edges", or None

    def execute(self, playground: Playground) -> CommandResult:
        graph = playground.graph
        lines: List[str] = []

        if self._target in (None, "nodes"):
            lines.append(f"── Nodes ({graph.get_number_of_nodes()}) ──")
            for node in graph.get_all_nodes():
                marker = ""
                if node.node_id == playground.start:
                    marker = "  (start)"
                elif node.node_id == playground.end:
                    marker = "  (end)"
                lines.append(f"  [{node.node_id}] at ({node.x:g}, {node.y:g}){marker}")

        if self._target in (None, "edges"):
            arrow = "->" if graph.is_directed() else "--"
            lines.append(f"── Edges ({graph.get_number_of_edges()}) ──")
            for index, edge in enumerate(graph.get_all_edges()):
                line = f"  [{index}] {edge.source_id} {arrow} {edge.target_id}  (weight {edge.weight:g})"
                if edge.is_negative():
                    line += "  !negative"
                lines.append(line)

        return CommandResult(True, "\n".join(lines), graph)


class ResultCommand(Command):
    """
    Show the current result as far as the replay has revealed it.

    Syntax:
        result
    """

    def execute(self, playground: Playground) -> CommandResult:
        result = playground.result
        if result is None:
            return CommandResult(False, "No result. Use 'run' first.", playground.graph)

        revealed = playground.replay.revealed()
        lines = [f"Source: {result.source}"]
        if result.destination is not None:
            if result.path_found:
                lines.append(f"Shortest path: {' -> '.join(result.path)}")
                lines.append(f"Total distance: {_fmt_distance(result.total_distance)}")
            else:
                lines.append(f"No path from {result.source} to {result.destination}.")
        lines.append(f"Visit order ({len(revealed)}/{len(result.visit_order)}): "
                     f"{', '.join(result.visit_order) if result.visit_order else '-'}")
        lines.append("Distances:")
        for node_id, distance in result.distances.items():
            lines.append(f"  {node_id}: {_fmt_distance(distance)}")
        if playground.result_is_stale:
            lines.append("(graph changed since this run)")
        return CommandResult(True, "\n".join(lines), playground.graph, data=result.to_dict())


class StatusCommand(Command):
    """
    Summarize the playground.

    Syntax:
        status
    """

    def execute(self, playground: Playground) -> CommandResult:
        graph = playground.graph
        mode = "directed" if graph.is_directed() else "undirected"
        msg = (
            f"{graph.get_number_of_nodes()} node(s), "
            f"{graph.get_number_of_edges()} edge(s), {mode}; "
            f"start={playground.start or '-'}, end={playground.end or '-'}; "
            f"replay={playground.replay_state.value}"
        )
        if playground.step is not None:
            msg += f" at step {playground.step}"
        return CommandResult(True, msg, graph, data=playground.snapshot())


class HelpCommand(Command):
    """
    Display available CLI commands.

    Syntax:
        help
    """

    def execute(self, playground: Playground) -> CommandResult:
        help_text = """
Available commands:
───────────────────────────────────────────────────────
  create node [--x=<x>] [--y=<y>]
      Add a node (random position when omitted).

  create edge <source_id> <target_id> --weight=<w>
      Add a weighted edge between two different nodes.

  delete node --id=<id>
      Delete a node and every edge touching it.

  delete edge --index=<i>
      Delete the edge at position <i> (see 'list edges').

  mode directed|undirected
      Choose how edges are walked.

  start <id>|none    end <id>|none    select <id>
      Pick the start / end node, or click a node.

  run
      Compute shortest paths from the start node and replay them.

  play | pause | next | prev | seek <step>
      Control the replay cursor.

  tick [<n>]
      Let <n> replay intervals pass.

  reset
      Clear the result and the start / end selection.

  clear
      Remove everything.

  undo
      Undo the last graph edit.

  list [nodes|edges]   result   status
      Show the graph, the current result or a summary.

  help
      Show this help text.
───────────────────────────────────────────────────────
""".strip()
        return CommandResult(True, help_text, playground.graph)
