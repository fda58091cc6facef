"""
    CommandProcessor — parses raw CLI strings and dispatches commands.

    Design Patterns
    ───────────────
    • Interpreter   – parses the CLI text into structured ``Command`` objects.
    • Invoker       – maintains a graph snapshot history for undo.
    • Facade        – single ``process(text, playground)`` entry-point
                      hides all parsing.

    Every command that edits the graph is recorded with a snapshot of
    the graph taken just before it ran, so the user can step back.
"""
from __future__ import annotations

import logging
import shlex
from copy import deepcopy
from typing import Dict, List, Optional, Tuple

from pathviz_api.models.graph import Graph

from ..core import Playground
from .commands import (
    Command,
    CommandResult,
    CreateNodeCommand,
    DeleteNodeCommand,
    CreateEdgeCommand,
    DeleteEdgeCommand,
    DirectionCommand,
    SelectCommand,
    RunCommand,
    PlaybackCommand,
    SeekCommand,
    TickCommand,
    ResetCommand,
    ClearCommand,
    UndoCommand,
    ListCommand,
    ResultCommand,
    StatusCommand,
    HelpCommand,
)

logger = logging.getLogger(__name__)

_NONE_WORDS = ("none", "-", "clear")


class CommandProcessor:
    """
    Parses raw CLI input, creates ``Command`` objects, executes them
    on a playground, and maintains an undo history.

    Usage:
        processor = CommandProcessor()
        result = processor.process("create edge node-0 node-1 --weight=4", playground)
    """

    def __init__(self, max_undo: int = 50):
        """
        Args:
            max_undo: How many graph snapshots to keep.
        """
        self._undo_stack: List[Tuple[Command, Graph]] = []
        self._max_undo = max_undo

    # ── Public API ───────────────────────────────────────────────

    def process(self, text: str, playground: Playground) -> CommandResult:
        """
        Parse and execute a single CLI command on the given playground.

        Args:
            text:       Raw command string from the user.
            playground: The playground to act on.

        Returns:
            ``CommandResult`` with success status and message.
        """
        text = self._strip_comments(text).strip()
        if not text:
            return CommandResult(False, "Empty command. Type 'help' for usage.", playground.graph)

        try:
            command = self._parse(text)
        except ValueError as e:
            return CommandResult(False, f"Parse error: {e}", playground.graph)

        return self._execute(command, playground)

    def get_undo_depth(self) -> int:
        """Number of commands that can be undone."""
        return len(self._undo_stack)

    # ── Execution engine ─────────────────────────────────────────

    def _execute(self, command: Command, playground: Playground) -> CommandResult:
        """Execute a parsed command and manage the undo stack."""

        if isinstance(command, UndoCommand):
            return self._do_undo(playground)

        snapshot = deepcopy(playground.graph) if command.supports_undo else None

        result = command.execute(playground)
        logger.debug("%s -> success=%s", type(command).__name__, result.success)

        if result.success and snapshot is not None:
            self._push_undo(command, snapshot)

        return result

    def _do_undo(self, playground: Playground) -> CommandResult:
        """Pop the last command and restore the graph it replaced."""
        if not self._undo_stack:
            return CommandResult(False, "Nothing to undo.", playground.graph)

        command, old_graph = self._undo_stack.pop()
        playground.restore_graph(old_graph)
        return CommandResult(
            True,
            f"Undo {type(command).__name__} successful (stack depth: {len(self._undo_stack)}).",
            playground.graph,
        )

    def _push_undo(self, command: Command, graph_snapshot: Graph) -> None:
        """Save a command + graph snapshot for potential undo."""
        if len(self._undo_stack) >= self._max_undo:
            self._undo_stack.pop(0)
        self._undo_stack.append((command, graph_snapshot))

    # ── Comment handling ────────────────────────────────────────

    @staticmethod
    def _strip_comments(text: str) -> str:
        """
        Strip inline comments — everything after an unquoted ``#``.

        Example:
            >>> CommandProcessor._strip_comments("run   # go")
            'run'
        """
        in_single = False
        in_double = False
        for i, ch in enumerate(text):
            if ch == "'" and not in_double:
                in_single = not in_single
            elif ch == '"' and not in_single:
                in_double = not in_double
            elif ch == '#' and not in_single and not in_double:
                return text[:i].rstrip()
        return text

    # ── Parser ───────────────────────────────────────────────────

    def _parse(self, text: str) -> Command:
        """
        Parse raw CLI text into a ``Command`` object.

        Raises:
            ValueError: If the text cannot be parsed.
        """
        try:
            tokens = shlex.split(text)
        except ValueError:
            # Fallback: simple split if quotes are malformed
            tokens = text.split()

        if not tokens:
            raise ValueError("Empty command.")

        verb = tokens[0].lower()
        args = tokens[1:]

        # ── Single-word commands ──
        simple = {
            "help": HelpCommand,
            "undo": UndoCommand,
            "reset": ResetCommand,
            "clear": ClearCommand,
            "run": RunCommand,
            "result": ResultCommand,
            "status": StatusCommand,
        }
        if verb in simple:
            return simple[verb]()

        if verb in PlaybackCommand.ACTIONS:
            return PlaybackCommand(verb)

        if verb == "seek":
            if len(args) != 1:
                raise ValueError("Usage: seek <step>")
            return SeekCommand(self._to_int(args[0], "step"))

        if verb == "tick":
            count = self._to_int(args[0], "tick count") if args else 1
            return TickCommand(count)

        if verb == "mode":
            if len(args) != 1 or args[0].lower() not in ("directed", "undirected"):
                raise ValueError("Usage: mode directed|undirected")
            return DirectionCommand(args[0].lower() == "directed")

        # ── selection ──
        if verb in ("start", "end", "select"):
            if len(args) != 1:
                raise ValueError(f"Usage: {verb} <id>")
            node_id: Optional[str] = args[0]
            if verb == "select":
                return SelectCommand("toggle", node_id)
            if node_id.lower() in _NONE_WORDS:
                node_id = None
            return SelectCommand(verb, node_id)

        # ── list ──
        if verb == "list":
            target = args[0].lower() if args else None
            if target not in (None, "nodes", "edges"):
                raise ValueError(f"Unknown list target: '{target}'. Use 'nodes' or 'edges'.")
            return ListCommand(target)

        # ── create / delete ──
        if verb in ("create", "delete"):
            if not args:
                raise ValueError(f"Usage: {verb} <node|edge> ...")
            entity = args[0].lower()
            remaining = args[1:]

            if verb == "create" and entity == "node":
                return self._parse_create_node(remaining)
            if verb == "create" and entity == "edge":
                return self._parse_create_edge(remaining)
            if verb == "delete" and entity == "node":
                options, _ = self._extract_options(remaining)
                if "id" not in options:
                    raise ValueError("Missing required --id=<value>.")
                return DeleteNodeCommand(options["id"])
            if verb == "delete" and entity == "edge":
                options, _ = self._extract_options(remaining)
                if "index" not in options:
                    raise ValueError("Missing required --index=<value>.")
                return DeleteEdgeCommand(self._to_int(options["index"], "index"))

            raise ValueError(f"Unknown entity: '{entity}'. Use 'node' or 'edge'.")

        raise ValueError(f"Unknown command: '{verb}'. Type 'help' for usage.")

    # ── Token parsers ────────────────────────────────────────────

    @staticmethod
    def _extract_options(tokens: List[str]) -> Tuple[Dict[str, str], List[str]]:
        """
        Split ``--key=value`` / ``--key value`` options from positional tokens.
        Returns (options, positional).
        """
        options: Dict[str, str] = {}
        positional: List[str] = []
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.startswith("--"):
                key, eq, value = token[2:].partition("=")
                if not eq:
                    if i + 1 >= len(tokens):
                        raise ValueError(f"Option '--{key}' needs a value.")
                    value = tokens[i + 1]
                    i += 1
                options[key.lower()] = value
            else:
                positional.append(token)
            i += 1
        return options, positional

    @staticmethod
    def _to_int(value: str, name: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{name} must be an integer, got '{value}'.")

    @staticmethod
    def _to_float(value: str, name: str) -> float:
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"{name} must be a number, got '{value}'.")

    # ── Compound parsers ─────────────────────────────────────────

    def _parse_create_node(self, tokens: List[str]) -> CreateNodeCommand:
        options, _ = self._extract_options(tokens)
        x = self._to_float(options["x"], "x") if "x" in options else None
        y = self._to_float(options["y"], "y") if "y" in options else None
        return CreateNodeCommand(x, y)

    def _parse_create_edge(self, tokens: List[str]) -> CreateEdgeCommand:
        options, positional = self._extract_options(tokens)
        if len(positional) != 2:
            raise ValueError(
                "create edge requires <source_id> <target_id> as positional arguments."
            )
        # Weight validation belongs to the command so bad weights are
        # reported as rejected input rather than parse errors
        return CreateEdgeCommand(positional[0], positional[1], options.get("weight"))
