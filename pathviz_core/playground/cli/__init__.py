"""
CLI package — Command-Line Interface for the playground.

Design Patterns
───────────────
• Command       – each CLI operation is a ``Command`` object with
                  ``execute(playground)``.
• Interpreter   – parsing the CLI syntax into structured command objects.
"""
from .command_processor import CommandProcessor
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

__all__ = [
    'CommandProcessor',
    'Command',
    'CommandResult',
    'CreateNodeCommand',
    'DeleteNodeCommand',
    'CreateEdgeCommand',
    'DeleteEdgeCommand',
    'DirectionCommand',
    'SelectCommand',
    'RunCommand',
    'PlaybackCommand',
    'SeekCommand',
    'TickCommand',
    'ResetCommand',
    'ClearCommand',
    'UndoCommand',
    'ListCommand',
    'ResultCommand',
    'StatusCommand',
    'HelpCommand',
]
