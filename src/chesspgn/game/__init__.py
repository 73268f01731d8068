"""Game management layer — session with undo/redo and the command language.

Quick start::

    from chesspgn.game import GameSession, run_line

    session = GameSession()
    session.submit("e4")
    print(run_line(session, "undo").message)  # Undid 1 move(s)
"""

from chesspgn.game.commands import (
    HELP_TEXT,
    Command,
    CommandError,
    CommandKind,
    CommandOutcome,
    execute,
    parse_command,
    run_line,
)
from chesspgn.game.session import GameEvents, GameSession

__all__ = [
    # Session
    "GameEvents",
    "GameSession",
    # Commands
    "HELP_TEXT",
    "Command",
    "CommandError",
    "CommandKind",
    "CommandOutcome",
    "execute",
    "parse_command",
    "run_line",
]
