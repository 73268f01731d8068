"""Line-oriented command language shared by the terminal and desktop front ends.

Examples::

    move e4        m Nf3        exd5          (a bare move also works)
    undo           undo 3       redo 2
    reset          save game    load game.pgn  quit
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from chesspgn.core.move import MoveError
from chesspgn.core.notation.pgn import PgnError, PgnTagError
from chesspgn.core.notation.san import format_move, parse_move
from chesspgn.game.session import GameSession

_LOGGER = logging.getLogger(__name__)


class CommandError(ValueError):
    """A command line could not be understood."""


class CommandKind(Enum):
    MOVE = "move"
    UNDO = "undo"
    REDO = "redo"
    RESET = "reset"
    SAVE = "save"
    LOAD = "load"
    QUIT = "quit"
    HELP = "help"


_ALIASES: dict[str, CommandKind] = {
    "m": CommandKind.MOVE,
    "u": CommandKind.UNDO,
    "r": CommandKind.REDO,
    "q": CommandKind.QUIT,
    "exit": CommandKind.QUIT,
    "?": CommandKind.HELP,
}

HELP_TEXT = """\
Commands:
  move <san>     Make a chess move, e.g. e4, exd5, Nc3, e8=Q, O-O-O
  undo [n]       Undo the last move or moves
  redo [n]       Redo previously undone moves
  reset          Reset the board
  save <file>    Save the current game into a PGN file
  load <file>    Load a game from a PGN file
  quit           Quit the game (unsaved progress is lost)
  help           Show this message"""


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    argument: str | None = None
    count: int = 1


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """What a front end should show after running a command."""

    message: str = ""
    quit: bool = False
    ok: bool = True


def _lookup(word: str) -> CommandKind | None:
    lowered = word.lower()
    if lowered in _ALIASES:
        return _ALIASES[lowered]
    try:
        return CommandKind(lowered)
    except ValueError:
        return None


def _parse_count(kind: CommandKind, argument: str | None) -> int:
    if argument is None:
        return 1
    try:
        count = int(argument)
    except ValueError:
        raise CommandError(
            f"{kind.value} expects a number, got {argument!r}"
        ) from None
    if count < 1:
        raise CommandError(f"{kind.value} count must be positive")
    return count


def parse_command(line: str) -> Command:
    """Parse one input line.

    A line whose first word is not a command is tried as a move, so
    ``Nf3`` and ``move Nf3`` are the same. Raises :class:`CommandError`.
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        raise CommandError("Empty command")
    word = parts[0]
    argument = parts[1].strip() if len(parts) > 1 else None

    kind = _lookup(word)
    if kind is None:
        try:
            parse_move(line)
        except MoveError:
            raise CommandError(f"Unknown command: {word!r}") from None
        return Command(CommandKind.MOVE, line.strip())

    if kind in (CommandKind.MOVE, CommandKind.SAVE, CommandKind.LOAD):
        if argument is None:
            raise CommandError(f"{kind.value} needs an argument")
        return Command(kind, argument)
    if kind in (CommandKind.UNDO, CommandKind.REDO):
        return Command(kind, count=_parse_count(kind, argument))
    if argument is not None:
        raise CommandError(f"{kind.value} takes no arguments")
    return Command(kind)


def execute(session: GameSession, command: Command) -> CommandOutcome:
    """Run *command* against *session*; errors become failed outcomes."""
    try:
        return _dispatch(session, command)
    except (MoveError, PgnError, PgnTagError) as exc:
        _LOGGER.warning("Rejected %s: %s", command.kind.value, exc)
        return CommandOutcome(str(exc), ok=False)
    except OSError as exc:
        _LOGGER.warning("File error on %s: %s", command.kind.value, exc)
        return CommandOutcome(f"File error: {exc.strerror or exc}", ok=False)


def run_line(session: GameSession, line: str) -> CommandOutcome:
    """Parse and execute one input line."""
    try:
        command = parse_command(line)
    except CommandError as exc:
        _LOGGER.warning("Bad command %r: %s", line, exc)
        return CommandOutcome(str(exc), ok=False)
    return execute(session, command)


def _dispatch(session: GameSession, command: Command) -> CommandOutcome:
    kind = command.kind
    if kind == CommandKind.MOVE:
        move = session.submit(command.argument or "")
        return CommandOutcome(f"Played {format_move(move)}")
    if kind == CommandKind.UNDO:
        undone = session.undo(command.count)
        if not undone:
            return CommandOutcome("Nothing to undo", ok=False)
        return CommandOutcome(f"Undid {len(undone)} move(s)")
    if kind == CommandKind.REDO:
        redone = session.redo(command.count)
        if not redone:
            return CommandOutcome("Nothing to redo", ok=False)
        return CommandOutcome(f"Redid {len(redone)} move(s)")
    if kind == CommandKind.RESET:
        session.reset()
        return CommandOutcome("New game")
    if kind == CommandKind.SAVE:
        path = session.save(command.argument or "")
        return CommandOutcome(f"Saved to {path}")
    if kind == CommandKind.LOAD:
        record = session.load(command.argument or "")
        return CommandOutcome(f"Loaded {record.moves.ply_count} move(s)")
    if kind == CommandKind.QUIT:
        return CommandOutcome("Bye", quit=True)
    return CommandOutcome(HELP_TEXT)
