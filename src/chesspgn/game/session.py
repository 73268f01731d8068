"""GameSession — owns the board, the game record and the redo history.

Front ends (terminal loop, Qt window) talk to the session only; it emits
events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from chesspgn.core.board import Board
from chesspgn.core.enums import Turn
from chesspgn.core.move import Move
from chesspgn.core.notation.pgn import (
    GameRecord,
    PgnError,
    PgnResult,
    format_game,
    parse_pgn_game,
)
from chesspgn.core.notation.san import format_move, parse_move

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, str], None]  # move, san
UndoCallback = Callable[[list[Move]], None]  # undone moves, newest first
ResetCallback = Callable[[], None]
LoadedCallback = Callable[[Path], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)
    on_loaded: list[LoadedCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Single-game workspace: move entry, undo/redo, reset, PGN save/load.

    Every method runs on the caller's thread; nothing here blocks except
    the file I/O in :meth:`save` and :meth:`load`.
    """

    __slots__ = ("_board", "_record", "_redo_stack", "events")

    def __init__(self, record: GameRecord | None = None) -> None:
        self._board = Board.initial()
        self._record = record if record is not None else GameRecord()
        self._redo_stack: list[Move] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def record(self) -> GameRecord:
        return self._record

    @property
    def current_turn(self) -> Turn:
        return self._record.current_turn()

    @property
    def can_undo(self) -> bool:
        return bool(self._record.moves)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    # ── Moves ────────────────────────────────────────────────────────────

    def submit(self, text: str) -> Move:
        """Parse *text* and append it to the move list.

        Raises :class:`~chesspgn.core.move.MoveError`; the session is left
        untouched in that case.
        """
        move = parse_move(text)
        self._redo_stack.clear()
        self._append(move)
        return move

    def play(self, move: Move) -> None:
        """Append an already-built move."""
        self._redo_stack.clear()
        self._append(move)

    def undo(self, count: int = 1) -> list[Move]:
        """Take back up to *count* half-moves; newest first."""
        undone: list[Move] = []
        for _ in range(count):
            move = self._record.pop_move()
            if move is None:
                break
            self._redo_stack.append(move)
            undone.append(move)
        if undone:
            _LOGGER.debug("Undid %d move(s)", len(undone))
            self._emit_undo(undone)
        return undone

    def redo(self, count: int = 1) -> list[Move]:
        """Replay up to *count* previously undone half-moves."""
        redone: list[Move] = []
        for _ in range(count):
            if not self._redo_stack:
                break
            move = self._redo_stack.pop()
            self._append(move)
            redone.append(move)
        return redone

    # ── Game lifecycle ───────────────────────────────────────────────────

    def reset(self) -> None:
        """Start over: empty move list, fresh board, same event and players."""
        old = self._record
        self._record = GameRecord(
            event=old.event,
            site=old.site,
            round=old.round,
            white=old.white,
            black=old.black,
        )
        self._redo_stack.clear()
        self._board.new_game()
        _LOGGER.info("Game reset")
        for cb in list(self.events.on_reset):
            cb()

    def set_players(self, white: str, black: str) -> None:
        self._record.white = white
        self._record.black = black

    def set_result(self, result: PgnResult) -> None:
        self._record.result = result

    # ── PGN persistence ──────────────────────────────────────────────────

    def export_pgn(self) -> str:
        return format_game(self._record)

    def save(self, file_path: Path | str) -> Path:
        """Write the game as PGN; a ``.pgn`` suffix is added when missing."""
        save_path = Path(file_path)
        if save_path.suffix.lower() != ".pgn":
            save_path = save_path.with_name(save_path.name + ".pgn")
        save_path.write_text(self.export_pgn(), encoding="utf-8")
        _LOGGER.info("Saved game to %s", save_path)
        return save_path

    def load(self, file_path: Path | str) -> GameRecord:
        """Replace the current game with the one stored in *file_path*.

        Parsing happens before any state changes, so a bad file leaves the
        session as it was.
        """
        load_path = Path(file_path)
        try:
            text = load_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise PgnError(f"{load_path.name} is not UTF-8 text") from exc
        record = parse_pgn_game(text)
        self._record = record
        self._redo_stack.clear()
        self._board.new_game()
        _LOGGER.info(
            "Loaded %d move(s) from %s", record.moves.ply_count, load_path
        )
        for cb in list(self.events.on_loaded):
            cb(load_path)
        return record

    # ── Internal helpers ─────────────────────────────────────────────────

    def _append(self, move: Move) -> None:
        self._record.push_move(move)
        san = format_move(move)
        _LOGGER.debug("Move %s", san)
        for cb in list(self.events.on_move):
            cb(move, san)

    def _emit_undo(self, moves: list[Move]) -> None:
        for cb in list(self.events.on_undo):
            cb(moves)
