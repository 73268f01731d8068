"""Terminal front end: ANSI board, move list and a ``>>`` command prompt."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from chesspgn.core.board import Board
from chesspgn.core.enums import Color
from chesspgn.core.notation.pgn import format_movetext
from chesspgn.game.commands import run_line
from chesspgn.game.session import GameSession

_LOGGER = logging.getLogger(__name__)

PROMPT = ">> "

RESET = "\x1b[0m"

# xterm-256 palette indices
_LIGHT_BG = 180
_DARK_BG = 64
_WHITE_FG = 255
_BLACK_FG = 240


def _fg_256(code: int) -> str:
    return f"\x1b[38;5;{code}m"


def _bg_256(code: int) -> str:
    return f"\x1b[48;5;{code}m"


def render_board(board: Board, *, color: bool = True) -> str:
    """Board as text, rank 8 on top, three columns per square.

    With *color* the squares and pieces get 256-colour ANSI escapes;
    without it the output is plain text suitable for logs and tests.
    """
    lines: list[str] = []
    for rank_idx, row in zip(range(7, -1, -1), board.ranks()):
        cells: list[str] = []
        for file_idx, piece in enumerate(row):
            glyph = piece.symbol if piece is not None else " "
            if not color:
                cells.append(f" {glyph} ")
                continue
            is_dark = (rank_idx + file_idx) % 2 == 0
            cell = _bg_256(_DARK_BG if is_dark else _LIGHT_BG)
            if piece is not None:
                cell += _fg_256(_WHITE_FG if piece.color == Color.WHITE else _BLACK_FG)
            cells.append(f"{cell} {glyph} ")
        line = f"{rank_idx + 1} " + "".join(cells)
        if color:
            line += RESET
        lines.append(line)
    lines.append("   " + "  ".join("ABCDEFGH"))
    return "\n".join(lines)


def render_screen(session: GameSession, *, color: bool = True) -> str:
    """Board followed by the movetext so far."""
    parts = [render_board(session.board, color=color)]
    record = session.record
    if record.moves:
        parts.append(format_movetext(record.moves, record.result))
    return "\n\n".join(parts)


def run_tui(
    session: GameSession | None = None,
    *,
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
    color: bool = True,
) -> int:
    """Read-eval-print loop until ``quit`` or end of input."""
    out = output if output is not None else sys.stdout
    game = session if session is not None else GameSession()

    while True:
        print(render_screen(game, color=color), file=out)
        try:
            line = input_fn(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print(file=out)
            _LOGGER.info("Input closed, leaving")
            return 0
        if not line.strip():
            continue
        outcome = run_line(game, line)
        if outcome.message:
            print(outcome.message, file=out)
        if outcome.quit:
            return 0


def main() -> None:
    """Entry point for the ``chesspgn-tui`` script."""
    from chesspgn.app import configure_logging

    configure_logging()
    sys.exit(run_tui(color=sys.stdout.isatty()))
