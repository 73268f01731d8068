"""Notation package: SAN move text and PGN game records."""

from chesspgn.core.notation.pgn import (
    MOVETEXT_WIDTH,
    GameRecord,
    PgnDate,
    PgnError,
    PgnResult,
    PgnRound,
    PgnTagError,
    TagPair,
    format_game,
    format_movetext,
    movetext_tokens,
    parse_pgn_game,
)
from chesspgn.core.notation.san import MoveParser, ParsePhase, format_move, parse_move

__all__ = [
    "MOVETEXT_WIDTH",
    "GameRecord",
    "MoveParser",
    "ParsePhase",
    "PgnDate",
    "PgnError",
    "PgnResult",
    "PgnRound",
    "PgnTagError",
    "TagPair",
    "format_game",
    "format_move",
    "format_movetext",
    "movetext_tokens",
    "parse_move",
    "parse_pgn_game",
]
