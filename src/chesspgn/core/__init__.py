"""Core domain layer — pure notation logic with zero external dependencies.

Quick start::

    from chesspgn.core import MoveList, format_move, parse_move

    moves = MoveList()
    moves.push(parse_move("e4"))
    moves.push(parse_move("e5"))
    print(format_move(moves.pop()))  # e5
"""

from chesspgn.core.board import Board
from chesspgn.core.enums import (
    CastleSide,
    Color,
    File,
    PairState,
    PieceType,
    Rank,
    Turn,
)
from chesspgn.core.move import Move, MoveBuilder, MoveError, MoveErrorKind
from chesspgn.core.move_list import MoveList, MovePair
from chesspgn.core.notation import (
    GameRecord,
    PgnDate,
    PgnResult,
    PgnRound,
    format_game,
    format_move,
    parse_move,
    parse_pgn_game,
)
from chesspgn.core.piece import Piece
from chesspgn.core.types import (
    Coordinate,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "File",
    "PairState",
    "PieceType",
    "Rank",
    "Turn",
    # Types / helpers
    "Coordinate",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveBuilder",
    "MoveError",
    "MoveErrorKind",
    "MoveList",
    "MovePair",
    "Piece",
    # Notation
    "GameRecord",
    "PgnDate",
    "PgnResult",
    "PgnRound",
    "format_game",
    "format_move",
    "parse_move",
    "parse_pgn_game",
]
