"""Board - static piece placement on an 8x8 board."""

from __future__ import annotations

from chesspgn.core.enums import Color, PieceType
from chesspgn.core.piece import Piece
from chesspgn.core.types import Coordinate, Square, make_square, square_of

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board.

    Moves are never applied here; the only whole-board mutation is
    :meth:`new_game`.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def piece_at(self, coord: Coordinate) -> Piece | None:
        """Piece on a complete coordinate."""
        return self._squares[square_of(coord)]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in enumerate(self._squares) if piece == target]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    def ranks(self) -> list[list[Piece | None]]:
        """Rows from rank 8 down to rank 1, each ordered a → h."""
        return [self._squares[rank * 8 : rank * 8 + 8] for rank in range(7, -1, -1)]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    def new_game(self) -> None:
        """Reset in place to the standard starting position."""
        self.clear()
        for f in range(8):
            self[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            self[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
        for f, pt in enumerate(_BACK_RANK):
            self[make_square(f, 0)] = Piece(Color.WHITE, pt)
            self[make_square(f, 7)] = Piece(Color.BLACK, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.new_game()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in zip(range(8, 0, -1), self.ranks()):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{rank} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
