"""Core enumerations for the notation domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class File(IntEnum):
    """Board file a–h."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @classmethod
    def from_char(cls, char: str) -> File | None:
        """Decode ``'a'``–``'h'``; anything else gives ``None``."""
        return _FILE_BY_CHAR.get(char)

    @property
    def char(self) -> str:
        return chr(ord("a") + self.value)


class Rank(IntEnum):
    """Board rank 1–8."""

    R1 = 0
    R2 = 1
    R3 = 2
    R4 = 3
    R5 = 4
    R6 = 5
    R7 = 6
    R8 = 7

    @classmethod
    def from_char(cls, char: str) -> Rank | None:
        """Decode ``'1'``–``'8'``; anything else gives ``None``."""
        return _RANK_BY_CHAR.get(char)

    @property
    def char(self) -> str:
        return str(self.value + 1)


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @classmethod
    def from_char(cls, char: str) -> PieceType | None:
        """Decode a SAN piece letter.

        Pawns have no letter in move text, so ``'P'`` is not decoded.
        """
        return _PIECE_BY_LETTER.get(char)

    @property
    def letter(self) -> str:
        return _PIECE_LETTERS[self]


class CastleSide(IntEnum):
    """Castling direction."""

    KINGSIDE = auto()
    QUEENSIDE = auto()

    @property
    def token(self) -> str:
        return "O-O" if self == CastleSide.KINGSIDE else "O-O-O"


class Turn(IntEnum):
    """Whose half-move comes next in a move list."""

    WHITE_TO_MOVE = 0
    BLACK_TO_MOVE = 1

    @property
    def color(self) -> Color:
        return Color(self.value)


class PairState(IntEnum):
    """Fill state of a single numbered move pair."""

    WHITE_TO_MOVE = auto()
    BLACK_TO_MOVE = auto()
    COMPLETE = auto()


_FILE_BY_CHAR: dict[str, File] = {f.char: f for f in File}
_RANK_BY_CHAR: dict[str, Rank] = {r.char: r for r in Rank}

_PIECE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_PIECE_BY_LETTER: dict[str, PieceType] = {
    letter: pt for pt, letter in _PIECE_LETTERS.items() if pt != PieceType.PAWN
}
