"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesspgn.core.enums import Color, PieceType

# Figurines: white = outline, black = filled
_FIGURINES: dict[Color, str] = {
    Color.WHITE: "♙♘♗♖♕♔",
    Color.BLACK: "♟♞♝♜♛♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece of one team."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN-style letter (uppercase = white, lowercase = black)."""
        letter = self.piece_type.letter
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a FEN-style letter, e.g. 'n' → black knight."""
        upper = char.upper()
        piece_type = PieceType.PAWN if upper == "P" else PieceType.from_char(upper)
        if len(char) != 1 or piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, piece_type)

    @property
    def symbol(self) -> str:
        """Unicode chess figurine, e.g. ♞."""
        return _FIGURINES[self.color][self.piece_type - 1]
