"""Move value object, its builder, and move errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chesspgn.core.enums import CastleSide, PieceType
from chesspgn.core.types import Coordinate


class MoveErrorKind(Enum):
    """Why a move string or builder was rejected."""

    MISSING_MOVE_DATA = "missing move data"
    INVALID_INPUT_FORMAT = "invalid input format"
    INVALID_MOVE = "invalid move"
    IMPOSSIBLE_MOVE = "impossible move"
    MISSING_DESTINATION = "missing destination"


class MoveError(ValueError):
    """Raised when a move cannot be parsed or built."""

    def __init__(self, kind: MoveErrorKind, text: str | None = None) -> None:
        self.kind = kind
        self.text = text
        if text is None:
            super().__init__(kind.value.capitalize())
        else:
            super().__init__(f"{kind.value.capitalize()}: {text!r}")


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object for one half-move as written in PGN.

    Only notation-level facts are stored; nothing here knows whether the
    move is legal on a board.
    """

    destination: Coordinate | None = None
    origin: Coordinate | None = None
    piece: PieceType = PieceType.PAWN
    castle: CastleSide | None = None
    promotion: PieceType | None = None
    is_capture: bool = False
    is_check: bool = False
    is_checkmate: bool = False

    def __str__(self) -> str:
        from chesspgn.core.notation.san import format_move

        return format_move(self)

    @staticmethod
    def builder() -> MoveBuilder:
        return MoveBuilder()


@dataclass
class MoveBuilder:
    """Mutable staging area for a :class:`Move`, validated by :meth:`build`."""

    origin: Coordinate | None = None
    destination: Coordinate | None = None
    piece: PieceType | None = None
    castle: CastleSide | None = None
    promotion: PieceType | None = None
    is_capture: bool = False
    is_check: bool = False
    is_checkmate: bool = False

    def build(self) -> Move:
        """Validate notation rules and freeze into a :class:`Move`.

        Piece movement rules are not checked, only what PGN text can say.
        """
        origin = self.origin
        if origin is not None and origin.is_empty:
            origin = None

        if self.is_check and self.is_checkmate:
            raise MoveError(MoveErrorKind.IMPOSSIBLE_MOVE)
        # Castling is written as O-O / O-O-O alone; nothing else fits in it.
        if self.castle is not None and (
            self.is_capture
            or self.promotion is not None
            or origin is not None
            or self.destination is not None
            or self.piece not in (None, PieceType.KING)
        ):
            raise MoveError(MoveErrorKind.IMPOSSIBLE_MOVE)

        if self.destination is not None:
            if not self.destination.is_complete:
                raise MoveError(MoveErrorKind.MISSING_DESTINATION)
        elif self.castle is None:
            raise MoveError(MoveErrorKind.MISSING_MOVE_DATA)

        piece = self.piece
        if piece is None:
            piece = PieceType.KING if self.castle is not None else PieceType.PAWN

        # A pawn capture names the file it came from (exd5).
        if piece == PieceType.PAWN and self.is_capture:
            if origin is None or origin.file is None:
                raise MoveError(MoveErrorKind.MISSING_MOVE_DATA)

        return Move(
            destination=self.destination,
            origin=origin,
            piece=piece,
            castle=self.castle,
            promotion=self.promotion,
            is_capture=self.is_capture,
            is_check=self.is_check,
            is_checkmate=self.is_checkmate,
        )
