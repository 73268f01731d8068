"""SAN (Standard Algebraic Notation) move parsing and formatting.

Parsing is a single left-to-right pass through a fixed sequence of phases::

    CASTLE → PIECE → ORIGIN → CAPTURE → DESTINATION → PROMOTION → CHECKS → DONE

Each phase consumes the characters it understands and hands the first one
it does not understand to the next phase. There is one character of
look-ahead and no backtracking.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum, auto

from chesspgn.core.enums import CastleSide, File, PieceType, Rank
from chesspgn.core.move import Move, MoveBuilder, MoveError, MoveErrorKind
from chesspgn.core.types import Coordinate

# Characters after a lone coordinate that mark it as the destination.
_DESTINATION_FOLLOWERS = frozenset("=+#")


class ParsePhase(IntEnum):
    """States of the move parser."""

    CASTLE = auto()
    PIECE = auto()
    ORIGIN = auto()
    CAPTURE = auto()
    DESTINATION = auto()
    PROMOTION = auto()
    CHECKS = auto()
    DONE = auto()


class MoveParser:
    """State machine turning one SAN string into a :class:`Move`.

    :meth:`step` runs the current phase once and moves to the next one, so
    tests can stop the machine part-way and inspect :attr:`phase`,
    :attr:`builder` and :attr:`remaining`.
    """

    __slots__ = ("_text", "_pos", "_castle_count", "phase", "builder")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._castle_count = 0
        self.phase = ParsePhase.CASTLE
        self.builder = MoveBuilder()

    # ── Cursor ───────────────────────────────────────────────────────────

    @property
    def current(self) -> str | None:
        """Look-ahead character, or ``None`` at end of input."""
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    @property
    def remaining(self) -> str:
        return self._text[self._pos :]

    def _advance(self) -> None:
        self._pos += 1

    def _fail(self) -> MoveError:
        return MoveError(MoveErrorKind.INVALID_MOVE, self._text)

    # ── Driver ───────────────────────────────────────────────────────────

    def step(self) -> ParsePhase:
        """Run the current phase; return the phase that follows it."""
        if self.phase != ParsePhase.DONE:
            self._HANDLERS[self.phase](self)
        return self.phase

    def run(self) -> Move:
        while self.phase != ParsePhase.DONE:
            self.step()
        if self.current is not None:
            raise self._fail()
        try:
            return self.builder.build()
        except MoveError as exc:
            raise MoveError(exc.kind, self._text) from None

    # ── Phases ───────────────────────────────────────────────────────────

    def _castle(self) -> None:
        while (char := self.current) is not None and char in "O-":
            if char == "O":
                self._castle_count += 1
            self._advance()

        if self._castle_count == 2:
            self.builder.castle = CastleSide.KINGSIDE
        elif self._castle_count == 3:
            self.builder.castle = CastleSide.QUEENSIDE
        elif self._castle_count == 0 and self.current is not None:
            self.phase = ParsePhase.PIECE
            return
        else:
            raise self._fail()
        self.builder.piece = PieceType.KING
        self.phase = ParsePhase.CHECKS

    def _piece(self) -> None:
        char = self.current
        if char is None:
            raise self._fail()
        piece = PieceType.from_char(char)
        if piece is not None:
            self.builder.piece = piece
            self._advance()
        self.phase = ParsePhase.ORIGIN

    def _collect_coordinate(self) -> Coordinate:
        """Consume at most one file and then at most one rank character.

        A rank always closes the coordinate, so ``N5c3`` yields ``5`` and
        then ``c3``.
        """
        file: File | None = None
        rank: Rank | None = None
        while (char := self.current) is not None:
            if file is None and (parsed_file := File.from_char(char)) is not None:
                file = parsed_file
                self._advance()
                continue
            if rank is None and (parsed_rank := Rank.from_char(char)) is not None:
                rank = parsed_rank
                self._advance()
            break
        return Coordinate(file, rank)

    def _origin(self) -> None:
        coord = self._collect_coordinate()
        char = self.current
        if not coord.is_empty:
            # A lone square (e4, Nc3+, e8=Q) is where the piece goes.
            if char is None or char in _DESTINATION_FOLLOWERS:
                self.builder.destination = coord
            else:
                self.builder.origin = coord

        if char is None:
            self.phase = ParsePhase.DONE
        elif char == "=":
            self.phase = ParsePhase.PROMOTION
        elif char in "+#":
            self.phase = ParsePhase.CHECKS
        else:
            self.phase = ParsePhase.CAPTURE

    def _capture(self) -> None:
        char = self.current
        if char is None:
            raise self._fail()
        if char == "x":
            self.builder.is_capture = True
            self._advance()
        self.phase = ParsePhase.DESTINATION

    def _destination(self) -> None:
        coord = self._collect_coordinate()
        if not coord.is_empty:
            self.builder.destination = coord
        self.phase = ParsePhase.DONE if self.current is None else ParsePhase.PROMOTION

    def _promotion(self) -> None:
        if self.current == "=":
            self._advance()
            char = self.current
            piece = PieceType.from_char(char) if char is not None else None
            if piece is None:
                raise self._fail()
            self.builder.promotion = piece
            self._advance()
        self.phase = ParsePhase.CHECKS

    def _checks(self) -> None:
        char = self.current
        if char == "+":
            self.builder.is_check = True
            self._advance()
        elif char == "#":
            self.builder.is_checkmate = True
            self._advance()
        elif char is not None:
            raise self._fail()
        self.phase = ParsePhase.DONE

    _HANDLERS: dict[ParsePhase, Callable[[MoveParser], None]] = {
        ParsePhase.CASTLE: _castle,
        ParsePhase.PIECE: _piece,
        ParsePhase.ORIGIN: _origin,
        ParsePhase.CAPTURE: _capture,
        ParsePhase.DESTINATION: _destination,
        ParsePhase.PROMOTION: _promotion,
        ParsePhase.CHECKS: _checks,
    }


def parse_move(text: str) -> Move:
    """Parse a SAN move string such as ``'Nbxd5+'`` into a :class:`Move`.

    Raises :class:`MoveError` for empty, non-ASCII or malformed input.
    """
    clean = text.strip()
    if not clean:
        raise MoveError(MoveErrorKind.MISSING_MOVE_DATA, text)
    if not clean.isascii():
        raise MoveError(MoveErrorKind.INVALID_INPUT_FORMAT, text)
    return MoveParser(clean).run()


def format_move(move: Move) -> str:
    """Render *move* as canonical SAN text."""
    if move.castle is not None:
        san = move.castle.token
    else:
        is_pawn = move.piece == PieceType.PAWN
        san = "" if is_pawn else move.piece.letter

        if move.origin is not None:
            if move.origin.file is not None:
                san += move.origin.file.char
            # Pawn moves never need the origin rank.
            if move.origin.rank is not None and not is_pawn:
                san += move.origin.rank.char

        if move.is_capture:
            san += "x"

        if move.destination is not None:
            san += str(move.destination)

        if move.promotion is not None:
            san += "=" + move.promotion.letter

    if move.is_checkmate:
        san += "#"
    elif move.is_check:
        san += "+"
    return san
