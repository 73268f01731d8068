"""Move list — numbered (white, black) move pairs with undo."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chesspgn.core.enums import PairState, Turn
from chesspgn.core.move import Move


@dataclass
class MovePair:
    """One move number: a white half-move and the black reply."""

    white: Move | None = None
    black: Move | None = None

    @property
    def state(self) -> PairState:
        if self.white is None:
            return PairState.WHITE_TO_MOVE
        if self.black is None:
            return PairState.BLACK_TO_MOVE
        return PairState.COMPLETE

    def add(self, move: Move) -> bool:
        """Fill the next free slot; ``False`` when the pair is complete."""
        if self.white is None:
            self.white = move
        elif self.black is None:
            self.black = move
        else:
            return False
        return True

    def remove(self) -> Move | None:
        """Take out the newest half-move (black first)."""
        if self.black is not None:
            move, self.black = self.black, None
            return move
        if self.white is not None:
            move, self.white = self.white, None
            return move
        return None

    def __str__(self) -> str:
        if self.white is None:
            return ""
        if self.black is None:
            return str(self.white)
        return f"{self.white} {self.black}"


class MoveList:
    """Ordered move pairs; only the last pair may be incomplete.

    :meth:`push` and :meth:`pop` are the only mutators besides
    :meth:`clear`, and both keep that invariant.
    """

    __slots__ = ("_pairs",)

    def __init__(self, moves: list[Move] | None = None) -> None:
        self._pairs: list[MovePair] = []
        for move in moves or ():
            self.push(move)

    # ── Mutation ─────────────────────────────────────────────────────────

    def push(self, move: Move) -> None:
        """Append *move* for whichever side is to move."""
        if not self._pairs or self._pairs[-1].state == PairState.COMPLETE:
            self._pairs.append(MovePair(white=move))
        else:
            self._pairs[-1].add(move)

    def pop(self) -> Move | None:
        """Remove and return the most recent half-move, or ``None``."""
        while self._pairs:
            move = self._pairs[-1].remove()
            if self._pairs[-1].state == PairState.WHITE_TO_MOVE:
                self._pairs.pop()
            if move is not None:
                return move
        return None

    def clear(self) -> None:
        self._pairs.clear()

    # ── Queries ──────────────────────────────────────────────────────────

    def current_turn(self) -> Turn:
        """Side to move next, derived from the last pair."""
        if self._pairs and self._pairs[-1].state == PairState.BLACK_TO_MOVE:
            return Turn.BLACK_TO_MOVE
        return Turn.WHITE_TO_MOVE

    @property
    def pairs(self) -> tuple[MovePair, ...]:
        return tuple(self._pairs)

    def moves(self) -> list[Move]:
        """All half-moves in play order."""
        flat: list[Move] = []
        for pair in self._pairs:
            if pair.white is not None:
                flat.append(pair.white)
            if pair.black is not None:
                flat.append(pair.black)
        return flat

    def last(self) -> Move | None:
        """Most recent half-move without removing it."""
        if not self._pairs:
            return None
        pair = self._pairs[-1]
        return pair.black if pair.black is not None else pair.white

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.moves())

    @property
    def fullmove_number(self) -> int:
        """Number of the move the side to move is about to play."""
        if self.current_turn() == Turn.BLACK_TO_MOVE:
            return len(self._pairs)
        return len(self._pairs) + 1

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __iter__(self) -> Iterator[MovePair]:
        return iter(tuple(self._pairs))
