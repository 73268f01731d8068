"""Square index helpers and the partial-coordinate value type.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chesspgn.core.enums import File, Rank

Square: TypeAlias = int  # 0–63


def file_of(sq: Square) -> File:
    """File of a square index."""
    return File(sq & 7)


def rank_of(sq: Square) -> Rank:
    """Rank of a square index."""
    return Rank(sq >> 3)


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return rank * 8 + file


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return file_of(sq).char + rank_of(sq).char


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    return square_of(Coordinate.parse(name))


def square_of(coord: Coordinate) -> Square:
    """Square index of a complete coordinate."""
    if coord.file is None or coord.rank is None:
        raise ValueError(f"Coordinate {coord} is not a full square")
    return make_square(coord.file, coord.rank)


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A square reference whose file and rank may each be missing.

    Partial coordinates appear as SAN disambiguation hints (``Nbd5`` keeps
    only the origin file).
    """

    file: File | None = None
    rank: Rank | None = None

    @classmethod
    def parse(cls, name: str) -> Coordinate:
        """Parse a full square name such as ``'e4'``."""
        if len(name) != 2:
            raise ValueError(f"Invalid square name: {name!r}")
        file = File.from_char(name[0])
        rank = Rank.from_char(name[1])
        if file is None or rank is None:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(file, rank)

    @property
    def is_empty(self) -> bool:
        return self.file is None and self.rank is None

    @property
    def is_partial(self) -> bool:
        """At least one of file and rank is known."""
        return self.file is not None or self.rank is not None

    @property
    def is_complete(self) -> bool:
        return self.file is not None and self.rank is not None

    def __str__(self) -> str:
        text = ""
        if self.file is not None:
            text += self.file.char
        if self.rank is not None:
            text += self.rank.char
        return text
