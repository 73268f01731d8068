"""PGN game record: tag roster, movetext formatting and single-game loading."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from chesspgn.core.enums import Turn
from chesspgn.core.move import Move
from chesspgn.core.move_list import MoveList
from chesspgn.core.notation.san import format_move, parse_move

# Export lines stay under this many columns.
MOVETEXT_WIDTH = 80

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_MOVE_NUMBER_RE = re.compile(r"^(\d+)\.+(.*)$")
_UNSUPPORTED_MOVETEXT = "{};()$"


class PgnTagError(ValueError):
    """A tag value (date, round, result) could not be parsed."""


class PgnError(ValueError):
    """PGN text is malformed or uses unsupported features."""


# ── Tag value types ──────────────────────────────────────────────────────────


class PgnResult(Enum):
    """Game termination marker."""

    WHITE_WINS = "1-0"
    BLACK_WINS = "0-1"
    DRAW = "1/2-1/2"
    UNKNOWN = "*"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> PgnResult:
        try:
            return cls(token.strip())
        except ValueError:
            raise PgnTagError(f"Invalid result token: {token!r}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PgnDate:
    """``YYYY.MM.DD`` date with individually unknown parts (``????.??.??``)."""

    year: int | None = None
    month: int | None = None
    day: int | None = None

    @classmethod
    def today(cls) -> PgnDate:
        now = date.today()
        return cls(now.year, now.month, now.day)

    @classmethod
    def parse(cls, text: str) -> PgnDate:
        parts = text.strip().split(".")
        if len(parts) != 3:
            raise PgnTagError(f"Invalid PGN date: {text!r}")
        year, month, day = (_parse_date_part(part, text) for part in parts)
        if month is not None and not 1 <= month <= 12:
            raise PgnTagError(f"Invalid month in PGN date: {text!r}")
        if day is not None and not 1 <= day <= 31:
            raise PgnTagError(f"Invalid day in PGN date: {text!r}")
        return cls(year, month, day)

    def __str__(self) -> str:
        year = f"{self.year:04d}" if self.year is not None else "????"
        month = f"{self.month:02d}" if self.month is not None else "??"
        day = f"{self.day:02d}" if self.day is not None else "??"
        return f"{year}.{month}.{day}"


def _parse_date_part(part: str, text: str) -> int | None:
    if part and set(part) == {"?"}:
        return None
    if not part.isdigit():
        raise PgnTagError(f"Invalid PGN date: {text!r}")
    return int(part)


@dataclass(frozen=True, slots=True)
class PgnRound:
    """Round tag: dotted numbers (``3.1``), unknown (``?``) or n/a (``-``)."""

    numbers: tuple[int, ...] = ()
    inappropriate: bool = False

    @classmethod
    def unknown(cls) -> PgnRound:
        return cls()

    @classmethod
    def not_applicable(cls) -> PgnRound:
        return cls(inappropriate=True)

    @classmethod
    def parse(cls, text: str) -> PgnRound:
        clean = text.strip()
        if clean == "?":
            return cls.unknown()
        if clean == "-":
            return cls.not_applicable()
        numbers: list[int] = []
        for part in clean.split("."):
            try:
                number = int(part)
            except ValueError as exc:
                raise PgnTagError(f"Invalid PGN round: {text!r}") from exc
            if number < 0:
                raise PgnTagError(f"Invalid PGN round: {text!r}")
            numbers.append(number)
        return cls(tuple(numbers))

    @property
    def is_known(self) -> bool:
        return bool(self.numbers)

    def __str__(self) -> str:
        if self.numbers:
            return ".".join(str(n) for n in self.numbers)
        return "-" if self.inappropriate else "?"


@dataclass(frozen=True, slots=True)
class TagPair:
    """A single ``[Name "Value"]`` header line."""

    name: str
    value: object

    def __str__(self) -> str:
        escaped = str(self.value).replace("\\", "\\\\").replace('"', '\\"')
        return f'[{self.name} "{escaped}"]'


# ── Game record ──────────────────────────────────────────────────────────────


@dataclass
class GameRecord:
    """Seven Tag Roster plus the mainline move list."""

    event: str = ""
    site: str = ""
    date: PgnDate = field(default_factory=PgnDate.today)
    round: PgnRound = field(default_factory=PgnRound.unknown)
    white: str = ""
    black: str = ""
    result: PgnResult = PgnResult.UNKNOWN
    moves: MoveList = field(default_factory=MoveList)

    def tag_pairs(self) -> list[TagPair]:
        """Required tags in roster order."""
        return [
            TagPair("Event", self.event),
            TagPair("Site", self.site),
            TagPair("Date", self.date),
            TagPair("Round", self.round),
            TagPair("White", self.white),
            TagPair("Black", self.black),
            TagPair("Result", self.result),
        ]

    def push_move(self, move: Move) -> None:
        self.moves.push(move)

    def pop_move(self) -> Move | None:
        return self.moves.pop()

    def current_turn(self) -> Turn:
        return self.moves.current_turn()


# ── Export ───────────────────────────────────────────────────────────────────


def _wrap_tokens(tokens: list[str], width: int) -> list[str]:
    """Greedy line fill; a line is broken only between tokens."""
    lines: list[str] = []
    line = ""
    for token in tokens:
        if not line:
            line = token
        elif len(line) + 1 + len(token) < width:
            line += " " + token
        else:
            lines.append(line)
            line = token
    if line:
        lines.append(line)
    return lines


def movetext_tokens(moves: MoveList) -> list[str]:
    """``N.`` markers and SAN moves in order, without the result."""
    tokens: list[str] = []
    for number, pair in enumerate(moves, start=1):
        if pair.white is None:
            continue
        tokens.append(f"{number}.")
        tokens.append(format_move(pair.white))
        if pair.black is not None:
            tokens.append(format_move(pair.black))
    return tokens


def format_movetext(
    moves: MoveList,
    result: PgnResult = PgnResult.UNKNOWN,
    width: int = MOVETEXT_WIDTH,
) -> str:
    """Movetext wrapped below *width* columns, ending with the result."""
    tokens = movetext_tokens(moves)
    tokens.append(result.token)
    return "\n".join(_wrap_tokens(tokens, width))


def format_game(record: GameRecord) -> str:
    """Build a single-game PGN document."""
    lines = [str(tag) for tag in record.tag_pairs()]
    lines.append("")
    lines.append(format_movetext(record.moves, record.result))
    lines.append("")
    return "\n".join(lines)


# ── Import ───────────────────────────────────────────────────────────────────


def _apply_header(record: GameRecord, key: str, value: str) -> None:
    if key == "Event":
        record.event = value
    elif key == "Site":
        record.site = value
    elif key == "Date":
        record.date = PgnDate.parse(value)
    elif key == "Round":
        record.round = PgnRound.parse(value)
    elif key == "White":
        record.white = value
    elif key == "Black":
        record.black = value
    elif key == "Result":
        record.result = PgnResult.from_token(value)


def _movetext_moves(movetext: str) -> tuple[list[str], PgnResult | None]:
    """Split movetext into SAN tokens and the trailing result token."""
    sans: list[str] = []
    result: PgnResult | None = None
    for raw_token in movetext.split():
        if any(ch in _UNSUPPORTED_MOVETEXT for ch in raw_token):
            raise PgnError(f"Unsupported PGN movetext token: {raw_token!r}")
        if result is not None:
            raise PgnError(f"Movetext continues after result: {raw_token!r}")

        token = raw_token
        match = _MOVE_NUMBER_RE.match(token)
        if match is not None:
            token = match.group(2)
            if not token:
                continue

        if token in {r.token for r in PgnResult}:
            result = PgnResult(token)
            continue
        sans.append(token)
    return sans, result


def parse_pgn_game(pgn_text: str) -> GameRecord:
    """Parse a single PGN game into a :class:`GameRecord`.

    Only the tag section and plain mainline movetext are supported.
    Raises :class:`PgnError`, :class:`PgnTagError` or
    :class:`~chesspgn.core.move.MoveError`.
    """
    record = GameRecord(date=PgnDate())
    move_lines: list[str] = []
    in_headers = True

    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        if in_headers and line.startswith("["):
            match = _PGN_HEADER_RE.match(line)
            if match is None:
                raise PgnError(f"Invalid PGN header line: {line}")
            key, raw_value = match.groups()
            value = raw_value.replace('\\"', '"').replace("\\\\", "\\")
            _apply_header(record, key, value)
            continue

        if line.startswith("%"):
            continue
        if line.startswith("["):
            raise PgnError("Only a single PGN game is supported")
        in_headers = False
        move_lines.append(line)

    sans, movetext_result = _movetext_moves(" ".join(move_lines))
    for san in sans:
        record.push_move(parse_move(san))
    if movetext_result is not None and movetext_result != PgnResult.UNKNOWN:
        record.result = movetext_result
    return record
