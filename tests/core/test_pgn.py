"""Tests for the PGN game record, export and import."""

import pytest

from chesspgn.core.move import MoveError
from chesspgn.core.move_list import MoveList
from chesspgn.core.notation.pgn import (
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
from chesspgn.core.notation.san import parse_move


def _moves(*sans: str) -> MoveList:
    return MoveList([parse_move(san) for san in sans])


# Scholar's mate, 7 plies
_SCHOLAR = ("e4", "e5", "Bc4", "Nc6", "Qh5", "Nf6", "Qxf7#")


class TestTagValues:
    def test_result_tokens(self) -> None:
        assert [r.token for r in PgnResult] == ["1-0", "0-1", "1/2-1/2", "*"]
        assert PgnResult.from_token("1/2-1/2") == PgnResult.DRAW

    def test_result_invalid(self) -> None:
        with pytest.raises(PgnTagError, match="result"):
            PgnResult.from_token("2-0")

    def test_date_str(self) -> None:
        assert str(PgnDate(2024, 3, 7)) == "2024.03.07"
        assert str(PgnDate()) == "????.??.??"
        assert str(PgnDate(1999)) == "1999.??.??"

    def test_date_parse(self) -> None:
        assert PgnDate.parse("2024.03.07") == PgnDate(2024, 3, 7)
        assert PgnDate.parse("????.??.??") == PgnDate()
        assert PgnDate.parse("1972.??.??") == PgnDate(1972)

    @pytest.mark.parametrize("text", ["2024-03-07", "2024.13.01", "2024.01.32", "abcd.01.01"])
    def test_date_invalid(self, text: str) -> None:
        with pytest.raises(PgnTagError):
            PgnDate.parse(text)

    def test_round_forms(self) -> None:
        assert str(PgnRound.unknown()) == "?"
        assert str(PgnRound.not_applicable()) == "-"
        assert str(PgnRound((3, 1))) == "3.1"
        assert PgnRound.parse("?") == PgnRound.unknown()
        assert PgnRound.parse("-") == PgnRound.not_applicable()
        assert PgnRound.parse("5") == PgnRound((5,))
        assert PgnRound.parse("5").is_known

    @pytest.mark.parametrize("text", ["", "x", "1..2", "-3"])
    def test_round_invalid(self, text: str) -> None:
        with pytest.raises(PgnTagError):
            PgnRound.parse(text)

    def test_tag_pair_escapes(self) -> None:
        assert str(TagPair("Event", 'The "Open"')) == '[Event "The \\"Open\\""]'
        assert str(TagPair("Site", "C:\\chess")) == '[Site "C:\\\\chess"]'


class TestGameRecord:
    def test_seven_tag_roster_order(self) -> None:
        record = GameRecord(event="Club", white="Ann", black="Bob")
        names = [tag.name for tag in record.tag_pairs()]
        assert names == ["Event", "Site", "Date", "Round", "White", "Black", "Result"]

    def test_defaults(self) -> None:
        record = GameRecord()
        assert record.result == PgnResult.UNKNOWN
        assert record.round == PgnRound.unknown()
        assert record.date.year is not None

    def test_push_pop(self) -> None:
        record = GameRecord()
        record.push_move(parse_move("e4"))
        assert record.moves.ply_count == 1
        assert record.pop_move() == parse_move("e4")
        assert record.pop_move() is None


class TestExport:
    def test_tokens(self) -> None:
        assert movetext_tokens(_moves("e4", "e5", "Nf3")) == [
            "1.", "e4", "e5", "2.", "Nf3",
        ]

    def test_movetext_with_result(self) -> None:
        text = format_movetext(_moves(*_SCHOLAR), PgnResult.WHITE_WINS)
        assert text == "1. e4 e5 2. Bc4 Nc6 3. Qh5 Nf6 4. Qxf7# 1-0"

    def test_empty_movetext(self) -> None:
        assert format_movetext(MoveList()) == "*"

    def test_lines_stay_under_width(self) -> None:
        moves = _moves(*(["Nf3", "Nf6", "Ng1", "Ng8"] * 20))
        text = format_movetext(moves)
        lines = text.splitlines()
        assert len(lines) > 1
        assert all(len(line) < 80 for line in lines)
        # Lines break only between tokens.
        assert " ".join(lines).split() == movetext_tokens(moves) + ["*"]

    def test_narrow_width(self) -> None:
        text = format_movetext(_moves("e4", "e5", "Nf3", "Nc6"), width=10)
        assert text.splitlines() == ["1. e4 e5", "2. Nf3", "Nc6 *"]

    def test_result_alone_wraps(self) -> None:
        moves = _moves("e4", "e5")
        assert format_movetext(moves, PgnResult.UNKNOWN, width=10).splitlines() == [
            "1. e4 e5",
            "*",
        ]
        assert format_movetext(moves, PgnResult.UNKNOWN, width=11) == "1. e4 e5 *"
        assert format_movetext(moves, PgnResult.DRAW, width=16).splitlines() == [
            "1. e4 e5",
            "1/2-1/2",
        ]

    def test_format_game(self) -> None:
        record = GameRecord(
            event="Casual",
            site="Home",
            date=PgnDate(2024, 1, 2),
            round=PgnRound((1,)),
            white="Ann",
            black="Bob",
            result=PgnResult.DRAW,
            moves=_moves("d4", "d5"),
        )
        assert format_game(record) == (
            '[Event "Casual"]\n'
            '[Site "Home"]\n'
            '[Date "2024.01.02"]\n'
            '[Round "1"]\n'
            '[White "Ann"]\n'
            '[Black "Bob"]\n'
            '[Result "1/2-1/2"]\n'
            "\n"
            "1. d4 d5 1/2-1/2\n"
        )


class TestImport:
    def test_round_trip(self) -> None:
        record = GameRecord(
            event="Club",
            site="Online",
            date=PgnDate(2023, 11, 5),
            round=PgnRound((2, 1)),
            white="Ann",
            black="Bob",
            result=PgnResult.WHITE_WINS,
            moves=_moves(*_SCHOLAR),
        )
        parsed = parse_pgn_game(format_game(record))
        assert parsed.event == "Club"
        assert parsed.site == "Online"
        assert parsed.date == PgnDate(2023, 11, 5)
        assert parsed.round == PgnRound((2, 1))
        assert parsed.white == "Ann"
        assert parsed.black == "Bob"
        assert parsed.result == PgnResult.WHITE_WINS
        assert parsed.moves.moves() == record.moves.moves()

    def test_movetext_only(self) -> None:
        record = parse_pgn_game("1. e4 e5 2. Nf3 *\n")
        assert [str(m) for m in record.moves.moves()] == ["e4", "e5", "Nf3"]
        assert record.date == PgnDate()
        assert record.result == PgnResult.UNKNOWN

    def test_movetext_result_overrides_header(self) -> None:
        record = parse_pgn_game('[Result "*"]\n\n1. e4 e5 0-1\n')
        assert record.result == PgnResult.BLACK_WINS

    def test_black_continuation_numbers(self) -> None:
        record = parse_pgn_game("1. e4 1... e5 2.Nf3\n")
        assert [str(m) for m in record.moves.moves()] == ["e4", "e5", "Nf3"]

    def test_escaped_tag_value(self) -> None:
        record = parse_pgn_game('[Event "The \\"Open\\""]\n\n*\n')
        assert record.event == 'The "Open"'

    def test_unknown_tags_ignored(self) -> None:
        record = parse_pgn_game('[ECO "C20"]\n[White "Ann"]\n\n1. e4 *\n')
        assert record.white == "Ann"

    def test_escape_lines_skipped(self) -> None:
        record = parse_pgn_game("% generated\n1. d4 *\n")
        assert record.moves.ply_count == 1

    @pytest.mark.parametrize(
        "movetext",
        ["1. e4 {best by test} e5 *", "1. e4 (1. d4) e5 *", "1. e4 $1 e5 *", "1. e4; hi"],
    )
    def test_unsupported_movetext(self, movetext: str) -> None:
        with pytest.raises(PgnError, match="Unsupported"):
            parse_pgn_game(movetext)

    def test_moves_after_result(self) -> None:
        with pytest.raises(PgnError, match="after result"):
            parse_pgn_game("1. e4 1-0 e5")

    def test_second_game_rejected(self) -> None:
        text = '[Event "A"]\n\n1. e4 *\n\n[Event "B"]\n\n1. d4 *\n'
        with pytest.raises(PgnError, match="single PGN game"):
            parse_pgn_game(text)

    def test_malformed_header(self) -> None:
        with pytest.raises(PgnError, match="header"):
            parse_pgn_game("[Event Club]\n\n*\n")

    def test_bad_tag_value(self) -> None:
        with pytest.raises(PgnTagError):
            parse_pgn_game('[Date "yesterday"]\n\n*\n')

    def test_bad_move(self) -> None:
        with pytest.raises(MoveError):
            parse_pgn_game("1. e4 Bk4 *")
