"""Tests for Move, MoveBuilder and MoveError."""

from dataclasses import replace

import pytest

from chesspgn.core.enums import CastleSide, File, PieceType, Rank
from chesspgn.core.move import Move, MoveBuilder, MoveError, MoveErrorKind
from chesspgn.core.notation.san import format_move, parse_move
from chesspgn.core.types import Coordinate

D5 = Coordinate(File.D, Rank.R5)


class TestMoveBuilderValidation:
    def test_check_and_checkmate_is_impossible(self) -> None:
        builder = MoveBuilder(destination=D5, is_check=True, is_checkmate=True)
        with pytest.raises(MoveError) as exc_info:
            builder.build()
        assert exc_info.value.kind == MoveErrorKind.IMPOSSIBLE_MOVE

    def test_castle_with_capture_is_impossible(self) -> None:
        builder = MoveBuilder(castle=CastleSide.KINGSIDE, is_capture=True)
        with pytest.raises(MoveError) as exc_info:
            builder.build()
        assert exc_info.value.kind == MoveErrorKind.IMPOSSIBLE_MOVE

    def test_castle_with_promotion_is_impossible(self) -> None:
        builder = MoveBuilder(castle=CastleSide.QUEENSIDE, promotion=PieceType.QUEEN)
        with pytest.raises(MoveError) as exc_info:
            builder.build()
        assert exc_info.value.kind == MoveErrorKind.IMPOSSIBLE_MOVE

    @pytest.mark.parametrize(
        "extra",
        [
            {"destination": Coordinate(File.G, Rank.R1)},
            {"origin": Coordinate(File.E, Rank.R1)},
            {"piece": PieceType.QUEEN},
        ],
    )
    def test_castle_with_squares_or_other_piece_is_impossible(
        self, extra: dict[str, object]
    ) -> None:
        builder = MoveBuilder(castle=CastleSide.KINGSIDE, **extra)
        with pytest.raises(MoveError) as exc_info:
            builder.build()
        assert exc_info.value.kind == MoveErrorKind.IMPOSSIBLE_MOVE

    def test_castle_with_explicit_king_and_empty_origin(self) -> None:
        move = MoveBuilder(
            castle=CastleSide.QUEENSIDE, piece=PieceType.KING, origin=Coordinate()
        ).build()
        assert move == parse_move(format_move(move))

    def test_impossible_checked_before_destination(self) -> None:
        builder = MoveBuilder(is_check=True, is_checkmate=True)
        with pytest.raises(MoveError) as exc_info:
            builder.build()
        assert exc_info.value.kind == MoveErrorKind.IMPOSSIBLE_MOVE

    def test_partial_destination(self) -> None:
        builder = MoveBuilder(destination=Coordinate(file=File.E))
        with pytest.raises(MoveError) as exc_info:
            builder.build()
        assert exc_info.value.kind == MoveErrorKind.MISSING_DESTINATION

    def test_nothing_to_build(self) -> None:
        with pytest.raises(MoveError) as exc_info:
            MoveBuilder().build()
        assert exc_info.value.kind == MoveErrorKind.MISSING_MOVE_DATA

    def test_pawn_capture_needs_origin_file(self) -> None:
        builder = MoveBuilder(destination=D5, is_capture=True)
        with pytest.raises(MoveError) as exc_info:
            builder.build()
        assert exc_info.value.kind == MoveErrorKind.MISSING_MOVE_DATA

    def test_pawn_capture_with_origin_rank_only(self) -> None:
        builder = MoveBuilder(
            destination=D5, origin=Coordinate(rank=Rank.R4), is_capture=True
        )
        with pytest.raises(MoveError) as exc_info:
            builder.build()
        assert exc_info.value.kind == MoveErrorKind.MISSING_MOVE_DATA

    def test_piece_capture_without_origin_is_fine(self) -> None:
        move = MoveBuilder(
            destination=D5, piece=PieceType.KNIGHT, is_capture=True
        ).build()
        assert move.piece == PieceType.KNIGHT
        assert move.origin is None


class TestMoveBuilderDefaults:
    def test_piece_defaults_to_pawn(self) -> None:
        assert MoveBuilder(destination=D5).build().piece == PieceType.PAWN

    def test_castle_piece_defaults_to_king(self) -> None:
        move = MoveBuilder(castle=CastleSide.KINGSIDE).build()
        assert move.piece == PieceType.KING
        assert move.destination is None

    def test_castle_with_check_allowed(self) -> None:
        move = MoveBuilder(castle=CastleSide.QUEENSIDE, is_checkmate=True).build()
        assert move.is_checkmate

    def test_empty_origin_dropped(self) -> None:
        move = MoveBuilder(destination=D5, origin=Coordinate()).build()
        assert move.origin is None

    def test_builder_factory(self) -> None:
        builder = Move.builder()
        assert isinstance(builder, MoveBuilder)
        builder.destination = D5
        assert builder.build() == Move(destination=D5)


class TestMoveValue:
    def test_frozen(self) -> None:
        move = Move(destination=D5)
        with pytest.raises(AttributeError):
            move.is_check = True  # type: ignore[misc]

    def test_replace_gives_new_value(self) -> None:
        move = Move(destination=D5)
        checked = replace(move, is_check=True)
        assert not move.is_check
        assert checked.is_check
        assert move != checked

    def test_str_is_san(self) -> None:
        move = Move(destination=D5, piece=PieceType.QUEEN, is_check=True)
        assert str(move) == "Qd5+"


class TestMoveError:
    def test_message_with_text(self) -> None:
        err = MoveError(MoveErrorKind.INVALID_MOVE, "Bk4")
        assert str(err) == "Invalid move: 'Bk4'"
        assert err.text == "Bk4"

    def test_message_without_text(self) -> None:
        err = MoveError(MoveErrorKind.MISSING_DESTINATION)
        assert str(err) == "Missing destination"
        assert err.text is None

    def test_is_value_error(self) -> None:
        assert isinstance(MoveError(MoveErrorKind.IMPOSSIBLE_MOVE), ValueError)
