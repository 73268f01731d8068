"""Tests for BoardScene drawing and click reporting."""

from __future__ import annotations

from chesspgn.core.board import Board
from chesspgn.core.notation.san import parse_move
from chesspgn.core.types import parse_square
from chesspgn.ui.board.board_scene import BoardScene
from chesspgn.ui.board.board_view import BoardView
from chesspgn.ui.styles.theme import BoardTheme


def test_pos_to_square_respects_orientation() -> None:
    scene = BoardScene()
    scene.set_flipped(False)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == parse_square("a8")

    scene.set_flipped(True)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == parse_square("h1")


def test_set_board_draws_all_pieces() -> None:
    scene = BoardScene()
    scene.set_board(Board.initial())
    assert len(scene._piece_items) == 32
    assert scene.piece_text(parse_square("e1")) == "♚"
    assert scene.piece_text(parse_square("e4")) is None


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_highlight_last_move_marks_destination_only() -> None:
    scene = BoardScene()
    scene.highlight_last_move(parse_move("Nf3"))
    assert len(scene._last_move_items) == 1

    scene.highlight_last_move(parse_move("O-O"))
    assert scene._last_move_items == []

    scene.highlight_last_move(None)
    assert scene._last_move_items == []


def test_theme_change_keeps_pieces_and_highlight() -> None:
    scene = BoardScene()
    scene.set_board(Board.initial())
    scene.highlight_last_move(parse_move("e4"))
    scene.set_theme(BoardTheme.green())
    assert len(scene._piece_items) == 32
    assert len(scene._last_move_items) == 1


def test_view_bubbles_square_clicks() -> None:
    view = BoardView()
    clicked: list[str] = []
    view.square_clicked.connect(clicked.append)
    view.board_scene.square_clicked.emit("e4")
    assert clicked == ["e4"]
