"""Tests for MainWindow wiring between widgets and the game session."""

from __future__ import annotations

from pathlib import Path

import pytest

from chesspgn.core.notation.pgn import PgnResult
from chesspgn.game.session import GameSession
from chesspgn.ui.dialogs.settings_dialog import AppSettings
from chesspgn.ui.main_window import MainWindow


def _window() -> MainWindow:
    return MainWindow(session=GameSession())


def test_command_line_plays_move() -> None:
    window = _window()
    window._command_bar.submitted.emit("e4")
    assert window.session.record.moves.ply_count == 1
    assert window._move_panel.move_text(0) == "e4"
    assert window._status_label.text() == "Black to move"


def test_bad_command_shows_feedback() -> None:
    window = _window()
    window._on_command("move Bk4")
    assert "Invalid move" in window._command_bar.feedback()
    assert window.session.record.moves.ply_count == 0


def test_undo_redo_buttons_follow_history() -> None:
    window = _window()
    assert not window._control_panel._btn_undo.isEnabled()
    window._on_command("d4")
    assert window._control_panel._btn_undo.isEnabled()

    window._control_panel.undo_clicked.emit()
    assert window._move_panel.row_count() == 0
    assert window._control_panel._btn_redo.isEnabled()

    window._control_panel.redo_clicked.emit()
    assert window._move_panel.row_count() == 1
    assert not window._control_panel._btn_redo.isEnabled()


def test_new_game_clears_moves() -> None:
    window = _window()
    window._on_command("e4")
    window._control_panel.new_game_clicked.emit()
    assert window._move_panel.row_count() == 0
    assert window._status_label.text() == "White to move"


def test_square_click_fills_command_bar() -> None:
    window = _window()
    window._command_bar.set_text("N")
    window._board_view.square_clicked.emit("f3")
    assert window._command_bar.text() == "Nf3"


def test_result_menu_sets_result() -> None:
    window = _window()
    window._result_actions[PgnResult.DRAW].trigger()
    assert window.session.record.result == PgnResult.DRAW
    assert window._result_actions[PgnResult.DRAW].isChecked()
    assert not window._result_actions[PgnResult.UNKNOWN].isChecked()


def test_settings_apply_to_widgets_and_tags() -> None:
    settings = AppSettings(
        language="Russian",
        use_figurine_notation=False,
        event="Club",
        white_name="Ann",
        black_name="Bob",
    )
    window = MainWindow(session=GameSession(), settings=settings)
    window._on_command("Nf3")
    assert window._move_panel.move_text(0) == "Nf3"
    assert window._act_new_game.text() == "&Новая игра"
    record = window.session.record
    assert (record.event, record.white, record.black) == ("Club", "Ann", "Bob")


def test_save_and_open_pgn(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    window = _window()
    for line in ("e4", "e5", "Nf3"):
        window._on_command(line)
    save_path = tmp_path / "saved-game"

    monkeypatch.setattr(
        "chesspgn.ui.main_window.QFileDialog.getSaveFileName",
        lambda *args, **kwargs: (str(save_path), "PGN Files (*.pgn)"),
    )
    window._on_save_pgn()
    saved = tmp_path / "saved-game.pgn"
    assert "1. e4 e5 2. Nf3 *" in saved.read_text(encoding="utf-8")
    assert window._status_label.text() == "Saved PGN: saved-game.pgn"

    other = _window()
    monkeypatch.setattr(
        "chesspgn.ui.main_window.QFileDialog.getOpenFileName",
        lambda *args, **kwargs: (str(saved), "PGN Files (*.pgn)"),
    )
    other._on_open_pgn()
    assert other.session.record.moves.ply_count == 3
    assert other._move_panel.row_count() == 2
    assert other._status_label.text() == "Loaded PGN: saved-game.pgn"


def test_open_bad_pgn_warns(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    bad = tmp_path / "bad.pgn"
    bad.write_text("1. e4 (1. d4) *\n", encoding="utf-8")
    warnings: list[str] = []

    monkeypatch.setattr(
        "chesspgn.ui.main_window.QFileDialog.getOpenFileName",
        lambda *args, **kwargs: (str(bad), "PGN Files (*.pgn)"),
    )
    monkeypatch.setattr(
        "chesspgn.ui.main_window.QMessageBox.warning",
        lambda _parent, _title, text: warnings.append(text),
    )

    window = _window()
    window._on_command("c4")
    window._on_open_pgn()
    assert warnings and warnings[0].startswith("Failed to load PGN")
    assert window.session.record.moves.ply_count == 1


def test_quit_command_closes_window() -> None:
    window = _window()
    window.show()
    window._on_command("quit")
    assert not window.isVisible()
