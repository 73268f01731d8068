"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from chesspgn.core.enums import Turn
from chesspgn.core.move import Move
from chesspgn.core.notation.pgn import PgnResult
from chesspgn.game.commands import run_line
from chesspgn.game.session import GameSession
from chesspgn.ui.board.board_view import BoardView
from chesspgn.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from chesspgn.ui.i18n import set_language, t
from chesspgn.ui.panels.command_bar import CommandBar
from chesspgn.ui.panels.control_panel import ControlPanel
from chesspgn.ui.panels.move_panel import MovePanel
from chesspgn.ui.styles.theme import theme_by_name

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])

_RESULT_LABELS: dict[PgnResult, str] = {
    PgnResult.WHITE_WINS: "result_white_wins",
    PgnResult.BLACK_WINS: "result_black_wins",
    PgnResult.DRAW: "result_draw",
    PgnResult.UNKNOWN: "result_unknown",
}


class MainWindow(QMainWindow):
    """Main application window: board, move list, command entry."""

    def __init__(
        self,
        session: GameSession | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("chesspgn")
        self.setMinimumSize(900, 640)
        self.resize(1100, 750)

        self._session = session if session is not None else GameSession()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        self.apply_settings()
        self._sync_from_session()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board and command entry (left)
        left = QVBoxLayout()
        left.setSpacing(6)
        self._board_view = BoardView()
        left.addWidget(self._board_view, stretch=1)
        self._command_bar = CommandBar()
        left.addWidget(self._command_bar)
        root.addLayout(left, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(280)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        # Game menu
        self._menu_game = menu_bar.addMenu(s.menu_game)
        assert self._menu_game is not None

        self._act_new_game = QAction(s.menu_new_game, self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_open_pgn = QAction(s.menu_open_pgn, self)
        self._act_open_pgn.setShortcut("Ctrl+O")
        self._act_open_pgn.triggered.connect(self._on_open_pgn)
        self._menu_game.addAction(self._act_open_pgn)

        self._act_save_pgn = QAction(s.menu_save_pgn, self)
        self._act_save_pgn.setShortcut("Ctrl+S")
        self._act_save_pgn.triggered.connect(self._on_save_pgn)
        self._menu_game.addAction(self._act_save_pgn)

        self._menu_result = self._menu_game.addMenu(s.menu_result)
        assert self._menu_result is not None
        self._result_actions: dict[PgnResult, QAction] = {}
        for result, attr in _RESULT_LABELS.items():
            action = QAction(getattr(s, attr), self)
            action.setCheckable(True)
            action.triggered.connect(
                lambda _checked=False, value=result: self._on_set_result(value)
            )
            self._menu_result.addAction(action)
            self._result_actions[result] = action

        self._menu_game.addSeparator()

        self._act_flip = QAction(s.menu_flip_board, self)
        self._act_flip.setShortcut("Ctrl+F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.setMenuRole(QAction.MenuRole.QuitRole)
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # Settings menu
        self._menu_settings = menu_bar.addMenu(s.menu_settings)
        assert self._menu_settings is not None

        self._act_settings = QAction(s.menu_settings_action, self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.setMenuRole(QAction.MenuRole.NoRole)
        self._act_settings.triggered.connect(self._on_settings)
        self._menu_settings.addAction(self._act_settings)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.square_clicked.connect(self._command_bar.append_text)
        self._command_bar.submitted.connect(self._on_command)
        self._control_panel.new_game_clicked.connect(self._on_new_game)
        self._control_panel.undo_clicked.connect(self._on_undo)
        self._control_panel.redo_clicked.connect(self._on_redo)
        self._control_panel.flip_clicked.connect(self._on_flip)

    def _connect_game_events(self) -> None:
        """Subscribe to GameSession callbacks (idempotent)."""
        events = self._session.events
        self._replace_callback(events.on_move, self._on_game_move)
        self._replace_callback(events.on_undo, self._on_game_undo)
        self._replace_callback(events.on_reset, self._sync_from_session)
        self._replace_callback(events.on_loaded, self._on_game_loaded)

    def _disconnect_game_events(self) -> None:
        """Detach this window from GameSession callbacks."""
        events = self._session.events
        self._remove_callback(events.on_move, self._on_game_move)
        self._remove_callback(events.on_undo, self._on_game_undo)
        self._remove_callback(events.on_reset, self._sync_from_session)
        self._remove_callback(events.on_loaded, self._on_game_loaded)

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def apply_settings(self) -> None:
        """Push :attr:`settings` into the locale, widgets and game tags."""
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()

        scene = self._board_view.board_scene
        scene.set_theme(theme_by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        self._move_panel.set_use_figurine_notation(s.use_figurine_notation)

        record = self._session.record
        record.event = s.event
        record.site = s.site
        self._session.set_players(s.white_name, s.black_name)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        # Menu bar
        self._menu_game.setTitle(s.menu_game)
        self._act_new_game.setText(s.menu_new_game)
        self._act_open_pgn.setText(s.menu_open_pgn)
        self._act_save_pgn.setText(s.menu_save_pgn)
        self._menu_result.setTitle(s.menu_result)
        for result, action in self._result_actions.items():
            action.setText(getattr(s, _RESULT_LABELS[result]))
        self._act_flip.setText(s.menu_flip_board)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._act_settings.setText(s.menu_settings_action)
        # Child widgets
        self._move_panel.retranslate_ui()
        self._control_panel.retranslate_ui()
        self._command_bar.retranslate_ui()
        self._update_status()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._disconnect_game_events()
        super().closeEvent(event)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_command(self, line: str) -> None:
        outcome = run_line(self._session, line)
        self._command_bar.show_feedback(outcome.message, outcome.ok)
        if outcome.quit:
            self.close()
            return
        self._update_status()

    def _on_new_game(self) -> None:
        self._session.reset()

    def _on_undo(self) -> None:
        self._session.undo()

    def _on_redo(self) -> None:
        self._session.redo()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _on_set_result(self, result: PgnResult) -> None:
        self._session.set_result(result)
        self._update_status()

    def _on_settings(self) -> None:
        dlg = SettingsDialog(self._settings, self)
        if dlg.exec():
            self.apply_settings()

    def _on_open_pgn(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            t().open_pgn_title,
            "",
            f"{t().pgn_filter};;{t().pgn_all_files}",
        )
        if not file_path:
            return

        try:
            self._session.load(file_path)
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Failed to load PGN %s: %s", file_path, exc)
            QMessageBox.warning(
                self, t().open_pgn_title, t().open_pgn_failed.format(exc=exc)
            )
            return
        self._status_label.setText(
            t().status_loaded_pgn.format(name=Path(file_path).name)
        )

    def _on_save_pgn(self) -> None:
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            t().save_pgn_title,
            "game.pgn",
            f"{t().pgn_filter};;{t().pgn_all_files}",
        )
        if not file_path:
            return

        try:
            save_path = self._session.save(file_path)
        except OSError as exc:
            _LOGGER.warning("Failed to save PGN %s: %s", file_path, exc)
            QMessageBox.warning(
                self, t().save_pgn_title, t().save_pgn_failed.format(exc=exc)
            )
            return
        self._status_label.setText(t().status_saved_pgn.format(name=save_path.name))

    # ── Game event callbacks ─────────────────────────────────────────────

    def _on_game_move(self, move: Move, _san: str) -> None:
        self._move_panel.add_move(move)
        self._board_view.board_scene.highlight_last_move(move)
        self._update_status()

    def _on_game_undo(self, moves: list[Move]) -> None:
        self._move_panel.remove_last(len(moves))
        self._board_view.board_scene.highlight_last_move(
            self._session.record.moves.last()
        )
        self._update_status()

    def _on_game_loaded(self, _path: Path) -> None:
        self._sync_from_session()

    def _sync_from_session(self) -> None:
        """Redraw everything from the session after reset or load."""
        scene = self._board_view.board_scene
        scene.set_board(self._session.board)
        moves = self._session.record.moves
        self._move_panel.set_moves(moves)
        scene.highlight_last_move(moves.last())
        self._update_status()

    def _update_status(self) -> None:
        s = t()
        record = self._session.record
        turn = self._session.current_turn
        side = s.color_white if turn == Turn.WHITE_TO_MOVE else s.color_black
        text = s.status_to_move.format(color=side)
        if record.result != PgnResult.UNKNOWN:
            text = f"{text} | {record.result}"
        self._status_label.setText(text)

        for result, action in self._result_actions.items():
            action.setChecked(result == record.result)
        self._control_panel.set_history_state(
            self._session.can_undo, self._session.can_redo
        )
