"""ControlPanel — game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtBoundSignal, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from chesspgn.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for game actions: new game, flip, undo, redo."""

    new_game_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()
    redo_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Helvetica Neue", 10)

        row1 = QHBoxLayout()
        self._btn_new = self._make_button(btn_font, self.new_game_clicked)
        row1.addWidget(self._btn_new)
        self._btn_flip = self._make_button(btn_font, self.flip_clicked)
        row1.addWidget(self._btn_flip)
        layout.addLayout(row1)

        row2 = QHBoxLayout()
        self._btn_undo = self._make_button(btn_font, self.undo_clicked)
        row2.addWidget(self._btn_undo)
        self._btn_redo = self._make_button(btn_font, self.redo_clicked)
        row2.addWidget(self._btn_redo)
        layout.addLayout(row2)

    @staticmethod
    def _make_button(font: QFont, signal: pyqtBoundSignal) -> QPushButton:
        btn = QPushButton()
        btn.setFont(font)
        btn.setMinimumHeight(36)
        btn.clicked.connect(signal)
        return btn

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_new.setText(s.btn_new_game)
        self._btn_flip.setText(s.btn_flip)
        self._btn_undo.setText(s.btn_undo)
        self._btn_redo.setText(s.btn_redo)

    def set_history_state(self, can_undo: bool, can_redo: bool) -> None:
        """Enable undo/redo only when there is something to take back or replay."""
        self._btn_undo.setEnabled(can_undo)
        self._btn_redo.setEnabled(can_redo)
