"""MovePanel — scrollable list of numbered move pairs."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from chesspgn.core.enums import Color, PieceType
from chesspgn.core.move import Move
from chesspgn.core.move_list import MoveList
from chesspgn.core.notation.san import format_move
from chesspgn.core.piece import Piece
from chesspgn.ui.i18n import t


def _figurine_san(move: Move, color: Color) -> str:
    """SAN text with the piece letters drawn as Unicode figurines for *color*."""
    san = format_move(move)
    if move.castle is not None:
        return san

    # Leading piece letter (Nf3, Qxd5, Ke2…)
    if move.piece != PieceType.PAWN:
        san = Piece(color, move.piece).symbol + san[1:]

    # Promotion target (e8=Q → e8=♕)
    if move.promotion is not None:
        prefix, _, rest = san.partition("=")
        san = prefix + "=" + Piece(color, move.promotion).symbol + rest[1:]

    return san


class MovePanel(QWidget):
    """Displays the game's move list, one row per move number."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._moves: list[Move] = []
        self._move_labels: dict[int, QLabel] = {}
        self._use_figurine_notation = True
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("Helvetica Neue", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._list.setFont(QFont("DejaVu Sans Mono", 12))
        layout.addWidget(self._list)

    def retranslate_ui(self) -> None:
        self._header.setText(t().moves_header)

    # ── Public API ───────────────────────────────────────────────────────

    def clear(self) -> None:
        self._moves.clear()
        self._move_labels.clear()
        self._list.clear()

    def add_move(self, move: Move) -> None:
        """Append a half-move to the panel."""
        self._moves.append(move)
        self._rebuild_list()

    def remove_last(self, count: int = 1) -> None:
        """Remove the newest *count* entries (for undo)."""
        for _ in range(min(count, len(self._moves))):
            self._moves.pop()
        self._rebuild_list()

    def set_moves(self, moves: MoveList) -> None:
        """Rebuild the panel from a move list."""
        self._moves = moves.moves()
        self._rebuild_list()

    def set_use_figurine_notation(self, enabled: bool) -> None:
        """Toggle move text style between figurines and standard SAN letters."""
        if self._use_figurine_notation == enabled:
            return
        self._use_figurine_notation = enabled
        self._rebuild_list()

    def move_text(self, ply: int) -> str:
        """Displayed text of half-move *ply* (0-based)."""
        return self._move_labels[ply].text()

    def row_count(self) -> int:
        return self._list.count()

    # ── Rendering ────────────────────────────────────────────────────────

    def _format(self, move: Move, color: Color) -> str:
        if self._use_figurine_notation:
            return _figurine_san(move, color)
        return format_move(move)

    def _create_move_label(self, text: str, active: bool) -> QLabel:
        label = QLabel(text)
        label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        if active:
            label.setStyleSheet(
                "background: #264f78; color: #f0f6ff; border-radius: 4px;"
                " padding: 2px 8px;"
            )
        else:
            label.setStyleSheet("color: #d4d4d4; padding: 2px 8px;")
        return label

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._move_labels.clear()
        last_ply = len(self._moves) - 1
        for move_idx in range(0, len(self._moves), 2):
            move_num = move_idx // 2 + 1

            row_widget = QWidget()
            row_layout = QHBoxLayout(row_widget)
            row_layout.setContentsMargins(6, 2, 6, 2)
            row_layout.setSpacing(8)

            num_label = QLabel(f"{move_num}.")
            num_label.setFixedWidth(28)
            num_label.setAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )
            row_layout.addWidget(num_label)

            for ply, color in ((move_idx, Color.WHITE), (move_idx + 1, Color.BLACK)):
                if ply > last_ply:
                    spacer = QWidget()
                    spacer.setSizePolicy(
                        QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed
                    )
                    row_layout.addWidget(spacer, 1)
                    continue
                label = self._create_move_label(
                    self._format(self._moves[ply], color), ply == last_ply
                )
                row_layout.addWidget(label, 1)
                self._move_labels[ply] = label

            item = QListWidgetItem()
            item.setSizeHint(row_widget.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row_widget)

        self._list.scrollToBottom()
