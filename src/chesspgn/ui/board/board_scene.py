"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesspgn.core.board import Board
from chesspgn.core.enums import Color
from chesspgn.core.move import Move
from chesspgn.core.types import Square, file_of, make_square, rank_of, square_name, square_of
from chesspgn.ui.styles.theme import BoardTheme

# Filled glyphs for both sides; colour comes from the theme brush.
_GLYPHS = "♟♞♝♜♛♚"


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, pieces and the last-move marker.

    The board is display only. Clicking a square reports its name so the
    window can offer it as move text.

    Signals:
        square_clicked(str): Name of the clicked square, e.g. ``"e4"``.
    """

    square_clicked = pyqtSignal(str)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._flipped = False
        self._show_coordinates = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._last_move_items: list[QGraphicsRectItem] = []
        self._last_move: Move | None = None

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Show *board* (full redraw of pieces)."""
        self._board = board
        self._sync_pieces()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self._sync_pieces()
        self.highlight_last_move(self._last_move)

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()
        self.highlight_last_move(self._last_move)

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def highlight_last_move(self, move: Move | None) -> None:
        """Mark the destination square of *move*, if it names one."""
        self._clear_items(self._last_move_items)
        self._last_move = move
        if move is None or move.destination is None:
            return
        sq = square_of(move.destination)
        rect = self._make_highlight(sq, self._theme.last_move_to)
        rect.setZValue(0.5)
        self._last_move_items.append(rect)

    def piece_text(self, sq: Square) -> str | None:
        """Glyph drawn on *sq*, or ``None`` when the square is empty."""
        item = self._piece_items.get(sq)
        return item.text() if item is not None else None

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for sq in range(64):
            f, r = file_of(sq), rank_of(sq)
            vf, vr = self._visual_coords(f, r)
            is_dark = (f + r) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            coord_color = self._theme.coord_dark if is_dark else self._theme.coord_light
            # Rank numbers (left edge)
            if vf == 0:
                self._add_coord_label(r.char, coord_color, font, vf * t + 2, vr * t + 1)
            # File letters (bottom edge)
            if vr == 7:
                self._add_coord_label(
                    f.char, coord_color, font, vf * t + t - 12, vr * t + t - 16
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord_label(
        self, label: str, color: QColor, font: QFont, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for sq in range(64):
            piece = self._board[sq]
            if piece is None:
                continue
            item = QGraphicsSimpleTextItem(_GLYPHS[piece.piece_type - 1])
            item.setFont(font)
            if piece.color == Color.WHITE:
                item.setBrush(QBrush(self._theme.piece_white))
                item.setPen(QPen(self._theme.piece_black, 1.2))
            else:
                item.setBrush(QBrush(self._theme.piece_black))
                item.setPen(QPen(self._theme.piece_white, 0.6))
            vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
            bounds = item.boundingRect()
            item.setPos(
                vf * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            sq = self._pos_to_square(event.scenePos())
            if sq is not None:
                self.square_clicked.emit(square_name(sq))
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            f, r = 7 - col, row
        else:
            f, r = col, 7 - row
        return make_square(f, r)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
