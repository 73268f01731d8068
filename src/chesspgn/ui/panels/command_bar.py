"""CommandBar — move / command entry with Up/Down history."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPushButton, QWidget

from chesspgn.ui.i18n import t


class _HistoryLineEdit(QLineEdit):
    """Line edit that walks previously submitted lines with Up/Down."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.history: list[str] = []
        self._cursor = 0

    def remember(self, line: str) -> None:
        if not self.history or self.history[-1] != line:
            self.history.append(line)
        self._cursor = len(self.history)

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is not None and event.key() == Qt.Key.Key_Up:
            if self._cursor > 0:
                self._cursor -= 1
                self.setText(self.history[self._cursor])
            return
        if event is not None and event.key() == Qt.Key.Key_Down:
            if self._cursor < len(self.history) - 1:
                self._cursor += 1
                self.setText(self.history[self._cursor])
            else:
                self._cursor = len(self.history)
                self.clear()
            return
        super().keyPressEvent(event)


class CommandBar(QWidget):
    """Single-line input shared by moves and commands.

    Signals:
        submitted(str): Emitted with the stripped line on Return / Play.
    """

    submitted = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._edit = _HistoryLineEdit()
        self._edit.returnPressed.connect(self._on_submit)
        layout.addWidget(self._edit, 1)

        self._btn = QPushButton()
        self._btn.clicked.connect(self._on_submit)
        layout.addWidget(self._btn)

        self._feedback = QLabel()
        self._feedback.setMinimumWidth(160)
        layout.addWidget(self._feedback)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._edit.setPlaceholderText(s.command_placeholder)
        self._btn.setText(s.command_submit)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def history(self) -> list[str]:
        return list(self._edit.history)

    def text(self) -> str:
        return self._edit.text()

    def set_text(self, text: str) -> None:
        self._edit.setText(text)

    def append_text(self, text: str) -> None:
        """Append *text* at the end of the current input and focus it."""
        self._edit.setText(self._edit.text() + text)
        self._edit.setFocus()

    def show_feedback(self, message: str, ok: bool) -> None:
        color = "#9bc700" if ok else "#e06c75"
        self._feedback.setStyleSheet(f"color: {color};")
        self._feedback.setText(message)

    def feedback(self) -> str:
        return self._feedback.text()

    def _on_submit(self) -> None:
        line = self._edit.text().strip()
        if not line:
            return
        self._edit.remember(line)
        self._edit.clear()
        self.submitted.emit(line)
