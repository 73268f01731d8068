"""SettingsDialog — application-wide settings with a category sidebar."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from chesspgn.ui.i18n import LANGUAGES, t
from chesspgn.ui.styles.theme import THEMES

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    use_figurine_notation: bool = True

    # Game tags
    event: str = "Casual Game"
    site: str = "chesspgn"
    white_name: str = "White"
    black_name: str = "Black"


# ── Individual settings pages ────────────────────────────────────────────────


class _Page(QWidget):
    """Form page with a bold title row."""

    def __init__(self) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)

        self._title = QLabel()
        self._title.setStyleSheet("font-size: 16px; font-weight: bold; color: #e0e0e0;")
        self._form.addRow(self._title)


class _GeneralPage(_Page):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._lang_label = QLabel()
        self._lang_combo = QComboBox()
        self._lang_combo.addItems(LANGUAGES)
        idx = self._lang_combo.findText(settings.language)
        self._lang_combo.setCurrentIndex(max(0, idx))
        self._form.addRow(self._lang_label, self._lang_combo)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.settings_language)
        self._lang_label.setText(s.settings_language)

    def apply(self, settings: AppSettings) -> None:
        settings.language = self._lang_combo.currentText()


class _BoardPage(_Page):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._theme_label = QLabel()
        self._theme_combo = QComboBox()
        self._theme_combo.addItems(list(THEMES))
        self._theme_combo.setCurrentText(settings.board_theme)
        self._theme_combo.setMinimumWidth(220)
        self._form.addRow(self._theme_label, self._theme_combo)

        self._coords_label = QLabel()
        self._coords_check = QCheckBox()
        self._coords_check.setChecked(settings.show_coordinates)
        self._form.addRow(self._coords_label, self._coords_check)

        self._notation_label = QLabel()
        self._notation_combo = QComboBox()
        self._notation_combo.addItem("", True)
        self._notation_combo.addItem("", False)
        self._notation_combo.setCurrentIndex(0 if settings.use_figurine_notation else 1)
        self._notation_combo.setMinimumWidth(220)
        self._form.addRow(self._notation_label, self._notation_combo)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.settings_board)
        self._theme_label.setText(s.settings_board_theme)
        self._coords_label.setText(s.settings_show_coords)
        self._notation_label.setText(s.settings_move_notation)
        self._notation_combo.setItemText(0, s.settings_move_notation_icons)
        self._notation_combo.setItemText(1, s.settings_move_notation_letters)

    def apply(self, settings: AppSettings) -> None:
        settings.board_theme = self._theme_combo.currentText()
        settings.show_coordinates = self._coords_check.isChecked()
        settings.use_figurine_notation = bool(self._notation_combo.currentData())


class _GamePage(_Page):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._fields: dict[str, tuple[QLabel, QLineEdit]] = {}
        for attr in ("event", "site", "white_name", "black_name"):
            label = QLabel()
            edit = QLineEdit(getattr(settings, attr))
            self._form.addRow(label, edit)
            self._fields[attr] = (label, edit)

        self._note = QLabel()
        self._note.setWordWrap(True)
        self._note.setStyleSheet("color: #888; font-size: 11px;")
        self._form.addRow(self._note)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.settings_game)
        self._fields["event"][0].setText(s.settings_event)
        self._fields["site"][0].setText(s.settings_site)
        self._fields["white_name"][0].setText(s.settings_white_name)
        self._fields["black_name"][0].setText(s.settings_black_name)
        self._note.setText(s.settings_game_note)

    def apply(self, settings: AppSettings) -> None:
        for attr, (_label, edit) in self._fields.items():
            setattr(settings, attr, edit.text().strip())


# ── Main dialog ──────────────────────────────────────────────────────────────

_SettingsPage = _GeneralPage | _BoardPage | _GamePage

_PAGE_FACTORIES: list[tuple[str, type[_SettingsPage]]] = [
    ("settings_language", _GeneralPage),
    ("settings_board", _BoardPage),
    ("settings_game", _GamePage),
]


class SettingsDialog(QDialog):
    """Modal settings dialog with a left category list and stacked pages."""

    def __init__(
        self,
        settings: AppSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumSize(620, 380)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._settings = settings
        self._pages: list[_SettingsPage] = []
        self._page_attr_names: list[str] = []

        self._build_ui()
        self.retranslate_ui()

    def _build_ui(self) -> None:
        root = QHBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._sidebar = QListWidget()
        self._sidebar.setFixedWidth(150)
        self._sidebar.setStyleSheet(
            "QListWidget { background: #1e1e1e; border: none;"
            "  border-right: 1px solid #3c3c3c; }"
            "QListWidget::item { padding: 10px 14px; color: #c0c0c0; font-size: 13px; }"
            "QListWidget::item:selected { background: #264f78; color: #ffffff; }"
        )

        self._stack = QStackedWidget()
        self._stack.setStyleSheet("background: #2b2b2b;")

        for attr, page_cls in _PAGE_FACTORIES:
            self._page_attr_names.append(attr)
            item = QListWidgetItem()
            item.setTextAlignment(
                Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter
            )
            self._sidebar.addItem(item)

            page = page_cls(self._settings)
            self._pages.append(page)
            self._stack.addWidget(page)

        self._sidebar.setCurrentRow(0)
        self._sidebar.currentRowChanged.connect(self._stack.setCurrentIndex)

        root.addWidget(self._sidebar)

        right = QVBoxLayout()
        right.setContentsMargins(0, 0, 0, 0)
        right.setSpacing(0)
        right.addWidget(self._stack)

        self._btn_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._btn_box.setContentsMargins(12, 8, 12, 8)
        self._btn_box.accepted.connect(self._on_accept)
        self._btn_box.rejected.connect(self.reject)
        right.addWidget(self._btn_box)

        right_widget = QWidget()
        right_widget.setLayout(right)
        root.addWidget(right_widget)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.settings_title)
        for i, attr in enumerate(self._page_attr_names):
            item = self._sidebar.item(i)
            if item is not None:
                item.setText(getattr(s, attr))
        for page in self._pages:
            page.retranslate_ui()

    def _on_accept(self) -> None:
        for page in self._pages:
            page.apply(self._settings)
        self.accept()
