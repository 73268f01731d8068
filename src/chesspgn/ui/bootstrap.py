"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_FIGURINE_FONTS = (
    "DejaVu Sans",
    "Noto Sans Symbols 2",
    "Segoe UI Symbol",
    "Apple Symbols",
)


def _check_figurine_fonts() -> None:
    """Warn when no installed font is known to carry the chess glyphs."""
    from PyQt6.QtGui import QFontDatabase

    families = set(QFontDatabase.families())
    if not any(name in families for name in _FIGURINE_FONTS):
        _LOGGER.warning(
            "No figurine font found (tried %s); pieces may not render",
            ", ".join(_FIGURINE_FONTS),
        )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chesspgn.ui.styles.theme import APP_STYLE

    app.setApplicationName("chesspgn")
    app.setStyle("Fusion")
    _check_figurine_fonts()
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chesspgn.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()

    return app.exec()
