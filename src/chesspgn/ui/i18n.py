"""Internationalisation strings for the chesspgn UI.

Usage::

    from chesspgn.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_undo)          # "↩ Отменить"
    print(t().status_to_move.format(color=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    menu_game: str
    menu_new_game: str
    menu_open_pgn: str
    menu_save_pgn: str
    menu_flip_board: str
    menu_quit: str
    menu_result: str
    menu_settings: str
    menu_settings_action: str

    status_ready: str
    status_to_move: str  # "{color} to move"
    status_loaded_pgn: str  # "Loaded PGN: {name}"
    status_saved_pgn: str  # "Saved PGN: {name}"
    color_white: str
    color_black: str

    # Result menu entries
    result_white_wins: str
    result_black_wins: str
    result_draw: str
    result_unknown: str

    # PGN dialogs
    pgn_filter: str
    pgn_all_files: str
    open_pgn_title: str
    open_pgn_failed: str  # "Failed to load PGN:\n{exc}"
    save_pgn_title: str
    save_pgn_failed: str  # "Failed to save PGN:\n{exc}"

    # ── MovePanel ────────────────────────────────────────────────────────
    moves_header: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_new_game: str
    btn_flip: str
    btn_undo: str
    btn_redo: str

    # ── CommandBar ───────────────────────────────────────────────────────
    command_placeholder: str
    command_submit: str

    # ── SettingsDialog ───────────────────────────────────────────────────
    settings_title: str
    settings_board: str
    settings_game: str
    settings_language: str

    # Board page
    settings_board_theme: str
    settings_show_coords: str
    settings_move_notation: str
    settings_move_notation_icons: str
    settings_move_notation_letters: str

    # Game page
    settings_event: str
    settings_site: str
    settings_white_name: str
    settings_black_name: str
    settings_game_note: str


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_open_pgn="&Open PGN...",
    menu_save_pgn="&Save PGN...",
    menu_flip_board="&Flip Board",
    menu_quit="&Quit",
    menu_result="Set &Result",
    menu_settings="&Settings",
    menu_settings_action="&Settings...",
    status_ready="Ready",
    status_to_move="{color} to move",
    status_loaded_pgn="Loaded PGN: {name}",
    status_saved_pgn="Saved PGN: {name}",
    color_white="White",
    color_black="Black",
    result_white_wins="1-0 (White wins)",
    result_black_wins="0-1 (Black wins)",
    result_draw="½-½ (Draw)",
    result_unknown="* (Unfinished)",
    pgn_filter="PGN Files (*.pgn)",
    pgn_all_files="All Files (*)",
    open_pgn_title="Open PGN",
    open_pgn_failed="Failed to load PGN:\n{exc}",
    save_pgn_title="Save PGN",
    save_pgn_failed="Failed to save PGN:\n{exc}",
    moves_header="Moves",
    btn_new_game="New Game",
    btn_flip="⟲ Flip",
    btn_undo="↩ Undo",
    btn_redo="↪ Redo",
    command_placeholder="Move or command, e.g. Nf3, undo 2, help",
    command_submit="Play",
    settings_title="Settings",
    settings_board="Board",
    settings_game="Game",
    settings_language="Language",
    settings_board_theme="Board theme:",
    settings_show_coords="Show coordinates:",
    settings_move_notation="Move notation:",
    settings_move_notation_icons="Figurines",
    settings_move_notation_letters="Letters (SAN)",
    settings_event="Event:",
    settings_site="Site:",
    settings_white_name="White player:",
    settings_black_name="Black player:",
    settings_game_note="Names are written to the PGN tags of the current game.",
)

_RU = Strings(
    menu_game="&Игра",
    menu_new_game="&Новая игра",
    menu_open_pgn="&Открыть PGN...",
    menu_save_pgn="&Сохранить PGN...",
    menu_flip_board="&Перевернуть доску",
    menu_quit="&Выход",
    menu_result="&Результат",
    menu_settings="&Настройки",
    menu_settings_action="&Настройки...",
    status_ready="Готово",
    status_to_move="Ход: {color}",
    status_loaded_pgn="Загружен PGN: {name}",
    status_saved_pgn="Сохранён PGN: {name}",
    color_white="Белые",
    color_black="Чёрные",
    result_white_wins="1-0 (Победа белых)",
    result_black_wins="0-1 (Победа чёрных)",
    result_draw="½-½ (Ничья)",
    result_unknown="* (Не завершена)",
    pgn_filter="Файлы PGN (*.pgn)",
    pgn_all_files="Все файлы (*)",
    open_pgn_title="Открыть PGN",
    open_pgn_failed="Не удалось загрузить PGN:\n{exc}",
    save_pgn_title="Сохранить PGN",
    save_pgn_failed="Не удалось сохранить PGN:\n{exc}",
    moves_header="Ходы",
    btn_new_game="Новая игра",
    btn_flip="⟲ Перевернуть",
    btn_undo="↩ Отменить",
    btn_redo="↪ Повторить",
    command_placeholder="Ход или команда, например Nf3, undo 2, help",
    command_submit="Ход",
    settings_title="Настройки",
    settings_board="Доска",
    settings_game="Партия",
    settings_language="Язык",
    settings_board_theme="Тема доски:",
    settings_show_coords="Показывать координаты:",
    settings_move_notation="Нотация ходов:",
    settings_move_notation_icons="Иконки фигур",
    settings_move_notation_letters="Буквы (SAN)",
    settings_event="Турнир:",
    settings_site="Место:",
    settings_white_name="Белыми играет:",
    settings_black_name="Чёрными играет:",
    settings_game_note="Имена записываются в теги PGN текущей партии.",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
