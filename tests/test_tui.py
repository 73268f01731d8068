"""Tests for the terminal front end and logging setup."""

import io
import logging

import pytest

from chesspgn.app import LOG_LEVEL_ENV, configure_logging
from chesspgn.core.board import Board
from chesspgn.game.session import GameSession
from chesspgn.tui import PROMPT, RESET, render_board, render_screen, run_tui


def _scripted(lines: list[str]):
    prompts: list[str] = []
    pending = list(lines)

    def _input(prompt: str) -> str:
        prompts.append(prompt)
        if not pending:
            raise EOFError
        return pending.pop(0)

    return _input, prompts


class TestRenderBoard:
    def test_plain_layout(self) -> None:
        lines = render_board(Board.initial(), color=False).splitlines()
        assert len(lines) == 9
        assert lines[0] == "8  ♜  ♞  ♝  ♛  ♚  ♝  ♞  ♜ "
        assert lines[1] == "7 " + " ♟ " * 8
        assert lines[4] == "4 " + "   " * 8
        assert lines[7] == "1  ♖  ♘  ♗  ♕  ♔  ♗  ♘  ♖ "
        assert lines[8] == "   A  B  C  D  E  F  G  H"

    def test_plain_has_no_escapes(self) -> None:
        assert "\x1b" not in render_board(Board.initial(), color=False)

    def test_colored_squares(self) -> None:
        lines = render_board(Board(), color=True).splitlines()
        # a8 is light, a1 is dark
        assert lines[0].startswith("8 \x1b[48;5;180m")
        assert lines[7].startswith("1 \x1b[48;5;64m")
        assert all(line.endswith(RESET) for line in lines[:8])

    def test_colored_pieces(self) -> None:
        text = render_board(Board.initial(), color=True)
        assert "\x1b[38;5;255m ♔ " in text
        assert "\x1b[38;5;240m ♚ " in text


class TestRunTui:
    def test_screen_shows_movetext(self) -> None:
        session = GameSession()
        session.submit("e4")
        assert render_screen(session, color=False).endswith("1. e4 *")

    def test_plays_until_quit(self) -> None:
        session = GameSession()
        input_fn, prompts = _scripted(["e4", "", "move Bk4", "quit", "e5"])
        out = io.StringIO()

        assert run_tui(session, input_fn=input_fn, output=out, color=False) == 0

        text = out.getvalue()
        assert "Played e4" in text
        assert "Invalid move" in text
        assert "Bye" in text
        assert prompts == [PROMPT] * 4
        assert session.record.moves.ply_count == 1

    def test_end_of_input_exits_cleanly(self) -> None:
        input_fn, _ = _scripted([])
        out = io.StringIO()
        assert run_tui(input_fn=input_fn, output=out, color=False) == 0
        assert out.getvalue().endswith("\n\n")


class TestConfigureLogging:
    def test_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict] = []
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        configure_logging()
        assert calls[0]["level"] == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict] = []
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        configure_logging()
        assert calls[0]["level"] == logging.WARNING
