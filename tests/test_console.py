"""Tests for the console REPL."""

import io

from gameplanner import console
from gameplanner.engine.loader import Catalog


def _reader(lines: list[str]):
    remaining = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_console_session(chess: Catalog):
    out = io.StringIO()
    planner = console.run_console(
        chess, read_line=_reader(["add e4", "add e5", "move 2 1", "quit"]), out=out
    )
    assert [s.item.id for s in planner.order.steps] == ["e5", "e4"]
    text = out.getvalue()
    assert "[Pawn Opening]" in text
    assert "Final build order: Chess build" in text
    assert "1. e5" in text


def test_console_stops_at_eof(chess: Catalog):
    out = io.StringIO()
    planner = console.run_console(chess, read_line=_reader(["add e4"]), out=out)
    assert len(planner.order) == 1


def test_main_rejects_unknown_game(monkeypatch, capsys):
    monkeypatch.setattr(console, "configure_logging", lambda **kwargs: None)
    assert console.main(["checkers"]) == 2
    assert "Unknown game 'checkers'" in capsys.readouterr().err
