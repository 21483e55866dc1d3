# tests/test_console_connector.py

from __future__ import annotations

import builtins

import pytest

from dude.connectors.console_connector import frame, handle_line, run_console_loop
from dude.core import messages


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_loop_runs_until_bye(state, monkeypatch, capsys, data_lines) -> None:
    _feed(monkeypatch, ["todo read book", "", "list", "bye", "todo never"])

    run_console_loop(state, ["loaded"])

    out = capsys.readouterr().out
    assert "Hello! I'm Dude" in out
    assert "loaded" in out
    assert "1. [T][ ] read book" in out
    assert messages.MESSAGE_BYE in out
    assert data_lines() == ["T | 0 | read book"]


def test_loop_stops_on_eof(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["blah"])

    run_console_loop(state)

    assert "Command does not exist" in capsys.readouterr().out


def test_handle_line_reports_crash(state, monkeypatch) -> None:
    def boom(_line):
        raise RuntimeError("boom")

    monkeypatch.setattr("dude.connectors.console_connector.parse_command", boom)

    result = handle_line(state, "list")

    assert result.message == messages.MESSAGE_INTERNAL_ERROR


def test_frame() -> None:
    assert frame("a", "b") == f"{messages.DIVIDER}\na\nb\n{messages.DIVIDER}"


@pytest.mark.parametrize(
    "bad",
    [
        UnicodeDecodeError("utf-8", b"\xe9", 0, 1, "invalid continuation byte"),
        "todo caf\udce9",  # what a surrogateescape stdin hands over
    ],
)
def test_unreadable_input_line_is_skipped(state, monkeypatch, capsys, data_lines, bad) -> None:
    lines = iter([bad, "list", "bye"])

    def fake_input(prompt: str = "") -> str:
        item = next(lines)
        if isinstance(item, BaseException):
            raise item
        return item

    monkeypatch.setattr(builtins, "input", fake_input)

    run_console_loop(state)

    out = capsys.readouterr().out
    assert messages.MESSAGE_ERROR_UNREADABLE_INPUT in out
    assert messages.MESSAGE_BYE in out
    assert state.tasks.count() == 0
    assert data_lines() == []
