# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from dude.core.errors import FileUnavailableError
from dude.tasks.task_models import Task
from dude.tasks.task_store import SyncOutcome, TaskStore


def test_load_creates_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "duke.txt"
    store = TaskStore(path)

    report = store.load()

    assert path.exists()
    assert report.tasks == [] and report.invalid == []


def test_append_then_rewrite(tmp_path: Path) -> None:
    path = tmp_path / "duke.txt"
    store = TaskStore(path)
    store.load()

    todo = Task.todo("read book")
    deadline = Task.deadline("return book", datetime(2012, 12, 12, 18, 0))
    assert store.append(todo) is SyncOutcome.WRITTEN
    assert store.append(deadline) is SyncOutcome.WRITTEN
    assert path.read_text("utf-8") == "T | 0 | read book\nD | 0 | return book | 2012-12-12T18:00\n"

    todo.mark_done()
    assert store.rewrite([todo]) is SyncOutcome.WRITTEN
    assert path.read_text("utf-8") == "T | 1 | read book\n"
    assert store.load().tasks == [todo]


def test_missing_file_mid_session_is_recreated(tmp_path: Path) -> None:
    path = tmp_path / "duke.txt"
    store = TaskStore(path)
    store.load()
    store.append(Task.todo("a"))

    path.unlink()

    assert store.append(Task.todo("b")) is SyncOutcome.RECREATED
    assert path.read_text("utf-8") == "T | 0 | b\n"


def test_rewrite_to_empty(tmp_path: Path) -> None:
    path = tmp_path / "duke.txt"
    store = TaskStore(path)
    store.append(Task.todo("a"))

    store.rewrite([])

    assert path.read_text("utf-8") == ""


def test_unwritable_location_raises_file_unavailable(tmp_path: Path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", "utf-8")
    store = TaskStore(blocker / "duke.txt")

    with pytest.raises(FileUnavailableError):
        store.load()
    with pytest.raises(FileUnavailableError):
        store.append(Task.todo("a"))


def test_rewrite_recreates_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "duke.txt"
    store = TaskStore(path)
    store.load()
    store.append(Task.todo("a"))

    path.unlink()

    assert store.rewrite([Task.todo("b", is_done=True)]) is SyncOutcome.RECREATED
    assert path.read_text("utf-8") == "T | 1 | b\n"


def test_failed_rewrite_leaves_no_temp_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "duke.txt"
    store = TaskStore(path)
    store.append(Task.todo("a"))

    def fail(*_args, **_kwargs):
        raise OSError("disk full")

    monkeypatch.setattr("dude.tasks.task_store.os.replace", fail)

    with pytest.raises(FileUnavailableError):
        store.rewrite([Task.todo("b")])

    assert not (tmp_path / "duke.txt.tmp").exists()
    assert path.read_text("utf-8") == "T | 0 | a\n"


def test_load_skips_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "duke.txt"
    path.write_bytes(b"T | 0 | caf\xe9\nD | 1 | return book | 2012-12-12T18:00\n")

    report = TaskStore(path).load()

    assert [t.description for t in report.tasks] == ["return book"]
    assert [e.reason for e in report.invalid] == ["undecodable bytes"]
