# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from dude.core.state import AppState
from dude.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Dude",
        log_level="WARNING",
        data_dir=data_dir,
        data_file=data_dir / "duke.txt",
        log_dir=data_dir / "logs",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState with an empty task list.

    NOTE: We keep a real TaskStore on tmp_path because the file sync after
    every mutation is part of what we want to test.
    """
    store = TaskStore(settings.data_file)
    store.load()
    return AppState(settings=settings, store=store)


@pytest.fixture()
def data_lines(settings: SimpleNamespace):
    def read() -> list[str]:
        return settings.data_file.read_text("utf-8").splitlines()

    return read
