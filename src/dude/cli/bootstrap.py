# src/dude/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- builds the TaskStore and loads the task file into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core import messages
from ..core.errors import FileUnavailableError
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.data_file.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> tuple[AppState, list[str]]:
    """
    Create AppState from the provided settings and load the task file.

    Returns the state plus user-facing notices about the load (skipped
    records, unreadable file, summary). A load failure never aborts startup:
    the session starts with an empty list instead.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    notices: list[str] = []
    try:
        _ensure_local_dirs(settings)
    except OSError:
        logger.exception("Failed to create data directories for %s", settings.data_file)

    store = TaskStore(settings.data_file)
    state = AppState(settings=settings, store=store)

    try:
        report = store.load()
    except FileUnavailableError:
        logger.exception("Failed to load task file %s", store.path)
        notices.append(messages.MESSAGE_ERROR_CANNOT_READ)
        return state, notices

    for invalid in report.invalid:
        notices.append(messages.MESSAGE_DATA_SKIPPED.format(line=invalid.line))

    state.tasks = TaskList(report.tasks)
    notices.append(messages.MESSAGE_DATA_LOADED.format(count=state.tasks.count()))
    return state, notices
