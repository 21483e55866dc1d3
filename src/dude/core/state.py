# src/dude/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (dude.config.Settings or a test stand-in).
    settings: object

    store: TaskStore
    tasks: TaskList = field(default_factory=TaskList)
