# src/dude/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from enum import StrEnum
from pathlib import Path

from ..core.errors import FileUnavailableError
from .task_codec import DecodeReport, decode_lines, encode_all, encode_task
from .task_models import Task

logger = logging.getLogger(__name__)


class SyncOutcome(StrEnum):
    WRITTEN = "written"
    # The file vanished during the session and was created again before writing.
    RECREATED = "recreated"


class TaskStore:
    """
    Plain-text task file (one encoded task per line).

    - load(): decode the whole file, creating it empty when missing
    - append(): add one line after an add command
    - rewrite(): replace the whole file after delete / done

    Single session per file; concurrent writers are not detected beyond a
    missing-file check before every write.
    """

    def __init__(self, path: str | Path = "data/duke.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_file(self, *, should_exist: bool) -> bool:
        """
        Create the file (and its parent dirs) if missing.

        Returns True when the file was expected to exist but had to be created.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if self._path.exists():
                return False
            self._path.touch()
        except OSError as e:
            raise FileUnavailableError(self._path, "create") from e

        if should_exist:
            logger.warning("Task file %s disappeared mid-session; created a new one.", self._path)
            return True
        logger.info("Created empty task file %s", self._path)
        return False

    def load(self) -> DecodeReport:
        self._ensure_file(should_exist=False)
        try:
            # Bad bytes come through as surrogate escapes so only their line is skipped.
            with open(self._path, encoding="utf-8", errors="surrogateescape") as f:
                report = decode_lines(f)
        except OSError as e:
            raise FileUnavailableError(self._path, "read") from e
        logger.info(
            "TaskStore loaded path=%s tasks=%s skipped=%s",
            self._path,
            len(report.tasks),
            len(report.invalid),
        )
        return report

    def append(self, task: Task) -> SyncOutcome:
        recreated = self._ensure_file(should_exist=True)
        try:
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(encode_task(task) + "\n")
        except OSError as e:
            raise FileUnavailableError(self._path, "write") from e
        return SyncOutcome.RECREATED if recreated else SyncOutcome.WRITTEN

    def rewrite(self, tasks: Iterable[Task]) -> SyncOutcome:
        recreated = self._ensure_file(should_exist=True)
        lines = encode_all(tasks)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp.write_text("".join(line + "\n" for line in lines), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise FileUnavailableError(self._path, "write") from e
        logger.debug("TaskStore rewrote path=%s lines=%s", self._path, len(lines))
        return SyncOutcome.RECREATED if recreated else SyncOutcome.WRITTEN
