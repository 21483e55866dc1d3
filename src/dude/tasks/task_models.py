# src/dude/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

# User input pattern (dd/MM/yyyy HHmm), e.g. "12/12/2012 1800".
INPUT_DATETIME_FORMAT = "dd/MM/yyyy HHmm"
INPUT_DATETIME_EXAMPLE = "12/12/2012 2359"

_INPUT_DATETIME_RE = re.compile(r"^\d{2}/\d{2}/\d{4} \d{4}$")
_INPUT_DATETIME_STRPTIME = "%d/%m/%Y %H%M"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

ICON_DONE = "[X]"
ICON_NOT_DONE = "[ ]"


class TaskKind(StrEnum):
    """Task variant. The value is the one-letter tag used on disk and in listings."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


class MarkDoneResult(StrEnum):
    MARKED = "marked"
    ALREADY_DONE = "already_done"


# Label shown before the date in render(): "(by: ...)" / "(at: ...)".
DATE_LABELS: dict[TaskKind, str] = {
    TaskKind.DEADLINE: "by",
    TaskKind.EVENT: "at",
}


def parse_input_datetime(text: str) -> datetime:
    """
    Parse a user-typed date-time in the dd/MM/yyyy HHmm pattern.

    Digit widths are exact and the date must exist on the calendar
    (31/02/2020 is rejected). Raises ValueError on any mismatch.
    """
    if not _INPUT_DATETIME_RE.match(text):
        raise ValueError(f"date-time {text!r} does not match {INPUT_DATETIME_FORMAT}")
    return datetime.strptime(text, _INPUT_DATETIME_STRPTIME)


def format_display_datetime(value: datetime) -> str:
    """Human-friendly "MMM d yyyy h:mma" rendering, e.g. "Dec 12 2012 6:00PM"."""
    hour12 = value.hour % 12 or 12
    marker = "AM" if value.hour < 12 else "PM"
    return f"{_MONTHS[value.month - 1]} {value.day} {value.year} {hour12}:{value.minute:02d}{marker}"


@dataclass(slots=True)
class Task:
    """
    One entry of the task list.

    `at` holds the single date-time of a deadline (due) or an event; it is
    None for todos. Events keep one timestamp, not a range.
    """

    kind: TaskKind
    description: str
    is_done: bool = False
    at: datetime | None = None

    @classmethod
    def todo(cls, description: str, *, is_done: bool = False) -> Task:
        return cls(TaskKind.TODO, description, is_done)

    @classmethod
    def deadline(cls, description: str, due_at: datetime, *, is_done: bool = False) -> Task:
        return cls(TaskKind.DEADLINE, description, is_done, due_at)

    @classmethod
    def event(cls, description: str, at: datetime, *, is_done: bool = False) -> Task:
        return cls(TaskKind.EVENT, description, is_done, at)

    @property
    def status_icon(self) -> str:
        return ICON_DONE if self.is_done else ICON_NOT_DONE

    def mark_done(self) -> MarkDoneResult:
        if self.is_done:
            return MarkDoneResult.ALREADY_DONE
        self.is_done = True
        return MarkDoneResult.MARKED

    def render(self) -> str:
        text = f"[{self.kind.value}]{self.status_icon} {self.description}"
        label = DATE_LABELS.get(self.kind)
        if label is not None and self.at is not None:
            text += f" ({label}: {format_display_datetime(self.at)})"
        return text

    def encode(self) -> str:
        from .task_codec import encode_task  # local import to avoid cycle

        return encode_task(self)

    def __str__(self) -> str:
        return self.render()
