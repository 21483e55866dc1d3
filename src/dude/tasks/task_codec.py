# src/dude/tasks/task_codec.py

"""
Line codec for the task file.

Each task is one line:
    T | 0 | read book
    D | 1 | return book | 2012-12-12T18:00
    E | 0 | party | 2020-01-01T20:00

The date field is an ISO-8601 local date-time. It is never mixed up with the
display format used by Task.render().
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from ..core.errors import InvalidRecordError
from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)

DELIMITER = " | "

DONE_FLAGS: dict[str, bool] = {"0": False, "1": True}

# Fields a record must have for each tag.
FIELD_COUNTS: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 4,
}

_ISO_LOCAL_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?$")


@dataclass(slots=True)
class DecodeReport:
    tasks: list[Task] = field(default_factory=list)
    invalid: list[InvalidRecordError] = field(default_factory=list)


def encode_datetime(value: datetime) -> str:
    # Minute precision when nothing finer is set: matches existing data files.
    if value.second == 0 and value.microsecond == 0:
        return value.isoformat(timespec="minutes")
    return value.isoformat()


def decode_datetime(text: str) -> datetime:
    if not _ISO_LOCAL_DATETIME_RE.match(text):
        raise ValueError(f"not an ISO local date-time: {text!r}")
    return datetime.fromisoformat(text)


def encode_task(task: Task) -> str:
    fields = [task.kind.value, "1" if task.is_done else "0", task.description]
    if task.kind is not TaskKind.TODO:
        if task.at is None:
            raise ValueError(f"{task.kind.name.lower()} task has no date-time")
        fields.append(encode_datetime(task.at))
    return DELIMITER.join(fields)


def encode_all(tasks: Iterable[Task]) -> list[str]:
    """Encoded lines in list order, used to rewrite the whole file."""
    return [encode_task(t) for t in tasks]


def _has_undecodable_bytes(line: str) -> bool:
    try:
        line.encode("utf-8")
    except UnicodeEncodeError:
        return True
    return False


def decode_line(line: str) -> Task:
    """
    Decode one persisted line.

    Raises InvalidRecordError for a bad done flag, an unknown tag, a field
    count that does not fit the tag, an empty description, a bad date or bytes
    that were not valid UTF-8 (read back as surrogate escapes).
    """
    if _has_undecodable_bytes(line):
        readable = line.encode("utf-8", "replace").decode("utf-8")
        raise InvalidRecordError(readable, "undecodable bytes")

    parts = line.split(DELIMITER)
    if len(parts) < 3:
        raise InvalidRecordError(line, "too few fields")

    tag, flag = parts[0], parts[1]
    if flag not in DONE_FLAGS:
        raise InvalidRecordError(line, f"done flag must be 0 or 1, got {flag!r}")
    try:
        kind = TaskKind(tag)
    except ValueError:
        raise InvalidRecordError(line, f"unknown task tag {tag!r}") from None

    expected = FIELD_COUNTS[kind]
    if len(parts) != expected:
        raise InvalidRecordError(line, f"expected {expected} fields for {tag}, got {len(parts)}")

    description = parts[2]
    if not description.strip():
        raise InvalidRecordError(line, "empty description")

    at: datetime | None = None
    if kind is not TaskKind.TODO:
        try:
            at = decode_datetime(parts[3])
        except ValueError:
            raise InvalidRecordError(line, f"bad date-time {parts[3]!r}") from None

    return Task(kind=kind, description=description, is_done=DONE_FLAGS[flag], at=at)


def decode_lines(lines: Iterable[str]) -> DecodeReport:
    """
    Decode a file's lines, skipping bad records.

    A corrupt record is logged and collected in `invalid`; decoding continues
    with the next line. Blank lines are ignored.
    """
    report = DecodeReport()
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            report.tasks.append(decode_line(line))
        except InvalidRecordError as e:
            logger.warning("Skipping invalid task record line=%s: %s", lineno, e)
            report.invalid.append(e)
    return report
