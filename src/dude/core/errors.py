# src/dude/core/errors.py

"""
Error taxonomy shared by the parser, the task list and the store.

Parser failures are returned as values (IncorrectCommand carrying an ErrorKind).
Task list and storage failures are raised as DudeError subclasses and turned
into results by the executor / bootstrap.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    # parser
    MISSING_DESCRIPTION = "missing_description"
    BAD_DATE_CLAUSE = "bad_date_clause"
    BAD_DATE_FORMAT = "bad_date_format"
    BAD_INDEX_FORMAT = "bad_index_format"
    MISSING_SEARCH_TERM = "missing_search_term"
    UNRECOGNIZED = "unrecognized"

    # task list
    EMPTY_LIST = "empty_list"
    OUT_OF_RANGE = "out_of_range"

    # persistence
    INVALID_RECORD = "invalid_record"
    FILE_UNAVAILABLE = "file_unavailable"


class DudeError(Exception):
    kind: ErrorKind


class EmptyListError(DudeError):
    kind = ErrorKind.EMPTY_LIST

    def __init__(self) -> None:
        super().__init__("task list is empty")


class OutOfRangeError(DudeError):
    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, position: int, count: int) -> None:
        super().__init__(f"position {position} is outside 1..{count}")
        self.position = position
        self.count = count


class InvalidRecordError(DudeError):
    """A persisted line that cannot be decoded into a task."""

    kind = ErrorKind.INVALID_RECORD

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class FileUnavailableError(DudeError):
    kind = ErrorKind.FILE_UNAVAILABLE

    def __init__(self, path: object, action: str) -> None:
        super().__init__(f"cannot {action} task file {path}")
        self.path = path
        self.action = action
