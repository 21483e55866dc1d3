# src/dude/core/commands.py

"""
Typed command values produced by the parser and consumed by the executor.

Every input line maps to exactly one of these. Syntax errors are an
IncorrectCommand carrying the error kind and the user-facing message.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .errors import ErrorKind


@dataclass(frozen=True, slots=True)
class AddTodo:
    description: str


@dataclass(frozen=True, slots=True)
class AddDeadline:
    description: str
    due_at: datetime


@dataclass(frozen=True, slots=True)
class AddEvent:
    description: str
    at: datetime


@dataclass(frozen=True, slots=True)
class ListTasks:
    pass


@dataclass(frozen=True, slots=True)
class MarkDone:
    position: int


@dataclass(frozen=True, slots=True)
class Delete:
    position: int


@dataclass(frozen=True, slots=True)
class Search:
    term: str


@dataclass(frozen=True, slots=True)
class ShowCommands:
    pass


@dataclass(frozen=True, slots=True)
class Bye:
    pass


@dataclass(frozen=True, slots=True)
class IncorrectCommand:
    error: ErrorKind
    message: str


Command = (
    AddTodo
    | AddDeadline
    | AddEvent
    | ListTasks
    | MarkDone
    | Delete
    | Search
    | ShowCommands
    | Bye
    | IncorrectCommand
)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Plain text for the output layer, plus whether the session should end."""

    message: str
    is_exit: bool = False
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
