# src/dude/core/parser.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ..tasks.task_models import parse_input_datetime
from . import messages
from .commands import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Bye,
    Command,
    Delete,
    IncorrectCommand,
    ListTasks,
    MarkDone,
    Search,
    ShowCommands,
)
from .errors import ErrorKind

CommandParser = Callable[[str], Command]

logger = logging.getLogger(__name__)

_POSITIVE_INT_RE = re.compile(r"^[0-9]+$")


@dataclass(frozen=True, slots=True)
class _Entry:
    parse: CommandParser
    usage: str
    help_text: str


class CommandRegistry:
    """
    Maps a command word to the function that parses the rest of the line.

    Also keeps usage/help text for every command so the "commands" listing
    is built from the same table the parser dispatches on.
    """

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def register(self, word: str, parse: CommandParser, usage: str, help_text: str) -> None:
        self._entries[word] = _Entry(parse=parse, usage=usage, help_text=help_text)

    def words(self) -> list[str]:
        return list(self._entries)

    def parse(self, line: str) -> Command:
        """
        Turn a raw input line into exactly one command.

        The line is split on its first space into the command word and the
        rest. Never raises: every failure is an IncorrectCommand.
        """
        word, _, rest = line.strip().partition(" ")
        entry = self._entries.get(word)
        if entry is None:
            logger.debug("Unrecognized command word %r", word)
            return IncorrectCommand(ErrorKind.UNRECOGNIZED, messages.MESSAGE_ERROR_COMMAND_DOES_NOT_EXIST)
        return entry.parse(rest)

    def build_help(self) -> str:
        lines = ["Commands:"]
        for entry in self._entries.values():
            lines.append(f'"{entry.usage}" : {entry.help_text}')
        return "\n".join(lines)


def split_description_and_info(params: str) -> tuple[str, str]:
    """
    Split on the first "/" into (description, info), both trimmed.

    Anything after the first "/" is the info part, even if the description
    was meant to contain a slash.
    """
    description, _, info = params.strip().partition("/")
    return description.strip(), info.strip()


def _parse_dated(
    params: str,
    *,
    prefix: str,
    clause_message: str,
    build: Callable[[str, datetime], Command],
) -> Command:
    description, info = split_description_and_info(params)
    if not description:
        return IncorrectCommand(ErrorKind.MISSING_DESCRIPTION, messages.MESSAGE_ERROR_NO_DESCRIPTION)

    prefix_word, sep, date_text = info.partition(" ")
    if prefix_word != prefix or not sep or not date_text:
        return IncorrectCommand(ErrorKind.BAD_DATE_CLAUSE, clause_message)

    try:
        when = parse_input_datetime(date_text)
    except ValueError:
        return IncorrectCommand(ErrorKind.BAD_DATE_FORMAT, messages.MESSAGE_ERROR_DATE_FORMAT_WRONG)
    return build(description, when)


def parse_todo(params: str) -> Command:
    if not params.strip():
        return IncorrectCommand(ErrorKind.MISSING_DESCRIPTION, messages.MESSAGE_ERROR_NO_DESCRIPTION)
    return AddTodo(params)


def parse_deadline(params: str) -> Command:
    return _parse_dated(
        params,
        prefix="by",
        clause_message=messages.MESSAGE_ERROR_INVALID_DEADLINE,
        build=lambda description, when: AddDeadline(description, when),
    )


def parse_event(params: str) -> Command:
    return _parse_dated(
        params,
        prefix="at",
        clause_message=messages.MESSAGE_ERROR_INVALID_EVENT,
        build=lambda description, when: AddEvent(description, when),
    )


def parse_position(params: str) -> int | None:
    """Positive base-10 integer, or None."""
    text = params.strip()
    if not _POSITIVE_INT_RE.match(text):
        return None
    value = int(text)
    return value if value > 0 else None


def parse_done(params: str) -> Command:
    position = parse_position(params)
    if position is None:
        return IncorrectCommand(ErrorKind.BAD_INDEX_FORMAT, messages.MESSAGE_ERROR_INVALID_DONE)
    return MarkDone(position)


def parse_delete(params: str) -> Command:
    position = parse_position(params)
    if position is None:
        return IncorrectCommand(ErrorKind.BAD_INDEX_FORMAT, messages.MESSAGE_ERROR_INVALID_DELETE)
    return Delete(position)


def parse_find(params: str) -> Command:
    if not params.strip():
        return IncorrectCommand(ErrorKind.MISSING_SEARCH_TERM, messages.MESSAGE_ERROR_NO_SEARCH_TERM)
    return Search(params)


registry = CommandRegistry()

registry.register("todo", parse_todo, "todo X", "Add task X")
registry.register("deadline", parse_deadline, "deadline X /by Y", "Add task X with deadline Y")
registry.register("event", parse_event, "event X /at Y", "Add event X with date/time details Y")
registry.register("list", lambda _rest: ListTasks(), "list", "See lists of tasks")
registry.register("done", parse_done, "done X", "Mark task number X as done")
registry.register("delete", parse_delete, "delete X", "Delete task number X")
registry.register("find", parse_find, "find X", "Find tasks whose name contains X")
registry.register("commands", lambda _rest: ShowCommands(), "commands", "See this list of commands again")
registry.register("bye", lambda _rest: Bye(), "bye", "Stop Dude :(")


def parse_command(line: str) -> Command:
    return registry.parse(line)
