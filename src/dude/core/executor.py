# src/dude/core/executor.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from ..tasks.task_models import MarkDoneResult, Task
from ..tasks.task_store import SyncOutcome
from . import messages
from .commands import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Bye,
    Command,
    CommandResult,
    Delete,
    IncorrectCommand,
    ListTasks,
    MarkDone,
    Search,
    ShowCommands,
)
from .errors import EmptyListError, ErrorKind, FileUnavailableError, OutOfRangeError
from .parser import registry as command_registry
from .state import AppState

logger = logging.getLogger(__name__)

Handler = Callable[[AppState, Any], CommandResult]


def format_numbered(tasks: Iterable[Task]) -> str:
    return "\n".join(f"{i}. {task.render()}" for i, task in enumerate(tasks, start=1))


def _sync(state: AppState, message: str, write: Callable[[], SyncOutcome]) -> CommandResult:
    """
    Run a file write after a mutation and fold its outcome into the result.

    The in-memory list is already updated; a failed write is reported but
    leaves it as is so a later command can save it again.
    """
    try:
        outcome = write()
    except FileUnavailableError:
        logger.exception("Failed to sync task file %s", state.store.path)
        return CommandResult(
            f"{message}\n{messages.MESSAGE_ERROR_CANNOT_WRITE}",
            error=ErrorKind.FILE_UNAVAILABLE,
        )
    if outcome is SyncOutcome.RECREATED:
        return CommandResult(f"{messages.MESSAGE_ERROR_DATA_FILE_MISSING}\n{message}")
    return CommandResult(message)


def _add(state: AppState, task: Task) -> CommandResult:
    count = state.tasks.add(task)
    message = messages.MESSAGE_TASK_ADDED.format(task=task.render(), count=count)
    return _sync(state, message, lambda: state.store.append(task))


def _position_error(state: AppState, e: EmptyListError | OutOfRangeError) -> CommandResult:
    if isinstance(e, EmptyListError):
        return CommandResult(messages.MESSAGE_NO_TASKS_YET, error=ErrorKind.EMPTY_LIST)
    return CommandResult(
        messages.MESSAGE_ERROR_OUT_OF_RANGE.format(count=state.tasks.count()),
        error=ErrorKind.OUT_OF_RANGE,
    )


def exec_add_todo(state: AppState, cmd: AddTodo) -> CommandResult:
    return _add(state, Task.todo(cmd.description))


def exec_add_deadline(state: AppState, cmd: AddDeadline) -> CommandResult:
    return _add(state, Task.deadline(cmd.description, cmd.due_at))


def exec_add_event(state: AppState, cmd: AddEvent) -> CommandResult:
    return _add(state, Task.event(cmd.description, cmd.at))


def exec_list(state: AppState, cmd: ListTasks) -> CommandResult:
    if state.tasks.is_empty():
        return CommandResult(messages.MESSAGE_NO_TASKS_YET)
    return CommandResult(f"{messages.MESSAGE_INTRODUCE_TASKS}\n{format_numbered(state.tasks)}")


def exec_mark_done(state: AppState, cmd: MarkDone) -> CommandResult:
    try:
        task, result = state.tasks.mark_done(cmd.position)
    except (EmptyListError, OutOfRangeError) as e:
        return _position_error(state, e)

    if result is MarkDoneResult.ALREADY_DONE:
        message = messages.MESSAGE_TASK_ALREADY_DONE.format(task=task.render())
    else:
        message = messages.MESSAGE_TASK_MARKED.format(task=task.render())
    return _sync(state, message, lambda: state.store.rewrite(state.tasks))


def exec_delete(state: AppState, cmd: Delete) -> CommandResult:
    try:
        removed = state.tasks.delete(cmd.position)
    except (EmptyListError, OutOfRangeError) as e:
        return _position_error(state, e)

    message = messages.MESSAGE_TASK_DELETED.format(task=removed.render(), count=state.tasks.count())
    return _sync(state, message, lambda: state.store.rewrite(state.tasks))


def exec_search(state: AppState, cmd: Search) -> CommandResult:
    found = list(state.tasks.search(cmd.term))
    if not found:
        return CommandResult(messages.MESSAGE_NO_MATCHES.format(term=cmd.term))
    return CommandResult(f"{messages.MESSAGE_FOUND_TASKS}\n{format_numbered(found)}")


def exec_show_commands(state: AppState, cmd: ShowCommands) -> CommandResult:
    return CommandResult(command_registry.build_help())


def exec_bye(state: AppState, cmd: Bye) -> CommandResult:
    return CommandResult(messages.MESSAGE_BYE, is_exit=True)


def exec_incorrect(state: AppState, cmd: IncorrectCommand) -> CommandResult:
    return CommandResult(cmd.message, error=cmd.error)


_HANDLERS: dict[type, Handler] = {
    AddTodo: exec_add_todo,
    AddDeadline: exec_add_deadline,
    AddEvent: exec_add_event,
    ListTasks: exec_list,
    MarkDone: exec_mark_done,
    Delete: exec_delete,
    Search: exec_search,
    ShowCommands: exec_show_commands,
    Bye: exec_bye,
    IncorrectCommand: exec_incorrect,
}


def execute(state: AppState, command: Command) -> CommandResult:
    """
    Apply one command to the task list and return its result.

    Mutating commands sync the task file before returning: adds append one
    line, delete and done rewrite the whole file.
    """
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"no handler for command {command!r}")
    result = handler(state, command)
    logger.debug("Executed %s error=%s exit=%s", type(command).__name__, result.error, result.is_exit)
    return result
