# src/dude/core/messages.py

"""User-facing texts returned by the parser and the executor."""

from __future__ import annotations

from ..tasks.task_models import INPUT_DATETIME_EXAMPLE, INPUT_DATETIME_FORMAT

DIVIDER = "_" * 81

MESSAGE_WELCOME = "Hello! I'm {app_name} ^__^"
MESSAGE_BYE = "Bye! Hope to see you again soon! ~^u^~"

MESSAGE_NO_TASKS_YET = "No tasks yet, add a task now! >u<"
MESSAGE_INTRODUCE_TASKS = "These are your current tasks:"
MESSAGE_TASK_ADDED = "Okie! Added to list:\n{task}\nCurrent number of tasks: {count}"
MESSAGE_TASK_DELETED = "Alrightys! I have removed the following task:\n{task}\nCurrent number of tasks: {count}"
MESSAGE_TASK_MARKED = "Well done! I've marked this task as done. *w*\n{task}"
MESSAGE_TASK_ALREADY_DONE = (
    "Task has already been marked as done! Good job!\n"
    "Try marking another task as done! ^=^\n{task}"
)
MESSAGE_FOUND_TASKS = "Here are the matching tasks in your list:"
MESSAGE_NO_MATCHES = 'No tasks match "{term}".'

MESSAGE_DATA_LOADED = (
    "Your old data has been successfully loaded!\n"
    'You have {count} tasks. Type "list" to see current tasks!'
)
MESSAGE_DATA_SKIPPED = "Error restoring data due to invalid syntax! This line of data will not be added:\n{line}"

MESSAGE_ERROR_NO_DESCRIPTION = "Please specify a name for the task!"
MESSAGE_ERROR_COMMAND_DOES_NOT_EXIST = (
    "Command does not exist @_@\n"
    'Lost? Type "commands" to see the list of commands that Dude understands!'
)
MESSAGE_ERROR_DATE_FORMAT_WRONG = (
    f'Please input the date and time in the format "{INPUT_DATETIME_FORMAT}"!\n'
    f"E.g: {INPUT_DATETIME_EXAMPLE}"
)
MESSAGE_ERROR_INVALID_DEADLINE = (
    "Invalid format! Please input a deadline,\n"
    'in the format "deadline X /by Y", where X is the task and Y is the deadline!'
)
MESSAGE_ERROR_INVALID_EVENT = (
    "Invalid format! Please input a date,\n"
    'in the format "event X /at Y", where X is the event and Y is the date!'
)
MESSAGE_ERROR_INVALID_DONE = (
    "Invalid format! Please input a task number to be marked as done,\n"
    'in the format "done X", where X is the task number!'
)
MESSAGE_ERROR_INVALID_DELETE = (
    "Invalid format! Please input a task number to be deleted,\n"
    'in the format "delete X", where X is the task number!'
)
MESSAGE_ERROR_NO_SEARCH_TERM = 'Please tell me what to look for, in the format "find X"!'
MESSAGE_ERROR_OUT_OF_RANGE = "Please input a valid task number from 1 to {count}!"

MESSAGE_ERROR_DATA_FILE_MISSING = (
    "Hmm? Your data file suddenly got deleted... I've created a new one,\n"
    "but tasks saved before this will not be in it! :("
)
MESSAGE_ERROR_CANNOT_WRITE = (
    "Error! System does not have sufficient permission to write to data file?!\n"
    "Dude is unable to store your task data locally. :("
)
MESSAGE_ERROR_CANNOT_READ = (
    "Error! System does not have sufficient permission to read data file?!\n"
    "Dude is unable to restore your task data. :("
)
MESSAGE_ERROR_UNREADABLE_INPUT = "Sorry, I could not read that line! Please type it again using plain text."
MESSAGE_INTERNAL_ERROR = "Internal error while handling a command."
