# src/dude/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core import messages
from ..core.commands import CommandResult
from ..core.executor import execute
from ..core.parser import parse_command, registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def frame(*blocks: str) -> str:
    """Text blocks between two divider lines."""
    return "\n".join([messages.DIVIDER, *blocks, messages.DIVIDER])


def handle_line(state: AppState, line: str) -> CommandResult:
    """Parse and execute one line; a crash in either is reported, not raised."""
    try:
        return execute(state, parse_command(line))
    except Exception:
        logger.exception("Command handler crashed.")
        return CommandResult(messages.MESSAGE_INTERNAL_ERROR)


def run_console_loop(state: AppState, notices: Iterable[str] = ()) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "Dude"))
    logger.info("Console connector started (tasks=%s).", state.tasks.count())

    print(frame(messages.MESSAGE_WELCOME.format(app_name=app_name), messages.DIVIDER, command_registry.build_help()))
    for notice in notices:
        print(notice)
    print(messages.DIVIDER)

    while True:
        try:
            line = input()
            # Lenient stdin decoding hands bad bytes over as surrogates.
            line.encode("utf-8")
        except UnicodeError:
            logger.warning("Console input is not valid UTF-8, line ignored.", exc_info=True)
            print(frame(messages.MESSAGE_ERROR_UNREADABLE_INPUT))
            continue
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line.strip():
            continue

        result = handle_line(state, line)
        print(frame(result.message))
        if result.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
