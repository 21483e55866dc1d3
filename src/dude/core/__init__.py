"""
Command engine.

- commands.py: typed command values and CommandResult
- parser.py: raw line -> command (CommandRegistry)
- executor.py: command -> result, syncing the task file
- errors.py / messages.py: error kinds and user-facing texts
- state.py: AppState threaded through every call
"""
