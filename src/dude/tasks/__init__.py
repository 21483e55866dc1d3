"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskKind, MarkDoneResult) and date formats
- task_list.py: ordered in-memory list with add/delete/mark/search
- task_codec.py: one-line text encoding of a task (and decoding back)
- task_store.py: the task file on disk (load, append, rewrite)
"""
