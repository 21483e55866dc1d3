"""Dude: a personal task-tracking command-line assistant."""

__version__ = "0.1.0"
