"""
KWIK - Terminal Deadline Tracker
================================

Keeps a deadline-sorted task list in ~/.todos, redraws it after every
command and accepts one-letter commands at the prompt.

Usage:
    from kwik import TaskFile, Viewer, apply

    storage = TaskFile()
    store = storage.load()
    viewer = Viewer()

    apply("a (5 Dec 14:30) Submit report", store, viewer)
    apply("t 0", store, viewer)
    store.sort_by_deadline()
    storage.save(store)
"""

from .schema import (
    Task,
    TaskStatus,
    DisplayMode,
    Viewer,
)

from .errors import (
    KwikError,
    CommandError,
    InvalidCommand,
    InvalidIndexFormat,
    IndexOutOfBounds,
    InvalidDatetimeFormat,
    StorageError,
)

from .store import TaskStore
from .storage import TaskFile
from .commands import apply, parse_command, execute

__version__ = "1.0.0"
__all__ = [
    "Task",
    "TaskStatus",
    "DisplayMode",
    "Viewer",
    "KwikError",
    "CommandError",
    "InvalidCommand",
    "InvalidIndexFormat",
    "IndexOutOfBounds",
    "InvalidDatetimeFormat",
    "StorageError",
    "TaskStore",
    "TaskFile",
    "apply",
    "parse_command",
    "execute",
]
