# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from dateutil import tz

from kwik.schema import Task, TaskStatus, Viewer
from kwik.storage import TaskFile
from kwik.store import TaskStore


@pytest.fixture()
def now() -> datetime:
    """Fixed local clock so year inference and overdue checks are deterministic."""
    return datetime(2024, 6, 1, 12, 0, tzinfo=tz.tzlocal())


@pytest.fixture()
def viewer() -> Viewer:
    return Viewer()


@pytest.fixture()
def task_file(tmp_path: Path) -> TaskFile:
    return TaskFile(tmp_path / "todos.json")


@pytest.fixture()
def store(now: datetime) -> TaskStore:
    """
    Three tasks already in deadline order:
    0: overdue, not started
    1: due tomorrow, in progress
    2: due next week, completed
    """
    local = tz.tzlocal()
    return TaskStore([
        Task(name="Pay rent", deadline=datetime(2024, 5, 30, 9, 0, tzinfo=local)),
        Task(
            name="Review PR",
            status=TaskStatus.IN_PROGRESS,
            deadline=datetime(2024, 6, 2, 12, 0, tzinfo=local),
        ),
        Task(
            name="Ship release",
            status=TaskStatus.COMPLETED,
            deadline=datetime(2024, 6, 8, 12, 0, tzinfo=local),
        ),
    ])
