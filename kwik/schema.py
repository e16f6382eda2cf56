"""
KWIK - Task Schema Definition
=============================
Task model, lifecycle states and the display state shared by the
interpreter and the renderer.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import AwareDatetime, BaseModel, model_validator


class TaskStatus(str, Enum):
    """Task lifecycle states"""
    NOT_STARTED = "NotStarted"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"

    def next(self) -> "TaskStatus":
        return STATUS_CYCLE[self]

    @property
    def glyph(self) -> str:
        return STATUS_GLYPHS[self]


# Toggle order: NotStarted -> InProgress -> Completed -> NotStarted
STATUS_CYCLE: Dict[TaskStatus, TaskStatus] = {
    TaskStatus.NOT_STARTED: TaskStatus.IN_PROGRESS,
    TaskStatus.IN_PROGRESS: TaskStatus.COMPLETED,
    TaskStatus.COMPLETED: TaskStatus.NOT_STARTED,
}

STATUS_GLYPHS: Dict[TaskStatus, str] = {
    TaskStatus.NOT_STARTED: " ",
    TaskStatus.IN_PROGRESS: ".",
    TaskStatus.COMPLETED: "✓",
}


class Task(BaseModel):
    """Individual task definition"""
    name: str
    status: TaskStatus = TaskStatus.NOT_STARTED
    deadline: AwareDatetime

    @model_validator(mode="before")
    @classmethod
    def _migrate_completed_flag(cls, data: Any) -> Any:
        # Older files stored a boolean "completed" instead of a status tag
        if isinstance(data, dict) and "status" not in data and "completed" in data:
            data = dict(data)
            completed = data.pop("completed")
            if not isinstance(completed, bool):
                raise ValueError(f"completed must be true or false, got {completed!r}")
            data["status"] = TaskStatus.COMPLETED if completed else TaskStatus.NOT_STARTED
        return data

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED


class DisplayMode(str, Enum):
    """How deadlines are shown"""
    ABSOLUTE = "absolute"     # 05 Dec ⋅ 14:30
    REMAINING = "remaining"   # 3d, 5h, 12m, 40s


class Viewer:
    """Holds the current display mode; never persisted."""

    def __init__(self, mode: DisplayMode = DisplayMode.REMAINING):
        self.mode = mode

    def flip(self) -> DisplayMode:
        if self.mode == DisplayMode.ABSOLUTE:
            self.mode = DisplayMode.REMAINING
        else:
            self.mode = DisplayMode.ABSOLUTE
        return self.mode

    def __repr__(self) -> str:
        return f"Viewer(mode={self.mode.value})"
