"""
KWIK - Terminal Renderer
========================
Formats the sorted task list for the terminal: index, status glyph, time
field and name, colored by completion and overdue state.
"""

from datetime import datetime
from typing import IO, Iterable, List, Optional

from colorama import Cursor, Fore, Style, ansi
from dateutil import tz

from .commands import local_now
from .schema import DisplayMode, Task, Viewer

ABSOLUTE_FORMAT = "%d %b ⋅ %H:%M"
SEPARATOR = "-" * 32
PROMPT = "> "
CLEAR = ansi.clear_screen() + Cursor.POS(1, 1)

SUCCESS_COLOR = Fore.GREEN
ALERT_COLOR = Fore.RED

# Largest unit first; anything under a minute falls through to seconds
UNITS = (("d", 86400), ("h", 3600), ("m", 60))


def format_remaining(deadline: datetime, now: datetime) -> str:
    """Distance between deadline and now in its largest whole unit.

    Overdue and upcoming deadlines render the same: "3d", "5h", "12m", "40s".
    """
    seconds = int(abs(deadline - now).total_seconds())
    for suffix, size in UNITS:
        if seconds >= size:
            return f"{seconds // size}{suffix}"
    return f"{seconds}s"


def format_absolute(deadline: datetime) -> str:
    """Deadline in local time, e.g. 05 Dec ⋅ 14:30"""
    return deadline.astimezone(tz.tzlocal()).strftime(ABSOLUTE_FORMAT)


def task_color(task: Task, now: datetime) -> str:
    """Green when completed, red when overdue, otherwise no color"""
    if task.is_completed:
        return SUCCESS_COLOR
    if task.deadline < now:
        return ALERT_COLOR
    return ""


def render_task(index: int, task: Task, viewer: Viewer, now: datetime) -> str:
    """One indexed line, e.g. 0.<TAB>[.] (3h) Review PR"""
    if viewer.mode == DisplayMode.ABSOLUTE:
        when = format_absolute(task.deadline)
    else:
        when = format_remaining(task.deadline, now)

    text = f"[{task.status.glyph}] ({when}) {task.name}"
    color = task_color(task, now)
    if color:
        text = f"{color}{text}{Style.RESET_ALL}"
    return f"{index}.\t{text}"


def render_lines(tasks: Iterable[Task], viewer: Viewer, now: datetime) -> List[str]:
    """Render every task, indexed by position"""
    return [render_task(i, task, viewer, now) for i, task in enumerate(tasks)]


def render_frame(
    tasks: Iterable[Task],
    viewer: Viewer,
    now: datetime,
    error: Optional[str] = None,
) -> str:
    """Full screen: clear, task lines, separator, last error, prompt"""
    lines = render_lines(tasks, viewer, now)
    frame = CLEAR + "".join(line + "\n" for line in lines)
    frame += f"\n{SEPARATOR}\n"
    if error:
        frame += f"{ALERT_COLOR}Error: {error}{Style.RESET_ALL}\n"
    return frame + PROMPT


def paint(
    out: IO[str],
    tasks: Iterable[Task],
    viewer: Viewer,
    now: Optional[datetime] = None,
    error: Optional[str] = None,
) -> None:
    now = now or local_now()
    out.write(render_frame(tasks, viewer, now, error))
    out.flush()
