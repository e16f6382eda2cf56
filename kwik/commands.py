"""
KWIK - Command Interpreter
==========================
Turns one line of user input into a typed command, then applies it to the
task store and viewer.

Grammar (first full match on the trimmed line wins):

    q                     quit
    s                     toggle absolute / remaining display
    d <index>             delete task
    t <index>             advance status (not started -> in progress -> completed)
    e <index> <name>      rename task
    a (<d Mon HH:MM>) <name>
                          add task due this year, local time
"""

import logging
import re
import sys
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from re import Match, Pattern
from typing import Callable, List, Optional, Tuple, Union

from dateutil import tz

from .errors import CommandError, InvalidCommand, InvalidDatetimeFormat, InvalidIndexFormat
from .schema import Task, TaskStatus, Viewer
from .store import TaskStore

logger = logging.getLogger("kwik")

DATETIME_FORMAT = "%d %b %H:%M %Y"


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class ToggleMode:
    pass


@dataclass(frozen=True)
class Delete:
    index: int


@dataclass(frozen=True)
class ToggleStatus:
    index: int


@dataclass(frozen=True)
class Edit:
    index: int
    text: str


@dataclass(frozen=True)
class Add:
    when: datetime
    name: str


Command = Union[Quit, ToggleMode, Delete, ToggleStatus, Edit, Add]


# ========================================
# DEADLINES
# ========================================

def local_now() -> datetime:
    return datetime.now(tz.tzlocal())


def parse_deadline(expr: str, now: datetime, zone: Optional[tzinfo] = None) -> datetime:
    """Parse "5 Dec 14:30" as a deadline in the current year of `zone`.

    Wall times skipped by a forward clock change are pushed forward by the
    size of the gap; wall times repeated by a backward change take the
    earlier occurrence. The result carries a fixed UTC offset.
    """
    zone = zone or tz.tzlocal()
    year = now.astimezone(zone).year
    try:
        naive = datetime.strptime(f"{expr.strip()} {year}", DATETIME_FORMAT)
    except ValueError as e:
        raise InvalidDatetimeFormat() from e

    when = naive.replace(tzinfo=zone)
    if not tz.datetime_exists(when):
        when = tz.resolve_imaginary(when)
        logger.info(f"🕒 {naive:%d %b %H:%M} does not exist locally, using {when:%H:%M}")
    elif tz.datetime_ambiguous(when):
        when = when.replace(fold=0)
        logger.info(f"🕒 {naive:%d %b %H:%M} occurs twice locally, using the earlier one")

    offset = when.utcoffset() or timedelta(0)
    return when.replace(tzinfo=timezone(offset), fold=0)


# ========================================
# PARSING
# ========================================

def _index(token: str) -> int:
    # \d also matches non-ASCII digits; only plain 0-9 are valid indices
    if not (token.isascii() and token.isdigit()):
        raise InvalidIndexFormat()
    return int(token)


Builder = Callable[[Match, datetime], Command]

MATCHERS: List[Tuple[Pattern, Builder]] = [
    (re.compile(r"q"), lambda m, now: Quit()),
    (re.compile(r"s"), lambda m, now: ToggleMode()),
    (re.compile(r"d\s+(\d+)"), lambda m, now: Delete(_index(m.group(1)))),
    (re.compile(r"t\s+(\d+)"), lambda m, now: ToggleStatus(_index(m.group(1)))),
    (re.compile(r"e (\d+) (.+)"), lambda m, now: Edit(_index(m.group(1)), m.group(2).strip())),
    (re.compile(r"a\s+\((.+?)\)\s+(.+)"),
     lambda m, now: Add(parse_deadline(m.group(1), now), m.group(2).strip())),
]


def parse_command(text: str, now: Optional[datetime] = None) -> Command:
    """Parse one input line; raises a CommandError subclass on failure"""
    line = text.strip()
    now = now or local_now()
    for pattern, build in MATCHERS:
        match = pattern.fullmatch(line)
        if match:
            return build(match, now)
    raise InvalidCommand()


# ========================================
# EXECUTION
# ========================================

def execute(command: Command, store: TaskStore, viewer: Viewer) -> None:
    """Apply a parsed command. Quit exits the process."""
    if isinstance(command, Quit):
        logger.debug("👋 Quit")
        sys.exit(0)

    elif isinstance(command, ToggleMode):
        mode = viewer.flip()
        logger.debug(f"🔁 Display mode: {mode.value}")

    elif isinstance(command, Delete):
        task = store.remove(command.index)
        logger.debug(f"🗑️ Deleted [{command.index}] {task.name}")

    elif isinstance(command, ToggleStatus):
        task = store.get(command.index)
        task.status = task.status.next()
        logger.debug(f"▶️ [{command.index}] {task.name} -> {task.status.value}")

    elif isinstance(command, Edit):
        task = store.get(command.index)
        task.name = command.text
        logger.debug(f"✏️ Renamed [{command.index}] to {command.text}")

    elif isinstance(command, Add):
        store.add(Task(name=command.name, status=TaskStatus.NOT_STARTED, deadline=command.when))
        logger.debug(f"➕ Added {command.name} due {command.when.isoformat()}")

    else:
        raise InvalidCommand()


def apply(text: str, store: TaskStore, viewer: Viewer, now: Optional[datetime] = None) -> None:
    """Parse and apply one command line.

    Raises CommandError (store untouched) when the line is rejected.
    """
    try:
        command = parse_command(text, now)
        execute(command, store, viewer)
    except CommandError as e:
        logger.info(f"⚠️ Rejected {text.strip()!r}: {e}")
        raise
