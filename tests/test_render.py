# tests/test_render.py

from __future__ import annotations

import io
from datetime import datetime, timedelta

import pytest
from colorama import Fore, Style
from dateutil import tz

from kwik.render import (
    PROMPT,
    SEPARATOR,
    format_absolute,
    format_remaining,
    paint,
    render_frame,
    render_lines,
    render_task,
)
from kwik.schema import DisplayMode, Task, TaskStatus, Viewer


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(days=3, hours=5), "3d"),
        (timedelta(days=1), "1d"),
        (timedelta(hours=23, minutes=59), "23h"),
        (timedelta(hours=5), "5h"),
        (timedelta(minutes=12, seconds=59), "12m"),
        (timedelta(seconds=40), "40s"),
        (timedelta(0), "0s"),
    ],
)
def test_remaining_uses_largest_unit(delta: timedelta, expected: str, now: datetime) -> None:
    assert format_remaining(now + delta, now) == expected


def test_remaining_ignores_sign(now: datetime) -> None:
    late = now - timedelta(hours=5)
    early = now + timedelta(hours=5)
    assert format_remaining(late, now) == format_remaining(early, now) == "5h"


def test_absolute_format() -> None:
    deadline = datetime(2024, 12, 5, 14, 30, tzinfo=tz.tzlocal())
    assert format_absolute(deadline) == "05 Dec ⋅ 14:30"


def test_line_layout(now: datetime) -> None:
    task = Task(name="Review PR", status=TaskStatus.IN_PROGRESS, deadline=now + timedelta(hours=3))
    assert render_task(4, task, Viewer(), now) == "4.\t[.] (3h) Review PR"


def test_absolute_line_layout(now: datetime) -> None:
    task = Task(name="Plan", deadline=datetime(2024, 12, 5, 14, 30, tzinfo=tz.tzlocal()))
    line = render_task(0, task, Viewer(DisplayMode.ABSOLUTE), now)
    assert line == "0.\t[ ] (05 Dec ⋅ 14:30) Plan"


@pytest.mark.parametrize("mode", list(DisplayMode))
def test_overdue_renders_alert_color(mode: DisplayMode, now: datetime) -> None:
    for status in (TaskStatus.NOT_STARTED, TaskStatus.IN_PROGRESS):
        task = Task(name="late", status=status, deadline=now - timedelta(minutes=1))
        line = render_task(0, task, Viewer(mode), now)
        assert Fore.RED in line
        assert line.endswith(Style.RESET_ALL)


def test_completed_renders_success_color_even_when_overdue(now: datetime) -> None:
    task = Task(name="done", status=TaskStatus.COMPLETED, deadline=now - timedelta(days=2))
    line = render_task(0, task, Viewer(), now)
    assert Fore.GREEN in line
    assert Fore.RED not in line


def test_upcoming_open_task_is_uncolored(now: datetime) -> None:
    task = Task(name="soon", deadline=now + timedelta(days=1))
    line = render_task(0, task, Viewer(), now)
    assert "\x1b[" not in line


def test_lines_are_indexed_in_order(store, viewer, now) -> None:
    lines = render_lines(store.all(), viewer, now)
    assert [line.split(".\t")[0] for line in lines] == ["0", "1", "2"]
    assert "Pay rent" in lines[0]
    assert "[✓]" in lines[2]


def test_frame_clears_and_ends_with_prompt(store, viewer, now) -> None:
    frame = render_frame(store.all(), viewer, now)
    assert frame.startswith("\x1b[2J\x1b[1;1H")
    assert frame.endswith(f"\n{SEPARATOR}\n{PROMPT}")
    assert "Error" not in frame


def test_frame_shows_last_error(viewer, now) -> None:
    frame = render_frame([], viewer, now, error="Index out of bounds")
    assert "Error: Index out of bounds" in frame
    assert frame.endswith(PROMPT)


def test_paint_writes_and_flushes(store, viewer, now) -> None:
    out = io.StringIO()
    paint(out, store.all(), viewer, now)
    assert out.getvalue() == render_frame(store.all(), viewer, now)


def test_paint_defaults_to_local_clock(monkeypatch, now) -> None:
    monkeypatch.setattr("kwik.render.local_now", lambda: now)
    task = Task(name="soon", deadline=now + timedelta(hours=2))
    out = io.StringIO()
    paint(out, [task], Viewer())
    assert "(2h) soon" in out.getvalue()
