#!/usr/bin/env python3
"""
KWIK - Terminal Deadline Tracker
================================
Interactive loop: sort, save, render, read one command, apply, repeat.

Usage:
    kwik                          Track tasks in ~/.todos
    kwik --file work.json         Use another task file
    kwik --absolute               Start with absolute deadlines shown
    kwik -v --log-file kwik.log   Debug logging to a file

Commands (at the "> " prompt):
    a (5 Dec 14:30) Submit report     add a task
    t 0                               cycle status of task 0
    e 0 New name                      rename task 0
    d 0                               delete task 0
    s                                 switch absolute / remaining time
    q                                 quit
"""

import argparse
import logging
import sys
from typing import IO, Callable, Optional

from colorama import just_fix_windows_console

from .commands import apply
from .errors import CommandError, StorageError
from .render import paint
from .schema import DisplayMode, Viewer
from .storage import TaskFile
from .store import TaskStore

logger = logging.getLogger("kwik")


def run(
    store: TaskStore,
    storage: TaskFile,
    viewer: Viewer,
    read_line: Optional[Callable[[], str]] = None,
    out: Optional[IO[str]] = None,
) -> None:
    """Drive the loop until quit (process exit) or end of input.

    Reads lines with input() and paints to stdout unless told otherwise.
    StorageError from a save propagates to the caller.
    """
    read_line = read_line or input
    out = out or sys.stdout
    error: Optional[str] = None
    while True:
        store.sort_by_deadline()
        storage.save(store)
        paint(out, store.all(), viewer, error=error)
        error = None

        try:
            line = read_line()
        except EOFError:
            logger.info("📭 End of input")
            return

        try:
            apply(line, store, viewer)
        except CommandError as e:
            error = str(e)


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kwik",
        description="KWIK - terminal task list with deadlines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  a (5 Dec 14:30) <name>   Add a task due this year
  t <i>                    Cycle status of task i
  e <i> <name>             Rename task i
  d <i>                    Delete task i
  s                        Toggle absolute / remaining time
  q                        Quit
        """
    )
    parser.add_argument("--file", help="Task file (default: ~/.todos)")
    parser.add_argument("--absolute", action="store_true", help="Start showing absolute deadlines")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", help="Write log records to this file instead of stderr")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        filename=args.log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    just_fix_windows_console()

    viewer = Viewer(DisplayMode.ABSOLUTE if args.absolute else DisplayMode.REMAINING)

    try:
        storage = TaskFile(args.file)
        store = storage.load()
        run(store, storage, viewer)
    except StorageError as e:
        logger.debug("❌ Storage failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        # Nothing is saved here: only the last completed loop pass is on disk
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
