"""Print the lines of a file, numbered or counted."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from quietio.commands import command_io_options, fail
from quietio.streams import quietly_closing, read_lines


def run(args: Namespace) -> None:
    options = command_io_options()
    try:
        with quietly_closing(Path(args.path).open("rb")) as f:
            lines = read_lines(f, **options)
    except (OSError, LookupError) as e:
        fail(e)

    if getattr(args, "count", False):
        print(len(lines))
        return
    number = getattr(args, "number", False)
    width = len(str(len(lines)))
    for i, line in enumerate(lines, start=1):
        print(f"{i:>{width}}  {line}" if number else line)
