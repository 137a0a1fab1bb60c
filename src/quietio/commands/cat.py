"""Print decoded file contents."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from quietio.commands import command_io_options, fail
from quietio.streams import quietly_closing, to_string


def run(args: Namespace) -> None:
    """Run the cat command: decode each file with the configured encoding and print it."""
    options = command_io_options()
    for path in args.paths:
        try:
            with quietly_closing(Path(path).open("rb")) as f:
                text = to_string(f, **options)
        except (OSError, LookupError) as e:
            fail(e)
        sys.stdout.write(text)
