"""Copy a file to another file or to stdout."""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from quietio.commands import command_io_options, fail
from quietio.streams import close_quietly, copy

logger = logging.getLogger(__name__)


def _same_file(source: Path, dest: Path) -> bool:
    """True if dest names the source file (same path, symlink or hard link)."""
    try:
        return dest.samefile(source)
    except OSError:
        return dest.resolve() == source.resolve()


def run(args: Namespace) -> None:
    """
    Run the copy command. The raw bytes go to dest, or to stdout when dest is "-"
    (the default). A dest naming the source itself is refused, since opening it for
    writing would truncate the source before anything is read.
    """
    options = command_io_options()
    source = Path(args.source)
    dest = getattr(args, "dest", "-") or "-"

    if dest != "-" and _same_file(source, Path(dest)):
        print(f"Error: source and destination are the same file: {source}", file=sys.stderr)
        sys.exit(1)

    src = None
    out = None
    try:
        src = source.open("rb")
        if dest == "-":
            sys.stdout.flush()
            out_stream = sys.stdout.buffer
            count = copy(src, out_stream, **options)
            out_stream.flush()
            logger.info("Copied %s to stdout (%d bytes)", source, count)
            return
        out = Path(dest).open("wb")
        count = copy(src, out, **options)
        logger.info("Copied %s -> %s (%d bytes)", source, dest, count)
    except (OSError, LookupError) as e:
        fail(e)
    finally:
        close_quietly(out)
        close_quietly(src)
    print(f"Copied {count} bytes to {dest}")
