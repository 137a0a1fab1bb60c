"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from quietio import __version__
from quietio.config import find_project_root, load_config


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the quietio logger: level from --verbose/--quiet or config, console handler,
    optional file handler from config.
    """
    config = load_config(find_project_root(Path.cwd()))
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    # names like BASIC_FORMAT exist on the module but are not levels
    if not isinstance(level, int):
        level = logging.WARNING
    root = logging.getLogger("quietio")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError:
                root.warning("Cannot open log file %s; logging to stderr only", log_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quietio",
        description="Read, copy and split files with fixed-buffer stream helpers.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Same flags on subparsers so "quietio copy a b -v" works
    global_flags = argparse.ArgumentParser(add_help=False)
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", help=argparse.SUPPRESS)
    log_grp.add_argument("-q", "--quiet", action="store_true", help=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    p_cat = subparsers.add_parser("cat", help="Print decoded file contents.", parents=[global_flags])
    p_cat.add_argument("paths", nargs="+", type=Path, help="Files to print.")
    p_cat.set_defaults(run="cat")

    p_copy = subparsers.add_parser("copy", help="Copy a file with the configured buffer size.", parents=[global_flags])
    p_copy.add_argument("source", type=Path, help="File to copy.")
    p_copy.add_argument("dest", nargs="?", default="-", help="Destination file (default: - for stdout).")
    p_copy.set_defaults(run="copy")

    p_lines = subparsers.add_parser("lines", help="Print the lines of a file.", parents=[global_flags])
    p_lines.add_argument("path", type=Path, help="File to split into lines.")
    lines_mode = p_lines.add_mutually_exclusive_group()
    lines_mode.add_argument("--number", "-n", action="store_true", help="Prefix each line with its 1-based number.")
    lines_mode.add_argument("--count", "-c", action="store_true", help="Print only the number of lines.")
    p_lines.set_defaults(run="lines")

    p_config = subparsers.add_parser("config", help="Show configuration.", parents=[global_flags])
    p_config.add_argument("--show", action="store_true", help="Display merged settings (default).")
    p_config.set_defaults(run="config")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )
    run = getattr(args, "run", None)
    if run == "cat":
        from quietio.commands.cat import run as cmd_run
    elif run == "copy":
        from quietio.commands.copy_cmd import run as cmd_run
    elif run == "lines":
        from quietio.commands.lines import run as cmd_run
    elif run == "config":
        from quietio.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)


if __name__ == "__main__":
    main()
