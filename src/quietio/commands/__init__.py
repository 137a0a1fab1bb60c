"""CLI subcommands (cat, copy, lines, config)."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

from quietio.config import find_project_root, io_options, load_config
from quietio.exceptions import stack_trace_text, to_string_with_root_cause

logger = logging.getLogger(__name__)


def command_io_options() -> dict[str, Any]:
    """Stream helper options from the config in effect for the working directory."""
    return io_options(load_config(find_project_root(Path.cwd())))


def fail(exc: BaseException) -> NoReturn:
    """Print a one-line error (with root cause) to stderr and exit 1."""
    logger.debug("Command failed:\n%s", stack_trace_text(exc))
    print(f"Error: {to_string_with_root_cause(exc)}", file=sys.stderr)
    sys.exit(1)
