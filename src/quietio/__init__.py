"""quietio: stream I/O and exception-cause helpers."""

__version__ = "0.1.0"

from quietio.exceptions import (
    UncheckedError,
    cause_chain,
    clear_traceback,
    find_cause,
    is_caused_by,
    root_cause,
    stack_trace_text,
    to_string_with_root_cause,
    to_string_with_short_name,
    unchecked,
    unwrap,
)
from quietio.streams import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_ENCODING,
    close_quietly,
    copy,
    create_temp_dir,
    create_temp_file,
    quietly_closing,
    read_lines,
    to_string,
    write,
)

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_ENCODING",
    "UncheckedError",
    "cause_chain",
    "clear_traceback",
    "close_quietly",
    "copy",
    "create_temp_dir",
    "create_temp_file",
    "find_cause",
    "is_caused_by",
    "quietly_closing",
    "read_lines",
    "root_cause",
    "stack_trace_text",
    "to_string",
    "to_string_with_root_cause",
    "to_string_with_short_name",
    "unchecked",
    "unwrap",
    "write",
]
