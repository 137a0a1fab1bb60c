"""Stream helpers: quiet close, read fully, write, buffered copy between byte and text streams.

Binary streams read/write ``bytes``, text streams read/write ``str``. Bytes and
characters are bridged with a fixed encoding (UTF-8 unless overridden).
"""

from __future__ import annotations

import codecs
import io
import logging
import os
import re
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 1024 * 4
DEFAULT_ENCODING = "utf-8"
DEFAULT_ERRORS = "replace"

CLOSE_ERROR_MESSAGE = "Error raised while closing %r"

# Same boundaries a buffered line reader honours: \r\n, \r or \n
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

T = TypeVar("T")


def close_quietly(resource: Any) -> None:
    """
    Close resource without raising. Meant for finally blocks, where a failing close
    must not replace the original exception. None (resource never created) is ignored.
    """
    if resource is None:
        return
    try:
        resource.close()
    except Exception:
        logger.warning(CLOSE_ERROR_MESSAGE, resource, exc_info=True)


@contextmanager
def quietly_closing(resource: T) -> Iterator[T]:
    """Like contextlib.closing, but a failing close is logged instead of raised."""
    try:
        yield resource
    finally:
        close_quietly(resource)


def is_text_stream(stream: Any) -> bool:
    """True if stream writes str; False if it writes bytes."""
    if isinstance(stream, io.TextIOBase):
        return True
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return False
    mode = getattr(stream, "mode", None)
    if isinstance(mode, str):
        return "b" not in mode
    return hasattr(stream, "encoding")


def _check_buffer_size(buffer_size: int) -> None:
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")


def iter_chunks(input: IO[Any], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[bytes | str]:
    """Yield raw chunks of at most buffer_size until EOF (empty read or None)."""
    _check_buffer_size(buffer_size)
    while True:
        chunk = input.read(buffer_size)
        if not chunk:
            return
        yield chunk


def iter_text(
    input: IO[Any],
    encoding: str = DEFAULT_ENCODING,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    errors: str = DEFAULT_ERRORS,
) -> Iterator[str]:
    """
    Yield the stream's content as str chunks. Byte chunks go through an incremental
    decoder, so a multi-byte character split across two reads decodes correctly.
    """
    decoder = None
    for chunk in iter_chunks(input, buffer_size):
        if isinstance(chunk, str):
            yield chunk
            continue
        if decoder is None:
            decoder = codecs.getincrementaldecoder(encoding)(errors=errors)
        text = decoder.decode(chunk)
        if text:
            yield text
    if decoder is not None:
        tail = decoder.decode(b"", final=True)
        if tail:
            yield tail


def to_string(
    input: IO[Any],
    encoding: str = DEFAULT_ENCODING,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    errors: str = DEFAULT_ERRORS,
) -> str:
    """Read input (binary or text) to EOF and return the whole content as str."""
    out = io.StringIO()
    copy(input, out, buffer_size=buffer_size, encoding=encoding, errors=errors)
    return out.getvalue()


def read_lines(
    input: IO[Any],
    encoding: str = DEFAULT_ENCODING,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    errors: str = DEFAULT_ERRORS,
) -> list[str]:
    """
    Read input to EOF and split it into lines on \\r\\n, \\r or \\n (terminators stripped).
    A trailing terminator does not produce an extra empty line.
    """
    text = to_string(input, encoding=encoding, buffer_size=buffer_size, errors=errors)
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def write(
    data: str | None,
    output: IO[Any],
    encoding: str = DEFAULT_ENCODING,
    errors: str = "strict",
) -> None:
    """Write data to output, encoding it when output is binary. None is a no-op."""
    if data is None:
        return
    if is_text_stream(output):
        output.write(data)
    else:
        output.write(data.encode(encoding, errors))


def copy(
    input: IO[Any],
    output: IO[Any],
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    encoding: str = DEFAULT_ENCODING,
    errors: str = DEFAULT_ERRORS,
) -> int:
    """
    Copy input to output until EOF, buffer_size units at a time. Bytes and str are
    bridged through encoding when the two streams differ in kind.

    Returns the number of units written: bytes for a binary output, characters for
    a text output. Neither stream is closed.
    """
    _check_buffer_size(buffer_size)
    if is_text_stream(output):
        count = 0
        for text in iter_text(input, encoding=encoding, buffer_size=buffer_size, errors=errors):
            output.write(text)
            count += len(text)
        logger.debug("Copied %d characters", count)
        return count

    count = 0
    encoder = None
    for chunk in iter_chunks(input, buffer_size):
        if isinstance(chunk, str):
            if encoder is None:
                encoder = codecs.getincrementalencoder(encoding)(errors=errors)
            chunk = encoder.encode(chunk)
            if not chunk:
                continue
        output.write(chunk)
        count += len(chunk)
    if encoder is not None:
        tail = encoder.encode("", final=True)
        if tail:
            output.write(tail)
            count += len(tail)
    logger.debug("Copied %d bytes", count)
    return count


def create_temp_file(prefix: str = "", suffix: str = "") -> Path:
    """Create an empty file named <prefix><random><suffix> in the temp directory."""
    fd, name = tempfile.mkstemp(suffix=suffix, prefix=prefix)
    os.close(fd)
    return Path(name)


def create_temp_dir(prefix: str = "", suffix: str = "") -> Path:
    """Create a new directory named <prefix><random><suffix> in the temp directory."""
    return Path(tempfile.mkdtemp(suffix=suffix, prefix=prefix))
