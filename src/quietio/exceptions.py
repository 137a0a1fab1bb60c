"""Exception helpers: cause-chain walking, unwrapping, and short string forms."""

from __future__ import annotations

import traceback


class UncheckedError(RuntimeError):
    """Wraps a non-runtime exception; the wrapped one is the __cause__."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{type(cause).__name__}: {cause}" if str(cause) else type(cause).__name__)
        self.__cause__ = cause

    def __reduce__(self) -> tuple[type[UncheckedError], tuple[BaseException | None]]:
        # args hold the message; rebuild from the cause so pickle/copy round-trip
        return (type(self), (self.__cause__,))


def _next_cause(exc: BaseException) -> BaseException | None:
    """Explicit cause first, else the implicit context unless it was suppressed."""
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def cause_chain(exc: BaseException | None) -> list[BaseException]:
    """
    Return exc followed by each of its causes, outermost first.
    Stops at an exception already seen, since __context__ chains may loop.
    """
    chain: list[BaseException] = []
    seen: set[int] = set()
    current = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(current)
        current = _next_cause(current)
    return chain


def unchecked(exc: BaseException) -> RuntimeError:
    """Return exc if it is already a RuntimeError, else wrap it in UncheckedError."""
    if isinstance(exc, RuntimeError):
        return exc
    return UncheckedError(exc)


def unwrap(
    exc: BaseException,
    wrappers: tuple[type[BaseException], ...] = (UncheckedError,),
) -> BaseException:
    """Strip wrapper exceptions (UncheckedError by default) down to the first real cause."""
    seen: set[int] = set()
    while isinstance(exc, wrappers) and exc.__cause__ is not None and id(exc) not in seen:
        seen.add(id(exc))
        exc = exc.__cause__
    return exc


def stack_trace_text(exc: BaseException) -> str:
    """Full traceback text, chained causes included."""
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def to_string_with_short_name(exc: BaseException | None) -> str:
    """'ClassName: message' without the module path; 'ClassName' if there is no message."""
    if exc is None:
        return ""
    message = str(exc)
    name = type(exc).__name__
    return f"{name}: {message}" if message else name


def to_string_with_root_cause(exc: BaseException | None) -> str:
    """Short string of exc, plus '; <---' and the root cause when it is a different exception."""
    if exc is None:
        return ""
    text = to_string_with_short_name(exc)
    cause = root_cause(exc)
    if cause is exc:
        return text
    return f"{text}; <---{to_string_with_short_name(cause)}"


def root_cause(exc: BaseException) -> BaseException:
    """Innermost exception of the chain (exc itself when it has no cause)."""
    return cause_chain(exc)[-1]


def find_cause(exc: BaseException, cause_type: type[BaseException]) -> BaseException | None:
    """First exception in the chain, exc included, that is a cause_type instance."""
    for item in cause_chain(exc):
        if isinstance(item, cause_type):
            return item
    return None


def is_caused_by(exc: BaseException, *cause_types: type[BaseException]) -> bool:
    """True if exc or any of its causes is an instance of one of cause_types."""
    if not cause_types:
        return False
    return any(isinstance(item, cause_types) for item in cause_chain(exc))


def clear_traceback(exc: BaseException) -> BaseException:
    """Drop exc's traceback and return exc. For pre-built exceptions raised repeatedly."""
    return exc.with_traceback(None)
