"""Unit tests for exception helpers (cause chain, unwrap, unchecked, string forms)."""

from __future__ import annotations

import copy
import pickle

import pytest

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


def _raise_chain() -> RuntimeError:
    """RuntimeError <- ValueError <- OSError, linked with 'raise ... from'."""
    try:
        try:
            try:
                raise OSError("my exception")
            except OSError as e:
                raise ValueError("illegal state") from e
        except ValueError as e:
            raise RuntimeError("runtime") from e
    except RuntimeError as e:
        return e
    raise AssertionError("unreachable")


@pytest.fixture
def chained() -> RuntimeError:
    return _raise_chain()


# --- cause_chain ---


def test_cause_chain_explicit(chained: RuntimeError) -> None:
    chain = cause_chain(chained)
    assert [type(e) for e in chain] == [RuntimeError, ValueError, OSError]
    assert chain[0] is chained


def test_cause_chain_implicit_context() -> None:
    """An exception raised while handling another has it as implicit cause."""
    try:
        try:
            raise KeyError("k")
        except KeyError:
            raise ValueError("during handling")
    except ValueError as e:
        chain = cause_chain(e)
    assert [type(x) for x in chain] == [ValueError, KeyError]


def test_cause_chain_suppressed_context() -> None:
    try:
        try:
            raise KeyError("k")
        except KeyError:
            raise ValueError("clean") from None
    except ValueError as e:
        assert cause_chain(e) == [e]


def test_cause_chain_cycle_terminates() -> None:
    a = ValueError("a")
    b = KeyError("b")
    a.__context__ = b
    b.__context__ = a
    assert cause_chain(a) == [a, b]


def test_cause_chain_none() -> None:
    assert cause_chain(None) == []


# --- unchecked / unwrap ---


def test_unchecked_wraps_non_runtime() -> None:
    exc = OSError("my exception")
    wrapped = unchecked(exc)
    assert isinstance(wrapped, UncheckedError)
    assert isinstance(wrapped, RuntimeError)
    assert wrapped.__cause__ is exc
    assert str(wrapped) == "OSError: my exception"


def test_unchecked_keeps_runtime_error() -> None:
    exc = RuntimeError("already runtime")
    assert unchecked(exc) is exc


def test_unchecked_can_be_raised() -> None:
    exc = ValueError("bad")
    with pytest.raises(UncheckedError) as exc_info:
        raise unchecked(exc)
    assert exc_info.value.__cause__ is exc


def test_unchecked_survives_pickle() -> None:
    wrapped = unchecked(OSError("x"))
    restored = pickle.loads(pickle.dumps(wrapped))
    assert type(restored) is UncheckedError
    assert str(restored) == "OSError: x"
    assert isinstance(restored.__cause__, OSError)
    assert str(restored.__cause__) == "x"
    assert is_caused_by(restored, OSError)


def test_unchecked_survives_copy() -> None:
    wrapped = unchecked(ValueError("bad"))
    clone = copy.copy(wrapped)
    assert clone is not wrapped
    assert clone.__cause__ is wrapped.__cause__
    assert str(clone) == str(wrapped)


def test_unwrap_strips_nested_wrappers() -> None:
    exc = OSError("inner")
    assert unwrap(UncheckedError(UncheckedError(exc))) is exc


def test_unwrap_leaves_other_exceptions() -> None:
    exc = ValueError("plain")
    assert unwrap(exc) is exc


def test_unwrap_custom_wrappers(chained: RuntimeError) -> None:
    assert isinstance(unwrap(chained, wrappers=(RuntimeError,)), ValueError)
    assert isinstance(unwrap(chained, wrappers=(RuntimeError, ValueError)), OSError)


# --- root_cause / find_cause / is_caused_by ---


def test_root_cause(chained: RuntimeError) -> None:
    root = root_cause(chained)
    assert isinstance(root, OSError)
    assert str(root) == "my exception"


def test_root_cause_of_plain_exception_is_itself() -> None:
    exc = ValueError("x")
    assert root_cause(exc) is exc


def test_find_cause(chained: RuntimeError) -> None:
    found = find_cause(chained, ValueError)
    assert isinstance(found, ValueError)
    assert str(found) == "illegal state"
    assert find_cause(chained, RuntimeError) is chained
    assert find_cause(chained, PermissionError) is None


def test_is_caused_by(chained: RuntimeError) -> None:
    assert is_caused_by(chained, OSError) is True
    assert is_caused_by(chained, ValueError, OSError) is True
    assert is_caused_by(chained, Exception) is True
    assert is_caused_by(chained, PermissionError) is False
    assert is_caused_by(chained, PermissionError, KeyError) is False


def test_is_caused_by_no_candidates(chained: RuntimeError) -> None:
    assert is_caused_by(chained) is False


# --- string forms ---


def test_stack_trace_text_includes_causes(chained: RuntimeError) -> None:
    text = stack_trace_text(chained)
    assert text.startswith("Traceback") or "Traceback" in text
    assert "OSError: my exception" in text
    assert "ValueError: illegal state" in text
    assert "RuntimeError: runtime" in text
    assert "direct cause" in text


def test_to_string_with_short_name() -> None:
    assert to_string_with_short_name(OSError("disk gone")) == "OSError: disk gone"
    assert to_string_with_short_name(ValueError()) == "ValueError"
    assert to_string_with_short_name(None) == ""


def test_to_string_with_root_cause(chained: RuntimeError) -> None:
    assert to_string_with_root_cause(chained) == "RuntimeError: runtime; <---OSError: my exception"


def test_to_string_with_root_cause_without_cause() -> None:
    assert to_string_with_root_cause(ValueError("alone")) == "ValueError: alone"
    assert to_string_with_root_cause(None) == ""


# --- clear_traceback ---


def test_clear_traceback(chained: RuntimeError) -> None:
    assert chained.__traceback__ is not None
    assert clear_traceback(chained) is chained
    assert chained.__traceback__ is None
