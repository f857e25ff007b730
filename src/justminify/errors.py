"""Error types and the malformed-input diagnostics sink.

Malformed markup never raises: it is passed through and, when a caller asked
for it, reported as a `ParseError` record. Internal inconsistencies are
defects and raise a `MinifyError` subclass.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class MinifyError(Exception):
    """Base class for internal minifier defects."""


class PlaceholderError(MinifyError):
    """A protected-comment placeholder could not be restored exactly once."""

    def __init__(self, token: str, count: int) -> None:
        self.token = token
        self.count = count
        super().__init__(f"placeholder {token!r} found {count} times at restore, expected exactly 1")


class ParseError:
    """A malformed-input report. Informational, never raised."""

    __slots__ = ("code", "message", "offset")

    code: str
    offset: int | None
    message: str

    def __init__(self, code: str, *, offset: int | None = None, message: str | None = None) -> None:
        self.code = code
        self.offset = offset
        self.message = message if message is not None else code

    def __repr__(self) -> str:
        return f"ParseError({self.code!r}, offset={self.offset!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.code == other.code and self.offset == other.offset

    __hash__ = None  # type: ignore[assignment]


_ERROR_SINK: ContextVar[list[ParseError] | None] = ContextVar("justminify_error_sink", default=None)


def emit_error(code: str, *, offset: int | None = None, message: str | None = None) -> None:
    """Report malformed input to the active sink.

    If no sink is active (see `collect_errors()`), this is a no-op.
    """

    sink = _ERROR_SINK.get()
    if sink is None:
        return
    sink.append(ParseError(str(code), offset=offset, message=message))


def is_collecting() -> bool:
    return _ERROR_SINK.get() is not None


@contextmanager
def collect_errors() -> Iterator[list[ParseError]]:
    errors: list[ParseError] = []
    token = _ERROR_SINK.set(errors)
    try:
        yield errors
    finally:
        _ERROR_SINK.reset(token)
