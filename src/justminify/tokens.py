from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class _StrEnum(str, Enum):
    """Backport of enum.StrEnum (Python 3.11+)."""


class TokenKind(_StrEnum):
    TAG_OPEN = "tag_open"
    TAG_CLOSE = "tag_close"
    TEXT = "text"
    COMMENT = "comment"
    # <!doctype>, <![CDATA[...]]>, <?...?> and other bogus markup.
    DECLARATION = "declaration"


class Token:
    """A span of scanned markup.

    `start`/`end` index into the scanned string; `text` is that slice. Tag
    tokens also carry the tag name and, for start tags, the raw attribute text
    (without the self-closing slash) and the self-closing marker.
    """

    __slots__ = ("end", "kind", "name", "raw_attrs", "self_closing", "start", "terminated", "text")

    kind: TokenKind
    start: int
    end: int
    text: str
    name: str
    raw_attrs: str
    self_closing: bool
    terminated: bool

    def __init__(
        self,
        kind: TokenKind,
        start: int,
        end: int,
        text: str,
        *,
        name: str = "",
        raw_attrs: str = "",
        self_closing: bool = False,
        terminated: bool = True,
    ) -> None:
        self.kind = kind
        self.start = start
        self.end = end
        self.text = text
        self.name = name
        self.raw_attrs = raw_attrs
        self.self_closing = self_closing
        self.terminated = terminated

    @property
    def is_tag(self) -> bool:
        return self.terminated and (self.kind is TokenKind.TAG_OPEN or self.kind is TokenKind.TAG_CLOSE)

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.text!r})"


@dataclass(frozen=True, slots=True)
class Attribute:
    """One attribute of a start tag, exactly as written.

    `leading` is the whitespace before the name and `equals` everything
    between the name and the value (`=` plus any surrounding whitespace), or ""
    when the attribute has no `=`. `value` is None for a bare attribute and
    excludes the quotes; `quote` is `"`, `'`, or "" for unquoted values.
    """

    leading: str
    name: str
    equals: str = ""
    value: str | None = None
    quote: str = ""
    # False when a quoted value runs to the end of the tag without its closing quote.
    closed: bool = True

    @property
    def has_value(self) -> bool:
        return bool(self.equals)

    @property
    def raw(self) -> str:
        if not self.equals:
            return self.name
        value = self.value or ""
        end_quote = self.quote if self.closed else ""
        return f"{self.name}{self.equals}{self.quote}{value}{end_quote}"
