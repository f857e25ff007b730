"""Whitespace collapsing for plain regions.

Text nodes are collapsed and trimmed, whitespace between markup is removed,
and a single space is put back where whitespace separated two inline tags.
Text containing a non-breaking space is left exactly as written.
"""

from __future__ import annotations

import re

from .constants import HTML_WHITESPACE, INLINE_ELEMENTS, NBSP
from .scanner import scan
from .tokens import Token, TokenKind

_HTML_WHITESPACE_CHARS = "".join(sorted(HTML_WHITESPACE))
_WS_RUN_RE = re.compile(r"[ \t\n\r\f]+")
_FORMATTING_WS_RE = re.compile(r"[\t\n\r\f]")


def collapse_spaces(text: str) -> str:
    """Replace each run of space, tab, CR, LF or FF with one space.

    Edges are kept; callers trim. NBSP and other Unicode spaces are content.
    """

    if "  " not in text and not _FORMATTING_WS_RE.search(text):
        return text
    return _WS_RUN_RE.sub(" ", text)


def collapse_text(text: str) -> str:
    """Collapse and trim one text node. Text with a NBSP is returned as is."""

    if NBSP in text:
        return text
    return collapse_spaces(text).strip(_HTML_WHITESPACE_CHARS)


def _is_inline_tag(token: Token | None) -> bool:
    return token is not None and token.is_tag and token.name.lower() in INLINE_ELEMENTS


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace in one plain region.

    Each text node is trimmed on its own, which also trims the region edges.
    A text node containing a NBSP is copied verbatim even at a region edge, so
    `"<p>x</p>  a\u00a0b  "` keeps the spaces around `a\u00a0b`. Unterminated
    markup at an edge is verbatim as well.
    """

    tokens = scan(text)
    out: list[str] = []

    for i, token in enumerate(tokens):
        if token.kind is not TokenKind.TEXT:
            out.append(token.text)
            continue

        collapsed = collapse_text(token.text)
        if collapsed:
            out.append(collapsed)
            continue

        # Whitespace-only node: dropped, except between two inline tags.
        prev = tokens[i - 1] if i > 0 else None
        nxt = tokens[i + 1] if i + 1 < len(tokens) else None
        if _is_inline_tag(prev) and _is_inline_tag(nxt):
            out.append(" ")

    return "".join(out)
