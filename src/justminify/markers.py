"""Protected comments and doctype normalization.

Runs before segmentation. Comments that carry one of the configured keep
markers are lifted out of the text and replaced by placeholder tokens, so no
later pass can touch them; `reassemble()` puts them back.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .reassemble import PlaceholderMap
from .scanner import comment_end

if TYPE_CHECKING:
    from collections.abc import Collection

_DOCTYPE_RE = re.compile(r"\A[ \t\n\r\f]*<!doctype(?=[ \t\n\r\f>])([^>]*)>", re.IGNORECASE)
_WS_RUN_RE = re.compile(r"[ \t\n\r\f]+")

# Private-use code points never appear in generated output, so a prefix that
# is absent from the input cannot collide with anything.
_PLACEHOLDER_OPEN = "\ue000"
_PLACEHOLDER_CLOSE = "\ue001"


def contains_placeholder(text: str) -> bool:
    return _PLACEHOLDER_OPEN in text


def normalize_doctype(text: str) -> str:
    """Rewrite a leading doctype to its canonical spelling.

    `<!DOCTYPE   HTML >` becomes `<!doctype html>`; legacy doctypes keep their
    public/system identifiers with whitespace collapsed. Whitespace before the
    doctype is dropped. Text without a leading doctype is returned unchanged.
    """

    m = _DOCTYPE_RE.match(text)
    if m is None:
        return text

    rest = _WS_RUN_RE.sub(" ", m.group(1)).strip()
    if rest.lower() == "html":
        rest = "html"
    canonical = f"<!doctype {rest}>" if rest else "<!doctype>"
    return canonical + text[m.end() :]


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_" or ch == "-"


def _match_marker(text: str, pos: int, end: int, markers: Collection[str]) -> bool:
    """Return True if a marker starts as a whole word at `pos` and ends before `end`."""

    for marker in markers:
        if not text.startswith(marker, pos, end):
            continue
        after = pos + len(marker)
        if after < end and _is_word_char(text[after]) and _is_word_char(marker[-1]):
            continue
        return True
    return False


def _placeholder_prefix(text: str) -> str:
    prefix = _PLACEHOLDER_OPEN + "keep"
    while prefix in text:
        prefix = _PLACEHOLDER_OPEN + prefix
    return prefix


def extract_markers(text: str, markers: Collection[str]) -> tuple[str, PlaceholderMap]:
    """Replace every keep-marker comment with a placeholder token.

    A keep-marker comment is `<!--`, optional whitespace, one of `markers` as
    a whole word, anything, then `-->`. Unterminated comments are left alone.
    """

    placeholders = PlaceholderMap()
    if not markers or "<!--" not in text:
        return text, placeholders

    prefix = _placeholder_prefix(text)
    out: list[str] = []
    pos = 0

    while True:
        start = text.find("<!--", pos)
        if start == -1:
            break
        end = comment_end(text, start)
        if end == -1:
            break
        close = end - 3
        body = start + 4
        while body < close and text[body] in " \t\n\r\f":
            body += 1
        if body >= close or not _match_marker(text, body, close, markers):
            # Not protected; skip the whole comment, ending it where the scanner does.
            out.append(text[pos:end])
            pos = end
            continue

        token = f"{prefix}{len(placeholders)}{_PLACEHOLDER_CLOSE}"
        placeholders.add(token, text[start:end])
        out.append(text[pos:start])
        out.append(token)
        pos = end

    out.append(text[pos:])
    return "".join(out), placeholders
