"""Forward scanner for HTML-like text.

The scanner turns text into a flat list of tokens without building a tree.
It never fails: markup that is cut off by the end of the input becomes a
token with `terminated=False`, which every pass copies verbatim.

All scan positions are locals of the call, so concurrent scans of unrelated
inputs cannot interfere.
"""

from __future__ import annotations

from .constants import HTML_WHITESPACE
from .tokens import Attribute, Token, TokenKind


def _is_ascii_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _skip_whitespace(text: str, pos: int, end: int) -> int:
    while pos < end and text[pos] in HTML_WHITESPACE:
        pos += 1
    return pos


def _parse_attribute_list(text: str, pos: int, end: int) -> tuple[list[Attribute], str, bool, int]:
    """Parse attributes from `pos` up to the first `>` outside a quoted value.

    Returns `(attrs, trailing, self_closing, gt)` where `trailing` is the
    text between the last attribute and the tag end (minus a self-closing
    slash) and `gt` is the index of the closing `>`, or -1 if `end` was
    reached first.
    """

    attrs: list[Attribute] = []
    while True:
        leading_start = pos
        # A `/` that does not end the tag is a parse error that behaves like whitespace.
        while pos < end:
            ch = text[pos]
            if ch in HTML_WHITESPACE:
                pos += 1
            elif ch == "/" and pos + 1 < end and text[pos + 1] != ">":
                pos += 1
            else:
                break
        leading = text[leading_start:pos]

        if pos >= end:
            return attrs, leading, False, -1
        if text[pos] == ">":
            return attrs, leading, False, pos
        if text[pos] == "/":
            # "/>" or a slash right before the end of the raw attribute text.
            gt = pos + 1 if pos + 1 < end else -1
            return attrs, leading, True, gt

        name_start = pos
        pos += 1  # The first character always belongs to the name, even `=` or a quote.
        while pos < end:
            ch = text[pos]
            if ch in HTML_WHITESPACE or ch == "/" or ch == ">" or ch == "=":
                break
            pos += 1
        name = text[name_start:pos]

        eq_start = pos
        look = _skip_whitespace(text, pos, end)
        if look >= end or text[look] != "=":
            attrs.append(Attribute(leading, name))
            continue

        pos = _skip_whitespace(text, look + 1, end)
        # `name=` directly at the tag boundary (`>` or `/>`) has no value.
        at_boundary = (
            pos >= end or text[pos] == ">" or (text[pos] == "/" and (pos + 1 >= end or text[pos + 1] == ">"))
        )
        if at_boundary:
            # Whitespace after the `=` stays with the tag end.
            equals_end = look + 1
            attrs.append(Attribute(leading, name, text[eq_start:equals_end], "", ""))
            pos = equals_end
            continue

        equals = text[eq_start:pos]
        quote = text[pos]
        if quote == '"' or quote == "'":
            close = text.find(quote, pos + 1, end)
            if close == -1:
                attrs.append(Attribute(leading, name, equals, text[pos + 1 : end], quote, closed=False))
                return attrs, "", False, -1
            attrs.append(Attribute(leading, name, equals, text[pos + 1 : close], quote))
            pos = close + 1
            continue

        value_start = pos
        while pos < end:
            ch = text[pos]
            if ch in HTML_WHITESPACE or ch == ">":
                break
            pos += 1
        attrs.append(Attribute(leading, name, equals, text[value_start:pos], ""))


def parse_attributes(raw: str) -> tuple[list[Attribute], str, bool]:
    """Parse the raw attribute text of a start tag.

    `raw` is everything between the tag name and the closing `>`. Returns the
    attributes, the trailing whitespace and whether the tag is self-closed.
    Joining `leading + raw` of each attribute, then the trailing text, then
    "/" if self-closed reproduces `raw` exactly.
    """

    attrs, trailing, self_closing, _gt = _parse_attribute_list(raw, 0, len(raw))
    return attrs, trailing, self_closing


def comment_end(text: str, i: int) -> int:
    """Return the index just past the comment opening at `text[i]`, or -1 if it never closes."""

    # `<!-->` and `<!--->` are complete (empty) comments.
    if text.startswith(">", i + 4):
        return i + 5
    if text.startswith("->", i + 4):
        return i + 6
    close = text.find("-->", i + 4)
    return -1 if close == -1 else close + 3


def _scan_markup(text: str, i: int, n: int) -> Token | None:
    """Scan the markup starting at `text[i] == "<"`, or return None for a literal `<`."""

    if i + 1 >= n:
        return None
    nxt = text[i + 1]

    if nxt == "!":
        if text.startswith("<!--", i):
            end = comment_end(text, i)
            if end == -1:
                return Token(TokenKind.COMMENT, i, n, text[i:], terminated=False)
            return Token(TokenKind.COMMENT, i, end, text[i:end])
        return _scan_declaration(text, i, n)

    if nxt == "?":
        return _scan_declaration(text, i, n)

    if nxt == "/":
        if i + 2 >= n or not _is_ascii_alpha(text[i + 2]):
            return None
        name_end = i + 2
        while name_end < n and text[name_end] not in HTML_WHITESPACE and text[name_end] not in "/>":
            name_end += 1
        gt = text.find(">", name_end)
        if gt == -1:
            return Token(TokenKind.TAG_CLOSE, i, n, text[i:], name=text[i + 2 : name_end], terminated=False)
        return Token(TokenKind.TAG_CLOSE, i, gt + 1, text[i : gt + 1], name=text[i + 2 : name_end])

    if not _is_ascii_alpha(nxt):
        return None

    name_end = i + 1
    while name_end < n and text[name_end] not in HTML_WHITESPACE and text[name_end] not in "/>":
        name_end += 1
    name = text[i + 1 : name_end]

    _attrs, _trailing, _self_closing, gt = _parse_attribute_list(text, name_end, n)
    if gt == -1:
        # An unbalanced quote hid the tag end; fall back to the first `>`.
        gt = text.find(">", name_end)
    if gt == -1:
        return Token(TokenKind.TAG_OPEN, i, n, text[i:], name=name, raw_attrs=text[name_end:], terminated=False)

    raw = text[name_end:gt]
    self_closing = parse_attributes(raw)[2]
    if self_closing:
        raw = raw[:-1]
    return Token(
        TokenKind.TAG_OPEN,
        i,
        gt + 1,
        text[i : gt + 1],
        name=name,
        raw_attrs=raw,
        self_closing=self_closing,
    )


def _scan_declaration(text: str, i: int, n: int) -> Token:
    gt = text.find(">", i + 2)
    if gt == -1:
        return Token(TokenKind.DECLARATION, i, n, text[i:], terminated=False)
    return Token(TokenKind.DECLARATION, i, gt + 1, text[i : gt + 1])


def scan(text: str) -> list[Token]:
    """Split `text` into tokens covering it exactly, in order."""

    tokens: list[Token] = []
    n = len(text)
    pos = 0
    text_start = 0

    while True:
        lt = text.find("<", pos)
        if lt == -1:
            break
        token = _scan_markup(text, lt, n)
        if token is None:
            pos = lt + 1
            continue
        if lt > text_start:
            tokens.append(Token(TokenKind.TEXT, text_start, lt, text[text_start:lt]))
        tokens.append(token)
        pos = text_start = token.end

    if text_start < n:
        tokens.append(Token(TokenKind.TEXT, text_start, n, text[text_start:]))
    return tokens
