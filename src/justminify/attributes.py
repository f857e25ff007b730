"""Start-tag attribute normalization for plain regions.

Only start tags are rewritten. Closing tags, text, comments and unterminated
markup are copied unchanged, and tag names are never altered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import BOOLEAN_ATTRIBUTES, DEFAULT_TYPE_VALUES, VOID_ELEMENTS
from .markers import contains_placeholder
from .scanner import parse_attributes, scan
from .tokens import Attribute, Token, TokenKind
from .whitespace import collapse_spaces

if TYPE_CHECKING:
    from .options import MinifyOptions


def _trim_attribute(attr: Attribute) -> Attribute:
    if not attr.has_value:
        return Attribute(" ", attr.name)
    value = attr.value or ""
    if attr.quote:
        value = collapse_spaces(value).strip(" ")
    return Attribute(" ", attr.name, "=", value, attr.quote, attr.closed)


def _is_empty(attr: Attribute) -> bool:
    # `name=""`, `name=''`, or a bare `name=` at the tag boundary.
    return attr.has_value and attr.closed and not attr.value


def _is_default_type(attr: Attribute) -> bool:
    if attr.name.lower() != "type" or not attr.has_value:
        return False
    return (attr.value or "").strip(" \t\n\r\f").lower() in DEFAULT_TYPE_VALUES


def rewrite_start_tag(token: Token, options: MinifyOptions) -> str:
    """Rebuild one start tag according to `options`.

    The result ends in `/>` if and only if the original tag was self-closed
    or the element is void.
    """

    attrs, trailing, stray_slash = parse_attributes(token.raw_attrs)
    if stray_slash:
        trailing += "/"

    kept: list[Attribute] = []
    for attr in attrs:
        if options.trim_attr_whitespace:
            attr = _trim_attribute(attr)
        if contains_placeholder(attr.raw):
            # A protected comment lives in this attribute; only whitespace may change.
            kept.append(attr)
            continue
        if options.remove_empty_attributes and _is_empty(attr):
            continue
        if options.remove_default_type and _is_default_type(attr):
            continue
        if options.boolean_attr_shortening and attr.has_value and attr.name.lower() in BOOLEAN_ATTRIBUTES:
            attr = Attribute(attr.leading, attr.name.lower())
        kept.append(attr)

    if options.trim_attr_whitespace:
        trailing = ""

    slash = token.self_closing or token.name.lower() in VOID_ELEMENTS
    parts = [f"<{token.name}"]
    parts.extend(attr.leading + attr.raw for attr in kept)
    parts.append(trailing)
    if slash:
        last = kept[-1] if kept else None
        if not trailing and last is not None and last.has_value and not last.quote and last.value:
            # `src=x/>` would read the slash back as part of the value.
            parts.append(" ")
        parts.append("/")
    parts.append(">")
    return "".join(parts)


def normalize_attributes(text: str, options: MinifyOptions) -> str:
    if "<" not in text:
        return text

    out: list[str] = []
    for token in scan(text):
        if token.kind is TokenKind.TAG_OPEN and token.terminated:
            out.append(rewrite_start_tag(token, options))
        else:
            out.append(token.text)
    return "".join(out)
