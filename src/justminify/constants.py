"""Fixed vocabulary used by the minifier passes."""

from __future__ import annotations

# Elements without an end tag or content.
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Phrasing elements that keep one separating space when they were
# whitespace-separated in the input.
INLINE_ELEMENTS: frozenset[str] = frozenset(
    {
        "a",
        "abbr",
        "b",
        "bdi",
        "bdo",
        "cite",
        "code",
        "data",
        "dfn",
        "em",
        "i",
        "kbd",
        "label",
        "mark",
        "q",
        "rp",
        "rt",
        "rtc",
        "ruby",
        "s",
        "samp",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "time",
        "u",
        "var",
    }
)

PRESERVE_ELEMENTS: frozenset[str] = frozenset({"pre", "textarea", "script", "style"})

BOOLEAN_ATTRIBUTES: frozenset[str] = frozenset(
    {
        "disabled",
        "checked",
        "selected",
        "readonly",
        "required",
        "autoplay",
        "controls",
        "hidden",
        "multiple",
        "novalidate",
    }
)

# `type` values that match the HTML default and can be dropped.
DEFAULT_TYPE_VALUES: frozenset[str] = frozenset({"text/javascript", "text/css"})

HTML_WHITESPACE: frozenset[str] = frozenset({" ", "\t", "\n", "\r", "\f"})

NBSP = "\u00a0"
