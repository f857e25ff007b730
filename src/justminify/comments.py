from __future__ import annotations

from .scanner import scan
from .tokens import TokenKind


def _is_conditional_comment(text: str) -> bool:
    """IE conditional comments (`<!--[if IE]>`, `<!--<![endif]-->`) carry markup."""

    body = text[4:].lstrip(" \t\n\r\f")
    return text[4:].startswith("[if") or body.startswith("<!")


def strip_comments(text: str) -> str:
    """Drop every terminated comment except IE conditional comments."""

    if "<!--" not in text:
        return text

    out: list[str] = []
    for token in scan(text):
        if token.kind is TokenKind.COMMENT and token.terminated and not _is_conditional_comment(token.text):
            continue
        out.append(token.text)
    return "".join(out)
