"""Top-level minify entry points.

Pipeline: doctype normalization, keep-marker extraction, segmentation, then
per plain region comment stripping, attribute normalization and whitespace
collapsing, and finally reassembly with the protected comments restored.
Preserved regions are copied byte for byte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .attributes import normalize_attributes
from .comments import strip_comments
from .errors import collect_errors, emit_error, is_collecting
from .markers import extract_markers, normalize_doctype
from .options import DEFAULT_OPTIONS, MinifyOptions
from .reassemble import reassemble
from .scanner import scan
from .segmenter import Region, RegionKind, segment
from .tokens import TokenKind
from .whitespace import collapse_whitespace

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .errors import ParseError


def _resolve_options(options: MinifyOptions | Mapping[str, Any] | None, overrides: dict[str, Any]) -> MinifyOptions:
    if options is None:
        resolved = DEFAULT_OPTIONS
    elif isinstance(options, MinifyOptions):
        resolved = options
    else:
        resolved = MinifyOptions.from_mapping(options)
    if overrides:
        resolved = resolved.replace(**overrides)
    return resolved


_UNTERMINATED_CODES = {
    TokenKind.COMMENT: "eof-in-comment",
    TokenKind.DECLARATION: "eof-in-declaration",
}


def _report_malformed(region: Region) -> None:
    for token in scan(region.text):
        if not token.terminated:
            code = _UNTERMINATED_CODES.get(token.kind, "eof-in-tag")
            emit_error(code, offset=region.start + token.start, message=f"{code}: {token.text[:20]!r}")


def minify_region(text: str, options: MinifyOptions) -> str:
    """Minify one plain region."""

    if options.remove_comments:
        text = strip_comments(text)
    text = normalize_attributes(text, options)
    if options.collapse_whitespace:
        text = collapse_whitespace(text)
    return text


def minify(text: Any, options: MinifyOptions | Mapping[str, Any] | None = None, **overrides: Any) -> str:
    """Minify HTML-like text.

    `options` may be a `MinifyOptions`, a mapping of option names (camelCase
    or snake_case, unknown names ignored) or None for the defaults. Keyword
    overrides are applied on top.

    Input that is empty or not a `str` gives "". Malformed markup is passed
    through; it never raises.
    """

    if not isinstance(text, str) or not text:
        return ""

    opts = _resolve_options(options, overrides)

    text = normalize_doctype(text)
    text, placeholders = extract_markers(text, opts.keep_markers)

    collecting = is_collecting()
    regions: list[Region] = []
    for region in segment(text, opts.preserve_tags):
        if region.kind is RegionKind.PRESERVED:
            regions.append(region)
            continue
        if collecting:
            _report_malformed(region)
        regions.append(Region(RegionKind.PLAIN, minify_region(region.text, opts), region.start))

    return reassemble(regions, placeholders)


def minify_with_errors(
    text: Any, options: MinifyOptions | Mapping[str, Any] | None = None, **overrides: Any
) -> tuple[str, list[ParseError]]:
    """Like `minify()`, also returning the malformed-input reports.

    Offsets refer to the text after doctype normalization and keep-marker
    extraction.
    """

    with collect_errors() as errors:
        out = minify(text, options, **overrides)
    return out, errors
