from .attributes import normalize_attributes, rewrite_start_tag
from .comments import strip_comments
from .constants import BOOLEAN_ATTRIBUTES, INLINE_ELEMENTS, PRESERVE_ELEMENTS, VOID_ELEMENTS
from .errors import MinifyError, ParseError, PlaceholderError, collect_errors, emit_error
from .markers import extract_markers, normalize_doctype
from .minifier import minify, minify_region, minify_with_errors
from .options import DEFAULT_OPTIONS, MinifyOptions
from .reassemble import PlaceholderMap, reassemble
from .scanner import parse_attributes, scan
from .segmenter import Region, RegionKind, segment
from .tokens import Attribute, Token, TokenKind
from .whitespace import collapse_text, collapse_whitespace

__all__ = [
    "BOOLEAN_ATTRIBUTES",
    "DEFAULT_OPTIONS",
    "INLINE_ELEMENTS",
    "PRESERVE_ELEMENTS",
    "VOID_ELEMENTS",
    "Attribute",
    "MinifyError",
    "MinifyOptions",
    "ParseError",
    "PlaceholderError",
    "PlaceholderMap",
    "Region",
    "RegionKind",
    "Token",
    "TokenKind",
    "collapse_text",
    "collapse_whitespace",
    "collect_errors",
    "emit_error",
    "extract_markers",
    "minify",
    "minify_region",
    "minify_with_errors",
    "normalize_attributes",
    "normalize_doctype",
    "parse_attributes",
    "reassemble",
    "rewrite_start_tag",
    "scan",
    "segment",
    "strip_comments",
]
