"""Minifier configuration.

`MinifyOptions` is an immutable record. Every option is an independent toggle
with a documented default, so the option matrix can be tested exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .constants import PRESERVE_ELEMENTS

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


# camelCase spellings accepted by `from_mapping()` and `minify(**overrides)`.
_OPTION_ALIASES: dict[str, str] = {
    "removeComments": "remove_comments",
    "collapseWhitespace": "collapse_whitespace",
    "trimAttrWhitespace": "trim_attr_whitespace",
    "removeEmptyAttributes": "remove_empty_attributes",
    "booleanAttrShortening": "boolean_attr_shortening",
    "removeDefaultType": "remove_default_type",
    "keepMarkers": "keep_markers",
    "preserveTags": "preserve_tags",
}


@dataclass(frozen=True, slots=True)
class MinifyOptions:
    remove_comments: bool
    collapse_whitespace: bool
    trim_attr_whitespace: bool
    remove_empty_attributes: bool
    boolean_attr_shortening: bool
    remove_default_type: bool
    keep_markers: frozenset[str]
    preserve_tags: frozenset[str]

    def __init__(
        self,
        *,
        remove_comments: bool = True,
        collapse_whitespace: bool = True,
        trim_attr_whitespace: bool = True,
        remove_empty_attributes: bool = False,
        boolean_attr_shortening: bool = False,
        remove_default_type: bool = True,
        keep_markers: Iterable[str] = (),
        preserve_tags: Iterable[str] = PRESERVE_ELEMENTS,
    ) -> None:
        object.__setattr__(self, "remove_comments", bool(remove_comments))
        object.__setattr__(self, "collapse_whitespace", bool(collapse_whitespace))
        object.__setattr__(self, "trim_attr_whitespace", bool(trim_attr_whitespace))
        object.__setattr__(self, "remove_empty_attributes", bool(remove_empty_attributes))
        object.__setattr__(self, "boolean_attr_shortening", bool(boolean_attr_shortening))
        object.__setattr__(self, "remove_default_type", bool(remove_default_type))
        object.__setattr__(self, "keep_markers", frozenset(str(m) for m in keep_markers if str(m)))
        object.__setattr__(self, "preserve_tags", frozenset(str(t).lower() for t in preserve_tags if str(t)))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> MinifyOptions:
        """Build options from a mapping of camelCase or snake_case names.

        Unrecognized keys are ignored; omitted keys take their defaults.
        """

        return cls(**_known_options(mapping))

    def replace(self, **changes: Any) -> MinifyOptions:
        values: dict[str, Any] = {name: getattr(self, name) for name in _FIELD_NAMES}
        values.update(_known_options(changes))
        return MinifyOptions(**values)


_FIELD_NAMES: tuple[str, ...] = (
    "remove_comments",
    "collapse_whitespace",
    "trim_attr_whitespace",
    "remove_empty_attributes",
    "boolean_attr_shortening",
    "remove_default_type",
    "keep_markers",
    "preserve_tags",
)


def _known_options(mapping: Mapping[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in mapping.items():
        name = _OPTION_ALIASES.get(key, key)
        if name in _FIELD_NAMES:
            out[name] = value
    return out


DEFAULT_OPTIONS = MinifyOptions()
