"""Split text into preserved and plain regions.

Preserve elements (`pre`, `textarea`, `script`, `style` by default) are cut
out whole, opening and closing tag included, so later passes only ever see
the plain markup around them. Segmentation is lossless: joining the region
texts in order gives back the input exactly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING

from .errors import emit_error

if TYPE_CHECKING:
    from collections.abc import Collection


class RegionKind(Enum):
    PRESERVED = "preserved"
    PLAIN = "plain"


@dataclass(frozen=True, slots=True)
class Region:
    kind: RegionKind
    text: str
    # Offset of the region in the segmented text.
    start: int = 0

    @property
    def preserved(self) -> bool:
        return self.kind is RegionKind.PRESERVED


@lru_cache(maxsize=32)
def _preserve_open_pattern(tags: frozenset[str]) -> re.Pattern[str]:
    # Longest names first so a shorter name never shadows a longer one.
    names = "|".join(re.escape(t) for t in sorted(tags, key=lambda t: (-len(t), t)))
    return re.compile(rf"<({names})(?=[ \t\n\r\f/>]|\Z)", re.IGNORECASE)


@lru_cache(maxsize=32)
def _close_tag_pattern(name: str) -> re.Pattern[str]:
    return re.compile(re.escape(f"</{name}>"), re.IGNORECASE)


def segment(text: str, preserve_tags: Collection[str]) -> list[Region]:
    """Partition `text` into an ordered list of regions.

    A preserve element whose opening tag or closing tag is missing turns the
    rest of the input, from its `<` on, into one trailing preserved region.
    """

    tags = frozenset(t.lower() for t in preserve_tags)
    if not text:
        return []
    if not tags:
        return [Region(RegionKind.PLAIN, text, 0)]

    pattern = _preserve_open_pattern(tags)
    regions: list[Region] = []
    pos = 0
    n = len(text)

    while pos < n:
        m = pattern.search(text, pos)
        if m is None:
            break

        at = m.start()
        if at > pos:
            regions.append(Region(RegionKind.PLAIN, text[pos:at], pos))

        name = m.group(1).lower()
        if name not in tags:
            regions.append(Region(RegionKind.PLAIN, text[at : m.end()], at))
            pos = m.end()
            continue

        gt = text.find(">", m.end())
        if gt == -1:
            emit_error("unterminated-preserve-element", offset=at, message=f"<{name}> start tag never ends")
            regions.append(Region(RegionKind.PRESERVED, text[at:], at))
            pos = n
            break

        close_tag = f"</{name}>"
        close = _close_tag_pattern(name).search(text, gt + 1)
        if close is None:
            emit_error("unterminated-preserve-element", offset=at, message=f"<{name}> has no {close_tag}")
            regions.append(Region(RegionKind.PRESERVED, text[at:], at))
            pos = n
            break

        end = close.end()
        regions.append(Region(RegionKind.PRESERVED, text[at:end], at))
        pos = end

    if pos < n:
        regions.append(Region(RegionKind.PLAIN, text[pos:], pos))
    return regions
