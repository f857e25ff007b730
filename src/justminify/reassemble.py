from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import PlaceholderError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .segmenter import Region


class PlaceholderMap:
    """Ordered mapping of placeholder token -> original protected text."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def add(self, token: str, original: str) -> None:
        if token in self._items:
            raise PlaceholderError(token, 2)
        self._items[token] = original

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __getitem__(self, token: str) -> str:
        return self._items[token]

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._items.items())

    def restore(self, text: str) -> str:
        """Substitute every token back; each must occur exactly once."""

        for token, original in self._items.items():
            count = text.count(token)
            if count != 1:
                raise PlaceholderError(token, count)
            text = text.replace(token, original, 1)
        return text


def reassemble(regions: Iterable[Region], placeholders: PlaceholderMap | None = None) -> str:
    text = "".join(region.text for region in regions)
    if placeholders:
        text = placeholders.restore(text)
    return text
