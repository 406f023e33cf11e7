from __future__ import annotations

from collections.abc import Iterable, Iterator


class OrderedSet:
    """A set of strings that remembers first-insertion order."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[str] | None = None) -> None:
        self._items: dict[str, None] = {}
        for item in items or ():
            self.add(item)

    def add(self, item: str) -> None:
        # Re-adding keeps the original position.
        self._items.setdefault(item, None)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"

    def to_list(self) -> list[str]:
        return list(self._items)
