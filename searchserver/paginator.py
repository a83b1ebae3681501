"""Split a sequence of results into fixed-size pages."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


class Page:
    """One page of items; printing it concatenates the items."""

    def __init__(self, items: Sequence[Any]) -> None:
        self._items = list(items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "".join(str(item) for item in self._items)


class Paginator:
    """Pages of at most page_size items each, in order."""

    def __init__(self, items: Sequence[Any], page_size: int) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._pages = [
            Page(items[start:start + page_size])
            for start in range(0, len(items), page_size)
        ]

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)


def paginate(container: Iterable[Any], page_size: int) -> Paginator:
    """Split any iterable into pages of the given size."""
    return Paginator(list(container), page_size)