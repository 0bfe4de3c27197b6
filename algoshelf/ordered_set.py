"""A sorted set supporting lookup by rank and rank of a value."""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterable, Iterator


class IndexedSet:
    """Set of distinct integers kept in ascending order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items = sorted(set(values))

    def add(self, x: int) -> None:
        if x not in self:
            insort(self._items, x)

    def remove(self, x: int) -> None:
        """Remove ``x`` if present; absent values are ignored."""
        i = bisect_left(self._items, x)
        if i < len(self._items) and self._items[i] == x:
            del self._items[i]

    def find(self, k: int) -> int:
        """Return the ``k``-th smallest element (0-based)."""
        if not 0 <= k < len(self._items):
            raise IndexError(f"rank {k} out of range")
        return self._items[k]

    def position(self, x: int) -> int:
        """Return how many elements are smaller than ``x``."""
        return bisect_left(self._items, x)

    def __contains__(self, x: object) -> bool:
        i = bisect_left(self._items, x)  # type: ignore[arg-type]
        return i < len(self._items) and self._items[i] == x

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def run_queries(queries: Iterable[tuple[str, int]]) -> list[int]:
    """Apply ``add``/``remove``/``find``/``findpos`` queries to an empty set.

    Returns the answers of the ``find`` and ``findpos`` queries in order;
    a ``find`` out of range answers ``-1``. Unknown operations are skipped.
    """
    indexed = IndexedSet()
    answers: list[int] = []
    for op, x in queries:
        if op == "add":
            indexed.add(x)
        elif op == "remove":
            indexed.remove(x)
        elif op == "find":
            try:
                answers.append(indexed.find(x))
            except IndexError:
                answers.append(-1)
        elif op == "findpos":
            answers.append(indexed.position(x))
    return answers