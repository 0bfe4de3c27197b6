"""Recursive search: subsequences, N-queens, subset sums, bracket repair."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")


def subsequences(values: Iterable[T]) -> Iterator[list[T]]:
    """Yield every subsequence; each element is first left out, then taken."""
    items = list(values)
    chosen: list[T] = []

    def walk(level: int) -> Iterator[list[T]]:
        if level == len(items):
            yield list(chosen)
            return
        yield from walk(level + 1)
        chosen.append(items[level])
        yield from walk(level + 1)
        chosen.pop()

    yield from walk(0)


def _queen_placements(n: int) -> Iterator[list[int]]:
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            pc != col and abs(pr - row) != abs(pc - col)
            for pr, pc in enumerate(columns)
        )

    def place(row: int) -> Iterator[list[int]]:
        if row == n:
            yield list(columns)
            return
        for col in range(n):
            if safe(row, col):
                columns.append(col)
                yield from place(row + 1)
                columns.pop()

    yield from place(0)


def count_n_queens(n: int) -> int:
    """Number of ways to place ``n`` non-attacking queens on an n×n board."""
    return sum(1 for _ in _queen_placements(n))


def n_queens_boards(n: int) -> list[list[str]]:
    """All N-queens solutions as rows of 'Q' and '.'."""
    return [
        ["".join("Q" if c == col else "." for c in range(n)) for col in placement]
        for placement in _queen_placements(n)
    ]


def count_subsets_with_sum(values: Iterable[int], target: int) -> int:
    """Number of subsets (by position, empty included) whose sum is ``target``."""
    counts: Counter[int] = Counter({0: 1})
    for v in values:
        extended = counts.copy()
        for total, ways in counts.items():
            extended[total + v] += ways
        counts = extended
    return counts[target]


def min_bracket_fixes(s: Sequence[str]) -> int:
    """Brackets to insert so ``s`` balances; any char but '(' acts as ')'."""
    open_count = 0
    unmatched = 0
    for ch in s:
        if ch == "(":
            open_count += 1
        elif open_count:
            open_count -= 1
        else:
            unmatched += 1
    return unmatched + open_count