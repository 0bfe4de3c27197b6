"""Segment trees over integer arrays: sums, minima, parity, search, subarrays."""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, NamedTuple, Optional, TypeVar

N = TypeVar("N")


class MinCount(NamedTuple):
    minimum: int
    count: int


class ParityCount(NamedTuple):
    odd: int
    even: int


class Segment(NamedTuple):
    prefix: int
    suffix: int
    best: int
    total: int


class SumMax(NamedTuple):
    total: int
    maximum: int


class _SegmentTree(Generic[N]):
    """Point-update, range-query tree over 0-based positions."""

    def __init__(
        self,
        values: Iterable[int],
        leaf: Callable[[int], N],
        combine: Callable[[N, N], N],
    ) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("segment tree needs at least one value")
        self._leaf = leaf
        self._combine = combine
        self._nodes: list[Optional[N]] = [None] * (4 * len(self._values))
        self._build(1, 0, len(self._values) - 1)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, pos: int) -> int:
        self._check_pos(pos)
        return self._values[pos]

    def _node(self, index: int) -> N:
        node = self._nodes[index]
        assert node is not None
        return node

    def _build(self, index: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._nodes[index] = self._leaf(self._values[lo])
            return
        mid = (lo + hi) // 2
        self._build(2 * index, lo, mid)
        self._build(2 * index + 1, mid + 1, hi)
        self._nodes[index] = self._combine(self._node(2 * index), self._node(2 * index + 1))

    def _check_pos(self, pos: int) -> None:
        if not 0 <= pos < len(self._values):
            raise IndexError(f"position {pos} out of range")

    def _check_range(self, left: int, right: int) -> None:
        if not 0 <= left <= right < len(self._values):
            raise IndexError(f"range [{left}, {right}] out of range")

    def _set(self, pos: int, value: int) -> None:
        self._check_pos(pos)
        self._values[pos] = value
        self._update(1, 0, len(self._values) - 1, pos)

    def _update(self, index: int, lo: int, hi: int, pos: int) -> None:
        if lo == hi:
            self._nodes[index] = self._leaf(self._values[lo])
            return
        mid = (lo + hi) // 2
        if pos <= mid:
            self._update(2 * index, lo, mid, pos)
        else:
            self._update(2 * index + 1, mid + 1, hi, pos)
        self._nodes[index] = self._combine(self._node(2 * index), self._node(2 * index + 1))

    def _query(self, left: int, right: int) -> N:
        self._check_range(left, right)
        result = self._collect(1, 0, len(self._values) - 1, left, right)
        assert result is not None
        return result

    def _collect(self, index: int, lo: int, hi: int, left: int, right: int) -> Optional[N]:
        if left > hi or right < lo:
            return None
        if left <= lo and hi <= right:
            return self._node(index)
        mid = (lo + hi) // 2
        a = self._collect(2 * index, lo, mid, left, right)
        b = self._collect(2 * index + 1, mid + 1, hi, left, right)
        if a is None:
            return b
        if b is None:
            return a
        return self._combine(a, b)


class SumSegmentTree(_SegmentTree[int]):
    """Range sums with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, int, operator.add)

    def update(self, pos: int, value: int) -> None:
        self._set(pos, value)

    def query(self, left: int, right: int) -> int:
        """Sum of positions ``left..right`` inclusive."""
        return self._query(left, right)


def _merge_min(a: MinCount, b: MinCount) -> MinCount:
    if a.minimum == b.minimum:
        return MinCount(a.minimum, a.count + b.count)
    return a if a.minimum < b.minimum else b


class MinCountSegmentTree(_SegmentTree[MinCount]):
    """Range minimum together with how often it occurs."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, lambda v: MinCount(v, 1), _merge_min)

    def query(self, left: int, right: int) -> MinCount:
        return self._query(left, right)


def _parity_leaf(value: int) -> ParityCount:
    odd = value % 2
    return ParityCount(odd, 1 - odd)


def _merge_parity(a: ParityCount, b: ParityCount) -> ParityCount:
    return ParityCount(a.odd + b.odd, a.even + b.even)


class ParitySegmentTree(_SegmentTree[ParityCount]):
    """Counts of odd and even values in a range."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, _parity_leaf, _merge_parity)

    def update(self, pos: int, value: int) -> None:
        self._set(pos, value)

    def count_even(self, left: int, right: int) -> int:
        return self._query(left, right).even

    def count_odd(self, left: int, right: int) -> int:
        return self._query(left, right).odd


class FirstAtLeastTree(_SegmentTree[int]):
    """Range maxima used to find the first value at least some bound."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, int, max)

    def find_first(self, x: int) -> Optional[int]:
        """Lowest position holding a value ``>= x``, or ``None``."""
        if self._node(1) < x:
            return None
        index, lo, hi = 1, 0, len(self._values) - 1
        while lo != hi:
            mid = (lo + hi) // 2
            if self._node(2 * index) >= x:
                index, hi = 2 * index, mid
            else:
                index, lo = 2 * index + 1, mid + 1
        return lo

    def subtract(self, pos: int, amount: int) -> None:
        self._set(pos, self._values[pos] - amount if 0 <= pos < len(self._values) else pos)


def allocate(capacities: Iterable[int], requests: Iterable[int]) -> list[int]:
    """Give each request the first slot with enough room left.

    Answers are 1-based slot numbers, or ``0`` where no slot has room.
    """
    tree = FirstAtLeastTree(capacities)
    answers: list[int] = []
    for need in requests:
        pos = tree.find_first(need)
        if pos is None:
            answers.append(0)
        else:
            tree.subtract(pos, need)
            answers.append(pos + 1)
    return answers


def _merge_segment(a: Segment, b: Segment) -> Segment:
    return Segment(
        prefix=max(a.prefix, a.total + b.prefix),
        suffix=max(b.suffix, b.total + a.suffix),
        best=max(a.best, b.best, a.suffix + b.prefix),
        total=a.total + b.total,
    )


class MaxSubarrayTree(_SegmentTree[Segment]):
    """Maximum sum of a non-empty contiguous run, with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, lambda v: Segment(v, v, v, v), _merge_segment)

    def update(self, pos: int, value: int) -> None:
        self._set(pos, value)

    def query(self, left: int, right: int) -> int:
        return self._query(left, right).best

    def best(self) -> int:
        return self._node(1).best


class LazyAssignTree:
    """Range assignment with range sum and maximum; every position starts at 0."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._sum = [0] * (4 * size)
        self._max = [0] * (4 * size)
        self._pending: list[Optional[int]] = [None] * (4 * size)

    def __len__(self) -> int:
        return self._size

    def _check_range(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._size:
            raise IndexError(f"range [{left}, {right}] out of range")

    def _apply(self, index: int, lo: int, hi: int, value: int) -> None:
        self._sum[index] = (hi - lo + 1) * value
        self._max[index] = value
        self._pending[index] = value

    def _push(self, index: int, lo: int, hi: int) -> None:
        value = self._pending[index]
        if value is None or lo == hi:
            return
        mid = (lo + hi) // 2
        self._apply(2 * index, lo, mid, value)
        self._apply(2 * index + 1, mid + 1, hi, value)
        self._pending[index] = None

    def assign(self, left: int, right: int, value: int) -> None:
        """Set every position in ``left..right`` to ``value``."""
        self._check_range(left, right)
        self._assign(1, 0, self._size - 1, left, right, value)

    def _assign(self, index: int, lo: int, hi: int, left: int, right: int, value: int) -> None:
        if left > hi or right < lo:
            return
        if left <= lo and hi <= right:
            self._apply(index, lo, hi, value)
            return
        self._push(index, lo, hi)
        mid = (lo + hi) // 2
        self._assign(2 * index, lo, mid, left, right, value)
        self._assign(2 * index + 1, mid + 1, hi, left, right, value)
        self._sum[index] = self._sum[2 * index] + self._sum[2 * index + 1]
        self._max[index] = max(self._max[2 * index], self._max[2 * index + 1])

    def query(self, left: int, right: int) -> SumMax:
        """Sum and maximum over ``left..right`` inclusive."""
        self._check_range(left, right)
        result = self._query(1, 0, self._size - 1, left, right)
        assert result is not None
        return result

    def _query(self, index: int, lo: int, hi: int, left: int, right: int) -> Optional[SumMax]:
        if left > hi or right < lo:
            return None
        if left <= lo and hi <= right:
            return SumMax(self._sum[index], self._max[index])
        self._push(index, lo, hi)
        mid = (lo + hi) // 2
        a = self._query(2 * index, lo, mid, left, right)
        b = self._query(2 * index + 1, mid + 1, hi, left, right)
        if a is None:
            return b
        if b is None:
            return a
        return SumMax(a.total + b.total, max(a.maximum, b.maximum))