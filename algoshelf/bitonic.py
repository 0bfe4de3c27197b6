"""Search in bitonic sequences (strictly rising, then strictly falling)."""

from __future__ import annotations

import operator
from bisect import bisect_left
from typing import Sequence


def find_peak(values: Sequence[int]) -> int:
    """Return the index of the peak of a bitonic sequence."""
    if not values:
        raise ValueError("sequence is empty")
    peak = 0
    lo, hi = 1, len(values) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if values[mid] > values[mid - 1]:
            peak = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return peak


def bitonic_search(values: Sequence[int], key: int) -> list[int]:
    """Return indices where ``key`` occurs: at most one on each side of the peak."""
    peak = find_peak(values)
    found: list[int] = []
    i = bisect_left(values, key, 0, peak + 1)
    if i <= peak and values[i] == key:
        found.append(i)
    j = bisect_left(values, -key, peak + 1, len(values), key=operator.neg)
    if j < len(values) and values[j] == key:
        found.append(j)
    return found