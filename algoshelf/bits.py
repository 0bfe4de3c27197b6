"""Bit manipulation helpers."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")

_WORD = 64
_WORD_MASK = (1 << _WORD) - 1
_MASK_BITS = 60
_MASK_FULL = (1 << _MASK_BITS) - 1


def binary_representation(n: int) -> str:
    """Binary digits of ``n`` without leading zeros; empty for ``n <= 0``."""
    return format(n, "b") if n > 0 else ""


def odd_one_out(values: Iterable[int]) -> int:
    """XOR of all values: the one element occurring an odd number of times."""
    return reduce(xor, values, 0)


def sum_of_bits(x: int) -> int:
    """Total number of set bits over all integers in ``0..x``."""
    if x < 0:
        return 0
    total = x + 1
    ones = 0
    for i in range(_MASK_BITS):
        period = 1 << (i + 1)
        half = 1 << i
        ones += (total // period) * half + max(total % period - half, 0)
    return ones


def find_kth_one(k: int) -> int:
    """Smallest ``x`` such that ``0..x`` hold at least ``k`` set bits."""
    if k < 1:
        raise ValueError("k must be positive")
    lo, hi, answer = 0, k, -1
    while lo <= hi:
        mid = (lo + hi) // 2
        if sum_of_bits(mid) >= k:
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def kth_one_position(x: int, k: int) -> int:
    """Index, within the binary string of ``x``, of its ``k``-th set bit (1-based)."""
    seen = 0
    for index, digit in enumerate(binary_representation(x)):
        if digit == "1":
            seen += 1
            if seen == k:
                return index
    raise ValueError(f"{x} has fewer than {k} set bits")


def total_bits_till(x: int) -> int:
    """Length of the binary strings of ``0, 1, ..., x`` written one after another."""
    if x < 0:
        raise ValueError("x must not be negative")
    total = 1  # "0"
    length = 1
    start = 1
    while start <= x:
        end = 2 * start - 1
        total += length * (min(end, x) - start + 1)
        start = end + 1
        length += 1
    return total


def kth_one_in_concatenation(k: int) -> int:
    """0-based position of the ``k``-th '1' in "0" + "1" + "10" + "11" + ..."""
    num = find_kth_one(k)
    within = k - sum_of_bits(num - 1)
    return total_bits_till(num - 1) + kth_one_position(num, within)


def subsets_by_mask(values: Sequence[T]) -> list[tuple[int, list[T]]]:
    """Every subset of ``values`` paired with the mask that selects it."""
    n = len(values)
    return [
        (mask, [v for i, v in enumerate(values) if mask >> i & 1])
        for mask in range(1 << n)
    ]


def _parse_bitset(text: str, width: int) -> int:
    digits = text[:width]
    if any(c not in "01" for c in digits):
        raise ValueError(f"not a bit string: {text!r}")
    return int(digits, 2) if digits else 0


def bitset_and_or(x: str, y: str, width: int = 8) -> tuple[str, str]:
    """AND and OR of two bit strings, each shown as a ``width``-wide bit string."""
    if width < 1:
        raise ValueError("width must be positive")
    a = _parse_bitset(x, width)
    b = _parse_bitset(y, width)
    fmt = f"0{width}b"
    return format(a & b, fmt), format(a | b, fmt)


def msb(n: int) -> int:
    """Lowest set bit of the 64-bit pattern of ``n``, counted from the top end.

    Returns ``63 - i`` for the lowest set bit ``i``, or ``-1`` when ``n`` is zero.
    """
    word = n & _WORD_MASK
    if word == 0:
        return -1
    return _WORD - 1 - ((word & -word).bit_length() - 1)


def rightmost_set(n: int) -> int:
    """Highest set bit of the 64-bit pattern of ``n``, counted from the top end.

    This is the number of leading zeros, or ``-1`` when ``n`` is zero.
    """
    word = n & _WORD_MASK
    if word == 0:
        return -1
    return _WORD - word.bit_length()


def is_power_of_two(n: int) -> bool:
    """True when the 64-bit pattern of ``n`` has exactly one set bit."""
    return bin(n & _WORD_MASK).count("1") == 1


def next_power_of_two(x: int) -> int:
    """Smallest power of two that is at least ``x``, and never below 2."""
    if x <= 1:
        return 2
    return 1 << (x - 1).bit_length()


class BitMask:
    """Mutable integer viewed as 60 addressable bits."""

    def __init__(self, value: int = 0) -> None:
        self.value = value

    def test(self, i: int) -> bool:
        return bool(self.value >> i & 1)

    def set(self, i: int) -> BitMask:
        self.value |= 1 << i
        return self

    def clear(self, i: int) -> BitMask:
        self.value &= ~(1 << i)
        return self

    def flip(self, i: int) -> BitMask:
        self.value ^= 1 << i
        return self

    def all(self) -> bool:
        return self.value & _MASK_FULL == _MASK_FULL

    def any(self) -> bool:
        return self.value & _MASK_FULL != 0

    def none(self) -> bool:
        return not self.any()

    def count(self) -> int:
        return bin(self.value & _MASK_FULL).count("1")

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"BitMask({self.value})"