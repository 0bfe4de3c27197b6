"""Fixed-capacity key/value caches with LRU and LFU eviction."""

from __future__ import annotations

from collections import OrderedDict, defaultdict
from dataclasses import dataclass
from typing import Hashable

MISSING = -1


class LRUCache:
    """Cache that evicts the least recently used key when full.

    ``get`` returns ``-1`` for keys that are not cached.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data: OrderedDict[Hashable, int] = OrderedDict()

    def get(self, key: Hashable) -> int:
        if key not in self._data:
            return MISSING
        self._data.move_to_end(key)
        return self._data[key]

    def put(self, key: Hashable, value: int) -> None:
        if self.capacity == 0:
            return
        if key in self._data:
            self._data.move_to_end(key)
        elif len(self._data) == self.capacity:
            self._data.popitem(last=False)
        self._data[key] = value

    def __len__(self) -> int:
        return len(self._data)


@dataclass
class _Entry:
    value: int
    freq: int = 1


class LFUCache:
    """Cache that evicts the least frequently used key when full.

    Ties between equally frequent keys go to the one used least recently.
    ``get`` returns ``-1`` for keys that are not cached.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._entries: dict[Hashable, _Entry] = {}
        self._buckets: defaultdict[int, OrderedDict[Hashable, None]] = defaultdict(OrderedDict)
        self._min_freq = 0

    def _touch(self, key: Hashable) -> None:
        entry = self._entries[key]
        bucket = self._buckets[entry.freq]
        del bucket[key]
        if not bucket:
            del self._buckets[entry.freq]
            if self._min_freq == entry.freq:
                self._min_freq += 1
        entry.freq += 1
        self._buckets[entry.freq][key] = None

    def get(self, key: Hashable) -> int:
        if key not in self._entries:
            return MISSING
        self._touch(key)
        return self._entries[key].value

    def put(self, key: Hashable, value: int) -> None:
        if self.capacity == 0:
            return
        if key in self._entries:
            self._entries[key].value = value
            self._touch(key)
            return
        if len(self._entries) == self.capacity:
            bucket = self._buckets[self._min_freq]
            victim, _ = bucket.popitem(last=False)
            if not bucket:
                del self._buckets[self._min_freq]
            del self._entries[victim]
        self._entries[key] = _Entry(value)
        self._buckets[1][key] = None
        self._min_freq = 1

    def __len__(self) -> int:
        return len(self._entries)