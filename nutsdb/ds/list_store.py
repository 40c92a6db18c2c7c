"""Lists of byte strings stored by key, with optional per-key expiry."""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator

MIN_INT = -(1 << 63)


class ListNotFoundError(LookupError):
    """Raised when the list at a key does not exist, has expired or is empty."""

    def __init__(self, message: str = "the list not found") -> None:
        super().__init__(message)


class IndexOutOfRangeError(IndexError):
    """Raised when an index lies outside the list."""

    def __init__(self, message: str = "index out of range") -> None:
        super().__init__(message)


class CountError(ValueError):
    """Raised when a removal count is larger than the list."""

    def __init__(self, message: str = "err count") -> None:
        super().__init__(message)


class MinIntError(ValueError):
    """Raised when a removal count is the smallest 64-bit integer."""

    def __init__(self, message: str = "err MinInt") -> None:
        super().__init__(message)


def _accepted_indexes(length: int, indexes: Iterable[int]) -> Iterator[int]:
    """Yield the indexes a removal by index acts on.

    Negative indexes and repeats of the previous index are skipped; the scan
    stops at the first index past the end of the list.
    """
    previous = -1
    for index in indexes:
        if index < 0 or index == previous:
            continue
        if index >= length:
            break
        yield index
        previous = index


class List:
    """A collection of named lists of byte strings."""

    def __init__(self) -> None:
        self.items: dict[str, list[bytes]] = {}
        self.ttl: dict[str, int] = {}
        self.timestamp: dict[str, int] = {}

    def _items_of(self, key: str) -> list[bytes]:
        if self.is_expire(key) or key not in self.items:
            raise ListNotFoundError()
        return self.items[key]

    def rpop(self, key: str) -> bytes:
        """Remove and return the last element of the list at key."""
        item = self.rpeek(key)
        self.items[key].pop()
        return item

    def rpeek(self, key: str) -> bytes:
        """Return the last element of the list at key."""
        items = self._items_of(key)
        if not items:
            raise ListNotFoundError()
        return items[-1]

    def rpush(self, key: str, *values: bytes) -> int:
        """Append values to the tail of the list; return the new size."""
        if self.is_expire(key):
            raise ListNotFoundError()
        items = self.items.setdefault(key, [])
        items.extend(values)
        return len(items)

    def lpush(self, key: str, *values: bytes) -> int:
        """Insert values one by one at the head of the list; return the new size."""
        if self.is_expire(key):
            raise ListNotFoundError()
        self.items[key] = [*reversed(values), *self.items.get(key, [])]
        return len(self.items[key])

    def lpop(self, key: str) -> bytes:
        """Remove and return the first element of the list at key."""
        item = self.lpeek(key)
        del self.items[key][0]
        return item

    def lpeek(self, key: str) -> bytes:
        """Return the first element of the list at key."""
        items = self._items_of(key)
        if not items:
            raise ListNotFoundError()
        return items[0]

    def size(self, key: str) -> int:
        """Return the number of elements in the list at key."""
        return len(self._items_of(key))

    def lrange(self, key: str, start: int, end: int) -> list[bytes]:
        """Return the elements in the inclusive range [start, end].

        Negative positions count from the end of the list.
        """
        items = self._items_of(key)
        size = len(items)
        if size == 0:
            return []

        if start >= 0 and end < 0:
            end = size + end
        if start < 0 and end > 0:
            start = size + start
        if start < 0 and end < 0:
            start, end = size + start, size + end
        if end >= size:
            end = size - 1
        if start > end:
            raise ValueError("start or end error")
        if start < 0:
            raise IndexOutOfRangeError()
        return items[start : end + 1]

    def lrem(self, key: str, count: int, value: bytes) -> int:
        """Remove occurrences of value and return how many were removed.

        count > 0 removes from head to tail, count < 0 from tail to head,
        count == 0 removes every occurrence.
        """
        items = self._items_of(key)
        needed = self.lrem_num(key, count, value)
        if needed == 0:
            return 0
        if count == 0:
            count = needed

        limit = abs(count)
        ordered = items if count > 0 else reversed(items)
        kept: list[bytes] = []
        removed = 0
        for item in ordered:
            if removed < limit and item == value:
                removed += 1
            else:
                kept.append(item)
        if count < 0:
            kept.reverse()
        self.items[key] = kept
        return removed

    def lrem_num(self, key: str, count: int, value: bytes) -> int:
        """Return how many elements a call to lrem with these arguments would remove."""
        items = self._items_of(key)
        if count > len(items):
            raise CountError()
        if count < 0:
            if count == MIN_INT:
                raise MinIntError()
            count = -count

        removed = 0
        for item in items:
            if count > 0 and removed == count:
                break
            if item == value:
                removed += 1
        return removed

    def lset(self, key: str, index: int, value: bytes) -> None:
        """Replace the element at index."""
        items = self._items_of(key)
        if not 0 <= index < len(items):
            raise IndexOutOfRangeError()
        items[index] = value

    def ltrim(self, key: str, start: int, end: int) -> None:
        """Keep only the elements in the inclusive range [start, end]."""
        self._items_of(key)
        self.items[key] = self.lrange(key, start, end)

    def lrem_by_index(self, key: str, indexes: Iterable[int]) -> int:
        """Remove the elements at the given ascending indexes; return how many went."""
        items = self._items_of(key)
        doomed = set(_accepted_indexes(len(items), indexes))
        if not doomed:
            return 0
        self.items[key] = [item for position, item in enumerate(items) if position not in doomed]
        return len(doomed)

    def lrem_by_index_pre_check(self, key: str, indexes: Iterable[int]) -> int:
        """Count the indexes that a removal by index would act on."""
        items = self._items_of(key)
        return sum(1 for _ in _accepted_indexes(len(items), indexes))

    def is_expire(self, key: str) -> bool:
        """Report whether the list at key has expired, dropping it if so."""
        if key not in self.ttl:
            return False
        ttl = self.ttl[key]
        stamp = self.timestamp.get(key, 0)
        if ttl == 0 or ttl + stamp > int(time.time()):
            return False
        for store in (self.items, self.ttl, self.timestamp):
            store.pop(key, None)
        return True

    def is_empty(self, key: str) -> bool:
        """Report whether the existing list at key has no elements."""
        return self.size(key) == 0

    def get_list_ttl(self, key: str) -> int:
        """Return the seconds left before the list expires, 0 if it never does."""
        if self.is_expire(key):
            raise ListNotFoundError()
        ttl = self.ttl.get(key, 0)
        stamp = self.timestamp.get(key, 0)
        if ttl == 0 or stamp == 0:
            return 0
        return stamp + ttl - int(time.time())