"""Sets of byte strings stored by key."""

from __future__ import annotations


class SetError(Exception):
    """Raised when a set operation cannot be carried out."""


class SetKeyNotFoundError(SetError):
    """Raised when the set at a key is not found."""

    def __init__(self, message: str = "key not found") -> None:
        super().__init__(message)


class SetKeyNotExistError(SetError):
    """Raised when the set at a key does not exist."""

    def __init__(self, message: str = "key not exist") -> None:
        super().__init__(message)


class ItemEmptyError(SetError):
    """Raised when no item is given."""

    def __init__(self, message: str = "item empty") -> None:
        super().__init__(message)


class Set:
    """A collection of named sets of byte strings."""

    def __init__(self) -> None:
        self.sets: dict[str, set[bytes]] = {}

    def _require_both(self, key1: str, key2: str) -> tuple[set[bytes], set[bytes]]:
        if key1 not in self.sets:
            raise SetError("set1 is not exists")
        if key2 not in self.sets:
            raise SetError("set2 is not exists")
        return self.sets[key1], self.sets[key2]

    def sadd(self, key: str, *items: bytes) -> None:
        """Add items to the set at key, creating it if needed."""
        self.sets.setdefault(key, set()).update(bytes(item) for item in items)

    def srem(self, key: str, *items: bytes) -> None:
        """Remove items from the set at key."""
        if key not in self.sets:
            raise SetKeyNotFoundError()
        if not items or items[0] is None:
            raise ItemEmptyError()
        members = self.sets[key]
        for item in items:
            if item is not None:
                members.discard(bytes(item))

    def shas_key(self, key: str) -> bool:
        """Report whether a set exists at key."""
        return key in self.sets

    def spop(self, key: str) -> bytes | None:
        """Remove and return an arbitrary member, or None if there is none."""
        members = self.sets.get(key)
        if not members:
            return None
        return members.pop()

    def scard(self, key: str) -> int:
        """Return the number of members of the set at key, 0 if it does not exist."""
        return len(self.sets.get(key, ()))

    def sdiff(self, key1: str, key2: str) -> list[bytes]:
        """Return the members of the first set that are not in the second."""
        first, second = self._require_both(key1, key2)
        return [item for item in first if item not in second]

    def sinter(self, key1: str, key2: str) -> list[bytes]:
        """Return the members present in both sets."""
        first, second = self._require_both(key1, key2)
        return [item for item in first if item in second]

    def sis_member(self, key: str, item: bytes) -> bool:
        """Report whether item is a member of the set at key."""
        return bytes(item) in self.sets.get(key, ())

    def sare_members(self, key: str, *items: bytes) -> bool:
        """Return True when every item is a member of the set at key."""
        if key not in self.sets:
            raise SetKeyNotExistError()
        members = self.sets[key]
        if any(bytes(item) not in members for item in items):
            raise SetError("item not exits")
        return True

    def smembers(self, key: str) -> list[bytes]:
        """Return all members of the set at key."""
        if key not in self.sets:
            raise SetError("set not exists")
        return list(self.sets[key])

    def smove(self, key1: str, key2: str, item: bytes) -> bool:
        """Move item from the set at key1 to the set at key2."""
        if key1 not in self.sets:
            raise SetError("key1 is not exists")
        if key2 not in self.sets:
            raise SetError("key2 is not exists")
        member = bytes(item)
        self.sets[key2].add(member)
        self.sets[key1].discard(member)
        return True

    def sunion(self, key1: str, key2: str) -> list[bytes]:
        """Return the members present in either set."""
        first, second = self._require_both(key1, key2)
        return [*first, *(item for item in second if item not in first)]