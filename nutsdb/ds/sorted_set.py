"""A sorted set keyed by string, ordered by score and then key, built on a skip list."""

from __future__ import annotations

import random
from dataclasses import dataclass

SKIP_LIST_MAX_LEVEL = 32
SKIP_LIST_P = 0.25

_DEFAULT_LIMIT = (1 << 31) - 1


class _Level:
    """One level of a node: the next node at this level and the span to it."""

    __slots__ = ("forward", "span")

    def __init__(self) -> None:
        self.forward: SortedSetNode | None = None
        self.span = 0


class SortedSetNode:
    """A member of a sorted set: a unique key, its score and its value."""

    __slots__ = ("_key", "_score", "value", "backward", "level")

    def __init__(self, level: int, score: float, key: str, value: bytes | None) -> None:
        self._key = key
        self._score = score
        self.value = value
        self.backward: SortedSetNode | None = None
        self.level = [_Level() for _ in range(level)]

    def key(self) -> str:
        """Return the key of the node."""
        return self._key

    def score(self) -> float:
        """Return the score of the node."""
        return self._score

    def __repr__(self) -> str:
        return f"SortedSetNode(key={self._key!r}, score={self._score!r}, value={self.value!r})"


@dataclass
class GetByScoreRangeOptions:
    """Options for a search by score range.

    limit caps the number of nodes returned when positive; exclude_start and
    exclude_end make the matching end of the interval open.
    """

    limit: int = 0
    exclude_start: bool = False
    exclude_end: bool = False


def _random_level() -> int:
    """Pick a level between 1 and the maximum, higher levels being rarer."""
    level = 1
    while random.getrandbits(16) < SKIP_LIST_P * 0xFFFF:
        level += 1
    return min(level, SKIP_LIST_MAX_LEVEL)


def _precedes(node: SortedSetNode, score: float, key: str) -> bool:
    return node._score < score or (node._score == score and node._key < key)


class SortedSet:
    """Members ordered by score, ties broken by key, with ranks starting at 1."""

    def __init__(self) -> None:
        self._header = SortedSetNode(SKIP_LIST_MAX_LEVEL, 0.0, "", None)
        self._tail: SortedSetNode | None = None
        self._length = 0
        self._level = 1
        self.nodes: dict[str, SortedSetNode] = {}

    def __len__(self) -> int:
        return self._length

    def __contains__(self, key: object) -> bool:
        return key in self.nodes

    def _insert_node(self, score: float, key: str, value: bytes | None) -> SortedSetNode:
        update: list[SortedSetNode] = [self._header] * SKIP_LIST_MAX_LEVEL
        rank = [0] * SKIP_LIST_MAX_LEVEL

        x = self._header
        for i in reversed(range(self._level)):
            rank[i] = 0 if i == self._level - 1 else rank[i + 1]
            while (nxt := x.level[i].forward) is not None and _precedes(nxt, score, key):
                rank[i] += x.level[i].span
                x = nxt
            update[i] = x

        level = _random_level()
        if level > self._level:
            for i in range(self._level, level):
                rank[i] = 0
                update[i] = self._header
                self._header.level[i].span = self._length
            self._level = level

        node = SortedSetNode(level, score, key, value)
        for i in range(level):
            node.level[i].forward = update[i].level[i].forward
            update[i].level[i].forward = node
            node.level[i].span = update[i].level[i].span - (rank[0] - rank[i])
            update[i].level[i].span = rank[0] - rank[i] + 1

        for i in range(level, self._level):
            update[i].level[i].span += 1

        node.backward = None if update[0] is self._header else update[0]
        following = node.level[0].forward
        if following is not None:
            following.backward = node
        else:
            self._tail = node

        self._length += 1
        return node

    def _delete_node(self, node: SortedSetNode, update: list[SortedSetNode]) -> None:
        for i in range(self._level):
            if update[i].level[i].forward is node:
                update[i].level[i].span += node.level[i].span - 1
                update[i].level[i].forward = node.level[i].forward
            else:
                update[i].level[i].span -= 1

        following = node.level[0].forward
        if following is not None:
            following.backward = node.backward
        else:
            self._tail = node.backward

        while self._level > 1 and self._header.level[self._level - 1].forward is None:
            self._level -= 1
        self._length -= 1
        self.nodes.pop(node._key, None)

    def _delete(self, score: float, key: str) -> bool:
        update: list[SortedSetNode] = [self._header] * SKIP_LIST_MAX_LEVEL
        x = self._header
        for i in reversed(range(self._level)):
            while (nxt := x.level[i].forward) is not None and _precedes(nxt, score, key):
                x = nxt
            update[i] = x

        candidate = x.level[0].forward
        if candidate is not None and candidate._score == score and candidate._key == key:
            self._delete_node(candidate, update)
            return True
        return False

    def size(self) -> int:
        """Return the number of members."""
        return self._length

    def peek_min(self) -> SortedSetNode | None:
        """Return the member with the lowest score, or None if the set is empty."""
        return self._header.level[0].forward

    def pop_min(self) -> SortedSetNode | None:
        """Remove and return the member with the lowest score, or None."""
        node = self._header.level[0].forward
        if node is not None:
            self.remove(node._key)
        return node

    def peek_max(self) -> SortedSetNode | None:
        """Return the member with the highest score, or None if the set is empty."""
        return self._tail

    def pop_max(self) -> SortedSetNode | None:
        """Remove and return the member with the highest score, or None."""
        node = self._tail
        if node is not None:
            self.remove(node._key)
        return node

    def put(self, key: str, score: float, value: bytes | None) -> None:
        """Insert a member, or update the value and score of an existing one."""
        existing = self.nodes.get(key)
        if existing is not None and existing._score == score:
            existing.value = value
            return
        if existing is not None:
            self._delete(existing._score, existing._key)
        self.nodes[key] = self._insert_node(score, key, value)

    def remove(self, key: str) -> SortedSetNode | None:
        """Remove and return the member at key, or None if there is none."""
        found = self.nodes.get(key)
        if found is None:
            return None
        self._delete(found._score, found._key)
        return found

    def get_by_score_range(
        self,
        start: float,
        end: float,
        options: GetByScoreRangeOptions | None = None,
    ) -> list[SortedSetNode]:
        """Return members whose score lies between start and end.

        The interval is closed unless options say otherwise. When start is
        greater than end the members come back from high score to low.
        """
        limit = options.limit if options is not None and options.limit > 0 else _DEFAULT_LIMIT
        exclude_start = options is not None and options.exclude_start
        exclude_end = options is not None and options.exclude_end

        reverse = start > end
        if reverse:
            start, end = end, start
            exclude_start, exclude_end = exclude_end, exclude_start

        if self._length == 0:
            return []
        if reverse:
            return self._search_reverse(exclude_start, exclude_end, start, end, limit)
        return self._search_forward(exclude_start, exclude_end, start, end, limit)

    def _search_forward(
        self, exclude_start: bool, exclude_end: bool, start: float, end: float, limit: int
    ) -> list[SortedSetNode]:
        x = self._header
        for i in reversed(range(self._level)):
            while (nxt := x.level[i].forward) is not None and (
                nxt._score <= start if exclude_start else nxt._score < start
            ):
                x = nxt

        found: list[SortedSetNode] = []
        node = x.level[0].forward
        while node is not None and len(found) < limit:
            if node._score >= end if exclude_end else node._score > end:
                break
            found.append(node)
            node = node.level[0].forward
        return found

    def _search_reverse(
        self, exclude_start: bool, exclude_end: bool, start: float, end: float, limit: int
    ) -> list[SortedSetNode]:
        x = self._header
        for i in reversed(range(self._level)):
            while (nxt := x.level[i].forward) is not None and (
                nxt._score < end if exclude_end else nxt._score <= end
            ):
                x = nxt

        found: list[SortedSetNode] = []
        node: SortedSetNode | None = None if x is self._header else x
        while node is not None and len(found) < limit:
            if node._score <= start if exclude_start else node._score < start:
                break
            found.append(node)
            node = node.backward
        return found

    def _sanitize_indexes(self, start: int, end: int) -> tuple[int, int]:
        if start < 0:
            start = self._length + start + 1
        if end < 0:
            end = self._length + end + 1
        return max(start, 1), max(end, 1)

    def get_by_rank_range(self, start: int, end: int, remove: bool = False) -> list[SortedSetNode]:
        """Return members with ranks in [start, end], removing them if asked.

        Ranks start at 1; -1 is the last member. When start is greater than
        end the members come back in reverse order.
        """
        start, end = self._sanitize_indexes(start, end)
        reverse = start > end
        if reverse:
            start, end = end, start

        update: list[SortedSetNode] = [self._header] * SKIP_LIST_MAX_LEVEL
        traversed = 0
        x = self._header
        for i in reversed(range(self._level)):
            while (nxt := x.level[i].forward) is not None and traversed + x.level[i].span < start:
                traversed += x.level[i].span
                x = nxt
            if remove:
                update[i] = x
            elif traversed + 1 == start:
                break

        found: list[SortedSetNode] = []
        traversed += 1
        node = x.level[0].forward
        while node is not None and traversed <= end:
            following = node.level[0].forward
            found.append(node)
            if remove:
                self._delete_node(node, update)
            traversed += 1
            node = following

        if reverse:
            found.reverse()
        return found

    def get_by_rank(self, rank: int, remove: bool = False) -> SortedSetNode | None:
        """Return the member at rank, removing it if asked; None if there is none."""
        found = self.get_by_rank_range(rank, rank, remove)
        return found[0] if len(found) == 1 else None

    def get_by_key(self, key: str) -> SortedSetNode | None:
        """Return the member at key, or None."""
        return self.nodes.get(key)

    def find_rank(self, key: str) -> int:
        """Return the rank of key counted from the lowest score, 0 if absent."""
        node = self.nodes.get(key)
        if node is None:
            return 0
        rank = 0
        x = self._header
        for i in reversed(range(self._level)):
            while (nxt := x.level[i].forward) is not None and (
                nxt._score < node._score or (nxt._score == node._score and nxt._key <= node._key)
            ):
                rank += x.level[i].span
                x = nxt
            if x is node:
                return rank
        return 0

    def find_rev_rank(self, key: str) -> int:
        """Return the rank of key counted from the highest score, 0 if absent."""
        if self._length == 0 or key not in self.nodes:
            return 0
        return self._length - self.find_rank(key) + 1