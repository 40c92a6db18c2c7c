"""The in-memory index of list buckets."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from nutsdb.ds.list_store import List


class Index:
    """Maps bucket names to their lists."""

    def __init__(self) -> None:
        self.lists: dict[str, List] = {}

    def get_list(self, bucket: str) -> Optional[List]:
        """Return the list of bucket, or None if there is none."""
        return self.lists.get(bucket)

    def delete_list(self, bucket: str) -> None:
        """Forget the list of bucket."""
        self.lists.pop(bucket, None)

    def add_list(self, bucket: str) -> None:
        """Give bucket a new, empty list, replacing any it had."""
        self.lists[bucket] = List()

    def is_bucket_exist(self, bucket: str) -> bool:
        """Report whether bucket has a list."""
        return bucket in self.lists

    def range_list(self, f: Callable[[List], object]) -> None:
        """Call f with every list."""
        for lst in list(self.lists.values()):
            f(lst)

    def handle_list_bucket(self, f: Callable[[str], object]) -> None:
        """Call f with every bucket name; an exception from f stops the walk."""
        for bucket in list(self.lists):
            f(bucket)