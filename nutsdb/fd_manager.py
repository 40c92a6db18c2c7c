"""A least-recently-used cache of open file handles."""

from __future__ import annotations

import errno
import math
import os
import threading
from contextlib import suppress
from dataclasses import dataclass, field
from typing import IO, Any, Optional

DEFAULT_MAX_FILE_NUMS = 256


def _open_file(path: str) -> IO[bytes]:
    handle = os.open(path, os.O_CREAT | os.O_RDWR, 0o644)
    try:
        return os.fdopen(handle, "r+b")
    except BaseException:
        os.close(handle)
        raise


@dataclass(eq=False)
class FdInfo:
    """An open file in the cache and how many users hold it."""

    fd: Optional[IO[Any]] = None
    path: str = ""
    using: int = 0
    next: Optional["FdInfo"] = field(default=None, repr=False)
    prev: Optional["FdInfo"] = field(default=None, repr=False)


class DoubleLinkedList:
    """A doubly linked list of FdInfo nodes between two sentinels."""

    def __init__(self) -> None:
        self.head = FdInfo()
        self.tail = FdInfo()
        self.head.next = self.tail
        self.tail.prev = self.head
        self.size = 0

    def add_node(self, node: FdInfo) -> None:
        """Insert node right after the head."""
        first = self.head.next
        assert first is not None
        first.prev = node
        node.next = first
        self.head.next = node
        node.prev = self.head
        self.size += 1

    def remove_node(self, node: FdInfo) -> None:
        """Unlink node from the list."""
        assert node.prev is not None and node.next is not None
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None
        self.size -= 1

    def move_node_to_front(self, node: FdInfo) -> None:
        """Move node to the position right after the head."""
        self.remove_node(node)
        self.add_node(node)

    def reset(self) -> None:
        """Drop every node."""
        self.head.next = self.tail
        self.tail.prev = self.head
        self.size = 0

    def paths_from_head(self) -> list[str]:
        """Return the paths of the nodes from most to least recently used."""
        paths = []
        node = self.head.next
        while node is not None and node is not self.tail:
            paths.append(node.path)
            node = node.next
        return paths

    def paths_from_tail(self) -> list[str]:
        """Return the paths of the nodes from least to most recently used."""
        paths = []
        node = self.tail.prev
        while node is not None and node is not self.head:
            paths.append(node.path)
            node = node.prev
        return paths


class FdManager:
    """Hands out open files, keeping up to a limit of them open for reuse."""

    def __init__(self, max_fd_nums: int = 0, clean_threshold: float = 0.0) -> None:
        self._lock = threading.Lock()
        self.cache: dict[str, FdInfo] = {}
        self.fd_list = DoubleLinkedList()
        self.size = 0
        self.max_fd_nums = DEFAULT_MAX_FILE_NUMS
        self.clean_threshold_nums = math.floor(0.5 * self.max_fd_nums)
        if max_fd_nums > 0:
            self.max_fd_nums = max_fd_nums
        if 0.0 < clean_threshold < 1.0:
            self.clean_threshold_nums = math.floor(clean_threshold * self.max_fd_nums)

    def __enter__(self) -> "FdManager":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_fd(self, path: str) -> IO[Any]:
        """Return an open read-write file for path, creating the file if needed."""
        with self._lock:
            clean_path = os.path.normpath(path)
            info = self.cache.get(clean_path)
            if info is not None:
                info.using += 1
                self.fd_list.move_node_to_front(info)
                assert info.fd is not None
                return info.fd

            try:
                fd = _open_file(clean_path)
            except OSError as exc:
                if exc.errno != errno.EMFILE:
                    raise
                try:
                    self._clean_useless_fd()
                except OSError:
                    raise exc from None
                fd = _open_file(clean_path)
                self._add_to_cache(fd, clean_path)
                return fd

            if self.size >= self.clean_threshold_nums:
                with suppress(OSError):
                    self._clean_useless_fd()
            if self.size >= self.max_fd_nums:
                return fd
            self._add_to_cache(fd, clean_path)
            return fd

    def _add_to_cache(self, fd: IO[Any], clean_path: str) -> None:
        info = FdInfo(fd=fd, path=clean_path, using=1)
        self.fd_list.add_node(info)
        self.size += 1
        self.cache[clean_path] = info

    def reduce_using(self, path: str) -> None:
        """Record that one user has given the file at path back."""
        with self._lock:
            clean_path = os.path.normpath(path)
            info = self.cache.get(clean_path)
            if info is None:
                raise KeyError(f"unexpected the node is not in cache: {clean_path}")
            info.using -= 1

    def _clean_useless_fd(self) -> None:
        remaining = self.clean_threshold_nums
        node = self.fd_list.tail.prev
        while node is not None and node is not self.fd_list.head and remaining > 0:
            previous = node.prev
            if node.using == 0:
                self.fd_list.remove_node(node)
                self.size -= 1
                self.cache.pop(node.path, None)
                remaining -= 1
                if node.fd is not None:
                    node.fd.close()
            node = previous

    def close(self) -> None:
        """Close every cached file and empty the cache."""
        with self._lock:
            node = self.fd_list.tail.prev
            while node is not None and node is not self.fd_list.head:
                if node.fd is not None:
                    node.fd.close()
                self.cache.pop(node.path, None)
                self.size -= 1
                node = node.prev
            self.fd_list.reset()

    def close_by_path(self, path: str) -> None:
        """Close the cached file at path, if there is one."""
        with self._lock:
            clean_path = os.path.normpath(path)
            info = self.cache.pop(clean_path, None)
            if info is None:
                return
            self.fd_list.remove_node(info)
            self.size -= 1
            if info.fd is not None:
                info.fd.close()