"""Errors raised by the database and predicates that recognise them."""

from __future__ import annotations

from collections.abc import Iterator


class NutsDBError(Exception):
    """Base class of the errors raised by the database."""


class DBClosedError(NutsDBError):
    """Raised when the database is used after it was closed."""

    def __init__(self, message: str = "db is closed") -> None:
        super().__init__(message)


class KeyNotFoundError(NutsDBError):
    """Raised when a key is not found."""

    def __init__(self, message: str = "key not found") -> None:
        super().__init__(message)


class BucketNotFoundError(NutsDBError):
    """Raised when a bucket does not exist."""

    def __init__(self, message: str = "bucket not found") -> None:
        super().__init__(message)


class BucketEmptyError(NutsDBError):
    """Raised when a bucket holds nothing."""

    def __init__(self, message: str = "bucket is empty") -> None:
        super().__init__(message)


class KeyEmptyError(NutsDBError):
    """Raised when an empty key is given."""

    def __init__(self, message: str = "key cannot be empty") -> None:
        super().__init__(message)


class PrefixScanError(NutsDBError):
    """Raised when a prefix scan finds nothing."""

    def __init__(self, message: str = "prefix scans not found") -> None:
        super().__init__(message)


class PrefixSearchScanError(NutsDBError):
    """Raised when a prefix and search scan finds nothing."""

    def __init__(self, message: str = "prefix and search scans not found") -> None:
        super().__init__(message)


def _chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield err and every exception it was raised from or during."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        if err.__cause__ is not None:
            err = err.__cause__
        elif not err.__suppress_context__:
            err = err.__context__
        else:
            err = None


def _matches(err: BaseException | None, kind: type[BaseException]) -> bool:
    return any(isinstance(item, kind) for item in _chain(err))


def is_db_closed(err: BaseException | None) -> bool:
    """Report whether err, or an error it wraps, says the db was closed."""
    return _matches(err, DBClosedError)


def is_key_not_found(err: BaseException | None) -> bool:
    """Report whether err, or an error it wraps, says a key was not found."""
    return _matches(err, KeyNotFoundError)


def is_bucket_not_found(err: BaseException | None) -> bool:
    """Report whether err, or an error it wraps, says a bucket does not exist."""
    return _matches(err, BucketNotFoundError)


def is_bucket_empty(err: BaseException | None) -> bool:
    """Report whether err, or an error it wraps, says a bucket is empty."""
    return _matches(err, BucketEmptyError)


def is_key_empty(err: BaseException | None) -> bool:
    """Report whether err, or an error it wraps, says a key is empty."""
    return _matches(err, KeyEmptyError)


def is_prefix_scan(err: BaseException | None) -> bool:
    """Report whether err, or an error it wraps, says a prefix scan found nothing."""
    return _matches(err, PrefixScanError)


def is_prefix_search_scan(err: BaseException | None) -> bool:
    """Report whether err, or an error it wraps, says a prefix search scan found nothing."""
    return _matches(err, PrefixSearchScanError)