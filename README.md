# nutsdb

Core pieces of an embedded key/value store, in plain Python with no
third-party dependencies.

## What is in the package

- `nutsdb.ds.list_store.List`: lists of byte strings per key, with an
  optional per-key expiry (`ttl` and `timestamp` dictionaries, in seconds).
  Methods: `rpush`, `lpush`, `rpop`, `lpop`, `rpeek`, `lpeek`, `size`,
  `lrange`, `lrem`, `lrem_num`, `lset`, `ltrim`, `lrem_by_index`,
  `lrem_by_index_pre_check`, `is_expire`, `is_empty`, `get_list_ttl`.
  Errors: `ListNotFoundError`, `IndexOutOfRangeError`, `CountError`,
  `MinIntError`.
- `nutsdb.ds.set_store.Set`: sets of byte strings per key. Methods: `sadd`,
  `srem`, `shas_key`, `spop`, `scard`, `sdiff`, `sinter`, `sunion`,
  `sis_member`, `sare_members`, `smembers`, `smove`. Errors derive from
  `SetError`: `SetKeyNotFoundError`, `SetKeyNotExistError`,
  `ItemEmptyError`.
- `nutsdb.ds.sorted_set.SortedSet`: a skip-list sorted set ordered by score,
  ties broken by key, with 1-based ranks. Methods: `put`, `remove`,
  `get_by_key`, `get_by_rank`, `get_by_rank_range`, `get_by_score_range`
  (with `GetByScoreRangeOptions(limit, exclude_start, exclude_end)`),
  `find_rank`, `find_rev_rank`, `peek_min`, `peek_max`, `pop_min`,
  `pop_max`, `size`. Members are `SortedSetNode` objects with `key()`,
  `score()` and `value`.
- `nutsdb.entry`: `Entry`, `MetaData` and `Hint`. `Entry.encode()` produces
  the 42-byte little-endian header followed by bucket, key and value, with
  a CRC-32 at the front; `parse_meta`, `parse_payload`, `get_crc`,
  `is_zero` and `size` work with that layout.
- `nutsdb.fd_manager.FdManager`: a least-recently-used cache of open
  read-write files (`get_fd`, `reduce_using`, `close_by_path`, `close`),
  usable as a context manager. Built on `DoubleLinkedList` and `FdInfo`.
- `nutsdb.index.Index`: maps bucket names to `List` objects (`add_list`,
  `get_list`, `delete_list`, `is_bucket_exist`, `range_list`,
  `handle_list_bucket`).
- `nutsdb.errors`: `NutsDBError` and its subclasses (`DBClosedError`,
  `KeyNotFoundError`, `BucketNotFoundError`, `BucketEmptyError`,
  `KeyEmptyError`, `PrefixScanError`, `PrefixSearchScanError`), and the
  predicates `is_db_closed`, `is_key_not_found`, `is_bucket_not_found`,
  `is_bucket_empty`, `is_key_empty`, `is_prefix_scan`,
  `is_prefix_search_scan`. Each predicate also looks through the
  exceptions an error was raised from or during.

## Install

```
pip install .
```

## Example

```python
from nutsdb.ds.list_store import List
from nutsdb.ds.sorted_set import SortedSet

lst = List()
lst.rpush("myList", b"a", b"b", b"c")
print(lst.lrange("myList", 0, -1))   # [b'a', b'b', b'c']

zs = SortedSet()
zs.put("key1", 1, b"a")
zs.put("key2", 10, b"b")
print(zs.peek_max().key())           # key2
print(zs.find_rank("key1"))          # 1
```

Failures are raised as exceptions, for example `ListNotFoundError` when a
list key is missing, expired or empty.

## What it does not do

This package holds the building blocks only. There is no database object
to open, no transactions, no buckets of plain key/value pairs, no B+ tree
index, no writing or replaying of data files, no merging, and no command
line or server. The structures live in memory; `FdManager` and `Entry`
handle files and the record format, but nothing here ties them together
into storage.

## Tests

```
pip install ".[test]"
pytest
```