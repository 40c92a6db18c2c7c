"""Data entries and their on-disk encoding."""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass, field

DATA_ENTRY_HEADER_SIZE = 42

# crc, timestamp, key size, value size, flag, ttl, bucket size, status, ds, tx id
_HEADER = struct.Struct("<IQIIHIIHHQ")


class PayloadSizeMismatchError(ValueError):
    """Raised when the payload does not match the sizes in the metadata."""

    def __init__(
        self, message: str = "the payload size in meta mismatch with the payload size needed"
    ) -> None:
        super().__init__(message)


@dataclass
class MetaData:
    """The header of a stored entry."""

    key_size: int = 0
    value_size: int = 0
    timestamp: int = 0
    ttl: int = 0
    flag: int = 0
    bucket_size: int = 0
    tx_id: int = 0
    status: int = 0
    ds: int = 0
    crc: int = 0

    def payload_size(self) -> int:
        """Return the combined size of bucket, key and value."""
        return self.bucket_size + self.key_size + self.value_size


@dataclass
class Hint:
    """Where a key's entry lives: the file and the position within it."""

    key: bytes = b""
    file_id: int = 0
    meta: MetaData = field(default_factory=MetaData)
    data_pos: int = 0


def _fit(data: bytes, size: int) -> bytes:
    return bytes(data[:size]).ljust(size, b"\0")


@dataclass
class Entry:
    """A stored data item: bucket, key, value and metadata."""

    key: bytes = b""
    value: bytes = b""
    bucket: bytes = b""
    meta: MetaData = field(default_factory=MetaData)

    def size(self) -> int:
        """Return the encoded size of the entry."""
        meta = self.meta
        return DATA_ENTRY_HEADER_SIZE + meta.key_size + meta.value_size + meta.bucket_size

    def _header(self) -> bytes:
        meta = self.meta
        return _HEADER.pack(
            meta.crc,
            meta.timestamp,
            meta.key_size,
            meta.value_size,
            meta.flag,
            meta.ttl,
            meta.bucket_size,
            meta.status,
            meta.ds,
            meta.tx_id,
        )

    def encode(self) -> bytes:
        """Return the entry as stored on disk, with its CRC at the front."""
        meta = self.meta
        body = b"".join(
            (
                self._header()[4:],
                _fit(self.bucket, meta.bucket_size),
                _fit(self.key, meta.key_size),
                _fit(self.value, meta.value_size),
            )
        )
        return struct.pack("<I", zlib.crc32(body)) + body

    def is_zero(self) -> bool:
        """Report whether the entry holds nothing."""
        meta = self.meta
        return meta.crc == 0 and meta.key_size == 0 and meta.value_size == 0 and meta.timestamp == 0

    def get_crc(self, buf: bytes) -> int:
        """Return the CRC of a header buffer followed by this entry's payload."""
        crc = zlib.crc32(bytes(buf[4:]))
        for part in (self.bucket, self.key, self.value):
            crc = zlib.crc32(bytes(part), crc)
        return crc

    def parse_payload(self, data: bytes) -> None:
        """Split data into bucket, key and value using the sizes in the metadata."""
        meta = self.meta
        if len(data) < meta.payload_size():
            raise PayloadSizeMismatchError()
        key_start = meta.bucket_size
        value_start = key_start + meta.key_size
        self.bucket = bytes(data[:key_start])
        self.key = bytes(data[key_start:value_start])
        self.value = bytes(data[value_start : value_start + meta.value_size])

    def parse_meta(self, buf: bytes) -> None:
        """Read the metadata from an encoded header."""
        if len(buf) < DATA_ENTRY_HEADER_SIZE:
            raise ValueError(f"header needs {DATA_ENTRY_HEADER_SIZE} bytes, got {len(buf)}")
        (
            crc,
            timestamp,
            key_size,
            value_size,
            flag,
            ttl,
            bucket_size,
            status,
            ds,
            tx_id,
        ) = _HEADER.unpack_from(bytes(buf))
        self.meta = MetaData(
            key_size=key_size,
            value_size=value_size,
            timestamp=timestamp,
            ttl=ttl,
            flag=flag,
            bucket_size=bucket_size,
            tx_id=tx_id,
            status=status,
            ds=ds,
            crc=crc,
        )