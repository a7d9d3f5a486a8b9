"""Key-value stores: an in-memory store and a write-buffering mirror."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from .hashing import sha3_hash


class KvStoreError(Exception):
    """Raised when a key-value store cannot carry out an operation."""


@dataclass(frozen=True)
class Put:
    """Write ``value`` under ``key``."""

    key: str
    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bytes(self.value))


@dataclass(frozen=True)
class Remove:
    """Delete ``key``."""

    key: str


WriteOp = Put | Remove


def _encode_str(data: bytes) -> bytes:
    return struct.pack("<Q", len(data)) + data


def _encode_pairs(pairs: list[tuple[str, bytes]]) -> bytes:
    """Serialise sorted key/value pairs as a length-prefixed sequence."""
    parts = [struct.pack("<Q", len(pairs))]
    for key, value in pairs:
        parts.append(_encode_str(key.encode("utf-8")))
        parts.append(_encode_str(value))
    return b"".join(parts)


class KvStore(ABC):
    """A store of byte values under string keys."""

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the value under ``key``, or None if absent."""

    @abstractmethod
    def update(self, ops: Iterable[WriteOp]) -> None:
        """Apply the write operations in order."""

    @abstractmethod
    def pairs(self, prefix: str) -> dict[str, bytes]:
        """Return every entry whose key starts with ``prefix``."""

    def checksum(self) -> bytes:
        """Hash of all entries, sorted by key."""
        entries = sorted(self.pairs("").items())
        return sha3_hash(_encode_pairs(entries))

    def mirror(self) -> RamMirrorKvStore:
        """Return a mirror that buffers writes on top of this store."""
        return RamMirrorKvStore(self)


class RamKvStore(KvStore):
    """A key-value store held entirely in memory."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def update(self, ops: Iterable[WriteOp]) -> None:
        for op in ops:
            if isinstance(op, Put):
                self._data[op.key] = op.value
            elif isinstance(op, Remove):
                self._data.pop(op.key, None)
            else:
                raise KvStoreError(f"unknown write operation: {op!r}")

    def pairs(self, prefix: str) -> dict[str, bytes]:
        return {k: v for k, v in self._data.items() if k.startswith(prefix)}


class RamMirrorKvStore(KvStore):
    """Buffers writes in memory over another store, leaving it untouched."""

    def __init__(self, store: KvStore) -> None:
        self._store = store
        self._overwrite: dict[str, bytes | None] = {}

    def get(self, key: str) -> bytes | None:
        if key in self._overwrite:
            return self._overwrite[key]
        return self._store.get(key)

    def update(self, ops: Iterable[WriteOp]) -> None:
        for op in ops:
            if isinstance(op, Put):
                self._overwrite[op.key] = op.value
            elif isinstance(op, Remove):
                self._overwrite[op.key] = None
            else:
                raise KvStoreError(f"unknown write operation: {op!r}")

    def pairs(self, prefix: str) -> dict[str, bytes]:
        result = self._store.pairs(prefix)
        for key, value in self._overwrite.items():
            if value is None:
                result.pop(key, None)
            elif key.startswith(prefix):
                result[key] = value
        return result

    def rollback(self) -> list[WriteOp]:
        """Operations that would restore the underlying store's current values."""
        ops: list[WriteOp] = []
        for key in self._overwrite:
            value = self._store.get(key)
            ops.append(Remove(key) if value is None else Put(key, value))
        return ops

    def to_ops(self) -> list[WriteOp]:
        """The buffered writes as operations for the underlying store."""
        return [
            Remove(key) if value is None else Put(key, value)
            for key, value in self._overwrite.items()
        ]