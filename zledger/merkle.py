"""A compact binary Merkle tree stored in a flat list."""

from __future__ import annotations

from collections.abc import Iterable

from .hashing import HASH_SIZE, sha3_hash


def merge_hash(a: bytes, b: bytes) -> bytes:
    """Hash two nodes together, smaller one first."""
    return sha3_hash(a + b if a < b else b + a)


class MerkleTree:
    """A Merkle tree over a sequence of 32-byte leaf hashes."""

    def __init__(self, leaves: Iterable[bytes]) -> None:
        leaves = [bytes(leaf) for leaf in leaves]
        if not leaves:
            self._data = [bytes(HASH_SIZE)]
            return
        self._data = [bytes(HASH_SIZE)] * (len(leaves) * 2 - 1)
        for i, value in enumerate(leaves):
            self._data[self._leaf_map(i)] = value
        self._make_parents()

    def depth(self) -> int:
        size = len(self._data)
        if size == 1:
            return 0
        return (size - 1).bit_length() - 1

    def num_leaves(self) -> int:
        return (len(self._data) + 1) >> 1

    @staticmethod
    def _parent_map(i: int) -> int:
        return (i - 1) >> 1

    @staticmethod
    def _sibling_map(i: int) -> int:
        return i - 1 if i % 2 == 0 else i + 1

    def _leaf_map(self, i: int) -> int:
        size = len(self._data)
        dep = self.depth()
        lower_start = (1 << dep) - 1
        if lower_start + i < size:
            return lower_start + i
        lower_leaves = size - lower_start
        upper_start = (1 << (dep - 1)) - 1
        return upper_start - (lower_leaves >> 1) + i

    def _make_parents(self) -> None:
        total = len(self._data)
        for d in range(self.depth(), 0, -1):
            start = (1 << d) - 1
            for i in range(start, start + (1 << d), 2):
                if i >= total:
                    break
                self._data[self._parent_map(i)] = merge_hash(
                    self._data[i], self._data[i + 1]
                )

    def root(self) -> bytes:
        return self._data[0]

    def prove(self, leaf: int) -> list[bytes]:
        """Return the sibling hashes from the leaf up to the root."""
        if not 0 <= leaf < self.num_leaves():
            raise IndexError(f"leaf index {leaf} out of range")
        proof = []
        ind = self._leaf_map(leaf)
        while ind != 0:
            proof.append(self._data[self._sibling_map(ind)])
            ind = self._parent_map(ind)
        return proof