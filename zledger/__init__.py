"""Ledger primitives: money, hashing, Merkle trees, Ed25519 and JubJub curve points, and key-value stores."""

__version__ = "0.1.0"