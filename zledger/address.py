"""Account addresses, account records and contract identifiers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .ed25519 import ParsePublicKeyError, PublicKey
from .hashing import HASH_SIZE
from .money import Money

_HEX = re.compile(r"(?:[0-9a-fA-F]{2})*")


class ParseAddressError(ValueError):
    """Raised when a string is not a valid address."""

    def __init__(self, message: str = "address invalid") -> None:
        super().__init__(message)


class ParseContractIdError(ValueError):
    """Raised when a string is not a valid contract id."""

    def __init__(self, message: str = "contract-id invalid") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Address:
    """Either the treasury account or an account owned by a public key.

    All of the supply sits in the treasury when the chain begins; fees are
    paid out of it.
    """

    public_key: PublicKey | None = None

    @classmethod
    def treasury(cls) -> Address:
        return cls(None)

    @classmethod
    def parse(cls, text: str) -> Address:
        """Parse the textual form of a public-key address."""
        try:
            return cls(PublicKey.parse(text))
        except ParsePublicKeyError as exc:
            raise ParseAddressError() from exc

    def is_treasury(self) -> bool:
        return self.public_key is None

    def __str__(self) -> str:
        if self.public_key is None:
            return "Treasury"
        return str(self.public_key)


@dataclass
class Account:
    """Balance and transaction counter of a regular account."""

    balance: Money = field(default_factory=Money)
    nonce: int = 0


@dataclass
class ZkAccount:
    """Transaction counter of an account inside a zero-knowledge contract."""

    nonce: int = 0


@dataclass(frozen=True)
class ContractId:
    """The identifier of a contract: the hash of the transaction creating it."""

    digest: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "digest", bytes(self.digest))
        if len(self.digest) != HASH_SIZE:
            raise ValueError(f"contract id must be {HASH_SIZE} bytes")

    @classmethod
    def parse(cls, text: str) -> ContractId:
        """Parse a contract id written as plain hex."""
        if not text.isascii() or not _HEX.fullmatch(text):
            raise ParseContractIdError()
        raw = bytes.fromhex(text)
        if len(raw) != HASH_SIZE:
            raise ParseContractIdError()
        return cls(raw)

    def __str__(self) -> str:
        return self.digest.hex()