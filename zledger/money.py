"""Fixed-point monetary amounts with nine decimal places."""

from __future__ import annotations

import re
from dataclasses import dataclass

SYMBOL = "ZSH"
UNIT_ZEROS = 9
UNIT = 10**UNIT_ZEROS

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class ParseMoneyError(ValueError):
    """Raised when a string is not a valid amount of money."""

    def __init__(self, message: str = "money invalid") -> None:
        super().__init__(message)


def _parse_u64(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ParseMoneyError()
    value = int(text)
    if value > _U64_MAX:
        raise ParseMoneyError()
    return value


@dataclass(frozen=True, order=True)
class Money:
    """An amount in the smallest unit, held as an unsigned 64-bit integer."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("Money value must be an integer")
        if not 0 <= self.value <= _U64_MAX:
            raise OverflowError("Money value out of range")

    @classmethod
    def parse(cls, text: str) -> Money:
        """Parse a decimal string such as ``"123.456"`` into whole-unit money."""
        s = text.strip()
        dot_pos = s.find(".")
        if dot_pos < 0:
            amount = _parse_u64(s) * UNIT
            if amount > _U64_MAX:
                raise ParseMoneyError()
            return cls(amount)
        if s == ".":
            raise ParseMoneyError()
        decimals = len(s) - 1 - dot_pos
        if decimals > UNIT_ZEROS:
            raise ParseMoneyError()
        padded = s + "0" * (UNIT_ZEROS - decimals)
        digits = padded[:dot_pos] + padded[dot_pos + 1 :]
        return cls(_parse_u64(digits))

    def __str__(self) -> str:
        s = str(self.value).rjust(UNIT_ZEROS + 1, "0")
        s = f"{s[:-UNIT_ZEROS]}.{s[-UNIT_ZEROS:]}".rstrip("0")
        if s.endswith("."):
            s += "0"
        return f"{s}{SYMBOL}"

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.value + other.value)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.value - other.value)

    def __floordiv__(self, other: int) -> Money:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Money(self.value // other)