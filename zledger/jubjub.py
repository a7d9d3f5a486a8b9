"""Arithmetic on the JubJub twisted Edwards curve and its compressed keys."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Modulus of the scalar field the curve is defined over.
FIELD_MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

A = FIELD_MODULUS - 1
D = 19257038036680949359750312669786877991949435402254120286184196891950884077233
ORDER = 6554484396890773809930967563523245729705921265872317281365359162392183254199

_HEX_BYTE = re.compile(r"\+?[0-9a-fA-F]+")


def _inv(value: int) -> int:
    value %= FIELD_MODULUS
    if value == 0:
        raise ZeroDivisionError("zero has no inverse")
    return pow(value, -1, FIELD_MODULUS)


def _find_non_residue() -> int:
    z = 2
    while pow(z, (FIELD_MODULUS - 1) // 2, FIELD_MODULUS) != FIELD_MODULUS - 1:
        z += 1
    return z


_NON_RESIDUE = _find_non_residue()


def _sqrt(value: int) -> int:
    """Return a square root of ``value`` in the field, or raise ValueError."""
    n = value % FIELD_MODULUS
    if n == 0:
        return 0
    if pow(n, (FIELD_MODULUS - 1) // 2, FIELD_MODULUS) != 1:
        raise ValueError("value has no square root")
    q, s = FIELD_MODULUS - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    m = s
    c = pow(_NON_RESIDUE, q, FIELD_MODULUS)
    t = pow(n, q, FIELD_MODULUS)
    r = pow(n, (q + 1) // 2, FIELD_MODULUS)
    while t != 1:
        i, t2 = 1, t * t % FIELD_MODULUS
        while t2 != 1:
            t2 = t2 * t2 % FIELD_MODULUS
            i += 1
        b = pow(c, 1 << (m - i - 1), FIELD_MODULUS)
        m = i
        c = b * b % FIELD_MODULUS
        t = t * c % FIELD_MODULUS
        r = r * b % FIELD_MODULUS
    return r


class ParseZkPublicKeyError(ValueError):
    """Raised when a string is not a valid compressed public key."""

    def __init__(self, message: str = "public key invalid") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PointCompressed:
    """A curve point stored as its x coordinate and the parity of y."""

    x: int = 0
    odd: bool = False

    def decompress(self) -> PointAffine:
        p = FIELD_MODULUS
        xx = self.x * self.x % p
        y = _sqrt(_inv(1 - D * xx) * (1 - A * xx))
        if bool(y & 1) != self.odd:
            y = (-y) % p
        return PointAffine(self.x, y)


@dataclass(frozen=True)
class PointAffine:
    """A curve point in affine coordinates."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", self.x % FIELD_MODULUS)
        object.__setattr__(self, "y", self.y % FIELD_MODULUS)

    @classmethod
    def zero(cls) -> PointAffine:
        return cls(0, 1)

    def is_on_curve(self) -> bool:
        p = FIELD_MODULUS
        x2 = self.x * self.x % p
        y2 = self.y * self.y % p
        return (y2 - x2) % p == (1 + D * x2 * y2) % p

    def is_infinity(self) -> bool:
        return self.x == 0 and self.y in (1, FIELD_MODULUS - 1)

    def double(self) -> PointAffine:
        p = FIELD_MODULUS
        ax2 = A * self.x * self.x % p
        y2 = self.y * self.y % p
        xx = _inv(ax2 + y2)
        yy = _inv(2 - ax2 - y2)
        return PointAffine(2 * self.x * self.y * xx % p, (y2 - ax2) * yy % p)

    def __add__(self, other: PointAffine) -> PointAffine:
        if not isinstance(other, PointAffine):
            return NotImplemented
        if self == other:
            return self.double()
        p = FIELD_MODULUS
        t = D * self.x * other.x * self.y * other.y % p
        xx = _inv(1 + t)
        yy = _inv(1 - t)
        return PointAffine(
            (self.x * other.y + self.y * other.x) * xx % p,
            (self.y * other.y - A * self.x * other.x) * yy % p,
        )

    def multiply(self, scalar: int) -> PointAffine:
        """Return ``scalar`` times this point by double-and-add."""
        result = PointProjective.zero()
        base = self.to_projective()
        bits = scalar % FIELD_MODULUS
        for i in range(bits.bit_length() - 1, -1, -1):
            result = result.double()
            if (bits >> i) & 1:
                result = result + base
        return result.to_affine()

    def to_projective(self) -> PointProjective:
        return PointProjective(self.x, self.y, 1)

    def compress(self) -> PointCompressed:
        return PointCompressed(self.x, bool(self.y & 1))


@dataclass(frozen=True)
class PointProjective:
    """A curve point in projective coordinates (X : Y : Z)."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", self.x % FIELD_MODULUS)
        object.__setattr__(self, "y", self.y % FIELD_MODULUS)
        object.__setattr__(self, "z", self.z % FIELD_MODULUS)

    @classmethod
    def zero(cls) -> PointProjective:
        return cls(0, 1, 0)

    def is_zero(self) -> bool:
        return self.z == 0

    def double(self) -> PointProjective:
        if self.is_zero():
            return PointProjective.zero()
        p = FIELD_MODULUS
        b = (self.x + self.y) ** 2 % p
        c = self.x * self.x % p
        d = self.y * self.y % p
        e = A * c % p
        f = (e + d) % p
        h = self.z * self.z % p
        j = (f - 2 * h) % p
        return PointProjective((b - c - d) * j, f * (e - d), f * j)

    def __add__(self, other: PointProjective) -> PointProjective:
        if not isinstance(other, PointProjective):
            return NotImplemented
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        if self.to_affine() == other.to_affine():
            return self.double()
        p = FIELD_MODULUS
        a = self.z * other.z % p
        b = a * a % p
        c = self.x * other.x % p
        d = self.y * other.y % p
        e = D * c * d % p
        f = (b - e) % p
        g = (b + e) % p
        return PointProjective(
            a * f * ((self.x + self.y) * (other.x + other.y) - c - d),
            a * g * (d - A * c),
            f * g,
        )

    def to_affine(self) -> PointAffine:
        if self.is_zero():
            return PointAffine.zero()
        zinv = _inv(self.z)
        return PointAffine(self.x * zinv, self.y * zinv)


BASE = PointAffine(
    28867639725710769449342053336011988556061781325688749245863888315629457631946,
    18,
)
BASE_COFACTOR = BASE.multiply(8)


@dataclass(frozen=True)
class ZkPublicKey:
    """A public key given by a compressed curve point."""

    point: PointCompressed = PointCompressed()

    @classmethod
    def parse(cls, text: str) -> ZkPublicKey:
        """Parse a ``0z2``/``0z3``-prefixed big-endian hex key."""
        if len(text) != 67 or not text.isascii():
            raise ParseZkPublicKeyError()
        if text.startswith("0z3"):
            odd = True
        elif text.startswith("0z2"):
            odd = False
        else:
            raise ParseZkPublicKeyError()
        digits = text[3:]
        pairs = [digits[i : i + 2] for i in range(0, 64, 2)]
        if not all(_HEX_BYTE.fullmatch(pair) for pair in pairs):
            raise ParseZkPublicKeyError()
        x = int.from_bytes(bytes(int(pair, 16) for pair in pairs), "big")
        if x >= FIELD_MODULUS:
            raise ParseZkPublicKeyError()
        return cls(PointCompressed(x, odd))

    def __str__(self) -> str:
        prefix = "0z3" if self.point.odd else "0z2"
        return prefix + self.point.x.to_bytes(32, "big").hex()