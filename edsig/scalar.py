"""Arithmetic modulo the order of the Ed25519 base point."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ORDER", "Scalar"]

ORDER = 2**252 + 27742317777372353535851937790883648493
"""The group order n = 2^252 + 27742317777372353535851937790883648493."""

_BITS = 256
_MODULUS = 1 << _BITS
_SHORT_SIZE = 32
_WIDE_SIZE = 64
_WINDOW4_DIGITS = 64
_SLIDE_MAX_SPAN = 6


def _expect_length(data: bytes, size: int) -> bytes:
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"scalar encoding must be {size} bytes, got {len(raw)}")
    return raw


@dataclass(frozen=True, order=False)
class Scalar:
    """A 256-bit scalar; arithmetic reduces modulo the group order.

    Values produced by :meth:`subtract_unreduced` may lie outside
    ``[0, ORDER)`` but always fit in 256 bits.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int):
            raise TypeError(f"expected an int, got {type(self.value).__name__}")
        if not 0 <= self.value < _MODULUS:
            raise ValueError("scalar value must fit in 256 unsigned bits")

    @classmethod
    def from_bytes32(cls, data: bytes) -> Scalar:
        """Decode 32 little-endian bytes and reduce modulo the order."""
        raw = _expect_length(data, _SHORT_SIZE)
        return cls(int.from_bytes(raw, "little") % ORDER)

    @classmethod
    def from_bytes64(cls, data: bytes) -> Scalar:
        """Decode 64 little-endian bytes (a hash output) and reduce modulo the order."""
        raw = _expect_length(data, _WIDE_SIZE)
        return cls(int.from_bytes(raw, "little") % ORDER)

    def to_bytes(self) -> bytes:
        """Encode as 32 little-endian bytes."""
        return self.value.to_bytes(_SHORT_SIZE, "little")

    def is_zero(self) -> bool:
        """Whether the scalar is zero."""
        return self.value == 0

    def subtract_unreduced(self, other: Scalar) -> Scalar:
        """Subtract without reducing modulo the order, wrapping at 2^256."""
        return Scalar((self.value - other.value) % _MODULUS)

    def window4(self) -> tuple[int, ...]:
        """Signed radix-16 digits r with value = sum r[i] * 16^i, r[i] in [-8, 7]."""
        digits = [(self.value >> (4 * i)) & 15 for i in range(_WINDOW4_DIGITS)]
        carry = 0
        for i in range(_WINDOW4_DIGITS - 1):
            digits[i] += carry
            digits[i + 1] += digits[i] >> 4
            digits[i] &= 15
            carry = digits[i] >> 3
            digits[i] -= carry << 4
        digits[-1] += carry
        return tuple(digits)

    def slide(self, window_size: int) -> tuple[int, ...]:
        """Sliding-window signed binary expansion of 256 digits.

        Every nonzero digit is odd and bounded by 2^(window_size-1) - 1.
        """
        if window_size < 2:
            raise ValueError(f"window size must be at least 2, got {window_size}")
        bound = (1 << (window_size - 1)) - 1
        r = [(self.value >> i) & 1 for i in range(_BITS)]
        for j in range(_BITS):
            if not r[j]:
                continue
            for b in range(1, min(_BITS - j, _SLIDE_MAX_SPAN + 1)):
                shifted = r[j + b] << b
                if r[j] + shifted <= bound:
                    r[j] += shifted
                    r[j + b] = 0
                elif r[j] - shifted >= -bound:
                    r[j] -= shifted
                    for k in range(j + b, _BITS):
                        if not r[k]:
                            r[k] = 1
                            break
                        r[k] = 0
                elif r[j + b]:
                    break
        return tuple(r)

    def __add__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.value + other.value) % ORDER)

    def __mul__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.value * other.value) % ORDER)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.value < other.value

    def __int__(self) -> int:
        return self.value