"""Arithmetic in the prime field GF(2^255 - 19)."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["P", "FieldElement"]

P = 2**255 - 19
"""The field prime."""

_ENCODED_SIZE = 32
_TOP_BIT_MASK = (1 << 255) - 1
_INVERT_EXPONENT = P - 2
_POW2523_EXPONENT = 2**252 - 3  # (p - 5) / 8


@dataclass(frozen=True, eq=False)
class FieldElement:
    """An element of GF(2^255 - 19), kept in canonical (fully reduced) form."""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value % P)

    @classmethod
    def from_int(cls, value: int) -> FieldElement:
        """Build an element from an integer, reducing it modulo p."""
        if not isinstance(value, int):
            raise TypeError(f"expected an int, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_bytes(cls, data: bytes) -> FieldElement:
        """Decode 32 little-endian bytes; the top bit is ignored."""
        raw = bytes(data)
        if len(raw) != _ENCODED_SIZE:
            raise ValueError(
                f"field element encoding must be {_ENCODED_SIZE} bytes, got {len(raw)}"
            )
        return cls(int.from_bytes(raw, "little") & _TOP_BIT_MASK)

    def to_bytes(self) -> bytes:
        """Encode as 32 little-endian bytes of the canonical value."""
        return self.value.to_bytes(_ENCODED_SIZE, "little")

    def is_zero(self) -> bool:
        """Whether the element is zero."""
        return self.value == 0

    def parity(self) -> int:
        """The lowest bit of the canonical value."""
        return self.value & 1

    def square(self) -> FieldElement:
        """The element multiplied by itself."""
        return FieldElement(self.value * self.value)

    def invert(self) -> FieldElement:
        """The multiplicative inverse, x^(p-2); zero maps to zero."""
        return FieldElement(pow(self.value, _INVERT_EXPONENT, P))

    def pow2523(self) -> FieldElement:
        """The power x^(2^252 - 3), used when taking square roots."""
        return FieldElement(pow(self.value, _POW2523_EXPONENT, P))

    def __add__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self.value + other.value)

    def __sub__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self.value - other.value)

    def __mul__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self.value * other.value)

    def __neg__(self) -> FieldElement:
        return FieldElement(-self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value