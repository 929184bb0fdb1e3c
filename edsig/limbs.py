"""Field elements of GF(2^255 - 19) held as ten signed limbs in radix 2^25.5.

Limb ``i`` carries ``2^ceil(25.5 * i)`` as its weight: even limbs are 26 bits
wide and odd limbs 25 bits wide. Limbs may be negative or exceed their width
slightly between reductions; the value is always the weighted sum mod p.
"""

from __future__ import annotations

from dataclasses import dataclass

from edsig.field import P

__all__ = ["LimbElement"]

_LIMB_COUNT = 10
_WIDTHS = (26, 25, 26, 25, 26, 25, 26, 25, 26, 25)
_OFFSETS = (0, 26, 51, 77, 102, 128, 153, 179, 204, 230)
_ENCODED_SIZE = 32

# (byte offset, byte count, left shift, mask) for each limb when decoding.
_LOADS = (
    (0, 4, 0, None),
    (4, 3, 6, None),
    (7, 3, 5, None),
    (10, 3, 3, None),
    (13, 3, 2, None),
    (16, 4, 0, None),
    (20, 3, 7, None),
    (23, 3, 5, None),
    (26, 3, 4, None),
    (29, 3, 2, 8388607),
)

_FROMBYTES_CARRIES = (9, 1, 3, 5, 7, 0, 2, 4, 6, 8)
_MUL_CARRIES = (0, 4, 1, 5, 2, 6, 3, 7, 4, 8, 9, 0)

_INVERT_EXPONENT = P - 2
_POW22523_EXPONENT = (P - 5) // 8


def _carry(h: list[int], i: int) -> None:
    """Move the rounded excess of limb ``i`` into the next limb."""
    width = _WIDTHS[i]
    c = (h[i] + (1 << (width - 1))) >> width
    h[i] -= c << width
    if i == _LIMB_COUNT - 1:
        h[0] += c * 19
    else:
        h[i + 1] += c


@dataclass(frozen=True, eq=False)
class LimbElement:
    """An element of GF(2^255 - 19) as ten signed limbs."""

    limbs: tuple[int, ...]

    def __post_init__(self) -> None:
        limbs = tuple(self.limbs)
        if len(limbs) != _LIMB_COUNT:
            raise ValueError(f"expected {_LIMB_COUNT} limbs, got {len(limbs)}")
        object.__setattr__(self, "limbs", limbs)

    @classmethod
    def zero(cls) -> LimbElement:
        """The element 0."""
        return cls((0,) * _LIMB_COUNT)

    @classmethod
    def one(cls) -> LimbElement:
        """The element 1."""
        return cls((1,) + (0,) * (_LIMB_COUNT - 1))

    @classmethod
    def _from_canonical(cls, value: int) -> LimbElement:
        value %= P
        return cls(
            tuple(
                (value >> offset) & ((1 << width) - 1)
                for offset, width in zip(_OFFSETS, _WIDTHS)
            )
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> LimbElement:
        """Decode 32 little-endian bytes; the top bit is ignored."""
        raw = bytes(data)
        if len(raw) != _ENCODED_SIZE:
            raise ValueError(
                f"field element encoding must be {_ENCODED_SIZE} bytes, got {len(raw)}"
            )
        h = []
        for start, count, shift, mask in _LOADS:
            word = int.from_bytes(raw[start : start + count], "little")
            if mask is not None:
                word &= mask
            h.append(word << shift)
        for i in _FROMBYTES_CARRIES:
            _carry(h, i)
        return cls(tuple(h))

    def to_int(self) -> int:
        """The canonical integer value in [0, p)."""
        return sum(limb << offset for limb, offset in zip(self.limbs, _OFFSETS)) % P

    def copy(self) -> LimbElement:
        """A new element with the same limbs."""
        return LimbElement(self.limbs)

    def cmov(self, other: LimbElement, flag: int) -> LimbElement:
        """Return ``other`` if ``flag`` is 1 and ``self`` if it is 0."""
        if flag not in (0, 1):
            raise ValueError(f"flag must be 0 or 1, got {flag!r}")
        mask = -flag
        return LimbElement(
            tuple(f ^ ((f ^ g) & mask) for f, g in zip(self.limbs, other.limbs))
        )

    def is_negative(self) -> bool:
        """Whether the canonical value is odd."""
        return bool(self.to_int() & 1)

    def is_nonzero(self) -> bool:
        """Whether the element differs from zero."""
        return self.to_int() != 0

    def invert(self) -> LimbElement:
        """The multiplicative inverse, x^(p-2); zero maps to zero."""
        return LimbElement._from_canonical(pow(self.to_int(), _INVERT_EXPONENT, P))

    def pow22523(self) -> LimbElement:
        """The power x^((p-5)/8), used when taking square roots."""
        return LimbElement._from_canonical(pow(self.to_int(), _POW22523_EXPONENT, P))

    def __add__(self, other: object) -> LimbElement:
        if not isinstance(other, LimbElement):
            return NotImplemented
        return LimbElement(tuple(f + g for f, g in zip(self.limbs, other.limbs)))

    def __mul__(self, other: object) -> LimbElement:
        if not isinstance(other, LimbElement):
            return NotImplemented
        h = [0] * _LIMB_COUNT
        for i, fi in enumerate(self.limbs):
            for j, gj in enumerate(other.limbs):
                term = fi * gj
                if i & 1 and j & 1:
                    term *= 2
                k = i + j
                if k >= _LIMB_COUNT:
                    term *= 19
                    k -= _LIMB_COUNT
                h[k] += term
        for i in _MUL_CARRIES:
            _carry(h, i)
        return LimbElement(tuple(h))

    def __neg__(self) -> LimbElement:
        return LimbElement(tuple(-f for f in self.limbs))