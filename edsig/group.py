"""The Ed25519 group: points on the twisted Edwards curve -x^2 + y^2 = 1 + d x^2 y^2."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from edsig.field import FieldElement
from edsig.heap import IndexHeap
from edsig.scalar import Scalar

__all__ = [
    "Point",
    "scalarmult_base",
    "double_scalarmult",
    "multi_scalarmult",
]


def _from_limbs(*limbs: int) -> FieldElement:
    """Build a field element from little-endian 64-bit words."""
    return FieldElement.from_int(
        sum(limb << (64 * i) for i, limb in enumerate(limbs))
    )


_D = _from_limbs(
    0x75EB4DCA135978A3, 0x00700A4D4141D8AB, 0x8CC740797779E898, 0x52036CEE2B6FFE73
)
_D2 = _from_limbs(
    0xEBD69B9426B2F146, 0x00E0149A8283B156, 0x198E80F2EEF3D130, 0xA406D9DC56DFFCE7
)
_SQRT_M1 = _from_limbs(
    0xC4EE1B274A0EA0B0, 0x2F431806AD2FE478, 0x2B4D00993DFBD7A7, 0x2B8324804FC1DF0B
)

_BASE_X = _from_limbs(
    0xC9562D608F25D51A, 0x692CC7609525A7B2, 0xC0A4E231FDD6DC5C, 0x216936D3CD6E53FE
)
_BASE_Y = _from_limbs(
    0x6666666666666658, 0x6666666666666666, 0x6666666666666666, 0x6666666666666666
)
_BASE_T = _from_limbs(
    0x6DDE8AB3A5B7DDA3, 0x20F09F80775152F5, 0x66EA4E8E64ABE37D, 0x67875F0FD78B7665
)

_ZERO = FieldElement.from_int(0)
_ONE = FieldElement.from_int(1)
_TWO = FieldElement.from_int(2)

_ENCODED_SIZE = 32
_BASE_WINDOW_ROWS = 64
_BASE_WINDOW_MAX = 8
_S1_WINDOW = 5
_S2_WINDOW = 7
_MIN_MULTI_POINTS = 5


@dataclass(frozen=True, eq=False)
class Point:
    """A curve point in extended coordinates (X:Y:Z:T) with x = X/Z, y = Y/Z, xy = T/Z."""

    x: FieldElement
    y: FieldElement
    z: FieldElement
    t: FieldElement

    @classmethod
    def neutral(cls) -> Point:
        """The neutral element (0, 1)."""
        return cls(_ZERO, _ONE, _ONE, _ZERO)

    @classmethod
    def base(cls) -> Point:
        """The standard base point."""
        return cls(_BASE_X, _BASE_Y, _ONE, _BASE_T)

    @classmethod
    def from_bytes_negated(cls, data: bytes) -> Point:
        """Decode a 32-byte point encoding and return the negation of that point.

        Raises ValueError if the encoding has no point on the curve.
        """
        raw = bytes(data)
        if len(raw) != _ENCODED_SIZE:
            raise ValueError(
                f"point encoding must be {_ENCODED_SIZE} bytes, got {len(raw)}"
            )
        sign = raw[31] >> 7
        y = FieldElement.from_bytes(raw)
        num = y.square()
        den = num * _D
        num = num - _ONE
        den = _ONE + den

        # sqrt(num/den) via (num * den^7)^((p-5)/8) * num * den^3
        den2 = den.square()
        den4 = den2.square()
        den6 = den4 * den2
        t = (den6 * num * den).pow2523()
        x = t * num * den * den * den

        if x.square() * den != num:
            x = x * _SQRT_M1
        if x.square() * den != num:
            raise ValueError("encoding does not describe a point on the curve")

        if x.parity() != 1 - sign:
            x = -x
        return cls(x, y, _ONE, x * y)

    def to_bytes(self) -> bytes:
        """Encode as 32 bytes: y little-endian with the parity of x in the top bit."""
        zi = self.z.invert()
        tx = self.x * zi
        ty = self.y * zi
        out = bytearray(ty.to_bytes())
        out[31] ^= tx.parity() << 7
        return bytes(out)

    def is_neutral(self) -> bool:
        """Whether this is the neutral element."""
        return self.x.is_zero() and self.y == self.z

    def double(self) -> Point:
        """The point added to itself."""
        a = self.x.square()
        b = self.y.square()
        c = _TWO * self.z.square()
        d = -a
        e = (self.x + self.y).square() - a - b
        g = d + b
        f = g - c
        h = d - b
        return Point(e * f, g * h, f * g, e * h)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        a = (self.y - self.x) * (other.y - other.x)
        b = (self.y + self.x) * (other.y + other.x)
        c = self.t * _D2 * other.t
        d = _TWO * self.z * other.z
        e = b - a
        f = d - c
        g = d + c
        h = b + a
        return Point(e * f, g * h, f * g, e * h)

    def __neg__(self) -> Point:
        return Point(-self.x, self.y, self.z, -self.t)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            self.x * other.z == other.x * self.z
            and self.y * other.z == other.y * self.z
        )

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def scalar_mult(self, scalar: Scalar) -> Point:
        """The point multiplied by the scalar, by double-and-add."""
        value = scalar.value
        if value == 0:
            return Point.neutral()
        if value == 1:
            return self
        result = Point.neutral()
        for bit in bin(value)[2:]:
            result = result.double()
            if bit == "1":
                result = result + self
        return result


def _odd_multiples(point: Point, count: int) -> tuple[Point, ...]:
    """The points P, 3P, 5P, ..., (2*count - 1)P."""
    twice = point.double()
    multiples = [point]
    for _ in range(count - 1):
        multiples.append(multiples[-1] + twice)
    return tuple(multiples)


@lru_cache(maxsize=1)
def _base_table() -> tuple[tuple[Point, ...], ...]:
    """Rows i of j * 16^i * B for j in 0..8."""
    rows = []
    step = Point.base()
    for _ in range(_BASE_WINDOW_ROWS):
        row = [Point.neutral(), step]
        for _ in range(_BASE_WINDOW_MAX - 1):
            row.append(row[-1] + step)
        rows.append(tuple(row))
        step = row[_BASE_WINDOW_MAX].double()
    return tuple(rows)


@lru_cache(maxsize=1)
def _base_odd_multiples() -> tuple[Point, ...]:
    return _odd_multiples(Point.base(), 1 << (_S2_WINDOW - 2))


def scalarmult_base(scalar: Scalar) -> Point:
    """The base point multiplied by the scalar, using signed radix-16 windows."""
    table = _base_table()
    result = Point.neutral()
    for row, digit in zip(table, scalar.window4()):
        magnitude = abs(digit)
        if magnitude == 0:
            continue
        if magnitude <= _BASE_WINDOW_MAX:
            term = row[magnitude]
        else:
            term = row[1].scalar_mult(Scalar(magnitude))
        result = result + (term if digit > 0 else -term)
    return result


def double_scalarmult(point: Point, s1: Scalar, s2: Scalar) -> Point:
    """Compute s1 * point + s2 * base with sliding windows."""
    slide1 = s1.slide(_S1_WINDOW)
    slide2 = s2.slide(_S2_WINDOW)
    pre1 = _odd_multiples(point, 1 << (_S1_WINDOW - 2))
    pre2 = _base_odd_multiples()

    top = next(
        (i for i in reversed(range(len(slide1))) if slide1[i] or slide2[i]), None
    )
    result = Point.neutral()
    if top is None:
        return result

    for i in range(top, -1, -1):
        result = result.double()
        for digit, table in ((slide1[i], pre1), (slide2[i], pre2)):
            if digit > 0:
                result = result + table[digit // 2]
            elif digit < 0:
                result = result + -table[(-digit) // 2]
    return result


def multi_scalarmult(points: Sequence[Point], scalars: Sequence[Scalar]) -> Point:
    """Compute the sum of scalars[i] * points[i] with the Bos-Coster method.

    Needs at least five points. Runs fast when the scalars are of similar size,
    as in batch verification.
    """
    if len(points) != len(scalars):
        raise ValueError(
            f"got {len(points)} points but {len(scalars)} scalars"
        )
    count = len(points)
    if count < _MIN_MULTI_POINTS:
        raise ValueError(
            f"need at least {_MIN_MULTI_POINTS} points, got {count}"
        )
    p = list(points)
    s = list(scalars)

    heap = IndexHeap(s, ((count + 1) // 2) | 1)

    def reduce_while(keep_going) -> tuple[int, int]:
        while True:
            max1, max2 = heap.two_largest()
            if not keep_going(s[max1]) or s[max2].is_zero():
                return max1, max2
            s[max1] = s[max1].subtract_unreduced(s[max2])
            p[max2] = p[max2] + p[max1]
            heap.root_replaced()

    reduce_while(lambda top: top.value >> 192 != 0)
    reduce_while(lambda top: top.value >> 128 != 0)
    heap.extend(count)
    reduce_while(lambda top: top.value >> 64 != 0)
    max1, _ = reduce_while(lambda top: True)

    return p[max1].scalar_mult(s[max1])