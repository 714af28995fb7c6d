"""Small 2D vector and 4x4 matrix helpers for sprite rendering and physics.

Matrices are flat 16-element tuples in column-major order: elements 0-3 are
the first column, 12-15 the translation column.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union

Mat = Tuple[float, ...]
Vec3 = Tuple[float, float, float]
Number = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """Immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Union[Vec2, Number]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        return Vec2(self.x + other, self.y + other)

    __radd__ = __add__

    def __sub__(self, other: Union[Vec2, Number]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return Vec2(self.x - other, self.y - other)

    def __mul__(self, other: Union[Vec2, Number]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Number) -> Vec2:
        return Vec2(self.x / other, self.y / other)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def dot(self, other: Vec2) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        n = self.length()
        if n == 0.0:
            return Vec2(0.0, 0.0)
        return self * (1.0 / n)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a number between low and high."""
    lower = value if value > low else low
    return lower if lower < high else high


def clamp_vec(v: Vec2, low: Union[Vec2, Number], high: Union[Vec2, Number]) -> Vec2:
    """Clamp each component; bounds may be vectors or scalars."""
    lo = low if isinstance(low, Vec2) else Vec2(low, low)
    hi = high if isinstance(high, Vec2) else Vec2(high, high)
    return Vec2(clamp(v.x, lo.x, hi.x), clamp(v.y, lo.y, hi.y))


def _column(m: Sequence[float], index: int) -> Tuple[float, ...]:
    return tuple(m[index * 4:index * 4 + 4])


def _combine(*terms: Tuple[Sequence[float], float]) -> Tuple[float, ...]:
    return tuple(sum(col[i] * factor for col, factor in terms) for i in range(4))


def _normalize3(v: Sequence[float]) -> Vec3:
    n = math.sqrt(sum(c * c for c in v))
    if n == 0.0:
        return (0.0, 0.0, 0.0)
    return (v[0] / n, v[1] / n, v[2] / n)


def identity() -> Mat:
    """The 4x4 identity matrix."""
    return tuple(1.0 if i % 5 == 0 else 0.0 for i in range(16))


def translate(m: Sequence[float], v: Sequence[float]) -> Mat:
    """Translate an affine transform by the vector v = (x, y, z)."""
    c0, c1, c2, c3 = (_column(m, i) for i in range(4))
    moved = _combine((c3, 1.0), (c0, v[0]), (c1, v[1]), (c2, v[2]))
    return c0 + c1 + c2 + moved


def scale(m: Sequence[float], v: Sequence[float]) -> Mat:
    """Scale the first three columns of m by v = (x, y, z)."""
    c0, c1, c2, c3 = (_column(m, i) for i in range(4))
    return (
        tuple(c * v[0] for c in c0)
        + tuple(c * v[1] for c in c1)
        + tuple(c * v[2] for c in c2)
        + c3
    )


def ortho(left: float, right: float, bottom: float, top: float,
          near: float, far: float) -> Mat:
    """Orthographic projection matrix."""
    proj = list(identity())
    proj[0] = 2 / (right - left)
    proj[5] = 2 / (top - bottom)
    proj[10] = -1.0
    proj[12] = -(right + left) / (right - left)
    proj[13] = -(top + bottom) / (top - bottom)
    proj[14] = -near / (far - near)
    return tuple(proj)


def rotate(m: Sequence[float], angle: float, axis: Sequence[float]) -> Mat:
    """Rotate an affine transform around an axis by angle (radians)."""
    c = math.cos(angle)
    s = math.sin(angle)
    ax, ay, az = _normalize3(axis)
    tx, ty, tz = ((1 - c) * ax, (1 - c) * ay, (1 - c) * az)

    r0, r1, r2 = c + tx * ax, tx * ay + s * az, tx * az - s * ay
    r4, r5, r6 = ty * ax - s * az, c + ty * ay, ty * az + s * ax
    r8, r9, r10 = tz * ax + s * ay, tz * ay - s * ax, c + tz * az

    c0, c1, c2, c3 = (_column(m, i) for i in range(4))
    return (
        _combine((c0, r0), (c1, r1), (c2, r2))
        + _combine((c0, r4), (c1, r5), (c2, r6))
        + _combine((c0, r8), (c1, r9), (c2, r10))
        + c3
    )


def mat_mul(a: Sequence[float], b: Sequence[float]) -> Mat:
    """Multiply two 4x4 matrices."""
    return tuple(
        sum(a[k + r * 4] * b[c + k * 4] for k in range(4))
        for r in range(4)
        for c in range(4)
    )


def rotate_z(m: Sequence[float], angle: float) -> Mat:
    """Rotate m around the z axis."""
    s, c = math.sin(angle), math.cos(angle)
    r = (
        c, s, 0.0, 0.0,
        -s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )
    return mat_mul(m, r)


def rotate_y(m: Sequence[float], angle: float) -> Mat:
    """Rotate m around the y axis."""
    s, c = math.sin(angle), math.cos(angle)
    r = (
        c, 0.0, -s, 0.0,
        0.0, 1.0, 0.0, 0.0,
        s, 0.0, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )
    return mat_mul(m, r)