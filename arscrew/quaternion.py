"""Quaternions for 3D rotations, plus a rotatable 3D vector basis."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Iterator, Union

from arscrew.vector import Vector, cross_product, dot_product, normalized, orthogonal_vector

__all__ = [
    "Quaternion",
    "normalize",
    "conjugate",
    "invert_normalized",
    "invert",
    "rotate",
    "VectorBasis3",
]

# cos(0.1 degrees): rotations smaller than this are treated as none.
_NO_ROTATION_DOT = 0.99999847691

Scalar = Union[int, float]


def _div(a: float, b: float) -> float:
    """Divide with IEEE semantics: division by zero yields inf or nan."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


class Quaternion:
    """A quaternion stored as (x, y, z, w): vector part x, y, z and scalar part w."""

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: Scalar = 0.0, y: Scalar = 0.0, z: Scalar = 0.0, w: Scalar = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    # ------------------------------------------------------------ construction

    @classmethod
    def from_vector(cls, v: Vector, w: Scalar = 0.0) -> "Quaternion":
        """Build a quaternion from a 3D vector part and a scalar part."""
        if v.dim() != 3:
            raise ValueError("the vector part of a quaternion must be 3-dimensional")
        return cls(v[0], v[1], v[2], w)

    @classmethod
    def zero(cls) -> "Quaternion":
        """The all-zero quaternion."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def identity(cls) -> "Quaternion":
        """The identity rotation."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def rotation(cls, axis: Vector, angle: Scalar) -> "Quaternion":
        """Rotation of ``angle`` radians about ``axis``."""
        half_angle = float(angle) / 2.0
        return cls.from_vector(normalized(axis) * math.sin(half_angle), math.cos(half_angle))

    @classmethod
    def rotation_between(cls, start: Vector, end: Vector) -> "Quaternion":
        """Rotation that turns direction ``start`` into direction ``end``."""
        start = normalized(start)
        end = normalized(end)
        dot = dot_product(start, end)
        if dot >= _NO_ROTATION_DOT:
            return cls.identity()
        if dot <= -_NO_ROTATION_DOT:
            return cls.from_vector(orthogonal_vector(start), 0.0)
        return normalize(cls.from_vector(cross_product(start, end), 1.0 + dot))

    # ------------------------------------------------------------ access

    @property
    def v(self) -> Vector:
        """The vector part as a new 3D vector."""
        return Vector(self.x, self.y, self.z)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    # ------------------------------------------------------------ arithmetic

    def __add__(self, other: object) -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: object) -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a - b for a, b in zip(self, other)))

    def __mul__(self, other: object) -> "Quaternion":
        if isinstance(other, Quaternion):
            q1, q2 = self, other
            return Quaternion(
                q1.w * q2.x + q1.x * q2.w + q1.y * q2.z - q1.z * q2.y,
                q1.w * q2.y - q1.x * q2.z + q1.y * q2.w + q1.z * q2.x,
                q1.w * q2.z + q1.x * q2.y - q1.y * q2.x + q1.z * q2.w,
                q1.w * q2.w - q1.x * q2.x - q1.y * q2.y - q1.z * q2.z,
            )
        if isinstance(other, Real):
            s = float(other)
            return Quaternion(*(c * s for c in self))
        return NotImplemented

    def __truediv__(self, scalar: object) -> "Quaternion":
        if not isinstance(scalar, Real):
            return NotImplemented
        s = float(scalar)
        return Quaternion(*(_div(c, s) for c in self))

    def __neg__(self) -> "Quaternion":
        return Quaternion(*(-c for c in self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return tuple(self) == tuple(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(format(c, "g") for c in self) + "]"

    def __repr__(self) -> str:
        return f"Quaternion({self.x!r}, {self.y!r}, {self.z!r}, {self.w!r})"

    # ------------------------------------------------------------ geometry

    def length_squared(self) -> float:
        """Sum of the squared components."""
        return sum(c * c for c in self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def to_axis_angle(self) -> tuple[Vector, float]:
        """Return (unit axis, angle in radians), treating this as a rotation quaternion."""
        q = self if self.w > 0 else -self
        vector_part = q.v
        length = vector_part.length()
        # At angles 0 and 360 the axis is undefined; any axis is correct.
        axis = Vector(1, 0, 0) if length == 0 else vector_part / length
        angle = 2.0 * math.atan2(length, self.w)
        return axis, angle


def normalize(q: Quaternion) -> Quaternion:
    """Return ``q`` scaled to unit length."""
    return q / q.length()


def conjugate(q: Quaternion) -> Quaternion:
    """Return ``q`` with its vector part negated."""
    return Quaternion(-q.x, -q.y, -q.z, q.w)


def invert_normalized(q: Quaternion) -> Quaternion:
    """Inverse of a unit quaternion, which equals its conjugate."""
    return conjugate(q)


def invert(q: Quaternion) -> Quaternion:
    """Multiplicative inverse of ``q``."""
    return conjugate(q) / q.length_squared()


def rotate(q: Quaternion, v: Vector) -> Vector:
    """Return ``v`` rotated by the rotation quaternion ``q``."""
    pure = Quaternion.from_vector(v, 0.0)
    return ((q * pure) * conjugate(q)).v


@dataclass
class VectorBasis3:
    """Three basis vectors of 3D space."""

    vx: Vector = field(default_factory=lambda: Vector(1, 0, 0))
    vy: Vector = field(default_factory=lambda: Vector(0, 1, 0))
    vz: Vector = field(default_factory=lambda: Vector(0, 0, 1))

    @classmethod
    def default_rh_orthonormal_basis(cls) -> "VectorBasis3":
        """The right-handed standard basis."""
        return cls(Vector(1, 0, 0), Vector(0, 1, 0), Vector(0, 0, 1))

    def rotate(self, q: Quaternion) -> None:
        """Rotate every basis vector in place by ``q``."""
        self.vx = rotate(q, self.vx)
        self.vy = rotate(q, self.vy)
        self.vz = rotate(q, self.vz)

    def __str__(self) -> str:
        return f"[{self.vx}, {self.vy}, {self.vz}]"