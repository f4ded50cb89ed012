"""Small fixed-dimension vectors (2, 3 or 4 components) and vector helpers."""

from __future__ import annotations

import math
import operator
from numbers import Real
from typing import Callable, Iterable, Iterator, Union

__all__ = [
    "Vector",
    "dot_product",
    "cross_product",
    "absolute",
    "maximum",
    "normalized",
    "with_length",
    "distance",
    "orthogonal_vector",
]

_DIMENSIONS = (2, 3, 4)

Scalar = Union[int, float]


def _div(a: float, b: float) -> float:
    """Divide with IEEE semantics: division by zero yields inf or nan."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _component(index: int, dims: tuple[int, ...], name: str) -> property:
    def fget(self: "Vector") -> float:
        if len(self._data) not in dims:
            raise AttributeError(f"{len(self._data)}-dimensional vector has no component {name!r}")
        return self._data[index]

    def fset(self: "Vector", value: Scalar) -> None:
        if len(self._data) not in dims:
            raise AttributeError(f"{len(self._data)}-dimensional vector has no component {name!r}")
        self._data[index] = float(value)

    return property(fget, fset, doc=f"Component {name}.")


class Vector:
    """A mutable vector of 2, 3 or 4 float components."""

    __slots__ = ("_data",)

    def __init__(self, *args: Union[Scalar, Iterable[Scalar]]) -> None:
        if len(args) == 1 and not isinstance(args[0], Real):
            args = tuple(args[0])  # type: ignore[arg-type]
        if len(args) not in _DIMENSIONS:
            raise ValueError(f"a vector has 2, 3 or 4 components, got {len(args)}")
        self._data = [float(a) for a in args]  # type: ignore[arg-type]

    # ------------------------------------------------------------ construction

    @classmethod
    def zero(cls, dim: int) -> "Vector":
        """Return the zero vector of dimension ``dim``."""
        return cls(*([0.0] * dim))

    @classmethod
    def widen(cls, other: "Vector", dim: int) -> "Vector":
        """Copy ``other`` into a vector of dimension ``dim``, zero-filling the rest."""
        if other.dim() > dim:
            raise ValueError(f"cannot widen a {other.dim()}-dimensional vector to {dim}")
        return cls(*other, *([0.0] * (dim - other.dim())))

    # ------------------------------------------------------------ access

    x = _component(0, (2, 3, 4), "x")
    y = _component(1, (2, 3, 4), "y")
    z = _component(2, (3, 4), "z")
    w = _component(3, (4,), "w")
    r = _component(0, (3, 4), "r")
    g = _component(1, (3, 4), "g")
    b = _component(2, (3, 4), "b")
    a = _component(3, (4,), "a")

    def dim(self) -> int:
        """Number of components."""
        return len(self._data)

    def __getitem__(self, index: int) -> float:
        return self._data[index]

    def __setitem__(self, index: int, value: Scalar) -> None:
        self._data[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    # ------------------------------------------------------------ arithmetic

    def _operands(self, other: object) -> list[float] | None:
        if isinstance(other, Vector):
            if other.dim() != self.dim():
                raise ValueError(
                    f"dimension mismatch: {self.dim()} and {other.dim()}"
                )
            return other._data
        if isinstance(other, Real):
            return [float(other)] * self.dim()
        return None

    def _binary(self, other: object, op: Callable[[float, float], float], reflected: bool = False):
        values = self._operands(other)
        if values is None:
            return NotImplemented
        if reflected:
            return Vector(*(op(o, s) for s, o in zip(self._data, values)))
        return Vector(*(op(s, o) for s, o in zip(self._data, values)))

    def _inplace(self, other: object, op: Callable[[float, float], float]):
        values = self._operands(other)
        if values is None:
            return NotImplemented
        self._data = [op(s, o) for s, o in zip(self._data, values)]
        return self

    def __add__(self, other: object) -> "Vector":
        return self._binary(other, operator.add)

    def __radd__(self, other: object) -> "Vector":
        return self._binary(other, operator.add, reflected=True)

    def __sub__(self, other: object) -> "Vector":
        return self._binary(other, operator.sub)

    def __rsub__(self, other: object) -> "Vector":
        return self._binary(other, operator.sub, reflected=True)

    def __mul__(self, other: object) -> "Vector":
        return self._binary(other, operator.mul)

    def __rmul__(self, other: object) -> "Vector":
        return self._binary(other, operator.mul, reflected=True)

    def __truediv__(self, other: object) -> "Vector":
        return self._binary(other, _div)

    def __rtruediv__(self, other: object) -> "Vector":
        return self._binary(other, _div, reflected=True)

    def __iadd__(self, other: object) -> "Vector":
        return self._inplace(other, operator.add)

    def __isub__(self, other: object) -> "Vector":
        return self._inplace(other, operator.sub)

    def __imul__(self, other: object) -> "Vector":
        return self._inplace(other, operator.mul)

    def __itruediv__(self, other: object) -> "Vector":
        return self._inplace(other, _div)

    def __neg__(self) -> "Vector":
        return Vector(*(-c for c in self._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(format(c, "g") for c in self._data) + "]"

    def __repr__(self) -> str:
        return "Vector(" + ", ".join(repr(c) for c in self._data) + ")"

    # ------------------------------------------------------------ geometry

    def length_squared(self) -> float:
        """Sum of the squared components."""
        return sum(c * c for c in self._data)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def set_length(self, length: Scalar) -> None:
        """Scale the vector in place to the given length."""
        ratio = _div(float(length), self.length())
        self._data = [c * ratio for c in self._data]

    def normalize(self) -> float:
        """Scale to unit length in place; return the length before scaling."""
        length = self.length()
        self._data = [_div(c, length) for c in self._data]
        return length

    def abs(self) -> None:
        """Replace every component by its absolute value."""
        self._data = [abs(c) for c in self._data]

    def set_zero(self) -> None:
        """Set every component to zero."""
        self._data = [0.0] * len(self._data)


def dot_product(a: Vector, b: Vector) -> float:
    """Dot product of two vectors of the same dimension."""
    if a.dim() != b.dim():
        raise ValueError(f"dimension mismatch: {a.dim()} and {b.dim()}")
    return sum(x * y for x, y in zip(a, b))


def cross_product(a: Vector, b: Vector) -> Vector:
    """Cross product of two 3-dimensional vectors."""
    if a.dim() != 3 or b.dim() != 3:
        raise ValueError("cross product requires 3-dimensional vectors")
    return Vector(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def absolute(v: Vector) -> Vector:
    """Component-wise absolute value."""
    return Vector(*(abs(c) for c in v))


def maximum(a: Vector, b: Vector) -> Vector:
    """Component-wise maximum."""
    if a.dim() != b.dim():
        raise ValueError(f"dimension mismatch: {a.dim()} and {b.dim()}")
    return Vector(*(max(x, y) for x, y in zip(a, b)))


def normalized(v: Vector) -> Vector:
    """Return ``v`` scaled to unit length."""
    return v / v.length()


def with_length(v: Vector, length: Scalar) -> Vector:
    """Return ``v`` scaled to the given length."""
    return v * _div(float(length), v.length())


def distance(a: Vector, b: Vector) -> float:
    """Euclidean distance between two points."""
    return (a - b).length()


def orthogonal_vector(v: Vector) -> Vector:
    """Return some vector orthogonal to the 3-dimensional vector ``v``."""
    r = cross_product(Vector(1, 0, 0), v)
    if r.length_squared() < 0.05:
        r = cross_product(Vector(0, 1, 0), v)
    return r