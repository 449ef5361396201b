"""Points, direction vectors and 4x4 homogeneous matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Tuple, Union


class SingularMatrixError(ValueError):
    """Raised when a matrix with determinant zero is inverted."""


def _round3(value: float) -> float:
    """Round to three decimals, halves away from zero."""
    scaled = value * 1000.0
    rounded = math.floor(abs(scaled) + 0.5)
    return math.copysign(rounded, scaled) / 1000.0


def _format(value: float) -> str:
    return f"{_round3(value):g}"


@dataclass(frozen=True, slots=True)
class Point:
    """A location in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> "Point":
        if isinstance(other, (Point, Vector)):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object) -> "Vector":
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scale: object) -> "Point":
        if isinstance(scale, Real):
            s = float(scale)
            return Point(self.x * s, self.y * s, self.z * s)
        return NotImplemented

    def __rmul__(self, scale: object) -> "Point":
        return self.__mul__(scale)

    def __str__(self) -> str:
        return "[ " + "".join(f"{_format(v)} " for v in self) + " ]"


@dataclass(frozen=True, slots=True)
class Vector:
    """A direction in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> "Vector":
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object) -> "Vector":
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scale: object) -> "Vector":
        if isinstance(scale, Real):
            s = float(scale)
            return Vector(self.x * s, self.y * s, self.z * s)
        return NotImplemented

    def __rmul__(self, scale: object) -> "Vector":
        return self.__mul__(scale)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return "( " + "".join(f"{_format(v)} " for v in self) + " )"

    def norm2(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.norm2())

    def normalized(self) -> "Vector":
        """Return this vector scaled to unit length."""
        scale = 1.0 / self.norm()
        return Vector(self.x * scale, self.y * scale, self.z * scale)


class Matrix:
    """A 4x4 homogeneous transformation matrix, identity when created."""

    __slots__ = ("_m",)

    def __init__(self) -> None:
        self._m = [1.0 if r == c else 0.0 for r in range(4) for c in range(4)]

    def set_column(self, i: int, value: Union[Point, Vector]) -> None:
        """Set the upper three entries of column ``i``."""
        for row, component in enumerate(value):
            self._m[row * 4 + i] = float(component)

    def set_value(self, row: int, column: int, value: float) -> None:
        self._m[row * 4 + column] = float(value)

    def column(self, i: int) -> Vector:
        """The upper three entries of column ``i``."""
        return Vector(self._m[i], self._m[4 + i], self._m[8 + i])

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, column = index
        return self._m[row * 4 + column]

    def _minor(self, skip_row: int, skip_col: int) -> float:
        rows = [
            [self._m[r * 4 + c] for c in range(4) if c != skip_col]
            for r in range(4)
            if r != skip_row
        ]
        (a, b, c), (d, e, f), (g, h, k) = rows
        return a * (e * k - f * h) - b * (d * k - f * g) + c * (d * h - e * g)

    def inverted(self) -> "Matrix":
        """Return the inverse; raise SingularMatrixError if there is none."""
        cofactors = [
            [(-1.0) ** (r + c) * self._minor(r, c) for c in range(4)]
            for r in range(4)
        ]
        det = sum(self._m[c] * cofactors[0][c] for c in range(4))
        if det == 0:
            raise SingularMatrixError("matrix is not invertible")
        factor = 1.0 / det
        result = Matrix()
        result._m = [cofactors[c][r] * factor for r in range(4) for c in range(4)]
        return result

    def copy(self) -> "Matrix":
        result = Matrix()
        result._m = list(self._m)
        return result

    def __mul__(self, other: object):
        if isinstance(other, Matrix):
            result = Matrix()
            result._m = [
                sum(self[r, k] * other[k, c] for k in range(4))
                for r in range(4)
                for c in range(4)
            ]
            return result
        if isinstance(other, Vector):
            return Vector(
                *(sum(self[r, c] * other[c] for c in range(3)) for r in range(3))
            )
        if isinstance(other, Point):
            return Point(
                *(
                    sum(self[r, c] * other[c] for c in range(3)) + self[r, 3]
                    for r in range(3)
                )
            )
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Matrix):
            return self._m == other._m
        return NotImplemented

    def __repr__(self) -> str:
        rows = [self._m[r * 4 : r * 4 + 4] for r in range(4)]
        return f"Matrix({rows!r})"

    def __str__(self) -> str:
        return "".join(
            "".join(f"{_format(self[r, c])} " for c in range(4)) + "\n"
            for r in range(4)
        )


def cross_product(lhs: Vector, rhs: Vector) -> Vector:
    return Vector(
        lhs.y * rhs.z - lhs.z * rhs.y,
        lhs.z * rhs.x - lhs.x * rhs.z,
        lhs.x * rhs.y - lhs.y * rhs.x,
    )


def dot_product(lhs: Vector, rhs: Vector) -> float:
    return lhs.x * rhs.x + lhs.y * rhs.y + lhs.z * rhs.z


def sgn(x: int) -> int:
    """Sign of ``x`` as -1, 0 or 1."""
    return 1 if x > 0 else -1 if x < 0 else 0