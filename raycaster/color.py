"""Colours and surface materials; channels range from 0.0 to 1.0."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB colour."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other: object) -> "Color":
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        return NotImplemented

    def __mul__(self, other: object) -> "Color":
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            s = float(other)
            return Color(self.r * s, self.g * s, self.b * s)
        return NotImplemented

    def __rmul__(self, other: object) -> "Color":
        return self.__mul__(other)

    def __truediv__(self, divisor: object) -> "Color":
        if isinstance(divisor, Real):
            frac = 1.0 / float(divisor)
            return Color(self.r * frac, self.g * frac, self.b * frac)
        return NotImplemented


@dataclass
class Material:
    """Surface properties of a model or sphere."""

    smooth: bool = False
    reflection: float = 0.0
    refraction: float = 0.0
    transparency: float = 0.0
    color: Color = field(default_factory=Color)