"""Rays, hit records and triangles shared by the renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from .color import Color
from .linalg import Matrix, Point, Vector, cross_product


@dataclass
class Ray:
    """A half-line starting at ``origin`` and heading along ``direction``."""

    origin: Point = field(default_factory=Point)
    direction: Vector = field(default_factory=Vector)

    def __str__(self) -> str:
        return f"Ray origin: {self.origin} direction: {self.direction}"


@dataclass
class HitRecord:
    """Everything the shading step needs to know about a ray hit."""

    color: Color = field(default_factory=Color)
    parameter: float = math.inf
    intersection_point: Point = field(default_factory=Point)
    ray_direction: Vector = field(default_factory=Vector)
    normal: Vector = field(default_factory=Vector)
    recursions: int = 0
    triangle_id: int = -1
    model_id: int = -1
    sphere_id: int = -1

    def __str__(self) -> str:
        p = self.intersection_point
        return (
            f"Intersection at Parameter: {self.parameter:g} with triangle "
            f"{self.triangle_id} at point {p.x:g}, {p.y:g}, {p.z:g} "
            f"with normal {self.normal}"
        )


@dataclass(frozen=True)
class Triangle:
    """Three vertices and a face normal."""

    vertices: Tuple[Point, Point, Point]
    normal: Vector = field(default_factory=Vector)

    @classmethod
    def from_vertices(cls, a: Point, b: Point, c: Point) -> "Triangle":
        """Build a triangle whose normal follows the winding a, b, c."""
        normal = cross_product(b - a, c - a).normalized()
        return cls((a, b, c), normal)

    def transformed(self, matrix: Matrix) -> "Triangle":
        """Return the triangle with its vertices mapped by ``matrix``."""
        a, b, c = self.vertices
        return Triangle((matrix * a, matrix * b, matrix * c), self.normal)