"""Spheres placed in the scene."""

from __future__ import annotations

from dataclasses import dataclass, field

from .color import Material
from .linalg import Point


@dataclass
class Sphere:
    """A sphere given by centre, radius and material."""

    position: Point = field(default_factory=Point)
    radius: float = 1.0
    material: Material = field(default_factory=Material)