"""Triangle meshes with their material and model transformation."""

from __future__ import annotations

import dataclasses
import math
from typing import Iterable

from .color import Material
from .linalg import Matrix, Vector
from .structs import Triangle

_PI = 3.1415


class Model:
    """A mesh placed in the world by scale, rotation and translation."""

    def __init__(self, triangles: Iterable[Triangle] = ()) -> None:
        self.triangles = list(triangles)
        self.material = Material()
        self._rotation = Vector(0.0, 0.0, 0.0)
        self._translation = Vector(0.0, 0.0, 0.0)
        self._scale = Vector(1.0, 1.0, 1.0)
        self._matrix = Matrix()

    @property
    def rotation(self) -> Vector:
        """Rotation angles about x, y and z in radians."""
        return self._rotation

    @property
    def translation(self) -> Vector:
        return self._translation

    @property
    def scale(self) -> Vector:
        return self._scale

    @property
    def transformation(self) -> Matrix:
        """The model-to-world matrix."""
        return self._matrix.copy()

    def set_rotation(self, rotation: Vector) -> None:
        """Set rotation angles about x, y and z, given in degrees."""
        self._rotation = Vector(*(a * 2 * _PI / 360 for a in rotation))
        self._update_matrix()

    def set_translation(self, translation: Vector) -> None:
        self._translation = Vector(*translation)
        self._update_matrix()

    def set_scale(self, scale: Vector) -> None:
        self._scale = Vector(*scale)
        self._update_matrix()

    def copy(self) -> "Model":
        """An independent copy sharing no mutable state."""
        other = Model(self.triangles)
        other.material = dataclasses.replace(self.material)
        other._rotation = self._rotation
        other._translation = self._translation
        other._scale = self._scale
        other._matrix = self._matrix.copy()
        return other

    def _update_matrix(self) -> None:
        scale = Matrix()
        for i, s in enumerate(self._scale):
            scale.set_value(i, i, s)

        ax, ay, az = self._rotation
        rx = Matrix()
        rx.set_value(1, 1, math.cos(ax))
        rx.set_value(1, 2, -math.sin(ax))
        rx.set_value(2, 1, math.sin(ax))
        rx.set_value(2, 2, math.cos(ax))

        ry = Matrix()
        ry.set_value(0, 0, math.cos(ay))
        ry.set_value(0, 2, math.sin(ay))
        ry.set_value(2, 0, -math.sin(ay))
        ry.set_value(2, 2, math.cos(ay))

        rz = Matrix()
        rz.set_value(0, 0, math.cos(az))
        rz.set_value(0, 1, -math.sin(az))
        rz.set_value(1, 0, math.sin(az))
        rz.set_value(1, 1, math.cos(az))

        translate = Matrix()
        for i, t in enumerate(self._translation):
            translate.set_value(i, 3, t)

        self._matrix = translate * (rx * ry * rz) * scale