"""A pinhole camera producing primary rays in world space."""

from __future__ import annotations

from .linalg import Matrix, Point, SingularMatrixError, Vector, cross_product
from .structs import Ray


class Camera:
    """Camera with a view matrix whose columns are side, up, view and eye."""

    def __init__(self) -> None:
        self._view = Matrix()
        self._inv_view = Matrix()
        self._projection = Matrix()
        self._window = Matrix()
        self.width = 0
        self.height = 0

    def set_eye_point(self, pos: Point) -> None:
        self._view.set_column(3, pos)

    def eye_point(self) -> Point:
        col = self._view.column(3)
        return Point(col.x, col.y, col.z)

    def set_view_direction(self, view: Vector) -> None:
        self._view.set_column(2, view)
        self.make_ortho()

    def set_up(self, up: Vector) -> None:
        self._view.set_column(1, up)
        self.make_ortho()

    def make_ortho(self) -> None:
        """Recompute the side axis and the inverse view matrix."""
        up = self._view.column(1).normalized()
        view = self._view.column(2).normalized()
        self._view.set_column(0, cross_product(up, view))
        try:
            self._inv_view = self._view.inverted()
        except SingularMatrixError:
            # A degenerate basis leaves the inverse as a plain copy.
            self._inv_view = self._view.copy()

    def set_size(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        w, h = float(self.width), float(self.height)

        self._projection.set_column(0, Vector(2.0 / w, 0.0, 0.0))
        self._projection.set_column(1, Vector(0.0, 2.0 / h, 0.0))
        self._projection.set_column(2, Vector(0.0, 0.0, 0.0))
        self._projection.set_column(3, Vector(0.0, 0.0, -1.0))

        self._window.set_column(0, Vector(w / 2, 0.0, 0.0))
        self._window.set_column(1, Vector(0.0, h / 2, 0.0))
        self._window.set_column(2, Vector(0.0, 0.0, 0.5))
        self._window.set_column(3, Vector(w / 2.0, h / 2.0, 0.0))

    def get_ray(self, x: int, y: int) -> Ray:
        """The primary ray through pixel (x, y)."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("camera size has not been set")
        origin = Point(0.0, 0.0, 0.0) + self._view.column(3)
        aspect = self.width / self.height

        dx = 2.0 * (int(x) - self.width // 2) / self.width
        dy = 2.0 * (int(y) - self.height // 2) / self.height
        d = self._view.column(2) + self._view.column(0) * dx + self._view.column(1) * dy
        direction = Vector(d.x * aspect, d.y, d.z).normalized()
        return Ray(origin, direction)

    def view_matrix(self) -> Matrix:
        return self._view.copy()

    def inv_view_matrix(self) -> Matrix:
        return self._inv_view.copy()

    def __str__(self) -> str:
        return f"{self._view}\nWindow: {self.width}x{self.height}"