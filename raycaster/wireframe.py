"""Wireframe rendering with Bresenham lines and a seed fill."""

from __future__ import annotations

from typing import Iterator, Tuple

from .color import Color
from .image import Image
from .linalg import Point
from .scene import Scene


def _line_pixels(p1: Point, p2: Point) -> Iterator[Tuple[int, int]]:
    """Pixels of the Bresenham line from p1 to p2, both ends included."""
    x, y = int(p1[0]), int(p1[1])
    dx = int(p2[0]) - x
    dy = int(p2[1]) - y
    sx = -1 if dx < 0 else 1
    sy = -1 if dy < 0 else 1
    adx, ady = abs(dx), abs(dy)

    if adx >= ady:
        e = 2 * ady - adx
        for _ in range(adx):
            yield x, y
            if e >= 0:
                y += sy
                e -= 2 * adx
            x += sx
            e += 2 * ady
    else:
        e = 2 * adx - ady
        for _ in range(ady):
            yield x, y
            if e >= 0:
                x += sx
                e -= 2 * ady
            y += sy
            e += 2 * adx
    yield x, y


class WireframeRenderer:
    """Draws the edges of every triangle of a scene into an image."""

    def __init__(self, scene: Scene, image: Image) -> None:
        self.scene = scene
        self.image = image

    def render_scene(self, color: Color) -> None:
        """Draw all model triangles, transformed to world space, as outlines."""
        for model in self.scene.models:
            matrix = model.transformation
            for triangle in model.triangles:
                a, b, c = triangle.transformed(matrix).vertices
                self.draw_bresenham_line(a, b, color)
                self.draw_bresenham_line(b, c, color)
                self.draw_bresenham_line(c, a, color)

    def draw_bresenham_line(self, p1: Point, p2: Point, color: Color) -> None:
        """Draw a line between the x/y components of p1 and p2; z is ignored."""
        for x, y in _line_pixels(p1, p2):
            self.image.set_value(x, y, color)

    def seed_fill_area(self, seed: Point, border_color: Color, fill_color: Color) -> None:
        """Flood-fill the 4-connected region around ``seed`` up to ``border_color``.

        Raises IndexError if the seed lies outside the image.
        """
        image = self.image
        start = (int(seed[0]), int(seed[1]))
        stop_colors = (border_color, fill_color)
        if image.get_value(*start) in stop_colors:
            return

        stack = [start]
        while stack:
            x, y = stack.pop()
            image.set_value(x, y, fill_color)
            for nx, ny in ((x - 1, y), (x, y + 1), (x + 1, y), (x, y - 1)):
                if not (0 <= nx < image.width and 0 <= ny < image.height):
                    continue
                if image.get_value(nx, ny) not in stop_colors:
                    stack.append((nx, ny))