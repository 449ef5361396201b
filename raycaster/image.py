"""A raster image with colour channels in 0.0 .. 1.0."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .color import Color

BACKGROUND = Color(1.0, 1.0, 1.0)
_MAX_VALUE = 255


class Image:
    """A width x height grid of colours, filled with white when created."""

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.values: List[Color] = [BACKGROUND] * (self.width * self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_value(self, x: float, y: float, color: Color) -> None:
        """Set pixel (x, y); coordinates outside the image are ignored."""
        xi, yi = int(x), int(y)
        if self._inside(xi, yi):
            self.values[yi * self.width + xi] = color

    def get_value(self, x: float, y: float) -> Color:
        """Colour of pixel (x, y); raise IndexError outside the image."""
        xi, yi = int(x), int(y)
        if not self._inside(xi, yi):
            raise IndexError(f"pixel ({xi}, {yi}) outside {self.width}x{self.height}")
        return self.values[yi * self.width + xi]

    def to_ppm(self) -> str:
        """The image as plain-text PPM, last pixel first."""
        lines = ["P3", f"{self.width} {self.height}", str(_MAX_VALUE)]
        scale = float(_MAX_VALUE)
        lines.extend(
            f"{int(scale * c.r)} {int(scale * c.g)} {int(scale * c.b)}"
            for c in reversed(self.values)
        )
        return "\n".join(lines) + "\n"

    def write_ppm(self, filename: Union[str, Path]) -> None:
        """Write the image to ``filename`` as plain-text PPM."""
        Path(filename).write_text(self.to_ppm())