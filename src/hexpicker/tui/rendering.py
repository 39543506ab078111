"""Draw gradient images into terminal cells.

Every cell shows two vertical pixels with the upper half block: the
foreground paints the top pixel, the background the bottom one. Images
are resampled nearest-neighbour to the cell grid.
"""

from functools import lru_cache

import numpy as np
from rich.color import Color as RichColor
from rich.segment import Segment
from rich.style import Style
from textual.strip import Strip

from hexpicker.imaging import GradientImage
from hexpicker.models import Color

HALF_BLOCK = "▀"

RGB = tuple[int, int, int]


def resample(image: GradientImage, width: int, height: int) -> np.ndarray:
    """Nearest-neighbour resample to (height, width, 4), sampling pixel centres."""
    if width <= 0 or height <= 0:
        return np.zeros((max(height, 0), max(width, 0), 4), dtype=np.uint8)
    xs = ((np.arange(width) + 0.5) * image.width / width).astype(np.intp)
    ys = ((np.arange(height) + 0.5) * image.height / height).astype(np.intp)
    xs = np.minimum(xs, image.width - 1)
    ys = np.minimum(ys, image.height - 1)
    return image.pixels[ys][:, xs]


@lru_cache(maxsize=4096)
def cell_style(fg: RGB, bg: RGB) -> Style:
    return Style(color=RichColor.from_rgb(*fg), bgcolor=RichColor.from_rgb(*bg))


def rgb_of(color: Color) -> RGB:
    return color.to_rgb8()


class CellGrid:
    """
    A width x height grid of (character, foreground, background) cells.

    Built from an image, optionally marked up by overlays, then turned
    into one `Strip` per row.
    """

    def __init__(self, image: GradientImage, width: int, height: int):
        self.width = max(width, 0)
        self.height = max(height, 0)
        pixels = resample(image, self.width, self.height * 2)
        self._cells: list[list[tuple[str, RGB, RGB]]] = []
        for row in range(self.height):
            top = pixels[2 * row]
            bottom = pixels[2 * row + 1]
            self._cells.append(
                [
                    (HALF_BLOCK, tuple(int(c) for c in top[x, :3]), tuple(int(c) for c in bottom[x, :3]))
                    for x in range(self.width)
                ]
            )

    def cell(self, x: int, y: int) -> tuple[str, RGB, RGB]:
        return self._cells[y][x]

    def background_at(self, x: int, y: int) -> RGB:
        """Top pixel color of a cell, the color a marker is drawn over."""
        return self._cells[y][x][1]

    def put(self, x: int, y: int, char: str, fg: RGB, bg: RGB) -> None:
        """Replace one cell; coordinates outside the grid are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cells[y][x] = (char, fg, bg)

    def strips(self) -> list[Strip]:
        return [
            Strip([Segment(char, cell_style(fg, bg)) for char, fg, bg in row], self.width)
            for row in self._cells
        ]


def cell_index(position: float, size: int) -> int:
    """Cell containing a local coordinate, clamped into [0, size - 1]."""
    if size <= 0:
        return 0
    return min(max(int(position), 0), size - 1)
