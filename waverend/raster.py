"""Shading and rasterisation of triangles onto a grey-scale canvas."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .model import Vertex

DEFAULT_LIGHT = (0, 0, -1)


def luminosity(vertices: Sequence[Vertex], light: Sequence[float]) -> float:
    """Return the cosine between a triangle's normal and the light direction.

    The result is NaN for a degenerate triangle.
    """
    a, b, c = vertices[:3]
    u = (c.x - a.x, c.y - a.y, c.z - a.z)
    v = (b.x - a.x, b.y - a.y, b.z - a.z)
    normal = (
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    )
    length = math.sqrt(sum(n * n for n in normal))
    if length == 0:
        return math.nan
    return sum(n / length * l for n, l in zip(normal, light))


def edge_function(x0: int, y0: int, x1: int, y1: int, x2: int, y2: int) -> int:
    """Return a value whose sign tells on which side of an edge a point lies."""
    return (x1 - x0) * (y2 - y0) - (y1 - y0) * (x2 - x0)


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the pixels of a line, endpoints included."""
    dx = abs(x1 - x0)
    step_x = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    step_y = 1 if y0 < y1 else -1
    error = dx + dy
    x, y = x0, y0
    while True:
        yield x, y
        twice = 2 * error
        if twice >= dy:
            if x == x1:
                return
            error += dy
            x += step_x
        if twice <= dx:
            if y == y1:
                return
            error += dx
            y += step_y


def triangle_points(
    x0: int, y0: int, x1: int, y1: int, x2: int, y2: int
) -> Iterator[tuple[int, int]]:
    """Yield the pixels covered by a triangle.

    Triangles wound the other way are culled and yield nothing. The bounding
    box is half-open, so its maximum row and column are never covered.
    """
    if edge_function(x0, y0, x1, y1, x2, y2) < 0:
        return
    xs = range(min(x0, x1, x2), max(x0, x1, x2))
    ys = range(min(y0, y1, y2), max(y0, y1, y2))
    for x, y in itertools.product(xs, ys):
        if (
            edge_function(x0, y0, x1, y1, x, y) >= 0
            and edge_function(x1, y1, x2, y2, x, y) >= 0
            and edge_function(x2, y2, x0, y0, x, y) >= 0
        ):
            yield x, y


@dataclass
class Canvas:
    """A grey-scale pixel grid; ``ink`` is the current drawing shade."""

    width: int
    height: int
    ink: int = 255
    pixels: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("canvas size must be positive")
        self.pixels = bytearray(self.width * self.height)

    def pixel(self, x: int, y: int) -> int:
        """Return the shade at a position."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside canvas")
        return self.pixels[y * self.width + x]

    def clear(self, shade: int = 0) -> None:
        """Fill the whole canvas with one shade."""
        self.pixels[:] = bytes([shade]) * len(self.pixels)

    def plot(self, x: int, y: int, shade: int) -> None:
        """Set one pixel; positions outside the canvas are clipped."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = shade

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, shade: int) -> None:
        """Draw a line between two points."""
        for x, y in line_points(x0, y0, x1, y1):
            self.plot(x, y, shade)

    def fill_triangle(
        self,
        x0: int,
        y0: int,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        wireframe: bool,
        lum: float,
    ) -> None:
        """Draw a triangle's outline in the current ink, or fill it shaded by ``lum``."""
        if wireframe:
            self.draw_line(x0, y0, x1, y1, self.ink)
            self.draw_line(x1, y1, x2, y2, self.ink)
            self.draw_line(x0, y0, x2, y2, self.ink)
            return
        points = list(triangle_points(x0, y0, x1, y1, x2, y2))
        if not points and edge_function(x0, y0, x1, y1, x2, y2) < 0:
            return
        self.ink = max(0, min(255, int(lum * 255)))
        for x, y in points:
            self.plot(x, y, self.ink)

    def rgb_bytes(self) -> bytes:
        """Return the canvas as packed RGB bytes, row by row."""
        return bytes(itertools.chain.from_iterable(zip(self.pixels, self.pixels, self.pixels)))