"""View orientation and rendering of a model onto a canvas."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .model import Model, Vertex
from .raster import Canvas, luminosity


def _axis_value(vertex: Vertex, axis: int) -> float:
    return (
        vertex.x * ((axis & 0x4) >> 2)
        + vertex.y * ((axis & 0x2) >> 1)
        + vertex.z * (axis & 0x1)
    )


@dataclass
class ViewState:
    """Which model axes map to the screen, and which of them are flipped.

    ``horiz_axis`` and ``vert_axis`` are byte masks whose low three bits
    select x, y and z.
    """

    xz_state: int = 2
    yz_state: int = 0
    vert_axis: int = 0b010
    horiz_axis: int = 0b100

    def _other_axis(self) -> int:
        return ~(self.vert_axis | self.horiz_axis) & 0xFF

    def rotate_right(self) -> None:
        """Turn the model a quarter turn about the vertical axis."""
        self.xz_state = (self.xz_state + 1) % 4
        self.horiz_axis = self._other_axis()

    def rotate_left(self) -> None:
        """Turn the model back a quarter turn about the vertical axis."""
        self.xz_state = (self.xz_state + 3) % 4
        self.horiz_axis = self._other_axis()

    def rotate_down(self) -> None:
        """Tip the model a quarter turn about the horizontal axis."""
        self.yz_state = (self.yz_state + 1) % 4
        self.vert_axis = self._other_axis()

    def rotate_up(self) -> None:
        """Tip the model back a quarter turn about the horizontal axis."""
        self.yz_state = (self.yz_state + 3) % 4
        self.vert_axis = self._other_axis()

    def project(self, vertex: Vertex, width: int, height: int) -> tuple[float, float]:
        """Map a vertex to screen coordinates."""
        x = _axis_value(vertex, self.horiz_axis)
        y = _axis_value(vertex, self.vert_axis)
        if self.xz_state & 0x2:
            x = -x
        if (self.yz_state & 0x1) ^ ((self.yz_state & 0x2) >> 1):
            y = -y
        return (width // 2) * (1.0 + x), (height // 2) * (1.0 - y)


def render_model(model: Model, view: ViewState, canvas: Canvas, light: Sequence[float]) -> int:
    """Clear the canvas and draw the model's lit faces; return how many were drawn."""
    canvas.clear(0)
    canvas.ink = 255
    drawn = 0
    for face in model.faces:
        vertices = model.face_vertices(face)
        if len(vertices) < 3:
            continue
        points = [view.project(v, canvas.width, canvas.height) for v in vertices[:3]]
        lum = luminosity(vertices, light)
        if not lum >= 0:
            continue
        (x0, y0), (x1, y1), (x2, y2) = ((int(x), int(y)) for x, y in points)
        canvas.fill_triangle(x0, y0, x1, y1, x2, y2, False, lum)
        drawn += 1
    return drawn