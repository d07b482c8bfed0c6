# waverend

waverend shows a Wavefront OBJ model in a window, drawn by a small software
rasterizer. Each triangle is filled in one flat grey shade that depends on
how directly it faces a fixed light, and triangles that face away are
skipped.

## Installing

```
pip install .
```

This also installs pygame, which opens the window and shows the image.

## Running

```
waverend path/to/model.obj
```

Options:

- `obj` – the OBJ file to show. Without it, `./src/diablo3_pose.obj` is
  read. If the file cannot be opened, an error is printed and an empty
  (black) window is shown.
- `--width`, `--height` – the window size in pixels, 640 by 480 unless
  given. Both must be positive.

To see all the options, run:

```
waverend --help
```

The arrow keys turn the view in quarter turns:

- Left and Right turn the model around the vertical axis.
- Up and Down turn it around the horizontal axis.

The picture is redrawn only after a key has changed the view. Close the
window to quit.

## What the OBJ reader accepts

- `v x y z` lines give vertices. A line without three numbers is ignored;
  anything after the third number is ignored.
- `f a b c ...` lines give faces. Positive indices count from 1. Other
  indices are taken relative to the total vertex count: index `i` refers to
  the zero-based position `count + i + 1`, so `-2` names the last vertex.
  An index that points outside the vertex list raises `IndexError` when the
  face is looked up. Anything after a slash in an index, such as `3/7/2`,
  is ignored, and a `#` ends the list of indices.
- All other lines are ignored. Lines longer than 255 characters are read in
  pieces of at most 255 characters.

Only the first three vertices of each face are used to draw it; faces with
fewer than three are skipped.

## Using it as a library

```python
from waverend.objparse import parse_obj
from waverend.raster import Canvas
from waverend.view import ViewState, render_model

model = parse_obj("model.obj")
canvas = Canvas(640, 480)
drawn = render_model(model, ViewState(), canvas, (0, 0, -1))
rgb = canvas.rgb_bytes()
```

- `waverend.model` has the `Vertex`, `Face` and `Model` types.
  `Model.resolve` turns a face index into a vertex and
  `Model.face_vertices` returns all of a face's vertices.
  `format_vertex`, `format_model` and `format_stats` describe a model as
  text.
- `waverend.objparse` reads OBJ text with `parse_obj` (a path) or
  `parse_obj_lines` (any iterable of lines).
- `waverend.raster` has the drawing pieces: `edge_function`,
  `line_points` (Bresenham line pixels), `triangle_points` (pixels covered
  by a triangle, empty when it is wound the other way), `luminosity` (the
  cosine between a triangle's normal and the light, NaN for a degenerate
  triangle) and `Canvas`, a grey-scale pixel grid with `clear`, `plot`,
  `pixel`, `draw_line`, `fill_triangle` and `rgb_bytes`. `DEFAULT_LIGHT`
  is `(0, 0, -1)`.
- `waverend.view` has `ViewState`, which holds which model axes map to the
  screen, turns them with `rotate_left`, `rotate_right`, `rotate_up` and
  `rotate_down`, and maps a vertex to screen coordinates with `project`.
  `render_model` clears a canvas, draws every lit face and returns how many
  faces were drawn.
- `waverend.app` has `parse_args` and `main`, which runs the window.

## What it does not do

- There is no perspective: vertices are projected straight onto two of the
  model's axes, so models are expected to lie roughly within -1 to 1.
- There is no depth buffer. Faces are drawn in the order of the file, and a
  later face paints over an earlier one.
- The light is fixed; the command offers no way to move it, to draw
  outlines only, or to save the picture to a file.