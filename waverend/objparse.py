"""Reading Wavefront OBJ meshes."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .model import Face, Model, Vertex

_LINE_LIMIT = 255

_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT = re.compile(r"\s*([+-]?\d+)")


def _chunks(lines: Iterable[str]) -> Iterator[str]:
    """Split lines into pieces no longer than the line buffer."""
    for line in lines:
        while len(line) > _LINE_LIMIT:
            yield line[:_LINE_LIMIT]
            line = line[_LINE_LIMIT:]
        if line:
            yield line


def _parse_vertex(text: str) -> Vertex | None:
    values = []
    pos = 0
    for _ in range(3):
        match = _FLOAT.match(text, pos)
        if match is None:
            return None
        values.append(float(match.group(1)))
        pos = match.end()
    return Vertex(*values)


def _parse_face(line: str) -> Face:
    indices = []
    pos = 1
    end = len(line)
    while pos < end:
        char = line[pos]
        if char in " \t":
            pos += 1
            continue
        if char in "\n#":
            break
        match = _INT.match(line, pos)
        if match is None:
            indices.append(0)
        else:
            indices.append(int(match.group(1)))
            pos = match.end()
        # skip texture and normal references such as "/2/3"
        while pos < end and line[pos] not in " \t\n":
            pos += 1
    return Face(tuple(indices))


def parse_obj_lines(lines: Iterable[str]) -> Model:
    """Build a model from the lines of an OBJ file.

    Only ``v`` and ``f`` records are read; vertex lines without three
    numbers are ignored.
    """
    model = Model()
    for line in _chunks(lines):
        if line.startswith("v "):
            vertex = _parse_vertex(line[2:])
            if vertex is not None:
                model.vertices.append(vertex)
        elif line.startswith("f "):
            model.faces.append(_parse_face(line))
    return model


def parse_obj(path: str | PathLike[str]) -> Model:
    """Read a model from an OBJ file."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_obj_lines(handle)