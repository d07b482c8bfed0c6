"""Mesh data: vertices, faces and the model that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vertex:
    """A point in model space."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Face:
    """A polygon given by vertex indices as written in the mesh file."""

    indices: tuple[int, ...] = ()


@dataclass
class Model:
    """A mesh made of vertices and faces that refer to them."""

    vertices: list[Vertex] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)

    def resolve(self, index: int) -> Vertex:
        """Return the vertex a face index refers to.

        Positive indices count from 1. Other indices are taken relative to
        the vertex count, as ``count + index + 1``.
        """
        position = index - 1 if index > 0 else len(self.vertices) + index + 1
        if not 0 <= position < len(self.vertices):
            raise IndexError(f"vertex index {index} out of range")
        return self.vertices[position]

    def face_vertices(self, face: Face) -> list[Vertex]:
        """Return the vertices of a face in order."""
        return [self.resolve(index) for index in face.indices]


def format_vertex(vertex: Vertex) -> str:
    """Describe a vertex as one line of text."""
    return f"x: {vertex.x:f} y: {vertex.y:f} z: {vertex.z:f}"


def format_model(model: Model) -> str:
    """Describe every vertex and face of a model."""
    parts = [f"Vertex {number}: {format_vertex(vertex)}\n" for number, vertex in enumerate(model.vertices)]
    for number, face in enumerate(model.faces):
        parts.append(f"Face {number}: ")
        parts.extend(
            f"\n\tidx: {index}{format_vertex(model.resolve(index))}\n" for index in face.indices
        )
    return "".join(parts)


def format_stats(model: Model) -> str:
    """Summarise the vertex and face counts of a model."""
    return f"Vertex Count: {len(model.vertices)} Face Count: {len(model.faces)}"