"""Triangle mesh and a minimal Wavefront OBJ reader."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lunarlander.box import Box
from lunarlander.vector3 import Vector3


@dataclass
class Mesh:
    """Vertices plus triangles given as triples of vertex indices."""

    vertices: list[Vector3] = field(default_factory=list)
    faces: list[tuple[int, int, int]] = field(default_factory=list)

    def face_vertices(self, index: int) -> tuple[Vector3, Vector3, Vector3]:
        """The three corner positions of a face."""
        a, b, c = self.faces[index]
        return (self.vertices[a], self.vertices[b], self.vertices[c])

    def bounds(self) -> Box:
        """Smallest axis-aligned box holding every vertex."""
        if not self.vertices:
            raise ValueError("mesh has no vertices")
        xs = [v.x for v in self.vertices]
        ys = [v.y for v in self.vertices]
        zs = [v.z for v in self.vertices]
        return Box(Vector3(min(xs), min(ys), min(zs)), Vector3(max(xs), max(ys), max(zs)))


def _vertex_index(token: str, count: int) -> int:
    raw = token.split("/", 1)[0]
    try:
        number = int(raw)
    except ValueError:
        raise ValueError(f"bad face index: {token!r}") from None
    if number > 0:
        index = number - 1
    elif number < 0:
        index = count + number
    else:
        raise ValueError("face index 0 is not allowed")
    if not 0 <= index < count:
        raise ValueError(f"face index out of range: {token!r}")
    return index


def parse_obj(text: str) -> Mesh:
    """Build a mesh from OBJ text; polygons are split into triangle fans."""
    mesh = Mesh()
    for line_number, line in enumerate(text.splitlines(), start=1):
        parts = line.split("#", 1)[0].split()
        if not parts:
            continue
        keyword, args = parts[0], parts[1:]
        if keyword == "v":
            if len(args) < 3:
                raise ValueError(f"line {line_number}: vertex needs three coordinates")
            try:
                mesh.vertices.append(Vector3(*(float(a) for a in args[:3])))
            except ValueError:
                raise ValueError(f"line {line_number}: bad vertex coordinate") from None
        elif keyword == "f":
            if len(args) < 3:
                raise ValueError(f"line {line_number}: face needs at least three vertices")
            count = len(mesh.vertices)
            indices = [_vertex_index(a, count) for a in args]
            first = indices[0]
            mesh.faces.extend(
                (first, b, c) for b, c in zip(indices[1:], indices[2:])
            )
    return mesh


def load_obj(path: str | Path) -> Mesh:
    """Read a mesh from an OBJ file."""
    return parse_obj(Path(path).read_text(encoding="utf-8"))