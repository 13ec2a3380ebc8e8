import pytest

from lunarlander.box import Box
from lunarlander.mesh import Mesh, load_obj, parse_obj
from lunarlander.vector3 import Vector3

TRIANGLE = """
# a triangle
v 0 0 0
v 1 0 0
v 0 2 3
f 1 2 3
"""


def test_parse_vertices_and_face():
    mesh = parse_obj(TRIANGLE)
    assert mesh.vertices == [Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 2, 3)]
    assert mesh.faces == [(0, 1, 2)]


def test_face_vertices():
    mesh = parse_obj(TRIANGLE)
    assert mesh.face_vertices(0) == (Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 2, 3))


def test_slashes_and_negative_indices():
    mesh = parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3/1/1 -2//2 -1/3\n")
    assert mesh.faces == [(0, 1, 2)]


def test_quad_becomes_fan():
    mesh = parse_obj("v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\n")
    assert mesh.faces == [(0, 1, 2), (0, 2, 3)]


def test_bounds():
    mesh = parse_obj(TRIANGLE)
    assert mesh.bounds() == Box(Vector3(0, 0, 0), Vector3(1, 2, 3))


def test_bounds_contains_every_vertex():
    mesh = Mesh(vertices=[Vector3(-1, 5, 2), Vector3(3, -4, 0), Vector3(0, 0, -7)])
    box = mesh.bounds()
    assert all(box.inside(v) for v in mesh.vertices)
    assert box.min == Vector3(-1, -4, -7)
    assert box.max == Vector3(3, 5, 2)


def test_empty_bounds_raises():
    with pytest.raises(ValueError):
        Mesh().bounds()


def test_bad_index_raises():
    with pytest.raises(ValueError):
        parse_obj("v 0 0 0\nf 1 2 3\n")


def test_short_vertex_raises():
    with pytest.raises(ValueError):
        parse_obj("v 0 0\n")


def test_load_obj(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text(TRIANGLE, encoding="utf-8")
    assert load_obj(path) == parse_obj(TRIANGLE)