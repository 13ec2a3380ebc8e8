import pytest

from lunarlander.box import Box
from lunarlander.ray import Ray
from lunarlander.vector3 import Vector3


@pytest.fixture
def cube():
    return Box(Vector3(-1, -1, -1), Vector3(1, 1, 1))


def test_ray_through_center_hits(cube):
    ray = Ray(Vector3(0, 10, 0), Vector3(0, -1, 0))
    assert cube.intersect(ray, -1000, 1000)


def test_ray_pointing_away_misses_with_positive_interval(cube):
    ray = Ray(Vector3(0, 10, 0), Vector3(0, 1, 0))
    assert not cube.intersect(ray, 0, 1000)
    assert cube.intersect(ray, -1000, 1000)


def test_ray_passing_beside_misses(cube):
    ray = Ray(Vector3(5, 10, 0), Vector3(0, -1, 0))
    assert not cube.intersect(ray, -1000, 1000)


def test_diagonal_ray_hits(cube):
    ray = Ray(Vector3(-5, -5, -5), Vector3(1, 1, 1).normalized())
    assert cube.intersect(ray, 0, 10000)


def test_interval_too_short_misses(cube):
    ray = Ray(Vector3(0, 10, 0), Vector3(0, -1, 0))
    assert not cube.intersect(ray, 0, 5)


def test_inside_includes_boundary(cube):
    assert cube.inside(Vector3(0, 0, 0))
    assert cube.inside(cube.max)
    assert cube.inside(cube.min)
    assert not cube.inside(Vector3(1.0001, 0, 0))


def test_inside_all(cube):
    assert cube.inside_all([Vector3(0, 0, 0), Vector3(1, 1, 1)])
    assert not cube.inside_all([Vector3(0, 0, 0), Vector3(2, 0, 0)])
    assert cube.inside_all([])


def test_overlap_is_symmetric_and_inclusive(cube):
    touching = Box(Vector3(1, -1, -1), Vector3(3, 1, 1))
    apart = Box(Vector3(1.5, -1, -1), Vector3(3, 1, 1))
    assert cube.overlap(touching) and touching.overlap(cube)
    assert not cube.overlap(apart) and not apart.overlap(cube)
    assert cube.overlap(cube)


def test_center_is_inside_and_equidistant(cube):
    box = Box(Vector3(2, -4, 10), Vector3(8, 6, 12))
    c = box.center()
    assert box.inside(c)
    assert (c - box.min) == (box.max - c)
    assert cube.center() == Vector3()


def test_subdivide8_first_child_and_count(cube):
    children = cube.subdivide8()
    assert len(children) == 8
    assert children[0] == Box(cube.min, cube.center())


def test_subdivide8_children_are_half_size_and_fill_parent():
    box = Box(Vector3(0, 0, 0), Vector3(4, 6, 8))
    children = box.subdivide8()
    half = box.size() / 2
    for child in children:
        assert child.size() == half
        assert box.inside(child.min) and box.inside(child.max)
    assert len({c.center() for c in children}) == 8
    volume = sum(c.size().x * c.size().y * c.size().z for c in children)
    s = box.size()
    assert volume == pytest.approx(s.x * s.y * s.z)


def test_subdivide8_lower_then_upper():
    box = Box(Vector3(0, 0, 0), Vector3(2, 2, 2))
    children = box.subdivide8()
    for lower, upper in zip(children[:4], children[4:]):
        assert lower.max.y == upper.min.y
        assert lower.min.x == upper.min.x and lower.min.z == upper.min.z