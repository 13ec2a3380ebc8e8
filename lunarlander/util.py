"""Plane intersection and reflection helpers."""

from __future__ import annotations

from lunarlander.vector3 import Vector3

_EPS = 1e-9


def ray_intersect_plane(
    ray_point: Vector3, ray_dir: Vector3, plane_point: Vector3, plane_norm: Vector3
) -> Vector3 | None:
    """Point where the line of the ray meets the plane, or None.

    None is returned when the ray starts on the plane or runs parallel to it.
    """
    d1 = (plane_point - ray_point).dot(plane_norm)
    if abs(d1) < _EPS:
        return None
    d2 = ray_dir.dot(plane_norm)
    if abs(d2) < _EPS:
        return None
    return ray_dir * (d1 / d2) + ray_point


def reflect_vector(v: Vector3, n: Vector3) -> Vector3:
    """Reflection of ``v`` about a surface with normal ``n``."""
    return v - n * (2 * v.dot(n))