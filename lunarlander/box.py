"""Axis-aligned bounding box."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from lunarlander.ray import Ray
from lunarlander.vector3 import Vector3


@dataclass(frozen=True)
class Box:
    """Box spanning the corners ``min`` and ``max``."""

    min: Vector3 = Vector3()
    max: Vector3 = Vector3()

    @property
    def parameters(self) -> tuple[Vector3, Vector3]:
        return (self.min, self.max)

    def intersect(self, ray: Ray, t0: float, t1: float) -> bool:
        """True when the ray meets the box for some t in the interval (t0, t1)."""
        p = self.parameters
        sx, sy, sz = ray.sign
        o = ray.origin
        inv = ray.inv_direction

        tmin = (p[sx].x - o.x) * inv.x
        tmax = (p[1 - sx].x - o.x) * inv.x
        tymin = (p[sy].y - o.y) * inv.y
        tymax = (p[1 - sy].y - o.y) * inv.y
        if tmin > tymax or tymin > tmax:
            return False
        if tymin > tmin:
            tmin = tymin
        if tymax < tmax:
            tmax = tymax

        tzmin = (p[sz].z - o.z) * inv.z
        tzmax = (p[1 - sz].z - o.z) * inv.z
        if tmin > tzmax or tzmin > tmax:
            return False
        if tzmin > tmin:
            tmin = tzmin
        if tzmax < tmax:
            tmax = tzmax
        return tmin < t1 and tmax > t0

    def inside(self, point: Vector3) -> bool:
        """True when the point lies within the box, boundary included."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
            and self.min.z <= point.z <= self.max.z
        )

    def inside_all(self, points: Iterable[Vector3]) -> bool:
        """True when every point lies within the box."""
        return all(self.inside(p) for p in points)

    def overlap(self, other: Box) -> bool:
        """True when the two boxes share any point, touching included."""
        return (
            self.min.x <= other.max.x
            and self.max.x >= other.min.x
            and self.min.y <= other.max.y
            and self.max.y >= other.min.y
            and self.min.z <= other.max.z
            and self.max.z >= other.min.z
        )

    def size(self) -> Vector3:
        """Extent along each axis."""
        return self.max - self.min

    def center(self) -> Vector3:
        """Midpoint of the box."""
        return self.size() / 2 + self.min

    def subdivide8(self) -> list[Box]:
        """Split into eight equal boxes: the lower four, then the upper four."""
        half = self.size() / 2
        dx = Vector3(half.x, 0, 0)
        dz = Vector3(0, 0, half.z)
        dy = Vector3(0, half.y, 0)

        b0 = Box(self.min, self.center())
        b1 = Box(b0.min + dx, b0.max + dx)
        b2 = Box(b1.min + dz, b1.max + dz)
        b3 = Box(b2.min - dx, b2.max - dx)
        floor = [b0, b1, b2, b3]
        return floor + [Box(b.min + dy, b.max + dy) for b in floor]