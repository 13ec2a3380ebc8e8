"""Immutable three-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector3:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; a zero vector is returned unchanged."""
        magnitude = self.length()
        if magnitude == 0.0:
            return self
        return self * (1.0 / magnitude)

    def dot(self, other: Vector3) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Vector product."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3:
        if isinstance(scalar, Vector3):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        if isinstance(scalar, Vector3):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __matmul__(self, other: Vector3) -> float:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.dot(other)

    def __lt__(self, other: Vector3) -> bool:
        """True when every component is strictly smaller."""
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x < other.x and self.y < other.y and self.z < other.z

    def __le__(self, other: Vector3) -> bool:
        """True when every component is smaller or equal."""
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x <= other.x and self.y <= other.y and self.z <= other.z