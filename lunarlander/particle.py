"""Particle: a shape with velocity and a limited lifespan."""

from __future__ import annotations

from dataclasses import dataclass

from lunarlander.shape import Shape
from lunarlander.vector3 import Vector3

IMMORTAL = -1.0
KILL_NOW = -2.0


@dataclass
class Particle(Shape):
    """Moving shape that is born at ``birthtime`` and lives ``lifespan`` ms.

    A lifespan of -1 means the particle never expires; -2 marks it for
    removal on the next list update.
    """

    velocity: Vector3 = Vector3()
    birthtime: float = 0.0
    lifespan: float = IMMORTAL
    name: str = "particle"
    radius: int = 2

    def age(self, now: float) -> float:
        """Milliseconds since birth at time ``now``."""
        return now - self.birthtime

    def expired(self, now: float) -> bool:
        """True when the particle is past its lifespan or marked for removal."""
        if self.lifespan == KILL_NOW:
            return True
        return self.lifespan != IMMORTAL and self.age(now) > self.lifespan