"""Ray with precomputed reciprocal direction for slab tests."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from lunarlander.vector3 import Vector3


def _reciprocal(value: float) -> float:
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass(frozen=True)
class Ray:
    """A ray from ``origin`` along ``direction``."""

    origin: Vector3
    direction: Vector3
    inv_direction: Vector3 = field(init=False)
    sign: tuple[int, int, int] = field(init=False)

    def __post_init__(self) -> None:
        inv = Vector3(*(_reciprocal(c) for c in self.direction))
        object.__setattr__(self, "inv_direction", inv)
        object.__setattr__(self, "sign", tuple(int(c < 0) for c in inv))