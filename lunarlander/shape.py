"""Base shape carrying a position, a rotation about Z and a scale."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from lunarlander.vector3 import Vector3


@dataclass
class Shape:
    """An object placed in the scene by translation, rotation and scale."""

    pos: Vector3 = Vector3()
    rot: float = 0.0  # degrees about the Z axis
    scale: Vector3 = Vector3(1, 1, 1)
    default_size: float = 20.0

    def transform(self) -> np.ndarray:
        """Model matrix: translate, then rotate about Z, then scale (T * R * S)."""
        translate = np.identity(4)
        translate[:3, 3] = tuple(self.pos)

        angle = math.radians(self.rot)
        c, s = math.cos(angle), math.sin(angle)
        rotate = np.identity(4)
        rotate[0, 0], rotate[0, 1] = c, -s
        rotate[1, 0], rotate[1, 1] = s, c

        scale = np.diag([self.scale.x, self.scale.y, self.scale.z, 1.0])
        return translate @ rotate @ scale