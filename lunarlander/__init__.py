"""Lunar lander simulation: vectors, boxes, terrain octree, particles and game state."""

__version__ = "0.1.0"

__all__ = [
    "box",
    "emitter",
    "game",
    "mesh",
    "octree",
    "particle",
    "ray",
    "shape",
    "util",
    "vector3",
]