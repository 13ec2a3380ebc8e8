"""Particle lists and emitters that spawn and move particles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace
from typing import Iterator

import numpy as np

from lunarlander.particle import IMMORTAL, Particle
from lunarlander.shape import Shape
from lunarlander.vector3 import Vector3


def random_float(a: float, b: float) -> float:
    """Uniform random value between ``a`` and ``b``, both ends included."""
    return a + random.random() * (b - a)


@dataclass
class ParticleList:
    """A collection of live particles."""

    particles: list[Particle] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    def add(self, particle: Particle) -> None:
        """Append a particle."""
        self.particles.append(particle)

    def remove(self, index: int) -> Particle:
        """Remove the particle at ``index`` and return it."""
        return self.particles.pop(index)

    def clear(self) -> None:
        """Remove every particle."""
        self.particles.clear()

    def update(self, now: float, frame_rate: float) -> None:
        """Drop expired particles, then advance the rest by one frame."""
        self.particles = [p for p in self.particles if not p.expired(now)]
        for p in self.particles:
            p.pos = p.pos + p.velocity / frame_rate


@dataclass
class Emitter(Shape):
    """Point source that spawns particles with its velocity and lifespan."""

    sys: ParticleList = field(default_factory=ParticleList)
    rate: float = 1.0  # particles per second
    velocity: Vector3 = Vector3(100, 100, 0)
    lifespan: float = 60000.0  # milliseconds
    started: bool = True
    drawable: bool = False
    width: float = 50.0
    height: float = 50.0
    emitter_velocity: float = 0.0
    emitter_acceleration: float = 0.0
    emitter_damping: float = 0.0

    def start(self) -> None:
        """Let updates proceed."""
        self.started = True

    def stop(self) -> None:
        """Freeze updates."""
        self.started = False

    def update(self, now: float, frame_rate: float) -> None:
        """Remove particles past their lifespan, then spin and move the rest."""
        if not self.started or not self.sys.particles:
            return
        self.sys.particles = [
            p
            for p in self.sys.particles
            if not (p.lifespan != IMMORTAL and p.age(now) > p.lifespan)
        ]
        for p in self.sys.particles:
            p.rot += 0.1
            p.pos = p.pos + p.velocity / frame_rate

    def move_particle(self, particle: Particle, frame_rate: float) -> None:
        """Advance one particle by one frame."""
        particle.pos = particle.pos + particle.velocity / frame_rate

    def spawn_particle(self, now: float) -> Particle:
        """Create a particle at the emitter with its velocity and lifespan."""
        particle = Particle(
            pos=self.pos, velocity=self.velocity, lifespan=self.lifespan, birthtime=now
        )
        self.sys.add(particle)
        return particle

    def inside(self, point: Vector3) -> bool:
        """True when ``point`` lies within the emitter's width-by-height footprint."""
        local = np.linalg.inv(self.transform()) @ np.array([point.x, point.y, point.z, 1.0])
        half_w, half_h = self.width / 2, self.height / 2
        return bool(-half_w < local[0] < half_w and -half_h < local[1] < half_h)

    def snapshot(self) -> Emitter:
        """Shallow copy sharing the particle list."""
        return replace(self)


@dataclass
class AgentEmitter(Emitter):
    """Emitter whose particles turn to face their direction of travel."""

    def spawn_particle(self, now: float) -> Particle:
        """Create an agent particle at the emitter."""
        return super().spawn_particle(now)

    def move_particle(self, particle: Particle, frame_rate: float) -> None:
        """Move the particle and set its rotation to its heading from straight down."""
        super().move_particle(particle, frame_rate)
        v = particle.velocity.normalized()
        u = Vector3(0, -1, 0)
        ref = Vector3(0, 0, 1)
        angle = math.acos(max(-1.0, min(1.0, u.dot(v))))
        if ref.dot(u.cross(v)) < 0:
            angle = -angle
        particle.rot = math.degrees(angle)