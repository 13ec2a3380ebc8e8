"""Lunar lander game state: flight, fuel, collisions, landing and cameras."""

from __future__ import annotations

import random
from enum import Enum
from typing import Union

from lunarlander.box import Box
from lunarlander.emitter import AgentEmitter, Emitter
from lunarlander.mesh import Mesh
from lunarlander.octree import Octree
from lunarlander.particle import Particle
from lunarlander.ray import Ray
from lunarlander.vector3 import Vector3

KEY_SPACE = 32
KEY_LEFT = 356
KEY_UP = 357
KEY_RIGHT = 358
KEY_DOWN = 359

COLLISION_THRESHOLD = 10
CRASH_SPEED = 0.08
SAFE_LANDING_SPEED = 0.015
START_POSITION = Vector3(0, 50, 0)
START_FUEL = 120.0

Key = Union[int, str]


class CamMode(Enum):
    """Camera modes."""

    FREE = "free"
    TRACK = "track"
    BOTTOM = "bottom"
    TOP = "top"


def _uniform(rng: random.Random | None, a: float, b: float) -> float:
    source = rng if rng is not None else random
    return source.uniform(a, b)


def explode(
    pos: Vector3, emitter: Emitter, now: float, rng: random.Random | None = None
) -> None:
    """Burst 300 fast, short-lived particles out of ``pos``."""
    for _ in range(300):
        emitter.sys.add(
            Particle(
                pos=pos,
                birthtime=now,
                lifespan=1000,
                velocity=Vector3(
                    _uniform(rng, -3000, 3000),
                    _uniform(rng, -3000, 3000),
                    _uniform(rng, -3000, 3000),
                ),
                scale=Vector3(0.15, 0.15, 0.15),
            )
        )


def thrust(
    pos: Vector3, emitter: Emitter, now: float, rng: random.Random | None = None
) -> None:
    """Emit ten small exhaust particles heading downwards from ``pos``."""
    for _ in range(10):
        emitter.sys.add(
            Particle(
                pos=pos,
                radius=1,
                birthtime=now,
                lifespan=50,
                velocity=Vector3(
                    _uniform(rng, -30, 30),
                    _uniform(rng, -300, 0),
                    _uniform(rng, -30, 30),
                ),
                scale=Vector3(0.1, 0.1, 0.1),
            )
        )


def _key_code(key: Key) -> int:
    return ord(key) if isinstance(key, str) else key


class LanderGame:
    """Simulation of a lander descending onto terrain held in an octree."""

    def __init__(
        self,
        terrain: Mesh,
        lander_min: Vector3,
        lander_max: Vector3,
        frame_rate: float = 60.0,
        rng: random.Random | None = None,
        octree_levels: int = 20,
    ) -> None:
        self.frame_rate = frame_rate
        self.rng = rng if rng is not None else random.Random()
        self.lander_min = lander_min
        self.lander_max = lander_max
        self.now = 0.0

        self.octree = Octree()
        self.octree.create(terrain, octree_levels)

        self.landing_zones = [
            Vector3(50, 0.2, -179),
            Vector3(-180, 0.2, 154),
            Vector3(0, 0.2, 20),
        ]
        self.landing_zone_size = 15.0
        self.collision_speed = 0.1

        self.ship_acceleration = -(1.625 / frame_rate**2)
        self.ship_acceleration_x = 1 / frame_rate**2
        self.ship_acceleration_z = 1 / frame_rate**2

        self.current_cam = CamMode.FREE
        self.last_fixed_cam = CamMode.TRACK
        self.mouse_input = True
        self.camera_position: Vector3 | None = None
        self.camera_target: Vector3 | None = None

        self.wireframe = False
        self.show_telemetry = False
        self.ship_light_on = False
        self.ship_light_position: Vector3 | None = None
        self.display_octree = False
        self.lander_rotation = 0.0
        self.rotation_speed = 1.0

        self.altitude_label = "0.00"
        self.keymap: dict[int, bool] = {}
        self.sounds: list[str] = []

        self._reset_flight()
        self.shooter = AgentEmitter(
            pos=self.lander_pos,
            emitter_velocity=self.ship_velocity,
            emitter_acceleration=self.ship_acceleration,
            drawable=True,
        )
        self.shooter.start()

    def _reset_flight(self) -> None:
        self.game_over = False
        self.game_win = False
        self.show_game_over_text = False
        self.explosion_active = False
        self.explosion_velocity = Vector3()
        self.resolving_collision = False
        self.collision_direction = Vector3()
        self.landing_started = False
        self.ship_velocity = 0.0
        self.ship_velocity_x = 0.0
        self.ship_velocity_z = 0.0
        self.fuel = START_FUEL
        self.fuel_timer = 0.0
        self.lander_pos = START_POSITION

    @property
    def fuel_label(self) -> str:
        """Remaining fuel in whole seconds."""
        return str(int(self.fuel))

    def lander_bounds(self) -> Box:
        """World-space bounding box of the lander."""
        return Box(self.lander_min + self.lander_pos, self.lander_max + self.lander_pos)

    def altitude(self) -> float:
        """Height above the terrain point straight below, or 0 when none is found."""
        pos = self.lander_pos
        node = self.octree.intersect_ray(Ray(pos, Vector3(0, -1, 0)))
        if node is None:
            return 0.0
        return pos.y - self.octree.mesh.vertices[node.points[0]].y

    def key_pressed(self, key: Key) -> None:
        """Handle a key going down."""
        code = _key_code(key)
        if code == ord("a"):
            self.lander_rotation -= self.rotation_speed
        elif code == ord("d"):
            self.lander_rotation += self.rotation_speed
        elif code == ord("C"):
            if self.current_cam is CamMode.FREE:
                self.current_cam = self.last_fixed_cam
                self.mouse_input = False
            else:
                self.last_fixed_cam = self.current_cam
                self.current_cam = CamMode.FREE
                self.mouse_input = True
        elif code == ord("c"):
            if self.current_cam is CamMode.TRACK:
                self.current_cam = CamMode.BOTTOM
            elif self.current_cam is CamMode.BOTTOM:
                self.current_cam = CamMode.TOP
            else:
                self.current_cam = CamMode.TRACK
            self.last_fixed_cam = self.current_cam
            self.mouse_input = False
        elif code == ord("r"):
            if self.game_over or self.game_win:
                self.restart()
        elif code == ord("l"):
            self.ship_light_on = not self.ship_light_on
        elif code == ord("w"):
            self.wireframe = not self.wireframe
        elif code == ord("g"):
            self.show_telemetry = not self.show_telemetry
        elif code == ord("1"):
            self.landing_started = True
        self.keymap[code] = True

    def key_released(self, key: Key) -> None:
        """Handle a key going up."""
        self.keymap[_key_code(key)] = False

    def _held(self, code: int) -> bool:
        return self.keymap.get(code, False)

    def _fly(self, pos: Vector3) -> None:
        fr = self.frame_rate
        if self._held(KEY_SPACE) and self.fuel > 0.0:
            self.ship_velocity += 10.0 / fr**2
            thrust(pos, self.shooter, self.now, self.rng)
            self.sounds.append("thrust")
            self.fuel_timer += 1.0 / fr
            if self.fuel_timer >= 1.0:
                self.fuel_timer -= 1.0
                self.fuel = max(0.0, self.fuel - 1.0)
        if self._held(KEY_LEFT):
            self.ship_velocity_x -= self.ship_acceleration_x
        if self._held(KEY_RIGHT):
            self.ship_velocity_x += self.ship_acceleration_x
        if self._held(KEY_UP):
            self.ship_velocity_z -= self.ship_acceleration_z
        if self._held(KEY_DOWN):
            self.ship_velocity_z += self.ship_acceleration_z

        self.ship_velocity += self.ship_acceleration
        turbulence_x = self.rng.uniform(-0.05, 0.05)
        turbulence_z = self.rng.uniform(-0.05, 0.05)
        self.lander_pos = Vector3(
            pos.x + self.ship_velocity_x + turbulence_x,
            pos.y + self.ship_velocity,
            pos.z + self.ship_velocity_z + turbulence_z,
        )
        self.shooter.pos = pos

    def _crash(self, pos: Vector3) -> None:
        explode(pos, self.shooter, self.now, self.rng)
        self.sounds.append("crash")
        self.explosion_velocity = Vector3(
            self.rng.uniform(-150, 150),
            self.rng.uniform(200, 300),
            self.rng.uniform(-150, 150),
        )
        self.explosion_active = True
        self.landing_started = False
        self.game_over = True
        self.show_game_over_text = True

    def _in_landing_zone(self, pos: Vector3) -> bool:
        return any((pos - zone).length() < self.landing_zone_size for zone in self.landing_zones)

    def _place_camera(self, pos: Vector3) -> None:
        if self.current_cam is CamMode.FREE:
            return
        self.mouse_input = False
        if self.current_cam is CamMode.TRACK:
            self.camera_position = pos + Vector3(0, 5, 10)
            self.camera_target = pos
        elif self.current_cam is CamMode.BOTTOM:
            self.display_octree = False
            bottom = pos + Vector3(0, self.lander_min.y, 0)
            self.camera_position = bottom + Vector3(0, 0.5, 0)
            self.camera_target = bottom + Vector3(0, -10.0, 0)
        else:
            self.camera_position = pos + Vector3(0, 25, 0)
            self.camera_target = pos

    def update(self, dt: float | None = None) -> None:
        """Advance the game by one frame of ``dt`` seconds."""
        if dt is None:
            dt = 1.0 / self.frame_rate
        self.now += dt * 1000.0
        pos = self.lander_pos
        hit = len(self.octree.intersect_box(self.lander_bounds())) >= COLLISION_THRESHOLD

        self.shooter.update(self.now, self.frame_rate)

        if self.landing_started:
            if not hit:
                self._fly(pos)
            elif abs(self.ship_velocity) > CRASH_SPEED:
                self._crash(pos)

        if self.explosion_active:
            self.explosion_velocity = self.explosion_velocity + Vector3(0, -0.2, 0)
            pos = pos + self.explosion_velocity * dt
            self.lander_pos = pos

        if self.resolving_collision:
            pos = pos + self.collision_direction * self.collision_speed
            self.lander_pos = pos
            if not hit:
                self.resolving_collision = False
        elif hit:
            impact = abs(self.ship_velocity)
            if impact <= SAFE_LANDING_SPEED and self._in_landing_zone(pos):
                self.game_win = True
                self.landing_started = False
                return
            self.collision_direction = Vector3(0, impact * 1.2, 0)
            self.sounds.append("bump")
            self.resolving_collision = True
            self.ship_velocity = 0.0
            self.ship_velocity_x = 0.0
            self.ship_velocity_z = 0.0

        if self.show_telemetry:
            node = self.octree.intersect_ray(Ray(pos, Vector3(0, -1, 0)))
            altitude = 0.0
            if node is not None:
                altitude = pos.y - self.octree.mesh.vertices[node.points[0]].y
            self.altitude_label = f"{altitude:.2f}"
        else:
            self.altitude_label = "OFF"

        self._place_camera(pos)

        if self.ship_light_on:
            self.ship_light_position = Vector3(pos.x, pos.y - 2, pos.z)
        else:
            self.ship_light_position = None

    def restart(self) -> None:
        """Put the lander back at the start with full fuel and no particles."""
        self._reset_flight()
        self.shooter.sys.clear()