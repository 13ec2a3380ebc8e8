# lunarlander

The simulation core of a 3D lunar lander game. A ship descends under lunar
gravity onto a terrain mesh, steers with thrusters, burns fuel, and must touch
down gently inside one of the landing zones. Hitting the ground too fast ends
the game in a burst of particles.

The package holds the geometry, collision and game logic, so that any front
end, or a test, can drive it frame by frame.

## Modules

- `lunarlander.vector3` – `Vector3`, an immutable 3D vector with `length()`,
  `normalized()` (a zero vector comes back unchanged), `dot()` and `cross()`.
  It supports `+`, `-`, unary `-`, multiplication and division by a scalar,
  `a @ b` as the dot product, and `<` / `<=` meaning "every component is
  smaller (or equal)".
- `lunarlander.ray` – `Ray(origin, direction)`, which precomputes
  `inv_direction` and `sign` for slab tests against boxes.
- `lunarlander.box` – `Box(min, max)`, an axis-aligned box:
  `intersect(ray, t0, t1)`, `inside(point)`, `inside_all(points)`,
  `overlap(other)`, `center()`, `size()` and `subdivide8()`, which returns the
  eight octants (lower four first, then upper four).
- `lunarlander.util` – `ray_intersect_plane(ray_point, ray_dir, plane_point,
  plane_norm)`, returning the intersection point or `None` when the ray starts
  on the plane or runs parallel to it, and `reflect_vector(v, n)`.
- `lunarlander.mesh` – `Mesh` (vertices and triangle faces) with `bounds()`
  and `face_vertices(index)`; `parse_obj(text)` and `load_obj(path)` read
  vertices and faces from Wavefront OBJ text, splitting polygons into triangle
  fans and raising `ValueError` on malformed lines.
- `lunarlander.octree` – `Octree` and `TreeNode`. `create(mesh, num_levels)`
  builds a tree over the mesh's vertices. `intersect_ray(ray)` returns the
  first single-point node whose box the ray crosses, or `None`;
  `intersect_box(box)` returns the boxes of single-point nodes overlapping
  `box`. Also `points_in_box`, `faces_in_box`, `leaves()` and
  `boxes_at_level(level)` (the root is level 1).
- `lunarlander.shape` – `Shape`, with position, rotation about Z in degrees
  and scale; `transform()` returns the 4×4 model matrix as a numpy array.
- `lunarlander.particle` – `Particle`, a shape with velocity, birth time and
  lifespan in milliseconds; `age(now)` and `expired(now)`. A lifespan of `-1`
  never expires; `-2` marks a particle for removal.
- `lunarlander.emitter` – `ParticleList`, `Emitter` and `AgentEmitter`, plus
  `random_float(a, b)`. Emitters spawn particles with their own velocity and
  lifespan, drop expired ones and move the rest on `update(now, frame_rate)`.
  `AgentEmitter.move_particle` also turns a particle to face its heading.
- `lunarlander.game` – `LanderGame`, `CamMode`, and the `explode` and
  `thrust` particle effects.

## Using it

Build an octree over terrain and look straight down:

```python
from lunarlander.mesh import load_obj
from lunarlander.octree import Octree
from lunarlander.ray import Ray
from lunarlander.vector3 import Vector3

terrain = load_obj("terrain.obj")
octree = Octree()
octree.create(terrain, 20)

node = octree.intersect_ray(Ray(Vector3(0, 50, 0), Vector3(0, -1, 0)))
if node is not None:
    ground = octree.mesh.vertices[node.points[0]]
```

Drive the game one frame at a time. The game needs the terrain mesh and the
lander's bounding corners relative to its position:

```python
import random

from lunarlander.game import LanderGame
from lunarlander.mesh import load_obj
from lunarlander.vector3 import Vector3

game = LanderGame(
    load_obj("terrain.obj"),
    lander_min=Vector3(-1, 0, -1),
    lander_max=Vector3(1, 3, 1),
    frame_rate=60.0,
    rng=random.Random(1),
)
game.key_pressed("1")   # start the descent
game.key_pressed(" ")   # fire the main engine
game.update(1 / 60)
game.key_released(" ")
print(game.lander_pos, game.fuel_label, game.altitude())
```

Keys are given as one-character strings or integer codes. `1` starts the
landing, space fires the main engine while fuel lasts (one unit of fuel per
second of burn), and the codes `KEY_LEFT`, `KEY_RIGHT`, `KEY_UP` and
`KEY_DOWN` from `lunarlander.game` steer. `a`/`d` rotate the ship, `c` cycles
the fixed cameras (track, bottom, top), `C` toggles between free and fixed
camera, `g` toggles the altitude readout (`altitude_label`), `l` the ship
light, `w` the wireframe flag, and `r` restarts after a win or a crash.

After each `update` the game exposes its state as attributes: `lander_pos`,
`ship_velocity`, `fuel`, `game_win`, `game_over`, `camera_position` and
`camera_target`, `ship_light_position`, the exhaust and explosion particles in
`shooter.sys`, and the names of sounds triggered so far in `sounds`
(`"thrust"`, `"crash"`, `"bump"`).

## What it does not do

There is no window, rendering, mouse picking, audio playback or command to
run. The package computes the game; drawing the scene, playing the sounds
listed in `sounds` and feeding key events are left to whatever front end
uses it.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.