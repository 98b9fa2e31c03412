# sketchkit

Small building blocks for interactive sketches and visual experiments. The package is written in
pure Python and needs nothing beyond the standard library.

## What is inside

### `sketchkit.noise`

- `lut.SinCosLUT` is a sine and cosine lookup table. It samples every `precision` degrees, with a
  default of 0.25, and provides `sin(theta)` and `cos(theta)`.
- `perlin.Perlin` gives octave value noise in one, two or three dimensions through
  `noise(x, y=0, z=0)`.
  - A new generator fills its table with values in -1..1. Pass `seed=` for repeatable tables.
  - `noise_seed(what)` refills the table with values in 0..1.
  - `noise_uf` maps the result by `r * 0.5 + 0.5`.
  - `noise_detail(lod, falloff=None)` sets the number of octaves and the amplitude falloff.
- `simplex.Simplex` gives simplex noise. It calls `noise(x, y)`, `noise(x, y, z)` or
  `noise(x, y, z, w)` depending on how many coordinates are given, and returns values of roughly
  -1..1. `noise_uf` maps that result into roughly 0..1. The module also exports `fast_floor`.

### `sketchkit.fade`

- `Fadable` holds an `alpha` that moves between 0 and 1 over `fade_millis`. You can also set the
  duration through `fade_seconds`.
  - `fade_in()` and `fade_out()` start a fade, and `stop_fade()` halts it.
  - `update_fade(current_time)` advances the fade. `current_time` is in milliseconds; if you
    leave it out, the package reads a monotonic clock.
  - `fading_in` and `fading_out` report whether a fade is under way.
- `FadableRect` adds an RGB colour to `Fadable`.
  - `set_color` takes components in 0..255 and `set_unit_color` takes components in 0..1.
  - `color` is `(r, g, b, alpha)`.
  - `visible` is true while alpha is above zero.

### `sketchkit.warper`

`CornerWarper` keeps the four corners of a warp quadrilateral in image coordinates. The corners
run top-left, top-right, bottom-right, bottom-left.

- `set_view(x, y, w=None, h=None)` records where, and at what size, the image is shown.
- `corner_hit(x, y)` tests whether a point falls within `CORNER_RADIUS` (15) of a corner.
- `press`, `drag` and `release` pick up a corner, move it and drop it.
- `enable()` and `disable()` switch the pointer handling on and off.
- `save()` writes the corners to `file_name` as XML and `load()` reads them back. The default
  file name is `warper_settings.xml`.
- `reset()` puts the corners back on the image corners.

### `sketchkit.flow`

- `FlowPoint(x, y, old_x, old_y)` is one tracked point. It derives its displacement `dx`, `dy`
  from the two positions and provides `distance()`, `distance_squared()` and `scale(sx, sy)`.
- `FlowField(width, height, points)` holds the points found in an image of that size.
  - `normalize()` maps coordinates into 0..1.
  - `scale(sx, sy)` and `scale_to(width, height)` rescale the points.
  - `filter(min_flow, max_flow)` keeps only the points whose displacement lies strictly between
    the two bounds.
  - `average_flow()` returns the mean displacement and raises `ValueError` when the field is
    empty.
  - `clear()` removes all points.

### `sketchkit.physics`

A 2D position-Verlet particle engine.

- `particle.Particle(x, y, radius=10, mass=1, drag=0.8)` is a single particle.
  - Its velocity is implicit and is exposed as `velocity`.
  - It has methods for forces (`apply_force`, `apply_attraction_force`,
    `apply_repulsion_force`, `move_towards`), for impulses (`apply_impulse`) and for movement
    that keeps velocity (`move_to`, `move_by`, `lerp`).
  - `stop_motion` and `set_speed` change its motion directly.
  - An inactive particle (`active = False`) is not moved by integration, impulses or
    constraints.
- `constraints` holds the following, with the `ConstraintType` enum and the abstract base
  `Constraint`:
  - `Spring` keeps two particles at a rest distance.
  - `MaxDistSpring` acts only when the particles are farther apart than the rest distance.
  - `MinDistSpring` acts only when they are closer than it.
- `special` holds:
  - `InequalityConstraint`, which acts only outside `min_rest`..`max_rest`.
  - `FollowerConstraint`, which pulls a follower towards a leader.
  - `CollisionConstraint`, which pushes two overlapping particles apart.
  - `SupportConstraint`, made of two springs from a pivot plus a minimum-distance spring between
    the ends.
- `collision` holds:
  - `SimpleCollisionSolver`, which checks every pair.
  - `SortingCollisionSolver`, which sorts the list by x in place and checks only near
    neighbours. It is the default.
- `world.World` steps everything. On each `update`, it:
  1. applies gravity as an impulse;
  2. integrates the particles;
  3. relaxes the constraints `iterations` times, resolving collisions when `collisions` is on.

  Clamping into the box `world_min`..`world_max` happens only when `check_bounds` is on and
  `world_max` has been given. The default `world_max` is `None`, so no clamping takes place
  unless you set it. `World` also supports lookups (`nearest_particle`, `particle_under_point`,
  `constraint_with_particle`) and removal (`remove_particle`, `remove_constraint`,
  `remove_constraints_with_particle`, `clear`).

## Example

```python
from sketchkit.noise.perlin import Perlin
from sketchkit.noise.simplex import Simplex
from sketchkit.physics.constraints import Spring
from sketchkit.physics.particle import Particle
from sketchkit.physics.world import World

perlin = Perlin(seed=42)
height = perlin.noise(0.3, 1.7)
ripple = Simplex().noise(0.5, 0.25, 1.0)

world = World(gravity=(0.0, 1.0), world_max=(640.0, 480.0))
a = Particle(100, 100)
b = Particle(150, 100)
world.add_particle(a)
world.add_particle(b)
world.add_constraint(Spring(a, b, 40))
for _ in range(60):
    world.update()
print(a.position, b.position)
```

## What it does not do

The package has no easing or tweening functions. It does not draw anything: there is no window,
no rendering and no input loop. You pass pointer positions, times and sizes to the objects
yourself.

`CornerWarper` only keeps the corner points; it does not warp images. `FlowField` works on flow
points that you supply; it does not track features in video frames.

## Running the tests

```
pip install -e ".[test]"
pytest
```