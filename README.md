# inclinedroll

A small simulation of two bodies rolling without slipping down an inclined
plane. One is a solid ball with radius 2 and moment of inertia 2/5·m·r². The
other is a hollow sphere with radius 2.5 and moment of inertia 2/3·m·r². Both
have mass 1 and start at rest at x = 5 on a plane that runs from (0, 20) to
(40, 0). Gravity is 9.81. Position and rotation are advanced with the midpoint
method. The hollow sphere has more rotational inertia, so it falls behind the
solid ball.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
inclinedroll [--csv PATH]
```

The command first runs a fixed-step pass of up to 150 steps of 0.05 s. It
writes both spheres' states to a CSV file (`output2.csv` in the current
directory unless `--csv` gives another path) and prints
`Output written to file`. The pass stops early once either sphere drops below
the lower end of the plane.

It then opens a 1280×720 pygame window and animates the spheres in real time.
The window shows:

- the plane;
- each sphere as an outline, with a spoke that turns as the sphere rotates;
- a marked point on each sphere's rim;
- a fading trail that follows the marked point.

When both spheres are more than 2 units below the plane's lower end, their
linear and angular velocities are reversed and `Reached the end of the plane`
is printed. Close the window to quit.

### CSV columns

The first column is the elapsed time. Then come seven values for the solid
ball, followed by the same seven for the hollow sphere:

1. position along x
2. velocity
3. angle θ
4. angular velocity ω
5. potential energy
6. kinetic energy
7. total energy

Every value is written with six decimal places. The header labels both groups
with the `solid_` prefix. The second group is the hollow sphere.

## Using it as a library

```python
from inclinedroll.physics import (
    Vec2d, create_environment, create_sphere, calculate_frame, calculate_energies,
)

env = create_environment(9.81, Vec2d(0, 20), Vec2d(40, 0))
ball = create_sphere(1.0, 2.0, 0.4 * 1.0 * 2.0**2, Vec2d(5, 17.5), 0)

for _ in range(10):
    calculate_frame(env, ball, 0.05)

energies = calculate_energies(env, ball)
print(ball.position.x, ball.velocity, energies.total)
```

### `inclinedroll.physics`

- `Vec2d`: a point or vector.
- `Environment`: gravity and the plane, with `slope` and `surface_y(x)`.
- `Sphere`: a sphere's state.
- `Energies`: a named tuple of `potential`, `kinetic` and `total`.
- `create_environment`: builds an `Environment`. It raises `ValueError` if the two plane points have the same x.
- `create_sphere`: builds a `Sphere`.
- `perform_midpoint_method(dt, accel, y, dy_dt)`: returns the new `(y, dy_dt)`.
- `calculate_acceleration`: returns the sphere's acceleration along the plane.
- `calculate_sphere_tracked_point`: returns the point on the sphere's rim.
- `calculate_frame`: advances a sphere in place by one step.
- `calculate_energies`: returns the sphere's `Energies`.

### `inclinedroll.csv_output`

`CsvOutput(filename)` is a context manager. It opens the file and writes the
header. `write(time, first, second)` appends one row, where `first` and
`second` are seven values each. Any other count raises `ValueError`.

### `inclinedroll.trail`

`Trail(color, max_points)` keeps at most `max_points` positions and drops the
oldest one when full. A `color` is a `Color(r, g, b)`, with each channel from
0 to 255.

- `update(x, y)` ignores moves whose squared length is below 0.01.
- `colored_points()` returns `(rgb, point)` pairs. The rgb values lie in 0..1 and fade toward black for older points. The list is empty when the trail has fewer than two points.
- `len(trail)` gives the number of stored points.

### `inclinedroll.app`

- `setup_simulation()` returns a `Simulation` with the scene described above.
- `Simulation.update(dt)` advances both spheres and extends their trails.
- `Simulation.bounce_if_finished()` reverses both spheres at the end of the plane and returns whether it did.
- `perform_csv_output(env, sphere_solid, sphere_hollow, path)` runs the fixed-step pass on copies of the spheres and returns the number of rows written.
- `render_scene(surface, simulation)` draws the scene onto a pygame surface.