"""Rolling of spheres down an inclined plane, integrated with the midpoint method."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass(frozen=True)
class Vec2d:
    """A point or vector in the plane."""

    x: float
    y: float


@dataclass(frozen=True)
class Environment:
    """Gravity and the inclined plane given by two points on it."""

    gravity: float
    plane_a: Vec2d  # the point with the highest y value
    plane_b: Vec2d  # the point with the lowest y value
    inclination_angle: float

    @property
    def slope(self) -> float:
        """Rise over run of the plane."""
        return (self.plane_b.y - self.plane_a.y) / (self.plane_b.x - self.plane_a.x)

    def surface_y(self, x: float) -> float:
        """Height of the plane surface at horizontal position ``x``."""
        return self.plane_a.y + self.slope * (x - self.plane_a.x)


@dataclass
class Sphere:
    """A rolling sphere: constants, linear state and rotational state."""

    mass: float
    radius: float
    moment_of_inertia: float
    position: Vec2d
    velocity: float = 0.0
    acceleration: float = 0.0
    theta: float = 0.0
    omega: float = 0.0
    epsilon: float = 0.0
    tracked_point: Vec2d = field(default_factory=lambda: Vec2d(0.0, 0.0))


class Energies(NamedTuple):
    """Potential, kinetic and total energy of a sphere."""

    potential: float
    kinetic: float
    total: float


def create_environment(gravity: float, plane_a: Vec2d, plane_b: Vec2d) -> Environment:
    """Build an environment, deriving the inclination angle from the two points."""
    dx = plane_b.x - plane_a.x
    if dx == 0:
        raise ValueError("plane points must differ in x")
    angle = math.atan((plane_b.y - plane_a.y) / dx)
    return Environment(
        gravity=gravity,
        plane_a=plane_a,
        plane_b=plane_b,
        inclination_angle=angle,
    )


def create_sphere(
    mass: float,
    radius: float,
    moment_of_inertia: float,
    initial_position: Vec2d,
    initial_velocity: float,
) -> Sphere:
    """Build a sphere at rest rotationally, with the given linear velocity."""
    return Sphere(
        mass=mass,
        radius=radius,
        moment_of_inertia=moment_of_inertia,
        position=initial_position,
        velocity=initial_velocity,
    )


def perform_midpoint_method(
    dt: float, accel: float, y: float, dy_dt: float
) -> tuple[float, float]:
    """Advance ``y`` and its derivative by ``dt`` under constant ``accel``."""
    dy_half = dy_dt + 0.5 * dt * accel
    return y + dt * dy_half, dy_dt + dt * accel


def calculate_acceleration(sphere: Sphere, env: Environment) -> float:
    """Linear acceleration of a sphere rolling without slipping on the plane."""
    direction = -1 if env.plane_b.y < env.plane_a.y else 1
    inertia_ratio = sphere.moment_of_inertia / (sphere.mass * sphere.radius * sphere.radius)
    return env.gravity * direction * math.sin(env.inclination_angle) / (1 + inertia_ratio)


def calculate_sphere_tracked_point(sphere: Sphere) -> Vec2d:
    """Point on the sphere's perimeter, following its rotation."""
    return Vec2d(
        sphere.position.x - sphere.radius * math.sin(sphere.theta),
        sphere.position.y - sphere.radius * math.cos(sphere.theta),
    )


def calculate_frame(env: Environment, sphere: Sphere, dt: float) -> None:
    """Advance the sphere's state in place by one time step."""
    accel = calculate_acceleration(sphere, env)

    x, sphere.velocity = perform_midpoint_method(dt, accel, sphere.position.x, sphere.velocity)

    sphere.epsilon = accel / sphere.radius
    sphere.theta, sphere.omega = perform_midpoint_method(
        dt, sphere.epsilon, sphere.theta, sphere.omega
    )

    sphere.position = Vec2d(x, env.surface_y(x) + sphere.radius)
    sphere.tracked_point = calculate_sphere_tracked_point(sphere)


def calculate_energies(env: Environment, sphere: Sphere) -> Energies:
    """Energies of the sphere in its current state."""
    potential = sphere.mass * env.gravity * sphere.position.y
    kinetic = (
        sphere.mass * sphere.velocity * sphere.velocity * 0.5
        + sphere.moment_of_inertia * sphere.omega * sphere.omega * 0.5
    )
    return Energies(potential, kinetic, potential + kinetic)