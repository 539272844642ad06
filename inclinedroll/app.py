"""Interactive inclined-plane simulation with a CSV export of the run."""

from __future__ import annotations

import argparse
import copy
import math
import sys
import time
from dataclasses import dataclass

import pygame

from inclinedroll.csv_output import CsvOutput
from inclinedroll.physics import (
    Environment,
    Sphere,
    Vec2d,
    calculate_energies,
    calculate_frame,
    create_environment,
    create_sphere,
)
from inclinedroll.trail import Color, Trail

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WORLD_WIDTH = 50.0
WORLD_HEIGHT = 25.0
MAX_POINTS = 500
DEFAULT_CSV_PATH = "output2.csv"

CSV_STEPS = 150
CSV_DT = 0.05

_BACKGROUND = (0, 0, 0)
_PLANE_COLOR = (0.6, 0.6, 0.6)
_SOLID_COLOR = (1.0, 0.2, 0.3)
_HOLLOW_COLOR = (0.3, 1.0, 0.2)
_TRACKED_COLOR = (0.3, 0.1, 1.0)


@dataclass
class Simulation:
    """The environment, both spheres and their trails."""

    env: Environment
    sphere_solid: Sphere
    sphere_hollow: Sphere
    trail_solid: Trail
    trail_hollow: Trail

    def update(self, dt: float) -> None:
        """Advance both spheres by ``dt`` and extend their trails."""
        calculate_frame(self.env, self.sphere_solid, dt)
        calculate_frame(self.env, self.sphere_hollow, dt)
        self.trail_solid.update(self.sphere_solid.tracked_point.x, self.sphere_solid.tracked_point.y)
        self.trail_hollow.update(
            self.sphere_hollow.tracked_point.x, self.sphere_hollow.tracked_point.y
        )

    def bounce_if_finished(self) -> bool:
        """Reverse both spheres once both have passed the plane's end."""
        limit = self.env.plane_b.y - 2
        if self.sphere_solid.position.y < limit and self.sphere_hollow.position.y < limit:
            for sphere in (self.sphere_solid, self.sphere_hollow):
                sphere.velocity = -sphere.velocity
                sphere.omega = -sphere.omega
            return True
        return False


def setup_simulation() -> Simulation:
    """Place a solid ball and a hollow sphere near the top of the plane."""
    plane_a = Vec2d(0, 20)
    plane_b = Vec2d(40, 0)
    env = create_environment(9.81, plane_a, plane_b)

    initial_x = 5.0
    initial_y = env.surface_y(initial_x)

    mass_solid, radius_solid = 1.0, 2.0
    sphere_solid = create_sphere(
        mass_solid,
        radius_solid,
        (2.0 / 5.0) * mass_solid * radius_solid * radius_solid,
        Vec2d(initial_x, initial_y),
        0,
    )
    mass_hollow, radius_hollow = 1.0, 2.5
    sphere_hollow = create_sphere(
        mass_hollow,
        radius_hollow,
        (2.0 / 3.0) * mass_hollow * radius_hollow * radius_hollow,
        Vec2d(initial_x, initial_y + 2),
        0,
    )

    return Simulation(
        env=env,
        sphere_solid=sphere_solid,
        sphere_hollow=sphere_hollow,
        trail_solid=Trail(Color(200, 200, 0), MAX_POINTS),
        trail_hollow=Trail(Color(0, 200, 200), MAX_POINTS),
    )


def perform_csv_output(
    env: Environment, sphere_solid: Sphere, sphere_hollow: Sphere, path
) -> int:
    """Simulate copies of both spheres at a fixed step and log them; return the row count."""
    solid = copy.deepcopy(sphere_solid)
    hollow = copy.deepcopy(sphere_hollow)
    elapsed = 0.0
    rows = 0

    with CsvOutput(path) as output:
        for _ in range(CSV_STEPS):
            calculate_frame(env, solid, CSV_DT)
            calculate_frame(env, hollow, CSV_DT)

            if solid.position.y < env.plane_b.y or hollow.position.y < env.plane_b.y:
                break

            output.write(
                elapsed,
                (solid.position.x, solid.velocity, solid.theta, solid.omega,
                 *calculate_energies(env, solid)),
                (hollow.position.x, hollow.velocity, hollow.theta, hollow.omega,
                 *calculate_energies(env, hollow)),
            )
            rows += 1
            elapsed += CSV_DT

    print("Output written to file")
    return rows


def _to_screen(surface: pygame.Surface, x: float, y: float) -> tuple[int, int]:
    width, height = surface.get_size()
    return (
        round(x / WORLD_WIDTH * width),
        round(height - y / WORLD_HEIGHT * height),
    )


def _rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(channel * 255))) for channel in color)


def _draw_sphere(surface: pygame.Surface, sphere: Sphere, color) -> None:
    width, height = surface.get_size()
    rx = sphere.radius / WORLD_WIDTH * width
    ry = sphere.radius / WORLD_HEIGHT * height
    cx, cy = _to_screen(surface, sphere.position.x, sphere.position.y)
    rect = pygame.Rect(round(cx - rx), round(cy - ry), round(2 * rx), round(2 * ry))
    pygame.draw.ellipse(surface, _rgb(color), rect, 1)

    # a spoke across the sphere shows its rotation
    dx = sphere.radius * math.cos(sphere.theta)
    dy = -sphere.radius * math.sin(sphere.theta)
    start = _to_screen(surface, sphere.position.x - dx, sphere.position.y - dy)
    end = _to_screen(surface, sphere.position.x + dx, sphere.position.y + dy)
    pygame.draw.line(surface, _rgb(color), start, end, 1)

    tracked = _to_screen(surface, sphere.tracked_point.x, sphere.tracked_point.y)
    pygame.draw.line(surface, _rgb(_TRACKED_COLOR), (cx, cy), tracked, 1)
    pygame.draw.circle(surface, _rgb(_TRACKED_COLOR), tracked, 2)


def _draw_trail(surface: pygame.Surface, trail: Trail) -> None:
    colored = trail.colored_points()
    for (color, start), (_, end) in zip(colored, colored[1:]):
        pygame.draw.line(
            surface,
            _rgb(color),
            _to_screen(surface, *start),
            _to_screen(surface, *end),
            2,
        )


def render_scene(surface: pygame.Surface, simulation: Simulation) -> None:
    """Draw the plane, both spheres and their trails onto ``surface``."""
    surface.fill(_BACKGROUND)
    env = simulation.env

    pygame.draw.line(
        surface,
        _rgb(_PLANE_COLOR),
        _to_screen(surface, env.plane_a.x, env.plane_a.y - 0.2),
        _to_screen(surface, env.plane_b.x, env.plane_b.y - 0.2),
        3,
    )

    _draw_sphere(surface, simulation.sphere_solid, _SOLID_COLOR)
    _draw_sphere(surface, simulation.sphere_hollow, _HOLLOW_COLOR)

    _draw_trail(surface, simulation.trail_solid)
    _draw_trail(surface, simulation.trail_hollow)


def main(argv=None) -> int:
    """Write the CSV log, then run the simulation in a window until it is closed."""
    parser = argparse.ArgumentParser(
        prog="inclinedroll",
        description="Solid and hollow spheres rolling down an inclined plane.",
    )
    parser.add_argument(
        "--csv", default=DEFAULT_CSV_PATH, help="where to write the fixed-step CSV log"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        except pygame.error as exc:
            print(f"Error creating window, exiting...: {exc}", file=sys.stderr)
            return -1
        pygame.display.set_caption("InclinedPlaneSimulation")

        simulation = setup_simulation()
        perform_csv_output(
            simulation.env, simulation.sphere_solid, simulation.sphere_hollow, args.csv
        )

        prev_time = time.perf_counter()
        running = True
        while running:
            current_time = time.perf_counter()
            simulation.update(current_time - prev_time)

            if simulation.bounce_if_finished():
                print("Reached the end of the plane")
                continue

            render_scene(screen, simulation)
            pygame.display.flip()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            prev_time = current_time
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())