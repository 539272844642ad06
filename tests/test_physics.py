import math

import pytest

from inclinedroll.physics import (
    Energies,
    Vec2d,
    calculate_acceleration,
    calculate_energies,
    calculate_frame,
    calculate_sphere_tracked_point,
    create_environment,
    create_sphere,
    perform_midpoint_method,
)


@pytest.fixture
def env():
    return create_environment(9.81, Vec2d(0, 20), Vec2d(40, 0))


def make_solid(position=Vec2d(5.0, 17.5)):
    return create_sphere(1.0, 2.0, (2.0 / 5.0) * 1.0 * 2.0 * 2.0, position, 0)


def make_hollow(position=Vec2d(5.0, 19.5)):
    return create_sphere(1.0, 2.5, (2.0 / 3.0) * 1.0 * 2.5 * 2.5, position, 0)


def test_inclination_matches_plane_slope(env):
    assert math.tan(env.inclination_angle) == pytest.approx(-20 / 40)
    assert env.slope == pytest.approx(-20 / 40)


def test_vertical_plane_is_rejected():
    with pytest.raises(ValueError):
        create_environment(9.81, Vec2d(3, 20), Vec2d(3, 0))


def test_create_sphere_starts_without_rotation():
    sphere = create_sphere(2.0, 1.5, 0.7, Vec2d(1.0, 2.0), 3.0)
    assert sphere.velocity == 3.0
    assert (sphere.theta, sphere.omega, sphere.epsilon, sphere.acceleration) == (0, 0, 0, 0)
    assert sphere.position == Vec2d(1.0, 2.0)


def test_midpoint_two_half_steps_equal_one_full_step():
    full = perform_midpoint_method(2.0, 3.0, 1.0, 4.0)
    half = perform_midpoint_method(1.0, 3.0, 1.0, 4.0)
    twice = perform_midpoint_method(1.0, 3.0, *half)
    assert twice[0] == pytest.approx(full[0])
    assert twice[1] == pytest.approx(full[1])


def test_midpoint_zero_dt_keeps_state():
    assert perform_midpoint_method(0.0, 5.0, 1.25, -2.0) == (1.25, -2.0)


def test_acceleration_without_inertia_is_free_slide(env):
    sphere = create_sphere(1.0, 1.0, 0.0, Vec2d(5, 20), 0)
    expected = env.gravity * abs(math.sin(env.inclination_angle))
    assert calculate_acceleration(sphere, env) == pytest.approx(expected)


def test_solid_sphere_outruns_hollow(env):
    solid = calculate_acceleration(make_solid(), env)
    hollow = calculate_acceleration(make_hollow(), env)
    assert solid > hollow > 0


def test_frame_keeps_sphere_on_plane(env):
    sphere = make_solid()
    for _ in range(10):
        calculate_frame(env, sphere, 0.1)
    contact = Vec2d(sphere.position.x, sphere.position.y - sphere.radius)
    a, b = env.plane_a, env.plane_b
    cross = (b.x - a.x) * (contact.y - a.y) - (b.y - a.y) * (contact.x - a.x)
    assert cross == pytest.approx(0.0, abs=1e-9)
    assert sphere.position.x > 5.0


def test_frame_rolls_without_slipping(env):
    sphere = make_hollow()
    start_x = sphere.position.x
    for _ in range(7):
        calculate_frame(env, sphere, 0.05)
    assert sphere.omega * sphere.radius == pytest.approx(sphere.velocity)
    assert sphere.theta * sphere.radius == pytest.approx(sphere.position.x - start_x)
    assert sphere.epsilon * sphere.radius == pytest.approx(calculate_acceleration(sphere, env))


def test_tracked_point_lies_on_perimeter(env):
    sphere = make_solid()
    for _ in range(5):
        calculate_frame(env, sphere, 0.2)
    point = sphere.tracked_point
    distance = math.hypot(point.x - sphere.position.x, point.y - sphere.position.y)
    assert distance == pytest.approx(sphere.radius)


def test_tracked_point_at_rest_is_below_center():
    sphere = make_solid(Vec2d(4.0, 9.0))
    assert calculate_sphere_tracked_point(sphere) == Vec2d(4.0, 9.0 - 2.0)


def test_tracked_point_quarter_turn():
    sphere = make_solid(Vec2d(4.0, 9.0))
    sphere.theta = math.pi / 2
    point = calculate_sphere_tracked_point(sphere)
    assert point.x == pytest.approx(4.0 - 2.0)
    assert point.y == pytest.approx(9.0)


def test_energies_at_rest_are_all_potential(env):
    sphere = make_solid()
    energies = calculate_energies(env, sphere)
    assert isinstance(energies, Energies)
    assert energies.kinetic == 0
    assert energies.total == energies.potential


def test_potential_energy_scales_with_mass(env):
    light = create_sphere(1.0, 1.0, 0.0, Vec2d(2, 6), 0)
    heavy = create_sphere(2.0, 1.0, 0.0, Vec2d(2, 6), 0)
    assert calculate_energies(env, heavy).potential == pytest.approx(
        2 * calculate_energies(env, light).potential
    )


def test_kinetic_energy_of_sliding_mass(env):
    sphere = create_sphere(2.0, 1.0, 0.0, Vec2d(0, 0), 3.0)
    energies = calculate_energies(env, sphere)
    assert energies.kinetic == pytest.approx(9.0)
    assert energies.total == pytest.approx(energies.potential + energies.kinetic)