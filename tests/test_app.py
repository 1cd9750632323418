import pygame
import pytest

from orbitsim.app import Renderer, Simulation, default_bodies
from orbitsim.camera import Camera2D
from orbitsim.physics import DT, RigidBody, Vec2, orbit, update_physics


def _positions(bodies):
    return [body.position for body in bodies]


def test_default_bodies_match_initial_setup():
    bodies = default_bodies()
    assert [b.name for b in bodies] == ["A", "B", "C"]
    assert bodies[0].position == Vec2(0.0, 0.3)
    assert bodies[1].velocity == Vec2(-0.1, 0.0)
    assert bodies[2].radius == 0.2
    assert bodies[2].mass == 6.0
    assert bodies[0].color == (0.6, 0.8, 1.0)


def test_default_bodies_are_fresh_each_call():
    first = default_bodies()
    first[0].position = Vec2(9.0, 9.0)
    assert default_bodies()[0].position == Vec2(0.0, 0.3)


def test_toggle_pause_flips_state():
    sim = Simulation()
    assert sim.toggle_pause() is True
    assert sim.paused is True
    assert sim.toggle_pause() is False
    assert sim.paused is False


def test_short_frame_takes_no_step():
    sim = Simulation()
    before = _positions(sim.bodies)
    sim.advance(DT / 2)
    assert _positions(sim.bodies) == before
    assert sim.accumulator == pytest.approx(DT / 2)


def test_accumulated_frames_match_orbit_steps():
    sim = Simulation()
    expected = default_bodies()
    orbit(expected, DT)
    orbit(expected, DT)
    sim.advance(DT * 2.5)
    for got, want in zip(sim.bodies, expected):
        assert got.position.x == pytest.approx(want.position.x)
        assert got.position.y == pytest.approx(want.position.y)
    assert 0.0 <= sim.lerp_factor < 1.0
    assert sim.lerp_factor == pytest.approx(0.5)


def test_interpolated_positions_lie_between_prev_and_current():
    sim = Simulation()
    shown = sim.advance(DT * 1.5)
    assert len(shown) == len(sim.bodies)
    for point, body in zip(shown, sim.bodies):
        low_x, high_x = sorted((body.prev_pos.x, body.position.x))
        assert low_x - 1e-9 <= point.x <= high_x + 1e-9


def test_paused_drains_time_without_moving():
    sim = Simulation()
    sim.toggle_pause()
    before = _positions(sim.bodies)
    sim.advance(DT * 3.2)
    assert _positions(sim.bodies) == before
    assert sim.accumulator < DT


def test_without_interpolation_one_step_per_call():
    sim = Simulation(interpolate=False)
    expected = default_bodies()
    orbit(expected, DT)
    shown = sim.advance(10.0)
    assert shown == _positions(sim.bodies)
    for got, want in zip(sim.bodies, expected):
        assert got.position.x == pytest.approx(want.position.x)
        assert got.position.y == pytest.approx(want.position.y)


def test_without_interpolation_paused_stays_put():
    sim = Simulation(interpolate=False)
    sim.toggle_pause()
    before = _positions(sim.bodies)
    sim.advance(1.0)
    assert _positions(sim.bodies) == before


def test_collision_mode_uses_wall_physics():
    sim = Simulation(interpolate=False, collisions=True, gravity_enabled=True)
    expected = default_bodies()
    update_physics(expected, DT, sim.bounce, True)
    sim.advance(DT)
    for got, want in zip(sim.bodies, expected):
        assert got.velocity.y == pytest.approx(want.velocity.y)
        assert got.position.y == pytest.approx(want.position.y)


def _body(x, y, color=(1.0, 0.0, 0.0), radius=0.1):
    return RigidBody("R", Vec2(x, y), Vec2(0.0, 0.0), radius, 1.0, color)


def test_clear_fills_background():
    surface = pygame.Surface((20, 20))
    surface.fill((200, 200, 200))
    Renderer(surface).clear()
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)
    assert surface.get_at((19, 19))[:3] == (0, 0, 0)


def test_draw_places_body_at_centre():
    surface = pygame.Surface((100, 100))
    renderer = Renderer(surface)
    renderer.clear()
    drawn = renderer.draw([_body(0.0, 0.0)], Camera2D())
    assert drawn == 1
    assert surface.get_at((50, 50))[:3] == (255, 0, 0)
    assert surface.get_at((2, 2))[:3] == (0, 0, 0)


def test_draw_follows_camera_pan():
    surface = pygame.Surface((100, 100))
    renderer = Renderer(surface)
    renderer.clear()
    camera = Camera2D(position=Vec2(0.5, 0.0))
    renderer.draw([_body(0.0, 0.0, color=(0.0, 1.0, 0.0))], camera)
    assert surface.get_at((25, 50))[:3] == (0, 255, 0)
    assert surface.get_at((50, 50))[:3] == (0, 0, 0)


def test_draw_puts_positive_y_upwards():
    surface = pygame.Surface((100, 100))
    renderer = Renderer(surface)
    renderer.clear()
    renderer.draw([_body(0.0, 0.5, color=(0.0, 0.0, 1.0))], Camera2D())
    assert surface.get_at((50, 25))[:3] == (0, 0, 255)
    assert surface.get_at((50, 75))[:3] == (0, 0, 0)