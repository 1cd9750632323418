"""The interactive simulation: fixed-step physics, drawing and the window loop."""

from __future__ import annotations

import argparse
import os
import time
from collections.abc import Iterable, Sequence

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from orbitsim.camera import Camera2D  # noqa: E402
from orbitsim.physics import BOUNCE, DT, RigidBody, Vec2, interpolate, orbit, update_physics  # noqa: E402

WINDOW_SIZE = 800

_CAMERA_KEYS = {
    pygame.K_w: "w",
    pygame.K_s: "s",
    pygame.K_a: "a",
    pygame.K_d: "d",
    pygame.K_z: "z",
    pygame.K_x: "x",
}


def default_bodies() -> list[RigidBody]:
    """Return the three bodies the simulation starts with."""
    return [
        RigidBody("A", Vec2(0.0, 0.3), Vec2(0.1, 0.0), 0.1, 4.0, (0.6, 0.8, 1.0)),
        RigidBody("B", Vec2(0.0, -0.3), Vec2(-0.1, 0.0), 0.1, 4.0, (0.8, 0.6, 1.0)),
        RigidBody("C", Vec2(0.6, 0.6), Vec2(-0.3, 0.0), 0.2, 6.0, (0.2, 0.6, 0.8)),
    ]


class Simulation:
    """Bodies advanced in fixed steps of ``dt``, optionally paused.

    With ``interpolate`` set, real elapsed time is accumulated and as many
    whole steps as fit are taken; otherwise each call takes one step.
    With ``collisions`` set, bodies bounce off each other and the walls
    instead of attracting each other.
    """

    def __init__(
        self,
        bodies: list[RigidBody] | None = None,
        dt: float = DT,
        interpolate: bool = True,
        collisions: bool = False,
        gravity_enabled: bool = False,
        bounce: float = BOUNCE,
    ) -> None:
        self.bodies = bodies if bodies is not None else default_bodies()
        self.dt = dt
        self.interpolate = interpolate
        self.collisions = collisions
        self.gravity_enabled = gravity_enabled
        self.bounce = bounce
        self.paused = False
        self.accumulator = 0.0
        self.lerp_factor = 0.0

    def _step(self) -> None:
        if self.collisions:
            update_physics(self.bodies, self.dt, self.bounce, self.gravity_enabled)
        else:
            orbit(self.bodies, self.dt)

    def toggle_pause(self) -> bool:
        """Flip the paused state and return the new one."""
        self.paused = not self.paused
        return self.paused

    def advance(self, frame_time: float) -> list[Vec2]:
        """Account for ``frame_time`` seconds and return positions to display."""
        if not self.interpolate:
            if not self.paused:
                self._step()
            return [body.position for body in self.bodies]

        self.accumulator += frame_time
        while self.accumulator >= self.dt:
            if not self.paused:
                self._step()
            self.accumulator -= self.dt
        self.lerp_factor = self.accumulator / self.dt
        return interpolate(self.bodies, self.lerp_factor)


class Renderer:
    """Draws bodies as filled circles on a pygame surface."""

    def __init__(self, surface: pygame.Surface, background: tuple[int, int, int] = (0, 0, 0)) -> None:
        self.surface = surface
        self.background = background

    def clear(self) -> None:
        """Fill the whole surface with the background colour."""
        self.surface.fill(self.background)

    def _to_screen(self, matrix: np.ndarray, point: Vec2) -> tuple[float, float]:
        clip = matrix @ np.array([point.x, point.y, 0.0, 1.0])
        width, height = self.surface.get_size()
        return (clip[0] + 1.0) * 0.5 * width, (1.0 - clip[1]) * 0.5 * height

    def draw(self, bodies: Iterable[RigidBody], camera: Camera2D) -> int:
        """Draw every body as seen through ``camera``; return how many were drawn."""
        matrix = camera.camera_matrix()
        width, height = self.surface.get_size()
        scale = min(abs(matrix[0, 0]) * width, abs(matrix[1, 1]) * height) * 0.5
        drawn = 0
        for body in bodies:
            centre = self._to_screen(matrix, body.position)
            colour = tuple(max(0, min(255, round(c * 255))) for c in body.color)
            radius = max(1.0, body.radius * scale)
            pygame.draw.circle(self.surface, colour, centre, radius)
            drawn += 1
        return drawn


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="orbitsim", description="Simulate attracting or colliding bodies.")
    parser.add_argument("--size", type=int, default=WINDOW_SIZE, help="window width and height in pixels")
    parser.add_argument("--no-interpolation", action="store_true", help="take one step per frame")
    parser.add_argument("--collisions", action="store_true", help="bounce bodies instead of attracting them")
    parser.add_argument("--gravity", action="store_true", help="pull bodies downwards (with --collisions)")
    args = parser.parse_args(argv)
    if args.size <= 0:
        parser.error("--size must be positive")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run until it is closed. P pauses, W/A/S/D pan, Z/X zoom."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.size, args.size))
        pygame.display.set_caption("orbitsim")
        simulation = Simulation(
            interpolate=not args.no_interpolation,
            collisions=args.collisions,
            gravity_enabled=args.gravity,
        )
        renderer = Renderer(screen)
        camera = Camera2D()
        clock = pygame.time.Clock()
        last_time = time.perf_counter()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_p:
                    simulation.toggle_pause()

            held = pygame.key.get_pressed()
            camera.process_input(name for key, name in _CAMERA_KEYS.items() if held[key])

            now = time.perf_counter()
            simulation.advance(now - last_time)
            last_time = now

            renderer.clear()
            renderer.draw(simulation.bodies, camera)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())