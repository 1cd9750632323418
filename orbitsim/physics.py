"""Rigid circular bodies: elastic collisions, mutual attraction and wall bounces."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

G = 0.005
DT = 0.016
GRAVITY = -0.5
BOUNCE = 0.9


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero denominator."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(_divide(self.x, scalar), _divide(self.y, scalar))

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: Vec2) -> float:
        """Return the scalar product with ``other``."""
        return self.x * other.x + self.y * other.y


@dataclass
class RigidBody:
    """A circular body with a unique name, mass and colour."""

    name: str
    position: Vec2
    velocity: Vec2
    radius: float
    mass: float
    color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    prev_pos: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))

    def elastic_collision(self, others: Iterable[RigidBody], resolved: Sequence[str]) -> Vec2:
        """Bounce off the first overlapping body whose name is not in ``resolved``.

        The other body's velocity is updated in place; this body's new
        velocity is returned.
        """
        for other in others:
            if other.name in resolved:
                continue
            offset = other.position - self.position
            distance_sq = offset.dot(offset)
            reach = other.radius + self.radius
            if reach * reach > distance_sq:
                div = _divide(1.0, (other.mass + self.mass) * distance_sq)
                away = self.position - other.position
                new_self = self.velocity - away * (
                    2.0 * other.mass * (self.velocity - other.velocity).dot(away) * div
                )
                toward = -away
                new_other = other.velocity - toward * (
                    2.0 * self.mass * (other.velocity - self.velocity).dot(toward) * div
                )
                other.velocity = new_other
                return new_self
        return self.velocity

    def check_force(self, others: Iterable[RigidBody], resolved: Sequence[str]) -> Vec2:
        """Attract the first body whose name is not in ``resolved``.

        The other body's velocity (and, when overlapping, its position) is
        updated in place; this body's new velocity is returned.
        """
        for other in others:
            if other.name in resolved:
                continue
            dx, dy = other.position - self.position
            distance_sq = dx * dx + dy * dy
            force = _divide(G * self.mass * other.mass, distance_sq)
            distance = math.sqrt(distance_sq)
            direction = Vec2(_divide(dx, distance), _divide(dy, distance))

            if self.radius + other.radius > distance:
                other.position = other.position + Vec2(dx, dy)

            accel_self = direction * _divide(force, self.mass)
            accel_other = -direction * _divide(force, other.mass)
            other.velocity = other.velocity + accel_other * DT
            return self.velocity + accel_self * DT
        return self.velocity


def orbit(bodies: list[RigidBody], dt: float) -> None:
    """Advance every body by one step under mutual attraction."""
    resolved: list[str] = []
    for body in bodies:
        resolved.append(body.name)
        body.prev_pos = body.position
        body.velocity = body.check_force(bodies, resolved)
        body.position = body.position + body.velocity * dt


def update_physics(
    bodies: list[RigidBody],
    dt: float,
    bounce: float = BOUNCE,
    gravity_enabled: bool = False,
) -> None:
    """Advance every body by one step with collisions, optional gravity and walls at ±1."""
    resolved: list[str] = []
    for body in bodies:
        resolved.append(body.name)
        body.prev_pos = body.position
        body.velocity = body.elastic_collision(bodies, resolved)

        vx, vy = body.velocity
        if gravity_enabled:
            vy += GRAVITY * dt
        x = body.position.x + vx * dt
        y = body.position.y + vy * dt
        r = body.radius

        if y - r < -1.0:
            y = -1.0 + r
            vy *= -bounce
        elif y + r > 1.0:
            y = 1.0 - r
            vy *= -bounce

        if x - r < -1.0:
            x = -1.0 + r
            vx *= -bounce
        elif x + r > 1.0:
            x = 1.0 - r
            vx *= -bounce

        body.position = Vec2(x, y)
        body.velocity = Vec2(vx, vy)


def interpolate(bodies: Iterable[RigidBody], factor: float) -> list[Vec2]:
    """Return each body's position blended between its previous and current one."""
    return [body.prev_pos * (1.0 - factor) + body.position * factor for body in bodies]