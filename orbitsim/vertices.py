"""Interleaved per-vertex data for drawing each body on a full-screen quad."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from orbitsim.physics import RigidBody

QUAD_VERTICES: tuple[tuple[float, float], ...] = (
    (-1.0, -1.0),
    (1.0, -1.0),
    (1.0, 1.0),
    (-1.0, -1.0),
    (1.0, 1.0),
    (-1.0, 1.0),
)

FLOATS_PER_VERTEX = 8


def build_buffer_data(
    bodies: Iterable[RigidBody],
    quad: Sequence[tuple[float, float]] = QUAD_VERTICES,
) -> np.ndarray:
    """Return a flat float32 array: for each body and quad corner,
    corner x, corner y, centre x, centre y, radius, red, green, blue.
    """
    rows = [
        (qx, qy, body.position.x, body.position.y, body.radius, *body.color)
        for body in bodies
        for qx, qy in quad
    ]
    return np.array(rows, dtype=np.float32).reshape(-1)