"""A panning and zooming two-dimensional camera."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from orbitsim.physics import Vec2


def _ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


class Camera2D:
    """Camera moved with W/A/S/D and zoomed with Z/X.

    Matrices are stored in mathematical (row, column) order, so a point is
    transformed as ``matrix @ point``.
    """

    def __init__(
        self,
        position: Vec2 | None = None,
        zoom: float = 1.0,
        move_speed: float = 0.05,
        zoom_speed: float = 0.005,
        min_zoom: float = 0.5,
        max_zoom: float = 2.0,
    ) -> None:
        self.position = position if position is not None else Vec2(0.0, 0.0)
        self.zoom = zoom
        self.move_speed = move_speed
        self.zoom_speed = zoom_speed
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self._projection = _ortho(-1.0, 1.0, -1.0, 1.0, -1.0, 1.0)
        self.view_matrix = np.identity(4)
        self.update()

    def update(self) -> None:
        """Rebuild the view matrix from the current position and zoom."""
        translate = np.identity(4)
        translate[0, 3] = -self.position.x
        translate[1, 3] = -self.position.y
        scale = np.diag([self.zoom, self.zoom, 1.0, 1.0])
        self.view_matrix = translate @ scale

    def process_input(self, pressed: Iterable[str]) -> bool:
        """Apply the held keys (names such as ``"w"``); return whether anything changed."""
        keys = {key.lower() for key in pressed}
        moved = False
        x, y = self.position
        if "w" in keys:
            y += self.move_speed
            moved = True
        if "s" in keys:
            y -= self.move_speed
            moved = True
        if "a" in keys:
            x -= self.move_speed
            moved = True
        if "d" in keys:
            x += self.move_speed
            moved = True
        if "z" in keys:
            self.zoom += self.zoom_speed
            moved = True
            if self.zoom >= self.max_zoom:
                self.zoom = self.max_zoom
        if "x" in keys:
            self.zoom -= self.zoom_speed
            moved = True
            if self.zoom <= self.min_zoom:
                self.zoom = self.min_zoom
        if moved:
            self.position = Vec2(x, y)
            self.update()
        return moved

    def camera_matrix(self) -> np.ndarray:
        """Return projection times view."""
        return self._projection @ self.view_matrix