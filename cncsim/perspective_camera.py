"""Perspective camera that orbits, pans and zooms around a target point."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .camera import look_at, normalized, perspective

_WORLD_UP = np.array([0.0, 1.0, 0.0])
_MIN_ELEVATION = math.radians(-89.0)
_MAX_ELEVATION = math.radians(89.0)
_DEFAULT_VIEWPORT = (800.0, 600.0)


class PerspectiveCamera:
    """Orbit camera with a fixed vertical field of view in degrees.

    Azimuth and elevation are in radians; the elevation is kept within
    ±89 degrees to avoid gimbal lock.
    """

    def __init__(self, fov: float = 45.0, near_plane: float = 0.1, far_plane: float = 10000.0) -> None:
        self.fov = fov
        self.near_plane = near_plane
        self.far_plane = far_plane
        self._target = np.zeros(3)
        self._distance = 500.0
        self._azimuth = 0.0
        self._elevation = math.radians(30.0)
        self._pan_offset = np.zeros(3)
        self._view = np.eye(4)
        self.reset()

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def azimuth(self) -> float:
        return self._azimuth

    @property
    def elevation(self) -> float:
        return self._elevation

    @property
    def pan_offset(self) -> np.ndarray:
        return self._pan_offset.copy()

    @property
    def target(self) -> np.ndarray:
        return self._target.copy()

    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    def projection_matrix(self, viewport_width: float, viewport_height: float) -> np.ndarray:
        if viewport_width <= 0.0:
            viewport_width = _DEFAULT_VIEWPORT[0]
        if viewport_height <= 0.0:
            viewport_height = _DEFAULT_VIEWPORT[1]
        aspect = viewport_width / viewport_height
        return perspective(self.fov, aspect, self.near_plane, self.far_plane)

    def view_projection_matrix(self, viewport_width: float, viewport_height: float) -> np.ndarray:
        return self.projection_matrix(viewport_width, viewport_height) @ self.view_matrix()

    def orbit(self, delta_x: float, delta_y: float) -> None:
        """Rotate around the target by the given azimuth and elevation deltas."""
        self._azimuth += delta_x
        self._elevation = min(max(self._elevation + delta_y, _MIN_ELEVATION), _MAX_ELEVATION)
        self._update_view_matrix()

    def pan(self, delta_x: float, delta_y: float) -> None:
        """Move camera and look-at point together in the screen plane."""
        forward = normalized(self._target - self.position())
        right = normalized(np.cross(forward, _WORLD_UP))
        up = normalized(np.cross(right, forward))
        self._pan_offset = self._pan_offset + right * delta_x + up * delta_y
        self._update_view_matrix()

    def zoom(self, delta: float) -> None:
        """Move closer by 10% per unit of positive delta."""
        self.set_distance(self._distance * (1.0 - delta * 0.1))

    def set_distance(self, distance: float) -> None:
        """Set the distance to the target; values outside (1, 100000) are ignored."""
        if 1.0 < distance < 100000.0:
            self._distance = distance
            self._update_view_matrix()

    def position(self) -> np.ndarray:
        """Camera position from the spherical coordinates around target plus pan."""
        horizontal = self._distance * math.cos(self._elevation)
        offset = np.array(
            [
                horizontal * math.sin(self._azimuth),
                self._distance * math.sin(self._elevation),
                horizontal * math.cos(self._azimuth),
            ]
        )
        return self._target + self._pan_offset + offset

    def set_target(self, target: Sequence[float]) -> None:
        array = np.array(target, dtype=float)
        if array.shape != (3,):
            raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
        self._target = array
        self._update_view_matrix()

    def reset(self) -> None:
        self._target = np.zeros(3)
        self._distance = 300.0
        self._azimuth = math.radians(45.0)
        self._elevation = math.radians(30.0)
        self._pan_offset = np.zeros(3)
        self._update_view_matrix()

    def _update_view_matrix(self) -> None:
        self._view = look_at(self.position(), self._target + self._pan_offset, _WORLD_UP)