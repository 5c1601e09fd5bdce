"""Orthographic CAD-style camera with view presets, zoom and pan, plus matrix helpers."""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence

import numpy as np

_FUZZY = 1e-12


def _vec(values: Sequence[float]) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def normalized(vector: Sequence[float]) -> np.ndarray:
    """Unit vector in the direction of ``vector``; the zero vector stays zero."""
    v = _vec(vector)
    length = float(np.linalg.norm(v))
    if length < _FUZZY:
        return np.zeros(3)
    return v / length


def look_at(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """View matrix placing the eye at the origin looking down -Z towards ``target``.

    If eye and target coincide the identity matrix is returned.
    """
    eye_v = _vec(eye)
    forward = _vec(target) - eye_v
    if float(np.linalg.norm(forward)) < _FUZZY:
        return np.eye(4)
    forward = normalized(forward)
    side = normalized(np.cross(forward, _vec(up)))
    up_v = np.cross(side, forward)

    matrix = np.eye(4)
    matrix[0, :3] = side
    matrix[1, :3] = up_v
    matrix[2, :3] = -forward
    matrix[:3, 3] = -matrix[:3, :3] @ eye_v
    return matrix


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Orthographic projection matrix; degenerate extents give the identity."""
    if left == right or bottom == top or near == far:
        return np.eye(4)
    width = right - left
    height = top - bottom
    clip = far - near
    matrix = np.eye(4)
    matrix[0, 0] = 2.0 / width
    matrix[0, 3] = -(left + right) / width
    matrix[1, 1] = 2.0 / height
    matrix[1, 3] = -(top + bottom) / height
    matrix[2, 2] = -2.0 / clip
    matrix[2, 3] = -(near + far) / clip
    return matrix


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection with a vertical field of view in degrees.

    Degenerate parameters give the identity.
    """
    if near == far or aspect == 0.0:
        return np.eye(4)
    half_angle = math.radians(fov / 2.0)
    sine = math.sin(half_angle)
    if sine == 0.0:
        return np.eye(4)
    cotan = math.cos(half_angle) / sine
    clip = far - near
    matrix = np.zeros((4, 4))
    matrix[0, 0] = cotan / aspect
    matrix[1, 1] = cotan
    matrix[2, 2] = -(near + far) / clip
    matrix[2, 3] = -(2.0 * near * far) / clip
    matrix[3, 2] = -1.0
    return matrix


class ViewPreset(Enum):
    TOP = "Top"
    FRONT = "Front"
    SIDE = "Side"
    ISO = "Iso"


_PRESETS: dict[ViewPreset, tuple[tuple[float, float, float], tuple[float, float, float]]] = {
    ViewPreset.TOP: ((0.0, 500.0, 0.0), (0.0, 0.0, -1.0)),
    ViewPreset.FRONT: ((0.0, 0.0, 500.0), (0.0, 1.0, 0.0)),
    ViewPreset.SIDE: ((500.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
    ViewPreset.ISO: ((300.0, 300.0, 300.0), (0.0, 1.0, 0.0)),
}

_DEFAULT_VIEWPORT = (800.0, 600.0)
_NEAR_PLANE = -10000.0
_FAR_PLANE = 10000.0


class OrthoCamera:
    """Orthographic camera looking at the origin from a preset direction.

    Construction resets the camera, so the zoom level starts at 1.
    """

    def __init__(self, view_preset: ViewPreset = ViewPreset.ISO, zoom_level: float = 1.0) -> None:
        self._preset = view_preset
        self._zoom = zoom_level
        self._position = np.zeros(3)
        self._target = np.zeros(3)
        self._up = np.array([0.0, 1.0, 0.0])
        self._pan_offset = np.zeros(3)
        self._view = np.eye(4)
        self.reset()

    @property
    def view_preset(self) -> ViewPreset:
        return self._preset

    @property
    def zoom_level(self) -> float:
        return self._zoom

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def target(self) -> np.ndarray:
        return self._target.copy()

    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    def projection_matrix(self, viewport_width: float, viewport_height: float) -> np.ndarray:
        """Orthographic projection; a larger zoom shows a smaller area."""
        if viewport_width <= 0.0:
            viewport_width = _DEFAULT_VIEWPORT[0]
        if viewport_height <= 0.0:
            viewport_height = _DEFAULT_VIEWPORT[1]
        half_width = (viewport_width / 2.0) / self._zoom
        half_height = (viewport_height / 2.0) / self._zoom
        return ortho(-half_width, half_width, -half_height, half_height, _NEAR_PLANE, _FAR_PLANE)

    def view_projection_matrix(self, viewport_width: float, viewport_height: float) -> np.ndarray:
        return self.projection_matrix(viewport_width, viewport_height) @ self.view_matrix()

    def set_view_preset(self, preset: ViewPreset) -> None:
        self._preset = preset
        self._update_view_matrix()

    def zoom(self, delta: float, min_zoom: float = 0.1, max_zoom: float = 100.0) -> None:
        """Scale the zoom by 10% per unit of delta, then clamp it to the range."""
        self.set_zoom(self._zoom * (1.0 + delta * 0.1))
        if self._zoom < min_zoom:
            self._zoom = min_zoom
        elif self._zoom > max_zoom:
            self._zoom = max_zoom

    def set_zoom(self, zoom_level: float) -> None:
        """Set the zoom level; non-positive values are ignored."""
        if zoom_level > 0.0:
            self._zoom = zoom_level

    def pan(self, delta_x: float, delta_y: float) -> None:
        """Shift camera and target along the screen's right and up directions."""
        forward = normalized(self._target - self._position)
        right = normalized(np.cross(forward, self._up))
        up = normalized(np.cross(right, forward))
        self._pan_offset = self._pan_offset + right * delta_x + up * delta_y
        self._update_view_matrix()

    def reset(self) -> None:
        """Clear the pan offset and return the zoom to 1."""
        self._pan_offset = np.zeros(3)
        self._zoom = 1.0
        self._update_view_matrix()

    def _update_view_matrix(self) -> None:
        base, up = _PRESETS[self._preset]
        self._position = np.array(base) + self._pan_offset
        self._target = self._pan_offset.copy()
        self._up = np.array(up)
        self._view = look_at(self._position, self._target, self._up)