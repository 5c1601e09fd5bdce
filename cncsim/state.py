"""Mutable state of a running simulation, copyable for snapshots and rollouts."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

import numpy as np

from .jog import Axis

_AXIS_COUNT = len(Axis)


@runtime_checkable
class MaterialGrid(Protocol):
    """Interface a material representation must offer to the simulation."""

    def is_valid(self) -> bool: ...

    def remaining_volume(self) -> float: ...

    def clone(self) -> MaterialGrid: ...


def _as_pose(pose: object) -> np.ndarray:
    array = np.array(pose, dtype=float)
    if array.shape != (4, 4):
        raise ValueError(f"tool pose must be a 4x4 matrix, got shape {array.shape}")
    return array


class SimulationState:
    """Material, tool pose, axis positions, counters and seed of a simulation.

    The tool pose is a 4x4 homogeneous transform; axis positions are
    [X, Y, Z, A, B, C] with unused axes left at 0.
    """

    def __init__(
        self,
        material_grid: MaterialGrid | None,
        tool_pose: object | None = None,
    ) -> None:
        self.material_grid = material_grid
        self._tool_pose = np.eye(4) if tool_pose is None else _as_pose(tool_pose)
        self._axes = [0.0] * _AXIS_COUNT
        self._step_count = 0
        self._time_accumulator = 0.0
        self.deterministic_seed = 0

    @property
    def tool_pose(self) -> np.ndarray:
        return self._tool_pose

    @tool_pose.setter
    def tool_pose(self, pose: object) -> None:
        self._tool_pose = _as_pose(pose)

    @property
    def machine_axes(self) -> tuple[float, ...]:
        return tuple(self._axes)

    @machine_axes.setter
    def machine_axes(self, axes: Sequence[float]) -> None:
        values = [float(v) for v in axes]
        if len(values) != _AXIS_COUNT:
            raise ValueError(f"expected {_AXIS_COUNT} axis values, got {len(values)}")
        self._axes = values

    def set_axis(self, axis: Axis, value: float) -> None:
        self._axes[Axis(axis)] = float(value)

    def axis(self, axis: Axis) -> float:
        return self._axes[Axis(axis)]

    @property
    def step_count(self) -> int:
        """Number of simulation steps executed so far."""
        return self._step_count

    def increment_step_count(self) -> None:
        self._step_count += 1

    @property
    def time_accumulator(self) -> float:
        """Total simulated time in seconds."""
        return self._time_accumulator

    def add_time(self, delta_time: float) -> None:
        self._time_accumulator += delta_time

    def clone(self) -> SimulationState:
        """Deep copy, including the material grid."""
        copy = SimulationState(
            self.material_grid.clone() if self.material_grid is not None else None,
            self._tool_pose.copy(),
        )
        copy._axes = list(self._axes)
        copy._step_count = self._step_count
        copy._time_accumulator = self._time_accumulator
        copy.deterministic_seed = self.deterministic_seed
        return copy

    __copy__ = clone

    def __deepcopy__(self, memo: dict) -> SimulationState:
        return self.clone()

    def is_valid(self) -> bool:
        return self.material_grid is not None and self.material_grid.is_valid()

    def remaining_volume(self) -> float:
        if self.material_grid is None:
            return 0.0
        return self.material_grid.remaining_volume()