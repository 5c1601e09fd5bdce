import copy

import numpy as np
import pytest

from cncsim.jog import Axis
from cncsim.state import MaterialGrid, SimulationState


class FakeGrid:
    def __init__(self, volume=100.0, valid=True):
        self.volume = volume
        self.valid = valid

    def is_valid(self):
        return self.valid

    def remaining_volume(self):
        return self.volume

    def clone(self):
        return FakeGrid(self.volume, self.valid)


def test_fake_grid_satisfies_protocol():
    state = SimulationState(FakeGrid(5.0))
    assert isinstance(state.material_grid, MaterialGrid)
    assert state.remaining_volume() == 5.0


def test_initial_state():
    state = SimulationState(FakeGrid())
    assert state.machine_axes == (0.0,) * 6
    assert state.step_count == 0
    assert state.time_accumulator == 0.0
    assert state.deterministic_seed == 0
    assert np.array_equal(state.tool_pose, np.eye(4))


def test_custom_initial_pose():
    pose = np.eye(4)
    pose[0, 3] = 5.0
    state = SimulationState(FakeGrid(), pose)
    assert state.tool_pose[0, 3] == 5.0


def test_bad_pose_shape_raises():
    with pytest.raises(ValueError):
        SimulationState(FakeGrid(), np.eye(3))


def test_set_and_get_axis():
    state = SimulationState(FakeGrid())
    state.set_axis(Axis.Z, -12.5)
    assert state.axis(Axis.Z) == -12.5
    assert state.machine_axes[Axis.Z] == -12.5
    assert state.axis(Axis.X) == 0.0


def test_machine_axes_setter():
    state = SimulationState(FakeGrid())
    state.machine_axes = [1, 2, 3, 4, 5, 6]
    assert state.machine_axes == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert state.axis(Axis.C) == 6.0


def test_machine_axes_wrong_length_raises():
    state = SimulationState(FakeGrid())
    with pytest.raises(ValueError):
        state.machine_axes = [1.0, 2.0]
    assert state.machine_axes == (0.0,) * 6


def test_counters():
    state = SimulationState(FakeGrid())
    state.increment_step_count()
    state.increment_step_count()
    state.add_time(0.5)
    state.add_time(0.25)
    assert state.step_count == 2
    assert state.time_accumulator == pytest.approx(0.75)


def test_validity():
    assert SimulationState(FakeGrid()).is_valid()
    assert not SimulationState(None).is_valid()
    assert not SimulationState(FakeGrid(valid=False)).is_valid()


def test_remaining_volume():
    assert SimulationState(FakeGrid(42.0)).remaining_volume() == 42.0
    assert SimulationState(None).remaining_volume() == 0.0


def test_clone_is_deep_and_independent():
    state = SimulationState(FakeGrid(10.0))
    state.set_axis(Axis.Y, 3.0)
    state.increment_step_count()
    state.add_time(1.5)
    state.deterministic_seed = 7

    snapshot = state.clone()
    assert snapshot.material_grid is not state.material_grid
    assert snapshot.axis(Axis.Y) == 3.0
    assert snapshot.step_count == 1
    assert snapshot.time_accumulator == 1.5
    assert snapshot.deterministic_seed == 7

    state.material_grid.volume = 1.0
    state.set_axis(Axis.Y, 9.0)
    state.tool_pose[0, 0] = 2.0
    state.increment_step_count()
    assert snapshot.remaining_volume() == 10.0
    assert snapshot.axis(Axis.Y) == 3.0
    assert snapshot.tool_pose[0, 0] == 1.0
    assert snapshot.step_count == 1


def test_clone_without_grid():
    snapshot = SimulationState(None).clone()
    assert snapshot.material_grid is None
    assert not snapshot.is_valid()


def test_copy_module_uses_clone():
    state = SimulationState(FakeGrid())
    duplicate = copy.deepcopy(state)
    assert duplicate.material_grid is not state.material_grid
    assert duplicate.remaining_volume() == state.remaining_volume()