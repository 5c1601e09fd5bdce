import pytest

from cncsim.engine import SimulationEngine, SimulationEngineBase
from cncsim.state import SimulationState
from cncsim.step_result import ErrorCode, SimulationError, StepResult


class FakeGrid:
    def __init__(self, valid=True):
        self.valid = valid

    def is_valid(self):
        return self.valid

    def remaining_volume(self):
        return 1.0

    def clone(self):
        return FakeGrid(self.valid)


class RecordingEngine(SimulationEngineBase):
    def __init__(self, engine_type="Recording", fixed_time_step=0.001, fail_init=False):
        super().__init__(engine_type, fixed_time_step)
        self.sweeps = []
        self.fail_init = fail_init
        self.resets = 0

    def do_initialize(self, state):
        if self.fail_init:
            raise SimulationError(ErrorCode.INVALID_STATE, "cannot init")

    def do_step(self, state, sweep):
        self.sweeps.append((sweep, state.step_count))
        return StepResult.success(self.time_step)

    def do_reset(self, state):
        self.resets += 1

    def clone(self):
        return RecordingEngine(self.engine_type, self.time_step, self.fail_init)


def make_state(valid=True):
    return SimulationState(FakeGrid(valid))


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        SimulationEngine()


def test_base_requires_do_step():
    with pytest.raises(TypeError):
        SimulationEngineBase("x")


def test_step_before_initialize_raises():
    engine = RecordingEngine()
    with pytest.raises(SimulationError) as info:
        engine.step(make_state(), "sweep")
    assert info.value.code is ErrorCode.SIMULATION_INVALID_STATE
    assert info.value.recoverable is True


def test_initialize_rejects_invalid_state():
    engine = RecordingEngine()
    with pytest.raises(SimulationError) as info:
        engine.initialize(make_state(valid=False))
    assert info.value.code is ErrorCode.SIMULATION_INVALID_STATE
    assert not engine.initialized


def test_failed_do_initialize_leaves_engine_uninitialized():
    engine = RecordingEngine(fail_init=True)
    with pytest.raises(SimulationError):
        engine.initialize(make_state())
    assert not engine.initialized


def test_step_updates_counters_and_time():
    engine = RecordingEngine(fixed_time_step=0.5)
    state = make_state()
    engine.initialize(state)
    assert engine.initialized
    first = engine.step(state, "a")
    engine.step(state, "b")
    assert first.is_success()
    assert state.step_count == 2
    assert state.time_accumulator == pytest.approx(2 * engine.time_step)
    assert engine.steps_taken == 2
    assert engine.elapsed_time == pytest.approx(state.time_accumulator)
    # the step counter is incremented before do_step runs
    assert engine.sweeps == [("a", 1), ("b", 2)]


def test_step_rejects_state_that_became_invalid():
    engine = RecordingEngine()
    state = make_state()
    engine.initialize(state)
    state.material_grid.valid = False
    with pytest.raises(SimulationError) as info:
        engine.step(state, None)
    assert info.value.recoverable is False
    assert state.step_count == 0


def test_reset_clears_initialization():
    engine = RecordingEngine()
    state = make_state()
    engine.initialize(state)
    engine.step(state, None)
    engine.reset(state)
    assert not engine.initialized
    assert engine.steps_taken == 0
    assert engine.resets == 1
    with pytest.raises(SimulationError):
        engine.step(state, None)


def test_validity():
    assert SimulationEngineBase.is_valid(RecordingEngine()) is True
    assert SimulationEngineBase.is_valid(RecordingEngine(engine_type="")) is False
    assert SimulationEngineBase.is_valid(RecordingEngine(fixed_time_step=0.0)) is False
    assert SimulationEngineBase.is_valid(RecordingEngine(fixed_time_step=float("inf"))) is False


def test_engine_type_and_default_time_step():
    engine = RecordingEngine("VoxelEngine")
    assert engine.engine_type == "VoxelEngine"
    assert engine.time_step == 0.001
    state = SimulationState(FakeGrid())
    SimulationEngineBase.initialize(engine, state)
    SimulationEngineBase.step(engine, state, None)
    assert state.time_accumulator == pytest.approx(0.001)


def test_clone_is_independent():
    engine = RecordingEngine("VoxelEngine", 0.01)
    engine.initialize(make_state())
    twin = engine.clone()
    assert twin is not engine
    assert twin.engine_type == engine.engine_type
    assert twin.time_step == engine.time_step
    assert not twin.initialized