from cncsim.controller import StepController
from cncsim.engine import SimulationEngineBase
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


class CollidingEngine(SimulationEngineBase):
    """Succeeds until ``collide_at`` steps have run, then reports a collision."""

    def __init__(self, collide_at=None, fail_reset=False):
        super().__init__("Colliding")
        self.collide_at = collide_at
        self.fail_reset = fail_reset
        self.seen = []

    def do_step(self, state, sweep):
        self.seen.append(sweep)
        if self.collide_at is not None and state.step_count >= self.collide_at:
            return StepResult.collision()
        return StepResult.success(self.time_step)

    def do_reset(self, state):
        if self.fail_reset:
            raise SimulationError(ErrorCode.INVALID_STATE, "reset refused", True)

    def clone(self):
        return CollidingEngine(self.collide_at, self.fail_reset)


def make_state(valid=True):
    return SimulationState(FakeGrid(valid))


def test_null_engine_records_error():
    controller = StepController(None)
    assert controller.last_result.error.code is ErrorCode.INVALID_ARGUMENT
    assert controller.last_result.error.message == "Engine cannot be null"
    assert not controller.is_valid()


def test_null_engine_operations_fail():
    controller = StepController(None)
    state = make_state()
    assert controller.initialize(state) is False
    assert controller.last_result.error.code is ErrorCode.INVALID_STATE
    assert controller.step_once(state, None) is False
    assert controller.reset(state) is False
    assert controller.step_n(state, None, 5) == 0
    assert controller.last_step_had_error()


def test_fresh_controller_has_success_result():
    controller = StepController(CollidingEngine())
    assert controller.last_step_succeeded()
    assert controller.is_valid()


def test_step_before_initialize_fails_with_error():
    controller = StepController(CollidingEngine())
    assert controller.step_once(make_state(), None) is False
    assert controller.last_step_had_error()
    assert controller.last_result.error.code is ErrorCode.SIMULATION_INVALID_STATE


def test_initialize_invalid_state():
    controller = StepController(CollidingEngine())
    assert controller.initialize(make_state(valid=False)) is False
    assert controller.last_result.error.code is ErrorCode.SIMULATION_INVALID_STATE


def test_step_once_on_invalid_state():
    controller = StepController(CollidingEngine())
    state = make_state()
    controller.initialize(state)
    state.material_grid.valid = False
    assert controller.step_once(state, None) is False
    assert controller.last_result.error.message == "Simulation state is invalid"


def test_step_n_runs_all_steps():
    engine = CollidingEngine()
    controller = StepController(engine)
    state = make_state()
    assert controller.initialize(state)
    assert controller.step_n(state, "sweep", 4) == 4
    assert state.step_count == 4
    assert engine.seen == ["sweep"] * 4
    assert controller.last_step_succeeded()


def test_step_n_stops_on_collision():
    controller = StepController(CollidingEngine(collide_at=3))
    state = make_state()
    controller.initialize(state)
    assert controller.step_n(state, None, 10) == 2
    assert state.step_count == 3
    assert controller.last_step_had_collision()
    assert not controller.last_step_succeeded()


def test_step_n_zero_steps():
    controller = StepController(CollidingEngine())
    state = make_state()
    controller.initialize(state)
    assert controller.step_n(state, None, 0) == 0
    assert state.step_count == 0


def test_step_sweeps_in_order():
    engine = CollidingEngine()
    controller = StepController(engine)
    state = make_state()
    controller.initialize(state)
    assert controller.step_sweeps(state, ["a", "b", "c"]) == 3
    assert engine.seen == ["a", "b", "c"]


def test_step_sweeps_empty_and_invalid():
    controller = StepController(CollidingEngine())
    state = make_state()
    controller.initialize(state)
    assert controller.step_sweeps(state, []) == 0
    assert controller.step_sweeps(make_state(valid=False), ["a"]) == 0


def test_step_sweeps_stops_on_collision():
    engine = CollidingEngine(collide_at=2)
    controller = StepController(engine)
    state = make_state()
    controller.initialize(state)
    assert controller.step_sweeps(state, ["a", "b", "c"]) == 1
    assert engine.seen == ["a", "b"]


def test_reset_success_and_failure():
    controller = StepController(CollidingEngine())
    state = make_state()
    controller.initialize(state)
    assert controller.reset(state) is True
    assert controller.last_step_succeeded()

    failing = StepController(CollidingEngine(fail_reset=True))
    assert failing.reset(state) is False
    assert failing.last_result.error.message == "reset refused"
    assert failing.last_result.error.recoverable is True


def test_reset_requires_reinitialize():
    controller = StepController(CollidingEngine())
    state = make_state()
    controller.initialize(state)
    controller.reset(state)
    assert controller.step_once(state, None) is False
    assert controller.last_step_had_error()