"""Engine-agnostic driver for running simulation steps and tracking the last result."""

from __future__ import annotations

from typing import Iterable

from .engine import SimulationEngine
from .state import SimulationState
from .step_result import ErrorCode, SimulationError, StepResult


class StepController:
    """Runs single or repeated steps on an engine and remembers the last outcome."""

    def __init__(self, engine: SimulationEngine | None) -> None:
        self.engine = engine
        self._last_result = StepResult()
        if engine is None:
            self._last_result = StepResult.make_error(
                ErrorCode.INVALID_ARGUMENT, "Engine cannot be null", False
            )

    @property
    def last_result(self) -> StepResult:
        return self._last_result

    def _engine_missing(self) -> bool:
        if self.engine is None:
            self._last_result = StepResult.make_error(
                ErrorCode.INVALID_STATE, "Engine is null", False
            )
            return True
        return False

    def initialize(self, state: SimulationState) -> bool:
        """Initialise the state; returns True on success."""
        if self._engine_missing():
            return False
        try:
            self.engine.initialize(state)
        except SimulationError as error:
            self._last_result = StepResult(error=error)
            return False
        self._last_result = StepResult.success()
        return True

    def step_once(self, state: SimulationState, sweep: object) -> bool:
        """Run one step; returns True if it succeeded without collision."""
        if self._engine_missing():
            return False
        if not state.is_valid():
            self._last_result = StepResult.make_error(
                ErrorCode.SIMULATION_INVALID_STATE, "Simulation state is invalid", False
            )
            return False
        try:
            self._last_result = self.engine.step(state, sweep)
        except SimulationError as error:
            self._last_result = StepResult(error=error)
        return self._last_result.is_success()

    def step_n(self, state: SimulationState, sweep: object, num_steps: int) -> int:
        """Repeat the same sweep up to num_steps times; returns steps that succeeded."""
        if self.engine is None or not state.is_valid():
            return 0
        executed = 0
        for _ in range(num_steps):
            if not self.step_once(state, sweep):
                break
            executed += 1
        return executed

    def step_sweeps(self, state: SimulationState, sweeps: Iterable[object]) -> int:
        """Run one step per sweep, stopping at the first failure."""
        sweeps = list(sweeps)
        if self.engine is None or not state.is_valid() or not sweeps:
            return 0
        executed = 0
        for sweep in sweeps:
            if not self.step_once(state, sweep):
                break
            executed += 1
        return executed

    def reset(self, state: SimulationState) -> bool:
        """Reset the state; returns True on success."""
        if self._engine_missing():
            return False
        try:
            self.engine.reset(state)
        except SimulationError as error:
            self._last_result = StepResult(error=error)
            return False
        self._last_result = StepResult.success()
        return True

    def is_valid(self) -> bool:
        return self.engine is not None and self.engine.is_valid()

    def last_step_succeeded(self) -> bool:
        return self._last_result.is_success()

    def last_step_had_collision(self) -> bool:
        return self._last_result.collision_detected

    def last_step_had_error(self) -> bool:
        return self._last_result.has_error()