"""Simulation engine interface and a base class implementing the common step flow."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .state import SimulationState
from .step_result import ErrorCode, SimulationError, StepResult


class SimulationEngine(ABC):
    """Contract for simulation engines; engines act on states they do not own."""

    @property
    @abstractmethod
    def engine_type(self) -> str:
        """Identifier of the engine kind."""

    @abstractmethod
    def initialize(self, state: SimulationState) -> None:
        """Prepare the state for execution; raise SimulationError on failure."""

    @abstractmethod
    def step(self, state: SimulationState, sweep: object) -> StepResult:
        """Run one step for the given tool sweep."""

    @abstractmethod
    def reset(self, state: SimulationState) -> None:
        """Return the state to initial conditions; raise SimulationError on failure."""

    @abstractmethod
    def clone(self) -> SimulationEngine:
        """A new engine with the same configuration."""

    @abstractmethod
    def is_valid(self) -> bool:
        """True if the engine is configured and ready."""


class SimulationEngineBase(SimulationEngine):
    """Step counting, fixed-step time accumulation and initialisation checks.

    Subclasses implement do_step and clone, and may override do_initialize
    and do_reset.
    """

    def __init__(self, engine_type: str, fixed_time_step: float = 0.001) -> None:
        self._engine_type = engine_type
        self._time_step = fixed_time_step
        self._steps_taken = 0
        self._initialized = False

    @property
    def engine_type(self) -> str:
        return self._engine_type

    @property
    def time_step(self) -> float:
        return self._time_step

    @property
    def steps_taken(self) -> int:
        """Steps run since the last initialise or reset."""
        return self._steps_taken

    @property
    def elapsed_time(self) -> float:
        return self._steps_taken * self._time_step

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self, state: SimulationState) -> None:
        if not state.is_valid():
            raise SimulationError(
                ErrorCode.SIMULATION_INVALID_STATE, "Simulation state is invalid", False
            )
        self.do_initialize(state)
        self._initialized = True
        self._steps_taken = 0

    def step(self, state: SimulationState, sweep: object) -> StepResult:
        if not self._initialized:
            raise SimulationError(
                ErrorCode.SIMULATION_INVALID_STATE,
                "Engine not initialized. Call initialize() first.",
                True,
            )
        if not state.is_valid():
            raise SimulationError(
                ErrorCode.SIMULATION_INVALID_STATE, "Simulation state is invalid", False
            )
        state.increment_step_count()
        result = self.do_step(state, sweep)
        state.add_time(self._time_step)
        self._steps_taken += 1
        return result

    def reset(self, state: SimulationState) -> None:
        self.do_reset(state)
        self._initialized = False
        self._steps_taken = 0

    def is_valid(self) -> bool:
        step = self._time_step
        return step > 0.0 and math.isfinite(step) and bool(self._engine_type)

    def do_initialize(self, state: SimulationState) -> None:
        """Engine-specific initialisation; does nothing by default."""

    @abstractmethod
    def do_step(self, state: SimulationState, sweep: object) -> StepResult:
        """Engine-specific material removal and collision detection."""

    def do_reset(self, state: SimulationState) -> None:
        """Engine-specific reset; does nothing by default."""