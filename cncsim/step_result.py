"""Outcome of a single simulation step and the errors a simulation reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Categories of failure reported by the simulation layer."""

    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_STATE = "InvalidState"
    SIMULATION_INVALID_STATE = "SimulationInvalidState"
    SIMULATION_TOOL_COLLISION = "SimulationToolCollision"


class SimulationError(Exception):
    """A simulation failure with a code and a recoverability flag."""

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def __repr__(self) -> str:
        return (
            f"SimulationError({self.code!r}, {self.message!r}, "
            f"recoverable={self.recoverable})"
        )


@dataclass
class StepResult:
    """What happened during one simulation step.

    ``error`` is None when the step ran without error.
    """

    error: SimulationError | None = None
    material_removed_volume: float = 0.0
    collision_detected: bool = False
    tool_contact: bool = False
    time_delta: float = 0.0
    cells_processed: int = 0

    def is_success(self) -> bool:
        """True if there was no error and no collision."""
        return self.error is None and not self.collision_detected

    def has_error(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, time_delta: float = 0.0) -> StepResult:
        return cls(time_delta=time_delta)

    @classmethod
    def make_error(
        cls, code: ErrorCode, message: str, recoverable: bool = False
    ) -> StepResult:
        return cls(error=SimulationError(code, message, recoverable))

    @classmethod
    def collision(cls, message: str = "Collision detected") -> StepResult:
        """A recoverable collision result."""
        return cls(
            error=SimulationError(ErrorCode.SIMULATION_TOOL_COLLISION, message, True),
            collision_detected=True,
        )