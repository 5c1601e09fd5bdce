"""Velocity-based manual jog commands for a single machine axis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Axis(IntEnum):
    """Machine axes; the value is the axis index in [X, Y, Z, A, B, C]."""

    X = 0
    Y = 1
    Z = 2
    A = 3
    B = 4
    C = 5


class JogDirection(Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    STOP = "Stop"


@dataclass(frozen=True)
class JogCommand:
    """A manual jog of one axis at a speed in units per second.

    Built directly, the jog is limited by duration (0 means continuous); built
    with from_distance, it is limited by distance. Non-positive speed and
    distance and negative duration are clamped to 0.
    """

    axis: Axis
    direction: JogDirection
    speed: float
    duration: float = 0.0
    distance: float = 0.0
    use_distance: bool = False

    def __post_init__(self) -> None:
        speed = self.speed if self.speed > 0.0 else 0.0
        if self.use_distance:
            duration = 0.0
            distance = self.distance if self.distance > 0.0 else 0.0
        else:
            duration = self.duration if self.duration >= 0.0 else 0.0
            distance = 0.0
        object.__setattr__(self, "speed", float(speed))
        object.__setattr__(self, "duration", float(duration))
        object.__setattr__(self, "distance", float(distance))

    @classmethod
    def from_distance(
        cls, axis: Axis, direction: JogDirection, speed: float, distance: float
    ) -> JogCommand:
        """A jog that is limited by distance rather than duration."""
        return cls(axis, direction, speed, distance=distance, use_distance=True)

    def is_stop(self) -> bool:
        return self.direction == JogDirection.STOP or self.speed <= 0.0

    def target_velocity(self) -> float:
        """Signed velocity for the axis; 0 for a stop command."""
        if self.is_stop():
            return 0.0
        if self.direction == JogDirection.NEGATIVE:
            return -self.speed
        return self.speed

    def is_valid(self) -> bool:
        return self.speed >= 0.0 and self.duration >= 0.0 and self.distance >= 0.0