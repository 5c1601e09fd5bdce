"""Cutting tool model: tool types, geometry, holders and complete tool assemblies."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

_TIP_EPSILON = 1e-9


class ToolingType(Enum):
    """Fundamental tool types supported by the CAM system."""

    END_MILL = "EndMill"
    BALL_MILL = "BallMill"
    FLAT_MILL = "FlatMill"
    DRILL = "Drill"
    CHAMFER = "Chamfer"
    CUSTOM = "Custom"


class CoolantMode(Enum):
    """Coolant delivery mode for tool operations."""

    NONE = "None"
    FLOOD = "Flood"
    MIST = "Mist"
    THROUGH = "Through"


class HolderType(Enum):
    """Tool holder interface type."""

    BT30 = "BT30"
    BT40 = "BT40"
    BT50 = "BT50"
    HSK63 = "HSK63"
    HSK100 = "HSK100"
    ER32 = "ER32"
    ER40 = "ER40"
    CUSTOM = "Custom"


_BT_FAMILY = frozenset({HolderType.BT30, HolderType.BT40, HolderType.BT50})
_HSK_FAMILY = frozenset({HolderType.HSK63, HolderType.HSK100})


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box given by its minimum and maximum corners."""

    min_corner: tuple[float, float, float]
    max_corner: tuple[float, float, float]

    @property
    def size(self) -> tuple[float, float, float]:
        return tuple(hi - lo for lo, hi in zip(self.min_corner, self.max_corner))


@dataclass(frozen=True)
class ToolGeometry:
    """Physical dimensions of a cutting tool, origin at the tip, Z up the centreline.

    Out-of-range inputs are clamped: non-positive lengths and diameter become 0,
    negative shoulder length or corner radius become 0, a negative tolerance
    becomes 0.001, the overall length is raised to at least flute + shoulder and
    the corner radius is capped at the tool radius.
    """

    diameter: float
    flute_length: float
    overall_length: float
    shoulder_length: float = 0.0
    corner_radius: float = 0.0
    tolerance: float = 0.001

    def __post_init__(self) -> None:
        diameter = self.diameter if self.diameter > 0.0 else 0.0
        flute = self.flute_length if self.flute_length > 0.0 else 0.0
        overall = self.overall_length if self.overall_length > 0.0 else 0.0
        shoulder = self.shoulder_length if self.shoulder_length >= 0.0 else 0.0
        corner = self.corner_radius if self.corner_radius >= 0.0 else 0.0
        tolerance = self.tolerance if self.tolerance >= 0.0 else 0.001

        overall = max(overall, flute + shoulder)
        corner = min(corner, diameter * 0.5)

        for name, value in (
            ("diameter", diameter),
            ("flute_length", flute),
            ("overall_length", overall),
            ("shoulder_length", shoulder),
            ("corner_radius", corner),
            ("tolerance", tolerance),
        ):
            object.__setattr__(self, name, float(value))

    @property
    def radius(self) -> float:
        return self.diameter * 0.5

    @property
    def shank_length(self) -> float:
        """Length of the non-cutting shank."""
        return self.overall_length - self.flute_length - self.shoulder_length

    def is_flat_tip(self) -> bool:
        return self.corner_radius < _TIP_EPSILON

    def is_rounded_tip(self) -> bool:
        return self.corner_radius > _TIP_EPSILON

    def effective_radius(self, depth: float) -> float:
        """Cutting radius at the given depth above the tip."""
        if self.is_flat_tip():
            return self.radius
        if depth <= self.corner_radius:
            r = self.corner_radius
            squared = r * r - (r - depth) * (r - depth)
            return math.sqrt(squared) if squared >= 0.0 else math.nan
        return self.radius

    def bounding_box(self) -> BoundingBox:
        """Bounding box in the tool coordinate system."""
        r = self.radius
        return BoundingBox((-r, -r, -self.overall_length), (r, r, 0.0))

    def is_valid(self) -> bool:
        values = (
            self.diameter,
            self.flute_length,
            self.overall_length,
            self.shoulder_length,
            self.corner_radius,
            self.tolerance,
        )
        return (
            self.diameter > 0.0
            and self.flute_length > 0.0
            and self.overall_length > 0.0
            and self.shoulder_length >= 0.0
            and self.corner_radius >= 0.0
            and self.tolerance >= 0.0
            and self.overall_length >= self.flute_length + self.shoulder_length
            and self.corner_radius <= self.diameter * 0.5
            and all(math.isfinite(v) for v in values)
        )


@dataclass(frozen=True)
class ToolHolder:
    """Holder geometry and operational limits.

    A non-positive gauge length becomes 0; non-positive maximum RPM and
    collision radius fall back to their defaults.
    """

    holder_type: HolderType
    gauge_length: float
    max_rpm: float = 24000.0
    collision_radius: float = 50.0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "gauge_length", float(self.gauge_length if self.gauge_length > 0.0 else 0.0)
        )
        object.__setattr__(
            self, "max_rpm", float(self.max_rpm if self.max_rpm > 0.0 else 24000.0)
        )
        object.__setattr__(
            self,
            "collision_radius",
            float(self.collision_radius if self.collision_radius > 0.0 else 50.0),
        )

    def type_name(self) -> str:
        return self.holder_type.value

    def is_valid(self) -> bool:
        return (
            self.gauge_length > 0.0
            and self.max_rpm > 0.0
            and self.collision_radius > 0.0
            and math.isfinite(self.gauge_length)
            and math.isfinite(self.max_rpm)
            and math.isfinite(self.collision_radius)
        )

    def is_compatible_with(self, other_type: HolderType) -> bool:
        """True if the holders share a taper family."""
        if self.holder_type == other_type:
            return True
        if self.holder_type in _BT_FAMILY and other_type in _BT_FAMILY:
            return True
        return self.holder_type in _HSK_FAMILY and other_type in _HSK_FAMILY


@dataclass(frozen=True, order=True)
class Tool:
    """A complete tool assembly; equality, ordering and hashing go by id.

    Non-positive feedrate and spindle speed fall back to their defaults.
    """

    id: str
    name: str = field(compare=False)
    tool_type: ToolingType = field(compare=False)
    geometry: ToolGeometry = field(compare=False)
    holder: ToolHolder = field(compare=False)
    default_feedrate: float = field(default=1000.0, compare=False)
    default_spindle_speed: float = field(default=10000.0, compare=False)
    coolant_mode: CoolantMode = field(default=CoolantMode.FLOOD, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "default_feedrate",
            float(self.default_feedrate if self.default_feedrate > 0.0 else 1000.0),
        )
        object.__setattr__(
            self,
            "default_spindle_speed",
            float(self.default_spindle_speed if self.default_spindle_speed > 0.0 else 10000.0),
        )

    @property
    def diameter(self) -> float:
        return self.geometry.diameter

    @property
    def length(self) -> float:
        """Flute (cutting) length."""
        return self.geometry.flute_length

    @property
    def total_length(self) -> float:
        return self.geometry.overall_length

    @property
    def total_length_from_spindle(self) -> float:
        """Holder gauge length plus the tool's overall length."""
        return self.holder.gauge_length + self.geometry.overall_length

    def bounding_box(self) -> BoundingBox:
        return self.geometry.bounding_box()

    def is_valid(self) -> bool:
        return (
            bool(self.id)
            and bool(self.name)
            and self.geometry.is_valid()
            and self.holder.is_valid()
            and self.default_feedrate > 0.0
            and self.default_spindle_speed > 0.0
        )

    def is_end_mill(self) -> bool:
        return self.tool_type in (
            ToolingType.END_MILL,
            ToolingType.BALL_MILL,
            ToolingType.FLAT_MILL,
        )

    def is_ball_mill(self) -> bool:
        return self.tool_type == ToolingType.BALL_MILL

    def is_drill(self) -> bool:
        return self.tool_type == ToolingType.DRILL