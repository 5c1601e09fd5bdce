"""Checks that a tool is consistent and safe for the motions it is used in."""

from __future__ import annotations

from enum import Enum

from .tooling import Tool, ToolingType


class MotionType(Enum):
    """Kind of motion in a toolpath."""

    RAPID = "Rapid"
    LINEAR = "Linear"
    ARC_CW = "ArcCW"
    ARC_CCW = "ArcCCW"
    DWELL = "Dwell"
    TOOL_CHANGE = "ToolChange"


class ToolValidationError(ValueError):
    """Raised when a tool fails validation."""


_CUTTING_TOOLS = frozenset(
    {
        ToolingType.END_MILL,
        ToolingType.BALL_MILL,
        ToolingType.FLAT_MILL,
        ToolingType.CHAMFER,
    }
)

_CUTTING_MOTIONS = frozenset({MotionType.LINEAR, MotionType.ARC_CW, MotionType.ARC_CCW})

_ANY_TOOL_MOTIONS = frozenset({MotionType.RAPID, MotionType.DWELL, MotionType.TOOL_CHANGE})


def _num(value: float) -> str:
    return f"{value:.6f}"


def validate(tool: Tool) -> None:
    """Run every check; raise ToolValidationError on the first failure."""
    validate_geometry(tool)
    validate_holder(tool)
    validate_rpm(tool)
    validate_parameters(tool)


def validate_geometry(tool: Tool) -> None:
    geom = tool.geometry
    if not geom.is_valid():
        raise ToolValidationError(f"Tool '{tool.id}' has invalid geometry")
    if geom.diameter <= 0.0:
        raise ToolValidationError(
            f"Tool '{tool.id}' has invalid diameter: {_num(geom.diameter)}"
        )
    if geom.overall_length < geom.flute_length:
        raise ToolValidationError(
            f"Tool '{tool.id}' overall length ({_num(geom.overall_length)}) "
            f"is less than flute length ({_num(geom.flute_length)})"
        )
    if geom.corner_radius > geom.radius:
        raise ToolValidationError(
            f"Tool '{tool.id}' corner radius ({_num(geom.corner_radius)}) "
            f"exceeds tool radius ({_num(geom.radius)})"
        )


def validate_holder(tool: Tool) -> None:
    holder = tool.holder
    if not holder.is_valid():
        raise ToolValidationError(f"Tool '{tool.id}' has invalid holder")
    if holder.gauge_length <= 0.0:
        raise ToolValidationError(
            f"Tool '{tool.id}' holder has invalid gauge length: {_num(holder.gauge_length)}"
        )


def validate_rpm(tool: Tool) -> None:
    """The tool's default spindle speed must not exceed the holder's maximum."""
    tool_rpm = tool.default_spindle_speed
    holder_max = tool.holder.max_rpm
    if tool_rpm > holder_max:
        raise ToolValidationError(
            f"Tool '{tool.id}' default spindle speed ({_num(tool_rpm)} RPM) "
            f"exceeds holder maximum ({_num(holder_max)} RPM)"
        )


def validate_parameters(tool: Tool) -> None:
    if not tool.id:
        raise ToolValidationError("Tool has empty ID")
    if not tool.name:
        raise ToolValidationError(f"Tool '{tool.id}' has empty name")
    if tool.default_feedrate <= 0.0:
        raise ToolValidationError(
            f"Tool '{tool.id}' has invalid default feedrate: {_num(tool.default_feedrate)}"
        )
    if tool.default_spindle_speed <= 0.0:
        raise ToolValidationError(
            f"Tool '{tool.id}' has invalid default spindle speed: "
            f"{_num(tool.default_spindle_speed)}"
        )


def is_usable_for_motion(tool: Tool, motion_type: MotionType) -> bool:
    """Whether the tool type suits the motion; cutting motions need cutting tools."""
    if motion_type in _ANY_TOOL_MOTIONS:
        return True
    if motion_type in _CUTTING_MOTIONS:
        return tool.tool_type in _CUTTING_TOOLS
    return False


def is_valid(tool: Tool) -> bool:
    try:
        validate(tool)
    except ToolValidationError:
        return False
    return True


def validate_for_motion(tool: Tool, motion_type: MotionType) -> None:
    """Validate the tool and check that it suits the motion type."""
    validate(tool)
    if not is_usable_for_motion(tool, motion_type):
        raise ToolValidationError(
            f"Tool '{tool.id}' (type: {tool.tool_type.value}) "
            f"is not suitable for motion type: {motion_type.value}"
        )