# cncsim

Building blocks for a CNC machining simulator, with no user-interface
dependencies. Only `numpy` is required.

- **Tooling** (`cncsim.tooling`, `cncsim.tool_library`, `cncsim.tool_validator`):
  tool geometry, holders and complete tools, a library keyed by tool id, and
  validation functions that raise `ToolValidationError`.
- **Jogging** (`cncsim.jog`): velocity-based manual jog commands for one axis,
  limited by duration or by distance.
- **Simulation stepping** (`cncsim.step_result`, `cncsim.state`,
  `cncsim.engine`, `cncsim.controller`): step results and errors, a copyable
  simulation state, an engine base class that counts steps and accumulates
  time, and a `StepController` that drives single or repeated steps.
- **Viewport cameras** (`cncsim.camera`, `cncsim.perspective_camera`): an
  orthographic camera with view presets, an orbiting perspective camera, and
  the `look_at`, `ortho` and `perspective` helpers. All matrices are 4×4
  numpy arrays.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Tools

Constructors clamp values that are out of range. For example, a negative
corner radius becomes 0, and the overall length is raised to at least the
flute length plus the shoulder length. Tools compare, sort and hash by `id`.

```python
from cncsim.tooling import Tool, ToolGeometry, ToolHolder, ToolingType, HolderType
from cncsim.tool_library import ToolLibrary
from cncsim import tool_validator
from cncsim.tool_validator import MotionType

geometry = ToolGeometry(diameter=6.0, flute_length=20.0, overall_length=60.0)
holder = ToolHolder(HolderType.ER32, gauge_length=40.0)
tool = Tool("T1", "6mm flat end mill", ToolingType.END_MILL, geometry, holder)

tool.total_length_from_spindle      # 100.0
holder.is_compatible_with(HolderType.ER40)   # False; BT and HSK share families

library = ToolLibrary()
library.add_tool(tool)              # True: new id (False if replaced or invalid)
"T1" in library                     # True
library.tools_by_type(ToolingType.END_MILL)

tool_validator.validate(tool)       # raises ToolValidationError on failure
tool_validator.is_usable_for_motion(tool, MotionType.LINEAR)   # True
```

Cutting motions (`LINEAR`, `ARC_CW`, `ARC_CCW`) need an end, ball, flat or
chamfer mill. Rapid, dwell and tool-change motions accept any tool.
`validate_rpm` rejects a default spindle speed above the holder's `max_rpm`.

## Jogging

```python
from cncsim.jog import Axis, JogCommand, JogDirection

by_time = JogCommand(Axis.X, JogDirection.NEGATIVE, speed=10.0, duration=0.5)
by_time.target_velocity()           # -10.0

by_distance = JogCommand.from_distance(Axis.Z, JogDirection.POSITIVE, 5.0, 2.0)
by_distance.use_distance            # True
```

## Simulation stepping

A `SimulationState` holds any object that offers `is_valid()`,
`remaining_volume()` and `clone()` (the `MaterialGrid` protocol). It also
holds a 4×4 tool pose, the six axis positions `[X, Y, Z, A, B, C]`, a step
count, the accumulated time and a seed. `clone()` makes a deep copy.

To write an engine, subclass `SimulationEngineBase` and implement `do_step`
and `clone`. You may also override `do_initialize` and `do_reset`. Errors are
raised as `SimulationError`:

- `initialize` raises it when the state is invalid.
- `step` raises it when the engine is not initialised.

Each step increments the state's step count and adds the engine's fixed time
step to it. The default time step is 0.001 s.

`StepController` catches these errors, records them as the last `StepResult`
and returns booleans or counts. A collision result counts as a failed step.

```python
from cncsim.state import SimulationState
from cncsim.engine import SimulationEngineBase
from cncsim.controller import StepController
from cncsim.step_result import StepResult

class Block:
    def __init__(self, volume):
        self.volume = volume
    def is_valid(self):
        return self.volume >= 0.0
    def remaining_volume(self):
        return self.volume
    def clone(self):
        return Block(self.volume)

class NullEngine(SimulationEngineBase):
    def do_step(self, state, sweep):
        return StepResult.success(self.time_step)
    def clone(self):
        return NullEngine(self.engine_type, self.time_step)

state = SimulationState(Block(1000.0))
controller = StepController(NullEngine("NullEngine"))
controller.initialize(state)            # True
controller.step_n(state, None, 10)      # 10
state.step_count                        # 10
controller.last_step_succeeded()        # True
```

## Cameras

```python
from cncsim.camera import OrthoCamera, ViewPreset
from cncsim.perspective_camera import PerspectiveCamera

ortho_cam = OrthoCamera(ViewPreset.TOP)
ortho_cam.zoom(1.0)                     # zoom level 1.1, clamped to [0.1, 100]
vp = ortho_cam.view_projection_matrix(800, 600)

camera = PerspectiveCamera()            # 45° FOV, distance 300, azimuth 45°, elevation 30°
camera.orbit(0.1, 0.05)                 # elevation kept within ±89°
camera.zoom(1.0)                        # distance × 0.9
camera.position()
```

If a viewport size is not positive, 800×600 is used instead.

## What this package does not do

- It draws nothing. There is no window, no OpenGL output, and no grid or axis
  rendering. The cameras only compute matrices.
- It has no material model. You supply the grid object stored in a
  `SimulationState`.
- It has no cutting or collision engine. You supply the `do_step` logic of a
  `SimulationEngineBase` subclass.
- It has no machine kinematics and no motion controller that applies a
  `JogCommand` to axes.
- It has no G-code reading or writing, and no command-line program.