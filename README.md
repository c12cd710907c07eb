# flightlib

Data types and geometry helpers for simulating a quadrotor and describing its scene to a Unity renderer.

- `flightlib.types`: the `Quaternion` type, stored as (w, x, y, z). It converts to and from rotation matrices and supports `conjugate`, `norm`, `normalized`, `vec`, `coeffs` and the Hamilton product (`*`). The module also holds the gravity constants `GZ` and `GVEC`.
- `flightlib.math`: `skew`, the quaternion product matrices `q_left` and `q_right`, and the Jacobians `q_from_qe_jacobian`, `q_conjugate_jacobian`, `qe_rot_jacobian` and `qe_inv_rot_jacobian`. It also has:
  - a small `SparseMatrix`, with `matrix_to_triplets` and `insert`;
  - `quaternion_to_euler`;
  - conversions from the right-handed ROS frame to the left-handed Unity frame: `position_ros_to_unity`, `quaternion_ros_to_unity`, `scalar_ros_to_unity` and `transformation_ros_to_unity`.
- `flightlib.command.Command`: a control command. It holds either a collective thrust with body rates (`Command.rates_thrust`) or four single-rotor thrusts (`Command.single_rotor`). Unset values are NaN.
- `flightlib.quad_state.QuadState` and `flightlib.pend_state.PendState`: 25-element state vectors with a time stamp, indexed by `QuadIndex` and `PendIndex`. `QuadState` also exposes named slices (`p`, `qx`, `v`, `w`, `a`, `tau`, `bw`, `ba`). These slices are views into `x`.
- `flightlib.static_object`: the `StaticObject` and `StaticGate` scene objects, each with a position, a quaternion and a size.
- `flightlib.unity_messages`: the JSON messages exchanged with a Unity renderer: `SettingsMessage`, `PubMessage`, `SubMessage`, `SubVehicle`, `PointCloudMessage`, `Vehicle`, `Camera`, `Lidar` and `UnityObject`. It also has the `UnityScene` enumeration.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from flightlib.command import Command
from flightlib.math import position_ros_to_unity, quaternion_ros_to_unity
from flightlib.quad_state import QuadState

state = QuadState()          # every entry NaN until set
state.set_zero()             # zero state, identity attitude, t = 0
state.p[:] = [1.0, 2.0, 3.0]
print(state.valid())                      # True
print(position_ros_to_unity(state.p))     # [1.0, 3.0, 2.0]
print(quaternion_ros_to_unity(state.q))   # [0.0, 0.0, 0.0, 1.0]

cmd = Command.rates_thrust(0.0, 9.81, [0.0, 0.0, 0.0])
print(cmd.valid(), cmd.is_single_rotor_thrusts())  # True False
```

## Render messages

```python
import json

from flightlib.unity_messages import SettingsMessage, SubMessage, UnityScene, Vehicle

settings = SettingsMessage(scene_id=UnityScene.WAREHOUSE)
settings.vehicles.append(Vehicle(id="quadrotor0"))
payload = json.dumps(settings.to_json())

feedback = SubMessage.from_json(
    '{"frame_id": 3, "pub_vehicles": [{"collision": false, "lidar_ranges": []}]}'
)
print(feedback.frame_id, feedback.sub_vehicles[0].collision)  # 3 False
```

Positions, rotations and scales in these messages are in Unity coordinates. Rotations are lists of the form (x, y, z, w). `SubMessage.from_json` and `SubVehicle.from_json` accept either a JSON string or an already parsed mapping. They raise `TypeError` when `frame_id` or `collision` has the wrong type.

## What this package does not do

- It has no vehicle dynamics model and no time integration. `QuadState` and `Command` only hold values; nothing here advances a state over time.
- It does not connect to a renderer. `flightlib.unity_messages` builds and parses the message payloads, but sending and receiving them, and decoding rendered images, is up to the caller.
- It offers no logging, timing or configuration-file loading.