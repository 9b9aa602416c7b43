# gamecore

The mathematical and networking core of a small game engine, in plain Python
with no third-party dependencies.

## What is inside

- `gamecore.mathlib`: angle conversion (`rad`, `deg`), sector lookup
  (`triant`, `quadrant`, `hexant`, each returning 0 at the origin),
  `is_prime`, `mod` (non-negative for negative inputs), `sign`, `frac` and
  `limit` (clamping).
- `gamecore.vector`: immutable `Vector2` and `Vector3` with `+`, `-`, `*` and
  `/` by scalars, `dot`, `cross`, `magnitude`, `squared_magnitude`,
  `inverse_magnitude`, `normalised`, `parse` from whitespace-separated text,
  and named directions such as `Vector3.forward()` (0, 0, -1) and
  `Vector3.up()`.
- `gamecore.matrix3` / `gamecore.matrix4`: mutable `Matrix3x3` and
  `Matrix4x4` (identity when built with no arguments) with `determinant`,
  `inversed` / `inverse`, `transposed` / `transpose`, element properties
  `m11` … `m44`, `[row, col]` indexing and `parse`. Use `@` for matrix
  products (and `Matrix3x3 @ Vector3`), `*` and `/` for scalars. Inverting a
  singular matrix yields the identity.
- `gamecore.quaternion`: immutable `Quaternion` rotations built with
  `from_axis_angle`, `from_euler_angles`, `from_orientation`, `from_to`,
  `about_x`, `about_y` and `about_z`; `rotate` a `Vector3`, and read back
  `orientation`, `axis_angle` (an `AxisAngle`) and `euler_angles` (an
  `EulerAngles`).
- `gamecore.transform2`: `Transform2`, a rotation and translation in the
  plane, with `local_to_world` and `world_to_local`.
- `gamecore.transform3`: `Transform3`, a rotation and translation in space,
  with `local_to_global`, `global_to_local`, `rotate_vector`, `rotate_tensor`,
  and the projection setups `set_perspective`, `set_frustum`,
  `set_orthographic`, `set_orthographic_box` and `set_look_at`.
- `gamecore.generic`: immutable `Vector` and `Matrix` of any size, with
  `dot`, `mag`, `det`, `transpose`, `identity`, `ones`, `zeros` and
  `format_detailed`.
- `gamecore.filters`: convolution `Filter` kernels with odd dimensions
  (`sobel`, `lowpass`, `gaussian1` … `gaussian4`, `gaussian(neighbours)`,
  `sharpening`, `vertical_sharpening`, `horizontal_sharpening`,
  `edge_detection_upper_left`, `edge_detection_lower_right`), `normalize`,
  and `apply` to a row-major grid, optionally one interleaved channel at a
  time via `offset` and `stride`.
- `gamecore.address`: `Address`, an IPv4 address and port (default
  127.0.0.1:31415), from a dotted string or four octets.
- `gamecore.udp`: `UdpSocket`, a non-blocking UDP socket bound to all
  interfaces; `receive` returns `(Address, bytes)` or `None` when nothing is
  waiting. It is a context manager that closes on exit.
- `gamecore.host`: `host_name()` and `host_address()` for the local machine.
- `gamecore.forces`: a point-mass `Body` that accumulates forces, the
  abstract `ForceGenerator`, `GlobalForceGenerator` and `Spring`, and the
  concrete `ParticleSpring` and `Gravity` (default (0, -9.81, 0)).

## Example

```python
from math import pi

from gamecore.vector import Vector3
from gamecore.quaternion import Quaternion
from gamecore.transform3 import Transform3

turn = Quaternion.about_y(pi / 2)
print(turn.rotate(Vector3.forward()))

transform = Transform3(Vector3(1, 2, 3), turn)
point = transform.local_to_global(Vector3(0, 0, -1))
print(transform.global_to_local(point))
```

Filtering a grid of values (`apply` returns a new list):

```python
from gamecore.filters import Filter

data = [0.0, 0.0, 0.0,
        0.0, 9.0, 0.0,
        0.0, 0.0, 0.0]
blurred = Filter.lowpass().apply(data, 3, 3)
```

Springs and gravity:

```python
from gamecore.forces import Body, Gravity, ParticleSpring
from gamecore.vector import Vector3

a = Body(position=Vector3(0, 0, 0))
b = Body(position=Vector3(2, 0, 0))
ParticleSpring(1.0, 10.0, 0.5, a, b).apply_force()
Gravity().apply_force(b)
print(a.force, b.force)
```

Sending and receiving a datagram:

```python
from gamecore.address import Address
from gamecore.udp import UdpSocket

with UdpSocket() as sock:
    sock.open(31415)
    sock.send(Address.from_octets(127, 0, 0, 1, 31415), b"hello")
    message = sock.receive()
```

## What it does not do

There is no game loop, window, rendering or input handling, and no
command-line program. The force generators only add forces to a `Body`;
nothing here integrates motion, handles rigid-body rotation or resolves
collisions. `UdpSocket` moves raw datagrams only: there is no game server or
message format on top of it.

## Running the tests

```
pip install -e .[test]
pytest
```