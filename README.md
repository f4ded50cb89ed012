# arscrew

A pure-Python toolkit of small building blocks for 2D games and simulations.
It has no dependencies beyond the standard library.

## Modules

- `arscrew.errors`: `MylibError`, raised when a library check fails;
  `build_str(*args)` joins the string forms of its arguments;
  `assert_that(condition, *args)` raises `MylibError` with a message built
  from `args` when `condition` is false.
- `arscrew.any`: `Any(minimum_storage_size, value=..., alignment=16)` holds a
  single value. `size()` is the storage size rounded up to the alignment (see
  `storage_size`); buffer values (anything `memoryview` accepts) larger than
  that raise `MylibError`. `get()` on an empty holder raises `MylibError`;
  `copy()` returns an independent holder.
- `arscrew.bit`: `BitField(bpos, blength)`, `extract_bits`, `set_bits`,
  `storage_bits`, and `BitSet(nbits, value=0)` for up to 64 bits. A `BitSet`
  reads and writes single bits (`bits[3]`), ranges (`bits[0, 2]` or
  `bits[BitField(0, 2)]`), accepts enum members as positions, supports `~`,
  `&=`, `|=`, `^=`, and prints most significant bit first.
- `arscrew.vector`: mutable `Vector` of 2, 3 or 4 float components with `x`,
  `y`, `z`, `w` (and `r`, `g`, `b`, `a`) accessors, element-wise arithmetic
  with vectors and scalars, `length`, `normalize` (returns the previous
  length), `set_length`, `abs`, `set_zero`, `Vector.zero(dim)`,
  `Vector.widen(v, dim)`; plus `dot_product`, `cross_product`, `absolute`,
  `maximum`, `normalized`, `with_length`, `distance` and `orthogonal_vector`.
  Division by zero gives `inf` or `nan` rather than raising.
- `arscrew.quaternion`: `Quaternion(x, y, z, w)` with `from_vector`, `zero`,
  `identity`, `rotation(axis, angle)`, `rotation_between(start, end)`,
  Hamilton product, `length`, `to_axis_angle`; free functions `normalize`,
  `conjugate`, `invert_normalized`, `invert`, `rotate(q, v)`; and
  `VectorBasis3`, a basis of three vectors that can be rotated in place.
- `arscrew.event`: `Callback` objects built with `make_callback_function`,
  `make_callback_lambda`, `make_callback_object(obj, method)` and
  `make_callback_object_with_params(obj, method, first_param, *args)`.
  `Handler.subscribe` stores a copy of the callback and returns a
  `Descriptor`; `publish(event)` calls every subscriber in order;
  `unsubscribe(descriptor)` removes it and raises `MylibError` if it is not
  registered.
- `arscrew.coroutine`: `Coroutine(generator)` drives a generator that yields
  awaiter objects (`await_ready`, `await_suspend`, `await_resume`).
  `initialize_coroutine` starts it; `resume` continues it; `done` reports
  completion.
- `arscrew.interpolation`: `InterpolationManager` runs `LinearInterpolator`s
  that write values to a target callable. `interpolate_linear` returns an
  `InterpolationDescriptor` and can fire a callback with an
  `InterpolationEvent` when finished; `coroutine_wait_interpolate_linear`
  returns a `CoroutineAwaiter` for a coroutine to yield.
  `process_interpolation(delta_x)` advances everything; `remove_interpolator`,
  `force_resume_coroutine` and `unregister_coroutine` cancel work early.
- `arscrew.animation`: `AnimationFrame(sprite, duration, offset)` and
  `Animation`, which advances frames with `update(delta_time)`, loops or
  finishes, and reports `current_sprite()` and `current_offset()`.
- `arscrew.camera`: `Camera(width, height)` with `move`, `set_position` and
  `rect()`; its position is clamped so neither coordinate goes below zero.

## Installation

```
pip install .
```

## Examples

```python
from arscrew.bit import BitSet

bits = BitSet(16, 0x04)
bits[0] = 1
print(bits)          # 0000000000000101
```

```python
from arscrew.event import Handler, make_callback_lambda

handler = Handler()
seen = []
handler.subscribe(make_callback_lambda(seen.append))
handler.publish(50)
assert seen == [50]
```

```python
from arscrew.vector import Vector, dot_product

a = Vector(2.0, 3.0)
b = Vector(1.0, 1.0)
print(a + b, dot_product(a, b))   # [3, 4] 5.0
```

```python
from arscrew.coroutine import Coroutine, initialize_coroutine
from arscrew.interpolation import InterpolationManager

manager = InterpolationManager()
ys = []
finished = []

def wait_for_fade():
    yield manager.coroutine_wait_interpolate_linear(2.0, ys.append, 0.0, 1.0)
    finished.append(True)

coro = initialize_coroutine(Coroutine(wait_for_fade()))
manager.process_interpolation(1.0)
manager.process_interpolation(1.0)
assert ys == [0.0, 0.5, 1.0] and coro.done() and finished == [True]
```

## What it does not do

The package holds no drawing, window, input or audio code. `Animation`
frames carry whatever sprite objects you give them and `Camera.rect()`
returns a plain tuple; rendering them is left to the program using the
package. There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```