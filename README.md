# mpa

A small numeric toolkit. It provides a family of rounding functions and
well-known constants in single and double precision. It also has a set of
error classes and a helper that identifies the ARM architecture generation
of the running machine.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Rounding

```python
from mpa import rounding

rounding.nearest(2.5)         # 3.0   halves go away from zero
rounding.towards_even(2.5)    # 2.0   halves go to the even neighbour
rounding.towards_odd(2.5)     # 3.0   halves go to the odd neighbour
rounding.towards_zero(-2.9)   # -2.0
rounding.away_from_zero(2.1)  # 3.0
rounding.ceil(-2.1)           # -2.0
rounding.floor(-2.1)          # -3.0
```

Every function takes a number and returns a float. Results keep the sign of
the input, so `rounding.towards_zero(-0.5)` gives `-0.0`. Infinities and
NaN are returned unchanged.

## Constants and single precision

`mpa.types` holds double-precision constants:

- `PI_F64` and `TAU_F64`
- `E_F64`
- `SQRT2_F64`, `INV_SQRT2_F64`, `SQRT3_F64`, `SQRT5_F64` and `SQRT_PI_F64`
- `LN2_F64` and `LN10_F64`
- `GOLDEN_RATIO_F64`

Each one has a matching `*_F32` value, rounded to single precision.
`to_f32(x)` rounds any float to the nearest single-precision value. Values
too large for single precision become a signed infinity.

```python
from mpa.types import to_f32, PI_F32

to_f32(0.1)  # 0.10000000149011612
```

## Errors

All errors derive from `mpa.exceptions.MpaException`:

- `MpaRuntimeError` (also a `RuntimeError`)
  - `ResourceNotFound`
- `MpaLogicError` (also a `ValueError`)
  - `InvalidRoundMode`

Each class adds a prefix to the message. For example,
`InvalidRoundMode("x")` reads `"MPA Logic Error: Invalid Round Mode: x"`.
The full text is on the `message` attribute and in `str(error)`.

`check_round_mode(mode)` returns `mode` when it is between 0 and 3. For any
other mode it raises `InvalidRoundMode`.

```python
from mpa.exceptions import check_round_mode, MpaLogicError

try:
    check_round_mode(5)
except MpaLogicError as exc:
    print(exc)
```

## Architecture detection

```python
from mpa import architecture

arch = architecture.current_architecture()
print(architecture.describe(arch))  # e.g. "It is a ARMv8 architecture."
```

`Architecture` has the members `ARMV9`, `ARMV8`, `ARMV7` and `UNKNOWN`.

`detect_architecture(machine, arch_version)` classifies a machine name such
as `"aarch64"` or `"armv7l"` together with an ARM architecture version. The
rules are:

- 64-bit machines are `ARMV9` from version 9 and `ARMV8` from version 8.
- 32-bit ARM machines are `ARMV7` from version 7.
- Anything else is `UNKNOWN`.

When `arch_version` is `None`, the version is taken from the machine name.
If the name gives no version, a 64-bit machine counts as version 8.
`current_architecture()` applies these rules to `platform.machine()`.

## What the package does not do

The package has no logging facility. It offers no log levels, no log
callbacks and no console logger. Use Python's `logging` module in your own
code instead. There is no command-line program either.