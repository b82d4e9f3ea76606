"""Numeric helpers and mathematical constants in single and double precision."""

from __future__ import annotations

import math
import struct

_F32 = struct.Struct("<f")


def to_f32(x: float) -> float:
    """Round ``x`` to the nearest IEEE-754 single-precision value."""
    value = float(x)
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


PI_F64 = 3.14159265358979323846
PI_F32 = to_f32(PI_F64)

TAU_F64 = 2.0 * PI_F64
TAU_F32 = to_f32(2.0 * PI_F32)

E_F64 = 2.71828182845904523536
E_F32 = to_f32(E_F64)

SQRT2_F64 = 1.41421356237309504880
SQRT2_F32 = to_f32(SQRT2_F64)

INV_SQRT2_F64 = 0.70710678118654752440
INV_SQRT2_F32 = to_f32(INV_SQRT2_F64)

SQRT3_F64 = 1.73205080756887729353
SQRT3_F32 = to_f32(SQRT3_F64)

SQRT_PI_F64 = 1.77245385090551599275
SQRT_PI_F32 = to_f32(SQRT_PI_F64)

SQRT5_F64 = 2.23606797749978969641
SQRT5_F32 = to_f32(SQRT5_F64)

LN2_F64 = 0.69314718055994530942
LN2_F32 = to_f32(LN2_F64)

LN10_F64 = 2.30258509299404568402
LN10_F32 = to_f32(LN10_F64)

GOLDEN_RATIO_F64 = 1.61803398874989484820
GOLDEN_RATIO_F32 = to_f32(GOLDEN_RATIO_F64)