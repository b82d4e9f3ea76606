import math

import pytest

from mpa import types
from mpa.types import to_f32


def test_exact_values_survive():
    for value in (0.0, 2.5, -3.5, 1.0, 0.5):
        assert to_f32(value) == value


def test_inexact_value_loses_precision_but_stays_close():
    result = to_f32(0.1)
    assert result != 0.1
    assert abs(result - 0.1) < 1e-8


def test_idempotent():
    once = to_f32(math.pi)
    assert to_f32(once) == once


def test_overflow_becomes_infinity():
    assert to_f32(1e300) == math.inf
    assert to_f32(-1e300) == -math.inf


def test_nan_stays_nan():
    assert math.isnan(to_f32(math.nan))


def test_sign_of_zero_kept():
    assert math.copysign(1.0, to_f32(-0.0)) == -1.0


@pytest.mark.parametrize(
    "f32, f64",
    [
        (types.PI_F32, types.PI_F64),
        (types.E_F32, types.E_F64),
        (types.SQRT2_F32, types.SQRT2_F64),
        (types.INV_SQRT2_F32, types.INV_SQRT2_F64),
        (types.SQRT3_F32, types.SQRT3_F64),
        (types.SQRT_PI_F32, types.SQRT_PI_F64),
        (types.SQRT5_F32, types.SQRT5_F64),
        (types.LN2_F32, types.LN2_F64),
        (types.LN10_F32, types.LN10_F64),
        (types.GOLDEN_RATIO_F32, types.GOLDEN_RATIO_F64),
        (types.TAU_F32, types.TAU_F64),
    ],
)
def test_single_precision_constants_match_double(f32, f64):
    assert to_f32(f64) == f32
    assert abs(f32 - f64) < 1e-6


def test_double_constants_agree_with_math_module():
    assert to_f32(types.PI_F64) == to_f32(math.pi)
    assert types.PI_F64 == math.pi
    assert types.TAU_F64 == math.tau
    assert types.E_F64 == math.e