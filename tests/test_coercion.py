import numpy as np
import pytest

from typed_gp.expression_tree.core.types import NumericKind
from typed_gp.expression_tree.core.coercion import (
    as_int32, as_int64, as_float32, as_float64, coerce, wrap_integer
)

INT32_MIN, INT32_MAX = -2**31, 2**31 - 1
INT64_MIN, INT64_MAX = -2**63, 2**63 - 1


@pytest.mark.parametrize("value,expected", [
    (np.float64(2.7), 2),
    (np.float64(-2.7), -2),
    (np.float32(9.99), 9),
    (np.float64('nan'), 0),
    (np.float64('inf'), INT32_MAX),
    (np.float64('-inf'), INT32_MIN),
    (np.float64(1e20), INT32_MAX),
    (np.int64(2**31), INT32_MIN),
    (np.int64(2**32 + 5), 5),
    (np.int32(-17), -17),
    (42, 42),
])
def test_as_int32(value, expected):
    result = as_int32(value)
    assert type(result) is np.int32
    assert result == expected


@pytest.mark.parametrize("value,expected", [
    (np.float64(-1e3 - 0.5), -1000),
    (np.float64(1e30), INT64_MAX),
    (np.float64('-inf'), INT64_MIN),
    (np.float32('nan'), 0),
    (np.int32(-5), -5),
    (2**64 + 3, 3),
])
def test_as_int64(value, expected):
    result = as_int64(value)
    assert type(result) is np.int64
    assert result == expected


def test_as_float32():
    assert type(as_float32(np.int32(3))) is np.float32
    assert as_float32(np.float64(0.5)) == np.float32(0.5)
    assert as_float32(np.float64(1e300)) == np.float32('inf')
    assert as_float32(np.float64(-1e300)) == np.float32('-inf')


def test_as_float64_is_exact_for_int32():
    result = as_float64(np.int32(INT32_MAX))
    assert type(result) is np.float64
    assert result == float(INT32_MAX)
    assert as_float64(np.float32(0.25)) == 0.25


@pytest.mark.parametrize("kind", list(NumericKind))
def test_coerce_dispatches_on_kind(kind):
    result = coerce(np.float64(3.75), kind)
    assert type(result) is kind.dtype.type
    assert result == (3 if kind.is_integral else 3.75)


@pytest.mark.parametrize("value", [True, "1", None, 1j])
def test_coerce_rejects_non_numeric(value):
    with pytest.raises(TypeError):
        as_float64(value)


def test_wrap_integer():
    assert wrap_integer(2**31, 32) == INT32_MIN
    assert wrap_integer(-1, 32) == -1
    assert wrap_integer(2**63, 64) == INT64_MIN


@pytest.mark.parametrize("value,expected", [
    (2**70, 0.0),
    (2**64 + 5, 5.0),
    (2**2000, 0.0),
    (-2**63 - 1, float(2**63 - 1)),
])
def test_python_int_wraps_to_int64_before_float_conversion(value, expected):
    assert as_float64(value) == expected
    assert as_float32(value) == np.float32(expected)
    assert as_float64(value) == as_float64(as_int64(value))
