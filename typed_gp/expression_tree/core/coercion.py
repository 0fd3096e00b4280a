"""
Numeric coercion between the supported kinds.

Conversions follow the usual fixed-width rules:
  - float -> integer truncates toward zero, maps NaN to 0 and saturates at
    the target range (so +/-inf become the integer max/min)
  - integer -> narrower integer keeps the low bits (two's-complement wrap)
  - integer -> float and float64 -> float32 round to nearest, overflowing
    to +/-inf without a warning
  - Python ints are first wrapped to 64 bits, as they are classified INT64
"""

import math
import numpy as np
from typing import Any, Callable, Dict

from .types import NumericKind, kind_of

_INT32_INFO = np.iinfo(np.int32)
_INT64_INFO = np.iinfo(np.int64)


def wrap_integer(value: int, bits: int) -> int:
  """Reduce an unbounded Python int to a signed two's-complement value"""
  modulus = 1 << bits
  value &= modulus - 1
  if value >= modulus >> 1:
    value -= modulus
  return value


def _saturate(value: float, info: np.iinfo) -> int:
  if math.isnan(value):
    return 0
  if value >= info.max:
    return int(info.max)
  if value <= info.min:
    return int(info.min)
  return int(value)


def _checked_kind(value: Any) -> NumericKind:
  kind = kind_of(value)
  if kind is None:
    raise TypeError(f"Cannot coerce non-numeric value {value!r} ({type(value).__name__})")
  return kind


def as_int32(value: Any) -> np.int32:
  if _checked_kind(value).is_integral:
    return np.int32(wrap_integer(int(value), 32))
  return np.int32(_saturate(float(value), _INT32_INFO))


def as_int64(value: Any) -> np.int64:
  if _checked_kind(value).is_integral:
    return np.int64(wrap_integer(int(value), 64))
  return np.int64(_saturate(float(value), _INT64_INFO))


def _fixed_width(value: Any):
  """Reduce a value to the range of its own kind.

  Python ints are classified INT64 but are unbounded; they are wrapped to
  64 bits here so the float conversions see the same value as_int64 does.
  """
  kind = _checked_kind(value)
  if kind is NumericKind.INT64:
    return np.int64(wrap_integer(int(value), 64))
  if kind is NumericKind.INT32:
    return np.int32(wrap_integer(int(value), 32))
  return value


def as_float32(value: Any) -> np.float32:
  value = _fixed_width(value)
  with np.errstate(over='ignore'):
    return np.float32(value)


def as_float64(value: Any) -> np.float64:
  return np.float64(_fixed_width(value))


COERCION_MAP: Dict[NumericKind, Callable[[Any], Any]] = {
  NumericKind.INT32: as_int32,
  NumericKind.INT64: as_int64,
  NumericKind.FLOAT32: as_float32,
  NumericKind.FLOAT64: as_float64,
}


def coerce(value: Any, kind: NumericKind):
  """Convert value into the numpy scalar type of kind"""
  return COERCION_MAP[kind](value)
