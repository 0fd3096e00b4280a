import numpy as np
from enum import IntEnum
from typing import Any, Iterable, Optional


class NumericKind(IntEnum):
  """Supported numeric kinds. Member values define the widening order."""
  INT32 = 0
  INT64 = 1
  FLOAT32 = 2
  FLOAT64 = 3

  @property
  def dtype(self) -> np.dtype:
    return _KIND_DTYPES[self]

  @property
  def zero(self):
    return self.dtype.type(0)

  @property
  def is_integral(self) -> bool:
    return self in (NumericKind.INT32, NumericKind.INT64)


_KIND_DTYPES = {
  NumericKind.INT32: np.dtype(np.int32),
  NumericKind.INT64: np.dtype(np.int64),
  NumericKind.FLOAT32: np.dtype(np.float32),
  NumericKind.FLOAT64: np.dtype(np.float64),
}

# (dtype kind character, itemsize) -> kind; aliases such as np.intc or
# np.longlong resolve through their dtype
DTYPE_KIND_MAP = {
  ('i', 4): NumericKind.INT32,
  ('i', 8): NumericKind.INT64,
  ('f', 4): NumericKind.FLOAT32,
  ('f', 8): NumericKind.FLOAT64,
}


def _dtype_kind(dtype: np.dtype) -> Optional[NumericKind]:
  return DTYPE_KIND_MAP.get((dtype.kind, dtype.itemsize))


def as_numeric_kind(data_type: Any) -> Optional[NumericKind]:
  """Normalize a data type to a NumericKind, or None if it is not numeric.

  Accepts NumericKind members, numpy dtypes and numpy scalar classes of the
  four supported widths, and Python int/float (classified as the 64-bit
  kinds, subclasses included). Anything else (bool, str, None, int8, ...)
  is non-numeric.
  """
  if isinstance(data_type, NumericKind):
    return data_type
  if isinstance(data_type, np.dtype):
    return _dtype_kind(data_type)
  if not isinstance(data_type, type):
    return None
  if issubclass(data_type, (bool, np.bool_)):
    return None
  if issubclass(data_type, np.generic):
    try:
      return _dtype_kind(np.dtype(data_type))
    except TypeError:
      return None
  if issubclass(data_type, int):
    return NumericKind.INT64
  if issubclass(data_type, float):
    return NumericKind.FLOAT64
  return None


def kind_of(value: Any) -> Optional[NumericKind]:
  """Runtime kind of an evaluated value"""
  return as_numeric_kind(type(value))


def data_type_of(value: Any) -> Any:
  kind = kind_of(value)
  return kind if kind is not None else type(value)


def is_all_numeric(types: Iterable[Any]) -> bool:
  """True iff every element is a numeric data type (vacuously true when empty)"""
  return all(as_numeric_kind(t) is not None for t in types)


def widest_numeric_type(types: Iterable[Any]) -> Optional[NumericKind]:
  """Widest kind among the inputs under INT32 < INT64 < FLOAT32 < FLOAT64.

  Returns None if any input is non-numeric or there are no inputs.
  """
  kinds = [as_numeric_kind(t) for t in types]
  if not kinds or any(k is None for k in kinds):
    return None
  return max(kinds)
