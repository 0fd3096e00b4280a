import numpy as np

from .types import NumericKind
from .coercion import coerce, as_float64, wrap_integer
from ...logging_system import debug_enabled, log_debug

# Value substituted for a division whose divisor is zero in the working kind
DEFAULT_PROTECTION_VALUE = 0.0

_INTEGER_BITS = {NumericKind.INT32: 32, NumericKind.INT64: 64}


def truncating_divide(dividend: int, divisor: int) -> int:
  """Integer quotient rounded toward zero (Python's // rounds toward -inf)"""
  quotient = abs(dividend) // abs(divisor)
  return quotient if (dividend < 0) == (divisor < 0) else -quotient


def protected_divide(dividend, divisor, kind: NumericKind, protection_value: float = DEFAULT_PROTECTION_VALUE):
  """Divide in the working kind, substituting protection_value for a zero divisor.

  The zero check is done after both operands are coerced, so an Int32
  dividend over a Float64 0.0 is protected as a Float64 division.
  """
  a = coerce(dividend, kind)
  b = coerce(divisor, kind)

  if b == kind.zero:
    if debug_enabled():
      log_debug(f"PDIV: zero divisor in {kind.name}, substituting {protection_value}")
    return coerce(protection_value, kind)

  if kind.is_integral:
    quotient = truncating_divide(int(a), int(b))
    return kind.dtype.type(wrap_integer(quotient, _INTEGER_BITS[kind]))

  with np.errstate(over='ignore', under='ignore', invalid='ignore'):
    return a / b


def coefficient_power(coefficient, term, exponent) -> np.float64:
  """coefficient * term ** exponent in double precision, unprotected.

  0 ** negative gives inf and a negative term with a fractional exponent
  gives nan, as IEEE pow does.
  """
  c = as_float64(coefficient)
  t = as_float64(term)
  e = as_float64(exponent)
  with np.errstate(all='ignore'):
    return np.float64(c * np.power(t, e))
