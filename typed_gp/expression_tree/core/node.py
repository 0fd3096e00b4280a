import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Type

from .types import (
  NumericKind, as_numeric_kind, kind_of, data_type_of,
  is_all_numeric, widest_numeric_type
)
from .coercion import coerce
from .operators import DEFAULT_PROTECTION_VALUE, protected_divide, coefficient_power
from ...logging_system import debug_enabled, log_debug, log_warning


class IncompleteNodeError(RuntimeError):
  """Raised when a node with an unset child slot is evaluated"""


class Node(ABC):
  """Base node class.

  Every node owns a fixed-arity list of child slots. An empty slot (None) is a
  placeholder for a tree skeleton that has not been populated yet; such a node
  can be type-checked structurally but not evaluated.

  evaluate() returns None when the subtree cannot be evaluated (non-numeric
  or invalid operands). infer_return_type() returns None for input types the
  node does not accept. Neither raises for type-validity failures.
  """

  __slots__ = ('_children',)

  IDENTIFIER: str = ''
  ARITY: int = 0

  def __init__(self, *children: Optional['Node']):
    if children and len(children) != self.ARITY:
      raise ValueError(
        f"{type(self).__name__} takes {self.ARITY} children, got {len(children)}")
    self._children: List[Optional[Node]] = list(children) if children else [None] * self.ARITY

  @abstractmethod
  def evaluate(self) -> Any:
    pass

  @abstractmethod
  def infer_return_type(self, *input_types: Any) -> Any:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @property
  def identifier(self) -> str:
    return self.IDENTIFIER

  @property
  def arity(self) -> int:
    return self.ARITY

  @property
  def children(self) -> Tuple[Optional['Node'], ...]:
    return tuple(self._children)

  def get_child(self, index: int) -> Optional['Node']:
    return self._children[index]

  def set_child(self, index: int, child: Optional['Node']):
    if not 0 <= index < self.ARITY:
      raise IndexError(f"child index {index} out of range for arity {self.ARITY}")
    self._children[index] = child

  def is_terminal(self) -> bool:
    return self.ARITY == 0

  def is_complete(self) -> bool:
    """True if no slot in this subtree is a placeholder"""
    return all(child is not None and child.is_complete() for child in self._children)

  def size(self) -> int:
    """Node count, placeholders excluded"""
    return 1 + sum(child.size() for child in self._children if child is not None)

  def depth(self) -> int:
    """Maximum depth (a terminal has depth 1)"""
    child_depths = [child.depth() for child in self._children if child is not None]
    return 1 + max(child_depths, default=0)

  def to_string(self) -> str:
    args = ' '.join('?' if child is None else child.to_string() for child in self._children)
    return f"{self.identifier}({args})"

  def __repr__(self) -> str:
    return self.to_string()

  def _checked_children(self) -> List['Node']:
    if any(child is None for child in self._children):
      raise IncompleteNodeError(f"{self.identifier} has unset children: {self.to_string()}")
    return self._children

  def _evaluate_children(self) -> List[Any]:
    return [child.evaluate() for child in self._checked_children()]

  def _copy_children(self) -> List[Optional['Node']]:
    return [None if child is None else child.copy() for child in self._children]


class LiteralNode(Node):
  """Terminal holding a constant value"""

  __slots__ = ('value',)

  def __init__(self, value: Any):
    super().__init__()
    self.value = value

  @property
  def identifier(self) -> str:
    return str(self.value)

  def evaluate(self) -> Any:
    return self.value

  def infer_return_type(self, *input_types: Any) -> Any:
    if input_types:
      return None
    return data_type_of(self.value)

  def copy(self) -> 'LiteralNode':
    return LiteralNode(self.value)

  def to_string(self) -> str:
    return str(self.value)

  def to_sympy(self) -> sp.Expr:
    kind = kind_of(self.value)
    if kind is None:
      raise TypeError(f"Literal {self.value!r} has no symbolic form")
    if kind.is_integral:
      return sp.Integer(int(self.value))
    return sp.Float(float(self.value))


class VariableNode(Node):
  """Terminal whose value is assigned externally before each evaluation.

  Numeric values are coerced to the declared kind on assignment, so the
  value seen by evaluate() always has the type infer_return_type() reports.
  """

  __slots__ = ('name', 'data_type', '_value')

  def __init__(self, name: str, data_type: Any = NumericKind.FLOAT64, value: Any = None):
    super().__init__()
    self.name = name
    kind = as_numeric_kind(data_type)
    self.data_type = kind if kind is not None else data_type
    self._value = None
    self.value = value

  @property
  def identifier(self) -> str:
    return self.name

  @property
  def value(self) -> Any:
    return self._value

  @value.setter
  def value(self, value: Any):
    if value is None:
      self._value = None
    elif isinstance(self.data_type, NumericKind):
      self._value = coerce(value, self.data_type)
    elif isinstance(self.data_type, type) and not isinstance(value, self.data_type):
      raise TypeError(
        f"Variable {self.name} expects {self.data_type.__name__}, got {type(value).__name__}")
    else:
      self._value = value

  def evaluate(self) -> Any:
    if self._value is None:
      if debug_enabled():
        log_debug(f"variable {self.name} evaluated before a value was set")
    return self._value

  def infer_return_type(self, *input_types: Any) -> Any:
    if input_types:
      return None
    return self.data_type

  def copy(self) -> 'VariableNode':
    return VariableNode(self.name, self.data_type, self._value)

  def to_string(self) -> str:
    return self.name

  def to_sympy(self) -> sp.Symbol:
    if isinstance(self.data_type, NumericKind) and self.data_type.is_integral:
      return sp.Symbol(self.name, integer=True)
    return sp.Symbol(self.name, real=True)


class ProtectedDivisionNode(Node):
  """Division over mixed numeric kinds, protected against divide-by-zero.

  Operands are widened to the wider of the two kinds and divided in that kind
  (integer kinds truncate toward zero). If the widened divisor is zero the
  protection value, coerced to the working kind, is returned instead.
  """

  __slots__ = ('_protection_value',)

  IDENTIFIER = 'PDIV'
  ARITY = 2

  def __init__(self, dividend: Optional[Node] = None, divisor: Optional[Node] = None,
               protection_value: float = DEFAULT_PROTECTION_VALUE):
    super().__init__(dividend, divisor)
    self.protection_value = protection_value

  @property
  def protection_value(self) -> float:
    return self._protection_value

  @protection_value.setter
  def protection_value(self, value: float):
    self._protection_value = float(value)

  def evaluate(self):
    dividend, divisor = self._evaluate_children()
    kind = widest_numeric_type([kind_of(dividend), kind_of(divisor)])
    if kind is None:
      if debug_enabled():
        log_debug(f"PDIV: non-numeric operands {dividend!r}, {divisor!r}")
      return None

    return protected_divide(dividend, divisor, kind, self._protection_value)

  def infer_return_type(self, *input_types: Any) -> Optional[NumericKind]:
    if len(input_types) == 2:
      return widest_numeric_type(input_types)
    return None

  def copy(self) -> 'ProtectedDivisionNode':
    dividend, divisor = self._copy_children()
    return ProtectedDivisionNode(dividend, divisor, self._protection_value)

  def to_sympy(self) -> sp.Expr:
    """Real-valued view of the division; integer truncation is not modelled"""
    dividend, divisor = (child.to_sympy() for child in self._checked_children())
    return sp.Piecewise(
      (sp.Float(self._protection_value), sp.Eq(divisor, 0)),
      (dividend / divisor, True)
    )


class CoefficientPowerNode(Node):
  """coefficient * term ^ exponent, e.g. 3x^2 is CVP(3 x 2).

  Always evaluated and returned in double precision, whatever the kinds of
  the three operands.
  """

  __slots__ = ()

  IDENTIFIER = 'CVP'
  ARITY = 3

  def __init__(self, coefficient: Optional[Node] = None, term: Optional[Node] = None,
               exponent: Optional[Node] = None):
    super().__init__(coefficient, term, exponent)

  def evaluate(self) -> Optional[np.float64]:
    values = self._evaluate_children()
    if not is_all_numeric(kind_of(v) for v in values):
      if debug_enabled():
        log_debug(f"CVP: non-numeric operands {values!r}")
      return None
    return coefficient_power(*values)

  def infer_return_type(self, *input_types: Any) -> Optional[NumericKind]:
    if len(input_types) == 3 and is_all_numeric(input_types):
      return NumericKind.FLOAT64
    return None

  def copy(self) -> 'CoefficientPowerNode':
    return CoefficientPowerNode(*self._copy_children())

  def to_sympy(self) -> sp.Expr:
    coefficient, term, exponent = (child.to_sympy() for child in self._checked_children())
    return sp.Mul(coefficient, sp.Pow(term, exponent))


FUNCTION_NODE_MAP: Dict[str, Type[Node]] = {
  ProtectedDivisionNode.IDENTIFIER: ProtectedDivisionNode,
  CoefficientPowerNode.IDENTIFIER: CoefficientPowerNode,
}


def create_node(identifier: str, *children: Optional[Node], **config) -> Node:
  """Instantiate a function node from its identifier"""
  try:
    node_class = FUNCTION_NODE_MAP[identifier]
  except KeyError:
    log_warning(f"create_node: unknown identifier {identifier!r}, known: {sorted(FUNCTION_NODE_MAP)}")
    raise ValueError(f"Unknown node identifier: {identifier}") from None
  if len(children) > node_class.ARITY:
    raise ValueError(f"{identifier} takes {node_class.ARITY} children, got {len(children)}")
  return node_class(*children, **config)
