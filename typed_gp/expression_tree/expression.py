import sympy as sp
from typing import Any, Optional

from .core.node import Node
from .utils.validator import ExpressionValidator


class Expression:
  """A program tree held by its root node"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self) -> Any:
    return self.root.evaluate()

  def return_type(self) -> Any:
    """Statically inferred type of the whole tree, or None if ill-typed"""
    return ExpressionValidator.infer_tree_type(self.root)

  def is_well_typed(self) -> bool:
    return ExpressionValidator.is_well_typed(self.root)

  def is_valid(self) -> bool:
    return ExpressionValidator.is_valid_expression(self.root)

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def copy(self) -> 'Expression':
    return Expression(self.root.copy())

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return self.root.depth()

  def clear_cache(self):
    """Clear cached values; call after modifying the tree in place"""
    self._string_cache = None

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def __str__(self) -> str:
    return self.to_string()
