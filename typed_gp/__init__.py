# Python

"""Typed GP Package

Typed numeric expression nodes for genetic programming: static return-type
inference, widening of mixed numeric operands and protected evaluation.
"""

from .expression_tree import (
  Expression, Node, LiteralNode, VariableNode,
  ProtectedDivisionNode, CoefficientPowerNode,
  IncompleteNodeError, FUNCTION_NODE_MAP, create_node,
  NumericKind, is_all_numeric, widest_numeric_type,
  as_int32, as_int64, as_float32, as_float64, coerce,
  DEFAULT_PROTECTION_VALUE, ExpressionValidator
)
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "LiteralNode", "VariableNode",
  "ProtectedDivisionNode", "CoefficientPowerNode",
  "IncompleteNodeError", "FUNCTION_NODE_MAP", "create_node",
  "NumericKind", "is_all_numeric", "widest_numeric_type",
  "as_int32", "as_int64", "as_float32", "as_float64", "coerce",
  "DEFAULT_PROTECTION_VALUE", "ExpressionValidator",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
