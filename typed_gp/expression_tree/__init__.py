"""Expression Tree Module

Typed expression tree nodes and the static validation pass.
"""

from .expression import Expression
from .core import (
    NumericKind, as_numeric_kind, kind_of, data_type_of,
    is_all_numeric, widest_numeric_type,
    as_int32, as_int64, as_float32, as_float64, coerce,
    DEFAULT_PROTECTION_VALUE,
    Node, LiteralNode, VariableNode, ProtectedDivisionNode, CoefficientPowerNode,
    IncompleteNodeError, FUNCTION_NODE_MAP, create_node
)
from .utils import ExpressionValidator

__all__ = [
    "Expression",
    "NumericKind", "as_numeric_kind", "kind_of", "data_type_of",
    "is_all_numeric", "widest_numeric_type",
    "as_int32", "as_int64", "as_float32", "as_float64", "coerce",
    "DEFAULT_PROTECTION_VALUE",
    "Node", "LiteralNode", "VariableNode", "ProtectedDivisionNode", "CoefficientPowerNode",
    "IncompleteNodeError", "FUNCTION_NODE_MAP", "create_node",
    "ExpressionValidator"
]
