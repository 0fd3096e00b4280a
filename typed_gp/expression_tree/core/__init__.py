"""Core expression tree components."""

from .types import (
    NumericKind, DTYPE_KIND_MAP, as_numeric_kind, kind_of, data_type_of,
    is_all_numeric, widest_numeric_type
)
from .coercion import COERCION_MAP, as_int32, as_int64, as_float32, as_float64, coerce
from .operators import DEFAULT_PROTECTION_VALUE, protected_divide, coefficient_power
from .node import (
    Node, LiteralNode, VariableNode, ProtectedDivisionNode, CoefficientPowerNode,
    IncompleteNodeError, FUNCTION_NODE_MAP, create_node
)

__all__ = [
    'NumericKind', 'DTYPE_KIND_MAP', 'as_numeric_kind', 'kind_of', 'data_type_of',
    'is_all_numeric', 'widest_numeric_type',
    'COERCION_MAP', 'as_int32', 'as_int64', 'as_float32', 'as_float64', 'coerce',
    'DEFAULT_PROTECTION_VALUE', 'protected_divide', 'coefficient_power',
    'Node', 'LiteralNode', 'VariableNode', 'ProtectedDivisionNode', 'CoefficientPowerNode',
    'IncompleteNodeError', 'FUNCTION_NODE_MAP', 'create_node'
]
