"""Utilities for expression trees."""

from .tree_utils import (
    get_all_nodes, get_terminals, get_functions, find_nodes_by_identifier,
    find_placeholders, find_shared_nodes
)
from .validator import ExpressionValidator

__all__ = [
    'get_all_nodes', 'get_terminals', 'get_functions', 'find_nodes_by_identifier',
    'find_placeholders', 'find_shared_nodes',
    'ExpressionValidator'
]
