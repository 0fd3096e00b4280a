from typing import Any

from ..core.node import Node
from .tree_utils import find_placeholders, find_shared_nodes
from ...logging_system import debug_enabled, log_debug


class ExpressionValidator:
  """Static checks run by tree builders before a candidate is ever evaluated"""

  @staticmethod
  def infer_tree_type(node: Node) -> Any:
    """Infer the return type of a tree bottom-up, without evaluating it.

    Terminals report their own type; function nodes receive the inferred types
    of their children. Returns None if any slot is a placeholder or any node
    rejects its input types.
    """
    child_types = []
    for child in node.children:
      if child is None:
        return None
      child_type = ExpressionValidator.infer_tree_type(child)
      if child_type is None:
        return None
      child_types.append(child_type)

    return node.infer_return_type(*child_types)

  @staticmethod
  def is_well_typed(node: Node) -> bool:
    if ExpressionValidator.infer_tree_type(node) is None:
      if debug_enabled():
        log_debug(f"rejected ill-typed tree {node.to_string()}")
      return False
    return True

  @staticmethod
  def is_structurally_valid(node: Node) -> bool:
    """Complete (no placeholders) and strictly owned (no node reachable twice)"""
    shared = find_shared_nodes(node)
    if shared:
      log_debug(f"tree shares {len(shared)} node(s) between parents")
      return False

    if find_placeholders(node):
      if debug_enabled():
        log_debug(f"tree has unset children: {node.to_string()}")
      return False

    return True

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    return (ExpressionValidator.is_structurally_valid(node) and
            ExpressionValidator.is_well_typed(node))
