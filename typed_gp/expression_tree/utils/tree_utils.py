"""
Tree Utility Functions

Traversal and lookup helpers for typed expression trees. Placeholder slots
(unset children) are skipped by the traversals and reported by
find_placeholders.
"""

from typing import List, Tuple

from ..core.node import Node


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(child for child in current_node.children if child is not None)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first traversal (recursive, pre-order)"""
    nodes = [node]
    for child in node.children:
        if child is not None:
            nodes.extend(_depth_first_traversal(child))
    return nodes


def get_terminals(node: Node) -> List[Node]:
    return [n for n in _depth_first_traversal(node) if n.is_terminal()]


def get_functions(node: Node) -> List[Node]:
    return [n for n in _depth_first_traversal(node) if not n.is_terminal()]


def find_nodes_by_identifier(node: Node, identifier: str) -> List[Node]:
    """Find all nodes whose identifier matches (e.g. 'PDIV' or a variable name)"""
    return [n for n in _depth_first_traversal(node) if n.identifier == identifier]


def find_placeholders(node: Node) -> List[Tuple[Node, int]]:
    """
    Locate unset child slots.

    Returns:
        (parent, child_index) pairs, in depth-first order
    """
    slots = []
    for current_node in _depth_first_traversal(node):
        for index, child in enumerate(current_node.children):
            if child is None:
                slots.append((current_node, index))
    return slots


def find_shared_nodes(node: Node) -> List[Node]:
    """
    Find node objects reachable along more than one path.

    A well-formed tree owns every node exactly once, so a non-empty result
    means the same subtree was attached to two parents (or to itself).
    """
    seen = set()
    shared = []
    nodes_to_visit = [node]

    while nodes_to_visit:
        current_node = nodes_to_visit.pop()
        if id(current_node) in seen:
            if current_node not in shared:
                shared.append(current_node)
            continue
        seen.add(id(current_node))
        nodes_to_visit.extend(child for child in current_node.children if child is not None)

    return shared
