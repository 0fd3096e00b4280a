import numpy as np
import pytest

from typed_gp import (
    LiteralNode, VariableNode, ProtectedDivisionNode, CoefficientPowerNode,
    ExpressionValidator, NumericKind
)
from typed_gp.expression_tree.utils.tree_utils import (
    get_all_nodes, get_terminals, get_functions, find_nodes_by_identifier,
    find_placeholders, find_shared_nodes
)


def build_tree():
    x = VariableNode('x', NumericKind.INT32, value=4)
    cvp = CoefficientPowerNode(LiteralNode(np.int32(2)), x, LiteralNode(np.int32(2)))
    return ProtectedDivisionNode(cvp, LiteralNode(np.int32(8)))


def test_infer_tree_type_widens_bottom_up():
    tree = build_tree()

    assert ExpressionValidator.infer_tree_type(tree) is NumericKind.FLOAT64
    assert tree.evaluate() == 4.0


def test_integer_tree_stays_integral():
    tree = ProtectedDivisionNode(LiteralNode(np.int32(9)), VariableNode('n', NumericKind.INT64, value=2))

    assert ExpressionValidator.infer_tree_type(tree) is NumericKind.INT64
    assert type(tree.evaluate()) is np.int64


def test_ill_typed_tree_is_rejected_and_evaluates_to_none():
    flag = VariableNode('flag', bool, value=True)
    tree = CoefficientPowerNode(LiteralNode(1.0), ProtectedDivisionNode(flag, LiteralNode(2.0)), LiteralNode(2.0))

    assert ExpressionValidator.infer_tree_type(tree) is None
    assert not ExpressionValidator.is_well_typed(tree)
    assert tree.evaluate() is None


def test_placeholders_make_tree_untyped_and_incomplete():
    tree = ProtectedDivisionNode(LiteralNode(1.0))

    assert ExpressionValidator.infer_tree_type(tree) is None
    assert not ExpressionValidator.is_structurally_valid(tree)
    assert not ExpressionValidator.is_valid_expression(tree)


def test_valid_expression():
    assert ExpressionValidator.is_valid_expression(build_tree())


def test_shared_subtree_is_structurally_invalid():
    shared = LiteralNode(2.0)
    tree = ProtectedDivisionNode(shared, shared)

    assert find_shared_nodes(tree) == [shared]
    assert not ExpressionValidator.is_structurally_valid(tree)


def test_cycle_is_detected_without_recursing_forever():
    tree = ProtectedDivisionNode(LiteralNode(1.0), LiteralNode(2.0))
    tree.set_child(0, tree)

    assert not ExpressionValidator.is_structurally_valid(tree)


def test_traversal_orders():
    tree = build_tree()

    breadth_first = [n.identifier for n in get_all_nodes(tree)]
    depth_first = [n.identifier for n in get_all_nodes(tree, 'depth_first')]

    assert breadth_first == ['PDIV', 'CVP', '8', '2', 'x', '2']
    assert depth_first == ['PDIV', 'CVP', '2', 'x', '2', '8']
    with pytest.raises(ValueError):
        get_all_nodes(tree, 'random')


def test_lookup_helpers():
    tree = build_tree()

    assert [n.identifier for n in get_functions(tree)] == ['PDIV', 'CVP']
    assert len(get_terminals(tree)) == 4
    assert find_nodes_by_identifier(tree, 'x')[0].name == 'x'
    assert find_nodes_by_identifier(tree, 'CVP')[0] is tree.get_child(0)


def test_find_placeholders():
    cvp = CoefficientPowerNode(LiteralNode(1.0), None, None)
    tree = ProtectedDivisionNode(cvp)

    assert find_placeholders(tree) == [(tree, 1), (cvp, 1), (cvp, 2)]
