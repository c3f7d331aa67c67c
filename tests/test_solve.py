import pytest

from logicreduce.expr_parser import create_tree
from logicreduce.node import Node, NodeType, tree_to_string
from logicreduce.solve import (
    bool_value_reduce,
    nested_value_reduce,
    reduce_branch,
    reduce_then_bthen,
    reduce_tree,
    same_value_reduce,
)


def _reduce(text):
    root = create_tree(text)
    changed = reduce_tree(root)
    return changed, tree_to_string(root)


def _constant_tree(kind, constant):
    root = Node(NodeType.OPEN)
    operator = Node(kind, parent=root)
    root.left = operator
    operator.left = Node(constant, parent=operator)
    operator.right = Node(NodeType.VAR, "q", parent=operator)
    return root, operator.left, operator.right


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("p & q", "( p & q )"),
        ("( p & ( q | r ) ) | p", "p"),
        ("( p & q | r ) | p", "p"),
        ("( p & p ) & ( p | p )", "p"),
        ("! ! ! p", "! p"),
        ("! p", "! p"),
        ("! ! p", "p"),
        ("! ! ! ! p", "p"),
        ("p > ( p > p )", "T"),
        ("p & ! ( p | ! q )", "F"),
    ],
)
def test_source_cases(expression, expected):
    assert _reduce(expression)[1] == expected


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("p | ! p", "T"),
        ("p & ! p", "F"),
        ("p & ( p | q )", "p"),
        ("p ~ p", "T"),
    ],
)
def test_laws(expression, expected):
    changed, result = _reduce(expression)
    assert changed is True
    assert result == expected


def test_irreducible_reports_no_change():
    changed, result = _reduce("p & q")
    assert changed is False
    assert result == "( p & q )"


def test_lone_negation_reports_no_change():
    assert _reduce("! p") == (False, "! p")


def test_reduce_tree_rejects_single_variable():
    with pytest.raises(ValueError):
        reduce_tree(create_tree("p"))


def test_same_value_reduce_idempotent():
    root = create_tree("p & p")
    operator = root.left
    assert same_value_reduce(operator.left, operator.right) is True
    assert tree_to_string(root) == "p"


def test_same_value_reduce_different_values():
    root = create_tree("p & q")
    operator = root.left
    assert same_value_reduce(operator.left, operator.right) is False
    assert tree_to_string(root) == "( p & q )"


def test_bool_value_reduce_true_and():
    root, constant, variable = _constant_tree(NodeType.AND, NodeType.OPEN)
    assert bool_value_reduce(constant, variable) is True
    assert tree_to_string(root) == "q"


def test_bool_value_reduce_true_or():
    root, constant, variable = _constant_tree(NodeType.OR, NodeType.OPEN)
    assert bool_value_reduce(constant, variable) is True
    assert tree_to_string(root) == "T"


def test_bool_value_reduce_false_and():
    root, constant, variable = _constant_tree(NodeType.AND, NodeType.CLOSE)
    assert bool_value_reduce(constant, variable) is True
    assert tree_to_string(root) == "F"


def test_bool_value_reduce_without_constants():
    root = create_tree("p | q")
    operator = root.left
    assert bool_value_reduce(operator.left, operator.right) is False
    assert tree_to_string(root) == "( p | q )"


def test_nested_value_reduce_absorption():
    root = create_tree("p & ( p | q )")
    operator = root.left
    assert nested_value_reduce(operator.left, operator.right, NodeType.OR) is True
    assert tree_to_string(root) == "p"


def test_nested_value_reduce_wrong_kind():
    root = create_tree("p & ( p | q )")
    operator = root.left
    assert nested_value_reduce(operator.left, operator.right, NodeType.AND) is False
    assert tree_to_string(root) == "( p & ( p | q ) )"


def test_reduce_then_bthen_unpacks_implication():
    root = create_tree("p > q")
    assert reduce_then_bthen(root.left.left) is False
    assert root.left.type is NodeType.OR
    assert tree_to_string(root) == "( ! p | q )"


def test_reduce_branch_requires_operator_parent():
    root = create_tree("p & q")
    with pytest.raises(ValueError):
        reduce_branch(root)


def test_reduce_branch_collapses_double_negation():
    root = create_tree("! ! p")
    assert reduce_branch(root.left.left) is True
    assert tree_to_string(root) == "p"