import io

import pytest

from logicreduce.display import format_tree, run_case, treeprint
from logicreduce.expr_parser import create_tree
from logicreduce.node import Node, NodeType


def _count_nodes(node):
    if node is None:
        return 0
    return 1 + _count_nodes(node.left) + _count_nodes(node.right)


def test_format_tree_binary():
    root = create_tree("p & q")
    assert format_tree(root) == "6(TRUE)\n|>2(AND)\n |>0(p)\n |>0(q)\n"


def test_format_tree_negation():
    root = create_tree("! p")
    assert format_tree(root) == "6(TRUE)\n|>1(NOT)\n |>0(p)\n"


def test_format_tree_of_nothing_is_empty():
    assert format_tree(None) == ""


def test_format_tree_names_false_constant():
    assert format_tree(Node(NodeType.CLOSE)) == "7(FALSE)\n"


@pytest.mark.parametrize(
    "expression", ["p & q", "( p & ( q | r ) ) | p", "p > ( q ~ p )", "! ! ! p"]
)
def test_format_tree_has_one_line_per_node(expression):
    root = create_tree(expression)
    lines = format_tree(root).splitlines()
    assert len(lines) == _count_nodes(root)
    assert lines[0] == "6(TRUE)"
    assert all(line.lstrip(" ").startswith("|>") for line in lines[1:])


def test_treeprint_writes_listing():
    root = create_tree("( p | q ) & r")
    buffer = io.StringIO()
    treeprint(root, buffer)
    assert buffer.getvalue() == format_tree(root)


def test_treeprint_defaults_to_stdout(capsys):
    root = create_tree("p | q")
    treeprint(root)
    assert capsys.readouterr().out == format_tree(root)


def test_run_case_success():
    buffer = io.StringIO()
    assert run_case("p & q", "( p & q )", buffer) is True
    text = buffer.getvalue()
    assert "SUCCESS: `p & q` has been optimised to `( p & q )`." in text
    assert "output string: ( p & q )" in text
    assert "FAILED to be reduced" in text


def test_run_case_reports_reduction():
    buffer = io.StringIO()
    assert run_case("! ! p", "p", buffer) is True
    assert "SUCCESSFULLY been reduced" in buffer.getvalue()


def test_run_case_mismatch():
    buffer = io.StringIO()
    assert run_case("! ! p", "! p", buffer) is False
    assert "ERROR: Expected `! p`, but got `p`." in buffer.getvalue()


def test_run_case_to_stdout(capsys):
    assert run_case("p & ! p", "F", None) is True
    out = capsys.readouterr().out
    assert "input: 'p & ! p'" in out
    assert out.rstrip().endswith("-- END OF TEST --")