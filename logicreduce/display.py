"""Printing of expression trees and of single reduction cases."""

from __future__ import annotations

from collections.abc import Iterator
from functools import partial
from typing import TextIO

from logicreduce.expr_parser import create_tree
from logicreduce.node import Node, NodeType, tree_to_string
from logicreduce.solve import reduce_tree

_NAMES = {
    NodeType.VAR: "VAR",
    NodeType.NOT: "NOT",
    NodeType.AND: "AND",
    NodeType.OR: "OR",
    NodeType.THEN: "THEN",
    NodeType.BTHEN: "BTHEN",
    NodeType.OPEN: "TRUE",
    NodeType.CLOSE: "FALSE",
}

_RED = "\33[41m"
_GREEN = "\33[42m"
_BOLD = "\33[1m"
_RESET = "\33[0m"


def _lines(node: Node | None, level: int) -> Iterator[str]:
    if node is None:
        return
    prefix = " " * (level - 1) + "|>" if level else ""
    label = node.value or _NAMES[node.type]
    yield f"{prefix}{int(node.type)}({label})"
    yield from _lines(node.left, level + 1)
    yield from _lines(node.right, level + 1)


def format_tree(root: Node | None) -> str:
    """Return an indented listing of the tree, one node per line."""
    return "".join(f"{line}\n" for line in _lines(root, 0))


def treeprint(root: Node | None, file: TextIO | None = None) -> None:
    """Write the listing of the tree to ``file`` (standard output by default)."""
    print(format_tree(root), end="", file=file)


def run_case(
    input_string: str, expected_output: str, file: TextIO | None = None
) -> bool:
    """Reduce ``input_string``, report each step and compare with the expectation."""
    out = partial(print, file=file)
    out(f"\n---- START OF TEST ----\n\ninput: '{input_string}'\n")

    root = create_tree(input_string)

    out(f"-- START OF {_BOLD}INITIAL{_RESET} TREEPRINT --")
    treeprint(root, file)
    out(f"-- END OF {_BOLD}INITIAL{_RESET} TREEPRINT --")

    out("\n--- START OF OPTIMIZATIONS ---")
    if reduce_tree(root):
        out("The tree has SUCCESSFULLY been reduced.")
    else:
        out("The tree has FAILED to be reduced.")

    out(f"-- START OF {_BOLD}OPTIMIZED{_RESET} TREEPRINT --")
    treeprint(root, file)
    out(f"-- END OF {_BOLD}OPTIMIZED{_RESET} TREEPRINT --")
    out("--- END OF OPTIMIZATIONS ---")

    out("--- START OF EVALUATING EXPECTED OUTPUT ---\n")
    output = tree_to_string(root)
    out(f"output string: {output}")
    out(f"expected output: {expected_output}")

    matched = output == expected_output
    if matched:
        out(
            f"{_GREEN}SUCCESS: `{input_string}` has been optimised to "
            f"`{expected_output}`.{_RESET}"
        )
    else:
        out(f"{_RED}ERROR: Expected `{expected_output}`, but got `{output}`.{_RESET}")

    out("-- END OF TEST --")
    return matched