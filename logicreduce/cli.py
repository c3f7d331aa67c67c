"""Command line entry point: reduce one expression or run the built-in cases."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from logicreduce.display import run_case, treeprint
from logicreduce.expr_parser import create_tree
from logicreduce.node import tree_to_string
from logicreduce.solve import reduce_tree

_CASES = (
    ("p & q", "( p & q )"),
    ("( p & ( q | r ) ) | p", "p"),
    ("( p & q | r ) | p", "p"),
    ("( ( p | q ) & p ) > p", "T"),
    ("( ( p & q ) | p ) ~ ( ( p | q ) & p ) ~ p", "p"),
    ("( p & p ) & ( p | p )", "p"),
    ("! ! ! p", "! p"),
    ("! p", "! p"),
    ("! ! p", "p"),
    ("! ! ! ! p", "p"),
    ("( ( p > q ) & ( q > r ) ) > ( p > r )", "T"),
    ("( p & ( p > q ) ) > q", "T"),
    ("p > ( p > p )", "T"),
    ("( p > ( q & r ) ) > ( ( p > q ) & ( p > r ) )", "T"),
    ("p > ( q ~ p )", "( p > q )"),
    ("p & ! ( p | ! q )", "F"),
    ("( ( p | q ) > r ) > ( ( p > r ) & ( q > r ) )", "T"),
    ("( ( p > r ) & ( q > r ) & ( p | q ) ) > r", "r"),
    (
        "( ( ! p & q ) | p ) ~ ( ( p | q ) & ! p ) ~ p",
        "( ( q | p ) & ( ! ( p & q ) ) )",
    ),
)


def simplify(text: str) -> str:
    """Parse and reduce ``text``; return the reduced expression."""
    root = create_tree(text)
    reduce_tree(root)
    return tree_to_string(root)


def _reduce_verbose(text: str) -> None:
    print("---- START OF MAIN ----")
    root = create_tree(text)

    print("--- START OF TREEPRINT ---")
    treeprint(root)
    print("--- END OF TREEPRINT ---")

    print("\n--- START OF OPTIMIZATIONS ---")
    if reduce_tree(root):
        print("The tree has SUCCESSFULLY been reduced.")
    else:
        print("The tree has FAILED to be reduced.")

    print("-- START OF TREEPRINT --")
    treeprint(root)
    print("-- END OF TREEPRINT --")
    print("--- END OF OPTIMIZATIONS ---")
    print("---- END OF MAIN ----")

    print(f"\n\n≡ {tree_to_string(root)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Reduce the single expression given, or run every built-in case."""
    args = sys.argv[1:] if argv is None else list(argv)

    if len(args) != 1:
        print(
            "You have passed no or too many arguments, "
            "thus the program will run all the tests."
        )
        for expression, expected in _CASES:
            try:
                run_case(expression, expected)
            except Exception as error:  # one broken case must not stop the rest
                print(f"ERROR: `{expression}` could not be reduced: {error}")
        return 0

    try:
        _reduce_verbose(args[0])
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())