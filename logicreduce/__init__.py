"""Parse propositional logic expressions into trees and simplify them."""

__version__ = "0.1.0"

__all__ = ["node", "expr_parser", "solve", "display", "cli"]