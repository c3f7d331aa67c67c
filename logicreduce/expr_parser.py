"""Parsing of propositional expressions into trees."""

from __future__ import annotations

from enum import Enum, auto

from logicreduce.node import Node, NodeType

_MAX_NESTING = 10

_BINARY = frozenset({NodeType.AND, NodeType.OR, NodeType.THEN, NodeType.BTHEN})

_TOKENS = {
    "!": NodeType.NOT,
    "&": NodeType.AND,
    "|": NodeType.OR,
    ">": NodeType.THEN,
    "~": NodeType.BTHEN,
    "(": NodeType.OPEN,
    ")": NodeType.CLOSE,
}


class ParseError(ValueError):
    """Raised when an expression cannot be built into a tree."""


class _State(Enum):
    LEFT = auto()
    RIGHT = auto()
    FULL = auto()


class _TreeBuilder:
    def __init__(self, root: Node) -> None:
        self.current = root
        self.state = _State.LEFT
        self.scopes: list[Node] = []

    def add(self, kind: NodeType, char: str) -> None:
        if kind is NodeType.CLOSE:
            self.current = self._close()
            return

        if kind is NodeType.OPEN and len(self.scopes) >= _MAX_NESTING:
            raise ParseError(f"parentheses nested deeper than {_MAX_NESTING}")

        node = Node(kind, char if kind is NodeType.VAR else "")
        if self.state is _State.LEFT:
            self._attach_left(node, char)
        elif self.state is _State.RIGHT:
            self._attach_right(node, char)
        else:
            self._attach_operator(node, char)

        if kind is NodeType.OPEN:
            self.scopes.append(node)
        self.current = node

    def _attach_left(self, node: Node, char: str) -> None:
        parent = self.current
        if parent.type is NodeType.VAR or node.type in _BINARY:
            raise ParseError(f"{char!r} needs an operand before it")
        parent.left = node
        node.parent = parent
        if node.type in (NodeType.OPEN, NodeType.NOT):
            self.state = _State.LEFT
        elif parent.type in (NodeType.OPEN, NodeType.NOT):
            self.state = _State.FULL
        else:
            self.state = _State.RIGHT

    def _attach_right(self, node: Node, char: str) -> None:
        parent = self.current
        if parent.type in (NodeType.VAR, NodeType.NOT, NodeType.OPEN):
            raise ParseError(f"unexpected {char!r}")
        if node.type in _BINARY:
            raise ParseError(f"{char!r} needs an operand before it")
        parent.right = node
        node.parent = parent
        if node.type in (NodeType.OPEN, NodeType.NOT):
            self.state = _State.LEFT
        else:
            self.state = _State.FULL

    def _attach_operator(self, node: Node, char: str) -> None:
        if node.type not in _BINARY:
            raise ParseError(f"{char!r} needs an operator before it")

        anchor = self.current.parent
        # Climb past operators that bind tighter than the new one.
        while (
            anchor is not None
            and (anchor.right is not None or anchor.type is not NodeType.OPEN)
            and node.type > anchor.type
        ):
            anchor = anchor.parent
        if anchor is None or anchor.type in (NodeType.VAR, NodeType.NOT):
            raise ParseError(f"cannot place operator {char!r}")

        self.state = _State.RIGHT

        if anchor.type is not NodeType.OPEN and anchor.right is not None:
            node.left = anchor.right
            anchor.right.parent = node
            anchor.right = node
            node.parent = anchor
            return

        if anchor.type is NodeType.OPEN:
            node.left = anchor.left
            if node.left is not None:
                node.left.parent = node
        anchor.left = node
        node.parent = anchor

    def _close(self) -> Node:
        if not self.scopes:
            raise ParseError("unmatched ')'")
        if self.state is not _State.FULL:
            raise ParseError("incomplete expression before ')'")

        group = self.scopes.pop()
        inner = group.left
        outer = group.parent
        if inner is None or outer is None:
            raise ParseError("empty parentheses")
        if outer.left is group:
            outer.left = inner
        else:
            outer.right = inner
        inner.parent = outer
        group.type = NodeType.CLOSE
        group.parent = None
        group.left = None
        return inner

    def finish(self) -> None:
        if self.scopes:
            raise ParseError("unclosed '('")
        if self.state is not _State.FULL:
            raise ParseError("incomplete expression")


def create_tree(text: str) -> Node:
    """Build an expression tree from ``text`` and return its OPEN root.

    Every character other than a space is a token; anything that is not an
    operator or a parenthesis is a one-letter variable.
    """
    root = Node(NodeType.OPEN)
    builder = _TreeBuilder(root)
    for char in text:
        if char == " ":
            continue
        builder.add(_TOKENS.get(char, NodeType.VAR), char)
    builder.finish()
    return root