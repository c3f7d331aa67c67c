"""Expression tree nodes and the structural operations the reducer relies on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class NodeType(IntEnum):
    """Kinds of tree node; the binary operators are ordered by binding strength."""

    VAR = 0
    NOT = 1
    AND = 2
    OR = 3
    THEN = 4
    BTHEN = 5
    OPEN = 6
    CLOSE = 7


_BINARY = frozenset({NodeType.AND, NodeType.OR, NodeType.THEN, NodeType.BTHEN})

_OPERATOR_CHARS = {
    NodeType.AND: "&",
    NodeType.OR: "|",
    NodeType.THEN: ">",
    NodeType.BTHEN: "~",
}


@dataclass(eq=False)
class Node:
    """A node of a propositional expression tree.

    OPEN doubles as the tree root and as the constant true; CLOSE is the
    constant false and also marks nodes that have been removed from a tree.
    """

    type: NodeType
    value: str = ""
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = None
    right: Node | None = None

    def copy(self) -> Node:
        """Return a deep copy of this subtree, detached from any parent."""
        clone = Node(self.type, self.value)
        if self.left is not None:
            clone.left = self.left.copy()
            clone.left.parent = clone
        if self.right is not None:
            clone.right = self.right.copy()
            clone.right.parent = clone
        return clone


def _replace_in_parent(old: Node, new: Node | None) -> None:
    """Put ``new`` into the slot that ``old`` occupies under its parent."""
    parent = old.parent
    if parent is None:
        raise ValueError("node has no parent")
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def delete_tree(root: Node | None) -> None:
    """Detach every node of a subtree and mark it as removed."""
    if root is None:
        raise ValueError("cannot delete an empty tree")
    if root.left is not None:
        delete_tree(root.left)
    if root.right is not None:
        delete_tree(root.right)
    root.parent = root.left = root.right = None
    root.value = ""
    root.type = NodeType.CLOSE


def add_negation(node: Node) -> None:
    """Negate ``node`` in place within its tree."""
    if node.parent is None:
        raise ValueError("cannot negate a node without a parent")

    if node.type is NodeType.OPEN:
        node.type = NodeType.CLOSE
    elif node.type is NodeType.CLOSE:
        node.type = NodeType.OPEN
    elif node.type is NodeType.NOT:
        child = node.left
        if child is None:
            raise ValueError("negation has no operand")
        _replace_in_parent(node, child)
        child.parent = node.parent
        node.left = None
        node.parent = None
    else:
        negation = Node(NodeType.NOT, parent=node.parent, left=node)
        _replace_in_parent(node, negation)
        node.parent = negation


def _collapse_to(node: Node, kind: NodeType) -> None:
    delete_tree(node.right)
    delete_tree(node.left)
    node.value = ""
    node.type = kind
    node.left = None
    node.right = None


def tautology(node: Node) -> None:
    """Replace a binary operator and its operands with the constant true."""
    _collapse_to(node, NodeType.OPEN)


def contradiction(node: Node) -> None:
    """Replace a binary operator and its operands with the constant false."""
    _collapse_to(node, NodeType.CLOSE)


def unpack_then(root: Node) -> None:
    """Rewrite ``a > b`` as ``!a | b``."""
    if root.type is not NodeType.THEN:
        raise ValueError("expected an implication")
    if root.left is None:
        raise ValueError("implication has no left operand")
    root.type = NodeType.OR
    add_negation(root.left)


def unpack_bthen(root: Node) -> None:
    """Rewrite ``a ~ b`` as ``(a > b) & (b > a)``."""
    if root.type is not NodeType.BTHEN:
        raise ValueError("expected a biconditional")
    if root.left is None or root.right is None:
        raise ValueError("biconditional is missing an operand")

    reverse = root.copy()
    reverse.parent = root
    reverse.left, reverse.right = reverse.right, reverse.left
    reverse.type = NodeType.THEN

    forward = Node(NodeType.THEN, parent=root, left=root.left, right=root.right)
    root.left.parent = forward
    root.right.parent = forward

    root.type = NodeType.AND
    root.left = forward
    root.right = reverse


def replace_parent_with_child(parent: Node, child: Node) -> None:
    """Put ``child`` where ``parent`` stands and delete parent's other operand."""
    if parent is None or child is None:
        raise ValueError("parent and child are required")
    if parent.parent is None:
        raise ValueError("cannot replace the root of a tree")

    other = parent.right if parent.left is child else parent.left
    child.parent = parent.parent
    _replace_in_parent(parent, child)
    delete_tree(other)
    parent.left = None
    parent.right = None


def swap(a: Node, b: Node) -> None:
    """Exchange the positions of two nodes within their trees."""
    if a is None or b is None:
        raise ValueError("both nodes are required")
    if a.parent is None or b.parent is None:
        raise ValueError("cannot swap a node without a parent")

    a_parent, b_parent = a.parent, b.parent
    if b_parent.left is b:
        b_parent.left = a
    else:
        b_parent.right = a
    if a_parent.left is a:
        a_parent.left = b
    else:
        a_parent.right = b
    a.parent, b.parent = b_parent, a_parent


def _same_head(a: Node | None, b: Node | None) -> bool:
    return (
        a is not None
        and b is not None
        and a.type == b.type
        and a.value == b.value
    )


def compare_trees(a: Node, b: Node) -> bool:
    """Tell whether two distinct subtrees are identical.

    Only variables and subtrees with two matching operands count as equal,
    so single-operand nodes and constants never compare equal.
    """
    if a is b:
        raise ValueError("cannot compare a node with itself")
    if a.type != b.type:
        return False
    if a.type is NodeType.VAR:
        return a.value == b.value

    left = _same_head(a.left, b.left) and compare_trees(a.left, b.left)
    right = _same_head(a.right, b.right) and compare_trees(a.right, b.right)
    return left and right


def _sibling(node: Node) -> Node | None:
    parent = node.parent
    if parent is None:
        return None
    return parent.right if parent.left is node else parent.left


def _find_accessible(
    found: list[Node], seen: set[Node], node: Node | None, kind: NodeType
) -> None:
    if node is None or node in seen:
        return

    if node.type is NodeType.NOT:
        if kind not in (NodeType.AND, NodeType.OR):
            raise ValueError("negation can only be crossed under '&' or '|'")
        flipped = NodeType.OR if kind is NodeType.AND else NodeType.AND
        _find_accessible(found, seen, node.left, flipped)
        return

    if node.type != kind:
        return

    seen.add(node)
    found.append(node)
    _find_accessible(found, seen, node.left, kind)
    _find_accessible(found, seen, node.right, kind)
    _find_accessible(found, seen, _sibling(node), kind)


def accessible(start: Node) -> list[Node]:
    """Return the operators whose operands ``start`` can be combined with.

    The first entry is the parent of ``start``; the rest are operators of the
    same kind reachable on the other side, with negations swapping '&' and '|'.
    """
    parent = start.parent
    if parent is None:
        raise ValueError("node has no parent")
    found = [parent]
    seen = {parent, start}
    _find_accessible(found, seen, _sibling(start), parent.type)
    return found


def contains(parent: Node, child: Node) -> bool:
    """Tell whether ``parent`` is a proper ancestor of ``child``."""
    if parent is None or child is None:
        raise ValueError("parent and child are required")
    node = child
    while node.parent is not None:
        if node.parent is parent:
            return True
        node = node.parent
    return False


def collapse_negation(node: Node) -> bool:
    """Fold the chain of negations around ``node`` to at most one.

    Returns False when ``node`` is a lone negation and nothing changed.
    """
    if node.type is not NodeType.NOT:
        raise ValueError("expected a negation")

    count = 1
    top = node
    while top.parent is not None and top.parent.type is NodeType.NOT:
        top = top.parent
        count += 1
    bottom = node
    while bottom.left is not None and bottom.left.type is NodeType.NOT:
        bottom = bottom.left
        count += 1

    if count == 1:
        return False

    anchor = top.parent
    if anchor is None:
        raise ValueError("negation chain has no parent")

    keep = bottom.left if count % 2 == 0 else bottom
    if keep is None:
        raise ValueError("negation has no operand")

    _replace_in_parent(top, keep)
    current = top
    while current is not keep:
        following = current.left
        current.parent = None
        current.left = None
        current.type = NodeType.CLOSE
        current = following
    keep.parent = anchor
    return True


def _render(node: Node | None) -> str:
    if node is None:
        raise ValueError("tree is incomplete")
    match node.type:
        case NodeType.VAR:
            return node.value
        case NodeType.NOT:
            return f"! {_render(node.left)}"
        case NodeType.OPEN:
            return "T"
        case NodeType.CLOSE:
            return "F"
    operator = _OPERATOR_CHARS[node.type]
    return f"( {_render(node.left)} {operator} {_render(node.right)} )"


def tree_to_string(root: Node) -> str:
    """Render a whole tree, given its root, as a fully parenthesised string."""
    if root.parent is not None or root.type is not NodeType.OPEN:
        raise ValueError("expected the root of a tree")
    if root.left is None:
        raise ValueError("tree is empty")
    return _render(root.left)