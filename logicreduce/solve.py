"""Reduction of propositional expression trees by the laws of logic."""

from __future__ import annotations

from logicreduce.node import (
    Node,
    NodeType,
    accessible,
    collapse_negation,
    compare_trees,
    contains,
    contradiction,
    replace_parent_with_child,
    swap,
    tautology,
    unpack_bthen,
    unpack_then,
)

_LEAVES = (NodeType.VAR, NodeType.OPEN, NodeType.CLOSE)
_CONSTANTS = (NodeType.OPEN, NodeType.CLOSE)


def _parent(node: Node) -> Node:
    if node.parent is None:
        raise ValueError("node is detached from its tree")
    return node.parent


def _is_operator(node: Node | None) -> bool:
    return node is not None and node.type not in _LEAVES


def _require_shared_parent(left: Node, right: Node) -> None:
    if left.parent is not right.parent:
        raise ValueError("operands of an implication must share their operator")


def _unexpected(kind: NodeType) -> ValueError:
    return ValueError(f"unexpected operator {kind.name}")


def _keep_right(left: Node, right: Node) -> None:
    """Replace the operator joining ``left`` and ``right`` with ``right``."""
    holder = _parent(right)
    if left.parent is holder or holder.right is right:
        replace_parent_with_child(holder, right)
    else:
        replace_parent_with_child(holder, holder.left)


def _keep_left(left: Node, right: Node) -> None:
    """Replace the operator joining ``left`` and ``right`` with ``left``."""
    holder = _parent(right)
    if left.parent is holder or holder.left is left:
        replace_parent_with_child(holder, left)
    else:
        replace_parent_with_child(holder, holder.right)


def same_value_reduce(left: Node, right: Node) -> bool:
    """Apply the idempotent and complementary laws to two operands."""
    left_not = left.type is NodeType.NOT
    right_not = right.type is NodeType.NOT

    if (not left_not and not right_not and compare_trees(left, right)) or (
        left_not and right_not and compare_trees(left.left, right.left)
    ):
        parent = _parent(left)
        if parent.type in (NodeType.AND, NodeType.OR):
            _keep_right(left, right)
            return True
        if parent.type in (NodeType.THEN, NodeType.BTHEN):
            _require_shared_parent(left, right)
            tautology(parent)
            return True
        raise _unexpected(parent.type)

    if (right_not and compare_trees(left, right.left)) or (
        left_not and compare_trees(left.left, right)
    ):
        parent = _parent(left)
        if parent.type is NodeType.AND:
            contradiction(parent)
            return True
        if parent.type is NodeType.OR:
            tautology(parent)
            return True
        if parent.type is NodeType.THEN:
            _require_shared_parent(left, right)
            replace_parent_with_child(_parent(right), right)
            return True
        if parent.type is NodeType.BTHEN:
            _require_shared_parent(left, right)
            contradiction(parent)
            return True
        raise _unexpected(parent.type)

    return False


def bool_value_reduce(left: Node, right: Node) -> bool:
    """Fold an operator with a constant true or false operand."""
    if left is None or right is None:
        raise ValueError("both operands are required")
    parent = _parent(left)
    _parent(right)

    if left.type not in _CONSTANTS and right.type not in _CONSTANTS:
        return False

    either_false = NodeType.CLOSE in (left.type, right.type)
    either_true = NodeType.OPEN in (left.type, right.type)

    match parent.type:
        case NodeType.AND:
            if either_false:
                contradiction(parent)
            elif left.type is NodeType.OPEN:
                _keep_right(left, right)
            elif right.type is NodeType.OPEN:
                _keep_left(left, right)
        case NodeType.OR:
            if either_true:
                tautology(parent)
            elif left.type is NodeType.CLOSE:
                _keep_right(left, right)
            elif right.type is NodeType.CLOSE:
                _keep_left(left, right)
        case NodeType.THEN | NodeType.BTHEN:
            _require_shared_parent(left, right)
            if either_false:
                tautology(parent)
            elif left.type is NodeType.OPEN:
                _keep_right(left, right)
            elif right.type is NodeType.OPEN:
                _keep_left(left, right)
        case _:
            raise _unexpected(parent.type)
    return True


def nested_value_reduce(left: Node, right: Node, nested_type: NodeType) -> bool:
    """Apply the absorption law, e.g. ``p & (p | q)`` becomes ``p``."""
    if (
        left.type is nested_type
        and left.left is not None
        and left.right is not None
        and (compare_trees(left.left, right) or compare_trees(left.right, right))
    ):
        if left.parent is right.parent:
            replace_parent_with_child(_parent(right), right)
        elif contains(_parent(left), right):
            holder = _parent(left)
            swap(holder.right if holder.left is left else holder.left, right)
            replace_parent_with_child(_parent(left), right)
        else:
            replace_parent_with_child(_parent(right), right)
        return True

    if (
        right.type is nested_type
        and right.left is not None
        and right.right is not None
        and (compare_trees(right.left, left) or compare_trees(right.right, left))
    ):
        if left.parent is right.parent:
            replace_parent_with_child(_parent(left), left)
        elif contains(_parent(right), _parent(left)):
            holder = _parent(right)
            swap(holder.right if holder.left is right else holder.left, left)
            replace_parent_with_child(_parent(right), left)
        else:
            replace_parent_with_child(_parent(left), left)
        return True

    return False


def reduce_then_bthen(root: Node) -> bool:
    """Reduce an implication or biconditional that ``root`` is an operand of."""
    parent = _parent(root)
    reduced = False

    if _is_operator(parent.left):
        reduced |= reduce_tree(parent.left)
    if _is_operator(parent.right):
        reduced |= reduce_tree(parent.right)

    if parent.type is NodeType.THEN:
        unpack_then(parent)
        return reduce_tree(parent)

    if _parent(root).type is not NodeType.BTHEN:
        raise ValueError("expected an implication or a biconditional")
    unpack_bthen(parent)

    for side in (parent.left, parent.right):
        if not _is_operator(side):
            continue
        reduced = reduce_tree(side)
        if (
            reduced
            and parent.type in _CONSTANTS
            and parent.parent is not None
            and reduce_tree(parent.parent)
        ):
            return True

    return reduced


def reduce_branch(root: Node) -> bool:
    """Try every applicable law on ``root`` against the operands it can meet."""
    if root is None:
        raise ValueError("branch is missing")
    parent = root.parent
    if parent is None or parent.type in _LEAVES:
        raise ValueError("branch must hang under an operator")

    reduced = False
    if parent.type in (NodeType.AND, NodeType.OR):
        for operator in accessible(root):
            other = operator.right if operator.left is root else operator.left
            if other is None:
                raise ValueError("operator lost an operand during reduction")
            if same_value_reduce(root, other) or bool_value_reduce(root, other):
                above = root.parent
                if (
                    above is not None
                    and above.parent is not None
                    and above.parent.type is not NodeType.OPEN
                ):
                    reduce_branch(above)
                return True

            match _parent(root).type:
                case NodeType.AND:
                    reduced |= nested_value_reduce(root, other, NodeType.OR)
                case NodeType.OR:
                    reduced |= nested_value_reduce(root, other, NodeType.AND)
    elif parent.type is NodeType.NOT:
        return collapse_negation(parent)
    elif parent.type in (NodeType.THEN, NodeType.BTHEN):
        reduced |= reduce_then_bthen(root)
    else:
        raise _unexpected(parent.type)

    if root.left is not None and root.left.type is not NodeType.VAR:
        reduced |= reduce_tree(root.left)
    if root.right is not None and root.right.type is not NodeType.VAR:
        reduced |= reduce_tree(root.right)
    return reduced


def reduce_tree(root: Node) -> bool:
    """Reduce the tree below ``root`` in place; tell whether anything changed.

    ``root`` may be the OPEN root of a whole tree or an operator inside one.
    """
    if root.parent is None and root.type is NodeType.OPEN:
        root = root.left
    if root is None or root.type in _LEAVES or root.left is None:
        raise ValueError("nothing to reduce: expected an operator")

    reduced = reduce_branch(root.left)
    if root.right is not None:
        reduced |= reduce_branch(root.right)
    return reduced