"""Text renderings of an expression tree."""

from __future__ import annotations

from collections.abc import Iterator

from .exprtree import ExpressionTree, Kind, Node

_STACK_OPCODES = {"+": "add_s", "-": "sub_s", "*": "mul_s", "/": "div_s"}
_STACK_TRAILER = " pop x1\n write x1\n exit"


def format_value(value: float) -> str:
    """Format a number the way the printers show it (``%g``)."""
    return "%g" % value


def _inorder(node: Node | None) -> Iterator[Node]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node
    yield from _inorder(node.right)


def _postorder(node: Node | None) -> Iterator[Node]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node


def dump_tree(tree: ExpressionTree) -> str:
    """Return the indented in-order dump of the tree, one node per line."""
    parts = [f"\n*******TREE*******\nSIZE: {tree.size}\n------------------\n"]
    for node in _inorder(tree.root):
        parts.append(" " * max(1, node.level * 3) + node.label() + "\n")
    parts.append("\n******************\n")
    return "".join(parts)


def _prefix(node: Node | None) -> str:
    if node is None:
        return ""
    return f"({node.label()}{_prefix(node.left)}{_prefix(node.right)})"


def _infix(node: Node | None) -> str:
    if node is None:
        return ""
    return f"({_infix(node.left)}{node.label()}{_infix(node.right)})"


def _postfix(node: Node | None) -> str:
    if node is None:
        return ""
    return f"({_postfix(node.left)}{_postfix(node.right)}{node.label()})"


def prefix_form(tree: ExpressionTree) -> str:
    """Fully parenthesised prefix form."""
    return _prefix(tree.root)


def infix_form(tree: ExpressionTree) -> str:
    """Fully parenthesised infix form."""
    return _infix(tree.root)


def postfix_form(tree: ExpressionTree) -> str:
    """Fully parenthesised postfix form."""
    return _postfix(tree.root)


def _stack_line(node: Node) -> str:
    if node.kind is Kind.NUMBER:
        return f" push {format_value(node.value)}\n"
    if node.kind is Kind.FUNCTION:
        return f" {node.name}\n"
    return f" {_STACK_OPCODES.get(node.action, 'error')}\n"


def stack_program(tree: ExpressionTree) -> str:
    """Return a stack-machine program that evaluates the tree and prints it."""
    body = "".join(_stack_line(node) for node in _postorder(tree.root))
    return body + _STACK_TRAILER