"""Expression tree used by the expression parser, printers and IR generator."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass


class Kind(enum.IntEnum):
    """What a tree node holds."""

    NUMBER = 1
    ACTION = 2
    FUNCTION = 3


@dataclass
class Node:
    """One node of an expression tree.

    A NUMBER node carries ``value``, an ACTION node carries the operator in
    ``action`` and two operands, a FUNCTION node carries ``name`` and its
    argument in ``left``. ``level`` is the depth of the node in the tree.
    """

    kind: Kind
    value: float = 0.0
    action: str = ""
    name: str = ""
    level: int = 0
    left: Node | None = None
    right: Node | None = None

    def children(self) -> list[Node]:
        """Return the present children, left one first."""
        return [child for child in (self.left, self.right) if child is not None]

    def label(self) -> str:
        """Return the text shown for this node in printed forms."""
        if self.kind is Kind.NUMBER:
            return f"{self.value:g}"
        if self.kind is Kind.FUNCTION:
            return self.name
        return self.action

    def shift_level(self, delta: int) -> Node:
        """Add ``delta`` to the level of this node and all its descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            node.level += delta
            stack.extend(node.children())
        return self


@dataclass
class ExpressionTree:
    """A parsed expression; ``root`` is None for an empty tree."""

    root: Node | None = None

    def nodes(self) -> Iterator[Node]:
        """Yield every node in pre-order."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    @property
    def size(self) -> int:
        """Number of nodes in the tree."""
        return sum(1 for _ in self.nodes())