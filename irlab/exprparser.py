"""Recursive-descent parser for arithmetic expressions.

Grammar::

    S -> E
    E -> T (['+' '-'] E)?
    T -> P (['*' '/'] T)?
    P -> '(' E ')' | N | F
    N -> ['0'-'9']+
    F -> ('sin' | 'cos' | 'sqr' | 'sqrt') '(' E ')'

Subtraction and division are folded into the tree: ``a - n`` becomes
``a + (-n)`` and ``a / n`` becomes ``a * (1/n)``, applied to the next number
read after the operator. Input after a complete expression is ignored.
"""

from __future__ import annotations

import math

from .exprtree import ExpressionTree, Kind, Node

FUNCTIONS = frozenset({"sin", "cos", "sqr", "sqrt"})


class ParseError(ValueError):
    """Raised when the input does not follow the grammar."""

    def __init__(self, message: str, position: int, remaining: str) -> None:
        super().__init__(f"{message} at position {position}: {remaining!r}")
        self.position = position
        self.remaining = remaining


class Parser:
    """Parses one expression string into an :class:`ExpressionTree`."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._pos = 0
        self._negate_next = False
        self._invert_next = False

    def parse(self) -> ExpressionTree:
        """Parse the text and return its tree."""
        self._pos = 0
        self._negate_next = False
        self._invert_next = False
        return ExpressionTree(self._expression(0))

    def _peek(self) -> str:
        return self.text[self._pos : self._pos + 1]

    def _take(self) -> str:
        char = self._peek()
        if char:
            self._pos += 1
        return char

    def _skip_ws(self) -> None:
        while self._peek() == " ":
            self._pos += 1

    def _error(self, message: str) -> ParseError:
        return ParseError(message, self._pos, self.text[self._pos :])

    def _expression(self, level: int) -> Node:
        node = self._term(level)
        if self._peek() in ("+", "-"):
            node = self._shift(node, level)
            node.right = self._expression(level + 1)
        return node

    def _term(self, level: int) -> Node:
        self._skip_ws()
        node = self._primary(level)
        if self._peek() in ("*", "/"):
            node = self._shift(node, level)
            node.right = self._term(level + 1)
        self._skip_ws()
        return node

    def _shift(self, left: Node, level: int) -> Node:
        operator = self._take()
        if operator == "-":
            action = "+"
            self._negate_next = True
        elif operator == "/":
            action = "*"
            self._invert_next = True
        else:
            action = operator
        left.shift_level(1)
        return Node(Kind.ACTION, action=action, level=level, left=left)

    def _primary(self, level: int) -> Node:
        self._skip_ws()
        char = self._peek()
        if char == "(":
            self._pos += 1
            node = self._expression(level)
            if self._peek() != ")":
                raise self._error("expected ')'")
            self._pos += 1
        elif char and "a" <= char <= "z":
            node = self._function(level)
        else:
            node = self._number(level)
        self._skip_ws()
        return node

    def _number(self, level: int) -> Node:
        self._skip_ws()
        start = self._pos
        magnitude = 0.0
        while (char := self._peek()) and "0" <= char <= "9":
            magnitude = magnitude * 10 + (ord(char) - ord("0"))
            self._pos += 1
        if self._pos == start:
            raise self._error("expected a number")
        value = magnitude
        if self._negate_next:
            value = -magnitude
            self._negate_next = False
        if self._invert_next:
            value = 1 / magnitude if magnitude else math.inf
            self._invert_next = False
        self._skip_ws()
        return Node(Kind.NUMBER, value=value, level=level)

    def _function(self, level: int) -> Node:
        self._skip_ws()
        start = self._pos
        while (char := self._peek()) and "a" <= char <= "z":
            self._pos += 1
        name = self.text[start : self._pos]
        if not name or self._take() != "(" or name not in FUNCTIONS:
            raise self._error(f"unknown function {name!r}")
        node = Node(Kind.FUNCTION, name=name, level=level)
        node.left = self._expression(level + 1)
        if self._take() != ")":
            raise self._error("expected ')' after function argument")
        self._skip_ws()
        return node


def parse_expression(text: str) -> ExpressionTree:
    """Parse ``text`` into an expression tree."""
    return Parser(text).parse()