"""Generation of LLVM-style IR text from an expression tree.

The expression is emitted into ``main`` of a module named ``top``. Constant
floating additions and subtractions are folded; every other operation
becomes an instruction on a numbered value.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

from .exprtree import ExpressionTree, Kind, Node


@dataclass
class IRModule:
    """A generated module: the body of ``main`` and external declarations."""

    name: str = "top"
    body: list[str] = field(default_factory=list)
    declarations: list[str] = field(default_factory=list)

    def render(self) -> str:
        """Return the module as IR text."""
        lines = [
            f"; ModuleID = '{self.name}'",
            f'source_filename = "{self.name}"',
            "",
            "define void @main() {",
            "entry:",
        ]
        lines.extend(f"  {instruction}" for instruction in self.body)
        lines.append("}")
        for declaration in self.declarations:
            lines.extend(["", declaration])
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class _Operand:
    text: str
    constant: float | None = None


def _format_double(value: float) -> str:
    if math.isfinite(value):
        text = "%.6e" % value
        if float(text) == value:
            return text
    (bits,) = struct.unpack("<Q", struct.pack("<d", value))
    return "0x%016X" % bits


class _Emitter:
    def __init__(self) -> None:
        self.module = IRModule()
        self.stack: list[_Operand] = []
        self._counter = 0
        self._declared: set[str] = set()

    def _instruction(self, text: str) -> _Operand:
        register = f"%{self._counter}"
        self._counter += 1
        self.module.body.append(f"{register} = {text}")
        return _Operand(register)

    def _constant(self, value: float) -> _Operand:
        return _Operand(f"double {_format_double(value)}", value)

    def visit(self, node: Node | None) -> None:
        if node is None:
            return
        self.visit(node.left)
        self.visit(node.right)
        self.emit(node)

    def emit(self, node: Node) -> None:
        if node.kind is Kind.NUMBER:
            self.stack.append(self._constant(node.value))
            return
        if node.kind is Kind.FUNCTION:
            if not self.stack:
                raise ValueError(f"call to {node.name!r} has no argument")
            if node.name not in self._declared:
                self._declared.add(node.name)
                self.module.declarations.append(f"declare double @{node.name}(double)")
            argument = self.stack.pop()
            self.stack.append(
                self._instruction(f"call double @{node.name}({_typed(argument)})")
            )
            return
        if not self.stack:
            return
        arg1 = self.stack.pop()
        if not self.stack:
            return
        arg2 = self.stack.pop()
        folded = arg1.constant is not None and arg2.constant is not None
        if node.action == "+":
            if folded:
                self.stack.append(self._constant(arg1.constant + arg2.constant))
            else:
                self.stack.append(self._binary("fadd", arg1, arg2))
        elif node.action == "-":
            if folded:
                self.stack.append(self._constant(arg2.constant - arg1.constant))
            else:
                self.stack.append(self._binary("fsub", arg2, arg1))
        elif node.action == "*":
            self.stack.append(self._binary("mul", arg1, arg2))
        elif node.action == "/":
            self.stack.append(self._binary("udiv", arg2, arg1))

    def _binary(self, opcode: str, lhs: _Operand, rhs: _Operand) -> _Operand:
        return self._instruction(f"{opcode} double {_bare(lhs)}, {_bare(rhs)}")


def _typed(operand: _Operand) -> str:
    return operand.text if operand.constant is not None else f"double {operand.text}"


def _bare(operand: _Operand) -> str:
    return _format_double(operand.constant) if operand.constant is not None else operand.text


def generate_ir(tree: ExpressionTree) -> IRModule:
    """Build the IR module whose ``main`` computes and returns the expression."""
    emitter = _Emitter()
    emitter.visit(tree.root)
    if not emitter.stack:
        raise ValueError("expression produces no value")
    emitter.module.body.append(f"ret {_typed(emitter.stack[-1])}")
    return emitter.module