"""Command line: parse an expression file, dump it, emit IR and stack code."""

from __future__ import annotations

import sys
from pathlib import Path

from .exprir import generate_ir
from .exprparser import ParseError, parse_expression
from .exprprint import dump_tree, infix_form, postfix_form, prefix_form, stack_program

_LINE_LIMIT = 99
CHECK_FILE = "expression_check.txt"
STACK_FILE = "expr.s"


def main(argv: list[str] | None = None) -> int:
    """Run the expression tool; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("[ERROR] Need 1 argument: file with exspression")
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            line = handle.readline(_LINE_LIMIT)
    except OSError as exc:
        print(f"[ERROR] Cannot read {args[0]}: {exc.strerror}", file=sys.stderr)
        return 1

    print(line)
    try:
        tree = parse_expression(line)
    except ParseError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(dump_tree(tree))
    sys.stdout.write("#[LLVM IR]:\n" + generate_ir(tree).render())

    Path(CHECK_FILE).write_text(
        f"{prefix_form(tree)}\n{infix_form(tree)}\n{postfix_form(tree)}\n",
        encoding="utf-8",
    )
    Path(STACK_FILE).write_text(stack_program(tree), encoding="utf-8")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())