"""Runtime loggers called by instrumented code."""

from __future__ import annotations

import sys
from typing import TextIO


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def func_start_logger(func_name: str, stream: TextIO | None = None) -> None:
    """Report entry into ``func_name``."""
    _out(stream).write(f"[LOG] Start function '{func_name}'\n")


def call_logger(
    caller_name: str, callee_name: str, val_id: int, stream: TextIO | None = None
) -> None:
    """Report a call from ``caller_name`` to ``callee_name``."""
    _out(stream).write(f"[LOG] CALL '{caller_name}' -> '{callee_name}' {{{val_id}}}\n")


def func_end_logger(func_name: str, val_id: int, stream: TextIO | None = None) -> None:
    """Report the return from ``func_name``."""
    _out(stream).write(f"[LOG] End function '{func_name}' {{{val_id}}}\n")


def bin_opt_logger(
    val: int,
    arg0: int,
    arg1: int,
    op_name: str,
    func_name: str,
    val_id: int,
    stream: TextIO | None = None,
) -> None:
    """Report a binary operation and its result."""
    _out(stream).write(
        f"[LOG] In function '{func_name}': {val} = {arg0} {op_name} {arg1} {{{val_id}}}\n"
    )