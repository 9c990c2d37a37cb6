"""Printing of toylang expressions and values.

`to_source` renders an expression tree as program text that reads back to an
equal tree. `to_display` renders evaluated values for the console.
"""

from __future__ import annotations

import math

from toylang import LispValue, SExpression
from toylang.types.nil import NilType, UnboundType
from toylang.types.symbol import Symbol


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def to_source(expr: SExpression) -> str:
    """Canonical program text for an expression tree.

    Raises ValueError for values that have no source form (native functions,
    non-finite numbers).
    """
    if isinstance(expr, list):
        return "(" + " ".join(to_source(e) for e in expr) + ")"
    if isinstance(expr, NilType):
        return "()"
    if isinstance(expr, Symbol):
        return expr.id
    if isinstance(expr, str):
        return _quote(expr)
    if isinstance(expr, (int, float)) and not isinstance(expr, bool):
        value = float(expr)
        if not math.isfinite(value):
            raise ValueError(f"{value!r} has no source form")
        return repr(value)
    raise ValueError(f"{expr!r} has no source form")


def to_display(value: LispValue) -> str:
    """Human-facing rendering of an evaluated value."""
    if isinstance(value, list):
        return "(" + " ".join(to_display(v) for v in value) + ")"
    if isinstance(value, (NilType, UnboundType)):
        return repr(value)
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if callable(value):
        return f"#<native {getattr(value, '__name__', type(value).__name__)}>"
    return str(value)
