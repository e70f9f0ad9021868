"""Render Yu values in the language's own notation."""

from __future__ import annotations

from yu import Expr
from yu.types.cons import List
from yu.types.function import Function
from yu.types.native import Native
from yu.types.symbol import Symbol


def render(expr: Expr) -> str:
    match expr:
        case List():
            return "(" + " ".join(render(e) for e in expr) + ")"
        case Symbol():
            return str(expr)
        case Function():
            return str(expr)
        case Native():
            return f"<native {expr.value}>"
        case int() | float():
            return repr(float(expr))
    return repr(expr)
