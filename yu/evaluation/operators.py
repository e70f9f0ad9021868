"""Binary arithmetic for Yu.

Numbers are IEEE doubles. Arithmetic runs on numpy float64 with floating-point
warnings silenced, so division by zero produces inf, -inf or nan rather than
an exception. Results are converted back to plain Python floats.
"""

from __future__ import annotations

import numpy as np

from yu import EvaluatorFn, Expr
from yu.printer import render
from yu.types.cons import List
from yu.types.environment import Frame
from yu.types.errors import YuInvalidType
from yu.types.native import Operator

_UFUNCS = {
    Operator.ADD: np.add,
    Operator.SUB: np.subtract,
    Operator.MUL: np.multiply,
    Operator.DIV: np.divide,
}


def as_number(expr: Expr) -> float:
    """Return `expr` as a float, or raise YuInvalidType for non-numbers."""
    if isinstance(expr, bool) or not isinstance(expr, (int, float)):
        raise YuInvalidType(f"Expected a number, got {render(expr)}")
    return float(expr)


def apply_operator(operator: Operator, left: float, right: float) -> float:
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        return float(_UFUNCS[operator](np.float64(left), np.float64(right)))


def operator_form(
    operator: Operator, tail: List, frame: Frame, evaluate_fn: EvaluatorFn
) -> Expr:
    """
    (op left right)
    Any operand count other than two yields 0.0 without evaluating operands.
    """
    if len(tail) != 2:
        return 0.0

    left_expr, right_expr = tail
    left = evaluate_fn(left_expr, frame)
    right = evaluate_fn(right_expr, frame)

    return apply_operator(operator, as_number(left), as_number(right))
