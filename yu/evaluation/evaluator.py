"""Core evaluator for the Yu interpreter.

Reduces an expression to a value by plain recursion. The frame in scope is
passed explicitly through every step; the Evaluator itself only owns the
session's global frame, which is where top-level definitions land.

Evaluation is single-threaded and not tail-call optimised: nesting depth is
bounded by Python's recursion limit.
"""

from __future__ import annotations

import logging

from yu import Expr
from yu.types.cons import List, Cons
from yu.types.environment import Frame
from yu.types.errors import YuNotCallable
from yu.types.function import Function
from yu.types.native import Native, RESERVED
from yu.types.symbol import Symbol
from yu.evaluation.apply import apply_function
from yu.evaluation.operators import operator_form
from yu.evaluation.special_forms import SPECIAL_FORMS

_log = logging.getLogger(__name__)


class Evaluator:
    """Evaluates Yu expressions against a global frame."""

    def __init__(self, frame: Frame | None = None):
        self.frame: Frame = frame if frame is not None else Frame.new()

    def eval_expr(self, expr: Expr, frame: Frame | None = None) -> Expr:
        if frame is None:
            frame = self.frame
        if isinstance(expr, List):
            return self.eval_list(expr, frame)
        return self.eval_atom(expr, frame)

    def eval_atom(self, atom: Expr, frame: Frame) -> Expr:
        # Numbers, functions and natives are self-evaluating.
        if isinstance(atom, Symbol):
            return self.eval_symbol(atom.id, frame)
        return atom

    def eval_symbol(self, name: str, frame: Frame) -> Expr:
        """Resolve `name`: reserved names first, then the frame chain.

        Reserved names always resolve to their built-in, even when a user has
        bound the same name with `define`.
        """
        native = self.eval_special_symbol(name)
        if native is not None:
            return native
        return frame.lookup(name)

    @staticmethod
    def eval_special_symbol(name: str) -> Native | None:
        return RESERVED.get(name)

    def eval_list(self, lst: List, frame: Frame) -> Expr:
        if not isinstance(lst, Cons):
            return lst

        head = self.eval_expr(lst.head, frame)
        match head:
            case Function():
                return self.eval_call_function(head, lst.tail, frame)
            case Native():
                return self.eval_call_native(head, lst.tail, frame)
        raise YuNotCallable(f"{head!r} is not callable")

    def eval_call_function(self, fn: Function, tail: List, frame: Frame) -> Expr:
        # The caller's frame plays no part: arguments and body are evaluated
        # in a child of the closure's frame.
        return apply_function(fn, tail, self.eval_expr)

    def eval_call_native(self, native: Native, tail: List, frame: Frame) -> Expr:
        operator = native.operator
        if operator is not None:
            return operator_form(operator, tail, frame, self.eval_expr)
        _log.debug("native %s %r", native.value, tail)
        return SPECIAL_FORMS[native](tail, frame, self.eval_expr)


def evaluate(expr: Expr, frame: Frame | None = None) -> Expr:
    """Evaluate `expr` in `frame` (a fresh global frame when omitted)."""
    return Evaluator(frame).eval_expr(expr)
