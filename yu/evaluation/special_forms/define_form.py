import logging

from yu import EvaluatorFn
from yu import Expr
from yu.types.cons import List
from yu.types.environment import Frame
from yu.types.errors import YuWrongArity, YuInvalidType
from yu.types.symbol import Symbol

_log = logging.getLogger(__name__)


def define_form(tail: List, frame: Frame, evaluate_fn: EvaluatorFn) -> Expr:
    """
    (define name value)
    `name` is taken literally and must be a symbol. The value is bound in the
    current frame, shadowing (never overwriting) any binding in an enclosing
    frame, and is also the result of the form.
    """
    if len(tail) != 2:
        raise YuWrongArity("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise YuInvalidType(f"Cannot define {name!r}: not a symbol")

    value = evaluate_fn(val_expr, frame)
    _log.debug("define %s = %r", name, value)
    frame.set(name.id, value)
    return value
