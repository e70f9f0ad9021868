from yu import EvaluatorFn
from yu import Expr
from yu.types.cons import List
from yu.types.environment import Frame
from yu.types.errors import YuWrongArity


def begin_form(tail: List, frame: Frame, evaluate_fn: EvaluatorFn) -> Expr:
    """
    (begin expr ...)
    Evaluates each operand in order and returns the value of the last one.
    """
    if len(tail) < 1:
        raise YuWrongArity("begin requires at least 1 argument")

    result: Expr = None
    for expr in tail:
        result = evaluate_fn(expr, frame)
    return result
