from yu import EvaluatorFn
from yu import Expr
from yu.types.cons import List
from yu.types.environment import Frame
from yu.types.errors import YuWrongArity


def quote_form(tail: List, frame: Frame, evaluate_fn: EvaluatorFn) -> Expr:
    if len(tail) != 1:
        raise YuWrongArity("quote expects exactly 1 argument")
    return tail[0]
