from yu import EvaluatorFn
from yu import Expr
from yu.types.cons import List
from yu.types.environment import Frame
from yu.types.errors import YuWrongArity, YuInvalidType
from yu.types.function import Function
from yu.types.symbol import Symbol


def function_form(tail: List, frame: Frame, evaluate_fn: EvaluatorFn) -> Expr:
    """
    (function (params ...) body)
    The body is kept unevaluated and the current frame is captured by
    reference. Duplicate parameter names are accepted; the last binding wins.
    """
    if len(tail) != 2:
        raise YuWrongArity("function requires exactly 2 arguments")

    params, body = tail
    if not isinstance(params, List):
        raise YuInvalidType(f"Parameter list must be a list, got {params!r}")

    names = []
    for param in params:
        if not isinstance(param, Symbol):
            raise YuInvalidType(f"Parameter {param!r} is not a symbol")
        names.append(param.id)

    return Function(frame, names, body)
