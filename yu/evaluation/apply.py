"""Application of user functions.

The callee runs in a fresh child of the function's captured frame. Arguments
are bound one at a time, each evaluated inside that child frame after the
preceding parameters have been bound, so later arguments can refer to earlier
parameters and the caller's local bindings are not in scope for them.

The caller's frame is never replaced: the child frame is only ever passed down
the recursion, so it is dropped on every exit path, including errors.
"""

import logging

from yu import Expr, EvaluatorFn
from yu.types.cons import List
from yu.types.environment import Frame
from yu.types.errors import YuWrongArity
from yu.types.function import Function

_log = logging.getLogger(__name__)


def bind_arguments(fn: Function, args: List, evaluate_fn: EvaluatorFn) -> Frame:
    """Create the call frame for `fn` and bind its parameters sequentially."""
    if len(args) != fn.arity:
        raise YuWrongArity(
            f"Expected {fn.arity} argument(s), got {len(args)}"
        )

    call_frame = Frame.with_parent(fn.frame)
    for name, arg in zip(fn.parameters, args):
        call_frame.set(name, evaluate_fn(arg, call_frame))
    return call_frame


def apply_function(fn: Function, args: List, evaluate_fn: EvaluatorFn) -> Expr:
    """Apply the closure `fn` to the unevaluated argument list `args`."""
    call_frame = bind_arguments(fn, args, evaluate_fn)
    _log.debug("apply %s with %s", fn, call_frame)
    return evaluate_fn(fn.body, call_frame)
