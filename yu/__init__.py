# Core type aliases for Yu's data model.
# Code and runtime values share one representation:
# - numbers -> float
# - symbols -> yu.types.symbol.Symbol
# - functions -> yu.types.function.Function (closures)
# - built-ins -> yu.types.native.Native
# - lists -> yu.types.cons.Nil / yu.types.cons.Cons
#
# Expr is `Any` so the aliases can be imported from anywhere without cycles.

from typing import Any, Callable

__version__ = "0.1.0"

Expr = Any

# Evaluator function type: (expr, frame) -> Expr, handed to special forms
EvaluatorFn = Callable[..., Expr]
