from __future__ import annotations

import logging

from yu import Expr
from yu.evaluation.evaluator import Evaluator
from yu.printer import render
from yu.reader.parser import read_all
from yu.types.cons import Nil
from yu.types.environment import Frame
from yu.types.errors import YuError

_log = logging.getLogger(__name__)

RECURSION_ERROR = "error: maximum recursion depth exceeded"


class Interpreter:
    """
    Reads and evaluates Yu code against one Evaluator, so definitions made on
    one line stay visible on the next for the rest of the session.
    """

    def __init__(self, frame: Frame | None = None):
        self.evaluator = Evaluator(frame)

    @property
    def frame(self) -> Frame:
        return self.evaluator.frame

    def eval(self, code: str) -> Expr:
        """Evaluate every expression in `code`; return the last value (Nil if none).

        All of `code` is read before anything is evaluated, so input that fails
        to read leaves the session untouched.
        """
        result: Expr = Nil
        for expr in read_all(code):
            result = self.evaluator.eval_expr(expr)
        return result

    def eval_line(self, line: str) -> str:
        """Evaluate one line of input and return the text to print for it."""
        try:
            return render(self.eval(line))
        except YuError as ex:
            _log.debug("error evaluating %r", line, exc_info=True)
            return f"error: {ex}"
        except RecursionError:
            return RECURSION_ERROR
