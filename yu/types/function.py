"""Closure representation for Yu."""

from __future__ import annotations

from io import StringIO

from yu import Expr
from yu.types.environment import Frame


class Function:
    """A user function: parameter names, an unevaluated body and the frame it
    was defined in.

    The frame is held by reference, so bindings added to the defining scope
    after the closure is created are still visible when its body runs.
    """

    __slots__ = ("frame", "parameters", "body")

    def __init__(self, frame: Frame, parameters: list[str], body: Expr):
        self.frame: Frame = frame
        self.parameters: tuple[str, ...] = tuple(parameters)
        self.body: Expr = body

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def __str__(self) -> str:
        from yu.printer import render
        with StringIO() as buffer:
            buffer.write("<function (")
            buffer.write(" ".join(self.parameters))
            buffer.write(") ")
            buffer.write(render(self.body))
            buffer.write(">")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
