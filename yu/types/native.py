"""Built-in tags for Yu.

Every built-in is addressed by a reserved name. `RESERVED` is the static table
the evaluator consults before any frame lookup, so these names can never be
shadowed by user bindings.
"""

from __future__ import annotations

from enum import Enum


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class Native(Enum):
    BEGIN = "begin"
    DEFINE = "define"
    FUNCTION = "function"
    QUOTE = "quote"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def operator(self) -> Operator | None:
        """The arithmetic operator this built-in stands for, if any."""
        return _OPERATORS.get(self)

    def __repr__(self):
        return f"Native({self.value!r})"


_OPERATORS: dict[Native, Operator] = {
    Native.ADD: Operator.ADD,
    Native.SUB: Operator.SUB,
    Native.MUL: Operator.MUL,
    Native.DIV: Operator.DIV,
}

RESERVED: dict[str, Native] = {native.value: native for native in Native}
