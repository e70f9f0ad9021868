"""Lexical scopes for Yu.

A Frame stores the bindings of one scope and links to the enclosing scope via
`outer`. The global frame has no parent; each function application gets a
child of the function's captured frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from yu import Expr
from yu.types.errors import YuUndefinedSymbol


class Frame:
    """Hierarchical mapping from names to Yu values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Frame] = None):
        self.vars: dict[str, Expr] = {}
        self.outer: Frame | None = outer

    @classmethod
    def new(cls) -> Frame:
        """An empty global frame."""
        return cls()

    @classmethod
    def with_parent(cls, parent: Frame) -> Frame:
        """An empty frame enclosed by `parent`."""
        return cls(outer=parent)

    def find(self, name: str) -> Optional[Frame]:
        """Find the nearest frame in the chain that binds `name`."""
        frame: Optional[Frame] = self
        while frame is not None:
            if name in frame.vars:
                return frame
            frame = frame.outer
        return None

    def get(self, name: str) -> Expr | None:
        """Value of the nearest binding of `name`, or None if unbound."""
        frame = self.find(name)
        if frame is None:
            return None
        return frame.vars[name]

    def lookup(self, name: str) -> Expr:
        """Like `get`, but raises YuUndefinedSymbol for unbound names."""
        frame = self.find(name)
        if frame is None:
            raise YuUndefinedSymbol(name)
        return frame.vars[name]

    def set(self, name: str, value: Expr) -> None:
        """Bind `name` in this frame only; enclosing frames are never touched."""
        self.vars[name] = value

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    @property
    def depth(self) -> int:
        """Number of frames in the chain, this one included."""
        n = 0
        frame: Optional[Frame] = self
        while frame is not None:
            n += 1
            frame = frame.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Frame chain: ")
            chain = []
            frame: Optional[Frame] = self
            while frame is not None:
                frame_buf = StringIO()
                frame._write_vars(frame_buf)
                chain.append(frame_buf.getvalue())
                frame = frame.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
