"""Symbol atoms for Yu.

Names are interned, and a Symbol never changes after construction, so it can
serve as a dictionary key and compare by name.
"""

from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        object.__setattr__(self, "id", sys.intern(name))

    def __setattr__(self, name, value):
        raise AttributeError("Symbol is immutable")

    def __delattr__(self, name):
        raise AttributeError("Symbol is immutable")

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
