"""Persistent singly-linked lists for Yu.

A List is either the singleton `Nil` or a `Cons(head, tail)` node. Nodes never
change after construction; building a longer list allocates new nodes in front
of an existing tail, which is shared rather than copied.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from yu import Expr


class List(ABC):
    """Common protocol for `Nil` and `Cons` nodes."""

    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __iter__(self) -> Iterator[Expr]:
        node = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail

    @abstractmethod
    def __len__(self) -> int:
        ...

    def __getitem__(self, index: int) -> Expr:
        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError("list index out of range")
        node = self
        for _ in range(index):
            node = node.tail
        return node.head

    def get(self, index: int) -> Expr | None:
        """Element at `index`, or None when out of range."""
        try:
            return self[index]
        except IndexError:
            return None

    def to_list(self) -> list[Expr]:
        return list(self)

    @staticmethod
    def from_iterable(items: Iterable[Expr]) -> List:
        """Build a list holding `items` in order."""
        result: List = Nil
        for item in reversed(list(items)):
            result = Cons(item, result)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        from yu.printer import render
        return render(self)


class NilType(List):
    """The empty list."""

    __slots__ = ()

    def __len__(self) -> int:
        return 0

    def __bool__(self):
        return False


class Cons(List):
    """A list node: `head` followed by the shared list `tail`."""

    __slots__ = ("head", "tail", "_length")

    def __init__(self, head: Expr, tail: List):
        if not isinstance(tail, List):
            raise TypeError(f"Cons tail must be a List, got {type(tail).__name__}")
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "tail", tail)
        object.__setattr__(self, "_length", len(tail) + 1)

    def __len__(self) -> int:
        return self._length


Nil = NilType()


def cons(head: Expr, tail: List = Nil) -> Cons:
    """Prepend `head` to `tail`."""
    return Cons(head, tail)
