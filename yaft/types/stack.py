"""The value stack threaded through every evaluation."""

from __future__ import annotations

from typing import Iterator

from yaft import Value
from yaft.types.errors import StackUnderflow


class Stack:
    """LIFO sequence of values.

    Pops are all-or-nothing: when the stack is too shallow nothing is removed
    and StackUnderflow is raised, so a failed word leaves the stack as it was.
    """

    __slots__ = ("items",)

    def __init__(self, items: list[Value] | None = None):
        self.items: list[Value] = list(items) if items is not None else []

    def push(self, value: Value) -> None:
        self.items.append(value)

    def pop(self) -> Value:
        if not self.items:
            raise StackUnderflow("cannot pop from an empty stack")
        return self.items.pop()

    def popn(self, n: int) -> list[Value]:
        """Pop `n` values at once, returned top first."""
        self.require(n)
        taken = self.items[-n:] if n else []
        del self.items[len(self.items) - n:]
        taken.reverse()
        return taken

    def peek(self, depth: int = 0) -> Value:
        """Return the value `depth` places below the top without removing it."""
        self.require(depth + 1)
        return self.items[-1 - depth]

    def require(self, n: int) -> None:
        if len(self.items) < n:
            raise StackUnderflow(
                f"needs {n} value(s) but the stack holds {len(self.items)}"
            )

    def clear(self) -> None:
        self.items.clear()

    def to_list(self) -> list[Value]:
        return list(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Stack):
            return self.items == other.items
        if isinstance(other, list):
            return self.items == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Stack({self.items!r})"
