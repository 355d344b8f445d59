from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id

    def is_numeral(self) -> bool:
        """True when the name is one or more ASCII decimal digits."""
        return self.id.isascii() and self.id.isdigit()

    # deepcopy of a quotation must not mint new symbols
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self
