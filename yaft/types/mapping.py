"""Single-entry mapping value produced by `{ key value }` groups."""

from __future__ import annotations

import copy

from yaft import Value

_EMPTY = object()


class Mapping:
    """Holds exactly one key/value pair, or nothing."""

    __slots__ = ("key", "value")

    def __init__(self, key: Value = _EMPTY, value: Value = _EMPTY):
        if (key is _EMPTY) != (value is _EMPTY):
            raise ValueError("Mapping needs both a key and a value, or neither")
        self.key = key
        self.value = value

    @property
    def is_empty(self) -> bool:
        return self.key is _EMPTY

    def items(self) -> list[tuple[Value, Value]]:
        return [] if self.is_empty else [(self.key, self.value)]

    def __len__(self) -> int:
        return 0 if self.is_empty else 1

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Mapping) and self.items() == other.items()

    __hash__ = None

    def __deepcopy__(self, memo) -> Mapping:
        # the empty sentinel must survive copying by identity
        if self.is_empty:
            return Mapping()
        return Mapping(copy.deepcopy(self.key, memo), copy.deepcopy(self.value, memo))

    def __str__(self) -> str:
        from yaft.printer import format_value
        return format_value(self)

    def __repr__(self) -> str:
        if self.is_empty:
            return "Mapping()"
        return f"Mapping({self.key!r}, {self.value!r})"
