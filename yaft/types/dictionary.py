"""Runtime word dictionary for yaft.

The Dictionary maps Symbols to Operations for one session. Entries are added
or overwritten by `def`, never removed. Lookups happen at invocation time,
so a word defined in terms of itself resolves once it is installed.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from yaft.types.errors import YaftTypeError
from yaft.types.operation import Operation
from yaft.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Dictionary:
    """Mapping from Symbols to Operations."""

    __slots__ = ("words",)

    def __init__(self):
        self.words: dict[Symbol, Operation] = {}

    def define(self, name: Symbol, operation: Operation) -> None:
        """Bind `name` to `operation`, replacing any previous binding.

        Raises YaftTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise YaftTypeError(f"Cannot define {name!r}: word names must be symbols")
        if name in self.words:
            logger.debug("Redefining word %s", name)
        self.words[name] = operation

    def update(self, words: dict[Symbol, Operation]) -> None:
        for name, operation in words.items():
            self.define(name, operation)

    def lookup(self, name: Symbol) -> Optional[Operation]:
        """Return the operation bound to `name`, or None."""
        return self.words.get(name)

    def names(self) -> list[str]:
        return sorted(str(name) for name in self.words)

    def __contains__(self, name: object) -> bool:
        return name in self.words

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)
