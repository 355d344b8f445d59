"""Render yaft values and stacks as program text.

Rendered quotations and mappings read back through the parser as the same
structure, e.g. `[ 1 [ dup * ] { a b } ]`.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from yaft import Value
from yaft.types.mapping import Mapping


def format_value(value: Value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return _format_group("[", value, "]")
    if isinstance(value, Mapping):
        return _format_group("{", [part for pair in value.items() for part in pair], "}")
    return str(value)


def format_stack(stack: Iterable[Value]) -> str:
    """Bottom of the stack first, enclosed like a quotation."""
    return _format_group("[", list(stack), "]")


def _format_group(opener: str, values: list[Value], closer: str) -> str:
    with StringIO() as buffer:
        buffer.write(opener)
        for value in values:
            buffer.write(" ")
            buffer.write(format_value(value))
        buffer.write(" ")
        buffer.write(closer)
        return buffer.getvalue()
