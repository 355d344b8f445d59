"""
  yaft Reader: tokenizer and structural parser

- Tokens are whitespace-delimited text slices; there is no quoting,
  escaping or comment syntax.
- The parser emits Python values instead of an AST:

    - bare tokens -> Symbol (numeric classification happens at evaluation)
    - [ ... ] -> Python list (a quotation, program order)
    - { } -> empty Mapping
    - { key value } -> Mapping(key, value)

  Each group must be closed by its own bracket kind.
"""

from __future__ import annotations

from typing import Optional

from yaft import Node
from yaft.types.errors import (
    MalformedMapping,
    MismatchedGroup,
    UnexpectedCloser,
    UnterminatedGroup,
)
from yaft.types.mapping import Mapping
from yaft.types.symbol import Symbol

OPEN_QUOTATION = "["
OPEN_MAPPING = "{"

GROUPS: dict[str, str] = {
    OPEN_QUOTATION: "]",
    OPEN_MAPPING: "}",
}
CLOSERS = frozenset(GROUPS.values())


def tokenize(program: Optional[str]) -> list[str]:
    """Split program text on runs of whitespace. Empty tokens never occur."""
    if not program:
        return []
    return program.split()


def parse(
    tokens: list[str], start: int = 0, opener: Optional[str] = None
) -> tuple[list[Node], int]:
    """Parse `tokens` from `start` until the group opened by `opener` closes.

    Returns the node sequence and the index just past the consumed tokens.
    At top level (`opener` is None) the whole token list is consumed.
    """
    # open groups, innermost last; the base entry is the group being parsed
    groups: list[tuple[Optional[str], list[Node]]] = [(opener, [])]
    index = start
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if token in GROUPS:
            groups.append((token, []))

        elif token in CLOSERS:
            current, inner = groups[-1]
            if current is None:
                raise UnexpectedCloser(f"'{token}' at token {index - 1} closes nothing")
            if token != GROUPS[current]:
                raise MismatchedGroup(
                    f"'{current}' closed by '{token}' at token {index - 1}"
                )
            groups.pop()
            if not groups:
                return inner, index
            if current == OPEN_QUOTATION:
                groups[-1][1].append(inner)
            else:
                groups[-1][1].append(_to_mapping(inner))

        else:
            groups[-1][1].append(Symbol(token))

    current, nodes = groups[-1]
    if current is not None:
        raise UnterminatedGroup(f"Unmatched '{current}'")
    return nodes, index


def _to_mapping(inner: list[Node]) -> Mapping:
    if not inner:
        return Mapping()
    if len(inner) != 2:
        raise MalformedMapping(
            f"Mapping needs a key and a value, got {len(inner)} element(s)"
        )
    key, value = inner
    return Mapping(key, value)


def parse_program(program: Optional[str]) -> list[Node]:
    """Tokenize and parse a whole program into its top-level node sequence."""
    nodes, _ = parse(tokenize(program))
    return nodes
