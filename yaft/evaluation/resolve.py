"""Name resolution: decide, once per node, whether it is data or a word call."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from yaft import Node, Value
from yaft.types.dictionary import Dictionary
from yaft.types.operation import Operation
from yaft.types.symbol import Symbol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PushLiteral:
    value: Value


@dataclass(frozen=True)
class InvokeOperation:
    name: Symbol
    operation: Operation


Action = PushLiteral | InvokeOperation


def resolve(node: Node, dictionary: Dictionary) -> Action:
    """
    Resolution order:
    1) Quotations are data and are never auto-evaluated
    2) Symbols bound in the dictionary invoke their word
    3) Symbols made of decimal digits become integers
    4) Any other symbol (and any non-symbol value) is pushed as-is
    """
    if isinstance(node, list):
        return PushLiteral(node)
    if isinstance(node, Symbol):
        operation = dictionary.lookup(node)
        if operation is not None:
            logger.debug("Resolved %s to %r", node, operation)
            return InvokeOperation(node, operation)
        if node.is_numeral():
            return PushLiteral(int(node.id))
    return PushLiteral(node)
