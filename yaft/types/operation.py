"""Dictionary entries: native builtins and words installed by `def`."""

from __future__ import annotations

import copy
from typing import Callable, TYPE_CHECKING

from yaft import EvaluatorFn, Node
from yaft.types.stack import Stack
from yaft.types.symbol import Symbol

if TYPE_CHECKING:
    from yaft.types.dictionary import Dictionary


class Operation:
    """A named word.

    The evaluator consumes the dispatching node before calling `run`. Words
    that execute a quotation hand it to `evaluate_fn`, which schedules it to
    run next against the same stack.
    """

    __slots__ = ("name",)

    def __init__(self, name: Symbol):
        self.name: Symbol = name

    def run(self, stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
        raise NotImplementedError


class Builtin(Operation):
    """Word backed by a Python function taking (stack, dictionary, evaluate_fn)."""

    __slots__ = ("fn",)

    def __init__(self, name: Symbol, fn: Callable[[Stack, "Dictionary", EvaluatorFn], None]):
        super().__init__(name)
        self.fn = fn

    def run(self, stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
        self.fn(stack, dictionary, evaluate_fn)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


class Defined(Operation):
    """Word whose body is a captured quotation.

    Every invocation evaluates a private deep copy, so the captured body is
    never consumed and nested quotations inside it stay intact.
    """

    __slots__ = ("body",)

    def __init__(self, name: Symbol, body: list[Node]):
        super().__init__(name)
        self.body: list[Node] = body

    def run(self, stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
        evaluate_fn(copy.deepcopy(self.body))

    def __repr__(self) -> str:
        return f"<defined {self.name}>"
