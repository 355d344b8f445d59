from __future__ import annotations

import logging
from dataclasses import dataclass

from yaft import Value
from yaft.config import apply_recursion_limit
from yaft.reader.parser import parse_program
from yaft.evaluation.evaluator import evaluate
from yaft.types.dictionary import Dictionary
from yaft.types.errors import RecursionDepthExceeded, YaftError
from yaft.types.stack import Stack
from yaft.builtin.word_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A yaft session: one Stack and one Dictionary shared by every call to eval.
    Definitions made by `def` persist until reset().
    """

    def __init__(self, prelude: str | None = None):
        apply_recursion_limit()
        self.stack = Stack()
        self.dictionary = Dictionary()
        register(self.dictionary)

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate definitions, then discard whatever they left on the stack."""
        self.eval(code)
        self.stack.clear()

    def eval(self, code: str) -> list[Value]:
        """Parse and evaluate `code` against the session stack.

        Raises YaftError on failure; the stack keeps its last consistent state.
        Returns a snapshot of the stack, bottom first.
        """
        try:
            nodes = parse_program(code)
            evaluate(nodes, self.stack, self.dictionary)
        except RecursionError:
            raise RecursionDepthExceeded("recursion too deep") from None
        return self.stack.to_list()

    def reset(self) -> None:
        """Forget the stack and every user definition."""
        logger.debug("Resetting session (%d words)", len(self.dictionary))
        self.stack = Stack()
        self.dictionary = Dictionary()
        register(self.dictionary)


@dataclass
class RunResult:
    stack: list[Value]
    error: YaftError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run(program: str | None) -> RunResult:
    """Evaluate `program` in a fresh session (fresh stack and fresh dictionary).

    Errors are returned, not raised, alongside the last consistent stack.
    """
    interp = Interpreter()
    try:
        interp.eval(program or "")
    except YaftError as err:
        return RunResult(interp.stack.to_list(), err)
    return RunResult(interp.stack.to_list())
