"""Core evaluator for the yaft interpreter.

Evaluation is iterative. Pending work is a stack of frames, each a deque of
nodes consumed from the front. Control words and defined words never call
back into `evaluate`; they schedule a quotation as a new frame through the
`evaluate_fn` they are handed, so recursion depth costs heap, not Python
stack. A frame that is already exhausted when a new one is scheduled is
dropped first, so a word that recurses as its last action runs in constant
space.
"""

from __future__ import annotations

from collections import deque

from yaft import Node, Value
from yaft.evaluation.resolve import InvokeOperation, PushLiteral, resolve
from yaft.types.dictionary import Dictionary
from yaft.types.errors import YaftError
from yaft.types.stack import Stack


class Restore:
    """Marker node: push a value saved by `dip` once its quotation has run."""

    __slots__ = ("value",)

    def __init__(self, value: Value):
        self.value = value


def evaluate(nodes: list[Node], stack: Stack, dictionary: Dictionary) -> None:
    """Evaluate `nodes` in program order. The list is emptied on entry (moved)."""
    frames: list[deque[Node]] = [deque(nodes)]
    nodes.clear()

    def schedule(body: list[Node]) -> None:
        # Runs `body` before anything left in the current frames; moves it.
        while frames and not frames[-1]:
            frames.pop()
        frames.append(deque(body))
        body.clear()

    try:
        while frames:
            frame = frames[-1]
            if not frame:
                frames.pop()
                continue
            node = frame.popleft()
            if isinstance(node, Restore):
                stack.push(node.value)
                continue
            match resolve(node, dictionary):
                case PushLiteral(value):
                    stack.push(value)
                case InvokeOperation(_, operation):
                    operation.run(stack, dictionary, schedule)
    except YaftError:
        # values held by unfinished dips go back, innermost first
        for frame in reversed(frames):
            for pending in frame:
                if isinstance(pending, Restore):
                    stack.push(pending.value)
        raise
