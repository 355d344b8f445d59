"""Built-in words for the yaft runtime dictionary.

This module defines arithmetic, comparison, stack shuffling, quotation
control and definition words, plus the registration helper that seeds a
Dictionary with them. Every word checks its operands before popping any of
them, so a word that fails leaves the stack untouched.
"""
from __future__ import annotations

import copy
import logging
from typing import Callable

from yaft import EvaluatorFn, Value
from yaft.evaluation.evaluator import Restore
from yaft.types.dictionary import Dictionary
from yaft.types.errors import DivisionByZero, YaftTypeError
from yaft.types.mapping import Mapping
from yaft.types.operation import Builtin, Defined
from yaft.types.stack import Stack
from yaft.types.symbol import Symbol

logger = logging.getLogger(__name__)

WordFn = Callable[[Stack, Dictionary, EvaluatorFn], None]


# -------------------------------
# Operand kinds
# -------------------------------
def is_integer(value: Value) -> bool:
    # bool is an int subclass but not an Integer value here
    return isinstance(value, int) and not isinstance(value, bool)


def is_quotation(value: Value) -> bool:
    return isinstance(value, list)


def is_name(value: Value) -> bool:
    """A word name: a Symbol, or a one-element quotation holding a Symbol."""
    if isinstance(value, Symbol):
        return True
    return is_quotation(value) and len(value) == 1 and isinstance(value[0], Symbol)


ANY = ("value", lambda value: True)
INTEGER = ("integer", is_integer)
QUOTATION = ("quotation", is_quotation)
NAME = ("symbol", is_name)


def describe(value: Value) -> str:
    if isinstance(value, bool):
        return f"boolean {str(value).lower()}"
    if is_integer(value):
        return f"integer {value}"
    if isinstance(value, Symbol):
        return f"symbol {value}"
    if isinstance(value, Mapping):
        return "mapping"
    if is_quotation(value):
        return "quotation"
    return type(value).__name__


def operands(stack: Stack, word: str, *kinds: tuple[str, Callable[[Value], bool]]) -> list[Value]:
    """Check the top len(kinds) values (top first) and return them without popping."""
    stack.require(len(kinds))
    values = []
    for depth, (kind_name, accepts) in enumerate(kinds):
        value = stack.peek(depth)
        if not accepts(value):
            raise YaftTypeError(f"{word} expects a {kind_name}, got {describe(value)}")
        values.append(value)
    return values


def take(stack: Stack, word: str, *kinds: tuple[str, Callable[[Value], bool]]) -> list[Value]:
    """Like `operands`, then pop them."""
    operands(stack, word, *kinds)
    return stack.popn(len(kinds))


# -------------------------------
# Equality and truthiness
# -------------------------------
def is_equal(a: Value, b: Value) -> bool:
    """Exact equality: same kind and same value, element-wise for quotations."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Mapping):
        if a.is_empty or b.is_empty:
            return a.is_empty and b.is_empty
        return is_equal(a.key, b.key) and is_equal(a.value, b.value)
    return a == b


def is_truthy(value: Value) -> bool:
    """false and 0 are falsy; every other value is truthy."""
    if value is False:
        return False
    return not (is_integer(value) and value == 0)


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def divide(b: int, a: int) -> int:
    if a == 0:
        raise DivisionByZero(f"cannot divide {b} by zero")
    return b // a


def binop(word: str, op: Callable[[Value, Value], Value], kind=INTEGER) -> WordFn:
    """Pop a, then b; push `op(b, a)`. Computed before popping so errors keep the stack."""
    def fn(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
        a, b = operands(stack, word, kind, kind)
        result = op(b, a)
        stack.popn(2)
        stack.push(result)
    return fn


# -------------------------------
# Stack words
# -------------------------------
def push_true(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
    stack.push(True)


def push_false(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
    stack.push(False)


def dup(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
    value = stack.pop()
    # A quotation may later be consumed destructively; the copy must not alias it.
    stack.push(copy.deepcopy(value) if is_quotation(value) else value)
    stack.push(value)


def pop(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
    stack.pop()


def swap(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
    a, b = stack.popn(2)
    stack.push(a)
    stack.push(b)


def clear(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
    stack.clear()


def quote(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
    stack.push([stack.pop()])


# -------------------------------
# Control words
# -------------------------------
def apply(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
    (q,) = take(stack, "apply", QUOTATION)
    evaluate_fn(q)


def dip(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
    """Run the quotation under the value beneath it."""
    q, saved = take(stack, "dip", QUOTATION, ANY)
    # the marker frame sits under q, so `saved` returns once q is done
    evaluate_fn([Restore(saved)])
    evaluate_fn(q)


def if_word(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
    condition, then_branch, else_branch = take(stack, "if", ANY, QUOTATION, QUOTATION)
    evaluate_fn(then_branch if is_truthy(condition) else else_branch)


def define(stack: Stack, dictionary: Dictionary, evaluate_fn: EvaluatorFn) -> None:
    """[ body ] name def  -- also accepts [ name ] for names already bound to a word."""
    name, body = take(stack, "def", NAME, QUOTATION)
    if is_quotation(name):
        name = name[0]
    dictionary.define(name, Defined(name, body))
    logger.debug("Defined word %s", name)


BUILTINS: dict[str, WordFn] = {
    "+": binop("+", lambda b, a: b + a),
    "-": binop("-", lambda b, a: b - a),
    "*": binop("*", lambda b, a: b * a),
    "/": binop("/", divide),
    "<": binop("<", lambda b, a: b < a),
    ">": binop(">", lambda b, a: b > a),
    "<=": binop("<=", lambda b, a: b <= a),
    ">=": binop(">=", lambda b, a: b >= a),
    "eq": binop("eq", lambda b, a: is_equal(b, a), kind=ANY),
    "true": push_true,
    "false": push_false,
    "dup": dup,
    "pop": pop,
    "swap": swap,
    "clear": clear,
    "quote": quote,
    "apply": apply,
    "dip": dip,
    "if": if_word,
    "def": define,
}


def register(dictionary: Dictionary) -> None:
    """Register all builtin words into the given dictionary."""
    dictionary.update(
        {Symbol(name): Builtin(Symbol(name), fn) for name, fn in BUILTINS.items()}
    )
