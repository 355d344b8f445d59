import pytest
from hypothesis import given, strategies as st

from yaft.evaluation.evaluator import evaluate
from yaft.evaluation.resolve import InvokeOperation, PushLiteral, resolve
from yaft.interpreter import run
from yaft.types.mapping import Mapping
from yaft.types.stack import Stack
from yaft.types.symbol import Symbol

S = Symbol


# -----------------------------------------------------
# Resolution
# -----------------------------------------------------

def test_resolve_quotation_is_literal(dictionary):
    q = [S("+")]
    assert resolve(q, dictionary) == PushLiteral(q)


def test_resolve_word(dictionary):
    action = resolve(S("dup"), dictionary)
    assert isinstance(action, InvokeOperation)
    assert action.name == S("dup")
    assert action.operation is dictionary.lookup(S("dup"))


@pytest.mark.parametrize(
    "node,expected",
    [
        (S("0"), 0),
        (S("42"), 42),
        (S("007"), 7),
        (S("-5"), S("-5")),
        (S("1.5"), S("1.5")),
        (S("hello"), S("hello")),
        (5, 5),
        (True, True),
        (Mapping(), Mapping()),
    ]
)
def test_resolve_literals(dictionary, node, expected):
    assert resolve(node, dictionary) == PushLiteral(expected)


def test_resolve_is_dynamic(dictionary):
    assert resolve(S("square"), dictionary) == PushLiteral(S("square"))
    run_nodes = [[S("dup"), S("*")], S("square"), S("def")]
    evaluate(run_nodes, Stack(), dictionary)
    assert isinstance(resolve(S("square"), dictionary), InvokeOperation)


# -----------------------------------------------------
# Evaluation
# -----------------------------------------------------

def test_evaluate_consumes_nodes(dictionary, stack):
    nodes = [S("1"), S("2"), S("+")]
    evaluate(nodes, stack, dictionary)
    assert nodes == []
    assert stack == [3]


def test_evaluate_pushes_quotations_unevaluated(dictionary, stack):
    q = [S("1"), S("2"), S("+")]
    evaluate([q], stack, dictionary)
    assert stack == [[S("1"), S("2"), S("+")]]
    assert stack.peek() is q


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", []),
        ("42", [42]),
        ("0", [0]),
        ("42 47", [42, 47]),
        ("42  47", [42, 47]),
        ("42\n\t47", [42, 47]),
        ("hello", [S("hello")]),
        ("1 a 2", [1, S("a"), 2]),
        ("[ ]", [[]]),
        ("[ 1 2 ]", [[S("1"), S("2")]]),
        ("{ }", [Mapping()]),
        ("{ a b }", [Mapping(S("a"), S("b"))]),
        ("1 2 3 [ + + ] apply", [6]),
    ]
)
def test_run(source, expected):
    result = run(source)
    assert result.ok
    assert result.stack == expected


def test_empty_program_results_in_empty_stack():
    assert run("").stack == []
    assert run(None).stack == []


# -----------------------------------------------------
# Hypothesis tests
# -----------------------------------------------------

@given(st.integers(min_value=0, max_value=10**100))
def test_integer_literal(n):
    assert run(str(n)).stack == [n]


@given(st.lists(st.integers(min_value=0, max_value=10**6), max_size=30))
def test_literals_keep_program_order(ns):
    assert run(" ".join(map(str, ns))).stack == ns


def test_long_program():
    result = run("1 " * 200_000 + "clear 7")
    assert result.ok
    assert result.stack == [7]


def test_deeply_nested_quotation_runs():
    depth = 1000
    result = run("[ " * depth + "] " * depth + "apply")
    assert result.ok, result.error
    (value,) = result.stack
    levels = 1
    while value:
        (value,) = value
        levels += 1
    assert levels == depth - 1
