import pytest

from yaft.interpreter import Interpreter, run
from yaft.types.errors import StackUnderflow, YaftTypeError
from yaft.types.symbol import Symbol

S = Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[ ] apply", []),
        ("2 3 [ + ] apply", [5]),
        ("1 2 3 [ + + ] apply", [6]),
        ("2 3 [ [ + ] ] apply apply", [5]),
        ("[ a b ] apply", [S("a"), S("b")]),
        ("5 quote apply", [5]),
        ("1 2 [ 10 + ] dip", [11, 2]),
        ("1 2 3 [ + ] dip", [3, 3]),
        ("1 [ ] dip", [1]),
        ("[ 0 ] [ 1 ] true if", [1]),
        ("[ 0 ] [ 1 ] false if", [0]),
        ("[ 0 ] [ 1 ] 0 if", [0]),
        ("[ 0 ] [ 1 ] 7 if", [1]),
        ("[ no ] [ yes ] [ ] if", [S("yes")]),
        ("[ no ] [ yes ] a if", [S("yes")]),
        ("[ no ] [ yes ] 1 2 < if", [S("yes")]),
        ("[ no ] [ yes ] 2 1 < if", [S("no")]),
    ]
)
def test_control_words(source, expected):
    result = run(source)
    assert result.ok
    assert result.stack == expected


def test_apply_consumes_quotation(interp):
    interp.eval("[ 1 2 + ]")
    q = interp.stack.peek()
    interp.eval("apply")
    assert q == []
    assert interp.stack == [3]


def test_quotations_are_not_auto_evaluated():
    assert run("[ 1 2 + ] [ dup ]").stack == [[S("1"), S("2"), S("+")], [S("dup")]]


@pytest.mark.parametrize(
    "source,error,stack",
    [
        ("apply", StackUnderflow, []),
        ("5 apply", YaftTypeError, [5]),
        ("1 5 dip", YaftTypeError, [1, 5]),
        ("[ ] dip", StackUnderflow, [[]]),
        ("[ ] [ ] if", StackUnderflow, [[], []]),
        ("1 [ ] true if", YaftTypeError, [1, [], True]),
        ("5 [ + ] apply", StackUnderflow, [5]),
    ]
)
def test_control_word_errors(source, error, stack):
    result = run(source)
    assert isinstance(result.error, error)
    assert result.stack == stack


def test_dip_restores_saved_value_on_error():
    result = run("9 1 [ pop pop ] dip")
    assert isinstance(result.error, StackUnderflow)
    assert result.stack == [1]


def test_nested_dips_restore_innermost_first():
    result = run("1 2 3 [ [ pop pop pop ] dip ] dip")
    assert isinstance(result.error, StackUnderflow)
    assert result.stack == [2, 3]


def test_nested_dips():
    assert run("1 2 3 [ [ 10 + ] dip ] dip").stack == [11, 2, 3]


def test_if_effects_visible_to_caller():
    interp = Interpreter()
    interp.eval("10 [ 1 - ] [ 1 + ] true if")
    assert interp.eval("2 *") == [22]
