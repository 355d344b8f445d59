import sys

import pytest

from yaft.interpreter import Interpreter
from yaft.types.dictionary import Dictionary
from yaft.types.stack import Stack
from yaft.builtin.word_builtin import register


@pytest.fixture
def interp():
    """Fresh session with builtins loaded."""
    return Interpreter()


@pytest.fixture
def dictionary():
    d = Dictionary()
    register(d)
    return d


@pytest.fixture
def stack():
    return Stack()


@pytest.fixture
def restore_recursion_limit():
    # the CLI raises the interpreter-wide recursion limit
    limit = sys.getrecursionlimit()
    yield
    sys.setrecursionlimit(limit)
