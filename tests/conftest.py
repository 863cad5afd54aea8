import pytest

from minilisp.interpreter import Interpreter
from minilisp.lists import from_sequence
from minilisp.runtime import Runtime
from minilisp.types.symbol import Symbol


@pytest.fixture
def runtime():
    """Return a fresh runtime (scope 0 only) for each test."""
    return Runtime()


@pytest.fixture
def interp(runtime):
    return Interpreter(runtime)


def sym(name):
    return Symbol(name)


def lst(*items):
    return from_sequence(items)
