import pytest

from mlisp.interpreter import Interpreter
from mlisp.types.environment import Environment
from mlisp.builtin.env_builtin import register


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Fresh interpreter session; definitions persist across eval calls."""
    return Interpreter()
