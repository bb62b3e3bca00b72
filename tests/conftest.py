import pytest

from lispy.builtin.env_builtin import register
from lispy.interpreter import Interpreter
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter with builtins only."""
    return Interpreter(prelude=None)


@pytest.fixture(scope="module")
def std():
    """Interpreter with the standard prelude loaded (shared per module)."""
    return Interpreter()
