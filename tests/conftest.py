import pytest

from lispy.builtin.env_builtin import register
from lispy.evaluation.evaluator import evaluate
from lispy.interpreter import Interpreter
from lispy.reader import parse, read
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Evaluate one line of source in the test's environment and return the value."""
    def _run(source):
        return evaluate(env, read(parse(source)))
    return _run


@pytest.fixture
def interp():
    """Interpreter session without a prelude."""
    return Interpreter(prelude=None)
