import pytest

from tinylisp.builtin.env_builtin import register
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.interpreter import Interpreter
from tinylisp.reader.parser import read
from tinylisp.types.environment import Environment

# Shared fixtures. Most tests either evaluate source through a fresh
# Interpreter or evaluate hand-built forms in a fresh Environment with the
# builtins registered.


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form in a source string against `env`; return the last value."""
    def _run(source):
        result = None
        for expr in read(source):
            result = evaluate(expr, env)
        return result
    return _run
