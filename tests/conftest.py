import pytest

from dial.evaluation.evaluator import evaluate
from dial.interpreter import Interpreter, make_global_env
from dial.reader.parser import read


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return make_global_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Read `source` and evaluate each expression in the shared env; return the last result."""
    def _run(source):
        result = None
        for expr in read(source):
            result = evaluate(expr, env)
        return result
    return _run
