import pytest

from yu.evaluation.evaluator import Evaluator
from yu.interpreter import Interpreter
from yu.reader.parser import read


@pytest.fixture
def evaluator():
    """Return a fresh evaluator (with its own global frame) for each test."""
    return Evaluator()


@pytest.fixture
def interp():
    """Return a fresh interpreter session for each test."""
    return Interpreter()


@pytest.fixture
def run(evaluator):
    """Evaluate each source string in turn on one evaluator; return the last value."""
    def _run(*sources):
        result = None
        for source in sources:
            result = evaluator.eval_expr(read(source))
        return result
    return _run
