import pytest

from kappa.interpreter import Interpreter
from kappa.reader.parser import TokenStream
from kappa.reader.tokenizer import lex
from kappa.types.environment import Frame
from kappa.evaluation.evaluator import evaluate
from kappa.builtin.env_builtin import register


@pytest.fixture
def env():
    """Fresh global frame with the primitives installed."""
    e = Frame()
    register(e)
    return e


@pytest.fixture
def interp():
    with Interpreter() as i:
        yield i


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in `env`; returns the last result."""
    def _run(source):
        result = None
        for expr in TokenStream(lex(source)).parse_all():
            result = evaluate(expr, env)
        return result
    return _run
