import pytest

from formula.builtin.env_builtin import new_global_environment
from formula.evaluation.evaluator import evaluate
from formula.reader.lexer import tokenize
from formula.reader.parser import TokenStream


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    return new_global_environment()


@pytest.fixture
def run(env):
    """Evaluate every form in a source string against `env`; return the last value."""
    def _run(source):
        result = None
        for expr in TokenStream(tokenize(source)).parse_all():
            result = evaluate(expr, env)
        return result
    return _run
