import pytest

from yall.evaluation.evaluator import evaluate_string
from yall.interpreter import make_global_environment


# Most tests only need the special forms and builtins. Tests that exercise the
# bootstrap prelude ask for `prelude_env` (or build an Interpreter) instead.

@pytest.fixture
def env():
    """A fresh global environment without the prelude."""
    return make_global_environment(prelude=False)


@pytest.fixture
def prelude_env():
    """A fresh global environment with the bundled prelude loaded."""
    return make_global_environment()


@pytest.fixture
def run(env):
    """Evaluate one expression in `env` and return its rendering."""
    def _run(code: str) -> str:
        return str(evaluate_string(env, code))
    return _run
