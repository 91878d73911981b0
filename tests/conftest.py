import pytest

from crisp.builtin.env_builtin import default_environment
from crisp.interpreter import Interpreter, run


@pytest.fixture
def env():
    """Fresh root environment with the builtins loaded."""
    return default_environment()


@pytest.fixture
def interp(monkeypatch):
    """Interpreter that ignores any CRISP_* settings in the caller's shell."""
    for var in ("CRISP_MAX_DEPTH", "CRISP_SCOPING", "CRISP_PROMPT"):
        monkeypatch.delenv(var, raising=False)
    return Interpreter()


@pytest.fixture
def lisp(env):
    """Evaluate a source string against the shared `env` fixture."""
    def _run(source):
        return run(source, env)
    return _run
