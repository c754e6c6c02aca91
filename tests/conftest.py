import pytest

from yocto.evaluation.evaluator import evaluate
from yocto.interpreter import make_root_env
from yocto.reader.parser import parse_all
from yocto.types.nil import Nil


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    # Keep developer settings out of the test run.
    for var in ("YOCTO_PRELUDE_PATH", "YOCTO_PROMPT", "YOCTO_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return make_root_env()


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in `env`; return the last value."""
    def _run(source: str):
        result = Nil
        for expr in parse_all(source):
            result = evaluate(expr, env)
        return result
    return _run
