import pytest

from minilisp.builtin.env_builtin import make_root_environment
from minilisp.interpreter import Interpreter
from minilisp.runtime_context import set_current_output, set_current_scoping

# Runtime settings (output sink, scoping policy) are process-global. Every test
# starts from the defaults and an Interpreter re-installs its own settings on
# each evaluation.


@pytest.fixture(autouse=True)
def _reset_runtime_context(monkeypatch):
    for var in (
        "MINILISP_SCOPING",
        "MINILISP_SYMBOL_MAX_LENGTH",
        "MINILISP_INTEGER_BITS",
        "MINILISP_PRELUDE_PATH",
    ):
        monkeypatch.delenv(var, raising=False)
    set_current_output(None)
    set_current_scoping(None)
    yield
    set_current_output(None)
    set_current_scoping(None)


@pytest.fixture
def env():
    """A fresh root environment with every primitive registered."""
    return make_root_environment()


@pytest.fixture
def interp():
    return Interpreter(scoping="lexical")


@pytest.fixture(params=["lexical", "dynamic"])
def any_interp(request):
    """Interpreter under each scoping policy, for behaviour both must share."""
    return Interpreter(scoping=request.param)
