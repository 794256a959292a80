import pytest
from hypothesis import HealthCheck, settings

from slisp.runtime_context import set_scoping
from slisp.types.environment import Environment

# The autouse fixture below only resets process-global state, so sharing it
# across hypothesis examples is safe.
settings.register_profile("slisp", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("slisp")


@pytest.fixture(autouse=True)
def _reset_scoping(monkeypatch):
    """Scoping is process-global: start every test from the default (dynamic)."""
    monkeypatch.delenv("SLISP_SCOPING", raising=False)
    set_scoping(None)
    yield
    set_scoping(None)


@pytest.fixture
def env():
    """Fresh root environment."""
    return Environment()


@pytest.fixture
def lexical():
    set_scoping("lexical")
