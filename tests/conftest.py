import pytest

from schemer.interpreter import Interpreter


@pytest.fixture
def interp():
    """Interpreter with the default source name, independent of the environment."""
    return Interpreter(source_name="lisp")


@pytest.fixture(autouse=True)
def _clear_schemer_env(monkeypatch):
    # Keep tests independent of the developer's shell settings.
    monkeypatch.delenv("SCHEMER_SOURCE_NAME", raising=False)
    monkeypatch.delenv("SCHEMER_LOG_LEVEL", raising=False)
