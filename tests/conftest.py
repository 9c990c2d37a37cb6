import pytest

from toylang.builtin.env_builtin import register
from toylang.types.environment import Environment


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch):
    # Tests run against the default configuration unless they set it explicitly.
    monkeypatch.delenv("TOYLANG_MAX_DEPTH", raising=False)
    monkeypatch.delenv("TOYLANG_STRICT_UNBOUND", raising=False)


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e
