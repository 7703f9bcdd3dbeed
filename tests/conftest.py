import pytest

from combiter.config import get_config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """every test starts from the default config, whatever the shell exports"""
    monkeypatch.delenv("COMBITER_CHECK_REITERABLE", raising=False)
    monkeypatch.delenv("COMBITER_STRICT", raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()
