import pytest

from caltools.config import get_settings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    """Every test starts from default settings."""
    monkeypatch.delenv("CALTOOLS_LEAP_RULE", raising=False)
    monkeypatch.delenv("CALTOOLS_LEGACY_ZERO_PAD", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
