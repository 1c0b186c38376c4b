"""Root conftest — shared test configuration."""

import pytest

from intbuffer.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Each test sees default settings unless it sets INTBUFFER_* itself."""
    for key in ("INTBUFFER_MAX_CAPACITY", "INTBUFFER_LOG_LEVEL", "INTBUFFER_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
