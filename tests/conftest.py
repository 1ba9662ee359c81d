"""Root conftest — shared test configuration."""

import pytest

from nullsafe.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Every test starts from default settings, unaffected by the caller's env."""
    for key in (
        "NULLSAFE_ARRAY_SIZE", "NULLSAFE_PROBE_INDEX", "NULLSAFE_VARIANT",
        "NULLSAFE_LOCALE", "NULLSAFE_LOG_LEVEL", "NULLSAFE_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
