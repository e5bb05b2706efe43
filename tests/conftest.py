# ruff: noqa: E402
import sys
from pathlib import Path

# Ensure project root on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from i18nstore import get_store
from i18nstore.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    # Isolate tests from I18N_* variables of the surrounding environment
    for name in ("I18N_DEFAULT_LOCALE", "I18N_NOT_FOUND_TEXT", "I18N_TRANSLATIONS_FILE", "I18N_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_store.cache_clear()
    yield
    get_settings.cache_clear()
    get_store.cache_clear()


@pytest.fixture
def greetings():
    return {
        "en": {"greeting": "Hello", "user": {"age": 30, "name": "Alice"}},
        "id": {"greeting": "Halo"},
    }


@pytest.fixture
def warnings_sink():
    """List collecting diagnostics; pass `warnings_sink.append` as `warn`."""
    return []
