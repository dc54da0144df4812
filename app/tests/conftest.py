"""Shared fixtures for the test suite."""

import pytest

from infrastructure.events import clear_handlers
from infrastructure.services.providers import get_settings, get_translator_provider


@pytest.fixture
def clear_event_handlers():
    """Clear event handlers before and after test."""
    clear_handlers()
    yield
    clear_handlers()


@pytest.fixture
def reset_providers():
    """Drop the cached application-scoped providers around a test."""
    get_settings.cache_clear()
    get_translator_provider.cache_clear()
    yield
    get_settings.cache_clear()
    get_translator_provider.cache_clear()


@pytest.fixture
def i18n_env(monkeypatch, tmp_path):
    """Point the translator settings at a temporary directory."""
    monkeypatch.setenv("I18N_SUPPORTED_LOCALES", "en,fr_CA")
    monkeypatch.setenv("I18N_LANG_DIRECTORY", f"{tmp_path}/")
    monkeypatch.setenv("I18N_PREFERENCES_PATH", str(tmp_path / "prefs.json"))
    return tmp_path
