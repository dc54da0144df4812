"""
Unit tests for application-scoped providers.

Tests cover:
- get_settings() caching behavior
- get_translator_provider() construction from settings and caching
"""

import pytest

from infrastructure.configuration import Settings
from infrastructure.i18n import Locale, TranslatorProvider
from infrastructure.services.providers import get_settings, get_translator_provider
from tests.factories.i18n import write_lang_assets

pytestmark = [pytest.mark.unit, pytest.mark.usefixtures("reset_providers")]


class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_get_settings_returns_settings_instance(self):
        assert isinstance(get_settings(), Settings)

    def test_get_settings_returns_cached_instance(self):
        assert get_settings() is get_settings()

    def test_get_settings_cache_can_be_cleared(self):
        instance1 = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not instance1


class TestGetTranslatorProvider:
    """Tests for get_translator_provider() provider function."""

    def test_built_from_settings(self, i18n_env):
        provider = get_translator_provider()

        assert isinstance(provider, TranslatorProvider)
        assert provider.supported_locales == (Locale("en"), Locale("fr", "CA"))
        assert provider.lang_directory == f"{i18n_env}/"

    def test_returns_cached_instance(self, i18n_env):
        assert get_translator_provider() is get_translator_provider()

    def test_later_environment_changes_need_cache_clear(self, i18n_env, monkeypatch):
        first = get_translator_provider()
        monkeypatch.setenv("I18N_SUPPORTED_LOCALES", "pt_BR")

        assert get_translator_provider() is first

        get_settings.cache_clear()
        get_translator_provider.cache_clear()
        assert get_translator_provider().supported_locales == (Locale("pt", "BR"),)

    @pytest.mark.asyncio
    async def test_provider_loads_translations(self, i18n_env):
        write_lang_assets(i18n_env)
        provider = get_translator_provider()

        await provider.load(Locale("en"))

        assert provider.t("title", prefix="home") == "Welcome"
