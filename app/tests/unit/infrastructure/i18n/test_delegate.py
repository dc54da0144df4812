"""Tests for infrastructure.i18n.delegate module."""

from unittest.mock import AsyncMock

import pytest

from infrastructure.i18n import (
    LOAD_REQUESTED_EVENT,
    Locale,
    ReactiveTranslatorProvider,
    TranslatorProviderDelegate,
    UnsupportedLocaleError,
)
from tests.factories.i18n import make_provider, make_supported_locales

pytestmark = pytest.mark.unit


class StubSource:
    """Provider stand-in reporting neither a saved nor a device locale."""

    def __init__(self):
        self.loaded = []

    async def get_saved_locale(self):
        return None

    async def default_supported_locale(self):
        return None

    async def load(self, locale=None):
        self.loaded.append(locale)
        return {"hi": "Hello"}

    def is_supported(self, locale):
        return locale is not None and locale.language_code == "en"

    def should_reload(self, old):
        return False


class TestConstruction:
    """Tests for TranslatorProviderDelegate construction."""

    def test_empty_supported_locales_raises(self):
        with pytest.raises(ValueError):
            TranslatorProviderDelegate(supported_locales=[], provider=StubSource())

    def test_defaults(self):
        delegate = TranslatorProviderDelegate(
            supported_locales=make_supported_locales(), provider=StubSource()
        )
        assert delegate.supported_locales == tuple(make_supported_locales())
        assert delegate.lang_config_file == "config.json"
        assert delegate.lang_directory == "assets/lang/"
        assert delegate.locale is None


class TestResolutionOrder:
    """The locale to load is explicit, then saved, then device, then first."""

    @pytest.mark.asyncio
    async def test_explicit_locale_wins(self, lang_dir):
        provider = make_provider(
            lang_dir, saved="pt_BR", device_locales=[Locale("pt", "PT")]
        )

        table = await provider.delegate.load(Locale("fr", "CA"))

        assert provider.locale == Locale("fr", "CA")
        assert table == {"hi": "Bonjour", "bye": "Au revoir"}

    @pytest.mark.asyncio
    async def test_saved_locale_before_device(self, lang_dir):
        provider = make_provider(
            lang_dir, saved="fr_CA", device_locales=[Locale("en", "GB")]
        )

        await provider.delegate.load()

        assert provider.locale == Locale("fr", "CA")
        assert provider.t("hi") == "Bonjour"

    @pytest.mark.asyncio
    async def test_device_locale_when_nothing_saved(self, lang_dir):
        provider = make_provider(lang_dir, device_locales=[Locale("fr", "FR")])

        await provider.delegate.load()

        assert provider.locale == Locale("fr", "CA")
        assert provider.is_loaded is True

    @pytest.mark.asyncio
    async def test_unsupported_device_locale_falls_back_to_first(self, lang_dir):
        provider = make_provider(lang_dir, device_locales=[Locale("de", "DE")])

        await provider.delegate.load()

        assert provider.locale == Locale("en")
        assert provider.t("hi") == "Hello"

    @pytest.mark.asyncio
    async def test_first_supported_when_nothing_resolves(self):
        source = StubSource()
        delegate = TranslatorProviderDelegate(
            supported_locales=[Locale("en", "US")], provider=source
        )

        await delegate.load()

        assert delegate.locale == Locale("en", "US")
        assert source.loaded == [Locale("en", "US")]


class TestLoad:
    """Tests for TranslatorProviderDelegate.load()."""

    @pytest.mark.asyncio
    async def test_unsupported_explicit_locale_raises(self, provider):
        with pytest.raises(UnsupportedLocaleError):
            await provider.delegate.load(Locale("de"))
        assert provider.locale is None
        assert provider.sentences == {}

    @pytest.mark.asyncio
    async def test_unsupported_saved_locale_raises(self, lang_dir):
        provider = make_provider(lang_dir, saved="de_DE")

        with pytest.raises(UnsupportedLocaleError):
            await provider.delegate.load()
        assert provider.locale is None

    @pytest.mark.asyncio
    async def test_triggers_exactly_one_load(self, provider):
        provider.load = AsyncMock(return_value=None)

        await provider.delegate.load(Locale("en"))

        provider.load.assert_awaited_once_with(Locale("en"))

    @pytest.mark.asyncio
    async def test_locale_is_set_before_loading(self, provider):
        seen = []

        async def record(locale=None):
            seen.append(provider.locale)

        provider.load = record
        await provider.delegate.load(Locale("pt", "BR"))

        assert seen == [Locale("pt", "BR")]

    @pytest.mark.asyncio
    async def test_event_driven_provider_receives_event(self, lang_dir):
        provider = make_provider(lang_dir, provider_class=ReactiveTranslatorProvider)
        provider.load = AsyncMock()
        events = []
        provider.add = events.append

        result = await provider.delegate.load(Locale("en"))

        assert result is None
        assert len(events) == 1
        assert events[0].event_type == LOAD_REQUESTED_EVENT
        assert events[0].metadata["locale"] == Locale("en")
        provider.load.assert_not_awaited()


class TestForwarding:
    """is_supported and should_reload forward to the provider."""

    def test_is_supported(self, provider):
        assert provider.delegate.is_supported(Locale("pt")) is True
        assert provider.delegate.is_supported(Locale("de")) is False
        assert provider.delegate.is_supported(None) is False

    def test_should_reload_is_false(self, provider):
        old = provider.delegate
        assert provider.delegate.should_reload(old) is False
