"""Factory functions for creating i18n components.

Builds translator providers from the application settings, which are
created once at startup and passed in explicitly.
"""

from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.i18n.device import DeviceLocaleSource, SystemDeviceLocaleSource
from infrastructure.i18n.loader import AssetReader, FileAssetReader
from infrastructure.i18n.models import Locale
from infrastructure.i18n.provider import TranslatorProvider
from infrastructure.i18n.reactive import ReactiveTranslatorProvider
from infrastructure.i18n.storage import JsonFilePreferencesStore, PreferencesStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_translator_provider(
    settings: Optional[Settings] = None,
    reactive: bool = False,
    asset_reader: Optional[AssetReader] = None,
    preferences: Optional[PreferencesStore] = None,
    device: Optional[DeviceLocaleSource] = None,
) -> TranslatorProvider:
    """Create and configure a TranslatorProvider.

    Args:
        settings: Application settings (default: built from the environment).
        reactive: Build the event-driven variant.
        asset_reader: Reader override (default: file system reader).
        preferences: Store override (default: JSON file at
            ``settings.i18n.preferences_path``).
        device: Device locale source override (default: process environment).

    Returns:
        TranslatorProvider: Configured provider, nothing loaded yet.

    Raises:
        ValueError: If no supported locale is configured.

    Usage:
        provider = create_translator_provider(settings)
        await provider.delegate.load()
    """
    settings = settings or Settings()
    i18n = settings.i18n

    supported = [Locale.from_string(code) for code in i18n.supported_locale_codes]
    if not supported:
        raise ValueError("I18N_SUPPORTED_LOCALES must list at least one locale")

    provider_class = ReactiveTranslatorProvider if reactive else TranslatorProvider
    provider = provider_class(
        supported_locales=supported,
        lang_config_file=i18n.lang_config_file,
        lang_directory=i18n.lang_directory,
        asset_reader=asset_reader or FileAssetReader(),
        preferences=preferences or JsonFilePreferencesStore(i18n.preferences_path),
        device=device or SystemDeviceLocaleSource(),
        match_country=i18n.match_country_code,
    )

    logger.info(
        "translator_provider_created",
        supported_locales=[str(loc) for loc in supported],
        lang_directory=i18n.lang_directory,
        reactive=reactive,
    )
    return provider
