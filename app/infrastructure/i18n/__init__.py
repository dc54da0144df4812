"""i18n system - locale resolution, translation loading and persistence.

Main components:
- models: Locale, Manifest and its entries, TranslationTable
- loader: AssetReader implementations and ManifestTranslationLoader
- resolvers: supported-locale matching and resolution
- storage: PreferencesStore implementations and the saved-locale codec
- device: device locale sources
- provider: TranslatorProvider (lookup, loading, persistence)
- delegate: LocalizationsDelegate contract and TranslatorProviderDelegate
- reactive: event-driven ReactiveTranslatorProvider
- factory: create_translator_provider from settings
"""

from infrastructure.i18n.delegate import (
    LOAD_REQUESTED_EVENT,
    LocalizationsDelegate,
    TranslatorProviderDelegate,
)
from infrastructure.i18n.device import (
    DeviceLocaleSource,
    StaticDeviceLocaleSource,
    SystemDeviceLocaleSource,
)
from infrastructure.i18n.exceptions import (
    PreferencesError,
    TranslationFileError,
    UnsupportedLocaleError,
)
from infrastructure.i18n.factory import create_translator_provider
from infrastructure.i18n.loader import (
    AssetReader,
    FileAssetReader,
    ManifestTranslationLoader,
    PackageAssetReader,
)
from infrastructure.i18n.models import (
    Locale,
    Manifest,
    ManifestEntry,
    PlainEntry,
    PrefixedEntry,
    TranslationTable,
)
from infrastructure.i18n.provider import TranslatorProvider
from infrastructure.i18n.reactive import (
    TRANSLATIONS_FAILED_EVENT,
    TRANSLATIONS_LOADED_EVENT,
    ReactiveTranslatorProvider,
    TranslatorState,
    TranslatorStatus,
)
from infrastructure.i18n.storage import (
    SAVED_LOCALE_KEY,
    InMemoryPreferencesStore,
    JsonFilePreferencesStore,
    PreferencesStore,
)

__all__ = [
    "Locale",
    "Manifest",
    "ManifestEntry",
    "PlainEntry",
    "PrefixedEntry",
    "TranslationTable",
    "AssetReader",
    "FileAssetReader",
    "PackageAssetReader",
    "ManifestTranslationLoader",
    "PreferencesStore",
    "InMemoryPreferencesStore",
    "JsonFilePreferencesStore",
    "SAVED_LOCALE_KEY",
    "DeviceLocaleSource",
    "StaticDeviceLocaleSource",
    "SystemDeviceLocaleSource",
    "LocalizationsDelegate",
    "TranslatorProviderDelegate",
    "LOAD_REQUESTED_EVENT",
    "TranslatorProvider",
    "ReactiveTranslatorProvider",
    "TranslatorState",
    "TranslatorStatus",
    "TRANSLATIONS_LOADED_EVENT",
    "TRANSLATIONS_FAILED_EVENT",
    "UnsupportedLocaleError",
    "TranslationFileError",
    "PreferencesError",
    "create_translator_provider",
]
