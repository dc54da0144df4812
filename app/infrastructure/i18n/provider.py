"""Translator provider: translation table, lookup and locale persistence.

The provider owns the live translation table and the supported locales.
Loading goes through its ``TranslatorProviderDelegate``, which decides the
locale to activate.

Usage:
    provider = TranslatorProvider(
        supported_locales=[Locale("en"), Locale("fr", "CA")],
        lang_directory="assets/lang/",
    )
    await provider.delegate.load()
    provider.t("title", prefix="home")
"""

from typing import List, Optional, Sequence, Tuple

from infrastructure.i18n import resolvers
from infrastructure.i18n.delegate import LocalizationsDelegate, TranslatorProviderDelegate
from infrastructure.i18n.device import DeviceLocaleSource, SystemDeviceLocaleSource
from infrastructure.i18n.exceptions import UnsupportedLocaleError
from infrastructure.i18n.loader import (
    AssetReader,
    FileAssetReader,
    ManifestTranslationLoader,
)
from infrastructure.i18n.models import Locale, TranslationTable
from infrastructure.i18n.storage import (
    SAVED_LOCALE_KEY,
    InMemoryPreferencesStore,
    PreferencesStore,
    locale_from_preference,
    locale_to_preference,
)
from infrastructure.logging import bind_log_context, get_module_logger

logger = get_module_logger()


class TranslatorProvider:
    """Holds the loaded translations and the active locale.

    Attributes:
        sentences: Live translation table; replaced as a whole on each
            successful load.
        delegate: Framework delegate carrying the supported locales, the
            active locale and the file locations.
        asset_reader: Reader for the manifest and translation files.
        preferences: Store the selected locale is persisted in.
        device: Source of the device locales.
        match_country: Compare country codes when checking support.
    """

    saved_locale_key = SAVED_LOCALE_KEY

    def __init__(
        self,
        supported_locales: Sequence[Locale],
        lang_config_file: str = "config.json",
        lang_directory: str = "assets/lang/",
        locale: Optional[Locale] = None,
        *,
        asset_reader: Optional[AssetReader] = None,
        preferences: Optional[PreferencesStore] = None,
        device: Optional[DeviceLocaleSource] = None,
        match_country: bool = False,
    ):
        self.asset_reader = asset_reader or FileAssetReader()
        self.preferences = preferences or InMemoryPreferencesStore()
        self.device = device or SystemDeviceLocaleSource()
        self.match_country = match_country
        self.sentences: TranslationTable = {}

        self.delegate = TranslatorProviderDelegate(
            supported_locales=supported_locales,
            provider=self,
            lang_config_file=lang_config_file,
            lang_directory=lang_directory,
        )
        if locale is not None:
            if not self.is_supported(locale):
                raise UnsupportedLocaleError(locale, "set")
            self.delegate = self._new_delegate(locale)

    def _new_delegate(self, locale: Optional[Locale]) -> TranslatorProviderDelegate:
        return TranslatorProviderDelegate(
            supported_locales=self.delegate.supported_locales,
            provider=self,
            locale=locale,
            lang_config_file=self.delegate.lang_config_file,
            lang_directory=self.delegate.lang_directory,
        )

    @property
    def is_loaded(self) -> bool:
        """Whether a locale is active and its translations are loaded."""
        return self.delegate.locale is not None and bool(self.sentences)

    @property
    def lang_config_file(self) -> str:
        return self.delegate.lang_config_file

    @property
    def lang_directory(self) -> str:
        return self.delegate.lang_directory

    @property
    def locale(self) -> Optional[Locale]:
        return self.delegate.locale

    @property
    def supported_locales(self) -> Tuple[Locale, ...]:
        return self.delegate.supported_locales

    @property
    def delegates(self) -> List[LocalizationsDelegate]:
        """Delegates to register with the host framework."""
        return [self.delegate]

    async def set_locale(self, locale: Locale) -> None:
        """Switch to another supported locale and load its translations.

        Setting the already active locale does nothing.

        Raises:
            UnsupportedLocaleError: If the locale is not supported.
        """
        if not self.is_supported(locale):
            raise UnsupportedLocaleError(locale, "set")

        if locale == self.delegate.locale:
            return

        self.delegate = self._new_delegate(locale)
        await self.delegate.load(locale)

    def is_supported(self, locale: Optional[Locale]) -> bool:
        return resolvers.is_supported(locale, self.supported_locales, self.match_country)

    def resolve_supported_locale(
        self,
        locale: Optional[Locale],
        supported_locales: Optional[Sequence[Locale]] = None,
    ) -> Locale:
        """Resolve a locale against the candidates (default: supported locales).

        Falls back to the first supported locale when the locale is None or
        nothing matches.
        """
        return resolvers.resolve_supported_locale(
            locale,
            self.supported_locales,
            candidates=supported_locales,
            match_country=self.match_country,
        )

    async def default_supported_locale(self) -> Locale:
        """Device locale resolved against the supported locales."""
        return self.resolve_supported_locale(await self.current_locale())

    async def current_locales(self) -> List[Locale]:
        """Device locales in preference order."""
        return await self.device.get_preferred_locales()

    async def current_locale(self) -> Optional[Locale]:
        return await self.device.get_current_locale()

    def t(self, key: str, prefix: Optional[str] = None) -> str:
        """Look up a translation; missing keys are returned as looked up.

        Args:
            key: Translation key.
            prefix: Optional prefix; the key becomes ``"{prefix}_{key}"``.
        """
        if prefix:
            key = f"{prefix}_{key}"
        return self.sentences.get(key, key)

    def translate(self, key: str, prefix: Optional[str] = None) -> str:
        """Long form of ``t``."""
        return self.t(key, prefix=prefix)

    async def load(self, locale: Optional[Locale] = None) -> Optional[TranslationTable]:
        """Load the translations of a locale (default: the active locale).

        The live table is only replaced when the manifest lists the locale
        and its files contain at least one key.

        Returns:
            The live table after replacement, or None if nothing was loaded.

        Raises:
            ValueError: If no locale is given and none is active.
            FileNotFoundError: If the manifest or a listed file is missing.
            TranslationFileError: If a file is not valid JSON.
        """
        locale = locale or self.delegate.locale
        if locale is None:
            raise ValueError("No locale given and no active locale to load")

        loader = ManifestTranslationLoader(
            self.asset_reader,
            lang_directory=self.lang_directory,
            lang_config_file=self.lang_config_file,
        )
        with bind_log_context(locale=str(locale)):
            translations = await loader.load(locale)
            if not translations:
                return None

            self.sentences.clear()
            self.sentences.update(translations)
            logger.info("translations_loaded", key_count=len(self.sentences))
        return self.sentences

    def should_reload(self, old: LocalizationsDelegate) -> bool:
        return False

    async def save_locale(self, locale: Optional[Locale] = None) -> None:
        """Persist a locale (default: the active locale).

        Raises:
            UnsupportedLocaleError: If the locale is not supported.
        """
        locale = locale or self.delegate.locale
        if not self.is_supported(locale):
            raise UnsupportedLocaleError(locale, "saved")

        await self.preferences.set_string(
            self.saved_locale_key, locale_to_preference(locale)
        )
        logger.info("locale_saved", locale=str(locale))

    async def get_saved_locale(self) -> Optional[Locale]:
        return locale_from_preference(
            await self.preferences.get_string(self.saved_locale_key)
        )

    async def delete_saved_locale(self) -> None:
        await self.preferences.remove(self.saved_locale_key)
