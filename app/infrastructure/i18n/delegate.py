"""Framework-facing localization delegate.

The host UI framework asks a ``LocalizationsDelegate`` for the resources of a
locale. ``TranslatorProviderDelegate`` picks the locale to activate and hands
the actual loading to the translator provider it was built for.
"""

from abc import ABC, abstractmethod
from typing import Optional, Protocol, Sequence, runtime_checkable

from infrastructure.events import Event
from infrastructure.i18n.exceptions import UnsupportedLocaleError
from infrastructure.i18n.models import Locale, TranslationTable
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LOAD_REQUESTED_EVENT = "translator.load_requested"


class LocalizationsDelegate(ABC):
    """Contract the host framework uses to obtain localized resources."""

    @abstractmethod
    async def load(self, locale: Optional[Locale] = None) -> Optional[TranslationTable]:
        """Load the resources for a locale."""

    @abstractmethod
    def is_supported(self, locale: Optional[Locale]) -> bool:
        """Whether resources can be provided for the locale."""

    @abstractmethod
    def should_reload(self, old: "LocalizationsDelegate") -> bool:
        """Whether the framework must reload when this delegate replaces old."""


class TranslationSource(Protocol):
    """Provider capabilities the delegate relies on."""

    async def get_saved_locale(self) -> Optional[Locale]: ...

    async def default_supported_locale(self) -> Optional[Locale]: ...

    async def load(self, locale: Optional[Locale] = None) -> Optional[TranslationTable]: ...

    def is_supported(self, locale: Optional[Locale]) -> bool: ...

    def should_reload(self, old: LocalizationsDelegate) -> bool: ...


@runtime_checkable
class LoadEventSink(Protocol):
    """Event-driven providers receive load requests as events."""

    def add(self, event: Event) -> None: ...


def load_requested_event(locale: Locale) -> Event:
    return Event(event_type=LOAD_REQUESTED_EVENT, metadata={"locale": locale})


class TranslatorProviderDelegate(LocalizationsDelegate):
    """Resolves the locale to activate and triggers the provider load.

    Attributes:
        supported_locales: Immutable, non-empty supported locales; the first
            one is the fallback default.
        provider: Provider doing the loading.
        lang_config_file: Manifest file name.
        lang_directory: Directory prefix of the manifest and translation files.
    """

    def __init__(
        self,
        supported_locales: Sequence[Locale],
        provider: TranslationSource,
        locale: Optional[Locale] = None,
        lang_config_file: str = "config.json",
        lang_directory: str = "assets/lang/",
    ):
        if not supported_locales:
            raise ValueError("supported_locales must contain at least one locale")
        self.supported_locales = tuple(supported_locales)
        self.provider = provider
        self.lang_config_file = lang_config_file
        self.lang_directory = lang_directory
        self._locale = locale

    @property
    def locale(self) -> Optional[Locale]:
        """Locale activated by the last load, if any."""
        return self._locale

    async def resolve_locale(self, locale: Optional[Locale] = None) -> Locale:
        """Pick the locale to activate.

        Order: requested, persisted, device default resolved against the
        supported locales, first supported locale.
        """
        if locale is not None:
            return locale

        saved = await self.provider.get_saved_locale()
        if saved is not None:
            logger.debug("using_saved_locale", locale=str(saved))
            return saved

        default = await self.provider.default_supported_locale()
        if default is not None:
            return default

        return self.supported_locales[0]

    async def load(self, locale: Optional[Locale] = None) -> Optional[TranslationTable]:
        """Activate the resolved locale and trigger exactly one load.

        Returns:
            The loaded table, or None when nothing was loaded or the load
            was handed to an event-driven provider.

        Raises:
            UnsupportedLocaleError: If the resolved locale is not supported.
        """
        locale = await self.resolve_locale(locale)
        if not self.is_supported(locale):
            raise UnsupportedLocaleError(locale, "loaded")

        self._locale = locale

        if isinstance(self.provider, LoadEventSink):
            self.provider.add(load_requested_event(locale))
            return None
        return await self.provider.load(locale)

    def is_supported(self, locale: Optional[Locale]) -> bool:
        return self.provider.is_supported(locale)

    def should_reload(self, old: LocalizationsDelegate) -> bool:
        return self.provider.should_reload(old)
