"""Device locale queries.

The system source reads the POSIX locale environment the same way gettext
does (``LANGUAGE`` first, then ``LC_ALL``, ``LC_MESSAGES`` and ``LANG``) and
falls back to the interpreter's locale settings.
"""

import locale as _locale
import os
from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Sequence

from infrastructure.i18n.models import Locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()

_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")
_NEUTRAL_LOCALES = {"", "c", "posix"}


class DeviceLocaleSource(ABC):
    """Abstract source of the user's device locales."""

    @abstractmethod
    async def get_preferred_locales(self) -> List[Locale]:
        """Return the device locales in preference order."""

    async def get_current_locale(self) -> Optional[Locale]:
        """Return the most preferred device locale, or None if unknown."""
        preferred = await self.get_preferred_locales()
        return preferred[0] if preferred else None


class StaticDeviceLocaleSource(DeviceLocaleSource):
    """Fixed list of locales, for tests and platforms without a locale API."""

    def __init__(self, locales: Sequence[Locale] = ()):
        self.locales = list(locales)

    async def get_preferred_locales(self) -> List[Locale]:
        return list(self.locales)


def parse_posix_locale(value: str) -> Optional[Locale]:
    """Parse values such as ``fr_CA.UTF-8`` or ``de_DE@euro``.

    Returns:
        The locale, or None for empty and neutral ("C", "POSIX") values.
    """
    name = value.split(".", 1)[0].split("@", 1)[0].strip()
    if name.lower() in _NEUTRAL_LOCALES:
        return None
    return Locale.from_string(name)


class SystemDeviceLocaleSource(DeviceLocaleSource):
    """Reads the device locales from the process environment.

    Attributes:
        environ: Mapping to read variables from (default: os.environ).
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = environ if environ is not None else os.environ

    def _candidates(self) -> List[str]:
        values: List[str] = []
        for var in _ENV_VARS:
            raw = self.environ.get(var)
            if not raw:
                continue
            if var == "LANGUAGE":
                values.extend(raw.split(":"))
            else:
                values.append(raw)
        if not values:
            lang = _locale.getlocale()[0]
            if lang:
                values.append(lang)
        return values

    async def get_preferred_locales(self) -> List[Locale]:
        preferred: List[Locale] = []
        for value in self._candidates():
            parsed = parse_posix_locale(value)
            if parsed is not None and parsed not in preferred:
                preferred.append(parsed)

        if not preferred:
            logger.debug("device_locale_unknown")
        return preferred
