"""Durable key-value storage for user preferences.

The translator only needs string values: the selected locale is stored as
``"{language_code}_{country_code}"`` under ``SAVED_LOCALE_KEY``.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from infrastructure.i18n.exceptions import PreferencesError
from infrastructure.i18n.models import Locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()

SAVED_LOCALE_KEY = "savedLocale"


def locale_to_preference(locale: Locale) -> str:
    """Encode a locale for storage.

    The country segment is always written, so a language-only locale is
    stored with a trailing underscore ("en_").
    """
    return f"{locale.language_code}_{locale.country_code or ''}"


def locale_from_preference(value: Optional[str]) -> Optional[Locale]:
    """Decode a stored locale; empty or missing values give None."""
    if not value:
        return None
    parts = value.split("_")
    if len(parts) > 1 and parts[-1]:
        return Locale(parts[0], parts[-1])
    return Locale(parts[0])


class PreferencesStore(ABC):
    """Abstract string key-value store."""

    @abstractmethod
    async def get_string(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if absent."""

    @abstractmethod
    async def set_string(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Remove key; removing an absent key is not an error."""


class InMemoryPreferencesStore(PreferencesStore):
    """Process-local store, for tests and ephemeral sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    async def get_string(self, key: str) -> Optional[str]:
        return self.values.get(key)

    async def set_string(self, key: str, value: str) -> None:
        self.values[key] = value

    async def remove(self, key: str) -> None:
        self.values.pop(key, None)


class JsonFilePreferencesStore(PreferencesStore):
    """Store persisted as a flat JSON object in a single file.

    Writes go to a temporary sibling file that then replaces the target.

    Attributes:
        path: Location of the JSON file; parent directories are created on
            first write.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.error("preferences_parse_error", path=str(self.path), error=str(e))
            raise PreferencesError(f"Invalid preferences file: {e}", str(self.path)) from e
        if not isinstance(data, dict):
            raise PreferencesError("Preferences must be a JSON object", str(self.path))
        return data

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)

    def _update(self, key: str, value: Optional[str]) -> None:
        data = self._read()
        if value is None:
            if key not in data:
                return
            data.pop(key)
        else:
            data[key] = value
        self._write(data)

    async def get_string(self, key: str) -> Optional[str]:
        data = await asyncio.to_thread(self._read)
        value = data.get(key)
        return None if value is None else str(value)

    async def set_string(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._update, key, value)
        logger.debug("preference_saved", key=key, path=str(self.path))

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._update, key, None)
