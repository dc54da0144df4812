"""Translation models for i18n system.

Defines the locale value type, the manifest describing which translation
files make up a locale, and the flat translation table type.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from infrastructure.i18n.exceptions import TranslationFileError
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Flat key -> string mapping used for lookups.
TranslationTable = Dict[str, str]


@dataclass(frozen=True, eq=False)
class Locale:
    """Language identifier optionally qualified by a country code.

    Comparison and hashing are case-insensitive, so ``Locale("EN", "us")``
    equals ``Locale("en", "US")``.

    Attributes:
        language_code: Language part (e.g. "en").
        country_code: Optional country part (e.g. "US").
    """

    language_code: str
    country_code: Optional[str] = None

    def __str__(self) -> str:
        """Return the ``language_COUNTRY`` form used as manifest key."""
        if self.country_code:
            return f"{self.language_code}_{self.country_code}"
        return self.language_code

    def _key(self) -> tuple:
        return (self.language_code.lower(), (self.country_code or "").lower())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Locale):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Parse ``"en"``, ``"en_US"`` or ``"en-US"`` into a Locale.

        Args:
            locale_str: Locale string.

        Returns:
            Parsed Locale.

        Raises:
            ValueError: If the string has no language part.
        """
        parts = locale_str.strip().replace("-", "_").split("_")
        if not parts[0]:
            raise ValueError(f"Invalid locale string: {locale_str!r}")
        if len(parts) > 1 and parts[-1]:
            return cls(parts[0], parts[-1])
        return cls(parts[0])


@dataclass(frozen=True)
class PlainEntry:
    """Manifest entry whose keys are merged unprefixed."""

    filename: str


@dataclass(frozen=True)
class PrefixedEntry:
    """Manifest entry whose keys are merged as ``{prefix}_{key}``."""

    prefix: str
    filename: str

    def apply(self, key: str) -> str:
        return f"{self.prefix}_{key}"


ManifestEntry = Union[PlainEntry, PrefixedEntry]


def parse_manifest_entry(raw: Any, source: str = "") -> Optional[ManifestEntry]:
    """Build a manifest entry from its JSON form.

    Args:
        raw: A filename string or a ``{"prefix", "filename"}`` object.
        source: Manifest path, used in errors and logs.

    Returns:
        The entry, or None for values that are neither strings nor objects.

    Raises:
        TranslationFileError: If an object entry has no filename.
    """
    if isinstance(raw, str):
        return PlainEntry(raw)
    if isinstance(raw, dict):
        filename = raw.get("filename")
        if not filename:
            raise TranslationFileError(
                f"Manifest entry without filename: {raw!r}", path=source
            )
        prefix = raw.get("prefix")
        if prefix:
            return PrefixedEntry(prefix=str(prefix), filename=str(filename))
        return PlainEntry(str(filename))

    logger.warning("invalid_manifest_entry", source=source, entry=repr(raw))
    return None


@dataclass
class Manifest:
    """Mapping of locale strings to the translation files of that locale.

    Entries are kept in their JSON form and parsed when a locale is looked
    up, so a malformed entry only fails loads of its own locale.

    Attributes:
        locales: Locale string (as written in the file) -> raw entry list.
        source: Path the manifest was read from.
    """

    locales: Dict[str, List[Any]] = field(default_factory=dict)
    source: str = ""

    @classmethod
    def from_dict(cls, data: Any, source: str = "") -> "Manifest":
        """Build a manifest from parsed JSON.

        Args:
            data: Parsed manifest document.
            source: Path the document was read from.

        Returns:
            Manifest instance.

        Raises:
            TranslationFileError: If the document is not a JSON object.
        """
        if not isinstance(data, dict):
            raise TranslationFileError(
                "Manifest must be a JSON object", path=source
            )

        locales: Dict[str, List[Any]] = {}
        for key, raw_entries in data.items():
            if not isinstance(raw_entries, list):
                logger.warning(
                    "invalid_manifest_locale", source=source, locale=key
                )
                continue
            locales[key] = raw_entries
        return cls(locales=locales, source=source)

    def entries_for(self, locale: Locale) -> Optional[List[ManifestEntry]]:
        """Return the entries whose key case-insensitively equals the locale.

        No language-only fallback: a manifest listing only "en" has no
        entries for ``Locale("en", "US")``.

        Raises:
            TranslationFileError: If an entry of that locale is malformed.
        """
        wanted = str(locale).lower()
        for key, raw_entries in self.locales.items():
            if key.lower() == wanted:
                entries = [
                    parse_manifest_entry(raw, self.source) for raw in raw_entries
                ]
                return [entry for entry in entries if entry is not None]
        return None


def stringify_value(value: Any) -> str:
    """Render a JSON value the way it is shown on lookup."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)
