"""Translation loading interface and implementations.

Defines the asset reader contract and the manifest based loader that merges
the JSON translation files of a locale into one flat table.

Expected manifest format (``config.json`` by default):

    {
      "en": [
        "common.json",
        {"prefix": "home", "filename": "home.json"}
      ],
      "en_US": ["common.json", "us.json"]
    }
"""

import asyncio
import json
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Any, Optional, Union

from infrastructure.i18n.exceptions import TranslationFileError
from infrastructure.i18n.models import (
    Locale,
    Manifest,
    ManifestEntry,
    PrefixedEntry,
    TranslationTable,
    stringify_value,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class AssetReader(ABC):
    """Abstract reader for bundled text assets."""

    @abstractmethod
    async def read_text(self, path: str) -> str:
        """Read an asset as text.

        Args:
            path: Asset path, e.g. "assets/lang/config.json".

        Returns:
            File contents.

        Raises:
            FileNotFoundError: If the asset does not exist.
        """


class FileAssetReader(AssetReader):
    """Reads assets from the file system.

    Attributes:
        base_dir: Optional directory relative paths are resolved against.
    """

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def resolve(self, path: str) -> Path:
        if self.base_dir is None:
            return Path(path)
        return self.base_dir / path

    async def read_text(self, path: str) -> str:
        return await asyncio.to_thread(self.resolve(path).read_text, encoding="utf-8")


class PackageAssetReader(AssetReader):
    """Reads assets shipped inside a Python package via importlib.resources."""

    def __init__(self, package: str):
        self.package = package

    async def read_text(self, path: str) -> str:
        resource = resources.files(self.package).joinpath(path)
        return await asyncio.to_thread(resource.read_text, encoding="utf-8")


def parse_json(text: str, path: str) -> Any:
    """Parse a JSON document, wrapping decode errors with the path."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("json_parse_error", file=path, error=str(e))
        raise TranslationFileError(f"Failed to parse JSON: {e}", path=path) from e


class ManifestTranslationLoader:
    """Loads the translations of a locale as listed by the manifest.

    Files are read one after the other, in manifest order; later files
    overwrite keys of earlier ones.

    Attributes:
        reader: AssetReader used for the manifest and translation files.
        lang_directory: Prefix prepended to every file name.
        lang_config_file: Manifest file name.
    """

    def __init__(
        self,
        reader: AssetReader,
        lang_directory: str = "assets/lang/",
        lang_config_file: str = "config.json",
    ):
        self.reader = reader
        self.lang_directory = lang_directory
        self.lang_config_file = lang_config_file

    @property
    def manifest_path(self) -> str:
        return f"{self.lang_directory}{self.lang_config_file}"

    async def load_manifest(self) -> Manifest:
        """Read and parse the manifest.

        Raises:
            FileNotFoundError: If the manifest is missing.
            TranslationFileError: If the manifest is malformed.
        """
        path = self.manifest_path
        data = parse_json(await self.reader.read_text(path), path)
        return Manifest.from_dict(data, source=path)

    async def load_entry(self, entry: ManifestEntry) -> TranslationTable:
        """Read one translation file, applying the entry prefix to its keys.

        Raises:
            FileNotFoundError: If the file is missing.
            TranslationFileError: If the file is not a JSON object.
        """
        path = f"{self.lang_directory}{entry.filename}"
        data = parse_json(await self.reader.read_text(path), path)
        if not isinstance(data, dict):
            raise TranslationFileError(
                "Translation file must be a JSON object", path=path
            )

        if isinstance(entry, PrefixedEntry):
            return {entry.apply(key): stringify_value(v) for key, v in data.items()}
        return {key: stringify_value(v) for key, v in data.items()}

    async def load(self, locale: Locale) -> Optional[TranslationTable]:
        """Load and merge the translation files of a locale.

        Args:
            locale: Locale whose manifest entry is loaded.

        Returns:
            The merged table, or None when the manifest has no entry for the
            locale or all its files are empty.
        """
        manifest = await self.load_manifest()
        entries = manifest.entries_for(locale)
        if not entries:
            logger.info(
                "locale_not_in_manifest",
                locale=str(locale),
                manifest=manifest.source,
            )
            return None

        translations: TranslationTable = {}
        for entry in entries:
            table = await self.load_entry(entry)
            if not table:
                logger.debug("empty_translation_file", filename=entry.filename)
                continue
            translations.update(table)

        if not translations:
            logger.info("no_translations_found", locale=str(locale))
            return None

        logger.info(
            "merged_translation_files",
            locale=str(locale),
            file_count=len(entries),
            key_count=len(translations),
        )
        return translations
