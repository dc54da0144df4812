"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_provider,
    make_supported_locales,
    write_lang_assets,
)

__all__ = [
    "make_provider",
    "make_supported_locales",
    "write_lang_assets",
]
