"""Feature-level fixtures for i18n system tests.

Provides translation assets on disk and providers wired to them.
"""

import pytest

from tests.factories.i18n import make_provider, write_lang_assets


@pytest.fixture
def lang_dir(tmp_path):
    """Directory with a manifest covering en, fr_CA and an empty de entry.

    - en: common.json + home.json (prefix "home")
    - fr_CA: common_fr.json
    - de: no files
    """
    return write_lang_assets(
        tmp_path / "lang",
        manifest={
            "en": ["common.json", {"prefix": "home", "filename": "home.json"}],
            "FR_ca": ["common_fr.json"],
            "de": [],
        },
        files={
            "common.json": {"hi": "Hello"},
            "home.json": {"title": "Welcome"},
            "common_fr.json": {"hi": "Bonjour", "bye": "Au revoir"},
        },
    )


@pytest.fixture
def provider(lang_dir):
    """TranslatorProvider over lang_dir; nothing persisted, no device locale."""
    return make_provider(lang_dir)
