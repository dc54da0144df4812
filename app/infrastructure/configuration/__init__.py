"""Infrastructure configuration module - public API.

This module provides centralized configuration management using Pydantic
BaseSettings with domain-based organization.

Exports:
    settings: Settings instance built from the environment at import time
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    directory = settings.i18n.lang_directory
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.features import I18nSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
