"""
Application-scoped providers.

Each provider builds its object once per process from the application
settings. Providers take no configuration arguments; clear their caches to
rebuild after the environment changes.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import TranslatorProvider, create_translator_provider


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator_provider() -> TranslatorProvider:
    """
    Get the application-scoped translator provider.

    Returns:
        TranslatorProvider: Cached provider configured from ``get_settings()``.

    Usage:
        provider = get_translator_provider()
        await provider.delegate.load()
        title = provider.t("title", prefix="home")
    """
    return create_translator_provider(get_settings())
