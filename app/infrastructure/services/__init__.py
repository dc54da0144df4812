"""
Application-scoped services.

Provides the provider functions shared across the application.
"""

from infrastructure.services.providers import get_settings, get_translator_provider

__all__ = [
    "get_settings",
    "get_translator_provider",
]
