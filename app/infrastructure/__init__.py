"""Infrastructure modules for the translator application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging setup and context binding
- events: In-process event dispatcher
- i18n: Locale resolution, translation loading and locale persistence
- services: Application-scoped providers (get_settings, get_translator_provider)
"""
