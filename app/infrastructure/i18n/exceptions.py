"""Exceptions raised by the i18n system."""

from typing import Optional


class UnsupportedLocaleError(ValueError):
    """A locale outside the supported locales was set, saved or loaded."""

    def __init__(self, locale: object, action: str = "used"):
        self.locale = locale
        super().__init__(
            f"The locale ({locale}) that is being {action} is not contained "
            "in the supported locales"
        )


class TranslationFileError(ValueError):
    """A manifest or translation file could not be parsed."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(f"{message} ({path})" if path else message)


class PreferencesError(ValueError):
    """The persisted preferences could not be read."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(f"{message} ({path})" if path else message)
