"""Translation feature settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation loading and locale persistence configuration.

    Environment Variables:
        I18N_SUPPORTED_LOCALES: Comma separated locales, first one is the
            fallback default (default: "en")
        I18N_LANG_DIRECTORY: Directory prefix of the manifest and translation
            files (default: "assets/lang/")
        I18N_LANG_CONFIG_FILE: Manifest file name (default: "config.json")
        I18N_PREFERENCES_PATH: JSON file holding persisted preferences
            (default: ".app_state/preferences.json")
        I18N_MATCH_COUNTRY_CODE: Require country codes to match when a
            supported locale carries one (default: False)

    Example:
        ```python
        from infrastructure.configuration import settings

        locales = settings.i18n.supported_locale_codes
        manifest = settings.i18n.lang_directory + settings.i18n.lang_config_file
        ```
    """

    supported_locales: str = Field(
        default="en",
        alias="I18N_SUPPORTED_LOCALES",
        description="Comma separated list of supported locales",
    )
    lang_directory: str = Field(
        default="assets/lang/",
        alias="I18N_LANG_DIRECTORY",
        description="Directory prefix for the manifest and translation files",
    )
    lang_config_file: str = Field(
        default="config.json",
        alias="I18N_LANG_CONFIG_FILE",
        description="Manifest file mapping locales to translation files",
    )
    preferences_path: str = Field(
        default=".app_state/preferences.json",
        alias="I18N_PREFERENCES_PATH",
        description="JSON file used to persist the selected locale",
    )
    match_country_code: bool = Field(
        default=False,
        alias="I18N_MATCH_COUNTRY_CODE",
        description="Compare country codes when checking supported locales",
    )

    @field_validator("supported_locales", mode="before")
    @classmethod
    def _join_locales(cls, v):
        """Accept a list as well as a comma separated string."""
        if isinstance(v, (list, tuple)):
            return ",".join(str(item) for item in v)
        return v

    @property
    def supported_locale_codes(self) -> list[str]:
        """Supported locales as a list, blanks removed."""
        return [
            code.strip() for code in self.supported_locales.split(",") if code.strip()
        ]
