"""Locale resolution against the supported locales.

Matching rule: a supported locale matches a candidate when their language
codes are equal (case-insensitive). Country codes are only compared when
``match_country`` is set; by default a supported ``en_US`` matches any
English candidate, which is the behaviour persisted preferences and existing
callers rely on.
"""

from typing import Iterable, Optional, Sequence

from infrastructure.i18n.models import Locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def matches_locale(
    supported: Locale, candidate: Locale, match_country: bool = False
) -> bool:
    """Check whether a supported locale accepts a candidate locale.

    Args:
        supported: Entry of the supported locales.
        candidate: Locale being checked.
        match_country: Also compare country codes when the supported entry
            carries one.

    Returns:
        True if the candidate is compatible with the supported entry.
    """
    if supported.language_code.lower() != candidate.language_code.lower():
        return False
    if match_country and supported.country_code:
        return supported.country_code.lower() == (candidate.country_code or "").lower()
    return True


def is_supported(
    locale: Optional[Locale],
    supported_locales: Iterable[Locale],
    match_country: bool = False,
) -> bool:
    """Check if a locale is compatible with any supported locale."""
    if locale is None:
        logger.warning("locale_to_check_is_none")
        return False
    return any(
        matches_locale(loc, locale, match_country) for loc in supported_locales
    )


def resolve_supported_locale(
    locale: Optional[Locale],
    supported_locales: Sequence[Locale],
    candidates: Optional[Iterable[Locale]] = None,
    match_country: bool = False,
) -> Locale:
    """Resolve the locale to use among the candidates.

    Args:
        locale: Requested locale.
        supported_locales: Supported locales; the first one is the fallback.
        candidates: Locales to scan in order (default: supported_locales).
        match_country: Also compare country codes.

    Returns:
        The first compatible candidate, or the first supported locale.
    """
    if locale is None:
        logger.warning("locale_to_resolve_is_none", fallback=str(supported_locales[0]))
        return supported_locales[0]

    for loc in candidates if candidates is not None else supported_locales:
        if matches_locale(loc, locale, match_country):
            return loc

    logger.info(
        "no_matching_supported_locale",
        locale=str(locale),
        fallback=str(supported_locales[0]),
    )
    return supported_locales[0]
