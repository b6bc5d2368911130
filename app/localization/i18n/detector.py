"""Locale detection from the host environment.

The environment lookup is an injected callable returning a language tag
such as ``"en-US"``; ``system_locale`` is the default implementation.
"""

import locale
import os
from typing import Callable, Optional

from localization.i18n.selector import LanguageSelector
from localization.i18n.store import TranslationStore
from localization.logging import get_module_logger

logger = get_module_logger()

LocaleProvider = Callable[[], Optional[str]]

_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")
_NEUTRAL_LOCALES = ("C", "POSIX")


def _to_tag(value: Optional[str]) -> Optional[str]:
    # "en_US.UTF-8@euro" -> "en-US"
    if not value:
        return None
    value = value.split(".")[0].split("@")[0].strip()
    if not value or value in _NEUTRAL_LOCALES:
        return None
    return value.replace("_", "-")


def system_locale() -> Optional[str]:
    """Return the host locale as a hyphenated tag, or None if unset."""
    for var in _LOCALE_ENV_VARS:
        tag = _to_tag(os.environ.get(var))
        if tag:
            return tag
    try:
        return _to_tag(locale.getlocale()[0])
    except ValueError:
        return None


def primary_subtag(tag: str) -> str:
    """Return the language part of a tag ("en" for "en-US")."""
    return tag.split("-")[0].strip().lower()


class LocaleDetector:
    """Maps the host locale onto a registered language code.

    Attributes:
        locale_provider: Callable returning the host language tag.
    """

    def __init__(self, locale_provider: Optional[LocaleProvider] = None):
        self.locale_provider = locale_provider or system_locale

    def detect(self, store: TranslationStore) -> Optional[str]:
        """Return the registered language matching the host locale, if any."""
        tag = self.locale_provider()
        if not tag:
            logger.debug("no_host_locale")
            return None

        lang = primary_subtag(tag)
        if store.has_language(lang):
            logger.debug("detected_locale", tag=tag, lang=lang)
            return lang

        logger.debug("detected_locale_not_registered", tag=tag, lang=lang)
        return None

    def detect_and_set_locale(
        self, store: TranslationStore, selector: LanguageSelector
    ) -> str:
        """Switch the selector to the detected language or to the fallback.

        Returns:
            The language code that is now current.
        """
        lang = self.detect(store)
        return selector.set_language(lang or selector.fallback_lang)
