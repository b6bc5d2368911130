"""Localization context object.

Ties together the translation store, the language selector, the key
resolver and the formatter behind the public translation API.
"""

from typing import Any, List, Mapping, Optional

from localization.i18n.detector import LocaleDetector
from localization.i18n.formatter import Formatter
from localization.i18n.models import (
    KeyMode,
    Resolution,
    Translation,
    TranslationEntry,
)
from localization.i18n.pluralizer import Number, Pluralizer
from localization.i18n.resolvers import KeyResolver, create_key_resolver
from localization.i18n.selector import LanguageSelector
from localization.i18n.store import TranslationStore
from localization.logging import get_module_logger

logger = get_module_logger()


class Localization:
    """Manages translation tables, language switching and lookups.

    Each instance owns its own registry and selector state, so separate
    instances never share languages or the current language.

    Usage:
        l10n = Localization()
        l10n.init(
            default_lang="en",
            languages={
                "en": {"greeting": "Hello, {{name}}!"},
                "fr": {"greeting": "Bonjour, {{name}}!"},
            },
            fallback_lang="en",
        )
        l10n.set_language("fr")
        l10n.t("greeting", {"name": "Ana"})  # "Bonjour, Ana!"

    Attributes:
        store: Registry of translation tables.
        selector: Current and fallback language codes.
        resolver: Fallback chain used to find raw templates.
        formatter: Pluralization and parameter substitution.
        detector: Host locale detection.
    """

    def __init__(
        self,
        key_mode: KeyMode = KeyMode.FLAT,
        delimiter: str = ".",
        resolver: Optional[KeyResolver] = None,
        pluralizer: Optional[Pluralizer] = None,
        detector: Optional[LocaleDetector] = None,
    ):
        self.store = TranslationStore()
        self.selector = LanguageSelector(self.store)
        self.resolver = resolver or create_key_resolver(key_mode, delimiter)
        self.formatter = Formatter(pluralizer or Pluralizer())
        self.detector = detector or LocaleDetector()

    @property
    def key_mode(self) -> KeyMode:
        return self.resolver.strategy.mode

    @property
    def current_lang(self) -> str:
        return self.selector.current_lang

    @property
    def fallback_lang(self) -> str:
        return self.selector.fallback_lang

    def init(
        self,
        default_lang: str = "en",
        languages: Optional[Mapping[str, Mapping[str, TranslationEntry]]] = None,
        fallback_lang: str = "en",
        detect_locale: bool = False,
    ) -> None:
        """Set the default and fallback languages and register translations.

        The default language is assigned as given, even if it has no table.

        Args:
            default_lang: Language code made current (e.g., "en").
            languages: Language codes mapped to their translation tables.
            fallback_lang: Language consulted when a key is missing.
            detect_locale: Switch to the host locale after registration.
        """
        self.selector.configure(default_lang, fallback_lang)

        for lang, translations in (languages or {}).items():
            self.add_language(lang, translations)

        logger.info(
            "localization_initialized",
            default_lang=default_lang,
            fallback_lang=fallback_lang,
            languages=self.store.languages,
        )

        if detect_locale:
            self.detect_and_set_locale()

    def add_language(
        self, lang: str, translations: Mapping[str, TranslationEntry]
    ) -> None:
        """Add a language or merge new translations into an existing one."""
        self.store.add_language(lang, translations)

    def set_language(self, lang: str) -> None:
        """Set the current language, or the fallback if it is not registered."""
        self.selector.set_language(lang)

    def detect_and_set_locale(self) -> str:
        """Switch to the host locale's language, or to the fallback.

        Returns:
            The language code that is now current.
        """
        return self.detector.detect_and_set_locale(self.store, self.selector)

    def pluralize(self, word: str, count: Number, inclusive: bool = False) -> str:
        """Return the form of ``word`` matching ``count``.

        If ``inclusive`` is True the count is prefixed to the result,
        e.g. ``pluralize("apple", 3, True) == "3 apples"``.
        """
        return self.formatter.pluralizer.pluralize(word, count, inclusive)

    def resolve(self, key: str) -> Resolution:
        """Find the raw template for a key without formatting it."""
        return self.resolver.resolve(key, self.store, self.selector)

    def translate(
        self,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
        count: Optional[Number] = None,
    ) -> Translation:
        """Retrieve and format a translation along with its resolution status.

        Args:
            key: Translation key to look up.
            params: Values substituted for ``{{name}}`` placeholders.
            count: When given, the template is pluralized for this count.

        Returns:
            Translation with the formatted text and the fallback stage used.
        """
        resolution = self.resolve(key)
        text = self.formatter.format(resolution.template, params, count)
        return Translation(
            text=text,
            status=resolution.status,
            language=resolution.language,
        )

    def t(
        self,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
        count: Optional[Number] = None,
    ) -> str:
        """Retrieve and format a translation string.

        Looks the key up in the current language, then the fallback language,
        and returns the key itself when neither has it.
        """
        return self.translate(key, params, count).text

    def has_message(self, key: str, lang: Optional[str] = None) -> bool:
        """Check if a key resolves in one language, without falling back.

        Args:
            key: Translation key to check.
            lang: Language to check (default: current language).
        """
        if lang is None:
            lang = self.selector.current_lang
        return self.resolver.lookup(self.store, lang, key).found

    def get_available_languages(self) -> List[str]:
        """Get the registered language codes."""
        return self.store.languages
