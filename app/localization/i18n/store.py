"""In-memory registry of translation tables keyed by language code."""

from typing import Dict, List, Mapping

from localization.i18n.models import TranslationEntry, TranslationTable
from localization.logging import get_module_logger

logger = get_module_logger()


class TranslationStore:
    """Holds one translation table per language code.

    Languages are never removed. Adding a language that is already known
    merges the new keys over the existing table (last write wins per key).
    """

    def __init__(self):
        self._languages: Dict[str, TranslationTable] = {}

    def add_language(
        self, lang: str, translations: Mapping[str, TranslationEntry]
    ) -> None:
        """Add or update a language with translations.

        Args:
            lang: Language code (e.g., "en", "fr").
            translations: Key/value pairs merged shallowly into the table.
        """
        if lang not in self._languages:
            self._languages[lang] = {}
        self._languages[lang].update(translations)
        logger.debug(
            "language_added",
            lang=lang,
            merged_keys=len(translations),
            total_keys=len(self._languages[lang]),
        )

    def get_table(self, lang: str) -> TranslationTable:
        """Return the table for a language, or an empty table if unknown."""
        return self._languages.get(lang, {})

    def has_language(self, lang: str) -> bool:
        return lang in self._languages

    @property
    def languages(self) -> List[str]:
        """Registered language codes in registration order."""
        return list(self._languages.keys())

    def __contains__(self, lang: object) -> bool:
        return lang in self._languages

    def __len__(self) -> int:
        return len(self._languages)
