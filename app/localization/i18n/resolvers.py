"""Key resolution against translation tables.

Provides the lookup strategies for a single table (flat and namespaced)
and the resolver that chains them across the current language, the
fallback language and finally the literal key.
"""

from collections.abc import Mapping
from typing import Protocol

from localization.i18n.models import (
    KeyMode,
    Lookup,
    Resolution,
    ResolutionStatus,
    TranslationEntry,
)
from localization.i18n.selector import LanguageSelector
from localization.i18n.store import TranslationStore
from localization.logging import get_module_logger

logger = get_module_logger()


def _leaf(entry: object) -> Lookup:
    # Empty strings count as missing so the next fallback stage runs.
    if isinstance(entry, str) and entry:
        return Lookup.hit(entry)
    return Lookup.miss()


class LookupStrategy(Protocol):
    """Looks a key up in one table."""

    mode: KeyMode

    def lookup(self, table: Mapping[str, TranslationEntry], key: str) -> Lookup:
        ...


class FlatKeyResolver:
    """Exact key match. Delimiters in the key have no special meaning."""

    mode = KeyMode.FLAT

    def lookup(self, table: Mapping[str, TranslationEntry], key: str) -> Lookup:
        return _leaf(table.get(key))


class NamespacedKeyResolver:
    """Walks nested tables one key segment at a time.

    ``"incident.created"`` addresses ``table["incident"]["created"]``. A
    missing segment, or a segment that lands on a leaf before the path is
    exhausted, is a miss.
    """

    mode = KeyMode.NAMESPACED

    def __init__(self, delimiter: str = "."):
        self.delimiter = delimiter

    def lookup(self, table: Mapping[str, TranslationEntry], key: str) -> Lookup:
        node: object = table
        for segment in key.split(self.delimiter):
            if not isinstance(node, Mapping) or segment not in node:
                return Lookup.miss()
            node = node[segment]
        return _leaf(node)


class KeyResolver:
    """Resolves a key to a raw template through the fallback chain.

    Resolution order:
    1. Table of the current language
    2. Table of the fallback language
    3. The key itself

    Missing languages are treated as empty tables. Nothing here raises.
    """

    def __init__(self, strategy: LookupStrategy):
        self.strategy = strategy

    def lookup(self, store: TranslationStore, lang: str, key: str) -> Lookup:
        """Look a key up in one language without falling back."""
        return self.strategy.lookup(store.get_table(lang), key)

    def resolve(
        self,
        key: str,
        store: TranslationStore,
        selector: LanguageSelector,
    ) -> Resolution:
        """Resolve a key for the selector's current language.

        Args:
            key: Translation key, possibly dot-separated.
            store: Registry holding the translation tables.
            selector: Current and fallback language codes.

        Returns:
            Resolution carrying the template and the stage that produced it.
        """
        current = self.lookup(store, selector.current_lang, key)
        if current.found:
            return Resolution(
                key=key,
                template=current.value,
                status=ResolutionStatus.RESOLVED,
                language=selector.current_lang,
            )

        fallback = self.lookup(store, selector.fallback_lang, key)
        if fallback.found:
            logger.debug(
                "used_fallback_translation",
                key=key,
                requested_lang=selector.current_lang,
                fallback_lang=selector.fallback_lang,
            )
            return Resolution(
                key=key,
                template=fallback.value,
                status=ResolutionStatus.FALLBACK_USED,
                language=selector.fallback_lang,
            )

        logger.debug(
            "translation_key_echoed",
            key=key,
            requested_lang=selector.current_lang,
            fallback_lang=selector.fallback_lang,
        )
        return Resolution(
            key=key,
            template=key,
            status=ResolutionStatus.KEY_ECHOED,
        )


def create_key_resolver(
    mode: KeyMode = KeyMode.FLAT,
    delimiter: str = ".",
) -> KeyResolver:
    """Create a KeyResolver for the given lookup mode.

    Args:
        mode: KeyMode or its string value ("flat", "namespaced").
        delimiter: Path separator for namespaced lookups.

    Raises:
        ValueError: If mode is not a known KeyMode.
    """
    mode = KeyMode(mode)
    if mode == KeyMode.NAMESPACED:
        return KeyResolver(NamespacedKeyResolver(delimiter=delimiter))
    return KeyResolver(FlatKeyResolver())
