"""Active and fallback language tracking."""

from localization.i18n.store import TranslationStore
from localization.logging import get_module_logger

logger = get_module_logger()


class LanguageSelector:
    """Tracks the current and fallback language codes.

    ``set_language`` only ever assigns a registered language or the
    fallback code. ``configure`` is the unchecked initialization path.

    Attributes:
        store: Registry used to validate language switches.
        current_lang: Language consulted first when resolving keys.
        fallback_lang: Language consulted when the current one lacks a key.
    """

    def __init__(
        self,
        store: TranslationStore,
        current_lang: str = "en",
        fallback_lang: str = "en",
    ):
        self.store = store
        self.current_lang = current_lang
        self.fallback_lang = fallback_lang

    def configure(self, default_lang: str, fallback_lang: str) -> None:
        """Assign both codes without checking the registry."""
        self.current_lang = default_lang
        self.fallback_lang = fallback_lang

    def set_language(self, lang: str) -> str:
        """Switch the current language, falling back when it is unknown.

        Args:
            lang: Language code to make current.

        Returns:
            The language code that is now current.
        """
        if self.store.has_language(lang):
            self.current_lang = lang
        else:
            logger.warning(
                "language_not_available",
                lang=lang,
                fallback_lang=self.fallback_lang,
            )
            self.current_lang = self.fallback_lang
        return self.current_lang
