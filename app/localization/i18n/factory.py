"""Factory functions for creating configured Localization instances."""

from typing import Mapping, Optional

from localization.configuration import LocalizationSettings, get_settings
from localization.i18n.detector import LocaleDetector
from localization.i18n.models import KeyMode, TranslationEntry
from localization.i18n.translator import Localization
from localization.logging import get_module_logger

logger = get_module_logger()


def create_localization(
    settings: Optional[LocalizationSettings] = None,
    languages: Optional[Mapping[str, Mapping[str, TranslationEntry]]] = None,
    detector: Optional[LocaleDetector] = None,
) -> Localization:
    """Create and initialize a Localization instance from settings.

    Args:
        settings: Resolver settings (default: the application settings).
        languages: Language codes mapped to their translation tables.
        detector: Locale detector used when DETECT_LOCALE is enabled.

    Returns:
        Localization: Initialized instance

    Usage:
        l10n = create_localization(languages={"en": {"greeting": "Hello"}})

        l10n = create_localization(
            LocalizationSettings(I18N_KEY_MODE="namespaced"),
            languages={"en": {"incident": {"created": "Created"}}},
        )
    """
    if settings is None:
        settings = get_settings().i18n

    instance = Localization(
        key_mode=KeyMode(settings.KEY_MODE),
        delimiter=settings.KEY_DELIMITER,
        detector=detector,
    )
    instance.init(
        default_lang=settings.DEFAULT_LANG,
        languages=languages,
        fallback_lang=settings.FALLBACK_LANG,
        detect_locale=settings.DETECT_LOCALE,
    )

    logger.info(
        "localization_created",
        key_mode=settings.KEY_MODE,
        current_lang=instance.current_lang,
        language_count=len(instance.get_available_languages()),
    )
    return instance
