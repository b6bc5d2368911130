"""i18n system - runtime translation resolution.

Resolves lookup keys to formatted strings with language fallback,
pluralization and ``{{variable}}`` interpolation.

Main components:
- models: KeyMode, ResolutionStatus, Lookup, Resolution, Translation
- store: TranslationStore holding per-language tables
- selector: LanguageSelector for current/fallback languages
- resolvers: flat and namespaced key lookup with the fallback chain
- formatter: pluralization and parameter substitution
- detector: LocaleDetector for host locale detection
- translator: Localization context object
- factory: create_localization from settings
"""

from localization.i18n.detector import LocaleDetector, primary_subtag, system_locale
from localization.i18n.factory import create_localization
from localization.i18n.formatter import Formatter, interpolate
from localization.i18n.models import (
    KeyMode,
    Lookup,
    Resolution,
    ResolutionStatus,
    Translation,
)
from localization.i18n.pluralizer import Pluralizer
from localization.i18n.resolvers import (
    FlatKeyResolver,
    KeyResolver,
    NamespacedKeyResolver,
    create_key_resolver,
)
from localization.i18n.selector import LanguageSelector
from localization.i18n.store import TranslationStore
from localization.i18n.translator import Localization

__all__ = [
    "KeyMode",
    "Lookup",
    "Resolution",
    "ResolutionStatus",
    "Translation",
    "TranslationStore",
    "LanguageSelector",
    "FlatKeyResolver",
    "NamespacedKeyResolver",
    "KeyResolver",
    "create_key_resolver",
    "Pluralizer",
    "Formatter",
    "interpolate",
    "LocaleDetector",
    "primary_subtag",
    "system_locale",
    "Localization",
    "create_localization",
]
