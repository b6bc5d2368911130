"""Runtime translation resolver.

Usage:
    from localization import localization

    localization.init(
        default_lang="en",
        languages={"en": {"greeting": "Hello, {{name}}!"}},
    )
    localization.t("greeting", {"name": "John"})  # "Hello, John!"
"""

from localization.i18n import (
    KeyMode,
    Localization,
    ResolutionStatus,
    Translation,
    create_localization,
)

# Process-wide default instance
localization = Localization()

__all__ = [
    "KeyMode",
    "Localization",
    "ResolutionStatus",
    "Translation",
    "create_localization",
    "localization",
]
