"""Translation resolver settings."""

from typing import Literal

from pydantic import Field, field_validator

from localization.configuration.base import ApplicationSettings


class LocalizationSettings(ApplicationSettings):
    """Defaults applied when a Localization instance is built from settings.

    Environment Variables:
        I18N_DEFAULT_LANG: Language selected at startup (not validated)
        I18N_FALLBACK_LANG: Language consulted when a key is missing
        I18N_KEY_MODE: "flat" for exact key matches, "namespaced" for
            dot-separated paths into nested tables
        I18N_KEY_DELIMITER: Path separator used in namespaced mode
        I18N_DETECT_LOCALE: Switch to the host locale after registration

    Example:
        ```python
        from localization.configuration import get_settings

        if get_settings().i18n.KEY_MODE == "namespaced":
            ...
        ```
    """

    DEFAULT_LANG: str = Field(default="en", alias="I18N_DEFAULT_LANG")
    FALLBACK_LANG: str = Field(default="en", alias="I18N_FALLBACK_LANG")
    KEY_MODE: Literal["flat", "namespaced"] = Field(
        default="flat", alias="I18N_KEY_MODE"
    )
    KEY_DELIMITER: str = Field(default=".", alias="I18N_KEY_DELIMITER")
    DETECT_LOCALE: bool = Field(default=False, alias="I18N_DETECT_LOCALE")

    @field_validator("KEY_MODE", mode="before")
    @classmethod
    def _normalize_key_mode(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("KEY_DELIMITER")
    @classmethod
    def _validate_delimiter(cls, v: str) -> str:
        if not v:
            raise ValueError("I18N_KEY_DELIMITER must not be empty")
        return v
