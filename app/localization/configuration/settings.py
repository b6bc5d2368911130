"""Localization configuration settings - main aggregator."""

from functools import lru_cache

from pydantic_settings import SettingsConfigDict

from localization.configuration.base import ApplicationSettings
from localization.configuration.i18n import LocalizationSettings


class Settings(ApplicationSettings):
    """Localization configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from localization.configuration import get_settings

        fallback = get_settings().i18n.FALLBACK_LANG

        if get_settings().is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: LocalizationSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": LocalizationSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings, built on first use.

    Environment variables are read the first time this is called, not at
    import. Call ``get_settings.cache_clear()`` to pick up changes.
    """
    return Settings()
