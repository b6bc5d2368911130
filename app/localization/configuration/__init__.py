"""Localization configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    get_settings: Lazily built Settings singleton (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Resolver defaults (languages, key mode, detection)
"""

from localization.configuration.i18n import LocalizationSettings
from localization.configuration.settings import Settings, get_settings

__all__ = ["Settings", "LocalizationSettings", "get_settings"]
