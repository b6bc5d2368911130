"""Top-level fixtures shared by all test suites."""

import pytest

I18N_ENV_VARS = (
    "I18N_DEFAULT_LANG",
    "I18N_FALLBACK_LANG",
    "I18N_KEY_MODE",
    "I18N_KEY_DELIMITER",
    "I18N_DETECT_LOCALE",
)


@pytest.fixture
def clean_i18n_env(monkeypatch):
    """Remove I18N_* variables so settings fall back to their defaults."""
    for var in I18N_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
