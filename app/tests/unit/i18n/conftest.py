"""Feature-level fixtures for i18n system tests."""

import pytest

from localization.i18n import KeyMode
from tests.factories.i18n import (
    make_flat_languages,
    make_localization,
    make_namespaced_languages,
    make_translation_store,
)


@pytest.fixture
def flat_languages():
    """Flat en/fr translation tables."""
    return make_flat_languages()


@pytest.fixture
def namespaced_languages():
    """Nested en/fr translation tables."""
    return make_namespaced_languages()


@pytest.fixture
def store():
    """TranslationStore populated with flat en/fr tables."""
    return make_translation_store()


@pytest.fixture
def flat_localization():
    """Localization in flat mode, current=en, fallback=en."""
    return make_localization()


@pytest.fixture
def namespaced_localization():
    """Localization in namespaced mode, current=en, fallback=en."""
    return make_localization(key_mode=KeyMode.NAMESPACED)
