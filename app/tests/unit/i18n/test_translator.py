"""Tests for localization.i18n.translator module."""

from unittest.mock import patch

import pytest

from localization.i18n import KeyMode, Localization, ResolutionStatus
from tests.factories.i18n import make_locale_detector, make_localization


class TestLocalizationInit:
    """Tests for Localization construction and init()."""

    def test_defaults(self):
        localization = Localization()
        assert localization.current_lang == "en"
        assert localization.fallback_lang == "en"
        assert localization.key_mode == KeyMode.FLAT
        assert localization.get_available_languages() == []

    def test_instances_are_isolated(self):
        first = Localization()
        second = Localization()
        first.add_language("fr", {"a": "A"})
        assert second.get_available_languages() == []

    def test_init_registers_languages(self, flat_languages):
        localization = Localization()
        localization.init(languages=flat_languages, default_lang="fr")
        assert localization.get_available_languages() == ["en", "fr"]
        assert localization.current_lang == "fr"

    @patch("localization.i18n.selector.logger")
    def test_init_default_lang_not_validated(self, mock_logger, flat_languages):
        localization = Localization()
        localization.init(default_lang="xx", languages=flat_languages)
        assert localization.current_lang == "xx"
        assert localization.t("greeting", {"name": "Jo"}) == "Hello, Jo!"
        mock_logger.warning.assert_not_called()

    def test_init_merges_with_existing_languages(self):
        localization = Localization()
        localization.add_language("en", {"a": "A"})
        localization.init(languages={"en": {"b": "B"}})
        assert localization.t("a") == "A"
        assert localization.t("b") == "B"

    def test_init_sets_fallback(self, flat_languages):
        localization = Localization()
        localization.init(languages=flat_languages, fallback_lang="fr")
        assert localization.fallback_lang == "fr"

    def test_init_detect_locale(self, flat_languages):
        localization = Localization(detector=make_locale_detector("fr-BE"))
        localization.init(languages=flat_languages, detect_locale=True)
        assert localization.current_lang == "fr"

    def test_init_without_detect_locale_ignores_host(self, flat_languages):
        localization = Localization(detector=make_locale_detector("fr-BE"))
        localization.init(languages=flat_languages)
        assert localization.current_lang == "en"


class TestLocalizationLanguages:
    """Tests for add_language(), set_language() and detection."""

    def test_add_language_then_translate(self, flat_localization):
        flat_localization.add_language("de", {"greeting": "Hallo, {{name}}!"})
        flat_localization.set_language("de")
        assert flat_localization.t("greeting", {"name": "Max"}) == "Hallo, Max!"

    def test_add_language_overrides_key(self, flat_localization):
        flat_localization.add_language("en", {"greeting": "Hey, {{name}}!"})
        assert flat_localization.t("greeting", {"name": "Al"}) == "Hey, Al!"
        assert flat_localization.t("farewell", {"name": "Al"}) == "Goodbye, Al."

    @patch("localization.i18n.selector.logger")
    def test_set_unknown_language_uses_fallback(self, mock_logger):
        localization = make_localization(default_lang="fr")
        localization.set_language("xx")
        assert localization.current_lang == "en"
        mock_logger.warning.assert_called_once()

    def test_detect_and_set_locale(self):
        localization = make_localization(host_locale="fr-FR")
        assert localization.detect_and_set_locale() == "fr"
        assert localization.current_lang == "fr"

    def test_detect_unknown_locale_uses_fallback(self):
        localization = make_localization(default_lang="fr", host_locale="ko-KR")
        assert localization.detect_and_set_locale() == "en"


class TestLocalizationTranslate:
    """Tests for t(), translate(), resolve() and has_message()."""

    def test_end_to_end(self):
        localization = Localization()
        localization.init(
            default_lang="en",
            languages={
                "en": {"greeting": "Hello, {{name}}!"},
                "fr": {"greeting": "Bonjour, {{name}}!"},
            },
            fallback_lang="en",
        )
        localization.set_language("fr")
        assert localization.t("greeting", {"name": "Ana"}) == "Bonjour, Ana!"

    def test_registered_value_returned_verbatim(self, flat_localization):
        assert flat_localization.t("greeting") == "Hello, {{name}}!"

    def test_missing_key_echoed(self, flat_localization):
        assert flat_localization.t("does.not.exist") == "does.not.exist"
        flat_localization.set_language("fr")
        assert flat_localization.t("does.not.exist") == "does.not.exist"

    def test_echoed_key_still_formatted(self, flat_localization):
        assert flat_localization.t("Hi {{x}}", {"x": "there"}) == "Hi there"

    def test_unmatched_placeholder_left_literal(self):
        localization = make_localization(languages={"en": {"hi": "Hi {{x}}"}})
        assert localization.t("hi") == "Hi {{x}}"
        assert localization.t("hi", {"y": "1"}) == "Hi {{x}}"

    def test_fallback_chain_for_dotted_flat_key(self, flat_localization):
        flat_localization.set_language("fr")
        result = flat_localization.t("incident.created", {"incident_id": "INC-1"})
        assert result == "Incident INC-1 created"

    def test_pluralized_with_count(self, flat_localization):
        assert flat_localization.t("apple", {}, 5) == "apples"
        assert flat_localization.t("apple", count=1) == "apple"
        assert flat_localization.t("apple", count=0) == "apples"

    @pytest.mark.parametrize(
        "count,expected",
        [(1, "glass"), (2, "glasses"), (0, "glasses")],
    )
    def test_pluralized_word_ending_in_s(self, flat_localization, count, expected):
        flat_localization.add_language("en", {"item": "glass", "vehicle": "bus"})
        assert flat_localization.t("item", count=count) == expected
        assert flat_localization.t("vehicle", count=1) == "bus"

    def test_blank_template_with_count(self, flat_localization):
        flat_localization.add_language("en", {"sep": " "})
        assert flat_localization.t("sep", count=2) == " "

    def test_translate_reports_status(self, flat_localization):
        flat_localization.set_language("fr")

        resolved = flat_localization.translate("greeting", {"name": "Lu"})
        assert resolved.text == "Bonjour, Lu!"
        assert resolved.status == ResolutionStatus.RESOLVED
        assert resolved.language == "fr"

        fallback = flat_localization.translate("apple")
        assert fallback.status == ResolutionStatus.FALLBACK_USED
        assert fallback.language == "en"

        echoed = flat_localization.translate("nope")
        assert echoed.text == "nope"
        assert echoed.status == ResolutionStatus.KEY_ECHOED

    def test_resolve_returns_unformatted_template(self, flat_localization):
        resolution = flat_localization.resolve("greeting")
        assert resolution.template == "Hello, {{name}}!"
        assert resolution.found

    def test_has_message(self, flat_localization):
        assert flat_localization.has_message("greeting")
        assert flat_localization.has_message("greeting", "fr")
        assert not flat_localization.has_message("apple", "fr")
        assert not flat_localization.has_message("greeting", "xx")

    def test_has_message_empty_lang_is_not_current(self, flat_localization):
        flat_localization.add_language("", {"other": "Other"})
        assert not flat_localization.has_message("greeting", "")
        assert flat_localization.has_message("other", "")

    def test_pluralize(self, flat_localization):
        assert flat_localization.pluralize("apple", 2) == "apples"
        assert flat_localization.pluralize("apple", 2, inclusive=True) == "2 apples"


class TestNamespacedLocalization:
    """Tests for Localization in namespaced mode."""

    def test_key_mode(self, namespaced_localization):
        assert namespaced_localization.key_mode == KeyMode.NAMESPACED

    def test_deep_value(self, namespaced_localization):
        assert (
            namespaced_localization.t("role.permissions.denied")
            == "Permission denied"
        )

    def test_fallback(self, namespaced_localization):
        namespaced_localization.set_language("fr")
        assert (
            namespaced_localization.t("incident.created", {"incident_id": "7"})
            == "Incident 7 créé"
        )
        assert (
            namespaced_localization.t("incident.resolved", {"incident_id": "7"})
            == "Incident 7 resolved"
        )

    def test_node_key_echoed(self, namespaced_localization):
        assert namespaced_localization.t("incident") == "incident"

    def test_pluralize_nested_value(self, namespaced_localization):
        assert namespaced_localization.t("fruit.apple", count=3) == "apples"

    def test_custom_delimiter(self):
        localization = Localization(key_mode=KeyMode.NAMESPACED, delimiter="/")
        localization.add_language("en", {"a": {"b": "B"}})
        assert localization.t("a/b") == "B"
        assert localization.t("a.b") == "a.b"


@pytest.mark.parametrize("lang", ["en", "fr"])
def test_every_registered_value_resolves(lang, flat_languages):
    localization = make_localization(languages=flat_languages)
    localization.set_language(lang)
    for key, value in flat_languages[lang].items():
        assert localization.t(key) == value
