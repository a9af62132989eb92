"""Tests for localekit.i18n.models module."""

import pytest

from localekit.configuration import I18nSettings
from localekit.i18n.models import (
    I18nConfig,
    KeyScope,
    LocaleTag,
    TranslationRequest,
    ignore_not_found,
)


class TestLocaleTag:
    """Tests for LocaleTag."""

    def test_parse_regional(self):
        """parse() splits language and region."""
        tag = LocaleTag.parse("de-CH")
        assert tag.language == "de"
        assert tag.region == "CH"
        assert tag.parent == "de"
        assert str(tag) == "de-CH"

    def test_parse_plain_language(self):
        """Plain languages have no parent."""
        tag = LocaleTag.parse("en")
        assert tag.region == ""
        assert tag.parent is None

    def test_parse_splits_on_first_dash_only(self):
        """Only the first '-' separates the parent language."""
        tag = LocaleTag.parse("zh-Hant-TW")
        assert tag.parent == "zh"
        assert tag.region == "Hant-TW"


class TestTranslationRequest:
    """Tests for TranslationRequest."""

    def test_default_is_key(self):
        """The default value falls back to the key."""
        assert TranslationRequest(key="menu.open").default == "menu.open"

    def test_explicit_default(self):
        """An explicit default wins, even when empty."""
        assert TranslationRequest(key="k", default_value="D").default == "D"
        assert TranslationRequest(key="k", default_value="").default == ""

    def test_frozen(self):
        """Requests are immutable."""
        request = TranslationRequest(key="k")
        with pytest.raises(AttributeError):
            request.key = "other"


class TestKeyScope:
    """Tests for KeyScope."""

    def test_from_string(self):
        """Scopes are created from their string values."""
        assert KeyScope("strict") is KeyScope.STRICT
        assert KeyScope("locale") is KeyScope.LOCALE
        assert KeyScope.FALLBACK == "fallback"


class TestI18nConfig:
    """Tests for I18nConfig."""

    def test_defaults(self):
        """Defaults match the documented options."""
        config = I18nConfig()
        assert config.warnings is True
        assert config.identifiers == ("{", "}")
        assert config.on_translation_not_found is ignore_not_found
        assert ignore_not_found("en", "k", "k") is None

    def test_identifiers_normalized_to_tuple(self):
        """List identifiers are stored as a tuple."""
        assert I18nConfig(identifiers=["[[", "]]"]).identifiers == ("[[", "]]")

    def test_invalid_identifiers(self):
        """Identifiers must be a pair."""
        with pytest.raises(ValueError):
            I18nConfig(identifiers=("{",))

    def test_from_settings(self):
        """from_settings() copies warnings and identifiers."""
        i18n_settings = I18nSettings(I18N_WARNINGS=False, I18N_IDENTIFIERS=["<", ">"])

        def callback(locale, key, default_value):
            return None

        config = I18nConfig.from_settings(i18n_settings, callback)
        assert config.warnings is False
        assert config.identifiers == ("<", ">")
        assert config.on_translation_not_found is callback
