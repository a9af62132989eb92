"""Tests for localekit.i18n.validation module."""

from unittest.mock import patch

from localekit.i18n.validation import find_mixed_plural_conventions


class TestFindMixedPluralConventions:
    """Tests for find_mixed_plural_conventions()."""

    def test_consistent_table(self):
        """No report when each key uses one convention."""
        table = {
            "en": {"a": ["x", "y"], "b": "one:::many", "c": "plain"},
            "de": {"a": ["x", "y"], "b": "eins:::viele", "c": "schlicht"},
        }
        assert find_mixed_plural_conventions(table) == {}

    def test_plain_strings_do_not_count(self):
        """Strings without ':::' are not a plural convention."""
        table = {"en": {"a": ["x", "y"]}, "ja": {"a": "本"}}
        assert find_mixed_plural_conventions(table) == {}

    def test_mixed_key_reported_and_logged(self):
        """Mixed keys are returned with their locales and logged."""
        table = {
            "en": {"a": ["one", "many"]},
            "fr": {"a": "un:::plusieurs"},
            "de": {"a": "eins:::viele"},
        }
        with patch("localekit.i18n.validation.logger") as mock_logger:
            result = find_mixed_plural_conventions(table)

        assert result == {"a": {"list": ["en"], "separator": ["de", "fr"]}}
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[0][0] == "mixed_plural_conventions"
