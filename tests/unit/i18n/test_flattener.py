"""Tests for localekit.i18n.flattener module."""

from unittest.mock import patch

from localekit.i18n.flattener import flatten, is_variant_list, unflatten
from tests.factories.i18n import make_translation_tree


class TestFlatten:
    """Tests for flatten()."""

    def test_flat_input_is_unchanged(self):
        """flatten() copies already flat mappings."""
        assert flatten({"a": "A", "b": "B"}) == {"a": "A", "b": "B"}

    def test_nested_keys_are_joined_with_dots(self):
        """flatten() joins nested keys with '.'."""
        tree = {"menu": {"file": {"open": "Open"}, "quit": "Quit"}}
        assert flatten(tree) == {"menu.file.open": "Open", "menu.quit": "Quit"}

    def test_lists_are_kept_atomic(self):
        """flatten() does not recurse into variant lists."""
        tree = {"cart": {"items": ["one item", "many items"]}}
        assert flatten(tree) == {"cart.items": ["one item", "many items"]}

    def test_non_string_list_items_warn_but_are_kept(self):
        """flatten() tolerates non-string list items with a warning."""
        with patch("localekit.i18n.flattener.logger") as mock_logger:
            result = flatten({"mixed": ["one", 2]})

        assert result == {"mixed": ["one", 2]}
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[0][0] == "non_string_plural_variants"

    def test_string_lists_do_not_warn(self):
        """flatten() is silent for lists of strings."""
        with patch("localekit.i18n.flattener.logger") as mock_logger:
            flatten({"ok": ["one", "two"]})

        mock_logger.warning.assert_not_called()

    def test_scalars_are_copied_verbatim(self):
        """flatten() keeps non-string scalars as they are."""
        assert flatten({"n": 3, "flag": None}) == {"n": 3, "flag": None}

    def test_later_keys_overwrite_earlier_paths(self):
        """flatten() lets the last key written to a path win."""
        tree = {"a.b": "literal", "a": {"b": "nested"}}
        assert flatten(tree) == {"a.b": "nested"}

    def test_empty_nested_mapping_disappears(self):
        """flatten() produces no entry for empty mappings."""
        assert flatten({"empty": {}, "x": "X"}) == {"x": "X"}


class TestUnflatten:
    """Tests for unflatten()."""

    def test_unflatten_rebuilds_tree(self):
        """unflatten() splits dotted keys into nested mappings."""
        flat = {"menu.open": "Open", "menu.close": "Close", "title": "T"}
        assert unflatten(flat) == {
            "menu": {"open": "Open", "close": "Close"},
            "title": "T",
        }

    def test_flatten_of_unflatten_preserves_leaves(self):
        """flatten(unflatten(flat)) keeps every scalar leaf."""
        flat = flatten(make_translation_tree("en"))
        assert flatten(unflatten(flat)) == flat


class TestIsVariantList:
    """Tests for is_variant_list()."""

    def test_lists_and_tuples(self):
        """Lists and tuples are variant lists."""
        assert is_variant_list(["a"])
        assert is_variant_list(("a", "b"))

    def test_strings_are_not_variant_lists(self):
        """Strings are never treated as variant lists."""
        assert not is_variant_list("a:::b")
        assert not is_variant_list({"a": "b"})
