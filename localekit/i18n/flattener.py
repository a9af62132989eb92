"""Conversion between nested translation trees and dotted flat mappings."""

from collections.abc import Mapping
from typing import Any, Dict

from localekit.logging import get_module_logger

logger = get_module_logger()


def is_variant_list(value: Any) -> bool:
    """Return True for list/tuple translation values (never for strings)."""
    return isinstance(value, (list, tuple))


def flatten(tree: Mapping) -> Dict[str, Any]:
    """Reduce a nested translation tree to a single-depth mapping.

    Nested keys are joined with ".". Lists and tuples are kept as atomic
    values. Later entries overwrite earlier ones written to the same path.

    Args:
        tree: Nested mapping of translations.

    Returns:
        Flat mapping of dotted key to translation value.
    """
    flat: Dict[str, Any] = {}

    for key, value in tree.items():
        if is_variant_list(value):
            if not all(isinstance(item, str) for item in value):
                logger.warning(
                    "non_string_plural_variants",
                    key=key,
                    value=value,
                )
            flat[key] = value
        elif isinstance(value, Mapping):
            for child_key, child_value in flatten(value).items():
                flat[f"{key}.{child_key}"] = child_value
        else:
            flat[key] = value

    return flat


def unflatten(flat: Mapping[str, Any]) -> Dict[str, Any]:
    """Rebuild a nested tree from dotted keys.

    A scalar already stored at an intermediate path is replaced by the
    nested mapping.

    Args:
        flat: Flat mapping of dotted key to translation value.

    Returns:
        Nested translation tree.
    """
    tree: Dict[str, Any] = {}

    for dotted_key, value in flat.items():
        parts = dotted_key.split(".")
        node = tree
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value

    return tree
