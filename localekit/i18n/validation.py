"""Consistency checks over a flat translation table."""

from typing import Dict, List

import structlog

from localekit.i18n.flattener import is_variant_list
from localekit.i18n.models import PLURAL_SEPARATOR, FlatTable

logger = structlog.get_logger(component="i18n.validation")


def find_mixed_plural_conventions(table: FlatTable) -> Dict[str, Dict[str, List[str]]]:
    """Find keys whose plural variants are declared differently across locales.

    A key mixes conventions when at least one locale stores it as a list of
    variants and another stores a string split with ":::".

    Args:
        table: Mapping of locale -> flat translations.

    Returns:
        Mapping of key -> {"list": [locales...], "separator": [locales...]}
        for every mixed key, locales sorted.
    """
    usage: Dict[str, Dict[str, List[str]]] = {}

    for locale, translations in table.items():
        for key, value in translations.items():
            if is_variant_list(value):
                style = "list"
            elif isinstance(value, str) and PLURAL_SEPARATOR in value:
                style = "separator"
            else:
                continue
            styles = usage.setdefault(key, {"list": [], "separator": []})
            styles[style].append(locale)

    mixed = {}
    for key, styles in usage.items():
        if styles["list"] and styles["separator"]:
            mixed[key] = {
                "list": sorted(styles["list"]),
                "separator": sorted(styles["separator"]),
            }
            logger.warning(
                "mixed_plural_conventions",
                key=key,
                list_locales=mixed[key]["list"],
                separator_locales=mixed[key]["separator"],
            )

    return mixed
