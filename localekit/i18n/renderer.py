"""Placeholder substitution and plural variant selection."""

import re
from numbers import Integral
from typing import Any, List, Mapping, Optional, Sequence

from localekit.i18n.flattener import is_variant_list
from localekit.i18n.models import DEFAULT_IDENTIFIERS, PLURAL_SEPARATOR
from localekit.i18n.plurals import plural_index
from localekit.logging import get_module_logger

logger = get_module_logger()


class Renderer:
    """Renders raw translation values into display strings.

    The placeholder pattern is compiled once from the configured delimiters,
    e.g. ("{", "}") matches "{name}" and ("{{", "}}") matches "{{name}}".

    Attributes:
        identifiers: Placeholder (start, end) delimiters.
        warnings: Whether diagnostics are logged.
        pattern: Compiled placeholder pattern.
    """

    def __init__(
        self,
        identifiers: Sequence[str] = DEFAULT_IDENTIFIERS,
        warnings: bool = True,
    ):
        """Initialize Renderer.

        Args:
            identifiers: Start and end delimiters of a placeholder.
            warnings: Log diagnostics for unresolved placeholders and
                unusable plural counts.

        Raises:
            ValueError: If identifiers is not a pair of non-empty strings.
        """
        if identifiers is None or len(identifiers) != 2 or not all(identifiers):
            raise ValueError(
                "You must specify the start and end character identifying "
                "variable substitutions"
            )
        self.identifiers = (identifiers[0], identifiers[1])
        self.warnings = warnings
        self.pattern = re.compile(
            re.escape(identifiers[0]) + r"(\w+)" + re.escape(identifiers[1])
        )

    def substitute(
        self,
        text: Any,
        replacements: Optional[Mapping[str, Any]] = None,
        warn: bool = True,
    ) -> Any:
        """Replace placeholders in text with values from replacements.

        Unknown placeholders are left as they are. Non-string input is
        returned unchanged.

        Args:
            text: Translation text.
            replacements: Placeholder name -> value.
            warn: Log a warning for unknown placeholders (if warnings are on).

        Returns:
            Text with known placeholders substituted.
        """
        if not isinstance(text, str):
            return text

        replacements = replacements or {}

        def _replace(match: re.Match) -> str:
            name = match.group(1)
            if name in replacements:
                return str(replacements[name])

            if warn and self.warnings:
                logger.warning(
                    "placeholder_not_found",
                    placeholder=match.group(0),
                    text=text,
                )
            return match.group(0)

        return self.pattern.sub(_replace, text)

    def render(
        self,
        locale: str,
        translation: Any,
        replacements: Optional[Mapping[str, Any]] = None,
        pluralization: Optional[Any] = None,
    ) -> Any:
        """Substitute placeholders and select the plural variant.

        Args:
            locale: Locale code whose plural rule selects the variant.
            translation: Raw value, a string or a list of variants.
            replacements: Placeholder name -> value.
            pluralization: Count, or None to skip variant selection.

        Returns:
            Rendered string, or the substituted list when no count is given.
        """
        if is_variant_list(translation):
            candidate = [
                self.substitute(item, replacements, warn=pluralization is not None)
                for item in translation
            ]
        else:
            candidate = self.substitute(translation, replacements)

        if pluralization is None:
            return candidate

        if not isinstance(pluralization, Integral) or isinstance(pluralization, bool):
            if self.warnings:
                logger.warning(
                    "pluralization_not_a_number",
                    pluralization=pluralization,
                    locale=locale,
                )
            return candidate

        variants = self._variants(candidate)
        if variants is None:
            if self.warnings:
                logger.warning(
                    "pluralization_not_possible",
                    translation=translation,
                    locale=locale,
                )
            return candidate

        index = plural_index(locale, int(pluralization))
        if index >= len(variants):
            if self.warnings:
                logger.warning(
                    "pluralization_not_provided",
                    translation=translation,
                    locale=locale,
                    index=index,
                )
            return self._strip(variants[0])

        return self._strip(variants[index])

    @staticmethod
    def _variants(candidate: Any) -> Optional[List[Any]]:
        if is_variant_list(candidate):
            return list(candidate) if candidate else None
        if isinstance(candidate, str):
            return candidate.split(PLURAL_SEPARATOR)
        return None

    @staticmethod
    def _strip(variant: Any) -> Any:
        return variant.strip() if isinstance(variant, str) else variant
