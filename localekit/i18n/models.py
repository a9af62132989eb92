"""Translation models for the i18n engine.

Defines the value types shared by the flattener, renderer, repository and
translator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Union

# A translation leaf: a single string or pre-split plural variants
TranslationValue = Union[str, Sequence[str]]
FlatTranslations = Dict[str, Any]
FlatTable = Dict[str, FlatTranslations]

PLURAL_SEPARATOR = ":::"
DEFAULT_IDENTIFIERS: Tuple[str, str] = ("{", "}")


def ignore_not_found(locale: str, key: str, default_value: str) -> None:
    return None


class KeyScope(str, Enum):
    """How far key_exists() follows the fallback chain."""

    STRICT = "strict"
    LOCALE = "locale"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class LocaleTag:
    """A locale code split into language and region.

    Attributes:
        code: Original locale code (e.g. "de-CH").
        language: Part before the first "-" (e.g. "de").
        region: Remainder after the first "-", empty for plain languages.
    """

    code: str
    language: str
    region: str = ""

    @classmethod
    def parse(cls, code: str) -> "LocaleTag":
        """Split a locale code on its first "-".

        Args:
            code: Locale code (e.g. "en", "de-CH").

        Returns:
            LocaleTag instance.
        """
        language, _, region = code.partition("-")
        return cls(code=code, language=language, region=region)

    @property
    def parent(self) -> Optional[str]:
        """Parent language locale for regional codes, None otherwise."""
        return self.language if self.region else None

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class TranslationRequest:
    """A single resolution request.

    Attributes:
        key: Dotted translation key.
        default_value: Returned (rendered) when no locale has the key.
            Defaults to the key itself.
        replacements: Placeholder name -> substituted value.
        pluralization: Count selecting a plural variant, or None.
    """

    key: str
    default_value: Optional[str] = None
    replacements: Mapping[str, Any] = field(default_factory=dict)
    pluralization: Optional[Any] = None

    @property
    def default(self) -> str:
        """Effective default value."""
        return self.key if self.default_value is None else self.default_value


@dataclass
class I18nConfig:
    """Options recognized by the translator.

    Attributes:
        warnings: Emit diagnostic warnings.
        identifiers: Placeholder (start, end) delimiters.
        on_translation_not_found: Called as (locale, key, default_value) when a
            key is missing in every locale tried. May return a replacement
            value, a concurrent.futures.Future or an awaitable.
    """

    warnings: bool = True
    identifiers: Tuple[str, str] = DEFAULT_IDENTIFIERS
    on_translation_not_found: Callable[[str, str, str], Any] = ignore_not_found

    def __post_init__(self) -> None:
        if self.identifiers is None or len(self.identifiers) != 2:
            raise ValueError(
                "identifiers must specify the start and end of a placeholder"
            )
        self.identifiers = (self.identifiers[0], self.identifiers[1])

    @classmethod
    def from_settings(
        cls,
        i18n_settings,
        on_translation_not_found: Optional[Callable[[str, str, str], Any]] = None,
    ) -> "I18nConfig":
        """Build options from I18nSettings.

        Args:
            i18n_settings: localekit.configuration.I18nSettings instance.
            on_translation_not_found: Optional not-found callback.

        Returns:
            I18nConfig instance.
        """
        return cls(
            warnings=i18n_settings.warnings,
            identifiers=tuple(i18n_settings.identifiers),
            on_translation_not_found=on_translation_not_found or ignore_not_found,
        )
