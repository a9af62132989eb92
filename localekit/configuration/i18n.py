"""Translation engine settings."""

from typing import List, Optional

from pydantic import Field, field_validator

from localekit.configuration.base import LocaleKitSettings


class I18nSettings(LocaleKitSettings):
    """Configuration for translation resolution.

    Environment Variables:
        I18N_WARNINGS: Emit diagnostic warnings while resolving (default: True)
        I18N_IDENTIFIERS: JSON list with the placeholder start and end
            delimiters (default: ["{", "}"])
        I18N_LOCALE: Locale selected at startup (default: unset)
        I18N_FALLBACK_LOCALE: Last-resort locale (default: unset)
        I18N_TRANSLATIONS_DIR: Directory with YAML translation files to preload
            (default: unset, nothing is preloaded)

    Example:
        ```python
        from localekit.configuration import settings

        if settings.i18n.warnings:
            ...
        start, end = settings.i18n.identifiers
        ```
    """

    warnings: bool = Field(
        default=True,
        alias="I18N_WARNINGS",
        description="Emit diagnostic warnings while resolving translations",
    )
    identifiers: List[str] = Field(
        default_factory=lambda: ["{", "}"],
        alias="I18N_IDENTIFIERS",
        description="Placeholder start and end delimiters",
    )
    locale: Optional[str] = Field(
        default=None,
        alias="I18N_LOCALE",
        description="Locale selected at startup",
    )
    fallback_locale: Optional[str] = Field(
        default=None,
        alias="I18N_FALLBACK_LOCALE",
        description="Locale used when neither the exact nor the parent locale has a key",
    )
    translations_dir: Optional[str] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory containing <locale>.yml translation files",
    )

    @field_validator("identifiers", mode="after")
    @classmethod
    def _validate_identifiers(cls, v: List[str]) -> List[str]:
        """Require exactly one start and one end delimiter, both non-empty."""
        if len(v) != 2 or not all(v):
            raise ValueError(
                "I18N_IDENTIFIERS must contain a start and an end delimiter"
            )
        return v
