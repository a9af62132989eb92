"""Test data factories for i18n testing.

Provides deterministic test data builders for:
- Translation trees
- InMemoryTranslationRepository
- Translator
"""

from typing import Any, Callable, Dict, Optional

from localekit.i18n import (
    I18nConfig,
    InMemoryTranslationRepository,
    Translator,
)


def make_translation_tree(language: str = "en") -> Dict[str, Any]:
    """Create a nested translation tree.

    Args:
        language: "en", "de" or "pl" sample content.

    Returns:
        Nested translation mapping.
    """
    trees = {
        "en": {
            "greeting": "Hello {name}",
            "farewell": "Goodbye",
            "cart": {
                "items": "{count} item ::: {count} items",
                "empty": "Your cart is empty",
            },
            "apples": ["one apple", "{count} apples"],
        },
        "de": {
            "greeting": "Hallo {name}",
            "cart": {
                "items": "{count} Artikel ::: {count} Artikel",
            },
        },
        "pl": {
            "files": "jeden plik ::: {count} pliki ::: {count} plików",
        },
    }
    return trees[language]


def make_repository(
    locale: Optional[str] = "en",
    fallback_locale: Optional[str] = "en",
    languages: tuple = ("en", "de"),
) -> InMemoryTranslationRepository:
    """Create a repository preloaded with sample trees.

    Args:
        locale: Active locale.
        fallback_locale: Fallback locale.
        languages: Sample languages to add.

    Returns:
        InMemoryTranslationRepository instance.
    """
    repository = InMemoryTranslationRepository(
        locale=locale, fallback_locale=fallback_locale
    )
    for language in languages:
        repository.add_locale(language, make_translation_tree(language))
    return repository


def make_translator(
    repository: Optional[InMemoryTranslationRepository] = None,
    warnings: bool = True,
    identifiers: tuple = ("{", "}"),
    on_translation_not_found: Optional[Callable[[str, str, str], Any]] = None,
) -> Translator:
    """Create a Translator over a sample repository.

    Returns:
        Translator instance.
    """
    config = I18nConfig(warnings=warnings, identifiers=identifiers)
    if on_translation_not_found is not None:
        config.on_translation_not_found = on_translation_not_found
    return Translator(repository or make_repository(), config)
