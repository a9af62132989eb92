"""Factory functions for creating i18n components.

Builds a configured Translator from application settings.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog
from localekit.i18n.loader import YAMLTranslationLoader
from localekit.i18n.models import I18nConfig
from localekit.i18n.repository import (
    InMemoryTranslationRepository,
    TranslationRepository,
)
from localekit.i18n.translator import Translator

if TYPE_CHECKING:
    from localekit.configuration import I18nSettings

logger = structlog.get_logger()


def create_translator(
    i18n_settings: Optional["I18nSettings"] = None,
    repository: Optional[TranslationRepository] = None,
    on_translation_not_found: Optional[Callable[[str, str, str], Any]] = None,
    translations_dir: Optional[Path] = None,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        i18n_settings: Settings to use (default: settings.i18n).
        repository: Repository to use (default: a new in-memory repository
            with the configured locale and fallback locale).
        on_translation_not_found: Callback for keys missing in every locale.
        translations_dir: YAML directory to preload (default:
            I18N_TRANSLATIONS_DIR, nothing when unset).
        preload: Whether to load the YAML directory immediately.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist

    Usage:
        # Settings from the environment
        translator = create_translator()

        # Explicit directory and callback
        translator = create_translator(
            translations_dir=Path("locales"),
            on_translation_not_found=report_missing_key,
        )
    """
    if i18n_settings is None:
        from localekit.configuration import settings

        i18n_settings = settings.i18n

    if repository is None:
        repository = InMemoryTranslationRepository(
            locale=i18n_settings.locale,
            fallback_locale=i18n_settings.fallback_locale,
        )

    config = I18nConfig.from_settings(i18n_settings, on_translation_not_found)
    translator = Translator(repository=repository, config=config)

    if translations_dir is None and i18n_settings.translations_dir:
        translations_dir = Path(i18n_settings.translations_dir)

    if preload and translations_dir is not None:
        loader = YAMLTranslationLoader(translations_dir=translations_dir)
        loader.load_into(repository)
        if config.warnings:
            translator.validate_translations()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            locale_count=len(translator.get_locales()),
        )
    else:
        logger.info("translator_created_empty")

    return translator
