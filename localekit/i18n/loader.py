"""Translation file loading.

Reads nested translation trees from YAML files and feeds them to a
TranslationRepository.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import yaml

import structlog
from localekit.i18n.repository import TranslationRepository

logger = structlog.get_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations return nested translation trees; flattening is left to
    the repository.
    """

    @abstractmethod
    def load(self, locale: str) -> Dict[str, Any]:
        """Load the translation tree for a locale.

        Raises:
            FileNotFoundError: If no translation source exists for locale.
            ValueError: If the translation format is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load translation trees for every available locale."""
        pass

    def load_into(
        self,
        repository: TranslationRepository,
        replace: bool = False,
    ) -> List[str]:
        """Load every locale and push it to a repository.

        Args:
            repository: Repository receiving the trees.
            replace: Replace existing locale entries instead of merging.

        Returns:
            Locales that were loaded.
        """
        trees = self.load_all()
        for locale, tree in trees.items():
            if replace:
                repository.replace_locale(locale, tree)
            else:
                repository.add_locale(locale, tree)
        logger.info("loaded_translations_into_repository", locales=sorted(trees))
        return list(trees)


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files.

    Expects files named <locale>.yml or <domain>.<locale>.yml in the
    translations directory, e.g. "en.yml", "checkout.de-CH.yml".
    Files of the same locale are deep-merged in sorted filename order.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Loaded trees by locale (when use_cache is enabled).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded trees in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dict[str, Any]] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: str) -> Dict[str, Any]:
        """Load and merge all YAML files of a locale.

        Raises:
            FileNotFoundError: If no YAML files exist for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            logger.info("loaded_from_cache", locale=locale)
            return self.cache[locale]

        yaml_files = [
            path
            for path in sorted(self.translations_dir.glob("*.yml"))
            if self._locale_of(path) == locale
        ]

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        tree: Dict[str, Any] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                continue
            _deep_merge(tree, data)

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(yaml_files),
        )

        if self.use_cache:
            self.cache[locale] = tree

        return tree

    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load every locale found in the directory.

        Raises:
            ValueError: If the directory has no YAML files.
        """
        locales = {self._locale_of(path) for path in self.translations_dir.glob("*.yml")}

        if not locales:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {locale: self.load(locale) for locale in sorted(locales)}

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")

    @staticmethod
    def _locale_of(path: Path) -> str:
        # "checkout.de-CH.yml" -> "de-CH", "en.yml" -> "en"
        return path.stem.split(".")[-1]


def _deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        else:
            target[key] = value
