"""Translation repository interface and in-memory implementation.

The repository owns the flat translation table, the active locale and the
fallback locale. The translator only reads this state and issues mutation
requests against it.
"""

from abc import ABC, abstractmethod
from threading import Lock
from typing import Any, Mapping, Optional

from localekit.i18n.flattener import flatten
from localekit.i18n.models import FlatTable
from localekit.logging import get_module_logger

logger = get_module_logger()


class TranslationRepository(ABC):
    """Abstract base for translation state holders.

    Implementations must flatten incoming trees before storing them and are
    responsible for serializing concurrent mutations.
    """

    @abstractmethod
    def get_active_locale(self) -> Optional[str]:
        """Return the currently selected locale, if any."""
        pass

    @abstractmethod
    def get_fallback_locale(self) -> Optional[str]:
        """Return the last-resort locale, if any."""
        pass

    @abstractmethod
    def get_flat_table(self) -> FlatTable:
        """Return the mapping of locale -> flat translations.

        Callers must treat the result as read-only.
        """
        pass

    @abstractmethod
    def set_locale(self, locale: Optional[str]) -> None:
        """Select the active locale."""
        pass

    @abstractmethod
    def set_fallback_locale(self, locale: Optional[str]) -> None:
        """Select the fallback locale."""
        pass

    @abstractmethod
    def add_locale(self, locale: str, translations: Mapping[str, Any]) -> None:
        """Flatten translations and merge them into the locale entry."""
        pass

    @abstractmethod
    def replace_locale(self, locale: str, translations: Mapping[str, Any]) -> None:
        """Flatten translations and overwrite the locale entry."""
        pass

    @abstractmethod
    def remove_locale(self, locale: str) -> None:
        """Delete the locale entry, clearing the active locale if it matches."""
        pass


class InMemoryTranslationRepository(TranslationRepository):
    """Thread-safe in-memory repository.

    Every mutation builds a new table (copy-on-write), so a table returned by
    get_flat_table() is a stable snapshot for the caller.

    Attributes:
        closed: True once close() has been called; later mutations are ignored.
    """

    def __init__(
        self,
        locale: Optional[str] = None,
        fallback_locale: Optional[str] = None,
    ):
        self._lock = Lock()
        self._locale = locale
        self._fallback = fallback_locale
        self._translations: FlatTable = {}
        self.closed = False

    def get_active_locale(self) -> Optional[str]:
        return self._locale

    def get_fallback_locale(self) -> Optional[str]:
        return self._fallback

    def get_flat_table(self) -> FlatTable:
        return self._translations

    def set_locale(self, locale: Optional[str]) -> None:
        with self._lock:
            if self._reject_if_closed("set_locale", locale):
                return
            self._locale = locale
        logger.debug("locale_set", locale=locale)

    def set_fallback_locale(self, locale: Optional[str]) -> None:
        with self._lock:
            if self._reject_if_closed("set_fallback_locale", locale):
                return
            self._fallback = locale
        logger.debug("fallback_locale_set", locale=locale)

    def add_locale(self, locale: str, translations: Mapping[str, Any]) -> None:
        flat = flatten(translations)
        with self._lock:
            if self._reject_if_closed("add_locale", locale):
                return
            merged = {**self._translations.get(locale, {}), **flat}
            self._translations = {**self._translations, locale: merged}
        logger.debug("locale_added", locale=locale, key_count=len(flat))

    def replace_locale(self, locale: str, translations: Mapping[str, Any]) -> None:
        flat = flatten(translations)
        with self._lock:
            if self._reject_if_closed("replace_locale", locale):
                return
            self._translations = {**self._translations, locale: flat}
        logger.debug("locale_replaced", locale=locale, key_count=len(flat))

    def remove_locale(self, locale: str) -> None:
        with self._lock:
            if self._reject_if_closed("remove_locale", locale):
                return
            if locale not in self._translations:
                return
            if self._locale == locale:
                self._locale = None
            self._translations = {
                code: entries
                for code, entries in self._translations.items()
                if code != locale
            }
        logger.debug("locale_removed", locale=locale)

    def close(self) -> None:
        """Stop accepting mutations."""
        with self._lock:
            self.closed = True
        logger.info("translation_repository_closed")

    def _reject_if_closed(self, operation: str, locale: Optional[str]) -> bool:
        if self.closed:
            logger.warning(
                "mutation_on_closed_repository",
                operation=operation,
                locale=locale,
            )
        return self.closed
