"""Translation service for dependency injection.

Provides a class-based interface to the i18n engine for easier DI and testing.
"""

from typing import Any, Mapping, Optional, Union

from localekit.i18n.factory import create_translator
from localekit.i18n.models import KeyScope
from localekit.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    Thin facade over a Translator created by the factory, so callers can
    depend on it and tests can swap in mocks.

    Usage:
        service = TranslationService()
        service.set_locale("de-CH")
        service.translate("cart.items", replacements={"n": 3}, pluralization=3)
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(
        self,
        key: str,
        default_value: Optional[str] = None,
        replacements: Optional[Mapping[str, Any]] = None,
        pluralization: Optional[Any] = None,
    ) -> Any:
        """Translate key in the active locale."""
        return self._translator.translate(
            key, default_value, replacements, pluralization
        )

    def translate_in(
        self,
        locale: str,
        key: str,
        default_value: Optional[str] = None,
        replacements: Optional[Mapping[str, Any]] = None,
        pluralization: Optional[Any] = None,
    ) -> Any:
        """Translate key in the given locale."""
        return self._translator.translate_in(
            locale, key, default_value, replacements, pluralization
        )

    def key_exists(
        self, key: str, scope: Union[KeyScope, str] = KeyScope.FALLBACK
    ) -> bool:
        return self._translator.key_exists(key, scope)

    def locale_exists(self, locale: str) -> bool:
        return self._translator.locale_exists(locale)

    def get_locale(self) -> Optional[str]:
        return self._translator.get_locale()

    def get_locales(self) -> list[str]:
        return self._translator.get_locales()

    def set_locale(self, locale: Optional[str]) -> None:
        self._translator.set_locale(locale)

    def set_fallback_locale(self, locale: Optional[str]) -> None:
        self._translator.set_fallback_locale(locale)

    def add_locale(self, locale: str, translations: Mapping[str, Any]) -> None:
        self._translator.add_locale(locale, translations)

    def replace_locale(self, locale: str, translations: Mapping[str, Any]) -> None:
        self._translator.replace_locale(locale, translations)

    def remove_locale(self, locale: str) -> None:
        self._translator.remove_locale(locale)

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance.

        Returns:
            The underlying Translator instance
        """
        return self._translator
