"""Translation resolution with locale fallback.

Core component of the i18n engine: looks a key up in the requested locale,
its parent language and the fallback locale, then renders the value.
"""

import asyncio
import dataclasses
import inspect
from concurrent.futures import Future, wait
from threading import Lock
from typing import Any, Dict, List, Mapping, Optional, Set, Union

from localekit.i18n.background import run_coroutine_in_background
from localekit.i18n.models import (
    I18nConfig,
    KeyScope,
    LocaleTag,
    TranslationRequest,
    ignore_not_found,
)
from localekit.i18n.renderer import Renderer
from localekit.i18n.repository import TranslationRepository
from localekit.i18n.validation import find_mixed_plural_conventions
from localekit.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for resolving translation keys into rendered strings.

    Resolution order for a locale such as "de-CH":
    1. the exact locale ("de-CH")
    2. the parent language ("de")
    3. the fallback locale, after notifying on_translation_not_found
    4. the default value

    Attributes:
        repository: TranslationRepository holding the translations.
        config: I18nConfig options.
        renderer: Renderer built from the configured identifiers.
    """

    def __init__(
        self,
        repository: TranslationRepository,
        config: Optional[I18nConfig] = None,
    ):
        """Initialize Translator.

        Args:
            repository: Translation state to read from and write to.
            config: Options (default: I18nConfig()).
        """
        self.repository = repository
        self.config = config or I18nConfig()

        if not callable(self.config.on_translation_not_found):
            logger.error(
                "on_translation_not_found_not_callable",
                value=repr(self.config.on_translation_not_found),
            )
            self.config = dataclasses.replace(
                self.config, on_translation_not_found=ignore_not_found
            )

        self.renderer = Renderer(self.config.identifiers, self.config.warnings)
        self._pending: Set[Future] = set()
        self._pending_lock = Lock()
        self._tasks: Set[asyncio.Future] = set()
        logger.info(
            "initialized_translator",
            identifiers=list(self.config.identifiers),
            warnings=self.config.warnings,
        )

    def translate(
        self,
        key: str,
        default_value: Optional[str] = None,
        replacements: Optional[Mapping[str, Any]] = None,
        pluralization: Optional[Any] = None,
    ) -> Any:
        """Translate key in the active locale.

        Args:
            key: Dotted translation key.
            default_value: Value used when no locale has the key (default: key).
            replacements: Placeholder name -> value.
            pluralization: Count selecting the plural variant.

        Returns:
            Rendered translation.
        """
        return self.translate_in(
            self.repository.get_active_locale(),
            key,
            default_value,
            replacements,
            pluralization,
        )

    def translate_in(
        self,
        locale: Optional[str],
        key: str,
        default_value: Optional[str] = None,
        replacements: Optional[Mapping[str, Any]] = None,
        pluralization: Optional[Any] = None,
    ) -> Any:
        """Translate key in the given locale.

        Returns:
            Rendered translation.
        """
        request = TranslationRequest(
            key=key,
            default_value=default_value,
            replacements=replacements or {},
            pluralization=pluralization,
        )
        return self.resolve(locale, request)

    def resolve(self, locale: Optional[str], request: TranslationRequest) -> Any:
        """Resolve a request against the repository's current state.

        Never raises for missing data: the default value is rendered when no
        tier has the key.

        Args:
            locale: Requested locale code.
            request: Key, default value, replacements and count.

        Returns:
            Rendered string (or list of strings for list values rendered
            without a count).
        """
        key = request.key
        default = request.default
        replacements = request.replacements
        count = request.pluralization

        # may happen before a locale has been selected
        if not locale:
            if self.config.warnings:
                logger.warning("locale_not_set", key=key)
            return default

        translations = self.repository.get_flat_table()
        fallback = self.repository.get_fallback_locale()

        if key in translations.get(locale, {}):
            return self.renderer.render(
                locale, translations[locale][key], replacements, count
            )

        parent = LocaleTag.parse(locale).parent
        if parent and key in translations.get(parent, {}):
            return self.renderer.render(
                parent, translations[parent][key], replacements, count
            )

        pending = self._notify_not_found(locale, key, default)

        if fallback not in translations:
            result = self.renderer.render(locale, default, replacements, count)
        elif key not in translations[fallback]:
            result = self.renderer.render(fallback, default, replacements, count)
        else:
            # plural rule of the requested locale, value of the fallback locale
            result = self.renderer.render(
                locale, translations[fallback][key], replacements, count
            )

        if pending is not None:
            self._schedule_store(locale, key, pending)

        return result

    def key_exists(
        self,
        key: str,
        scope: Union[KeyScope, str] = KeyScope.FALLBACK,
    ) -> bool:
        """Check whether key resolves in the active locale.

        Args:
            key: Dotted translation key.
            scope: "strict" checks the exact locale only, "locale" adds the
                parent language, "fallback" adds the fallback locale.

        Returns:
            True if one of the checked locales has the key.
        """
        scope = KeyScope(scope)
        locale = self.repository.get_active_locale()
        translations = self.repository.get_flat_table()

        if locale and key in translations.get(locale, {}):
            return True

        if scope == KeyScope.STRICT:
            return False

        parent = LocaleTag.parse(locale).parent if locale else None
        if parent and key in translations.get(parent, {}):
            return True

        if scope == KeyScope.LOCALE:
            return False

        fallback = self.repository.get_fallback_locale()
        return key in translations.get(fallback, {})

    def locale_exists(self, locale: str) -> bool:
        """Check whether translations are loaded for locale."""
        return locale in self.repository.get_flat_table()

    def get_locale(self) -> Optional[str]:
        """Return the active locale."""
        return self.repository.get_active_locale()

    def get_locales(self) -> List[str]:
        """Return all loaded locales."""
        return list(self.repository.get_flat_table().keys())

    def set_locale(self, locale: Optional[str]) -> None:
        self.repository.set_locale(locale)

    def set_fallback_locale(self, locale: Optional[str]) -> None:
        self.repository.set_fallback_locale(locale)

    def add_locale(self, locale: str, translations: Mapping[str, Any]) -> None:
        """Add translations to a locale, keeping existing keys."""
        self.repository.add_locale(locale, translations)

    def replace_locale(self, locale: str, translations: Mapping[str, Any]) -> None:
        """Replace all translations of a locale."""
        self.repository.replace_locale(locale, translations)

    def remove_locale(self, locale: str) -> None:
        """Remove a locale if it is loaded."""
        if self.locale_exists(locale):
            self.repository.remove_locale(locale)

    def validate_translations(self) -> Dict[str, Dict[str, List[str]]]:
        """Report keys mixing list and ":::" plural variants across locales."""
        return find_mixed_plural_conventions(self.repository.get_flat_table())

    def wait_for_pending(self, timeout: Optional[float] = None) -> bool:
        """Wait for thread-backed not-found results to be stored.

        Tasks scheduled on a running event loop are not covered.

        Args:
            timeout: Seconds to wait, None to wait indefinitely.

        Returns:
            True if nothing is left pending.
        """
        with self._pending_lock:
            pending = list(self._pending)
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def _notify_not_found(self, locale: str, key: str, default: str) -> Any:
        try:
            return self.config.on_translation_not_found(locale, key, default)
        except Exception as e:
            logger.exception(
                "on_translation_not_found_failed",
                locale=locale,
                key=key,
                error=str(e),
            )
            return None

    def _schedule_store(self, locale: str, key: str, result: Any) -> None:
        """Post the not-found result to the repository once it is available."""
        if isinstance(result, Future):
            self._track(locale, key, result)
            return

        if inspect.isawaitable(result):
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                loop = None

            if loop is not None:
                task = asyncio.ensure_future(result)
                self._tasks.add(task)
                task.add_done_callback(self._tasks.discard)
                task.add_done_callback(
                    lambda done: self._store_result(locale, key, done)
                )
            else:
                if not inspect.iscoroutine(result):
                    result = _await(result)
                future = run_coroutine_in_background(result)
                if future is not None:
                    self._track(locale, key, future)
            return

        self._store_value(locale, key, result)

    def _track(self, locale: str, key: str, future: Future) -> None:
        stored: Future = Future()
        with self._pending_lock:
            self._pending.add(stored)

        def _on_done(done: Future) -> None:
            try:
                self._store_result(locale, key, done)
            finally:
                with self._pending_lock:
                    self._pending.discard(stored)
                stored.set_result(None)

        future.add_done_callback(_on_done)

    def _store_result(self, locale: str, key: str, done: Any) -> None:
        if done.cancelled():
            logger.info("not_found_resolution_cancelled", locale=locale, key=key)
            return
        try:
            value = done.result()
        except Exception as e:
            logger.exception(
                "not_found_resolution_failed",
                locale=locale,
                key=key,
                error=str(e),
            )
            return
        self._store_value(locale, key, value)

    def _store_value(self, locale: str, key: str, value: Any) -> None:
        if not value:
            return
        self.repository.add_locale(locale, {key: value})
        logger.info("stored_resolved_translation", locale=locale, key=key)


async def _await(awaitable: Any) -> Any:
    return await awaitable
