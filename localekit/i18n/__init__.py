"""i18n engine - translation resolution with locale fallback.

Resolves a translation key and a requested locale into a rendered string,
falling back from regional to parent locales and to a global fallback
locale, substituting placeholders and selecting plural variants.

Main components:
- flattener: flatten / unflatten nested translation trees
- plurals: plural_index per language family
- renderer: Renderer for placeholders and plural variants
- repository: TranslationRepository and InMemoryTranslationRepository
- translator: Translator resolution engine
- loader: TranslationLoader and YAMLTranslationLoader
"""

from localekit.i18n.factory import create_translator
from localekit.i18n.flattener import flatten, unflatten
from localekit.i18n.loader import TranslationLoader, YAMLTranslationLoader
from localekit.i18n.models import (
    I18nConfig,
    KeyScope,
    LocaleTag,
    TranslationRequest,
)
from localekit.i18n.plurals import plural_form_count, plural_index
from localekit.i18n.renderer import Renderer
from localekit.i18n.repository import (
    InMemoryTranslationRepository,
    TranslationRepository,
)
from localekit.i18n.service import TranslationService
from localekit.i18n.translator import Translator
from localekit.i18n.validation import find_mixed_plural_conventions

__all__ = [
    "I18nConfig",
    "KeyScope",
    "LocaleTag",
    "TranslationRequest",
    "flatten",
    "unflatten",
    "plural_index",
    "plural_form_count",
    "Renderer",
    "TranslationRepository",
    "InMemoryTranslationRepository",
    "Translator",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "TranslationService",
    "create_translator",
    "find_mixed_plural_conventions",
]
