"""localekit configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings class

Example:
    ```python
    from localekit.configuration import settings

    log_level = settings.LOG_LEVEL
    identifiers = settings.i18n.identifiers
    ```
"""

from localekit.configuration.i18n import I18nSettings
from localekit.configuration.settings import Settings

settings = Settings()

__all__ = ["settings", "Settings", "I18nSettings"]
