"""localekit configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from localekit.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """localekit configuration settings.

    Environment Variables:
        PREFIX: Environment prefix; an empty prefix means production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from localekit.configuration import settings

        fallback = settings.i18n.fallback_locale
        if settings.is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
