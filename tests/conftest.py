"""Shared fixtures for localekit tests."""

import pytest
import yaml

from localekit.logging import configure_logging
from tests.factories.i18n import make_repository, make_translator


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging():
    """Silence log output for the test session."""
    configure_logging()


@pytest.fixture
def repository():
    """Repository with "en" and "de", active and fallback locale "en"."""
    return make_repository()


@pytest.fixture
def translator(repository):
    """Translator over the sample repository."""
    return make_translator(repository)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - en.yml
    - checkout.en.yml
    - de.yml
    - checkout.de-CH.yml
    """
    files = {
        "en.yml": {
            "greeting": "Hello {name}",
            "menu": {"open": "Open", "close": "Close"},
        },
        "checkout.en.yml": {
            "menu": {"pay": "Pay"},
            "cart": {"items": ["{count} item", "{count} items"]},
        },
        "de.yml": {
            "greeting": "Hallo {name}",
            "menu": {"open": "Öffnen"},
        },
        "checkout.de-CH.yml": {
            "menu": {"pay": "Zahle"},
        },
    }
    for filename, data in files.items():
        with open(tmp_path / filename, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)

    return tmp_path
