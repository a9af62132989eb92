"""localekit - locale-aware translation resolution."""

__version__ = "1.0.0"
