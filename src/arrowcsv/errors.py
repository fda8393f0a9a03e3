"""CSV write error types for configuration, schema, and sink failures."""

from __future__ import annotations


class CsvWriteError(Exception):
    """Base class for CSV write errors."""


class ConfigError(CsvWriteError, ValueError):
    """Raised when write options or settings are invalid."""


class SchemaMismatchError(CsvWriteError, ValueError):
    """Raised when a batch schema disagrees with the declared schema."""


class UnsupportedTypeError(CsvWriteError, TypeError):
    """Raised when a field type has no CSV rendering rule."""


class SinkError(CsvWriteError, OSError):
    """Raised when appending to the output sink fails."""


__all__ = [
    "ConfigError",
    "CsvWriteError",
    "SchemaMismatchError",
    "SinkError",
    "UnsupportedTypeError",
]
