"""Byte-stable CSV encoding for Arrow record batches and tables."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arrowcsv.chunking import chunk_ranges, iter_chunks
    from arrowcsv.encoder import CsvEncoder
    from arrowcsv.errors import (
        ConfigError,
        CsvWriteError,
        SchemaMismatchError,
        SinkError,
        UnsupportedTypeError,
    )
    from arrowcsv.options import WriteOptions, validate_write_options
    from arrowcsv.results import CsvWriteResult
    from arrowcsv.settings import write_options_from_env
    from arrowcsv.stringify import render_column, stringify_scalar
    from arrowcsv.types import TypeCategory, type_category
    from arrowcsv.writer import CsvWriter, to_csv_bytes, write_csv

__all__ = [
    "ConfigError",
    "CsvEncoder",
    "CsvWriteError",
    "CsvWriteResult",
    "CsvWriter",
    "SchemaMismatchError",
    "SinkError",
    "TypeCategory",
    "UnsupportedTypeError",
    "WriteOptions",
    "chunk_ranges",
    "iter_chunks",
    "render_column",
    "stringify_scalar",
    "to_csv_bytes",
    "type_category",
    "validate_write_options",
    "write_csv",
    "write_options_from_env",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "chunk_ranges": ("arrowcsv.chunking", "chunk_ranges"),
    "iter_chunks": ("arrowcsv.chunking", "iter_chunks"),
    "CsvEncoder": ("arrowcsv.encoder", "CsvEncoder"),
    "ConfigError": ("arrowcsv.errors", "ConfigError"),
    "CsvWriteError": ("arrowcsv.errors", "CsvWriteError"),
    "SchemaMismatchError": ("arrowcsv.errors", "SchemaMismatchError"),
    "SinkError": ("arrowcsv.errors", "SinkError"),
    "UnsupportedTypeError": ("arrowcsv.errors", "UnsupportedTypeError"),
    "WriteOptions": ("arrowcsv.options", "WriteOptions"),
    "validate_write_options": ("arrowcsv.options", "validate_write_options"),
    "CsvWriteResult": ("arrowcsv.results", "CsvWriteResult"),
    "write_options_from_env": ("arrowcsv.settings", "write_options_from_env"),
    "render_column": ("arrowcsv.stringify", "render_column"),
    "stringify_scalar": ("arrowcsv.stringify", "stringify_scalar"),
    "TypeCategory": ("arrowcsv.types", "TypeCategory"),
    "type_category": ("arrowcsv.types", "type_category"),
    "CsvWriter": ("arrowcsv.writer", "CsvWriter"),
    "to_csv_bytes": ("arrowcsv.writer", "to_csv_bytes"),
    "write_csv": ("arrowcsv.writer", "write_csv"),
}


def __getattr__(name: str) -> object:
    if name not in _EXPORTS:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    module_name, attr = _EXPORTS[name]
    module = importlib.import_module(module_name)
    value = getattr(module, attr)
    globals()[name] = value
    return value
