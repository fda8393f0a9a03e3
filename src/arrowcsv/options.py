"""CSV write options and validation helpers."""

from __future__ import annotations

from dataclasses import dataclass

from arrowcsv.core_types import JsonDict
from arrowcsv.errors import ConfigError

QUOTE_CHAR = '"'
DEFAULT_BATCH_SIZE = 1024
DEFAULT_DELIMITER = ","
DEFAULT_RECORD_SEPARATOR = "\n"


@dataclass(frozen=True)
class WriteOptions:
    """Configuration for CSV write calls.

    Attributes
    ----------
    batch_size : int
        Maximum number of rows rendered per chunk.
    include_header : bool
        Whether a header row of field names is written first.
    delimiter : str
        Single character separating fields.
    record_separator : str
        String terminating every row.
    """

    batch_size: int = DEFAULT_BATCH_SIZE
    include_header: bool = True
    delimiter: str = DEFAULT_DELIMITER
    record_separator: str = DEFAULT_RECORD_SEPARATOR

    def reserved_chars(self) -> frozenset[str]:
        """Return characters that force quoting of scalar text.

        Returns
        -------
        frozenset[str]
            Delimiter, quote character, and record separator characters.
        """
        return frozenset({self.delimiter, QUOTE_CHAR, *self.record_separator})


def validate_write_options(options: WriteOptions) -> WriteOptions:
    """Validate write options before any output is produced.

    Parameters
    ----------
    options
        Options to validate.

    Returns
    -------
    WriteOptions
        The validated options, unchanged.

    Raises
    ------
    ConfigError
        Raised when the batch size, delimiter, or record separator is invalid.
    """
    if isinstance(options.batch_size, bool) or not isinstance(options.batch_size, int):
        msg = f"batch_size must be an integer, got {type(options.batch_size).__name__}."
        raise ConfigError(msg)
    if options.batch_size <= 0:
        msg = f"batch_size must be positive, got {options.batch_size}."
        raise ConfigError(msg)
    if len(options.delimiter) != 1:
        msg = f"delimiter must be a single character, got {options.delimiter!r}."
        raise ConfigError(msg)
    if options.delimiter == QUOTE_CHAR:
        msg = "delimiter must differ from the quote character."
        raise ConfigError(msg)
    if not options.record_separator:
        msg = "record_separator must not be empty."
        raise ConfigError(msg)
    if QUOTE_CHAR in options.record_separator:
        msg = "record_separator must not contain the quote character."
        raise ConfigError(msg)
    if options.delimiter in options.record_separator:
        msg = "record_separator must not contain the delimiter."
        raise ConfigError(msg)
    return options


def write_options_payload(options: WriteOptions | None) -> JsonDict:
    """Return a JSON-friendly payload for CSV write options.

    Returns
    -------
    JsonDict
        JSON-ready CSV write configuration payload.
    """
    resolved = options or WriteOptions()
    return {
        "batch_size": resolved.batch_size,
        "include_header": resolved.include_header,
        "delimiter": resolved.delimiter,
        "record_separator": resolved.record_separator,
        "quote_char": QUOTE_CHAR,
    }


__all__ = [
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_DELIMITER",
    "DEFAULT_RECORD_SEPARATOR",
    "QUOTE_CHAR",
    "WriteOptions",
    "validate_write_options",
    "write_options_payload",
]
