"""Environment-driven defaults for CSV write options."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from arrowcsv.env_utils import decode_escapes, env_raw, env_value
from arrowcsv.errors import ConfigError
from arrowcsv.options import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_DELIMITER,
    DEFAULT_RECORD_SEPARATOR,
    WriteOptions,
    validate_write_options,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "ARROWCSV_"


class WriteSettingsRuntime(BaseModel):
    """Validated CSV write settings."""

    model_config = ConfigDict(
        extra="forbid",
        validate_default=True,
        frozen=True,
        revalidate_instances="always",
    )

    batch_size: int = Field(default=DEFAULT_BATCH_SIZE, ge=1)
    include_header: bool = True
    delimiter: str = Field(default=DEFAULT_DELIMITER, min_length=1, max_length=1)
    record_separator: str = Field(default=DEFAULT_RECORD_SEPARATOR, min_length=1)

    def to_options(self) -> WriteOptions:
        """Return validated write options for these settings.

        Returns
        -------
        WriteOptions
            Options built from the settings.
        """
        return validate_write_options(
            WriteOptions(
                batch_size=self.batch_size,
                include_header=self.include_header,
                delimiter=self.delimiter,
                record_separator=self.record_separator,
            )
        )


def _env_overrides(prefix: str) -> dict[str, str]:
    overrides: dict[str, str] = {}
    batch_size = env_value(f"{prefix}BATCH_SIZE")
    if batch_size is not None:
        overrides["batch_size"] = batch_size
    include_header = env_value(f"{prefix}INCLUDE_HEADER")
    if include_header is not None:
        overrides["include_header"] = include_header
    delimiter = env_raw(f"{prefix}DELIMITER")
    if delimiter is not None:
        overrides["delimiter"] = decode_escapes(delimiter)
    record_separator = env_raw(f"{prefix}RECORD_SEPARATOR")
    if record_separator is not None:
        overrides["record_separator"] = decode_escapes(record_separator)
    return overrides


def write_settings_from_env(prefix: str = ENV_PREFIX) -> WriteSettingsRuntime:
    """Return write settings from environment variables.

    Reads ``<prefix>BATCH_SIZE``, ``<prefix>INCLUDE_HEADER``,
    ``<prefix>DELIMITER`` and ``<prefix>RECORD_SEPARATOR``. Unset variables
    keep their defaults.

    Returns
    -------
    WriteSettingsRuntime
        Validated settings.

    Raises
    ------
    ConfigError
        Raised when a variable holds an invalid value.
    """
    overrides = _env_overrides(prefix)
    if overrides:
        logger.debug("CSV write settings from environment: %s", sorted(overrides))
    try:
        return WriteSettingsRuntime.model_validate(overrides)
    except ValidationError as exc:
        msg = f"Invalid CSV write settings in environment: {exc}"
        raise ConfigError(msg) from exc


def write_options_from_env(prefix: str = ENV_PREFIX) -> WriteOptions:
    """Return write options with environment overrides applied.

    Returns
    -------
    WriteOptions
        Validated write options.
    """
    return write_settings_from_env(prefix).to_options()


__all__ = [
    "ENV_PREFIX",
    "WriteSettingsRuntime",
    "write_options_from_env",
    "write_settings_from_env",
]
