"""Tests for CSV write options, environment settings, and results."""

from __future__ import annotations

import pytest

from arrowcsv.env_utils import decode_escapes
from arrowcsv.errors import ConfigError, CsvWriteError
from arrowcsv.options import WriteOptions, validate_write_options, write_options_payload
from arrowcsv.results import (
    CsvWriteResult,
    decode_write_result,
    write_result_json,
    write_result_payload,
)
from arrowcsv.settings import write_options_from_env, write_settings_from_env


def test_defaults() -> None:
    """Use comma delimiters, LF separators, and a header by default."""
    options = validate_write_options(WriteOptions())
    assert options.batch_size == 1024
    assert options.include_header is True
    assert options.delimiter == ","
    assert options.record_separator == "\n"


@pytest.mark.parametrize(
    "options",
    [
        WriteOptions(batch_size=0),
        WriteOptions(batch_size=-5),
        WriteOptions(delimiter=""),
        WriteOptions(delimiter=";;"),
        WriteOptions(delimiter='"'),
        WriteOptions(record_separator=""),
        WriteOptions(record_separator='"\n'),
        WriteOptions(delimiter="\n"),
    ],
)
def test_invalid_options(options: WriteOptions) -> None:
    """Reject options that would make the output ambiguous."""
    with pytest.raises(ConfigError):
        validate_write_options(options)


def test_config_error_is_value_error() -> None:
    """Let callers catch configuration errors as ValueError."""
    with pytest.raises(ValueError):  # noqa: PT011
        validate_write_options(WriteOptions(batch_size=0))
    assert issubclass(ConfigError, CsvWriteError)


def test_options_are_frozen() -> None:
    """Keep options immutable."""
    options = WriteOptions()
    with pytest.raises(AttributeError):
        options.batch_size = 5  # type: ignore[misc]


def test_options_payload() -> None:
    """Describe options as a JSON-ready mapping."""
    payload = write_options_payload(WriteOptions(delimiter="\t"))
    assert payload == {
        "batch_size": 1024,
        "include_header": True,
        "delimiter": "\t",
        "record_separator": "\n",
        "quote_char": '"',
    }


def test_env_settings_defaults() -> None:
    """Fall back to defaults when no variables are set."""
    assert write_options_from_env() == WriteOptions()


def test_env_settings_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Apply every supported environment override."""
    monkeypatch.setenv("ARROWCSV_BATCH_SIZE", " 64 ")
    monkeypatch.setenv("ARROWCSV_INCLUDE_HEADER", "false")
    monkeypatch.setenv("ARROWCSV_DELIMITER", "\\t")
    monkeypatch.setenv("ARROWCSV_RECORD_SEPARATOR", "\\r\\n")
    options = write_options_from_env()
    assert options == WriteOptions(
        batch_size=64,
        include_header=False,
        delimiter="\t",
        record_separator="\r\n",
    )


def test_env_settings_custom_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read variables under a caller-chosen prefix."""
    monkeypatch.setenv("EXPORT_DELIMITER", " ")
    settings = write_settings_from_env("EXPORT_")
    assert settings.delimiter == " "


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("ARROWCSV_BATCH_SIZE", "0"),
        ("ARROWCSV_BATCH_SIZE", "many"),
        ("ARROWCSV_INCLUDE_HEADER", "sometimes"),
        ("ARROWCSV_DELIMITER", ";;"),
        ("ARROWCSV_DELIMITER", '"'),
    ],
)
def test_env_settings_invalid(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    """Surface invalid environment values as configuration errors."""
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        write_options_from_env()


def test_decode_escapes() -> None:
    """Decode tab, CR, LF, and backslash escapes only."""
    assert decode_escapes("\\t|\\r\\n|\\\\|\\x") == "\t|\r\n|\\|\\x"


def test_write_result_serialization() -> None:
    """Encode results deterministically and decode them back."""
    result = CsvWriteResult(row_count=6, chunk_count=2, bytes_written=120, header_written=True)
    assert write_result_payload(result) == {
        "row_count": 6,
        "chunk_count": 2,
        "bytes_written": 120,
        "header_written": True,
    }
    encoded = write_result_json(result)
    assert decode_write_result(encoded) == result
