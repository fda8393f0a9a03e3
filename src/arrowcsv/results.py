"""Result contracts for CSV write calls."""

from __future__ import annotations

import msgspec

from arrowcsv.core_types import JsonDict


class CsvWriteResult(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    forbid_unknown_fields=True,
):
    """Summary of a completed CSV write.

    Attributes
    ----------
    row_count : int
        Data rows written, excluding the header.
    chunk_count : int
        Encoded chunks appended to the sink.
    bytes_written : int
        Bytes appended to the sink, including the header.
    header_written : bool
        Whether a header row was written.
    """

    row_count: int = 0
    chunk_count: int = 0
    bytes_written: int = 0
    header_written: bool = False


def write_result_payload(result: CsvWriteResult) -> JsonDict:
    """Return a JSON-ready payload for a write result.

    Returns
    -------
    JsonDict
        Builtin mapping of the result fields.
    """
    return msgspec.to_builtins(result)


def write_result_json(result: CsvWriteResult) -> bytes:
    """Return the canonical JSON encoding of a write result."""
    return msgspec.json.encode(result, order="deterministic")


def decode_write_result(payload: bytes) -> CsvWriteResult:
    """Decode a write result from JSON.

    Returns
    -------
    CsvWriteResult
        Decoded and validated result.
    """
    return msgspec.json.decode(payload, type=CsvWriteResult)


__all__ = [
    "CsvWriteResult",
    "decode_write_result",
    "write_result_json",
    "write_result_payload",
]
