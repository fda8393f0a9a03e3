"""CSV writer for Arrow record batches, tables, and batch streams."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterable, Sequence
from types import TracebackType
from typing import Self, cast

import pyarrow as pa

from arrowcsv.encoder import CsvEncoder
from arrowcsv.errors import SchemaMismatchError
from arrowcsv.options import WriteOptions
from arrowcsv.results import CsvWriteResult
from arrowcsv.sinks import SinkTarget, append_to_sink, buffer_sink, open_sink

logger = logging.getLogger(__name__)

type CsvWriteInput = (
    pa.RecordBatch | pa.Table | pa.RecordBatchReader | Sequence[pa.RecordBatch]
)


class CsvWriter:
    """Incremental CSV writer bound to one schema.

    The header, when enabled, is written as soon as the writer opens, so a
    writer closed without any data still produces a header-only document.
    Batches and tables may be written repeatedly; their rows are appended in
    call order.

    Parameters
    ----------
    sink
        Writable byte sink or a filesystem path. Paths are opened and closed
        by the writer; caller-provided sinks are left open.
    schema
        Declared schema every written batch must match.
    options
        Write options; defaults to ``WriteOptions()``.
    """

    def __init__(
        self,
        sink: SinkTarget,
        schema: pa.Schema,
        options: WriteOptions | None = None,
    ) -> None:
        self._encoder = CsvEncoder.for_schema(schema, options)
        self._stack = contextlib.ExitStack()
        self._sink = self._stack.enter_context(open_sink(sink))
        self._closed = False
        self._rows = 0
        self._chunks = 0
        self._bytes = 0
        self._header_written = False
        if self._encoder.options.include_header:
            try:
                self._append(self._encoder.header_bytes())
            except BaseException:
                self._stack.close()
                raise
            self._header_written = True

    @property
    def schema(self) -> pa.Schema:
        """Return the declared schema."""
        return self._encoder.schema

    @property
    def options(self) -> WriteOptions:
        """Return the validated write options."""
        return self._encoder.options

    @property
    def closed(self) -> bool:
        """Return True once the writer has been closed."""
        return self._closed

    def _append(self, payload: bytes) -> None:
        self._bytes += append_to_sink(self._sink, payload)

    def _ensure_open(self) -> None:
        if self._closed:
            msg = "CSV writer is closed."
            raise ValueError(msg)

    def _write_rows(self, data: pa.RecordBatch | pa.Table) -> None:
        for payload in self._encoder.iter_encoded(data):
            self._append(payload)
            self._chunks += 1
        self._rows += data.num_rows

    def write_batch(self, batch: pa.RecordBatch) -> None:
        """Write every row of a record batch.

        Raises
        ------
        SchemaMismatchError
            Raised when the batch schema does not match the declared schema.
        SinkError
            Raised when the sink rejects a write.
        """
        self._ensure_open()
        self._encoder.check_schema(batch.schema)
        self._write_rows(batch)

    def write_table(self, table: pa.Table) -> None:
        """Write every row of a table, in batch order.

        Raises
        ------
        SchemaMismatchError
            Raised when the table schema does not match the declared schema.
        SinkError
            Raised when the sink rejects a write.
        """
        self._ensure_open()
        self._encoder.check_schema(table.schema)
        self._write_rows(table)

    def write_batches(self, batches: Iterable[pa.RecordBatch]) -> None:
        """Write a stream of record batches, validating each before its rows."""
        for batch in batches:
            self.write_batch(batch)

    def write(self, data: CsvWriteInput) -> None:
        """Write a batch, table, reader, or batch sequence.

        Raises
        ------
        TypeError
            Raised when the input is not a supported Arrow source.
        """
        if isinstance(data, pa.RecordBatch):
            self.write_batch(data)
        elif isinstance(data, pa.Table):
            self.write_table(data)
        else:
            self.write_batches(_iter_batches(data))

    def result(self) -> CsvWriteResult:
        """Return counters for everything written so far."""
        return CsvWriteResult(
            row_count=self._rows,
            chunk_count=self._chunks,
            bytes_written=self._bytes,
            header_written=self._header_written,
        )

    def close(self) -> CsvWriteResult:
        """Close the writer and any sink it opened.

        Returns
        -------
        CsvWriteResult
            Summary of the written document.
        """
        if not self._closed:
            self._closed = True
            self._stack.close()
            logger.info(
                "Wrote %d CSV rows in %d chunks (%d bytes)",
                self._rows,
                self._chunks,
                self._bytes,
            )
        return self.result()

    def __enter__(self) -> Self:
        """Return the writer for use as a context manager.

        Returns
        -------
        CsvWriter
            This writer.
        """
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close the writer."""
        if exc_type is None:
            self.close()
            return
        self._closed = True
        self._stack.close()


def _iter_batches(data: object) -> Iterable[pa.RecordBatch]:
    if isinstance(data, pa.RecordBatchReader):
        return data
    if hasattr(data, "__arrow_c_stream__"):
        return pa.RecordBatchReader.from_stream(data)
    if (
        isinstance(data, Sequence)
        and not isinstance(data, (str, bytes))
        and all(isinstance(item, pa.RecordBatch) for item in data)
    ):
        return cast("Sequence[pa.RecordBatch]", data)
    msg = f"Unsupported CSV write input: {type(data)}."
    raise TypeError(msg)


def _resolve_source(
    data: object,
    schema: pa.Schema | None,
) -> tuple[pa.Schema, pa.RecordBatch | pa.Table | Iterable[pa.RecordBatch]]:
    if isinstance(data, (pa.RecordBatch, pa.Table)):
        return schema or data.schema, data
    batches = _iter_batches(data)
    if isinstance(batches, pa.RecordBatchReader):
        return schema or batches.schema, batches
    batch_list = list(batches)
    if schema is None:
        if not batch_list:
            msg = "Cannot infer a CSV schema from an empty batch sequence."
            raise SchemaMismatchError(msg)
        schema = batch_list[0].schema
    for batch in batch_list:
        if batch.schema != batch_list[0].schema:
            msg = "Record batches in a sequence must share one schema."
            raise SchemaMismatchError(msg)
    return schema, batch_list


def write_csv(
    data: CsvWriteInput,
    sink: SinkTarget,
    options: WriteOptions | None = None,
    *,
    schema: pa.Schema | None = None,
) -> CsvWriteResult:
    """Write Arrow data to a sink as CSV.

    Options and every field type are validated before anything is written.
    Batches, tables, sequences, and reader schemas are validated against
    the declared schema up front; reader batches are checked again before
    each batch's rows are emitted. A failure leaves whatever prefix was
    already appended.

    Parameters
    ----------
    data
        Record batch, table, record batch reader, or sequence of batches.
    sink
        Writable byte sink or filesystem path.
    options
        Write options; defaults to ``WriteOptions()``.
    schema
        Declared schema; defaults to the schema of ``data``.

    Returns
    -------
    CsvWriteResult
        Summary of the written document.

    Raises
    ------
    SchemaMismatchError
        Raised when any batch disagrees with the declared schema.
    """
    declared, source = _resolve_source(data, schema)
    encoder = CsvEncoder.for_schema(declared, options)
    if isinstance(source, pa.RecordBatchReader):
        encoder.check_schema(source.schema)
    elif isinstance(source, (pa.RecordBatch, pa.Table, list)):
        for item in source if isinstance(source, list) else (source,):
            encoder.check_schema(item.schema)
    with CsvWriter(sink, declared, encoder.options) as writer:
        writer.write(source)
    return writer.result()


def to_csv_bytes(
    data: CsvWriteInput,
    options: WriteOptions | None = None,
    *,
    schema: pa.Schema | None = None,
) -> bytes:
    """Encode Arrow data as CSV and return the bytes.

    Returns
    -------
    bytes
        Complete CSV document.
    """
    sink = buffer_sink()
    write_csv(data, sink, options, schema=schema)
    return sink.getvalue().to_pybytes()


__all__ = ["CsvWriteInput", "CsvWriter", "to_csv_bytes", "write_csv"]
