"""Schema-bound CSV encoder for record batches and tables."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

import pyarrow as pa

from arrowcsv.chunking import ChunkSource, iter_chunks
from arrowcsv.errors import SchemaMismatchError
from arrowcsv.options import WriteOptions, validate_write_options
from arrowcsv.rows import assemble_header, iter_rows
from arrowcsv.stringify import BINARY_TEXT_ERRORS, ColumnRenderer, column_renderer
from arrowcsv.types import TypeCategory, schema_categories

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"


def _encode_text(text: str) -> bytes:
    return text.encode(_ENCODING, BINARY_TEXT_ERRORS)


def schema_mismatch(declared: pa.Schema, actual: pa.Schema) -> str | None:
    """Return a description of the first arity or type mismatch.

    Field names are not compared; only field count and per-field types.

    Returns
    -------
    str | None
        Mismatch description, or ``None`` when the schemas are compatible.
    """
    if len(declared) != len(actual):
        return f"expected {len(declared)} fields, got {len(actual)}"
    for index, (expected, found) in enumerate(zip(declared, actual, strict=True)):
        if expected.type != found.type:
            return (
                f"field {index} ({expected.name!r}) expected type {expected.type}, "
                f"got {found.type}"
            )
    return None


@dataclass(frozen=True)
class CsvEncoder:
    """Encode batches of one schema into CSV bytes.

    Use ``CsvEncoder.for_schema`` to construct; it validates the options and
    resolves a quoting category and renderer per field.
    """

    schema: pa.Schema
    options: WriteOptions
    categories: tuple[TypeCategory, ...]
    renderers: tuple[ColumnRenderer, ...]

    @classmethod
    def for_schema(cls, schema: pa.Schema, options: WriteOptions | None = None) -> CsvEncoder:
        """Return an encoder for a schema.

        Returns
        -------
        CsvEncoder
            Encoder bound to the schema and validated options.

        Raises
        ------
        SchemaMismatchError
            Raised when the schema has no fields.
        """
        resolved = validate_write_options(options or WriteOptions())
        if len(schema) == 0:
            msg = "CSV output requires at least one field."
            raise SchemaMismatchError(msg)
        categories = schema_categories(schema)
        renderers = tuple(column_renderer(field.type) for field in schema)
        return cls(
            schema=schema,
            options=resolved,
            categories=categories,
            renderers=renderers,
        )

    def check_schema(self, schema: pa.Schema) -> None:
        """Validate that a batch schema matches the declared schema.

        Raises
        ------
        SchemaMismatchError
            Raised when field count or any field type differs.
        """
        mismatch = schema_mismatch(self.schema, schema)
        if mismatch is not None:
            msg = f"Batch schema does not match the declared CSV schema: {mismatch}."
            raise SchemaMismatchError(msg)

    def header_bytes(self) -> bytes:
        """Return the encoded header row."""
        return _encode_text(assemble_header(self.schema.names, self.options))

    def encode_chunk(self, chunk: ChunkSource) -> bytes:
        """Encode every row of a chunk.

        Returns
        -------
        bytes
            Encoded rows, each terminated by the record separator.
        """
        columns = [
            renderer(chunk.column(index)) for index, renderer in enumerate(self.renderers)
        ]
        return _encode_text("".join(iter_rows(columns, self.categories, self.options)))

    def iter_encoded(self, data: ChunkSource) -> Iterator[bytes]:
        """Yield encoded chunks of a batch or table in row order.

        Yields
        ------
        bytes
            Encoded rows for each chunk of at most ``batch_size`` rows.
        """
        for chunk in iter_chunks(data, self.options.batch_size):
            logger.debug("Encoding CSV chunk of %d rows", chunk.num_rows)
            yield self.encode_chunk(chunk)


__all__ = ["CsvEncoder", "schema_mismatch"]
