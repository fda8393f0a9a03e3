"""Row assembly for rendered CSV columns."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from arrowcsv.core_types import RenderedColumn
from arrowcsv.options import WriteOptions
from arrowcsv.quoting import FieldText, field_text, format_field, format_header
from arrowcsv.types import TypeCategory


def assemble_row(fields: Sequence[FieldText], options: WriteOptions) -> str:
    """Join one row's fields and terminate it with the record separator.

    Returns
    -------
    str
        Row text including the trailing record separator.
    """
    body = options.delimiter.join(format_field(field) for field in fields)
    return body + options.record_separator


def assemble_header(names: Sequence[str], options: WriteOptions) -> str:
    """Return the header row for field names.

    Returns
    -------
    str
        Header row text including the trailing record separator.
    """
    return options.delimiter.join(format_header(names)) + options.record_separator


def iter_rows(
    columns: Sequence[RenderedColumn],
    categories: Sequence[TypeCategory],
    options: WriteOptions,
) -> Iterator[str]:
    """Assemble rows from rendered columns in schema order.

    Parameters
    ----------
    columns
        Rendered text per column, all of equal length.
    categories
        Type category per column, aligned with ``columns``.
    options
        Write options providing the delimiter and record separator.

    Yields
    ------
    str
        One assembled row per input row index.
    """
    reserved = options.reserved_chars()
    for values in zip(*columns, strict=True):
        fields = [
            field_text(category, value, reserved=reserved)
            for category, value in zip(categories, values, strict=True)
        ]
        yield assemble_row(fields, options)


__all__ = ["assemble_header", "assemble_row", "iter_rows"]
