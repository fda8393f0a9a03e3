"""Canonical text rendering for Arrow column values."""

from __future__ import annotations

from collections.abc import Callable

import pyarrow as pa
import pyarrow.compute as pc
import pyarrow.types as patypes

from arrowcsv.core_types import RenderedColumn
from arrowcsv.errors import UnsupportedTypeError
from arrowcsv.types import is_binary_type, is_text_type, value_type

type ColumnLike = pa.Array | pa.ChunkedArray
type ColumnRenderer = Callable[[ColumnLike], RenderedColumn]

# Binary values travel through str with surrogateescape so that encoding the
# row with the same handler restores the original bytes.
BINARY_TEXT_ERRORS = "surrogateescape"


def _storage_column(column: ColumnLike) -> ColumnLike:
    """Unwrap extension and dictionary layers down to plain values.

    Returns
    -------
    pa.Array | pa.ChunkedArray
        Column whose type equals ``value_type(column.type)``.
    """
    out = column
    while True:
        dtype = out.type
        if isinstance(dtype, pa.BaseExtensionType):
            if isinstance(out, pa.ChunkedArray):
                out = pa.chunked_array(
                    [chunk.storage for chunk in out.chunks],
                    type=dtype.storage_type,
                )
            else:
                out = out.storage
        elif patypes.is_dictionary(dtype):
            out = pc.cast(out, dtype.value_type)
        else:
            return out


def _render_text(column: ColumnLike) -> RenderedColumn:
    return column.to_pylist()


def _render_binary(column: ColumnLike) -> RenderedColumn:
    return [
        None if value is None else value.decode("utf-8", BINARY_TEXT_ERRORS)
        for value in column.to_pylist()
    ]


def _render_null(column: ColumnLike) -> RenderedColumn:
    return [None] * len(column)


def _render_cast(column: ColumnLike) -> RenderedColumn:
    return pc.cast(column, pa.string()).to_pylist()


def _render_half_float(column: ColumnLike) -> RenderedColumn:
    return _render_cast(pc.cast(column, pa.float32()))


def _render_duration(column: ColumnLike) -> RenderedColumn:
    # Durations render as their integer count in the type's unit.
    return _render_cast(pc.cast(column, pa.int64()))


_RENDER_DISPATCH: tuple[tuple[Callable[[pa.DataType], bool], ColumnRenderer], ...] = (
    (is_text_type, _render_text),
    (is_binary_type, _render_binary),
    (patypes.is_null, _render_null),
    (patypes.is_float16, _render_half_float),
    (patypes.is_duration, _render_duration),
    (patypes.is_boolean, _render_cast),
    (patypes.is_integer, _render_cast),
    (patypes.is_floating, _render_cast),
    (patypes.is_decimal, _render_cast),
    (patypes.is_date, _render_cast),
    (patypes.is_time, _render_cast),
    (patypes.is_timestamp, _render_cast),
)


def column_renderer(dtype: pa.DataType) -> ColumnRenderer:
    """Return the renderer for a column data type.

    Parameters
    ----------
    dtype
        Column data type, possibly dictionary or extension typed.

    Returns
    -------
    Callable[[pa.Array | pa.ChunkedArray], list[str | None]]
        Function rendering a column of ``dtype`` to text per row.

    Raises
    ------
    UnsupportedTypeError
        Raised when the type has no rendering rule.
    """
    resolved = value_type(dtype)
    for predicate, renderer in _RENDER_DISPATCH:
        if predicate(resolved):
            if resolved == dtype:
                return renderer
            return lambda column: renderer(_storage_column(column))
    msg = f"No CSV renderer for type {dtype}."
    raise UnsupportedTypeError(msg)


def render_column(column: ColumnLike) -> RenderedColumn:
    """Render every value of a column to canonical text.

    Returns
    -------
    list[str | None]
        Text per row, with ``None`` marking null slots.
    """
    return column_renderer(column.type)(column)


def stringify_scalar(scalar: pa.Scalar) -> str:
    """Render one non-null Arrow scalar to canonical text.

    Returns
    -------
    str
        Canonical text form of the scalar.

    Raises
    ------
    ValueError
        Raised when the scalar is null.
    """
    if not scalar.is_valid:
        msg = "Null scalars have no text form."
        raise ValueError(msg)
    text = render_column(pa.repeat(scalar, 1))[0]
    if text is None:
        msg = f"Scalar of type {scalar.type} rendered as null."
        raise ValueError(msg)
    return text


__all__ = [
    "BINARY_TEXT_ERRORS",
    "ColumnLike",
    "ColumnRenderer",
    "column_renderer",
    "render_column",
    "stringify_scalar",
]
