"""Type categories that drive CSV quoting decisions."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

import pyarrow as pa
import pyarrow.types as patypes

from arrowcsv.errors import UnsupportedTypeError


class TypeCategory(Enum):
    """Quoting category for an Arrow data type.

    ``TEXT_LIKE`` values are always quoted when present so that an empty
    string never renders like a null. ``SCALAR_LIKE`` values are quoted only
    when their text collides with a reserved character.
    """

    TEXT_LIKE = "text_like"
    SCALAR_LIKE = "scalar_like"


def is_text_type(dtype: pa.DataType) -> bool:
    """Return True for UTF-8 string types."""
    return (
        patypes.is_string(dtype)
        or patypes.is_large_string(dtype)
        or patypes.is_string_view(dtype)
    )


def is_binary_type(dtype: pa.DataType) -> bool:
    """Return True for binary types, including fixed-size binary."""
    return (
        patypes.is_binary(dtype)
        or patypes.is_large_binary(dtype)
        or patypes.is_binary_view(dtype)
        or patypes.is_fixed_size_binary(dtype)
    )


_CATEGORY_DISPATCH: tuple[tuple[Callable[[pa.DataType], bool], TypeCategory], ...] = (
    (is_text_type, TypeCategory.TEXT_LIKE),
    (is_binary_type, TypeCategory.TEXT_LIKE),
    (patypes.is_null, TypeCategory.SCALAR_LIKE),
    (patypes.is_boolean, TypeCategory.SCALAR_LIKE),
    (patypes.is_integer, TypeCategory.SCALAR_LIKE),
    (patypes.is_floating, TypeCategory.SCALAR_LIKE),
    (patypes.is_decimal, TypeCategory.SCALAR_LIKE),
    (patypes.is_date, TypeCategory.SCALAR_LIKE),
    (patypes.is_time, TypeCategory.SCALAR_LIKE),
    (patypes.is_timestamp, TypeCategory.SCALAR_LIKE),
    (patypes.is_duration, TypeCategory.SCALAR_LIKE),
)


def value_type(dtype: pa.DataType) -> pa.DataType:
    """Return the type whose values are rendered for a column type.

    Dictionary types resolve to their value type and extension types to
    their storage type.

    Returns
    -------
    pyarrow.DataType
        Type used for rendering.
    """
    resolved = dtype
    while True:
        if isinstance(resolved, pa.BaseExtensionType):
            resolved = resolved.storage_type
        elif patypes.is_dictionary(resolved):
            resolved = resolved.value_type
        else:
            return resolved


def type_category(dtype: pa.DataType) -> TypeCategory:
    """Return the quoting category for an Arrow data type.

    Parameters
    ----------
    dtype
        Column data type.

    Returns
    -------
    TypeCategory
        Category used by the quoting policy.

    Raises
    ------
    UnsupportedTypeError
        Raised when the type has no CSV rendering rule.
    """
    resolved = value_type(dtype)
    for predicate, category in _CATEGORY_DISPATCH:
        if predicate(resolved):
            return category
    msg = f"CSV writing does not support type {dtype}."
    raise UnsupportedTypeError(msg)


def schema_categories(schema: pa.Schema) -> tuple[TypeCategory, ...]:
    """Return the quoting category for every field of a schema.

    Returns
    -------
    tuple[TypeCategory, ...]
        Categories in schema order.

    Raises
    ------
    UnsupportedTypeError
        Raised when any field type has no rendering rule.
    """
    categories: list[TypeCategory] = []
    for field in schema:
        try:
            categories.append(type_category(field.type))
        except UnsupportedTypeError as exc:
            msg = f"Field {field.name!r}: {exc}"
            raise UnsupportedTypeError(msg) from exc
    return tuple(categories)


__all__ = [
    "TypeCategory",
    "is_binary_type",
    "is_text_type",
    "schema_categories",
    "type_category",
    "value_type",
]
