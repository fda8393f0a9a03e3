"""Quoting policy for CSV fields.

A null renders as a bare empty field for every type. Present text-like
values are always quoted, so an empty string renders as ``""`` and never
collides with a null. Scalar-like values are quoted only when their text
contains the delimiter, the quote character, or a record separator
character. Header names are always quoted.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from arrowcsv.options import QUOTE_CHAR
from arrowcsv.types import TypeCategory

_ESCAPED_QUOTE = QUOTE_CHAR * 2


class FieldText(NamedTuple):
    """Rendered field text and whether it must be quoted."""

    text: str
    must_quote: bool


NULL_FIELD = FieldText("", must_quote=False)


def needs_quoting(text: str, reserved: frozenset[str]) -> bool:
    """Return True when scalar text contains a reserved character."""
    return any(char in reserved for char in text)


def field_text(
    category: TypeCategory,
    value: str | None,
    *,
    reserved: frozenset[str],
) -> FieldText:
    """Apply the quoting policy to one rendered value.

    Parameters
    ----------
    category
        Type category of the field.
    value
        Canonical text of the value, or ``None`` for a null.
    reserved
        Characters that force quoting of scalar-like text.

    Returns
    -------
    FieldText
        Text and quoting decision for the field.
    """
    if value is None:
        return NULL_FIELD
    match category:
        case TypeCategory.TEXT_LIKE:
            return FieldText(value, must_quote=True)
        case TypeCategory.SCALAR_LIKE:
            return FieldText(value, must_quote=needs_quoting(value, reserved))


def header_text(name: str) -> FieldText:
    """Return the always-quoted header field for a field name."""
    return FieldText(name, must_quote=True)


def quote(text: str) -> str:
    """Wrap text in quotes, doubling embedded quote characters.

    Returns
    -------
    str
        Quoted and escaped text.
    """
    return QUOTE_CHAR + text.replace(QUOTE_CHAR, _ESCAPED_QUOTE) + QUOTE_CHAR


def unquote(text: str) -> str:
    """Reverse ``quote`` for a single quoted field.

    Returns
    -------
    str
        Original text with surrounding quotes removed and quotes undoubled.

    Raises
    ------
    ValueError
        Raised when the text is not a quoted field.
    """
    if len(text) < 2 or text[0] != QUOTE_CHAR or text[-1] != QUOTE_CHAR:
        msg = f"Not a quoted field: {text!r}."
        raise ValueError(msg)
    return text[1:-1].replace(_ESCAPED_QUOTE, QUOTE_CHAR)


def format_field(field: FieldText) -> str:
    """Return the output form of a field."""
    return quote(field.text) if field.must_quote else field.text


def format_header(names: Iterable[str]) -> list[str]:
    """Return quoted header fields for field names."""
    return [format_field(header_text(name)) for name in names]


__all__ = [
    "NULL_FIELD",
    "FieldText",
    "field_text",
    "format_field",
    "format_header",
    "header_text",
    "needs_quoting",
    "quote",
    "unquote",
]
