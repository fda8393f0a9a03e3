"""Shared type aliases for CSV writing."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

type PathLike = str | Path

type JsonPrimitive = str | int | float | bool | None
type JsonValue = JsonPrimitive | Mapping[str, JsonValue] | Sequence[JsonValue]
type JsonDict = dict[str, JsonValue]

# Rendered text per row for one column; None marks a null slot.
type RenderedColumn = list[str | None]


def ensure_path(p: PathLike) -> Path:
    """Return a normalized ``Path`` for the provided value.

    Returns
    -------
    pathlib.Path
        Normalized path instance.
    """
    return p if isinstance(p, Path) else Path(p)


__all__ = [
    "JsonDict",
    "JsonPrimitive",
    "JsonValue",
    "PathLike",
    "RenderedColumn",
    "ensure_path",
]
