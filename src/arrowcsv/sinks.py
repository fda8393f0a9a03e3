"""Output sinks for CSV bytes."""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable

import pyarrow as pa

from arrowcsv.core_types import PathLike, ensure_path
from arrowcsv.errors import SinkError


@runtime_checkable
class CsvSink(Protocol):
    """Protocol for append-only byte sinks."""

    def write(self, data: bytes, /) -> object:
        """Append bytes to the sink."""
        ...


type SinkTarget = CsvSink | PathLike


def append_to_sink(sink: CsvSink, payload: bytes) -> int:
    """Append bytes to a sink, surfacing failures as ``SinkError``.

    Parameters
    ----------
    sink
        Destination sink.
    payload
        Encoded bytes to append.

    Returns
    -------
    int
        Number of bytes appended.

    Raises
    ------
    SinkError
        Raised when the sink write raises any exception; the original is
        chained as the cause. Bytes appended by earlier calls are left in
        place.
    """
    try:
        sink.write(payload)
    except Exception as exc:  # noqa: BLE001 - normalize sink boundary errors
        raise SinkError(str(exc)) from exc
    return len(payload)


@contextlib.contextmanager
def open_sink(target: SinkTarget) -> Iterator[CsvSink]:
    """Yield a writable sink for a path or an existing sink.

    Paths are opened with ``pyarrow.OSFile`` after creating parent
    directories and are closed on exit. Caller-provided sinks are yielded as
    is and left open.

    Yields
    ------
    CsvSink
        Sink accepting encoded CSV bytes.

    Raises
    ------
    SinkError
        Raised when the target path cannot be opened.
    TypeError
        Raised when the target is neither a path nor a writable sink.
    """
    if isinstance(target, CsvSink):
        yield target
        return
    if not isinstance(target, (str, Path)):
        msg = f"Unsupported CSV sink: {type(target)}."
        raise TypeError(msg)
    path = ensure_path(target)
    try:
        path.parent.mkdir(exist_ok=True, parents=True)
        handle = pa.OSFile(str(path), "wb")
    except OSError as exc:
        raise SinkError(str(exc)) from exc
    with handle:
        yield handle


def buffer_sink() -> pa.BufferOutputStream:
    """Return a growable in-memory sink.

    Returns
    -------
    pyarrow.BufferOutputStream
        In-memory output stream; call ``getvalue()`` for the written bytes.
    """
    return pa.BufferOutputStream()


__all__ = ["CsvSink", "SinkTarget", "append_to_sink", "buffer_sink", "open_sink"]
