"""Row-range chunking for bounded-memory CSV encoding."""

from __future__ import annotations

from collections.abc import Iterator

import pyarrow as pa

from arrowcsv.errors import ConfigError

type ChunkSource = pa.RecordBatch | pa.Table


def chunk_ranges(num_rows: int, batch_size: int) -> Iterator[range]:
    """Yield consecutive row ranges of at most ``batch_size`` rows.

    Parameters
    ----------
    num_rows
        Logical row count to partition.
    batch_size
        Maximum rows per range.

    Yields
    ------
    range
        Non-overlapping row ranges covering ``[0, num_rows)`` in order.

    Raises
    ------
    ConfigError
        Raised when ``batch_size`` is not positive.
    """
    if batch_size <= 0:
        msg = f"batch_size must be positive, got {batch_size}."
        raise ConfigError(msg)
    for start in range(0, num_rows, batch_size):
        yield range(start, min(start + batch_size, num_rows))


def iter_chunks(data: ChunkSource, batch_size: int) -> Iterator[ChunkSource]:
    """Yield zero-copy slices of a batch or table in row order.

    A table is treated as the concatenation of its batches; a slice may span
    several underlying batches.

    Yields
    ------
    pyarrow.RecordBatch | pyarrow.Table
        Slices of at most ``batch_size`` rows.
    """
    for rows in chunk_ranges(data.num_rows, batch_size):
        yield data.slice(rows.start, len(rows))


__all__ = ["ChunkSource", "chunk_ranges", "iter_chunks"]
