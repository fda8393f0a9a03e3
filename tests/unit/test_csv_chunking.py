"""Tests for row-range chunking."""

from __future__ import annotations

import pyarrow as pa
import pytest

from arrowcsv.chunking import chunk_ranges, iter_chunks
from arrowcsv.errors import ConfigError
from tests.test_helpers.csv_seed import split_table


@pytest.mark.parametrize(
    ("num_rows", "batch_size", "expected"),
    [
        (0, 5, []),
        (5, 5, [range(0, 5)]),
        (6, 5, [range(0, 5), range(5, 6)]),
        (3, 1, [range(0, 1), range(1, 2), range(2, 3)]),
        (3, 100, [range(0, 3)]),
    ],
)
def test_chunk_ranges(num_rows: int, batch_size: int, expected: list[range]) -> None:
    """Partition rows into consecutive bounded ranges."""
    assert list(chunk_ranges(num_rows, batch_size)) == expected


@pytest.mark.parametrize("batch_size", [0, -3])
def test_chunk_ranges_rejects_non_positive_size(batch_size: int) -> None:
    """Reject batch sizes below one."""
    with pytest.raises(ConfigError):
        list(chunk_ranges(10, batch_size))


def test_iter_chunks_slices_batch(populated_batch: pa.RecordBatch) -> None:
    """Slice a batch into chunks covering every row once."""
    chunks = list(iter_chunks(populated_batch, 4))
    assert [chunk.num_rows for chunk in chunks] == [4, 2]
    rebuilt = pa.Table.from_batches(chunks)
    assert rebuilt.equals(pa.Table.from_batches([populated_batch]))


def test_iter_chunks_spans_table_batches(populated_batch: pa.RecordBatch) -> None:
    """Chunk a table as the concatenation of its batches."""
    table = split_table(populated_batch, sizes=(1, 1, 1))
    chunks = list(iter_chunks(table, 2))
    assert [chunk.num_rows for chunk in chunks] == [2, 2, 2]
    assert pa.concat_tables(chunks).equals(table)
