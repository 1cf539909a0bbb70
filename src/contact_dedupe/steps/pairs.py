from __future__ import annotations

from collections.abc import Iterator


def pair_count(size: int) -> int:
    return size * (size - 1) // 2 if size > 1 else 0


def enumerate_pairs(size: int, rows: range | None = None) -> Iterator[tuple[int, int]]:
    """Lazily yield every index pair (i, j) with i < j < size.

    ``rows`` restricts the left index so a worker can own a slice of the
    triangle; together the slices from ``chunk_rows`` cover each pair once.
    """
    for i in rows if rows is not None else range(size):
        for j in range(i + 1, size):
            yield i, j


def chunk_rows(size: int, chunk_count: int) -> list[range]:
    """Split left indices 0..size-2 into contiguous ranges of similar pair load.

    Row i contributes size-1-i pairs, so early rows are heavier; boundaries are
    placed on cumulative pair counts rather than row counts.
    """
    if chunk_count < 1:
        raise ValueError("chunk_count must be >= 1")
    total = pair_count(size)
    if total == 0:
        return []

    target = total / chunk_count
    chunks: list[range] = []
    start = 0
    load = 0
    for i in range(size - 1):
        load += size - 1 - i
        if load >= target * (len(chunks) + 1) and len(chunks) < chunk_count - 1:
            chunks.append(range(start, i + 1))
            start = i + 1
    if start < size - 1:
        chunks.append(range(start, size - 1))
    return chunks
