"""Splitting content into chunks and counting symbols in parallel."""

from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Mapping

DEFAULT_CHUNKS = 8


def split_chunks(content: str, count: int = DEFAULT_CHUNKS) -> list[str]:
    """Cut ``content`` into ``count`` chunks of ``len(content) // count`` symbols.

    Chunk ``i`` starts at ``i * (size + 1)``, so the symbol after each chunk
    and any remainder past the last chunk are left out.
    """
    if count <= 0:
        raise ValueError("chunk count must be positive")
    size = len(content) // count
    chunks = []
    for index in range(count):
        start = index * (size + 1)
        if start > len(content):
            raise IndexError(f"chunk {index} starts past the end of the content")
        chunks.append(content[start:start + size])
    return chunks


def chunk_frequencies(chunks: Iterable[str]) -> list[Counter]:
    """Count the symbols of every chunk, one worker thread per chunk."""
    chunk_list = list(chunks)
    if not chunk_list:
        return []
    with ThreadPoolExecutor(max_workers=len(chunk_list)) as pool:
        return list(pool.map(Counter, chunk_list))


def merge_frequencies(maps: Iterable[Mapping[str, int]]) -> dict[str, int]:
    """Add up per-chunk counts into one mapping ordered by symbol."""
    total: Counter = Counter()
    for counts in maps:
        total.update(counts)
    return dict(sorted(total.items()))