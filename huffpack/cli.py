"""Compress a text file with Huffman coding, single-threaded and chunked."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from huffpack.bits import encode, pack_bits
from huffpack.chunks import (
    DEFAULT_CHUNKS,
    chunk_frequencies,
    merge_frequencies,
    split_chunks,
)
from huffpack.tree import build_tree, code_table, frequency, nodes_from_counts


@dataclass
class CompressionResult:
    """Packed output together with the code table that produced it."""

    data: bytes
    codes: dict[str, str]
    original_size: int
    elapsed_ms: int

    @property
    def ratio(self) -> float:
        if not self.data:
            return float("inf")
        return self.original_size / len(self.data)


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def compress(text: str) -> CompressionResult:
    """Huffman-code ``text`` in one pass."""
    start = time.perf_counter()
    codes = code_table(build_tree(frequency(text)))
    data = pack_bits(encode(text, codes))
    return CompressionResult(data, codes, len(text), _elapsed_ms(start))


def compress_threaded(text: str, count: int = DEFAULT_CHUNKS) -> CompressionResult:
    """Huffman-code the chunks of ``text``, counting and encoding them in threads."""
    start = time.perf_counter()
    chunks = split_chunks(text, count)
    counts = merge_frequencies(chunk_frequencies(chunks))
    codes = code_table(build_tree(nodes_from_counts(counts)))
    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        encoded = list(pool.map(lambda chunk: encode(chunk, codes), chunks))
    data = pack_bits("".join(encoded))
    return CompressionResult(data, codes, len(text), _elapsed_ms(start))


def _report(result: CompressionResult, output: Path, label: str) -> None:
    print(f"Compression done. Output written to {output}")
    print(f"Compression ratio is :- {result.ratio:g}:1")
    print(f"{label} time: {result.elapsed_ms} ms")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="huffpack", description="Huffman-compress a text file."
    )
    parser.add_argument("input", type=Path, help="text file to compress")
    parser.add_argument("-o", "--output", type=Path, default=Path("compressed.huff"))
    parser.add_argument(
        "-t", "--threaded-output", type=Path, default=Path("compressed_threaded.huff")
    )
    parser.add_argument("-c", "--chunks", type=int, default=DEFAULT_CHUNKS)
    args = parser.parse_args(argv)

    try:
        with args.input.open(encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError:
        print(f"Unable to open the file{args.input}")
        return 1

    try:
        single = compress(text)
        threaded = compress_threaded(text, args.chunks)
    except (ValueError, IndexError) as exc:
        print(f"Cannot compress {args.input}: {exc}", file=sys.stderr)
        return 1

    args.output.write_bytes(single.data)
    _report(single, args.output, "Single-threaded")
    args.threaded_output.write_bytes(threaded.data)
    _report(threaded, args.threaded_output, "Multithreaded")
    return 0


if __name__ == "__main__":
    sys.exit(main())