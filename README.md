# huffpack

Huffman coding for text. huffpack counts how often each character occurs,
builds a Huffman tree from those counts and gives each character a prefix
code. It then packs the coded text into bytes and reports how much smaller
the result is.

There are two pipelines:

- **single pass** (`compress`): count and encode the whole text;
- **threaded** (`compress_threaded`): split the text into chunks, count each
  chunk in its own thread, merge the counts into one tree, then encode the
  chunks in threads and join the bits.

The threaded pipeline works only on what `split_chunks` returns. Every chunk
holds `len(text) // count` characters, and chunk `i` starts at
`i * (size + 1)`. This means the character after each chunk, and any
remainder after the last chunk, are not counted or encoded. Its output is
therefore not a coding of the whole text.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
huffpack INPUT [-o OUTPUT] [-t THREADED_OUTPUT] [-c CHUNKS]
```

The command reads `INPUT` as Latin-1 text with line endings left unchanged.
It compresses the text twice:

- in a single pass, writing `OUTPUT` (default `compressed.huff`);
- with the threaded pipeline over `CHUNKS` chunks (default 8), writing
  `THREADED_OUTPUT` (default `compressed_threaded.huff`).

For each run it prints the output path, the compression ratio (input
characters per output byte) and the time taken in milliseconds.

The exit status is 1 in two cases:

- The input cannot be opened. The command prints `Unable to open the file...`.
- The text cannot be compressed. For example, it is empty, or it is too short
  for the requested number of chunks. The reason goes to standard error.

## Library

```python
from huffpack.tree import frequency, build_tree, code_table
from huffpack.bits import encode, pack_bits

text = "abracadabra"
root = build_tree(frequency(text))   # leaves ordered by character
table = code_table(root)             # character -> string of '0'/'1'
packed = pack_bits(encode(text, table))
```

- `huffpack.tree`:
  - `Node` holds `weight`, `char`, `left` and `right`. `Node.is_leaf()` is true when the node has no children. Internal nodes carry the character `"N"`.
  - `frequency(text)` and `nodes_from_counts(counts)` make one leaf per character, sorted by character.
  - `build_tree(nodes)` repeatedly joins the two lightest nodes, the first one taken becoming the left child. It raises `ValueError` if there are no nodes.
  - `code_table(root)` maps each leaf character to its path, with `0` for left and `1` for right. A tree that is a single leaf gives its character the empty code.
- `huffpack.bits`:
  - `encode(text, table)` joins the codes of the characters. It raises `KeyError` for a character that has no code.
  - `pack_bits(bits)` packs a `'0'`/`'1'` string into bytes, most significant bit first. A final partial byte is padded with zero bits. Any other character raises `ValueError`.
- `huffpack.chunks`:
  - `split_chunks(content, count=8)` splits as described above. A non-positive count raises `ValueError`. A chunk that would start past the end raises `IndexError`.
  - `chunk_frequencies(chunks)` counts each chunk in its own thread and returns one `Counter` per chunk.
  - `merge_frequencies(maps)` adds the counts together into a dict ordered by character.
- `huffpack.cli`:
  - `compress(text)` and `compress_threaded(text, count=8)` return a `CompressionResult`. It holds `data`, `codes`, `original_size` and `elapsed_ms`. Its `ratio` property is `original_size / len(data)`, or infinity when `data` is empty.
  - `main(argv=None)` is the command above.

## What it does not do

- There is no decompression.
- The `.huff` files hold only the packed bits. They contain no code table, no length and no header, so they cannot be decoded on their own.
- Text whose only character repeats gets an empty code, so it packs to zero bytes.