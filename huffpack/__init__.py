"""Huffman coding of text: trees, code tables, bit packing and a chunked threaded pipeline."""

__version__ = "0.1.0"