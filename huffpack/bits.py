"""Turning symbols into code bits and bits into bytes."""

from __future__ import annotations

from typing import Iterable, Mapping


def encode(text: Iterable[str], table: Mapping[str, str]) -> str:
    """Concatenate the code of every symbol in ``text``."""
    try:
        return "".join(table[ch] for ch in text)
    except KeyError as exc:
        raise KeyError(f"symbol {exc.args[0]!r} has no code") from None


def pack_bits(bits: str) -> bytes:
    """Pack a '0'/'1' string into bytes, most significant bit first.

    A final partial byte is padded with zero bits.
    """
    if set(bits) - {"0", "1"}:
        raise ValueError("bit string may hold only '0' and '1'")
    out = bytearray()
    for start in range(0, len(bits), 8):
        group = bits[start:start + 8].ljust(8, "0")
        out.append(int(group, 2))
    return bytes(out)