import pytest

from huffpack.bits import encode, pack_bits
from huffpack.tree import build_tree, code_table, frequency


def _decode(data, table, length):
    inverse = {code: ch for ch, code in table.items()}
    bits = "".join(format(b, "08b") for b in data)
    out, current = [], ""
    for bit in bits:
        if len(out) == length:
            break
        current += bit
        if current in inverse:
            out.append(inverse[current])
            current = ""
    return "".join(out)


def test_pack_empty():
    assert pack_bits("") == b""


def test_pack_full_byte():
    assert pack_bits("01000001") == b"A"


def test_pack_pads_with_zeros():
    assert pack_bits("1") == b"\x80"


def test_pack_length_is_ceiling():
    for n in range(0, 30):
        assert len(pack_bits("1" * n)) == (n + 7) // 8


def test_pack_preserves_bits():
    bits = "1011001110001111010"
    packed = pack_bits(bits)
    assert "".join(format(b, "08b") for b in packed)[: len(bits)] == bits


def test_pack_rejects_other_characters():
    with pytest.raises(ValueError):
        pack_bits("10a1")


def test_encode_concatenates_codes():
    table = {"x": "0", "y": "10", "z": "11"}
    assert encode("xyzx", table) == "0" + "10" + "11" + "0"


def test_encode_missing_symbol_raises():
    with pytest.raises(KeyError):
        encode("q", {"x": "0"})


def test_round_trip_through_tree():
    text = "name,city\nAnna,Oslo\nBen,Rome\n"
    table = code_table(build_tree(frequency(text)))
    packed = pack_bits(encode(text, table))
    assert _decode(packed, table, len(text)) == text