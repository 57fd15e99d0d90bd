from collections import Counter

import pytest

from huffpack.tree import Node, build_tree, code_table, frequency, nodes_from_counts


def test_node_is_leaf():
    leaf = Node(3, "a")
    parent = Node(5, "N", leaf, Node(2, "b"))
    assert leaf.is_leaf()
    assert not parent.is_leaf()


def test_frequency_orders_by_symbol_and_counts():
    text = "abracadabra"
    nodes = frequency(text)
    assert [n.char for n in nodes] == sorted(set(text))
    assert {n.char: n.weight for n in nodes} == dict(Counter(text))


def test_nodes_from_counts_sorted():
    nodes = nodes_from_counts({"z": 1, "a": 4, "m": 2})
    assert [(n.char, n.weight) for n in nodes] == [("a", 4), ("m", 2), ("z", 1)]


def test_build_tree_root_weight_is_total():
    text = "the quick brown fox jumps over the lazy dog"
    root = build_tree(frequency(text))
    assert root.weight == len(text)
    assert root.char == "N"


def test_build_tree_empty_raises():
    with pytest.raises(ValueError):
        build_tree([])


def test_single_symbol_gets_empty_code():
    root = build_tree(frequency("aaaa"))
    assert root.is_leaf()
    assert code_table(root) == {"a": ""}


def test_two_symbols_get_one_bit_codes():
    table = code_table(build_tree(frequency("aab")))
    assert sorted(table.values()) == ["0", "1"]
    assert set(table) == {"a", "b"}


def test_code_table_is_prefix_free_and_complete():
    text = "mississippi river banks"
    table = code_table(build_tree(frequency(text)))
    assert set(table) == set(text)
    codes = list(table.values())
    for i, a in enumerate(codes):
        for b in codes[i + 1:]:
            assert not a.startswith(b)
            assert not b.startswith(a)


def test_more_frequent_symbols_never_have_longer_codes():
    text = "a" * 50 + "b" * 20 + "c" * 5 + "d"
    table = code_table(build_tree(frequency(text)))
    assert len(table["a"]) <= len(table["b"]) <= len(table["c"]) <= len(table["d"])