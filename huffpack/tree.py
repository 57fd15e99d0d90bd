"""Symbol frequencies, Huffman tree construction and code tables."""

from __future__ import annotations

import heapq
from collections import Counter
from dataclasses import dataclass
from itertools import count
from typing import Iterable, Mapping

INTERNAL_SYMBOL = "N"


@dataclass(eq=False)
class Node:
    """A Huffman tree node: leaves carry a symbol, internal nodes carry 'N'."""

    weight: int
    char: str
    left: Node | None = None
    right: Node | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def nodes_from_counts(counts: Mapping[str, int]) -> list[Node]:
    """Make one leaf per symbol, ordered by symbol."""
    return [Node(weight, char) for char, weight in sorted(counts.items())]


def frequency(text: Iterable[str]) -> list[Node]:
    """Count the symbols of ``text`` and return their leaves ordered by symbol."""
    return nodes_from_counts(Counter(text))


def build_tree(nodes: Iterable[Node]) -> Node:
    """Combine the two lightest nodes until one root remains."""
    tiebreak = count()
    heap = [(node.weight, next(tiebreak), node) for node in nodes]
    if not heap:
        raise ValueError("cannot build a Huffman tree without symbols")
    heapq.heapify(heap)
    while len(heap) > 1:
        weight_x, _, x = heapq.heappop(heap)
        weight_y, _, y = heapq.heappop(heap)
        total = weight_x + weight_y
        parent = Node(total, INTERNAL_SYMBOL, x, y)
        heapq.heappush(heap, (total, next(tiebreak), parent))
    return heap[0][2]


def code_table(root: Node) -> dict[str, str]:
    """Map every leaf symbol to its bit string: '0' for left, '1' for right.

    A tree that is a single leaf gives that symbol the empty code.
    """
    table: dict[str, str] = {}
    stack: list[tuple[Node, str]] = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf():
            table[node.char] = prefix
            continue
        if node.right is None or node.left is None:
            raise ValueError("internal node is missing a child")
        stack.append((node.right, prefix + "1"))
        stack.append((node.left, prefix + "0"))
    return table