import heapq
from dataclasses import dataclass
from typing import TypeAlias

from huffcodec.abc import FreqTableType
from huffcodec.errors import EmptyInput


@dataclass(frozen=True)
class Leaf:
    symbol: int
    freq: int


@dataclass(frozen=True)
class Internal:
    left: "Tree"
    right: "Tree"
    freq: int


Tree: TypeAlias = Leaf | Internal


def merge(left: Tree, right: Tree) -> Internal:
    return Internal(left=left, right=right, freq=left.freq + right.freq)


def build_tree(freqs: FreqTableType) -> Tree:
    """Build a Huffman tree from a symbol -> count table.

    Trees sit in a min-heap keyed by (frequency, insertion order). Leaves are
    inserted in ascending symbol order and every merged tree takes the next
    order number, so equal frequencies are resolved first-in first-out and a
    given table always yields the same tree. The first tree popped becomes
    the left child.

    A table with a single symbol yields that bare Leaf.
    """
    if len(freqs) == 0:
        raise EmptyInput()

    pq: list[tuple[int, int, Tree]] = []
    order = 0
    for s in sorted(freqs):
        f = freqs[s]
        if f <= 0:
            raise ValueError(f"Frequency of symbol {s} must be positive, got {f}")  # noqa
        pq.append((f, order, Leaf(symbol=s, freq=f)))
        order += 1
    heapq.heapify(pq)

    while len(pq) > 1:
        _, _, a = heapq.heappop(pq)
        _, _, b = heapq.heappop(pq)
        node = merge(a, b)
        heapq.heappush(pq, (node.freq, order, node))
        order += 1

    return pq[0][2]
