from __future__ import annotations
import heapq
import itertools
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np

from huff_errors import InvalidInput, MalformedTree

WeightedSymbol = Tuple[int, int]  # (symbol, weight)
Weights = Union[Mapping[int, int], Iterable[WeightedSymbol]]

@dataclass(frozen=True)
class Node:
    weight: int
    sym: Optional[int] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

def count_weights(data: bytes) -> List[WeightedSymbol]:
    """Byte frequencies as (symbol, count) pairs in ascending symbol order."""
    freqs = Counter(data)
    return sorted(freqs.items())

def weight_pairs(weights: Weights) -> List[WeightedSymbol]:
    """(symbol, weight) pairs from a mapping or an iterable of pairs, order kept."""
    return list(weights.items()) if isinstance(weights, Mapping) else list(weights)

def as_symbol(sym):
    """A one-char str or one-byte bytes becomes its byte value; ints pass through."""
    if isinstance(sym, (bytes, str)):
        if len(sym) != 1:
            raise InvalidInput(f"symbol must be a single byte: {sym!r}")
        return sym[0] if isinstance(sym, bytes) else ord(sym)
    return sym

def _check_weights(weights: Weights) -> List[WeightedSymbol]:
    items = weight_pairs(weights)
    out = []
    seen = set()
    for sym, w in items:
        sym, w = int(as_symbol(sym)), int(w)
        if not (0 <= sym <= 255):
            raise InvalidInput(f"symbol out of byte range: {sym}")
        if w < 1:
            raise InvalidInput(f"weight must be positive (symbol {sym}, weight {w})")
        if sym in seen:
            raise InvalidInput(f"duplicate symbol: {sym}")
        seen.add(sym)
        out.append((sym, w))
    if not out:
        raise InvalidInput("empty alphabet")
    return out

def build_tree(weights: Weights) -> Node:
    """
    Build a Huffman tree from (symbol, weight) pairs.

    The two lightest nodes are merged first-popped = left, second = right.
    Equal weights are popped in insertion order: leaves in the given order,
    merged nodes after every node already queued with the same weight.
    A single symbol yields a leaf root.
    """
    pairs = _check_weights(weights)
    if len(pairs) == 1:
        sym, w = pairs[0]
        return Node(weight=w, sym=sym)

    seq = itertools.count()
    pq = [(w, next(seq), Node(weight=w, sym=s)) for s, w in pairs]
    heapq.heapify(pq)
    while len(pq) > 1:
        wa, _, a = heapq.heappop(pq)
        wb, _, b = heapq.heappop(pq)
        heapq.heappush(pq, (wa + wb, next(seq), Node(weight=wa + wb, left=a, right=b)))
    return pq[0][2]

def _collect_paths(node: Node, prefix: Tuple[int, ...], out: Dict[int, Tuple[int, ...]]):
    if node.is_leaf:
        if node.sym is None:
            raise MalformedTree("leaf without a symbol")
        out[node.sym] = prefix
        return
    if node.left is None or node.right is None:
        raise MalformedTree("internal node with a single child")
    _collect_paths(node.left, prefix + (0,), out)
    _collect_paths(node.right, prefix + (1,), out)

def build_codebook(root: Node) -> Dict[int, np.ndarray]:
    """
    Map symbol -> code bits (read-only uint8 array of 0/1).
    A leaf root gets the one-bit code [0].
    """
    paths: Dict[int, Tuple[int, ...]] = {}
    if root.is_leaf:
        if root.sym is None:
            raise MalformedTree("leaf without a symbol")
        paths[root.sym] = (0,)
    else:
        _collect_paths(root, (), paths)

    table = {}
    for sym, path in paths.items():
        code = np.array(path, dtype=np.uint8)
        code.flags.writeable = False
        table[sym] = code
    return table
