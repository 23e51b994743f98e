from typing import Dict, Iterable, Tuple
import numpy as np

from huff_bitpack import as_bits
from huff_errors import FormatError, IncompleteDecode, InvalidCode, MalformedTree, UnknownSymbol
from huff_tree import Node, as_symbol

def encode(symbols: Iterable[int], table: Dict[int, np.ndarray]) -> np.ndarray:
    """
    Concatenate the code of every symbol, in input order.
    Symbols may be byte values or one-char str/bytes items (so "aabe" works).
    Returns a uint8 array of 0/1.
    """
    parts = []
    for sym in symbols:
        sym = as_symbol(sym)
        code = table.get(sym)
        if code is None:
            raise UnknownSymbol(sym)
        parts.append(code)
    if not parts:
        return np.zeros(0, dtype=np.uint8)
    return np.concatenate(parts).astype(np.uint8, copy=False)

def _leaf_symbol(node: Node) -> int:
    if node.sym is None or not (0 <= node.sym <= 255):
        raise MalformedTree(f"leaf holds no byte symbol: {node.sym!r}")
    return node.sym

def _walk(bits: np.ndarray, root: Node) -> Tuple[bytes, int]:
    """
    Decode as many whole codes as the bits hold.
    Returns (symbols, dangling_bit_count).
    """
    out = bytearray()

    if root.is_leaf:
        # one-symbol alphabet: every code is a single 0
        bad = np.flatnonzero(bits)
        if bad.size:
            raise InvalidCode(int(bad[0]), "bit 1 has no branch in a one-symbol tree")
        out.extend([_leaf_symbol(root)] * int(bits.size))
        return bytes(out), 0

    cur = root
    pending = 0
    for i, b in enumerate(bits.tolist()):
        cur = cur.left if b == 0 else cur.right
        if cur is None:
            raise InvalidCode(i)
        pending += 1
        if cur.is_leaf:
            out.append(_leaf_symbol(cur))
            cur = root
            pending = 0
    return bytes(out), pending

def decode(bits, root: Node) -> bytes:
    """
    Walk the tree bit by bit: 0 goes left, 1 goes right, a leaf emits
    its symbol and restarts at the root.

    Raises IncompleteDecode (carrying the decoded prefix) when the bits
    run out mid-code.
    """
    try:
        arr = as_bits(bits)
    except FormatError as e:
        raise InvalidCode(0, str(e)) from e

    out, pending = _walk(arr, root)
    if pending:
        raise IncompleteDecode(out, pending)
    return out
