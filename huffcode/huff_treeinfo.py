"""
Tree-info text file: the symbol/weight table a tree is rebuilt from.

    n
    <symbol> <weight>      (n lines, symbol as decimal byte value)

Line order is significant: equal weights are merged in this order, so the
same file always rebuilds the same codes.

Files in the older character form ("a 5", symbol written as the raw
character) are not accepted: the symbol field must be a decimal byte
value, and such lines fail with FormatError ("non-integer field").
"""
from typing import Iterable, List, Tuple

from huff_errors import FormatError
from huff_tree import weight_pairs

def format_tree_info(weights: Iterable[Tuple[int, int]]) -> str:
    pairs = weight_pairs(weights)
    lines = [str(len(pairs))]
    for sym, w in pairs:
        lines.append(f"{int(sym)} {int(w)}")
    return "\n".join(lines) + "\n"

def parse_tree_info(text: str) -> List[Tuple[int, int]]:
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    if not lines:
        raise FormatError("tree info is empty")
    try:
        n = int(lines[0])
    except ValueError:
        raise FormatError(f"bad symbol count: {lines[0]!r}") from None
    if n < 0 or len(lines) - 1 != n:
        raise FormatError(f"expected {n} entries, found {len(lines) - 1}")

    out = []
    seen = set()
    for lineno, ln in enumerate(lines[1:], start=2):
        fields = ln.split()
        if len(fields) != 2:
            raise FormatError(f"line {lineno}: expected '<symbol> <weight>'")
        try:
            sym, w = int(fields[0]), int(fields[1])
        except ValueError:
            raise FormatError(f"line {lineno}: non-integer field") from None
        if not (0 <= sym <= 255):
            raise FormatError(f"line {lineno}: symbol out of range: {sym}")
        if sym in seen:
            raise FormatError(f"line {lineno}: duplicate symbol {sym}")
        seen.add(sym)
        out.append((sym, w))
    return out

def save_tree_info(path, weights):
    with open(path, "w", encoding="ascii") as f:
        f.write(format_tree_info(weights))

def load_tree_info(path) -> List[Tuple[int, int]]:
    with open(path, "r", encoding="ascii") as f:
        return parse_tree_info(f.read())
