import numpy as np

from huff_bitstream import packed_size
from huff_tree import weight_pairs

def weighted_code_length(weights, table) -> int:
    """Sum of weight * code length; equal for every optimal tree of the same weights."""
    return int(sum(int(w) * int(table[s].size) for s, w in weight_pairs(weights)))

def average_code_length(weights, table) -> float:
    total = sum(int(w) for _, w in weight_pairs(weights))
    if total == 0:
        return 0.0
    return weighted_code_length(weights, table) / total

def entropy_bits(weights) -> float:
    """Shannon entropy (bits/symbol) of the weight distribution."""
    w = np.array([int(v) for _, v in weight_pairs(weights)], dtype=np.float64)
    if w.size == 0 or w.sum() == 0:
        return 0.0
    p = w / w.sum()
    p = p[p > 0]
    return float(-(p * np.log2(p)).sum())

def compression_stats(original_size: int, bit_count: int) -> dict:
    """
    Size accounting for a packed file (4-byte header included).
    ratio is the fraction of space saved; 0.0 for empty input.
    """
    compressed = packed_size(bit_count)
    ratio = (1.0 - compressed / original_size) if original_size else 0.0
    return {
        "original_bytes": original_size,
        "bits": bit_count,
        "compressed_bytes": compressed,
        "ratio": ratio,
        "saved_bytes": original_size - compressed,
    }
