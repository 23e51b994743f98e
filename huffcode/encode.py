import argparse
import os
from huff_bitstream import save_packed, write_code_text
from huff_codec import encode
from huff_errors import InvalidInput
from huff_tree import build_codebook, build_tree, count_weights
from huff_metrics import average_code_length, compression_stats, entropy_bits
from huff_treeinfo import save_tree_info

def _ensure_dir(path):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="file to compress (read as bytes)")
    ap.add_argument("--output", default="compressed.bin", help="packed output (default compressed.bin)")
    ap.add_argument("--tree", default="huffman_tree.txt", help="tree-info file to write")
    ap.add_argument("--code_text", default=None, help="also write the bits as ASCII '0'/'1'")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()

    # 1) Weights -> tree -> code table
    weights = count_weights(data)
    try:
        root = build_tree(weights)
    except InvalidInput as e:
        print(f"[encode] error: {args.input}: {e}; nothing written")
        return None
    table = build_codebook(root)
    _ensure_dir(args.tree)
    save_tree_info(args.tree, weights)

    # 2) Encode and persist
    bits = encode(data, table)
    if args.code_text:
        _ensure_dir(args.code_text)
        write_code_text(args.code_text, bits)
    _ensure_dir(args.output)
    buf = save_packed(args.output, bits)

    st = compression_stats(len(data), buf.bit_count)
    print(f"[encode] wrote {args.output} (tree info: {args.tree})")
    if args.code_text:
        print(f"[encode] wrote {args.code_text}")
    print(f"[encode] symbols={len(weights)} entropy={entropy_bits(weights):.4f} "
          f"avg_len={average_code_length(weights, table):.4f} bits/symbol")
    print(f"[encode] original={st['original_bytes']}B bits={st['bits']} "
          f"compressed={st['compressed_bytes']}B ratio={st['ratio'] * 100:.2f}% "
          f"saved={st['saved_bytes']}B")
    return st

if __name__ == "__main__":
    main()
