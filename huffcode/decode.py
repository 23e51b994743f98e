import argparse
import os
from huff_bitstream import load_packed, read_code_text
from huff_codec import decode
from huff_errors import IncompleteDecode
from huff_tree import build_tree
from huff_treeinfo import load_tree_info

def main(argv=None):
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--input", default=None, help="packed file (default compressed.bin)")
    src.add_argument("--code_text", default=None, help="ASCII '0'/'1' encoded-text file")
    ap.add_argument("--tree", default="huffman_tree.txt", help="tree-info file")
    ap.add_argument("--output", default="Decompressed.txt", help="decoded output")
    ap.add_argument("--verify", default=None, help="original file to compare against")
    args = ap.parse_args(argv)

    root = build_tree(load_tree_info(args.tree))

    if args.code_text:
        bits = read_code_text(args.code_text)
        source = args.code_text
    else:
        source = args.input or "compressed.bin"
        bits = load_packed(source)

    complete = True
    try:
        out = decode(bits, root)
    except IncompleteDecode as e:
        print(f"[decode] warning: {e}; keeping {len(e.partial)} decoded symbols")
        out = e.partial
        complete = False

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(out)
    print(f"[decode] read {source} ({bits.size} bits) -> wrote {args.output} ({len(out)} bytes)")

    verified = None
    if args.verify:
        with open(args.verify, "rb") as f:
            verified = f.read() == out
        print(f"[decode] verify against {args.verify}: {'OK' if verified else 'MISMATCH'}")
    return {"complete": complete, "verified": verified, "size": len(out)}

if __name__ == "__main__":
    main()
