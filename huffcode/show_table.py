import argparse
import os
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from huff_bitpack import bits_to_str
from huff_tree import build_codebook, build_tree, weight_pairs
from huff_treeinfo import load_tree_info

def symbol_label(sym: int) -> str:
    if 0x21 <= sym <= 0x7E:
        return chr(sym)
    return f"\\x{sym:02x}"

def format_table(weights, table) -> str:
    """Symbol / weight / code rows in tree-info order."""
    rows = ["symbol\tweight\tcode"]
    for sym, w in weight_pairs(weights):
        rows.append(f"'{symbol_label(sym)}'\t{w}\t{bits_to_str(table[sym])}")
    return "\n".join(rows)

def plot_code_lengths(weights, table, path):
    order = sorted(weight_pairs(weights), key=lambda sw: -sw[1])
    labels = [symbol_label(s) for s, _ in order]
    lengths = [table[s].size for s, _ in order]
    counts = [w for _, w in order]

    fig, ax1 = plt.subplots(figsize=(max(6, len(order) * 0.25), 3))
    ax1.bar(range(len(order)), lengths, color="tab:blue")
    ax1.set_ylabel("code length (bits)")
    ax1.set_xticks(range(len(order)))
    ax1.set_xticklabels(labels, fontsize=7)
    ax2 = ax1.twinx()
    ax2.plot(range(len(order)), counts, color="tab:red", marker=".")
    ax2.set_ylabel("weight")
    ax1.set_title("Huffman code length per symbol", fontsize=9)

    fig.tight_layout()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--tree", default="huffman_tree.txt", help="tree-info file")
    ap.add_argument("--plot", default=None, help="save a code-length chart (png)")
    args = ap.parse_args(argv)

    weights = load_tree_info(args.tree)
    table = build_codebook(build_tree(weights))
    print(format_table(weights, table))
    if args.plot:
        plot_code_lengths(weights, table, args.plot)
        print(f"[show_table] wrote {args.plot}")

if __name__ == "__main__":
    main()
