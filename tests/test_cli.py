import decode as decode_cli
import encode as encode_cli
import show_table
from huff_bitstream import load_packed, save_packed
from corpus import MIN_BYTES, corpus_warnings, generate_corpus, save_corpus
from corpus import main as corpus_main
from huff_tree import build_codebook, build_tree
from huff_treeinfo import load_tree_info


def _encode(tmp_path, data, code_text=True):
    src = tmp_path / "SourceFile.txt"
    src.write_bytes(data)
    argv = [
        "--input", str(src),
        "--output", str(tmp_path / "out" / "compressed.bin"),
        "--tree", str(tmp_path / "huffman_tree.txt"),
    ]
    if code_text:
        argv += ["--code_text", str(tmp_path / "CodeFile.txt")]
    return src, encode_cli.main(argv)


def test_encode_then_decode_packed(tmp_path, capsys):
    data = generate_corpus(repeat=3)
    src, st = _encode(tmp_path, data)
    assert st["original_bytes"] == len(data)
    assert st["compressed_bytes"] < len(data)
    assert "[encode] wrote" in capsys.readouterr().out

    res = decode_cli.main([
        "--input", str(tmp_path / "out" / "compressed.bin"),
        "--tree", str(tmp_path / "huffman_tree.txt"),
        "--output", str(tmp_path / "Decompressed.txt"),
        "--verify", str(src),
    ])
    assert res == {"complete": True, "verified": True, "size": len(data)}
    assert (tmp_path / "Decompressed.txt").read_bytes() == data
    assert "verify" in capsys.readouterr().out


def test_decode_from_code_text(tmp_path):
    data = b"abracadabra"
    src, _ = _encode(tmp_path, data)
    res = decode_cli.main([
        "--code_text", str(tmp_path / "CodeFile.txt"),
        "--tree", str(tmp_path / "huffman_tree.txt"),
        "--output", str(tmp_path / "DecodeFile.txt"),
        "--verify", str(src),
    ])
    assert res["verified"] is True
    assert (tmp_path / "DecodeFile.txt").read_bytes() == data


def test_decode_truncated_keeps_prefix(tmp_path, capsys):
    data = b"aaaaabbbbbbbbbccccccccccccdddddddddddddeeeeeeeeeeeeeeee" + b"f" * 45
    _encode(tmp_path, data, code_text=False)
    packed = tmp_path / "out" / "compressed.bin"
    bits = load_packed(packed)
    # data starts with 'a' (code 1100); drop everything after 6 bits
    save_packed(packed, bits[:6])

    res = decode_cli.main([
        "--input", str(packed),
        "--tree", str(tmp_path / "huffman_tree.txt"),
        "--output", str(tmp_path / "Decompressed.txt"),
    ])
    assert res["complete"] is False
    assert (tmp_path / "Decompressed.txt").read_bytes() == b"a"
    assert "warning" in capsys.readouterr().out


def test_single_symbol_file(tmp_path):
    data = b"Z" * 64
    src, st = _encode(tmp_path, data)
    assert st["bits"] == 64
    res = decode_cli.main([
        "--input", str(tmp_path / "out" / "compressed.bin"),
        "--tree", str(tmp_path / "huffman_tree.txt"),
        "--output", str(tmp_path / "Decompressed.txt"),
        "--verify", str(src),
    ])
    assert res["verified"] is True


def test_show_table(tmp_path, capsys):
    _encode(tmp_path, b"aabbbc d", code_text=False)
    tree = tmp_path / "huffman_tree.txt"
    assert [s for s, _ in load_tree_info(tree)] == sorted(set(b"aabbbc d"))

    png = tmp_path / "fig" / "codes.png"
    show_table.main(["--tree", str(tree), "--plot", str(png)])
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "symbol\tweight\tcode"
    assert "'\\x20'" in out
    assert "'b'\t3\t" in out
    assert png.stat().st_size > 0


def test_corpus(tmp_path, capsys):
    data = generate_corpus()
    assert len(data) >= MIN_BYTES
    assert corpus_warnings(data) == []
    assert generate_corpus(noise_bytes=32, seed=1) == generate_corpus(noise_bytes=32, seed=1)
    assert len(corpus_warnings(b"tiny")) == 2

    path, written = save_corpus(str(tmp_path / "test_large.txt"), repeat=2)
    assert (tmp_path / "test_large.txt").read_bytes() == written

    corpus_main(["--output", str(tmp_path / "c.txt"), "--repeat", "1"])
    assert "[corpus] wrote" in capsys.readouterr().out


def test_encode_empty_file_reports_error(tmp_path, capsys):
    src = tmp_path / "empty.txt"
    src.write_bytes(b"")
    out = tmp_path / "compressed.bin"
    res = encode_cli.main(["--input", str(src), "--output", str(out),
                           "--tree", str(tmp_path / "huffman_tree.txt")])
    assert res is None
    assert not out.exists()
    assert not (tmp_path / "huffman_tree.txt").exists()
    assert "[encode] error" in capsys.readouterr().out


def test_table_accepts_mapping(tmp_path):
    weights = {97: 2, 98: 1}
    table = build_codebook(build_tree(weights))
    text = show_table.format_table(weights, table)
    assert text.splitlines()[1:] == ["'a'\t2\t1", "'b'\t1\t0"]
    png = show_table.plot_code_lengths(weights, table, str(tmp_path / "codes.png"))
    assert (tmp_path / "codes.png").stat().st_size > 0
    assert png == str(tmp_path / "codes.png")
