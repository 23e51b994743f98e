import argparse
import numpy as np

SAMPLE_TEXT = (
    "The quick brown fox jumps over the lazy dog. This sentence contains all letters of the English alphabet. "
    "However, it is relatively short. For better testing, we need a much longer text with more diverse characters. "
    "哈夫曼编码是一种用于数据压缩的熵编码算法。由David A. Huffman在1952年提出。"
    "1234567890!@#$%^&*()_+-=[]{}|;:,.<>?/`~ 多种字符混合测试。\n"
    "This is a comprehensive test file for Huffman coding implementation. "
    "It includes English letters, Chinese characters, numbers, and special symbols. "
    "Data compression is an important topic in computer science; Huffman coding is a classic prefix code. "
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz\n"
)

MIN_DISTINCT = 50
MIN_BYTES = 500

def generate_corpus(repeat=5, seed=0, noise_bytes=0) -> bytes:
    """
    Sample text (UTF-8) repeated `repeat` times, followed by
    `noise_bytes` seeded random printable ASCII bytes.
    """
    body = SAMPLE_TEXT.encode("utf-8") * repeat
    if noise_bytes > 0:
        rng = np.random.default_rng(seed)
        noise = rng.integers(0x20, 0x7F, size=noise_bytes, dtype=np.uint8)
        body += noise.tobytes()
    return body

def corpus_warnings(data: bytes):
    out = []
    distinct = len(set(data))
    if distinct < MIN_DISTINCT:
        out.append(f"only {distinct} distinct symbols (< {MIN_DISTINCT}); use a larger test file")
    if len(data) < MIN_BYTES:
        out.append(f"only {len(data)} bytes (< {MIN_BYTES}); use a larger test file")
    return out

def save_corpus(path="test_large.txt", repeat=5, seed=0, noise_bytes=0):
    data = generate_corpus(repeat=repeat, seed=seed, noise_bytes=noise_bytes)
    with open(path, "wb") as f:
        f.write(data)
    return path, data

def main(argv=None):
    ap = argparse.ArgumentParser(description="write a synthetic test corpus")
    ap.add_argument("--output", default="test_large.txt")
    ap.add_argument("--repeat", type=int, default=5)
    ap.add_argument("--noise", type=int, default=0, help="random printable bytes appended")
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args(argv)

    path, data = save_corpus(args.output, repeat=args.repeat, seed=args.seed, noise_bytes=args.noise)
    print(f"[corpus] wrote {path} ({len(data)} bytes, {len(set(data))} distinct symbols)")
    for w in corpus_warnings(data):
        print(f"[corpus] warning: {w}")

if __name__ == "__main__":
    main()
