import struct

from huff_bitpack import PackedBuffer, as_bits, bits_to_str, pack, unpack
from huff_errors import FormatError

# Packed file (little-endian):
# bit_count(u32) payload(ceil(bit_count/8) bytes, MSB-first, zero padded)
HDR_FMT = "<I"
HDR_SIZE = struct.calcsize(HDR_FMT)
MAX_BITS = 0xFFFFFFFF

def write_packed(f, buf: PackedBuffer):
    if not (0 <= buf.bit_count <= MAX_BITS):
        raise FormatError(f"bit count does not fit in u32: {buf.bit_count}")
    if len(buf.data) != (buf.bit_count + 7) // 8:
        raise FormatError("payload length does not match bit count")
    f.write(struct.pack(HDR_FMT, buf.bit_count))
    f.write(buf.data)

def read_packed(f) -> PackedBuffer:
    data = f.read(HDR_SIZE)
    if len(data) != HDR_SIZE:
        raise FormatError("Malformed stream: header too short")
    (bit_count,) = struct.unpack(HDR_FMT, data)
    nbytes = (bit_count + 7) // 8
    payload = f.read(nbytes)
    if len(payload) != nbytes:
        raise FormatError(
            f"Malformed stream: payload truncated ({len(payload)} of {nbytes} bytes)"
        )
    if f.read(1):
        raise FormatError("Malformed stream: trailing bytes after payload")
    return PackedBuffer(bit_count=bit_count, data=payload)

def save_packed(path, bits) -> PackedBuffer:
    buf = pack(bits)
    with open(path, "wb") as f:
        write_packed(f, buf)
    return buf

def load_packed(path):
    with open(path, "rb") as f:
        buf = read_packed(f)
    return unpack(buf)

def packed_size(bit_count: int) -> int:
    """Bytes on disk for a packed file holding bit_count bits."""
    return HDR_SIZE + (bit_count + 7) // 8

# Encoded-text file: the bits as ASCII '0'/'1', no separators.

def write_code_text(path, bits):
    with open(path, "w", encoding="ascii") as f:
        f.write(bits_to_str(bits))

def read_code_text(path):
    with open(path, "r", encoding="ascii", errors="replace") as f:
        text = f.read().strip()
    return as_bits(text)
