from dataclasses import dataclass
import numpy as np

from huff_errors import FormatError

@dataclass(frozen=True)
class PackedBuffer:
    bit_count: int
    data: bytes

    @property
    def byte_count(self) -> int:
        return len(self.data)

def as_bits(bits) -> np.ndarray:
    """
    Normalize a bit sequence to a flat uint8 array of 0/1.
    Accepts an ndarray, any iterable of 0/1 ints, or a str of '0'/'1'.
    """
    if isinstance(bits, str):
        raw = np.frombuffer(bits.encode("ascii", errors="replace"), dtype=np.uint8)
        if raw.size and not np.all((raw == ord("0")) | (raw == ord("1"))):
            raise FormatError("bit string may only contain '0' and '1'")
        return (raw - ord("0")).astype(np.uint8)

    arr = np.asarray(bits if isinstance(bits, np.ndarray) else list(bits))
    if arr.ndim != 1:
        arr = arr.ravel()
    if arr.size == 0:
        return np.zeros(0, dtype=np.uint8)
    if arr.dtype == bool:
        return arr.astype(np.uint8)
    if not np.issubdtype(arr.dtype, np.integer) or not np.all((arr == 0) | (arr == 1)):
        raise FormatError("bit values must be 0 or 1")
    return arr.astype(np.uint8)

def bits_to_str(bits) -> str:
    return (as_bits(bits) + ord("0")).tobytes().decode("ascii")

def pack(bits) -> PackedBuffer:
    """
    Pack bits MSB-first into bytes; trailing bits of the last byte are zero.
    The exact bit count is kept alongside, byte length only rounds up.
    """
    b = as_bits(bits)
    data = np.packbits(b, bitorder="big").tobytes() if b.size else b""
    return PackedBuffer(bit_count=int(b.size), data=data)

def unpack(buf: PackedBuffer) -> np.ndarray:
    """
    Unpack exactly buf.bit_count bits (MSB-first); padding is dropped.
    """
    nbits = buf.bit_count
    if nbits < 0:
        raise FormatError(f"negative bit count: {nbits}")
    expected = (nbits + 7) // 8
    if len(buf.data) != expected:
        raise FormatError(
            f"bit count {nbits} needs {expected} bytes, got {len(buf.data)}"
        )
    if nbits == 0:
        return np.zeros(0, dtype=np.uint8)
    raw = np.frombuffer(buf.data, dtype=np.uint8)
    return np.unpackbits(raw, count=nbits, bitorder="big")
