class HuffmanError(ValueError):
    """Base class for every codec failure."""


class InvalidInput(HuffmanError):
    pass


class UnknownSymbol(HuffmanError):
    def __init__(self, symbol: int):
        super().__init__(f"symbol {symbol!r} has no code in the table")
        self.symbol = symbol


class InvalidCode(HuffmanError):
    def __init__(self, position: int, msg: str = "invalid Huffman code (corrupt stream)"):
        super().__init__(f"{msg} at bit {position}")
        self.position = position


class IncompleteDecode(HuffmanError):
    """
    Bit sequence ended in the middle of a code.
    The symbols decoded before the dangling bits are kept in `partial`.
    """
    def __init__(self, partial: bytes, pending_bits: int):
        super().__init__(f"bitstream ends mid-code ({pending_bits} dangling bits)")
        self.partial = partial
        self.pending_bits = pending_bits


class MalformedTree(HuffmanError):
    pass


class FormatError(HuffmanError):
    pass
