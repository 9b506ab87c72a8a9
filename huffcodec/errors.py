class HuffmanError(ValueError):
    """Base class of the failures raised by huffcodec."""


class EmptyInput(HuffmanError):
    """A code cannot be built from a sample with no symbols."""

    def __init__(self, message: str = "cannot build a Huffman code from empty input") -> None:  # noqa
        super().__init__(message)


class UnknownSymbol(HuffmanError):
    """The data to encode holds a byte value the codebook does not know."""

    def __init__(self, symbol: int) -> None:
        super().__init__(f"symbol {symbol} (0x{symbol:02x}) is not in the codebook")  # noqa
        self.symbol = symbol


class MalformedPayload(HuffmanError):
    """The packed bit stream is truncated, corrupt or has a bad bit length."""
