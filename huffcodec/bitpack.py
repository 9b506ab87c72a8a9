class BitWriter:
    def __init__(self) -> None:
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self._total = 0

    @property
    def nbits(self) -> int:
        """Number of bits written so far, not counting padding."""
        return self._total

    def write_bit(self, bit: int) -> None:
        self._cur = (self._cur << 1) | (bit & 1)
        self._nbits += 1
        self._total += 1
        if self._nbits == 8:
            self._buf.append(self._cur)
            self._cur = 0
            self._nbits = 0

    def write_code(self, code: int, length: int) -> None:
        """Write 'length' bits of code (MSB-first)."""
        for i in range(length - 1, -1, -1):
            self.write_bit((code >> i) & 1)

    def write_bits(self, bits: str) -> None:
        """Write a bit string such as "0110"."""
        for c in bits:
            assert c in "01", f"Invalid bit {c!r} in {bits!r}"
            self.write_bit(1 if c == "1" else 0)

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)


class BitReader:
    """Read the first `nbits` bits of a packed buffer, MSB-first.

    Bits past `nbits` are padding and are never returned.
    """

    def __init__(self, data: bytes, nbits: int | None = None) -> None:
        self._data = data
        self._limit = 8 * len(data) if nbits is None else nbits
        assert 0 <= self._limit <= 8 * len(data), (
            f"nbits={self._limit} does not fit {len(data)} bytes"
        )
        self._pos = 0

    @property
    def remaining(self) -> int:
        return self._limit - self._pos

    def read_bit(self) -> int:
        if self._pos >= self._limit:
            raise EOFError("Unexpected end of bitstream")
        byte_i, bit_i = divmod(self._pos, 8)
        self._pos += 1
        return (self._data[byte_i] >> (7 - bit_i)) & 1

    def __iter__(self):
        while self.remaining > 0:
            yield self.read_bit()


def bits_to_str(packed: bytes, bit_length: int) -> str:
    bits = "".join(format(b, "08b") for b in packed)
    return bits[:bit_length]


def str_to_bits(bits: str) -> tuple[bytes, int]:
    w = BitWriter()
    w.write_bits(bits)
    return w.finish(), w.nbits
