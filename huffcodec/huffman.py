from typing import Any

import tqdm  # noqa

from huffcodec.abc import AlphabetType, CodebookType, Compressor, FreqTableType
from huffcodec.bitpack import BitReader, BitWriter, bits_to_str, str_to_bits
from huffcodec.codebook import assign_codes
from huffcodec.errors import MalformedPayload, UnknownSymbol
from huffcodec.frequency import count_frequencies
from huffcodec.tree import Internal, Leaf, Tree, build_tree


class HuffmanCode(object):
    """A Huffman code built from one sample buffer.

    The instance owns its tree and codebook; both are computed once here and
    never change afterwards, so independent instances cannot interfere.
    """

    def __init__(self, sample: bytes, verbose: bool = False) -> None:
        self._build(count_frequencies(sample), verbose)

    @classmethod
    def from_frequencies(
        cls, freqs: FreqTableType, verbose: bool = False
    ) -> "HuffmanCode":
        code = cls.__new__(cls)
        code._build(dict(freqs), verbose)
        return code

    def _build(self, freqs: FreqTableType, verbose: bool) -> None:
        for s in freqs:
            if not 0 <= s <= 255:
                raise ValueError(f"Symbol out of byte range: {s}")

        self.verbose = verbose
        self._freqs: FreqTableType = {s: freqs[s] for s in sorted(freqs)}
        self._tree: Tree = build_tree(self._freqs)
        self._codes: CodebookType = assign_codes(self._tree)
        # symbol -> (code as int, code length) for the bit writer
        self._table: dict[int, tuple[int, int]] = {
            s: (int(c, 2), len(c)) for s, c in self._codes.items()
        }
        self._bit_length = 0

        assert set(self._codes) == set(self._freqs)

        if self.verbose:
            print("Alphabet:", self.alphabet)
            print("Frequency table:", self._freqs)
            print("Codebook:", self._codes)

    @property
    def alphabet(self) -> AlphabetType:
        return list(self._freqs)

    @property
    def frequencies(self) -> FreqTableType:
        return dict(self._freqs)

    @property
    def codebook(self) -> CodebookType:
        return dict(self._codes)

    @property
    def tree(self) -> Tree:
        return self._tree

    def bit_length(self) -> int:
        """Number of meaningful bits produced by the last encode() call."""
        return self._bit_length

    def encode(self, data: bytes) -> tuple[bytes, int]:
        writer = BitWriter()
        data = bytes(memoryview(data))
        for s in tqdm.tqdm(data, desc="Encoding", disable=not self.verbose):  # noqa
            entry = self._table.get(s)
            if entry is None:
                raise UnknownSymbol(s)
            writer.write_code(*entry)

        bit_length = writer.nbits
        packed = writer.finish()
        self._bit_length = bit_length
        return packed, bit_length

    def decode(self, packed: bytes, bit_length: int) -> bytes:
        packed = bytes(memoryview(packed))
        if bit_length < 0:
            raise MalformedPayload(f"Negative bit length: {bit_length}")
        if bit_length > 8 * len(packed):
            raise MalformedPayload(
                f"Bit length {bit_length} exceeds the {8 * len(packed)} bits available"  # noqa
            )

        root = self._tree
        node = root
        reader = BitReader(packed, bit_length)
        decoded = bytearray()

        bits = tqdm.tqdm(reader, total=bit_length, desc="Decoding", disable=not self.verbose)  # noqa
        for i, bit in enumerate(bits):
            match node:
                case Leaf(symbol=s):
                    # Single-symbol code: the tree is one leaf and every bit is 0
                    if bit != 0:
                        raise MalformedPayload(f"Unexpected 1 bit at position {i}")  # noqa
                    decoded.append(s)
                    continue
                case Internal(left=left, right=right):
                    node = right if bit else left

            if isinstance(node, Leaf):
                decoded.append(node.symbol)
                node = root

        if node is not root:
            raise MalformedPayload(
                f"Bit stream ends inside a code after {bit_length} bits"
            )

        return bytes(decoded)


def construct(sample: bytes) -> HuffmanCode:
    return HuffmanCode(sample)


def encode(code: HuffmanCode, data: bytes) -> tuple[bytes, int]:
    return code.encode(data)


def decode(code: HuffmanCode, packed: bytes, bit_length: int) -> bytes:
    return code.decode(packed, bit_length)


def bit_length(code: HuffmanCode) -> int:
    return code.bit_length()


class Huffman(Compressor):
    """One-shot compressor: the code is built from the data being encoded.

    The frequency table travels in "meta" so decode() can rebuild the exact
    same tree.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def encode(self, data: bytes) -> dict[str, Any]:
        assert type(data) is bytes
        if len(data) == 0:
            return {"data": "", "meta": {"length": 0}}

        code = HuffmanCode(data, verbose=self.verbose)
        packed, n = code.encode(data)
        A: AlphabetType = code.alphabet
        freqs = code.frequencies

        meta: dict[str, Any] = {
            "algorithm": "huffman",
            "A": A,
            "F": [freqs[a] for a in A],
            "length": len(data),
            "bit_length": n,
        }

        return {"data": bits_to_str(packed, n), "meta": meta}

    def decode(self, encoded: dict[str, Any]) -> bytes:
        meta = encoded["meta"]

        length: int = meta["length"]
        if length == 0:
            return b""

        if meta.get("algorithm") != "huffman":
            raise MalformedPayload(f"Not a Huffman payload: {meta.get('algorithm')!r}")  # noqa

        bits: str = encoded["data"]
        if len(bits) != meta["bit_length"]:
            raise MalformedPayload(
                f"Bit string has {len(bits)} bits, expected {meta['bit_length']}"
            )
        if set(bits) - {"0", "1"}:
            raise MalformedPayload("Bit string may only contain '0' and '1'")

        A: AlphabetType = meta["A"]
        F: list[int] = meta["F"]
        assert len(A) == len(F), f"len(A)={len(A)} != len(F)={len(F)}"

        code = HuffmanCode.from_frequencies(dict(zip(A, F)), verbose=self.verbose)
        packed, n = str_to_bits(bits)
        decoded = code.decode(packed, n)

        if len(decoded) != length:
            raise MalformedPayload(f"Decoded {len(decoded)} bytes, expected {length}")  # noqa
        return decoded
