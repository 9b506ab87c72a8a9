import fire  # noqa

from huffcodec.huffman import HuffmanCode
from huffcodec.wire import dump_payload


def main(in_file: str, sample: str | None = None, verbose: bool = False):
    with open(in_file, "rb") as f:
        data = f.read()

    if sample is not None:
        with open(sample, "rb") as f:
            sample_data = f.read()
    else:
        sample_data = data

    code = HuffmanCode(sample_data, verbose=verbose)

    packed, bit_length = code.encode(data)
    decoded: bytes = code.decode(packed, bit_length)

    print("\nDecoding process:")

    if data == decoded:
        print("Data successfully encoded and decoded!")
        print("Alphabet size:", len(code.alphabet))
        print("Data length: ", len(data), "symbols")
        print(f"Encoded length: {bit_length} bits = {bit_length / 8:.2f} bytes")  # noqa
        print("Payload size:", len(dump_payload(packed, bit_length)), "bytes")
        if bit_length > 0:
            orig_bits = len(data) * 8
            print(f"Compression rate: {orig_bits / bit_length:.2f}x")
    else:
        print("Error: decoded data does not match original!")
        print(f"Original data: {len(data)} {data[:20]!r}...")
        print(f"Decoded data:  {len(decoded)} {decoded[:20]!r}...")
        raise RuntimeError(
            f"Decoded data does not match original! {data!r} != {decoded!r}"
        )


if __name__ == "__main__":
    fire.Fire(main)
