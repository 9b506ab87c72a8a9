from huffcodec.abc import AlphabetType, FreqTableType
from huffcodec.errors import EmptyInput


def count_frequencies(sample: bytes) -> FreqTableType:
    # memoryview rejects ints and str; iterating bytes yields unsigned ints
    data = bytes(memoryview(sample))
    if len(data) == 0:
        raise EmptyInput()

    A: AlphabetType = sorted(set(data))
    return {a: data.count(a) for a in A}
