import struct

from huffcodec.errors import MalformedPayload

# Header (big-endian): bit_length(u64), followed by the packed bytes.
# The bit count cannot be recovered from the bytes alone because padding
# bits look like data bits.
HEADER_FMT = ">Q"
HEADER_SIZE = struct.calcsize(HEADER_FMT)


def dump_payload(packed: bytes, bit_length: int) -> bytes:
    if bit_length < 0 or bit_length > 8 * len(packed):
        raise MalformedPayload(
            f"Bit length {bit_length} does not fit {len(packed)} packed bytes"
        )
    return struct.pack(HEADER_FMT, bit_length) + bytes(packed)


def load_payload(blob: bytes) -> tuple[bytes, int]:
    if len(blob) < HEADER_SIZE:
        raise MalformedPayload("Malformed payload: header too short")
    (bit_length,) = struct.unpack(HEADER_FMT, blob[:HEADER_SIZE])
    packed = bytes(blob[HEADER_SIZE:])
    if bit_length > 8 * len(packed):
        raise MalformedPayload(
            f"Header claims {bit_length} bits but only {8 * len(packed)} follow"
        )
    return packed, bit_length
