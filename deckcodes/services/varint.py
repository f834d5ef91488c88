"""
Unsigned LEB128 varints.

Seven payload bits per byte, least-significant group first. The high bit
(0x80) is set on every byte except the last.
"""

from typing import BinaryIO

from deckcodes.models.failure import VarintDecodeError

CONTINUATION_BIT = 0x80
PAYLOAD_MASK = 0x7F

# Ten bytes hold any unsigned 64-bit value
MAX_VARINT_BYTES = 10
MAX_VARINT_VALUE = (1 << 64) - 1


def encode_varint(value: int) -> bytes:
    """
    Encode a non-negative integer as an unsigned varint.

    Raises:
        ValueError: If value is negative or exceeds MAX_VARINT_VALUE
    """
    if value < 0 or value > MAX_VARINT_VALUE:
        raise ValueError(f"varint out of range: {value}")

    out = bytearray()
    while True:
        byte = value & PAYLOAD_MASK
        value >>= 7
        if value == 0:
            out.append(byte)
            return bytes(out)
        out.append(byte | CONTINUATION_BIT)


def write_varint(stream: BinaryIO, value: int) -> None:
    """Append a varint to a writable byte stream."""
    stream.write(encode_varint(value))


def read_varint(stream: BinaryIO) -> int:
    """
    Read one varint from a byte stream.

    Raises:
        VarintDecodeError: If the stream ends before the terminal byte, or
            the varint runs longer than MAX_VARINT_BYTES
    """
    result = 0
    shift = 0
    for _ in range(MAX_VARINT_BYTES):
        chunk = stream.read(1)
        if not chunk:
            raise VarintDecodeError(
                "Deck code ended unexpectedly.",
                detail="Byte stream ended inside a varint",
            )
        byte = chunk[0]
        result |= (byte & PAYLOAD_MASK) << shift
        if not byte & CONTINUATION_BIT:
            if result > MAX_VARINT_VALUE:
                raise VarintDecodeError(
                    "Deck code contains a malformed number.",
                    detail="Varint exceeds 64 bits",
                )
            return result
        shift += 7

    raise VarintDecodeError(
        "Deck code contains a malformed number.",
        detail=f"Varint longer than {MAX_VARINT_BYTES} bytes",
    )
