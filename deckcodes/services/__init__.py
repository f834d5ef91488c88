"""
deckcodes services.

Canonical grouping, varint packing and the deck code encoder/decoder.
"""

from deckcodes.services.deck_codec import (
    decode,
    decode_bytes,
    encode,
    encode_bytes,
    peek_version,
)
from deckcodes.services.grouping import (
    FIXED_COUNTS,
    CanonicalDeck,
    CardGroup,
    bucket_by_count,
    canonicalize,
    group_by_set_and_faction,
    sort_rest,
)
from deckcodes.services.varint import (
    MAX_VARINT_BYTES,
    MAX_VARINT_VALUE,
    encode_varint,
    read_varint,
    write_varint,
)

__all__ = [
    "FIXED_COUNTS",
    "MAX_VARINT_BYTES",
    "MAX_VARINT_VALUE",
    "CanonicalDeck",
    "CardGroup",
    "bucket_by_count",
    "canonicalize",
    "decode",
    "decode_bytes",
    "encode",
    "encode_bytes",
    "encode_varint",
    "group_by_set_and_faction",
    "peek_version",
    "read_varint",
    "sort_rest",
    "write_varint",
]
