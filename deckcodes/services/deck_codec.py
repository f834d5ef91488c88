"""
Deck code encoder and decoder.

Wire layout (after base-32 decoding):

    header byte      : FORMAT in the high nibble, version in the low nibble
    section(count=3) : varint(group_count), then per group
                       varint(size) varint(set) varint(faction) size x varint(number)
    section(count=2) : same shape
    section(count=1) : same shape
    trailer          : until end of buffer,
                       varint(count) varint(set) varint(faction) varint(number)

Tokens are RFC 4648 base-32 with the padding stripped.
"""

import base64
import binascii
import io
import logging

from deckcodes.models.card import CardCount, CardIdentifier
from deckcodes.models.deck import Deck
from deckcodes.models.factions import FORMAT, MAX_KNOWN_VERSION
from deckcodes.models.failure import DecodeError, VersionError
from deckcodes.services.grouping import FIXED_COUNTS, canonicalize
from deckcodes.services.varint import read_varint, write_varint

logger = logging.getLogger(__name__)

BASE32_BLOCK = 8
PADDING = "="


def encode(deck: Deck) -> str:
    """
    Encode a deck as a base-32 deck code.

    Decks holding the same entries in any order produce the same code.

    Raises:
        InvalidDeckError: If an entry's count is below 1
    """
    return _b32encode(encode_bytes(deck))


def decode(code: str) -> Deck:
    """
    Decode a deck code into a Deck.

    Entries come back in wire order, not in the order they were encoded.

    Raises:
        DecodeError: Not unpadded base-32, or no bytes
        VersionError: Code needs a newer protocol version
        VarintDecodeError: Code is truncated
        InvalidCardError: Code references an unknown faction or a zero count
    """
    return decode_bytes(_b32decode(code))


def peek_version(code: str) -> int:
    """
    Read the protocol version from a deck code's header without decoding
    the cards.

    Raises:
        DecodeError: Not unpadded base-32, or no bytes
    """
    data = _b32decode(code)
    if not data:
        raise DecodeError(
            "Deck code is empty.",
            detail="No bytes after base-32 decoding",
        )
    return data[0] & 0x0F


def encode_bytes(deck: Deck) -> bytes:
    """Pack a deck into its binary form (header plus sections)."""
    canonical = canonicalize(deck)
    stream = io.BytesIO()

    stream.write(bytes([FORMAT << 4 | canonical.version]))

    for groups in canonical.sections:
        write_varint(stream, len(groups))
        for group in groups:
            write_varint(stream, len(group))
            write_varint(stream, group.set)
            write_varint(stream, group.faction)
            for number in group.numbers:
                write_varint(stream, number)

    for entry in canonical.rest:
        write_varint(stream, entry.count)
        write_varint(stream, entry.card.set)
        write_varint(stream, entry.card.faction)
        write_varint(stream, entry.card.number)

    data = stream.getvalue()
    logger.debug(
        "Packed %d entries into %d bytes at version %d",
        len(deck),
        len(data),
        canonical.version,
    )
    return data


def decode_bytes(data: bytes) -> Deck:
    """Unpack the binary form of a deck code."""
    if not data:
        raise DecodeError(
            "Deck code is empty.",
            detail="No bytes after base-32 decoding",
        )

    header = data[0]
    _format = header >> 4
    version = header & 0x0F
    if version > MAX_KNOWN_VERSION:
        raise VersionError(version=version, max_version=MAX_KNOWN_VERSION)

    stream = io.BytesIO(data)
    stream.seek(1)
    entries: list[CardCount] = []

    for count in FIXED_COUNTS:
        group_count = read_varint(stream)
        for _ in range(group_count):
            size = read_varint(stream)
            set_number = read_varint(stream)
            faction = read_varint(stream)
            for _ in range(size):
                number = read_varint(stream)
                entries.append(
                    CardCount(
                        card=CardIdentifier(set=set_number, faction=faction, number=number),
                        count=count,
                    )
                )

    while stream.tell() < len(data):
        count = read_varint(stream)
        set_number = read_varint(stream)
        faction = read_varint(stream)
        number = read_varint(stream)
        entries.append(
            CardCount(
                card=CardIdentifier(set=set_number, faction=faction, number=number),
                count=count,
            )
        )

    logger.debug("Unpacked %d entries from version %d code", len(entries), version)
    return Deck.from_entries(entries)


def _b32encode(data: bytes) -> str:
    return base64.b32encode(data).decode("ascii").rstrip(PADDING)


def _b32decode(code: str) -> bytes:
    """
    Decode unpadded base-32 text.

    Only the canonical spelling of a byte string is accepted: no padding,
    upper-case alphabet, and unused trailing bits set to zero.
    """
    if PADDING in code:
        raise DecodeError(
            "Deck code is not valid base-32.",
            detail="Padding characters are not allowed",
        )

    padded = code + PADDING * (-len(code) % BASE32_BLOCK)
    try:
        data = base64.b32decode(padded)
    except (binascii.Error, ValueError) as e:
        raise DecodeError("Deck code is not valid base-32.", detail=str(e)) from e

    if _b32encode(data) != code:
        raise DecodeError(
            "Deck code is not valid base-32.",
            detail="Non-canonical trailing bits or length",
        )

    return data
