"""
Canonical grouping of a deck prior to packing.

Cards held in 3, 2 or 1 copies are grouped by (set, faction) so the packer
writes the set and faction once per group instead of once per card. All
remaining cards are written individually with their count.

The produced structure depends only on the multiset of entries, never on
their order in the deck.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from deckcodes.models.card import CardCount, CardIdentifier
from deckcodes.models.factions import INITIAL_VERSION
from deckcodes.models.failure import InvalidDeckError
from deckcodes.services.varint import MAX_VARINT_VALUE

# Section order on the wire
FIXED_COUNTS = (3, 2, 1)


@dataclass(frozen=True, slots=True)
class CardGroup:
    """
    Cards sharing a set and faction, all held in the same count.

    Attributes:
        set: Shared set number
        faction: Shared faction id
        numbers: Card numbers, ascending
    """

    set: int
    faction: int
    numbers: tuple[int, ...]

    def first_card(self) -> CardIdentifier:
        """Lowest card in the group."""
        return CardIdentifier(set=self.set, faction=self.faction, number=self.numbers[0])

    def __len__(self) -> int:
        return len(self.numbers)


@dataclass(frozen=True, slots=True)
class CanonicalDeck:
    """
    A deck in canonical packing order.

    Attributes:
        sections: Sorted groups per fixed count, keyed in FIXED_COUNTS order
        rest: Entries with any other count, sorted by (count, card)
        version: Header version needed to represent every card
    """

    sections: tuple[tuple[CardGroup, ...], ...]
    rest: tuple[CardCount, ...]
    version: int


def bucket_by_count(
    entries: Iterable[CardCount],
) -> tuple[dict[int, list[CardCount]], list[CardCount]]:
    """
    Split entries into fixed-count buckets and the remainder.

    Returns:
        ({3: [...], 2: [...], 1: [...]}, other_entries)

    Raises:
        InvalidDeckError: If a count is below 1 or too large to pack
    """
    buckets: dict[int, list[CardCount]] = {count: [] for count in FIXED_COUNTS}
    other: list[CardCount] = []

    for entry in entries:
        if entry.count < 1:
            raise InvalidDeckError(
                "Deck contains a card with a count below 1.",
                detail=f"{entry.card.code} x {entry.count}",
            )
        if entry.count > MAX_VARINT_VALUE:
            raise InvalidDeckError(
                "Deck contains a card count too large to encode.",
                detail=f"{entry.card.code} x {entry.count}",
            )
        if entry.count in buckets:
            buckets[entry.count].append(entry)
        else:
            other.append(entry)

    return buckets, other


def group_by_set_and_faction(entries: Iterable[CardCount]) -> list[CardGroup]:
    """
    Group entries by (set, faction) and sort the result canonically.

    Groups are ordered by size, then by their lowest card. Numbers inside a
    group are ascending.
    """
    numbers_by_key: dict[tuple[int, int], list[int]] = {}
    for entry in entries:
        key = (entry.card.set, entry.card.faction)
        numbers_by_key.setdefault(key, []).append(entry.card.number)

    groups = [
        CardGroup(set=set_number, faction=faction, numbers=tuple(sorted(numbers)))
        for (set_number, faction), numbers in numbers_by_key.items()
    ]
    groups.sort(key=lambda group: (len(group), group.first_card()))
    return groups


def sort_rest(entries: Iterable[CardCount]) -> list[CardCount]:
    """Order non-grouped entries by count, then by card."""
    return sorted(entries, key=lambda entry: (entry.count, entry.card))


def canonicalize(entries: Iterable[CardCount]) -> CanonicalDeck:
    """
    Produce the canonical packing structure for a collection of entries.

    Raises:
        InvalidDeckError: If any entry has a count below 1 or too large to pack
    """
    entries = list(entries)
    buckets, other = bucket_by_count(entries)

    return CanonicalDeck(
        sections=tuple(tuple(group_by_set_and_faction(buckets[count])) for count in FIXED_COUNTS),
        rest=tuple(sort_rest(other)),
        version=max((entry.card.min_version for entry in entries), default=INITIAL_VERSION),
    )
