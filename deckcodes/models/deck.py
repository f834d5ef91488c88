from collections import Counter
from collections.abc import Iterable, Iterator

from deckcodes.models.card import CardCount
from deckcodes.models.factions import INITIAL_VERSION


class Deck:
    """
    An ordered collection of CardCount entries.

    Entry order carries no meaning for encoding. Entries referring to the
    same card are kept as separate entries; nothing is merged on insert.

    Two decks compare equal when they hold the same entries regardless of
    order.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, entries: Iterable[CardCount] | None = None) -> None:
        self._entries: list[CardCount] = list(entries) if entries else []

    @classmethod
    def from_entries(cls, entries: Iterable[CardCount]) -> "Deck":
        """Create a deck from already-validated entries."""
        return cls(entries)

    def append(self, entry: CardCount) -> None:
        """Add an entry to the end of the deck."""
        self._entries.append(entry)

    def add_from_code(self, code: str, count: int) -> None:
        """
        Parse a card code and add it with the given count.

        Raises:
            InvalidCardError: If the code is malformed or count is below 1
        """
        self.append(CardCount.from_data(code, count))

    @property
    def entries(self) -> tuple[CardCount, ...]:
        """Read-only view of the entries, in insertion order."""
        return tuple(self._entries)

    def total_cards(self) -> int:
        """Total number of cards (counting copies)."""
        return sum(entry.count for entry in self._entries)

    def min_version(self) -> int:
        """Lowest protocol version able to represent every card in the deck."""
        return max(
            (entry.card.min_version for entry in self._entries),
            default=INITIAL_VERSION,
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CardCount]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return Counter(self._entries) == Counter(other._entries)

    def __repr__(self) -> str:
        inner = ", ".join(f"{e.card.code}:{e.count}" for e in self._entries)
        return f"Deck([{inner}])"
