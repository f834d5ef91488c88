import re
from dataclasses import dataclass

from deckcodes.models.factions import faction_code, faction_id, faction_version
from deckcodes.models.failure import InvalidCardError

# Pattern: "01SI015"
# Groups: (set, faction_code, number)
CARD_CODE_PATTERN = re.compile(r"^([0-9]{2})([A-Z]{2})([0-9]{3})$")

CARD_CODE_LENGTH = 7

# Largest values that fit the two- and three-digit code fields
MAX_SET = 99
MAX_NUMBER = 999


@dataclass(frozen=True, order=True, slots=True)
class CardIdentifier:
    """
    A card, identified by the set it was printed in, its faction and its
    number within that set/faction.

    Ordered lexicographically on (set, faction, number).

    Attributes:
        set: Set number (e.g., 1 for "01SI015")
        faction: Faction wire id (e.g., 5 for "SI")
        number: Card number (e.g., 15 for "01SI015")
    """

    set: int
    faction: int
    number: int

    def __post_init__(self) -> None:
        if not 0 <= self.set <= MAX_SET or not 0 <= self.number <= MAX_NUMBER:
            raise InvalidCardError(
                f"Card set must be 0-{MAX_SET} and number 0-{MAX_NUMBER}.",
                detail=f"set={self.set}, number={self.number}",
            )
        if faction_code(self.faction) is None:
            raise InvalidCardError(
                "Unknown faction.",
                detail=f"faction id {self.faction}",
            )

    @classmethod
    def parse(cls, code: str) -> "CardIdentifier":
        """
        Parse a seven-character card code.

        Args:
            code: Two-digit set, two-letter faction code, three-digit number

        Returns:
            The identified card

        Raises:
            InvalidCardError: Wrong length, non-numeric set/number, or
                unknown faction code
        """
        if len(code) != CARD_CODE_LENGTH:
            raise InvalidCardError(
                "Card codes are exactly 7 characters.",
                detail=f"Got {code!r}",
            )

        match = CARD_CODE_PATTERN.match(code)
        if match is None:
            raise InvalidCardError(
                "Malformed card code.",
                detail=f"Got {code!r}",
            )

        set_digits, code_letters, number_digits = match.groups()
        faction = faction_id(code_letters)
        if faction is None:
            raise InvalidCardError(
                "Unknown faction code.",
                detail=f"{code_letters!r} in {code!r}",
            )

        return cls(set=int(set_digits), faction=faction, number=int(number_digits))

    @property
    def code(self) -> str:
        """The seven-character card code."""
        return f"{self.set:02d}{faction_code(self.faction)}{self.number:03d}"

    @property
    def min_version(self) -> int:
        """Lowest protocol version that can represent this card."""
        return faction_version(self.faction)

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True, slots=True)
class CardCount:
    """
    A card together with how many copies of it a deck holds.

    Attributes:
        card: The card
        count: Number of copies, at least 1
    """

    card: CardIdentifier
    count: int

    def __post_init__(self) -> None:
        if self.count < 1:
            raise InvalidCardError(
                "Card count must be at least 1.",
                detail=f"{self.card.code} x {self.count}",
            )

    @classmethod
    def from_data(cls, code: str, count: int) -> "CardCount":
        """Build a CardCount from a card code and a count."""
        return cls(card=CardIdentifier.parse(code), count=count)
