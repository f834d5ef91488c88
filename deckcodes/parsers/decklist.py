"""
Parser for plain-text decklists.

Decklist format:
    <count>:<card code>

Example:
    3:01SI015
    2:01FR004

Blank lines and lines starting with '#' are ignored.
"""

import re

from deckcodes.models.card import CardCount
from deckcodes.models.deck import Deck
from deckcodes.models.failure import InvalidCardError

# Pattern: "3:01SI015" (whitespace around either side tolerated)
# Groups: (count, code)
DECKLIST_LINE_PATTERN = re.compile(r"^(-?\d+)\s*:\s*(\S+)$")

COMMENT_PREFIX = "#"


def parse_decklist(text: str) -> Deck:
    """
    Parse decklist text into a Deck.

    Args:
        text: One "count:code" entry per line

    Returns:
        Deck with one entry per line, in line order. Empty deck if input is
        empty/whitespace.

    Raises:
        InvalidCardError: If a line is malformed, names an unknown card
            code, or has a count below 1. The detail names the line.
    """
    deck = Deck()
    if not text or not text.strip():
        return deck

    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()

        if not line or line.startswith(COMMENT_PREFIX):
            continue

        match = DECKLIST_LINE_PATTERN.match(line)
        if match is None:
            raise InvalidCardError(
                "Decklist lines must look like 'count:code'.",
                detail=f"Line {line_number}: {line!r}",
            )

        count, code = match.groups()
        try:
            deck.add_from_code(code, int(count))
        except InvalidCardError as e:
            raise InvalidCardError(e.message, detail=f"Line {line_number}: {e.detail}") from e

    return deck


def format_decklist(deck: Deck) -> str:
    """Render a deck as decklist text, one line per entry in deck order."""
    return "\n".join(_format_entry(entry) for entry in deck)


def _format_entry(entry: CardCount) -> str:
    """Format a single decklist line."""
    return f"{entry.count}:{entry.card.code}"
