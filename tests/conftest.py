from collections.abc import Callable

import pytest

from deckcodes.models.card import CardCount
from deckcodes.models.deck import Deck

REGRESSION_CODE = "CEBAIAIFB4WDANQIAEAQGDAUDAQSIJZUAIAQCAIEAEAQKBIA"

REGRESSION_ENTRIES = [
    ("01SI015", 3),
    ("01SI044", 3),
    ("01SI048", 3),
    ("01SI054", 3),
    ("01FR003", 3),
    ("01FR012", 3),
    ("01FR020", 3),
    ("01FR024", 3),
    ("01FR033", 3),
    ("01FR036", 3),
    ("01FR039", 3),
    ("01FR052", 3),
    ("01SI005", 2),
    ("01FR004", 2),
]


def build_deck(*entries: tuple[str, int]) -> Deck:
    """Build a deck from (code, count) pairs."""
    return Deck.from_entries(CardCount.from_data(code, count) for code, count in entries)


@pytest.fixture
def make_deck() -> Callable[..., Deck]:
    """Factory building a deck from (code, count) pairs."""
    return build_deck


@pytest.fixture
def regression_deck() -> Deck:
    """The Shadow Isles / Freljord deck behind REGRESSION_CODE."""
    return build_deck(*REGRESSION_ENTRIES)


@pytest.fixture
def regression_code() -> str:
    """Recorded deck code for regression_deck."""
    return REGRESSION_CODE


@pytest.fixture
def sample_decklist() -> str:
    """Sample decklist text for testing."""
    return """# Shadow Isles / Freljord
3:01SI015
3:01FR003

2:01SI005
1:01DE002"""
